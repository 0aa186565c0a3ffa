"""
Seam computation and removal.

Seams are shortest paths through the pixel DAG from the virtual source to
the virtual sink. Edge weights are charged on entry: the edge A -> B costs
energy(B), the edges out of SOURCE cost the energy of the first-row pixel
and the edges into the sink are free. Nodes are relaxed in topological
order, so every distance is final before it is propagated.
"""

import logging
import operator
from typing import Dict, List, NamedTuple, Sequence

import torch

from .energy import pixel_energy
from .exceptions import InvalidSeamError, InvariantViolation
from .picture import Picture
from .topological import (HORIZONTAL, SOURCE, VERTICAL, Point, check_direction,
                          forward_neighbors, sink_for, topological_order)

logger = logging.getLogger('seamcarver.seam')


class ShortestPaths(NamedTuple):
    distance: Dict[Point, float]
    predecessor: Dict[Point, Point]
    sink: Point


def _seam_length(picture: Picture, direction: str) -> int:
    return picture.height() if direction == VERTICAL else picture.width()


def shortest_path(picture: Picture, direction: str) -> ShortestPaths:
    """
    Single-source shortest paths from SOURCE to the sink.

    Ties are resolved by strict less-than: the first minimal path found in
    topological order wins and later equal-cost paths never overwrite it.

    Args:
        picture: Source picture
        direction: 'vertical' or 'horizontal'

    Returns:
        Distance and predecessor tables for every pixel and the sink
    """
    check_direction(direction)
    order = topological_order(picture, direction)
    if not order or order.popleft() != SOURCE:
        raise InvariantViolation("Topological order does not start at the source")

    sink = sink_for(picture)
    distance: Dict[Point, float] = {}
    predecessor: Dict[Point, Point] = {}

    # Edges out of the source: the first row/column
    for point in forward_neighbors(picture, SOURCE, direction):
        distance[point] = pixel_energy(picture, point.x, point.y)
        predecessor[point] = SOURCE

    for point in order:
        if point not in distance:
            raise InvariantViolation(f"{point} reached before any of its predecessors")
        cost = distance[point]

        successors = forward_neighbors(picture, point, direction)
        for nxt in successors:
            new_cost = cost + pixel_energy(picture, nxt.x, nxt.y)
            old_cost = distance.get(nxt)
            if old_cost is None or new_cost < old_cost:
                distance[nxt] = new_cost
                predecessor[nxt] = point

        if not successors:
            # Last row/column: reaching the sink is free
            old_cost = distance.get(sink)
            if old_cost is None or cost < old_cost:
                distance[sink] = cost
                predecessor[sink] = point

    return ShortestPaths(distance, predecessor, sink)


def reconstruct_seam(paths: ShortestPaths, length: int, direction: str) -> List[int]:
    """
    Walk predecessor links back from the sink.

    Args:
        paths: Result of shortest_path
        length: Number of pixels in the seam (H for vertical, W for horizontal)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: column index per row
                      for horizontal: row index per column

    Raises:
        InvariantViolation: If a predecessor is missing or the walk does not
            end on the first row/column
    """
    check_direction(direction)
    seam = [0] * length
    cur = paths.sink
    for i in range(length - 1, -1, -1):
        prev = paths.predecessor.get(cur)
        if prev is None or prev == SOURCE:
            raise InvariantViolation(f"No predecessor for {cur} at seam position {i}")
        seam[i] = prev.x if direction == VERTICAL else prev.y
        cur = prev

    if paths.predecessor.get(cur) != SOURCE:
        raise InvariantViolation(f"Seam does not start at the source, stopped at {cur}")
    return seam


def find_seam(picture: Picture, direction: str) -> List[int]:
    """
    Minimum-energy seam of a picture.

    A vertical seam runs from the top row to the bottom row, so it holds one
    column index per row; a horizontal seam holds one row index per column.

    Args:
        picture: Source picture
        direction: 'vertical' (top to bottom) or 'horizontal' (left to right)

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    paths = shortest_path(picture, direction)
    seam = reconstruct_seam(paths, _seam_length(picture, direction), direction)
    logger.debug("Found %s seam of length %d, cost %.3f",
                 direction, len(seam), paths.distance[paths.sink])
    return seam


def find_vertical_seam(picture: Picture) -> List[int]:
    return find_seam(picture, VERTICAL)


def find_horizontal_seam(picture: Picture) -> List[int]:
    return find_seam(picture, HORIZONTAL)


def seam_energy(picture: Picture, seam: Sequence[int], direction: str = VERTICAL) -> float:
    """Total energy of the pixels along a seam."""
    check_direction(direction)
    if direction == VERTICAL:
        return sum(pixel_energy(picture, x, y) for y, x in enumerate(seam))
    return sum(pixel_energy(picture, x, y) for x, y in enumerate(seam))


def validate_seam(picture: Picture, seam: Sequence[int], direction: str) -> None:
    """
    Check that a seam can be removed from a picture.

    Raises:
        InvalidSeamError: If the seam has the wrong length, a non-integer or
            out-of-range index, adjacent indices more than 1 apart, or the
            picture is already 1 pixel wide (vertical) or tall (horizontal)
    """
    check_direction(direction)
    W, H = picture.width(), picture.height()
    length = _seam_length(picture, direction)
    limit = W if direction == VERTICAL else H

    if limit <= 1:
        raise InvalidSeamError(f"Cannot remove a {direction} seam from a {W}x{H} picture")
    if len(seam) != length:
        raise InvalidSeamError(f"Expected {direction} seam of length {length}, got {len(seam)}")

    for i, index in enumerate(seam):
        try:
            index = operator.index(index)
        except TypeError:
            raise InvalidSeamError(
                f"Seam index {index!r} at position {i} is not an integer") from None
        if not 0 <= index < limit:
            raise InvalidSeamError(f"Seam index {index} at position {i} outside [0, {limit})")
        if i > 0 and abs(index - operator.index(seam[i - 1])) > 1:
            raise InvalidSeamError(
                f"Seam indices {seam[i - 1]} and {index} at position {i} are not adjacent")


def remove_seam(picture: Picture, seam: Sequence[int],
                direction: str = VERTICAL) -> Picture:
    """
    Remove a seam from a picture.

    Args:
        picture: Source picture (left untouched)
        seam: Seam indices as returned by find_seam
        direction: 'vertical' or 'horizontal'

    Returns:
        New picture with one column (vertical) or row (horizontal) removed
    """
    validate_seam(picture, seam, direction)
    seam = [operator.index(index) for index in seam]
    image = picture.pixels
    C, H, W = image.shape

    if direction == VERTICAL:
        # Remove one pixel from each row
        carved = torch.zeros(C, H, W - 1, dtype=image.dtype)

        for i in range(H):
            col = seam[i]
            carved[:, i, :col] = image[:, i, :col]
            carved[:, i, col:] = image[:, i, col + 1:]

    else:
        # Remove one pixel from each column
        carved = torch.zeros(C, H - 1, W, dtype=image.dtype)

        for j in range(W):
            row = seam[j]
            carved[:, :row, j] = image[:, :row, j]
            carved[:, row:, j] = image[:, row + 1:, j]

    logger.debug("Removed %s seam: %dx%d -> %dx%d", direction, W, H,
                 carved.shape[2], carved.shape[1])
    return Picture(carved)
