"""
Topological ordering of the seam DAG.

Pixels are nodes of a directed acyclic graph: every pixel points at the
(up to) three adjacent pixels in the next row (vertical seams) or next
column (horizontal seams). A virtual source outside the picture points at
the whole first row/column, so seam finding becomes single-source
shortest path.

The order is built with an iterative depth-first postorder. Large images
would blow through Python's recursion limit with a recursive DFS, so the
traversal keeps its own stack of (node, neighbor iterator) frames.
"""

import logging
from collections import deque
from typing import Deque, Iterator, List, NamedTuple, Set, Tuple

from .picture import Picture

logger = logging.getLogger('seamcarver.topological')

VERTICAL = 'vertical'
HORIZONTAL = 'horizontal'

# Perpendicular offsets, in enumeration order. Tie-breaking depends on it.
OFFSETS = (-1, 0, 1)


class Point(NamedTuple):
    x: int
    y: int


SOURCE = Point(-1, -1)


def sink_for(picture: Picture) -> Point:
    """Virtual sink just past the far corner of the picture."""
    return Point(picture.width(), picture.height())


def check_direction(direction: str) -> None:
    if direction not in (VERTICAL, HORIZONTAL):
        raise ValueError(f"Invalid direction: {direction}")


def forward_neighbors(picture: Picture, point: Point, direction: str) -> List[Point]:
    """
    DAG successors of a point.

    Args:
        picture: Picture defining the grid bounds
        point: SOURCE or an in-bounds pixel
        direction: 'vertical' or 'horizontal'

    Returns:
        For SOURCE, the first row (vertical) or first column (horizontal).
        Otherwise the in-bounds pixels of the next row/column at offsets
        -1, 0, +1, or nothing on the last row/column.
    """
    W, H = picture.width(), picture.height()

    if direction == VERTICAL:
        if point == SOURCE:
            return [Point(x, 0) for x in range(W)]
        if point.y >= H - 1:
            return []
        return [Point(point.x + offset, point.y + 1) for offset in OFFSETS
                if 0 <= point.x + offset < W]

    elif direction == HORIZONTAL:
        if point == SOURCE:
            return [Point(0, y) for y in range(H)]
        if point.x >= W - 1:
            return []
        return [Point(point.x + 1, point.y + offset) for offset in OFFSETS
                if 0 <= point.y + offset < H]

    else:
        raise ValueError(f"Invalid direction: {direction}")


def topological_order(picture: Picture, direction: str) -> Deque[Point]:
    """
    Order SOURCE and every pixel so each node follows all its predecessors.

    Runs a depth-first search from SOURCE with an explicit stack. A node is
    emitted in postorder once all of its successors are done; reversing the
    postorder gives the topological order, with SOURCE at the front.

    Args:
        picture: Picture defining the grid
        direction: 'vertical' or 'horizontal'

    Returns:
        Deque of W*H + 1 points starting with SOURCE
    """
    check_direction(direction)

    postorder: List[Point] = []
    visited: Set[Point] = {SOURCE}
    stack: List[Tuple[Point, Iterator[Point]]] = [
        (SOURCE, iter(forward_neighbors(picture, SOURCE, direction)))
    ]

    while stack:
        node, successors = stack[-1]
        for nxt in successors:
            if nxt not in visited:
                visited.add(nxt)
                stack.append((nxt, iter(forward_neighbors(picture, nxt, direction))))
                break
        else:
            # All successors finished
            stack.pop()
            postorder.append(node)

    postorder.reverse()
    logger.debug("Topological order (%s): %d nodes", direction, len(postorder))
    return deque(postorder)
