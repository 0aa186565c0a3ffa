"""
Stateful seam carver over a single picture.
"""

import logging
from typing import List, Sequence

import torch

from .energy import energy_map, pixel_energy
from .picture import Picture
from .seam import find_horizontal_seam, find_vertical_seam, remove_seam
from .topological import HORIZONTAL, VERTICAL

logger = logging.getLogger('seamcarver.carver')


class SeamCarver:
    """
    Find and remove minimum-energy seams from a picture.

    Seam finding is a pure query over the current picture. Seam removal
    replaces the held picture with a smaller one, so calls that mutate must
    be serialized by the caller.

    Args:
        picture: Initial picture
    """

    def __init__(self, picture: Picture):
        self._picture = picture

    def picture(self) -> Picture:
        """Current picture."""
        return self._picture

    def width(self) -> int:
        return self._picture.width()

    def height(self) -> int:
        return self._picture.height()

    def energy(self, x: int, y: int) -> float:
        """Energy of the pixel at column x, row y."""
        return pixel_energy(self._picture, x, y)

    def energy_map(self) -> torch.Tensor:
        return energy_map(self._picture)

    def find_vertical_seam(self) -> List[int]:
        """Top-to-bottom seam: column index for each of the height() rows."""
        return find_vertical_seam(self._picture)

    def find_horizontal_seam(self) -> List[int]:
        """Left-to-right seam: row index for each of the width() columns."""
        return find_horizontal_seam(self._picture)

    def remove_vertical_seam(self, seam: Sequence[int]) -> None:
        self._picture = remove_seam(self._picture, seam, direction=VERTICAL)

    def remove_horizontal_seam(self, seam: Sequence[int]) -> None:
        self._picture = remove_seam(self._picture, seam, direction=HORIZONTAL)

    def __repr__(self):
        return f"SeamCarver(width={self.width()}, height={self.height()})"
