"""
Read-only pixel grid access.

A Picture wraps an RGB image stored as a uint8 tensor of shape (3, H, W)
and exposes it through (x, y) = (column, row) addressing. Pictures are
never mutated in place; seam removal builds a new one.
"""

import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
import torch
from PIL import Image

from .exceptions import OutOfBoundsError

logger = logging.getLogger('seamcarver.picture')

Color = Tuple[int, int, int]


class Picture:
    """
    Immutable RGB pixel grid. Pictures compare and hash by pixel content.

    Args:
        pixels: uint8 tensor of shape (3, H, W) with H, W >= 1
    """

    def __init__(self, pixels: torch.Tensor):
        if pixels.dim() != 3 or pixels.shape[0] != 3:
            raise ValueError(f"Expected pixels of shape (3, H, W), got {tuple(pixels.shape)}")
        if pixels.dtype != torch.uint8:
            raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")
        if pixels.shape[1] < 1 or pixels.shape[2] < 1:
            raise ValueError(f"Picture must be at least 1x1, got {pixels.shape[2]}x{pixels.shape[1]}")

        self._pixels = pixels.detach().to('cpu').clone().contiguous()
        # Plain nested lists make per-pixel reads cheap compared to tensor indexing
        self._rows = self._pixels.permute(1, 2, 0).tolist()

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Picture':
        """
        Build a picture from an (H, W, 3) or grayscale (H, W) array.

        Args:
            array: Integer array with values in [0, 255]

        Returns:
            Picture over a copy of the array
        """
        array = np.asarray(array)
        if array.ndim == 2:
            array = np.stack([array] * 3, axis=2)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected array of shape (H, W, 3), got {array.shape}")
        if array.min(initial=0) < 0 or array.max(initial=0) > 255:
            raise ValueError("Channel values must be in [0, 255]")

        pixels = torch.from_numpy(np.ascontiguousarray(array, dtype=np.uint8)).permute(2, 0, 1)
        return cls(pixels)

    @classmethod
    def from_pil(cls, image: Image.Image) -> 'Picture':
        """Convert a Pillow image (any mode) to an RGB picture."""
        return cls.from_array(np.array(image.convert('RGB'), dtype=np.uint8))

    def to_pil(self) -> Image.Image:
        return Image.fromarray(self.to_array())

    def to_array(self) -> np.ndarray:
        """Return an (H, W, 3) uint8 copy of the pixels."""
        return self._pixels.permute(1, 2, 0).numpy().copy()

    @property
    def pixels(self) -> torch.Tensor:
        """A copy of the underlying (3, H, W) tensor."""
        return self._pixels.clone()

    def width(self) -> int:
        return self._pixels.shape[2]

    def height(self) -> int:
        return self._pixels.shape[1]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width() and 0 <= y < self.height()

    def color_at(self, x: int, y: int) -> Color:
        """
        RGB color of the pixel at column x, row y.

        Raises:
            OutOfBoundsError: If (x, y) is outside the picture
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Pixel ({x}, {y}) outside {self.width()}x{self.height()} picture")
        r, g, b = self._rows[y][x]
        return r, g, b

    def __eq__(self, other):
        if not isinstance(other, Picture):
            return NotImplemented
        return torch.equal(self._pixels, other._pixels)

    def __hash__(self):
        # Consistent with __eq__: equal pixels give equal hashes
        return hash((tuple(self._pixels.shape), self._pixels.numpy().tobytes()))

    def __repr__(self):
        return f"Picture(width={self.width()}, height={self.height()})"


def load_picture(path: Union[str, Path]) -> Picture:
    """Load an image file through Pillow as an RGB picture."""
    with Image.open(path) as img:
        picture = Picture.from_pil(img)
    logger.info("Loaded picture %s: %dx%d", Path(path).name, picture.width(), picture.height())
    return picture


def save_picture(picture: Picture, path: Union[str, Path]) -> None:
    """Save a picture through Pillow; the format follows the file suffix."""
    picture.to_pil().save(path)
    logger.info("Saved picture %s: %dx%d", Path(path).name, picture.width(), picture.height())
