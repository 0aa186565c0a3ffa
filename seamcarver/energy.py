"""
Energy function for seam carving.

The energy of a pixel measures how much it matters visually; low-energy
seams are preferred for removal. We use the dual-gradient energy: the
square root of the summed squared RGB differences between the pixel's
left/right and up/down neighbors. Border pixels get a fixed, large
energy so seams are not attracted to the image edge.
"""

import math

import torch

from .config import Config
from .exceptions import OutOfBoundsError
from .picture import Color, Picture


def _delta(c1: Color, c2: Color) -> int:
    return (c1[0] - c2[0]) ** 2 + (c1[1] - c2[1]) ** 2 + (c1[2] - c2[2]) ** 2


def pixel_energy(picture: Picture, x: int, y: int) -> float:
    """
    Dual-gradient energy of the pixel at column x, row y.

    Args:
        picture: Source picture
        x: Column index
        y: Row index

    Returns:
        Config.BORDER_ENERGY on the border, sqrt(dx + dy) in the interior

    Raises:
        OutOfBoundsError: If (x, y) is outside the picture
    """
    W, H = picture.width(), picture.height()
    if not picture.in_bounds(x, y):
        raise OutOfBoundsError(f"Pixel ({x}, {y}) outside {W}x{H} picture")

    if x == 0 or x == W - 1 or y == 0 or y == H - 1:
        return Config.BORDER_ENERGY

    dx = _delta(picture.color_at(x - 1, y), picture.color_at(x + 1, y))
    dy = _delta(picture.color_at(x, y - 1), picture.color_at(x, y + 1))
    return math.sqrt(dx + dy)


def energy_map(picture: Picture) -> torch.Tensor:
    """
    Materialize pixel_energy for every pixel at once.

    Args:
        picture: Source picture

    Returns:
        Energy map (H, W), identical to pixel_energy at every (x, y)
    """
    pixels = picture.pixels.to(torch.int64)
    _, H, W = pixels.shape

    energy = torch.full((H, W), Config.BORDER_ENERGY, dtype=Config.ENERGY_DTYPE)
    if H < 3 or W < 3:
        # No interior pixels
        return energy

    # Horizontal neighbors (x-1, y) and (x+1, y) of interior pixels
    dx = ((pixels[:, 1:-1, 2:] - pixels[:, 1:-1, :-2]) ** 2).sum(dim=0)
    # Vertical neighbors (x, y-1) and (x, y+1)
    dy = ((pixels[:, 2:, 1:-1] - pixels[:, :-2, 1:-1]) ** 2).sum(dim=0)

    energy[1:-1, 1:-1] = torch.sqrt((dx + dy).to(Config.ENERGY_DTYPE))
    return energy
