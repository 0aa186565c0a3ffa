"""
Content-aware image resizing by seam carving.

Seams are found as shortest paths through the pixel DAG, using the
dual-gradient energy and a topological-order relaxation.
"""

__version__ = "0.1.0"

from .exceptions import SeamCarverError, OutOfBoundsError, InvariantViolation, InvalidSeamError
from .picture import Picture, load_picture, save_picture
from .energy import pixel_energy, energy_map
from .topological import Point, SOURCE, VERTICAL, HORIZONTAL, forward_neighbors, topological_order
from .seam import (shortest_path, reconstruct_seam, find_seam, find_vertical_seam,
                   find_horizontal_seam, seam_energy, validate_seam, remove_seam)
from .carver import SeamCarver
from .logging_config import setup_logging

__all__ = [
    'SeamCarverError',
    'OutOfBoundsError',
    'InvariantViolation',
    'InvalidSeamError',
    'Picture',
    'load_picture',
    'save_picture',
    'pixel_energy',
    'energy_map',
    'Point',
    'SOURCE',
    'VERTICAL',
    'HORIZONTAL',
    'forward_neighbors',
    'topological_order',
    'shortest_path',
    'reconstruct_seam',
    'find_seam',
    'find_vertical_seam',
    'find_horizontal_seam',
    'seam_energy',
    'validate_seam',
    'remove_seam',
    'SeamCarver',
    'setup_logging',
]
