"""Shared test fixtures for the seamcarver test suite."""

import itertools
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from seamcarver.energy import pixel_energy
from seamcarver.picture import Picture


def make_picture(rows):
    """Picture from nested lists of (r, g, b) tuples, indexed [y][x]."""
    return Picture.from_array(np.array(rows, dtype=np.uint8))


def make_random_picture(W, H, seed=42):
    """Uniformly random RGB picture."""
    g = torch.Generator().manual_seed(seed)
    pixels = torch.randint(0, 256, (3, H, W), dtype=torch.uint8, generator=g)
    return Picture(pixels)


def make_solid_picture(W, H, color=(0, 0, 0)):
    array = np.zeros((H, W, 3), dtype=np.uint8)
    array[:, :] = color
    return Picture.from_array(array)


def brute_force_min_energy(picture, direction='vertical'):
    """Cheapest 8-connected seam energy, by trying every path."""
    W, H = picture.width(), picture.height()
    length, span = (H, W) if direction == 'vertical' else (W, H)

    def cost(pos, idx):
        if direction == 'vertical':
            return pixel_energy(picture, idx, pos)
        return pixel_energy(picture, pos, idx)

    best = float('inf')
    for start in range(span):
        for steps in itertools.product((-1, 0, 1), repeat=length - 1):
            path = [start]
            for step in steps:
                path.append(path[-1] + step)
            if min(path) < 0 or max(path) >= span:
                continue
            best = min(best, sum(cost(pos, idx) for pos, idx in enumerate(path)))
    return best


def assert_valid_seam(seam, length, span):
    assert len(seam) == length
    assert all(0 <= idx < span for idx in seam), f"Seam out of range: {seam}"
    assert all(abs(a - b) <= 1 for a, b in zip(seam, seam[1:])), f"Seam not connected: {seam}"


@pytest.fixture
def princeton_picture():
    """3x4 picture with hand-checkable interior energies."""
    return make_picture([
        [(255, 101, 51), (255, 101, 153), (255, 101, 255)],
        [(255, 153, 51), (255, 153, 153), (255, 153, 255)],
        [(255, 203, 51), (255, 204, 153), (255, 205, 255)],
        [(255, 255, 51), (255, 255, 153), (255, 255, 255)],
    ])


@pytest.fixture
def white_center_picture():
    """3x3 black picture with a white center pixel."""
    array = np.zeros((3, 3, 3), dtype=np.uint8)
    array[1, 1] = (255, 255, 255)
    return Picture.from_array(array)


@pytest.fixture
def random_picture():
    """Random 8x6 picture."""
    return make_random_picture(8, 6)
