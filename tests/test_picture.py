"""Tests for the pixel grid accessor and Pillow bridge."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from PIL import Image
from seamcarver.exceptions import OutOfBoundsError, SeamCarverError
from seamcarver.picture import Picture, load_picture, save_picture

from conftest import make_random_picture


class TestPicture:
    def test_dimensions(self):
        picture = Picture(torch.zeros(3, 4, 7, dtype=torch.uint8))
        assert picture.width() == 7
        assert picture.height() == 4

    def test_color_at_uses_column_row_addressing(self):
        pixels = torch.zeros(3, 2, 3, dtype=torch.uint8)
        pixels[:, 1, 2] = torch.tensor([10, 20, 30], dtype=torch.uint8)
        picture = Picture(pixels)
        assert picture.color_at(2, 1) == (10, 20, 30)
        assert picture.color_at(1, 1) == (0, 0, 0)

    def test_color_at_returns_plain_ints(self):
        picture = make_random_picture(3, 3)
        assert all(type(c) is int for c in picture.color_at(1, 1))

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 4), (5, 4)])
    def test_out_of_bounds_raises(self, x, y):
        picture = Picture(torch.zeros(3, 4, 5, dtype=torch.uint8))
        with pytest.raises(OutOfBoundsError):
            picture.color_at(x, y)

    def test_out_of_bounds_is_an_index_error(self):
        picture = Picture(torch.zeros(3, 2, 2, dtype=torch.uint8))
        with pytest.raises(IndexError):
            picture.color_at(2, 0)
        with pytest.raises(SeamCarverError):
            picture.color_at(0, 2)

    def test_in_bounds(self):
        picture = Picture(torch.zeros(3, 2, 3, dtype=torch.uint8))
        assert picture.in_bounds(0, 0)
        assert picture.in_bounds(2, 1)
        assert not picture.in_bounds(3, 1)
        assert not picture.in_bounds(2, 2)

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError, match="shape"):
            Picture(torch.zeros(4, 2, 2, dtype=torch.uint8))
        with pytest.raises(ValueError, match="shape"):
            Picture(torch.zeros(2, 2, dtype=torch.uint8))

    def test_rejects_wrong_dtype(self):
        with pytest.raises(ValueError, match="uint8"):
            Picture(torch.zeros(3, 2, 2))

    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="at least 1x1"):
            Picture(torch.zeros(3, 0, 2, dtype=torch.uint8))

    def test_does_not_alias_caller_tensor(self):
        pixels = torch.zeros(3, 2, 2, dtype=torch.uint8)
        picture = Picture(pixels.clone())
        exposed = picture.pixels
        exposed[:, 0, 0] = 255
        assert picture.color_at(0, 0) == (0, 0, 0)

    def test_equality(self):
        assert make_random_picture(4, 3, seed=1) == make_random_picture(4, 3, seed=1)
        assert make_random_picture(4, 3, seed=1) != make_random_picture(4, 3, seed=2)

    def test_hash_follows_equality(self):
        first = make_random_picture(4, 3, seed=1)
        second = make_random_picture(4, 3, seed=1)
        assert hash(first) == hash(second)
        assert len({first, second, make_random_picture(4, 3, seed=2)}) == 2

    def test_same_bytes_different_shape_differ(self):
        wide = Picture(torch.zeros(3, 1, 4, dtype=torch.uint8))
        tall = Picture(torch.zeros(3, 4, 1, dtype=torch.uint8))
        assert wide != tall
        assert len({wide, tall}) == 2


class TestConversions:
    def test_from_array_rgb(self):
        array = np.zeros((2, 3, 3), dtype=np.uint8)
        array[1, 2] = (1, 2, 3)
        picture = Picture.from_array(array)
        assert picture.width() == 3
        assert picture.height() == 2
        assert picture.color_at(2, 1) == (1, 2, 3)

    def test_from_array_grayscale_replicates_channels(self):
        array = np.array([[0, 128], [200, 255]], dtype=np.uint8)
        picture = Picture.from_array(array)
        assert picture.color_at(1, 0) == (128, 128, 128)
        assert picture.color_at(0, 1) == (200, 200, 200)

    def test_from_array_rejects_out_of_range(self):
        with pytest.raises(ValueError, match=r"\[0, 255\]"):
            Picture.from_array(np.full((2, 2, 3), 300))

    def test_array_round_trip(self):
        picture = make_random_picture(5, 4)
        assert Picture.from_array(picture.to_array()) == picture

    def test_from_pil_converts_to_rgb(self):
        image = Image.new("L", (4, 2), 77)
        picture = Picture.from_pil(image)
        assert picture.width() == 4
        assert picture.height() == 2
        assert picture.color_at(3, 1) == (77, 77, 77)

    def test_pil_round_trip(self):
        picture = make_random_picture(6, 5)
        image = picture.to_pil()
        assert image.size == (6, 5)
        assert image.mode == "RGB"
        assert Picture.from_pil(image) == picture

    def test_save_and_load(self, tmp_path):
        picture = make_random_picture(7, 3)
        path = tmp_path / "picture.png"
        save_picture(picture, path)
        assert load_picture(path) == picture
