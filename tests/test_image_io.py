"""
Tests for image decoding and encoding helpers.
"""

import pytest
import numpy as np
import cv2

from formula_normalizer.exceptions import DecodeFailureError, InvalidDimensionsError
from formula_normalizer.utils.image_io import is_supported_image, load_image, save_image, to_grayscale


@pytest.mark.parametrize("name,expected", [
    ("formula.png", True),
    ("formula.JPG", True),
    ("formula.Jpeg", True),
    ("formula.gif", False),
    ("formula.png.txt", False),
    ("png", False),
])
def test_is_supported_image(name, expected):
    assert is_supported_image(name) is expected


class TestToGrayscale:
    """Test suite for grayscale conversion."""

    def test_gray_passthrough_is_copy(self, formula_image):
        gray = to_grayscale(formula_image)

        assert np.array_equal(gray, formula_image)
        assert gray is not formula_image

    def test_bgr_and_bgra(self, formula_image):
        bgr = cv2.cvtColor(formula_image, cv2.COLOR_GRAY2BGR)
        bgra = cv2.cvtColor(formula_image, cv2.COLOR_GRAY2BGRA)

        assert np.array_equal(to_grayscale(bgr), formula_image)
        assert np.array_equal(to_grayscale(bgra), formula_image)

    @pytest.mark.parametrize("bgr,expected", [
        ((0, 0, 255), 54),     # red:   255 * 0.2126
        ((0, 255, 0), 182),    # green: 255 * 0.7152
        ((255, 0, 0), 18),     # blue:  255 * 0.0722
        ((255, 255, 255), 255),
        ((10, 20, 30), 20),    # (722*10 + 7152*20 + 2126*30) // 10000
    ])
    def test_rec709_luma_weights(self, bgr, expected):
        image = np.zeros((2, 3, 3), dtype=np.uint8)
        image[:, :] = bgr

        gray = to_grayscale(image)

        assert gray.dtype == np.uint8
        assert np.all(gray == expected)

    def test_alpha_channel_is_ignored(self):
        image = np.zeros((2, 2, 4), dtype=np.uint8)
        image[:, :] = (0, 0, 255, 0)

        assert np.all(to_grayscale(image) == 54)

    def test_red_ink_stays_dark(self):
        """Pure red strokes fall below the dark threshold of 128 after conversion."""
        image = np.full((4, 4, 3), 255, dtype=np.uint8)
        image[1:3, 1:3] = (0, 0, 255)

        gray = to_grayscale(image)

        assert gray[1, 1] == 54
        assert gray[0, 0] == 255

    def test_single_channel_3d(self, formula_image):
        assert np.array_equal(to_grayscale(formula_image[:, :, np.newaxis]), formula_image)

    def test_sixteen_bit(self):
        image = np.array([[0, 257 * 128, 65535]], dtype=np.uint16)
        assert np.array_equal(to_grayscale(image), np.array([[0, 128, 255]], dtype=np.uint8))

    def test_unsupported_shape(self):
        with pytest.raises(InvalidDimensionsError):
            to_grayscale(np.zeros((4, 4, 2), dtype=np.uint8))

    def test_none_input(self):
        with pytest.raises(InvalidDimensionsError):
            to_grayscale(None)


class TestLoadSave:
    """Test suite for reading and writing image files."""

    def test_round_trip_png(self, tmp_path, formula_image):
        path = tmp_path / "nested" / "formula.png"

        save_image(formula_image, path)

        assert np.array_equal(load_image(path), formula_image)

    def test_load_color_file_as_gray(self, tmp_path, formula_image):
        path = tmp_path / "color.png"
        cv2.imwrite(str(path), cv2.cvtColor(formula_image, cv2.COLOR_GRAY2BGR))

        loaded = load_image(path)

        assert loaded.ndim == 2
        assert np.array_equal(loaded, formula_image)

    def test_load_missing(self, tmp_path):
        with pytest.raises(DecodeFailureError):
            load_image(tmp_path / "missing.png")
