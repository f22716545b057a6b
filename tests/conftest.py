"""
Pytest configuration and fixtures for formula normalizer tests.
"""

import pytest
import numpy as np
import cv2
from formula_normalizer.data_models import ProcessingConfig
from formula_normalizer.utils.config_manager import ConfigManager


@pytest.fixture
def config_manager():
    """Fixture providing a configuration manager instance."""
    return ConfigManager()


@pytest.fixture
def default_config():
    """Fixture providing the default 300x100 canvas with a 5px border."""
    return ProcessingConfig()


@pytest.fixture
def formula_image():
    """Fixture providing a 50x20 dark-ink-on-white synthetic formula."""
    image = np.full((20, 50), 255, dtype=np.uint8)

    # A 30x10 block of ink stands in for the formula strokes
    image[5:15, 10:40] = 0

    return image


@pytest.fixture
def inverted_formula_image(formula_image):
    """Fixture providing the same formula as light ink on a dark background."""
    return 255 - formula_image


@pytest.fixture
def blank_image():
    """Fixture providing an image with no ink at all."""
    return np.full((20, 50), 255, dtype=np.uint8)


@pytest.fixture
def image_dir(tmp_path, formula_image, blank_image):
    """Fixture providing a directory with valid, blank and non-image files."""
    input_dir = tmp_path / "formulas"
    input_dir.mkdir()

    cv2.imwrite(str(input_dir / "formula_a.png"), formula_image)
    cv2.imwrite(str(input_dir / "formula_b.jpg"), formula_image)
    cv2.imwrite(str(input_dir / "formula_c.PNG"), 255 - formula_image)
    cv2.imwrite(str(input_dir / "blank.png"), blank_image)
    (input_dir / "notes.txt").write_text("not an image")

    return input_dir
