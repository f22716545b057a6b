"""
Polarity Detection and Correction

Detects light-ink-on-dark formula images and flips them so that every later
stage sees dark ink on a light background.
"""

import numpy as np
from typing import Optional, Tuple
import logging

from ..data_models import Polarity


DARK_THRESHOLD = 128  # pixels below this count as dark
LIGHT_THRESHOLD = 200  # pixels above this count as light
INVERSION_RATIO = 2  # dark must outnumber light by more than this factor


class PolarityClassifier:
    """Classifies an image as normal or inverted polarity from its luminance histogram."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def count_pixels(self, image: np.ndarray) -> Tuple[int, int]:
        """
        Count dark and light pixels; the mid-band is ignored.

        Args:
            image: Grayscale uint8 image

        Returns:
            Tuple of (dark_count, light_count)
        """
        dark_count = int(np.count_nonzero(image < DARK_THRESHOLD))
        light_count = int(np.count_nonzero(image > LIGHT_THRESHOLD))
        return dark_count, light_count

    def classify(self, image: np.ndarray) -> Polarity:
        """
        Decide the polarity of an image.

        Ambiguous or balanced images fall back to normal polarity.

        Args:
            image: Grayscale uint8 image

        Returns:
            Polarity.INVERTED if dark pixels exceed twice the light pixels
        """
        dark_count, light_count = self.count_pixels(image)

        if dark_count > INVERSION_RATIO * light_count:
            polarity = Polarity.INVERTED
        else:
            polarity = Polarity.NORMAL

        self.logger.debug(f"Polarity {polarity.value}: dark={dark_count}, light={light_count}")
        return polarity

    def is_inverted(self, image: np.ndarray) -> bool:
        return self.classify(image) is Polarity.INVERTED


class PolarityNormalizer:
    """Guarantees dark-ink-on-light-background output."""

    def __init__(self, classifier: Optional[PolarityClassifier] = None):
        self.classifier = classifier or PolarityClassifier()
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def invert(image: np.ndarray) -> np.ndarray:
        """Replace every luminance value l with 255 - l."""
        return (255 - image.astype(np.int16)).astype(np.uint8)

    def normalize(self, image: np.ndarray) -> np.ndarray:
        """
        Invert the image if it is classified as inverted, otherwise copy it.

        Args:
            image: Grayscale uint8 image

        Returns:
            New image in normal polarity
        """
        if self.classifier.is_inverted(image):
            self.logger.debug("Inverting dark-background image")
            return self.invert(image)

        return image.copy()
