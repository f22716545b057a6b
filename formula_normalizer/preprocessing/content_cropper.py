"""
Content Cropping

Finds the tight bounding box of foreground ink and discards the surrounding
whitespace.
"""

import numpy as np
from typing import Optional
import logging

from ..data_models import BoundingBox
from ..exceptions import EmptyContentError, InvalidDimensionsError


BACKGROUND_THRESHOLD = 250  # pixels at or above this are background


class ContentCropper:
    """Crops an image to the minimal box enclosing all non-background pixels."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def content_mask(self, image: np.ndarray) -> np.ndarray:
        """Boolean mask of foreground (content) pixels."""
        return image < BACKGROUND_THRESHOLD

    def find_bounding_box(self, image: np.ndarray) -> Optional[BoundingBox]:
        """
        Compute the inclusive bounding box of all content pixels.

        Args:
            image: Grayscale uint8 image

        Returns:
            BoundingBox, or None when the image has no content pixel
        """
        if image.ndim != 2:
            raise InvalidDimensionsError(f"Expected a single-channel image, got shape {image.shape}")

        mask = self.content_mask(image)

        rows = np.where(mask.any(axis=1))[0]
        if rows.size == 0:
            return None
        cols = np.where(mask.any(axis=0))[0]

        return BoundingBox(
            left=int(cols[0]),
            top=int(rows[0]),
            right=int(cols[-1]),
            bottom=int(rows[-1]),
        )

    def crop(self, image: np.ndarray) -> np.ndarray:
        """
        Crop an image to its content.

        Args:
            image: Grayscale uint8 image

        Returns:
            New image covering exactly the content bounding box

        Raises:
            EmptyContentError: If no pixel is darker than the background threshold
        """
        box = self.find_bounding_box(image)
        if box is None:
            raise EmptyContentError(
                f"No content found in {image.shape[1]}x{image.shape[0]} image"
            )

        self.logger.debug(f"Content box: {box}")

        return image[box.top:box.bottom + 1, box.left:box.right + 1].copy()
