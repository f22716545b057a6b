"""
Canvas Composition

Scales cropped formula content to fit the interior of a fixed-size canvas,
preserving aspect ratio, and centers it on a blank background.
"""

import math
import cv2
import numpy as np
from typing import Optional, Tuple
import logging

from ..data_models import ProcessingConfig
from ..exceptions import InvalidDimensionsError


BACKGROUND_VALUE = 255
RESAMPLING_FILTER = cv2.INTER_LANCZOS4


def _round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves away from zero."""
    return int(math.floor(value + 0.5))


class CanvasCompositor:
    """Places an image, scaled uniformly, at the center of a fixed canvas."""

    def __init__(self, config: Optional[ProcessingConfig] = None):
        """
        Initialize canvas compositor.

        Args:
            config: Canvas geometry. If None, uses the default 300x100 canvas with 5px border.
        """
        self.config = config or ProcessingConfig()
        self.logger = logging.getLogger(__name__)

        self.logger.debug(f"Canvas compositor initialized: {self.config.width}x{self.config.height}, "
                          f"border={self.config.border}")

    def compute_layout(self, img_width: int, img_height: int) -> Tuple[int, int, int, int]:
        """
        Compute the scaled size and placement of an image on the canvas.

        Args:
            img_width: Source width in pixels
            img_height: Source height in pixels

        Returns:
            Tuple of (new_width, new_height, offset_x, offset_y)

        Raises:
            InvalidDimensionsError: If the interior region or the source is empty
        """
        width, height, border = self.config.width, self.config.height, self.config.border

        max_width = width - 2 * border
        max_height = height - 2 * border

        if max_width <= 0 or max_height <= 0:
            raise InvalidDimensionsError(
                f"Interior region {max_width}x{max_height} is empty "
                f"(canvas {width}x{height}, border {border})"
            )
        if img_width <= 0 or img_height <= 0:
            raise InvalidDimensionsError(f"Cannot scale a {img_width}x{img_height} image")

        # One factor for both axes keeps the aspect ratio
        scale = min(max_width / img_width, max_height / img_height)

        new_width = min(max(_round_half_up(img_width * scale), 1), max_width)
        new_height = min(max(_round_half_up(img_height * scale), 1), max_height)

        offset_x = border + (max_width - new_width) // 2
        offset_y = border + (max_height - new_height) // 2

        return new_width, new_height, offset_x, offset_y

    def compose(self, image: np.ndarray) -> np.ndarray:
        """
        Fit an image into the canvas without changing its aspect ratio.

        Args:
            image: Grayscale uint8 image, typically the cropped formula

        Returns:
            New uint8 image of exactly config.height x config.width
        """
        if image.ndim != 2:
            raise InvalidDimensionsError(f"Expected a single-channel image, got shape {image.shape}")

        img_height, img_width = image.shape
        new_width, new_height, offset_x, offset_y = self.compute_layout(img_width, img_height)

        resized = cv2.resize(image, (new_width, new_height), interpolation=RESAMPLING_FILTER)

        canvas = np.full((self.config.height, self.config.width), BACKGROUND_VALUE, dtype=np.uint8)
        canvas[offset_y:offset_y + new_height, offset_x:offset_x + new_width] = resized

        self.logger.debug(f"Composed {img_width}x{img_height} -> {new_width}x{new_height} "
                          f"at ({offset_x}, {offset_y})")

        return canvas
