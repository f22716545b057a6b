"""
Contrast Enhancement

Flattens the near-white background and darkens everything else so ink
separates cleanly from paper before cropping.
"""

import numpy as np
import logging


WHITE_THRESHOLD = 200  # pixels above this become pure white
WHITE_VALUE = 255


class ContrastEnhancer:
    """Luminance threshold transform: bright pixels to white, the rest halved."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def enhance(self, image: np.ndarray) -> np.ndarray:
        """
        Apply the contrast transform.

        Args:
            image: Grayscale uint8 image

        Returns:
            New uint8 image; pixels > 200 become 255, others are halved (floor)
        """
        # Tuned together with the cropper's background threshold of 250
        enhanced = np.where(image > WHITE_THRESHOLD, WHITE_VALUE, image // 2)
        return enhanced.astype(np.uint8)
