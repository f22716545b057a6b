"""
Formula Normalization Pipeline

Chains the preprocessing stages and the canvas compositor:
grayscale -> polarity correction -> contrast enhancement -> crop -> canvas.
"""

import numpy as np
from pathlib import Path
from typing import Optional, Union
import logging

from .data_models import ProcessingConfig
from .preprocessing import PolarityNormalizer, ContrastEnhancer, ContentCropper
from .composition import CanvasCompositor
from .utils.image_io import load_image, save_image, to_grayscale


class FormulaNormalizer:
    """Runs the full normalization pipeline on one image at a time."""

    def __init__(self, config: Optional[ProcessingConfig] = None):
        """
        Initialize the pipeline.

        Args:
            config: Canvas geometry. If None, uses ProcessingConfig defaults.
        """
        self.config = config or ProcessingConfig()
        self.logger = logging.getLogger(__name__)

        self.polarity_normalizer = PolarityNormalizer()
        self.contrast_enhancer = ContrastEnhancer()
        self.content_cropper = ContentCropper()
        self.compositor = CanvasCompositor(self.config)

    def normalize(self, image: np.ndarray) -> np.ndarray:
        """
        Normalize a decoded formula image.

        Args:
            image: Grayscale or BGR/BGRA image array

        Returns:
            Grayscale uint8 image of config.height x config.width

        Raises:
            EmptyContentError: If the image holds no ink
            InvalidDimensionsError: If the image cannot be scaled onto the canvas
        """
        gray = to_grayscale(image)
        normal = self.polarity_normalizer.normalize(gray)
        enhanced = self.contrast_enhancer.enhance(normal)
        cropped = self.content_cropper.crop(enhanced)
        return self.compositor.compose(cropped)

    def process_file(self, input_path: Union[str, Path], output_path: Union[str, Path]) -> None:
        """
        Decode, normalize and encode a single image file.

        Raises:
            DecodeFailureError: If the input cannot be read
            EncodeFailureError: If the output cannot be written
        """
        image = load_image(input_path)
        normalized = self.normalize(image)
        save_image(normalized, output_path)
        self.logger.debug(f"Processed {input_path} -> {output_path}")


def preprocess_image(image: np.ndarray, config: Optional[ProcessingConfig] = None) -> np.ndarray:
    """Normalize an in-memory image with the given (or default) configuration."""
    return FormulaNormalizer(config).normalize(image)


def process_image_file(input_path: Union[str, Path],
                       output_path: Union[str, Path],
                       config: Optional[ProcessingConfig] = None) -> None:
    """Normalize one image file and write the result to output_path."""
    FormulaNormalizer(config).process_file(input_path, output_path)
