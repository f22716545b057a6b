"""
Formula Image Normalizer

Preprocesses raster images of mathematical formulas for recognition models.

This package implements:
- Polarity detection and correction for light-on-dark images
- Threshold-based contrast enhancement
- Tight cropping to the formula's ink
- Aspect-preserving Lanczos scaling onto a fixed-size canvas
- Concurrent batch processing of whole directories
"""

__version__ = "0.1.1"
__author__ = "Formula Normalizer Team"

from .preprocessing import PolarityClassifier, PolarityNormalizer, ContrastEnhancer, ContentCropper
from .composition import CanvasCompositor
from .pipeline import FormulaNormalizer, preprocess_image, process_image_file
from .batch import process_directory, process_directory_sequential
from .data_models import ProcessingConfig, BoundingBox, Polarity, FileResult, BatchResults
from .exceptions import (
    FormulaNormalizerError, EmptyContentError, InvalidDimensionsError,
    DecodeFailureError, EncodeFailureError
)

__all__ = [
    # Preprocessing
    'PolarityClassifier', 'PolarityNormalizer', 'ContrastEnhancer', 'ContentCropper',
    # Composition
    'CanvasCompositor',
    # Pipeline
    'FormulaNormalizer', 'preprocess_image', 'process_image_file',
    # Batch
    'process_directory', 'process_directory_sequential',
    # Data Models
    'ProcessingConfig', 'BoundingBox', 'Polarity', 'FileResult', 'BatchResults',
    # Errors
    'FormulaNormalizerError', 'EmptyContentError', 'InvalidDimensionsError',
    'DecodeFailureError', 'EncodeFailureError'
]
