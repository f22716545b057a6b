"""
Image Preprocessing Module

Implements polarity correction, contrast enhancement and content cropping.
"""

from .polarity import PolarityClassifier, PolarityNormalizer
from .contrast_enhancer import ContrastEnhancer
from .content_cropper import ContentCropper

__all__ = ['PolarityClassifier', 'PolarityNormalizer', 'ContrastEnhancer', 'ContentCropper']
