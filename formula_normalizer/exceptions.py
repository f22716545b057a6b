"""
Error Types for the Formula Normalizer

Every failure raised by the pipeline derives from FormulaNormalizerError.
"""

from typing import Optional


class FormulaNormalizerError(Exception):
    """Base class for all formula normalizer errors."""


class EmptyContentError(FormulaNormalizerError, ValueError):
    """Raised when an image contains no foreground (ink) pixels."""


class InvalidDimensionsError(FormulaNormalizerError, ValueError):
    """Raised when a canvas configuration or source image has unusable dimensions."""


class DecodeFailureError(FormulaNormalizerError, IOError):
    """Raised when an input file cannot be read or decoded."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class EncodeFailureError(FormulaNormalizerError, IOError):
    """Raised when a normalized image cannot be encoded or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
