"""
Utility Functions and Helpers

Configuration and image I/O for the formula normalizer.
"""

from .config_manager import ConfigManager
from .image_io import load_image, save_image, to_grayscale, is_supported_image

__all__ = ['ConfigManager', 'load_image', 'save_image', 'to_grayscale', 'is_supported_image']
