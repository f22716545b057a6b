"""
Batch Processing Module

Directory scanning and per-file fan-out for the normalization pipeline.
"""

from .directory_processor import find_images, process_directory, process_directory_sequential

__all__ = ['find_images', 'process_directory', 'process_directory_sequential']
