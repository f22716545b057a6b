"""
Image Decoding and Encoding Helpers

Boundary between files on disk and the single-channel arrays the pipeline works on.
"""

import cv2
import numpy as np
from pathlib import Path
from typing import Iterable, Union
import logging

from ..exceptions import DecodeFailureError, EncodeFailureError, InvalidDimensionsError


SUPPORTED_EXTENSIONS = ('png', 'jpg', 'jpeg')

PathLike = Union[str, Path]

# Rec.709 luma weights in units of 1/10000, ordered B, G, R
LUMA_WEIGHTS_BGR = np.array([722, 7152, 2126], dtype=np.uint32)
LUMA_SCALE = 10000

logger = logging.getLogger(__name__)


def is_supported_image(path: PathLike, extensions: Iterable[str] = SUPPORTED_EXTENSIONS) -> bool:
    """Check whether a path carries one of the accepted image extensions (case-insensitive)."""
    suffix = Path(path).suffix.lower().lstrip('.')
    return suffix in {ext.lower().lstrip('.') for ext in extensions}


def _bgr_to_luma(image: np.ndarray) -> np.ndarray:
    """Weighted Rec.709 luma of a uint8 BGR image, truncated to an integer."""
    luma = image.astype(np.uint32) @ LUMA_WEIGHTS_BGR // LUMA_SCALE
    return luma.astype(np.uint8)


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """
    Convert a decoded image to a single-channel 8-bit luminance array.

    Args:
        image: Grayscale (H, W), single-channel (H, W, 1), BGR (H, W, 3) or BGRA (H, W, 4) image

    Returns:
        New uint8 array of shape (H, W)
    """
    if image is None:
        raise InvalidDimensionsError("No image data provided")

    image = np.asarray(image)

    if image.dtype == np.uint16:
        image = (image >> 8).astype(np.uint8)
    elif image.dtype != np.uint8:
        image = np.clip(image, 0, 255).astype(np.uint8)

    if image.ndim == 2:
        return image.copy()

    if image.ndim == 3:
        channels = image.shape[2]
        if channels == 1:
            return image[:, :, 0].copy()
        if channels in (3, 4):
            return _bgr_to_luma(image[:, :, :3])

    raise InvalidDimensionsError(f"Unsupported image shape: {image.shape}")


def load_image(path: PathLike) -> np.ndarray:
    """
    Decode an image file into a grayscale array.

    Raises:
        DecodeFailureError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise DecodeFailureError(f"Image file not found: {path}", path=str(path))

    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise DecodeFailureError(f"Could not decode image: {path}", path=str(path))

    logger.debug(f"Loaded {path} with shape {image.shape}")
    return to_grayscale(image)


def save_image(image: np.ndarray, path: PathLike) -> None:
    """
    Encode an image to disk; the format follows the file extension.

    Raises:
        EncodeFailureError: If OpenCV cannot encode or write the file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        written = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise EncodeFailureError(f"Could not encode image {path}: {e}", path=str(path)) from e

    if not written:
        raise EncodeFailureError(f"Could not write image: {path}", path=str(path))

    logger.debug(f"Saved {path}")
