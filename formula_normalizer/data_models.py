"""
Data Models for Formula Normalization

Defines all data structures used throughout the system.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .exceptions import InvalidDimensionsError


DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 100
DEFAULT_BORDER = 5


class Polarity(Enum):
    """Whether ink is darker (normal) or lighter (inverted) than the background."""
    NORMAL = "normal"
    INVERTED = "inverted"


@dataclass(frozen=True)
class ProcessingConfig:
    """Target canvas geometry shared by every pipeline invocation."""
    width: int = DEFAULT_WIDTH  # canvas width in pixels
    height: int = DEFAULT_HEIGHT  # canvas height in pixels
    border: int = DEFAULT_BORDER  # margin kept free on every side

    def __post_init__(self):
        for name in ('width', 'height', 'border'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimensionsError(f"{name} must be an integer, got {value!r}")

        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensionsError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )
        if self.border < 0:
            raise InvalidDimensionsError(f"border must be non-negative, got {self.border}")
        if 2 * self.border >= self.width or 2 * self.border >= self.height:
            raise InvalidDimensionsError(
                f"border {self.border} leaves no interior region in a "
                f"{self.width}x{self.height} canvas"
            )

    @property
    def interior_width(self) -> int:
        return self.width - 2 * self.border

    @property
    def interior_height(self) -> int:
        return self.height - 2 * self.border


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive pixel extent of foreground content."""
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1


@dataclass
class FileResult:
    """Outcome of normalizing a single file in a batch."""
    input_path: str
    output_path: str
    success: bool
    error: Optional[str] = None


@dataclass
class BatchResults:
    """Results from processing a directory of formula images."""
    results: List[FileResult] = field(default_factory=list)
    processed: int = 0
    failed: int = 0
    processing_time: float = 0.0

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failures(self) -> List[FileResult]:
        return [r for r in self.results if not r.success]
