"""Data models for the text locator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import cv2  # type: ignore
import numpy as np  # type: ignore

from ..core.errors import ImageDecodeError

if TYPE_CHECKING:  # pragma: no cover
    from .transforms import TransformStep


@dataclass(slots=True, frozen=True)
class BoundingBox:
    """Axis-aligned rectangle (left, top, right, bottom) in pixel coordinates."""

    left: float
    top: float
    right: float
    bottom: float

    def width(self) -> float:
        """Width in pixels."""
        return self.right - self.left

    def height(self) -> float:
        """Height in pixels."""
        return self.bottom - self.top

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return bounding box as ``(left, top, right, bottom)`` tuple."""
        return self.left, self.top, self.right, self.bottom


@dataclass(slots=True, frozen=True)
class TextBounds:
    """Located text box ``(x, y, width, height)`` in original screenshot pixels."""

    x: int
    y: int
    width: int
    height: int

    def center(self) -> tuple[int, int]:
        """Centre point, suitable as a tap target."""
        return self.x + self.width // 2, self.y + self.height // 2

    def as_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(slots=True, frozen=True)
class Screenshot:
    """Decoded original screenshot. Source of truth for coordinates."""

    data: bytes
    image: np.ndarray = field(repr=False, compare=False)
    width: int
    height: int

    @classmethod
    def from_bytes(cls, data: bytes) -> Screenshot:
        """Decode encoded image bytes (PNG/JPEG/...).

        Raises:
            ImageDecodeError: If the bytes are empty or not a decodable image.

        """
        if not data:
            raise ImageDecodeError("Screenshot data is empty")

        buffer = np.frombuffer(data, dtype=np.uint8)
        try:
            image = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED)
        except cv2.error as exc:
            raise ImageDecodeError(f"Failed to decode screenshot: {exc}") from exc
        if image is None or image.size == 0:
            raise ImageDecodeError("Failed to decode screenshot: unsupported or corrupt image data")
        # 16-bit PNGs decode as uint16; transforms expect 0-255.
        if image.dtype == np.uint16:
            image = cv2.convertScaleAbs(image, alpha=255 / 65535)

        height, width = image.shape[:2]
        return cls(data=bytes(data), image=image, width=int(width), height=int(height))


@dataclass(slots=True, frozen=True)
class Variant:
    """One preprocessing transform of the screenshot.

    ``original = variant / scale + offset_y`` maps variant pixels back to the
    screenshot. Only rows are ever cropped, so there is no x offset.
    """

    name: str
    steps: tuple[TransformStep, ...]
    scale: float = 1.0
    offset_y: int = 0

    def __post_init__(self) -> None:
        if not self.scale > 0:
            raise ValueError(f"Variant {self.name!r} needs a positive scale, got {self.scale}")

    def describe(self) -> str:
        """Human-readable step chain, e.g. ``grayscale > invert``."""
        return " > ".join(step.describe() for step in self.steps)


@dataclass(slots=True, frozen=True)
class RecognizedLine:
    """A line of text reported by the recognizer, in variant pixel space."""

    text: str
    bbox: BoundingBox


@dataclass(slots=True, frozen=True)
class CandidateMatch:
    """A recognized line containing the search phrase, remapped to original space."""

    bbox: TextBounds
    matched_text: str
    source_variant: str
    length_delta: int


@dataclass(slots=True)
class VariantOutcome:
    """Result of evaluating a single variant; ``error`` is set when it failed."""

    variant: Variant
    lines: list[RecognizedLine] = field(default_factory=list)
    candidates: list[CandidateMatch] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.error is not None
