"""Composable image preprocessing steps used to build OCR variants.

Each step is a small frozen dataclass with an ``apply`` method, so a variant
is just a tuple of steps and adding a new preprocessing chain is a data change.
All images are OpenCV ``numpy`` arrays (BGR, BGRA or single-channel).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable

import cv2  # type: ignore
import numpy as np  # type: ignore


class TransformStep:
    """Base class for a single preprocessing primitive."""

    name: ClassVar[str] = "step"

    def apply(self, image: np.ndarray) -> np.ndarray:  # pragma: no cover - abstract
        raise NotImplementedError

    def describe(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class RemoveAlpha(TransformStep):
    """Drop the alpha channel if present."""

    name: ClassVar[str] = "remove_alpha"

    def apply(self, image: np.ndarray) -> np.ndarray:
        if image.ndim == 3 and image.shape[2] == 4:
            return cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
        return image


@dataclass(frozen=True, slots=True)
class Grayscale(TransformStep):
    name: ClassVar[str] = "grayscale"

    def apply(self, image: np.ndarray) -> np.ndarray:
        if image.ndim == 2:
            return image
        channels = image.shape[2]
        if channels == 1:
            return image[:, :, 0]
        if channels == 4:
            return cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)


@dataclass(frozen=True, slots=True)
class Invert(TransformStep):
    name: ClassVar[str] = "invert"

    def apply(self, image: np.ndarray) -> np.ndarray:
        return cv2.bitwise_not(image)


@dataclass(frozen=True, slots=True)
class Threshold(TransformStep):
    """Fixed binarization: pixels at or above ``cutoff`` become white, the rest black."""

    cutoff: int = 128
    name: ClassVar[str] = "threshold"

    def __post_init__(self) -> None:
        if not 0 <= self.cutoff <= 255:
            raise ValueError(f"Threshold cutoff must be in 0-255, got {self.cutoff}")

    def apply(self, image: np.ndarray) -> np.ndarray:
        # THRESH_BINARY keeps values strictly greater than thresh
        _, binary = cv2.threshold(image, self.cutoff - 1, 255, cv2.THRESH_BINARY)
        return binary

    def describe(self) -> str:
        return f"threshold({self.cutoff})"


@dataclass(frozen=True, slots=True)
class Crop(TransformStep):
    """Rectangular crop given as ``(left, top, width, height)``."""

    left: int
    top: int
    width: int
    height: int
    name: ClassVar[str] = "crop"

    def apply(self, image: np.ndarray) -> np.ndarray:
        img_h, img_w = image.shape[:2]
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Empty crop region {self.describe()}")
        if (
            self.left < 0
            or self.top < 0
            or self.left + self.width > img_w
            or self.top + self.height > img_h
        ):
            raise ValueError(f"Crop region {self.describe()} exceeds image size {img_w}x{img_h}")
        return image[self.top:self.top + self.height, self.left:self.left + self.width]

    def describe(self) -> str:
        return f"crop({self.left},{self.top},{self.width}x{self.height})"


@dataclass(frozen=True, slots=True)
class ResizeToWidth(TransformStep):
    """Resize to a target width, preserving aspect ratio."""

    width: int
    name: ClassVar[str] = "resize"

    def apply(self, image: np.ndarray) -> np.ndarray:
        img_h, img_w = image.shape[:2]
        if img_w == self.width:
            return image
        new_h = max(1, int(round(img_h * self.width / img_w)))
        interpolation = cv2.INTER_CUBIC if self.width > img_w else cv2.INTER_AREA
        return cv2.resize(image, (self.width, new_h), interpolation=interpolation)

    def describe(self) -> str:
        return f"resize(w={self.width})"


def apply_transforms(image: np.ndarray, steps: Iterable[TransformStep]) -> np.ndarray:
    """Apply ``steps`` to ``image`` in order and return the result."""
    for step in steps:
        image = step.apply(image)
    return image
