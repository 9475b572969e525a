"""Pytest configuration and fixtures."""

import threading
from typing import Any, Callable, Sequence

import cv2
import numpy as np
import pytest

from snaplocate.core.config import Config
from snaplocate.vision.recognizer import Recognizer


def make_blocks(*lines: tuple[str, tuple[float, float, float, float]]) -> list[dict[str, Any]]:
    """Build a one-block, one-paragraph recognizer result from ``(text, bbox)`` pairs."""
    return [
        {
            "paragraphs": [
                {
                    "lines": [
                        {"text": text, "bbox": {"x0": x0, "y0": y0, "x1": x1, "y1": y1}}
                        for text, (x0, y0, x1, y1) in lines
                    ]
                }
            ]
        }
    ]


class FakeRecognizer(Recognizer):
    """Recognizer returning canned results.

    ``responses`` is either a list consumed in call order (one entry per
    variant; an ``Exception`` entry is raised) or a callable taking the image.
    """

    def __init__(self, responses: Sequence[Any] | Callable[[np.ndarray], Any] = ()):
        self.responses = responses
        self.images: list[np.ndarray] = []
        self.closed = False
        self._lock = threading.Lock()

    def recognize(self, image):
        with self._lock:
            index = len(self.images)
            self.images.append(image)
        if callable(self.responses):
            response = self.responses(image)
        else:
            response = self.responses[index] if index < len(self.responses) else []
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


class RecognizerFactory:
    """Callable factory recording every recognizer it builds."""

    def __init__(self, responses: Sequence[Any] | Callable[[np.ndarray], Any] = ()):
        self.responses = responses
        self.created: list[FakeRecognizer] = []

    def __call__(self) -> FakeRecognizer:
        recognizer = FakeRecognizer(self.responses)
        self.created.append(recognizer)
        return recognizer


def encode_png(image: np.ndarray) -> bytes:
    ok, buffer = cv2.imencode(".png", image)
    assert ok
    return buffer.tobytes()


@pytest.fixture
def png_bytes() -> Callable[..., bytes]:
    """Factory producing a white PNG of the requested size."""

    def _make(width: int = 1000, height: int = 2000, channels: int = 3) -> bytes:
        image = np.full((height, width, channels), 255, dtype=np.uint8)
        return encode_png(image)

    return _make


@pytest.fixture
def settings(tmp_path) -> Config:
    return Config(
        save_vision_debug=False,
        locator_workers=1,
        ocr_images_dir=str(tmp_path / "ocr_images"),
    )
