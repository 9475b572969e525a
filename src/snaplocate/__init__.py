"""snaplocate: find text on device screenshots with multi-variant OCR."""

from .core.errors import (
    CoordinateRangeError,
    ImageDecodeError,
    InvalidSearchTextError,
    RecognitionError,
    SnapLocateError,
)
from .core.logger import configure_logging
from .vision import Recognizer, TesseractRecognizer, TextBounds, TextLocator, find_text_bounds, find_text_bounds_in_file

__version__ = "0.1.0"

__all__ = [
    "CoordinateRangeError",
    "ImageDecodeError",
    "InvalidSearchTextError",
    "RecognitionError",
    "Recognizer",
    "SnapLocateError",
    "TesseractRecognizer",
    "TextBounds",
    "TextLocator",
    "configure_logging",
    "find_text_bounds",
    "find_text_bounds_in_file",
]
