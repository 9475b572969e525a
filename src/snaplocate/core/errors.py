"""Exception types raised by the text locator."""

from __future__ import annotations


class SnapLocateError(Exception):
    """Base class for all snaplocate errors."""


class ImageDecodeError(SnapLocateError):
    """Raised when the original screenshot bytes cannot be decoded."""


class InvalidSearchTextError(SnapLocateError, ValueError):
    """Raised when the search phrase is empty after normalization."""


class CoordinateRangeError(SnapLocateError):
    """Raised when a remapped box falls outside the original screenshot.

    This always points at a variant/offset bug; boxes are never clamped.
    """


class RecognitionError(SnapLocateError):
    """Raised when every preprocessing variant failed to produce OCR output.

    Distinguishes a broken recognizer from text that is genuinely absent.
    """

    def __init__(self, message: str, failures: list[tuple[str, BaseException]] | None = None):
        super().__init__(message)
        self.failures = failures or []
