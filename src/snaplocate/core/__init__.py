"""Core components of snaplocate."""

from .config import Config, config
from .errors import (
    CoordinateRangeError,
    ImageDecodeError,
    InvalidSearchTextError,
    RecognitionError,
    SnapLocateError,
)
from .logger import Logger, configure_logging, log

__all__ = [
    "Config",
    "CoordinateRangeError",
    "ImageDecodeError",
    "InvalidSearchTextError",
    "Logger",
    "RecognitionError",
    "SnapLocateError",
    "config",
    "configure_logging",
    "log",
]
