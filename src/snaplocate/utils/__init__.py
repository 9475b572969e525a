"""Utility functions for snaplocate."""

from .validation import validate_bounds, validate_coordinates

__all__ = [
    "validate_bounds",
    "validate_coordinates",
]
