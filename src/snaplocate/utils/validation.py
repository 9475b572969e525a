"""Validation utility functions for snaplocate."""

from __future__ import annotations

from typing import Union

from ..core.errors import CoordinateRangeError
from ..core.logger import log


def validate_coordinates(x: Union[int, float], y: Union[int, float],
                         max_width: int, max_height: int, tolerance: int = 0) -> bool:
    """Validate screen coordinates.

    Args:
        x: X coordinate.
        y: Y coordinate.
        max_width: Screen width.
        max_height: Screen height.
        tolerance: Pixels of slack allowed outside the screen (rounding).

    Returns:
        True if coordinates are valid, False otherwise.
    """
    try:
        x_val = float(x)
        y_val = float(y)
    except (ValueError, TypeError):
        log.error(f"Invalid coordinate values: x={x}, y={y}")
        return False

    if x_val < -tolerance or x_val > max_width + tolerance:
        log.warning(f"X coordinate {x_val} out of bounds [0, {max_width}]")
        return False

    if y_val < -tolerance or y_val > max_height + tolerance:
        log.warning(f"Y coordinate {y_val} out of bounds [0, {max_height}]")
        return False

    return True


def validate_bounds(x: int, y: int, width: int, height: int,
                    max_width: int, max_height: int, tolerance: int = 0) -> None:
    """Ensure the box ``(x, y, width, height)`` lies inside the screen.

    Raises:
        CoordinateRangeError: If either corner is out of range or the size is negative.
    """
    if width < 0 or height < 0:
        raise CoordinateRangeError(f"Negative box size {width}x{height} at ({x}, {y})")

    corners_ok = (
        validate_coordinates(x, y, max_width, max_height, tolerance)
        and validate_coordinates(x + width, y + height, max_width, max_height, tolerance)
    )
    if not corners_ok:
        raise CoordinateRangeError(
            f"Box (x={x}, y={y}, w={width}, h={height}) outside "
            f"{max_width}x{max_height} screenshot"
        )
