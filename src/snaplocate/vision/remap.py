"""Map boxes from variant pixel space back to the original screenshot."""

from __future__ import annotations

import math

from .models import BoundingBox, TextBounds, Variant


def _round(value: float) -> int:
    """Round half up (``2.5 -> 3``), unlike Python's banker's ``round``."""
    return int(math.floor(value + 0.5))


def remap_bbox(bbox: BoundingBox, variant: Variant) -> TextBounds:
    """Invert ``variant``'s crop/resize for ``bbox``.

    Crops only ever remove rows from the top, so x needs no offset.
    """
    scale = variant.scale
    return TextBounds(
        x=_round(bbox.left / scale),
        y=_round(bbox.top / scale) + variant.offset_y,
        width=_round(bbox.width() / scale),
        height=_round(bbox.height() / scale),
    )
