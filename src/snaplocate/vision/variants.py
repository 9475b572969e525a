"""Preprocessing variants tried for every text search.

Variants are described declaratively in ``VARIANT_SPECS``. Full-image
variants keep the original resolution; band variants crop a horizontal strip
(footer or header) and upscale it to ``crop_target_width`` because the small
labels living there are often missed at native resolution.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..core.config import Config, config
from ..core.logger import log
from .models import Variant
from .transforms import Crop, Grayscale, Invert, RemoveAlpha, ResizeToWidth, Threshold, TransformStep

FOOTER_BAND = "footer"
HEADER_BAND = "header"


@dataclass(frozen=True, slots=True)
class VariantSpec:
    """Declarative description of one variant.

    ``band`` is ``None`` for the full image, otherwise ``FOOTER_BAND`` or
    ``HEADER_BAND``; band variants are always resized to the target width.
    """

    name: str
    band: Optional[str]
    invert: bool
    threshold: bool


# Order matters for tie-breaking only.
VARIANT_SPECS: tuple[VariantSpec, ...] = (
    VariantSpec("threshold", band=None, invert=False, threshold=True),  # light UIs
    VariantSpec("inverted_threshold", band=None, invert=True, threshold=True),  # dark mode
    VariantSpec("inverted_bottom_crop", band=FOOTER_BAND, invert=True, threshold=False),
    VariantSpec("inverted_top_crop", band=HEADER_BAND, invert=True, threshold=False),
)


def _band_rows(band: str, height: int, settings: Config) -> tuple[int, int]:
    """Return ``(top, crop_height)`` of a band for an image of ``height`` rows."""
    if band == FOOTER_BAND:
        top = math.floor(height * settings.footer_crop_start)
        return top, height - top
    if band == HEADER_BAND:
        return 0, math.floor(height * settings.header_crop_end)
    raise ValueError(f"Unknown band: {band!r}")


def build_variant(spec: VariantSpec, width: int, height: int, settings: Config) -> Optional[Variant]:
    """Build the concrete ``Variant`` for ``spec``; ``None`` if its crop would be empty."""
    steps: list[TransformStep] = [RemoveAlpha()]
    scale = 1.0
    offset_y = 0

    if spec.band is not None:
        top, crop_height = _band_rows(spec.band, height, settings)
        if crop_height <= 0 or width <= 0:
            return None
        steps.append(Crop(0, top, width, crop_height))
        steps.append(ResizeToWidth(settings.crop_target_width))
        scale = settings.crop_target_width / width
        offset_y = top

    steps.append(Grayscale())
    if spec.invert:
        steps.append(Invert())
    if spec.threshold:
        steps.append(Threshold(settings.threshold_cutoff))

    return Variant(name=spec.name, steps=tuple(steps), scale=scale, offset_y=offset_y)


def generate_variants(width: int, height: int, settings: Config | None = None) -> list[Variant]:
    """Return the preprocessing variants for a ``width`` x ``height`` screenshot."""
    settings = settings or config
    variants: list[Variant] = []
    for spec in VARIANT_SPECS:
        variant = build_variant(spec, width, height, settings)
        if variant is None:
            log.debug(f"Skipping variant {spec.name}: empty crop for {width}x{height} image")
            continue
        variants.append(variant)
    return variants
