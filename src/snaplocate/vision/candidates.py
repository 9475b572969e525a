"""Filter recognized lines by the search phrase and remap the hits."""

from __future__ import annotations

from typing import Iterable, Optional

from ..utils.validation import validate_bounds
from .models import CandidateMatch, RecognizedLine, Variant
from .remap import remap_bbox


def normalize_text(text: str) -> str:
    """Lower-case and collapse whitespace runs to single spaces."""
    return " ".join(text.lower().split())


def collect_candidates(
    lines: Iterable[RecognizedLine],
    search_text: str,
    variant: Variant,
    *,
    image_size: Optional[tuple[int, int]] = None,
    tolerance: int = 1,
) -> list[CandidateMatch]:
    """Return one ``CandidateMatch`` per line whose text contains ``search_text``.

    Matching is done per line, not per word, so multi-word phrases split
    across word boxes are still found. When ``image_size`` (width, height) is
    given, every remapped box must fall inside it.

    ``length_delta`` compares the raw line and search text, so irregular
    spacing in the OCR output counts against a line.
    """
    needle = normalize_text(search_text)
    if not needle:
        return []

    candidates: list[CandidateMatch] = []
    for line in lines:
        haystack = normalize_text(line.text)
        if needle not in haystack:
            continue

        bounds = remap_bbox(line.bbox, variant)
        if image_size is not None:
            validate_bounds(
                bounds.x, bounds.y, bounds.width, bounds.height,
                image_size[0], image_size[1], tolerance,
            )
        candidates.append(
            CandidateMatch(
                bbox=bounds,
                matched_text=line.text,
                source_variant=variant.name,
                length_delta=abs(len(line.text) - len(search_text)),
            )
        )
    return candidates
