"""Computer vision components for snaplocate.

This sub-package turns a raw device screenshot into the location of a search
phrase: image preprocessing variants, OCR, coordinate remapping and ranking.
"""

from .candidates import collect_candidates, normalize_text
from .locator import TextLocator, find_text_bounds, find_text_bounds_in_file
from .models import (
    BoundingBox,
    CandidateMatch,
    RecognizedLine,
    Screenshot,
    TextBounds,
    Variant,
    VariantOutcome,
)
from .recognizer import Recognizer, TesseractRecognizer, configure_tesseract_cmd
from .remap import remap_bbox
from .selector import rank_candidates, select_best
from .variants import VARIANT_SPECS, generate_variants

__all__ = [
    "BoundingBox",
    "CandidateMatch",
    "RecognizedLine",
    "Recognizer",
    "Screenshot",
    "TesseractRecognizer",
    "TextBounds",
    "TextLocator",
    "VARIANT_SPECS",
    "Variant",
    "VariantOutcome",
    "collect_candidates",
    "configure_tesseract_cmd",
    "find_text_bounds",
    "find_text_bounds_in_file",
    "generate_variants",
    "normalize_text",
    "rank_candidates",
    "remap_bbox",
    "select_best",
]
