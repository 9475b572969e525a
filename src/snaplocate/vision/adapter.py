"""Normalize recognizer output into flat ``RecognizedLine`` lists."""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterable, Mapping, Optional

import numpy as np  # type: ignore

from .models import BoundingBox, RecognizedLine
from .recognizer import Recognizer

_BBOX_KEYS = ("x0", "y0", "x1", "y1")


def _children(node: Any, key: str) -> list[Any]:
    """Return ``node[key]`` if it is a sequence, otherwise an empty list."""
    if not isinstance(node, Mapping):
        return []
    value = node.get(key)
    return list(value) if isinstance(value, (list, tuple)) else []


def _parse_bbox(raw: Any) -> Optional[BoundingBox]:
    if not isinstance(raw, Mapping):
        return None
    values = [raw.get(key) for key in _BBOX_KEYS]
    # bool is a Real subclass; reject it explicitly
    if any(not isinstance(v, Real) or isinstance(v, bool) for v in values):
        return None
    x0, y0, x1, y1 = (float(v) for v in values)
    if x1 < x0 or y1 < y0:
        return None
    return BoundingBox(x0, y0, x1, y1)


def flatten_lines(blocks: Iterable[Any] | None) -> list[RecognizedLine]:
    """Flatten blocks -> paragraphs -> lines, in reading order.

    Missing or malformed levels are treated as empty rather than as errors.
    """
    lines: list[RecognizedLine] = []
    if not isinstance(blocks, (list, tuple)):
        return lines

    for block in blocks:
        for paragraph in _children(block, "paragraphs"):
            for line in _children(paragraph, "lines"):
                if not isinstance(line, Mapping):
                    continue
                text = line.get("text")
                if not isinstance(text, str) or not text.strip():
                    continue
                bbox = _parse_bbox(line.get("bbox"))
                if bbox is None:
                    continue
                lines.append(RecognizedLine(text=text, bbox=bbox))
    return lines


def recognize_lines(recognizer: Recognizer, image: np.ndarray) -> list[RecognizedLine]:
    """Run ``recognizer`` on one preprocessed image and flatten the result.

    Recognizer exceptions propagate; the locator isolates them per variant.
    """
    return flatten_lines(recognizer.recognize(image))
