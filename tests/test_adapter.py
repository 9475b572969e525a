"""Tests for flattening recognizer output."""

import numpy as np
import pytest

from conftest import FakeRecognizer, make_blocks
from snaplocate.vision.adapter import flatten_lines, recognize_lines
from snaplocate.vision.models import BoundingBox, RecognizedLine


def test_flattens_in_reading_order() -> None:
    blocks = make_blocks(("Wi-Fi", (1, 2, 3, 4)), ("Bluetooth", (5, 6, 7, 8)))
    blocks += make_blocks(("Display", (9, 10, 11, 12)))
    assert flatten_lines(blocks) == [
        RecognizedLine("Wi-Fi", BoundingBox(1, 2, 3, 4)),
        RecognizedLine("Bluetooth", BoundingBox(5, 6, 7, 8)),
        RecognizedLine("Display", BoundingBox(9, 10, 11, 12)),
    ]


@pytest.mark.parametrize(
    "blocks",
    [
        None,
        "garbage",
        [None],
        [{}],
        [{"paragraphs": None}],
        [{"paragraphs": [None, {"lines": "nope"}]}],
        [{"paragraphs": [{"lines": [None, {"text": None, "bbox": {"x0": 0, "y0": 0, "x1": 1, "y1": 1}}]}]}],
        [{"paragraphs": [{"lines": [{"text": "   ", "bbox": {"x0": 0, "y0": 0, "x1": 1, "y1": 1}}]}]}],
        [{"paragraphs": [{"lines": [{"text": "Done"}]}]}],
        [{"paragraphs": [{"lines": [{"text": "Done", "bbox": {"x0": 0, "y0": 0, "x1": 1}}]}]}],
        [{"paragraphs": [{"lines": [{"text": "Done", "bbox": {"x0": "0", "y0": 0, "x1": 1, "y1": 1}}]}]}],
        [{"paragraphs": [{"lines": [{"text": "Done", "bbox": {"x0": 5, "y0": 0, "x1": 1, "y1": 1}}]}]}],
    ],
)
def test_malformed_levels_are_skipped(blocks) -> None:
    assert flatten_lines(blocks) == []


def test_good_lines_survive_bad_siblings() -> None:
    blocks = [
        {"paragraphs": None},
        {"paragraphs": [{"lines": [{"text": "Done"}, {"text": "OK", "bbox": {"x0": 1, "y0": 1, "x1": 2, "y1": 2}}]}]},
    ]
    assert [line.text for line in flatten_lines(blocks)] == ["OK"]


def test_numpy_coordinates_accepted() -> None:
    bbox = {"x0": np.int64(1), "y0": np.int32(2), "x1": np.float32(3.5), "y1": 4}
    lines = flatten_lines([{"paragraphs": [{"lines": [{"text": "OK", "bbox": bbox}]}]}])
    assert lines[0].bbox == BoundingBox(1, 2, 3.5, 4)


def test_recognize_lines_propagates_errors() -> None:
    recognizer = FakeRecognizer([RuntimeError("tesseract crashed")])
    with pytest.raises(RuntimeError):
        recognize_lines(recognizer, np.zeros((2, 2), dtype=np.uint8))
