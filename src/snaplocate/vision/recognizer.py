"""OCR backends.

A recognizer turns one preprocessed image into a block -> paragraph -> line
hierarchy of plain mappings::

    [{"paragraphs": [{"lines": [{"text": "Done", "bbox": {"x0": 1, "y0": 2, "x1": 30, "y1": 14}}]}]}]

Boxes are in the pixel space of the image the recognizer was given.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import numpy as np  # type: ignore
import pytesseract  # type: ignore

from ..core.config import config
from ..core.logger import log


def configure_tesseract_cmd(tesseract_cmd: Optional[str]) -> None:
    """Point pytesseract at a specific tesseract executable.

    The path is a process-wide pytesseract setting shared by every
    ``TesseractRecognizer``. It is applied once at import from
    ``config.tesseract_cmd``; the system PATH is used when it is unset.
    """
    if tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd


configure_tesseract_cmd(config.tesseract_cmd)


class Recognizer(ABC):
    """Capability interface for OCR engines.

    Instances are scoped to a single locate call and used as context managers,
    so ``close`` runs on every exit path.
    """

    @abstractmethod
    def recognize(self, image: np.ndarray) -> list[dict[str, Any]]:
        """Return the block hierarchy recognized in ``image``."""

    def close(self) -> None:
        """Release engine resources. Default is a no-op."""

    def __enter__(self) -> Recognizer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class TesseractRecognizer(Recognizer):
    """Recognizer backed by the Tesseract binary through *pytesseract*."""

    def __init__(
        self,
        lang: str = "eng",
        tesseract_config: str = "",
    ) -> None:
        """Initialize TesseractRecognizer.

        The executable path is not per instance; see
        :func:`configure_tesseract_cmd`.

        Parameters
        ----------
        lang : str
            Tesseract language code (default is ``"eng"``).
        tesseract_config : str
            Extra command line flags, e.g. ``"--psm 11"``.

        """
        self.lang = lang
        self.tesseract_config = tesseract_config
        self._closed = False

    def recognize(self, image: np.ndarray) -> list[dict[str, Any]]:
        if self._closed:
            raise RuntimeError("TesseractRecognizer used after close()")

        ocr_data = pytesseract.image_to_data(
            image,
            lang=self.lang,
            config=self.tesseract_config,
            output_type=pytesseract.Output.DICT,
        )
        blocks = build_hierarchy(ocr_data)
        log.debug(f"TesseractRecognizer produced {len(blocks)} blocks")
        return blocks

    def close(self) -> None:
        self._closed = True


def build_hierarchy(ocr_data: dict[str, list[Any]]) -> list[dict[str, Any]]:
    """Group Tesseract word rows into blocks, paragraphs and lines.

    Line text is the words joined by single spaces; the line box is the union
    of its word boxes. Empty words and rows with negative confidence are dropped.
    """
    blocks: dict[int, dict[int, dict[int, list[tuple[str, int, int, int, int]]]]] = {}

    n_boxes = len(ocr_data.get("text", []))
    for i in range(n_boxes):
        text = (ocr_data["text"][i] or "").strip()
        if not text:
            continue
        try:
            conf = float(ocr_data["conf"][i])
        except (TypeError, ValueError):
            continue
        if conf < 0:
            continue  # skip structural / rejected rows

        left, top = int(ocr_data["left"][i]), int(ocr_data["top"][i])
        width, height = int(ocr_data["width"][i]), int(ocr_data["height"][i])
        block_num = int(ocr_data["block_num"][i])
        par_num = int(ocr_data["par_num"][i])
        line_num = int(ocr_data["line_num"][i])

        words = blocks.setdefault(block_num, {}).setdefault(par_num, {}).setdefault(line_num, [])
        words.append((text, left, top, left + width, top + height))

    hierarchy: list[dict[str, Any]] = []
    for block_num in sorted(blocks):
        paragraphs = []
        for par_num in sorted(blocks[block_num]):
            lines = []
            for line_num in sorted(blocks[block_num][par_num]):
                words = blocks[block_num][par_num][line_num]
                lines.append(
                    {
                        "text": " ".join(w[0] for w in words),
                        "bbox": {
                            "x0": min(w[1] for w in words),
                            "y0": min(w[2] for w in words),
                            "x1": max(w[3] for w in words),
                            "y1": max(w[4] for w in words),
                        },
                    }
                )
            paragraphs.append({"lines": lines})
        hierarchy.append({"paragraphs": paragraphs})
    return hierarchy
