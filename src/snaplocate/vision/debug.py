"""Vision debugging helpers: dump variant images and draw candidate boxes."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import cv2  # type: ignore
import numpy as np  # type: ignore

from ..core.config import Config, config
from ..core.logger import log
from .models import CandidateMatch, Screenshot
from .transforms import RemoveAlpha

CANDIDATE_COLOR = (0, 0, 255)  # Red in BGR
BEST_COLOR = (0, 200, 0)


def _debug_dir(settings: Config) -> Path:
    debug_dir = Path(settings.ocr_images_dir)
    debug_dir.mkdir(parents=True, exist_ok=True)
    return debug_dir


def save_variant_image(name: str, image: np.ndarray, settings: Config | None = None) -> Optional[Path]:
    """Write a preprocessed variant image as ``<name>.png``."""
    settings = settings or config
    if not settings.save_vision_debug:
        return None

    path = _debug_dir(settings) / f"{name}.png"
    if not cv2.imwrite(str(path), image):
        log.warning(f"Failed to write variant debug image {path}")
        return None
    return path


def save_debug_overlay(
    screenshot: Screenshot,
    candidates: Sequence[CandidateMatch],
    best: Optional[CandidateMatch],
    settings: Config | None = None,
) -> Optional[Path]:
    """Draw every candidate (red) and the chosen one (green) on the screenshot."""
    settings = settings or config
    if not settings.save_vision_debug:
        return None

    img = RemoveAlpha().apply(screenshot.image)
    if img.ndim == 2:
        img = cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
    else:
        img = img.copy()

    font = cv2.FONT_HERSHEY_SIMPLEX
    font_scale = 0.5
    for cand in candidates:
        color = BEST_COLOR if cand is best else CANDIDATE_COLOR
        b = cand.bbox
        x1, y1, x2, y2 = b.x, b.y, b.x + b.width, b.y + b.height
        cv2.rectangle(img, (x1, y1), (x2, y2), color, thickness=3)

        # Label with a white background for legibility
        label = f"{cand.source_variant}:{cand.length_delta}"
        (text_w, text_h), _ = cv2.getTextSize(label, font, font_scale, 1)
        text_bg_tl = (x1, max(0, y1 - text_h - 4))
        text_bg_br = (x1 + text_w + 4, max(0, y1))
        cv2.rectangle(img, text_bg_tl, text_bg_br, (255, 255, 255), thickness=cv2.FILLED)
        cv2.putText(
            img,
            label,
            (x1 + 2, max(10, y1 - 2)),
            font,
            font_scale,
            color,
            thickness=1,
            lineType=cv2.LINE_AA,
        )

    path = _debug_dir(settings) / "overlay.png"
    if not cv2.imwrite(str(path), img):
        log.warning(f"Failed to write debug overlay {path}")
        return None
    return path
