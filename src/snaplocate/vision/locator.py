"""Locate a phrase on a device screenshot.

The screenshot is preprocessed into several variants, each variant is run
through OCR, matching lines are remapped to the original pixel space and the
best candidate across all variants is returned.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import time
from pathlib import Path
from typing import Callable, Optional

from ..core.config import Config, config
from ..core.errors import ImageDecodeError, InvalidSearchTextError, RecognitionError
from ..core.logger import log
from .adapter import recognize_lines
from .candidates import collect_candidates, normalize_text
from .debug import save_debug_overlay, save_variant_image
from .models import CandidateMatch, Screenshot, TextBounds, Variant, VariantOutcome
from .recognizer import Recognizer, TesseractRecognizer
from .selector import rank_candidates
from .transforms import apply_transforms
from .variants import generate_variants

RecognizerFactory = Callable[[], Recognizer]


class TextLocator:
    """Find the bounding box of a phrase on a screenshot using OCR."""

    def __init__(
        self,
        settings: Config | None = None,
        recognizer_factory: RecognizerFactory | None = None,
    ) -> None:
        """Initialize TextLocator.

        Parameters
        ----------
        settings : Config, optional
            Locator configuration; the global ``config`` is used when omitted.
        recognizer_factory : callable, optional
            Zero-argument callable building a fresh ``Recognizer``. One
            recognizer is created and closed per ``locate`` call. Defaults to
            a ``TesseractRecognizer`` configured from ``settings``.

        """
        self.settings = settings or config
        self.settings.validate_config()
        self._recognizer_factory = recognizer_factory or self._default_recognizer

    def _default_recognizer(self) -> Recognizer:
        return TesseractRecognizer(
            lang=self.settings.tesseract_lang,
            tesseract_config=self.settings.tesseract_config,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def locate(self, image_bytes: bytes, search_text: str) -> Optional[TextBounds]:
        """Return the box of ``search_text`` in original pixels, or ``None`` if absent.

        Raises:
            InvalidSearchTextError: If ``search_text`` is blank.
            ImageDecodeError: If ``image_bytes`` cannot be decoded.
            RecognitionError: If OCR failed for every variant.

        """
        ranked = self.locate_candidates(image_bytes, search_text)
        if not ranked:
            log.info(f"Text {search_text!r} not found")
            return None

        best = ranked[0]
        log.info(
            f"Text {search_text!r} found as {best.matched_text!r} "
            f"via {best.source_variant} at {best.bbox.as_dict()}"
        )
        return best.bbox

    def locate_candidates(self, image_bytes: bytes, search_text: str) -> list[CandidateMatch]:
        """Return every candidate across all variants, best first."""
        if not isinstance(search_text, str) or not normalize_text(search_text):
            raise InvalidSearchTextError("Search text must contain at least one non-space character")

        start = time.perf_counter()
        screenshot = Screenshot.from_bytes(image_bytes)
        variants = generate_variants(screenshot.width, screenshot.height, self.settings)
        log.debug(
            f"Searching {search_text!r} in {screenshot.width}x{screenshot.height} "
            f"screenshot using {len(variants)} variants"
        )

        with self._recognizer_factory() as recognizer:
            outcomes = self._evaluate_all(screenshot, variants, recognizer, search_text)

        failures = [(o.variant.name, o.error) for o in outcomes if o.failed]
        if outcomes and len(failures) == len(outcomes):
            raise RecognitionError(
                f"OCR failed for all {len(outcomes)} variants", failures=failures
            ) from failures[-1][1]

        candidates = [cand for outcome in outcomes for cand in outcome.candidates]
        ranked = rank_candidates(candidates)

        if self.settings.save_vision_debug:
            try:
                save_debug_overlay(screenshot, ranked, ranked[0] if ranked else None, self.settings)
            except Exception as exc:  # pragma: no cover
                log.warning(f"Failed to save debug overlay: {exc}")

        log.log_performance("locate_text", (time.perf_counter() - start) * 1000)
        return ranked

    async def alocate(self, image_bytes: bytes, search_text: str) -> Optional[TextBounds]:
        """Async wrapper around :meth:`locate` running in a worker thread.

        Callers may wrap this in ``asyncio.wait_for`` to bound the search time.
        """
        return await asyncio.to_thread(self.locate, image_bytes, search_text)

    # ------------------------------------------------------------------
    # Variant evaluation
    # ------------------------------------------------------------------
    def _evaluate_all(
        self,
        screenshot: Screenshot,
        variants: list[Variant],
        recognizer: Recognizer,
        search_text: str,
    ) -> list[VariantOutcome]:
        """Evaluate every variant; results are always in ``variants`` order."""

        def _evaluate(variant: Variant) -> VariantOutcome:
            return self._evaluate_variant(screenshot, variant, recognizer, search_text)

        workers = min(self.settings.locator_workers, len(variants))
        if workers <= 1:
            return [_evaluate(variant) for variant in variants]

        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(_evaluate, variants))

    def _evaluate_variant(
        self,
        screenshot: Screenshot,
        variant: Variant,
        recognizer: Recognizer,
        search_text: str,
    ) -> VariantOutcome:
        """Preprocess, recognize and collect candidates for a single variant.

        Preprocessing and OCR errors are isolated to this variant. Remap range
        errors are not: they indicate a bug and propagate.
        """
        outcome = VariantOutcome(variant=variant)
        try:
            image = apply_transforms(screenshot.image, variant.steps)
            outcome.lines = recognize_lines(recognizer, image)
        except Exception as exc:
            log.warning(f"Variant {variant.name} ({variant.describe()}) failed: {exc}")
            outcome.error = exc
            return outcome

        if self.settings.save_vision_debug:
            try:
                save_variant_image(variant.name, image, self.settings)
            except Exception as exc:  # pragma: no cover
                log.warning(f"Failed to save variant image {variant.name}: {exc}")

        outcome.candidates = collect_candidates(
            outcome.lines,
            search_text,
            variant,
            image_size=(screenshot.width, screenshot.height),
            tolerance=self.settings.bounds_tolerance_px,
        )
        log.log_variant_result(variant.name, outcome.lines, outcome.candidates)
        return outcome


def find_text_bounds(
    image_bytes: bytes,
    search_text: str,
    *,
    settings: Config | None = None,
    recognizer_factory: RecognizerFactory | None = None,
) -> Optional[TextBounds]:
    """Locate ``search_text`` in an encoded screenshot; ``None`` when not found."""
    locator = TextLocator(settings=settings, recognizer_factory=recognizer_factory)
    return locator.locate(image_bytes, search_text)


def find_text_bounds_in_file(
    path: str | Path,
    search_text: str,
    *,
    settings: Config | None = None,
    recognizer_factory: RecognizerFactory | None = None,
) -> Optional[TextBounds]:
    """Same as :func:`find_text_bounds` for a screenshot stored on disk."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ImageDecodeError(f"Screenshot not found or unreadable: {path}") from exc
    return find_text_bounds(
        data,
        search_text,
        settings=settings,
        recognizer_factory=recognizer_factory,
    )
