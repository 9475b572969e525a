"""Pick the best candidate across all variants."""

from __future__ import annotations

from typing import Iterable, Optional

from .models import CandidateMatch


def _rank_key(candidate: CandidateMatch) -> tuple[int, int]:
    # Closest length first, then the lowest on screen (tunable heuristic).
    return candidate.length_delta, -candidate.bbox.y


def rank_candidates(candidates: Iterable[CandidateMatch]) -> list[CandidateMatch]:
    """Return candidates best-first.

    The sort is stable, so full ties keep variant evaluation order.
    """
    return sorted(candidates, key=_rank_key)


def select_best(candidates: Iterable[CandidateMatch]) -> Optional[CandidateMatch]:
    """Return the best candidate, or ``None`` when there is none."""
    ranked = rank_candidates(candidates)
    return ranked[0] if ranked else None
