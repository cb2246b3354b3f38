"""Threshold and rank shaped results."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, TypeVar

from ticketsim.domain.models import SimilarityResult

MIN_RELEVANCE_SCORE = 0.05
TOP_RESULTS = 5

T = TypeVar("T")


def _relevance(result: SimilarityResult) -> float:
    return result.relevance_score


def rank_results(
    results: Iterable[T],
    *,
    min_score: float = MIN_RELEVANCE_SCORE,
    top_k: int = TOP_RESULTS,
    key: Optional[Callable[[T], float]] = None,
) -> List[T]:
    """Keep items at or above ``min_score`` and return the best ``top_k``.

    ``key`` reads the rounded relevance score; it defaults to
    ``SimilarityResult.relevance_score`` and lets callers rank richer items
    that carry a result alongside other data.
    """
    score_of = key or _relevance
    # list.sort is stable, so equal scores keep the candidate source order
    # (most recent first).
    kept = [item for item in results if score_of(item) >= min_score]
    kept.sort(key=score_of, reverse=True)
    return kept[:top_k]
