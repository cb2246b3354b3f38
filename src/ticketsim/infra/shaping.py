"""Turn scored candidates into the public result payload."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ticketsim.domain.models import ScoredCandidate, SimilarityResult

SNIPPET_LENGTH = 150
SNIPPET_MARKER = "..."


def description_snippet(description: Optional[str], limit: int = SNIPPET_LENGTH) -> str:
    text = description or ""
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + SNIPPET_MARKER


def round_score(value: float, places: int = 2) -> float:
    """Round half away from zero, so 0.125 becomes 0.13 rather than 0.12."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def shape_result(scored: ScoredCandidate, *, snippet_length: int = SNIPPET_LENGTH) -> SimilarityResult:
    """Build the minimal record exposed to callers.

    The full description and any other stored fields stay behind; only a
    snippet and the rounded score go out.
    """
    record = scored.record
    return SimilarityResult(
        id=record.id,
        subject=record.subject,
        description_snippet=description_snippet(record.description, snippet_length),
        category=record.category.value,
        status=record.status.value,
        created_at=record.created_at,
        relevance_score=round_score(scored.score),
    )
