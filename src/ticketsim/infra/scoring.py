"""Deterministic scoring helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet

from ticketsim.domain.models import FeatureVector, ScoreBreakdown
from ticketsim.domain.ports import SimilarityScorerPort

SUBJECT_WEIGHT = 0.65
DESCRIPTION_WEIGHT = 0.35


def jaccard(left: AbstractSet[str], right: AbstractSet[str]) -> float:
    """Intersection over union; an empty side carries no signal and scores 0.0."""
    if not left or not right:
        return 0.0
    return len(left & right) / len(left | right)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _overlap(
    draft: FeatureVector, candidate: FeatureVector, score: float
) -> ScoreBreakdown:
    return ScoreBreakdown(
        subject_similarity=jaccard(draft.subject_tokens, candidate.subject_tokens),
        description_similarity=jaccard(draft.description_tokens, candidate.description_tokens),
        score=score,
        shared_subject_tokens=sorted(draft.subject_tokens & candidate.subject_tokens),
        shared_description_tokens=sorted(draft.description_tokens & candidate.description_tokens),
    )


@dataclass(frozen=True)
class WeightedJaccardScorer(SimilarityScorerPort):
    subject_weight: float = SUBJECT_WEIGHT
    description_weight: float = DESCRIPTION_WEIGHT

    def score(self, draft: FeatureVector, candidate: FeatureVector) -> float:
        subject_similarity = jaccard(draft.subject_tokens, candidate.subject_tokens)
        description_similarity = jaccard(draft.description_tokens, candidate.description_tokens)
        return self._combine(subject_similarity, description_similarity)

    def explain(self, draft: FeatureVector, candidate: FeatureVector) -> ScoreBreakdown:
        breakdown = _overlap(draft, candidate, 0.0)
        score = self._combine(breakdown.subject_similarity, breakdown.description_similarity)
        return breakdown.model_copy(update={"score": score})

    def _combine(self, subject_similarity: float, description_similarity: float) -> float:
        return clamp(
            subject_similarity * self.subject_weight
            + description_similarity * self.description_weight
        )


def explain_score(
    scorer: SimilarityScorerPort, draft: FeatureVector, candidate: FeatureVector
) -> ScoreBreakdown:
    """Break a score down per field for any scorer.

    Scorers that implement ``explain`` provide their own breakdown. For the
    rest the score comes from ``score`` and the per-field overlap is reported
    alongside it.
    """
    explain = getattr(scorer, "explain", None)
    if callable(explain):
        return explain(draft, candidate)
    return _overlap(draft, candidate, scorer.score(draft, candidate))
