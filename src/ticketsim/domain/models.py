"""Domain models for the similarity pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, FrozenSet, List, Optional

from pydantic import BaseModel

from ticketsim.tickets import TicketRecord, TicketStatus


class DraftTicket(BaseModel):
    subject: str
    description: str
    category: Optional[str] = None


class CandidateQuery(BaseModel):
    recency_days: int
    excluded_statuses: FrozenSet[TicketStatus]
    max_candidates: int
    now: datetime
    category: Optional[str] = None

    @property
    def cutoff(self) -> datetime:
        return self.now - timedelta(days=self.recency_days)


@dataclass(frozen=True)
class FeatureVector:
    subject_tokens: FrozenSet[str]
    description_tokens: FrozenSet[str]
    # Frequencies are kept for weighting experiments; scoring only uses the sets.
    subject_counts: Dict[str, int] = field(default_factory=dict)
    description_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.subject_tokens and not self.description_tokens


@dataclass(frozen=True)
class ScoredCandidate:
    record: TicketRecord
    score: float


class ScoreBreakdown(BaseModel):
    subject_similarity: float
    description_similarity: float
    score: float
    shared_subject_tokens: List[str]
    shared_description_tokens: List[str]

    def reason(self) -> str:
        return (
            f"subject_overlap={self.subject_similarity:.2f}; "
            f"description_overlap={self.description_similarity:.2f}"
        )


class SimilarityResult(BaseModel):
    id: int
    subject: str
    description_snippet: str
    category: str
    status: str
    created_at: datetime
    relevance_score: float


class SimilarityExplanation(BaseModel):
    result: SimilarityResult
    breakdown: ScoreBreakdown
