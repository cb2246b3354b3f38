"""Ports (interfaces) for the similarity pipeline."""

from __future__ import annotations

from typing import List, Protocol

from ticketsim.domain.models import CandidateQuery, FeatureVector, ScoreBreakdown
from ticketsim.tickets import TicketRecord


class CandidateSourcePort(Protocol):
    def fetch_candidates(self, query: CandidateQuery) -> List[TicketRecord]:
        ...


class SimilarityScorerPort(Protocol):
    def score(self, draft: FeatureVector, candidate: FeatureVector) -> float:
        ...


class ExplainingScorerPort(SimilarityScorerPort, Protocol):
    """Optional extension: scorers that can break their score down per field."""

    def explain(self, draft: FeatureVector, candidate: FeatureVector) -> ScoreBreakdown:
        ...
