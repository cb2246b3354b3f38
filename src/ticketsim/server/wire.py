"""Composition root for the ticketsim server and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ticketsim.config import SimilaritySettings, TicketsimConfig
from ticketsim.domain.models import DraftTicket, SimilarityExplanation, SimilarityResult
from ticketsim.domain.ports import CandidateSourcePort, SimilarityScorerPort
from ticketsim.infra.jsonl_store import JsonlTicketStore
from ticketsim.infra.scoring import WeightedJaccardScorer
from ticketsim.paths import resolve_config_paths
from ticketsim.usecases.find_similar import explain_similar_tickets, find_similar_tickets


@dataclass
class ServiceBundle:
    source: CandidateSourcePort
    settings: SimilaritySettings = field(default_factory=SimilaritySettings)
    scorer: Optional[SimilarityScorerPort] = None

    def __post_init__(self) -> None:
        if self.scorer is None:
            self.scorer = build_scorer(self.settings)

    def find_similar(
        self, draft: DraftTicket, *, now: Optional[datetime] = None
    ) -> List[SimilarityResult]:
        return find_similar_tickets(
            self.source, draft, settings=self.settings, scorer=self.scorer, now=now
        )

    def explain_similar(
        self, draft: DraftTicket, *, now: Optional[datetime] = None
    ) -> List[SimilarityExplanation]:
        return explain_similar_tickets(
            self.source, draft, settings=self.settings, scorer=self.scorer, now=now
        )


def build_scorer(settings: SimilaritySettings) -> WeightedJaccardScorer:
    return WeightedJaccardScorer(
        subject_weight=settings.subject_weight,
        description_weight=settings.description_weight,
    )


def build_services(config_path: Path, config: TicketsimConfig) -> ServiceBundle:
    ticket_paths = resolve_config_paths(config_path, config.store.tickets_paths)
    store = JsonlTicketStore(ticket_paths)
    return ServiceBundle(
        source=store,
        settings=config.similarity,
        scorer=build_scorer(config.similarity),
    )
