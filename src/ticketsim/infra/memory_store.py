"""In-memory candidate source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from ticketsim.domain.models import CandidateQuery
from ticketsim.domain.ports import CandidateSourcePort
from ticketsim.tickets import TicketRecord


@dataclass
class InMemoryTicketStore(CandidateSourcePort):
    tickets: Sequence[TicketRecord] = field(default_factory=list)

    def fetch_candidates(self, query: CandidateQuery) -> List[TicketRecord]:
        return select_candidates(self.tickets, query)


def select_candidates(tickets: Iterable[TicketRecord], query: CandidateQuery) -> List[TicketRecord]:
    """Apply the shortlist filters: status, recency window, optional category, cap.

    Results are ordered newest first; equal timestamps fall back to the higher id.
    """
    cutoff = query.cutoff
    shortlisted = [
        ticket
        for ticket in tickets
        if ticket.status not in query.excluded_statuses
        and ticket.created_at >= cutoff
        and _matches_category(query, ticket)
    ]
    shortlisted.sort(key=lambda ticket: (ticket.created_at, ticket.id), reverse=True)
    return shortlisted[: query.max_candidates]


def _matches_category(query: CandidateQuery, ticket: TicketRecord) -> bool:
    if not query.category:
        return True
    return ticket.category.value == query.category
