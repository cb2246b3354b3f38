from __future__ import annotations

from datetime import datetime
from typing import Optional

from ticketsim.domain.models import CandidateQuery
from ticketsim.infra.memory_store import InMemoryTicketStore
from ticketsim.tickets import TicketCategory, TicketStatus


def _query(now: datetime, *, max_candidates: int = 500, category: Optional[str] = None) -> CandidateQuery:
    return CandidateQuery(
        recency_days=90,
        excluded_statuses=frozenset({TicketStatus.closed, TicketStatus.resolved}),
        max_candidates=max_candidates,
        now=now,
        category=category,
    )


def test_recency_window(make_ticket, now):
    store = InMemoryTicketStore(
        [
            make_ticket("VPN Connection", days_ago=91),
            make_ticket("VPN Connection", days_ago=90),
            make_ticket("VPN Connection", days_ago=30),
        ]
    )
    assert [ticket.id for ticket in store.fetch_candidates(_query(now))] == [3, 2]


def test_excludes_closed_and_resolved(make_ticket, now):
    store = InMemoryTicketStore(
        [
            make_ticket("Closed", status=TicketStatus.closed),
            make_ticket("Resolved", status=TicketStatus.resolved),
            make_ticket("Open", status=TicketStatus.open),
            make_ticket("In progress", status=TicketStatus.in_progress),
        ]
    )
    subjects = [ticket.subject for ticket in store.fetch_candidates(_query(now))]
    assert sorted(subjects) == ["In progress", "Open"]


def test_orders_newest_first_and_caps(make_ticket, now):
    store = InMemoryTicketStore([make_ticket(f"Ticket {days}", days_ago=days) for days in (5, 1, 3, 2, 4)])
    candidates = store.fetch_candidates(_query(now, max_candidates=3))
    assert [ticket.subject for ticket in candidates] == ["Ticket 1", "Ticket 2", "Ticket 3"]


def test_same_timestamp_orders_by_id(make_ticket, now):
    store = InMemoryTicketStore([make_ticket("A", days_ago=2), make_ticket("B", days_ago=2)])
    assert [ticket.id for ticket in store.fetch_candidates(_query(now))] == [2, 1]


def test_category_filter_only_when_requested(make_ticket, now):
    store = InMemoryTicketStore(
        [
            make_ticket("VPN", category=TicketCategory.network),
            make_ticket("Laptop", category=TicketCategory.hardware),
        ]
    )
    assert len(store.fetch_candidates(_query(now))) == 2
    filtered = store.fetch_candidates(_query(now, category="network"))
    assert [ticket.subject for ticket in filtered] == ["VPN"]


def test_empty_store(now):
    assert InMemoryTicketStore().fetch_candidates(_query(now)) == []
