from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import pytest

from ticketsim.tickets import TicketCategory, TicketRecord, TicketStatus, build_ticket


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_ticket(now: datetime) -> Callable[..., TicketRecord]:
    ids = itertools.count(1)

    def _make(
        subject: str,
        description: Optional[str] = "",
        *,
        days_ago: float = 1,
        status: TicketStatus = TicketStatus.open,
        category: TicketCategory = TicketCategory.other,
        ticket_id: Optional[int] = None,
    ) -> TicketRecord:
        return build_ticket(
            ticket_id=ticket_id if ticket_id is not None else next(ids),
            subject=subject,
            description=description,
            category=category,
            status=status,
            created_at=now - timedelta(days=days_ago),
        )

    return _make
