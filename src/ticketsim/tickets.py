"""Ticket record model and helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, field_validator


class TicketStatus(str, Enum):
    open = "open"
    in_progress = "in_progress"
    resolved = "resolved"
    closed = "closed"


class TicketCategory(str, Enum):
    access = "access"
    hardware = "hardware"
    network = "network"
    bug = "bug"
    other = "other"


class TicketRecord(BaseModel):
    """Read-only view of a stored ticket, as handed over by a candidate source."""

    id: int
    subject: str
    description: Optional[str] = None
    category: TicketCategory = TicketCategory.other
    status: TicketStatus = TicketStatus.open
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


def build_ticket(
    *,
    ticket_id: int,
    subject: str,
    description: Optional[str],
    created_at: datetime,
    category: Union[TicketCategory, str] = TicketCategory.other,
    status: Union[TicketStatus, str] = TicketStatus.open,
) -> TicketRecord:
    return TicketRecord(
        id=ticket_id,
        subject=subject,
        description=description,
        category=TicketCategory(category),
        status=TicketStatus(status),
        created_at=created_at,
    )
