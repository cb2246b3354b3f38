"""JSONL writer."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ticketsim.tickets import TicketRecord


def write_jsonl(path: Path, tickets: Iterable[TicketRecord]) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", encoding="utf-8") as handle:
        for ticket in tickets:
            handle.write(ticket.model_dump_json())
            handle.write("\n")
            count += 1
    return count
