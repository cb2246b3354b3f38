"""JSONL-backed candidate source."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence

from ticketsim.domain.models import CandidateQuery
from ticketsim.domain.ports import CandidateSourcePort
from ticketsim.infra.memory_store import select_candidates
from ticketsim.tickets import TicketRecord

logger = logging.getLogger(__name__)


@dataclass
class JsonlTicketStore(CandidateSourcePort):
    paths: Sequence[Path]

    def __post_init__(self) -> None:
        self._by_id: Dict[int, TicketRecord] = {}
        for path in self.paths:
            self._load_path(Path(path))

    def __len__(self) -> int:
        return len(self._by_id)

    def fetch_candidates(self, query: CandidateQuery) -> List[TicketRecord]:
        return select_candidates(self._by_id.values(), query)

    def _load_path(self, path: Path) -> None:
        if not path.exists():
            raise FileNotFoundError(f"Tickets JSONL not found: {path}")
        with path.open("r", encoding="utf-8") as handle:
            for line in handle:
                payload = line.strip()
                if not payload:
                    continue
                ticket = TicketRecord(**json.loads(payload))
                if ticket.id in self._by_id:
                    logger.debug("Skipping duplicate ticket %s in %s", ticket.id, path)
                    continue
                self._by_id[ticket.id] = ticket
