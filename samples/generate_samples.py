"""Generate a small sample ticket store for the ticketsim demo."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import yaml

from ticketsim.io.jsonl import write_jsonl
from ticketsim.tickets import TicketCategory, TicketStatus, build_ticket

BASE_DIR = Path(__file__).resolve().parent
INPUT_DIR = BASE_DIR / "input"

SAMPLE_TICKETS = [
    # (days ago, subject, description, category, status)
    (2, "VPN down for East Coast users", "Started this morning. East coast office cannot reach the VPN gateway.", TicketCategory.network, TicketStatus.open),
    (5, "VPN client keeps disconnecting", "Remote staff report the VPN client drops every few minutes.", TicketCategory.network, TicketStatus.in_progress),
    (9, "Password reset link expired", "Reset emails arrive after the link has already expired.", TicketCategory.access, TicketStatus.open),
    (14, "Printer on floor 3 jams", "The shared printer jams on every duplex job.", TicketCategory.hardware, TicketStatus.open),
    (20, "Cannot connect to corporate VPN", "Users cannot connect to the corporate VPN from hotel networks.", TicketCategory.network, TicketStatus.resolved),
    (45, "Expense report form crashes", "Submitting an expense report with attachments crashes the form.", TicketCategory.bug, TicketStatus.open),
    (120, "VPN certificate expired", "All VPN connections failed after the certificate expired.", TicketCategory.network, TicketStatus.open),
]


def main() -> int:
    INPUT_DIR.mkdir(parents=True, exist_ok=True)
    _generate_tickets()
    _generate_config()
    return 0


def _generate_tickets() -> None:
    now = datetime.now(timezone.utc)
    tickets = [
        build_ticket(
            ticket_id=idx,
            subject=subject,
            description=description,
            category=category,
            status=status,
            created_at=now - timedelta(days=days_ago),
        )
        for idx, (days_ago, subject, description, category, status) in enumerate(SAMPLE_TICKETS, start=1)
    ]
    output_path = INPUT_DIR / "tickets.jsonl"
    count = write_jsonl(output_path, tickets)
    print(f"Generated {count} tickets in {output_path}")


def _generate_config() -> None:
    output_path = INPUT_DIR / "ticketsim.yml"
    payload = {
        "version": 1,
        "store": {"tickets_paths": ["tickets.jsonl"]},
        "similarity": {"recency_days": 90, "top_results": 5},
    }
    output_path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    print(f"Generated {output_path}")


if __name__ == "__main__":
    sys.exit(main())
