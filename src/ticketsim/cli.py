"""CLI for ticketsim."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from ticketsim.config import load_config
from ticketsim.domain.models import DraftTicket
from ticketsim.normalize import normalize_text
from ticketsim.server.wire import build_services
from ticketsim.tokens import tokenize

app = typer.Typer(help="ticketsim CLI")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    """Suggest similar helpdesk tickets for a draft."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def similar(
    config: str = typer.Option(..., "--config", help="Path to config YAML"),
    subject: str = typer.Option(..., "--subject", help="Draft ticket subject"),
    description: str = typer.Option(..., "--description", help="Draft ticket description"),
    category: Optional[str] = typer.Option(None, "--category", help="Draft ticket category"),
    explain: bool = typer.Option(False, "--explain", help="Include a score breakdown per result"),
) -> None:
    """Print the most similar recent tickets as JSON."""
    cfg = load_config(config)
    services = build_services(Path(config), cfg)
    draft = DraftTicket(subject=subject, description=description, category=category)

    payload: List[Dict[str, Any]]
    if explain:
        payload = []
        for item in services.explain_similar(draft):
            entry = item.result.model_dump(mode="json")
            entry["reason"] = item.breakdown.reason()
            payload.append(entry)
    else:
        payload = [result.model_dump(mode="json") for result in services.find_similar(draft)]
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def tokens(text: str = typer.Argument(..., help="Text to normalize and tokenize")) -> None:
    """Show how a text is normalized and which tokens survive filtering."""
    normalized = normalize_text(text)
    typer.echo(f"normalized: {normalized}")
    typer.echo(f"tokens: {' '.join(sorted(tokenize(normalized)))}")
