"""REST API adapter."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict, Field

from ticketsim.domain.models import DraftTicket
from ticketsim.server.wire import ServiceBundle


class SimilarTicketsRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    subject: str = Field(min_length=3, max_length=255)
    description: str = Field(min_length=10, max_length=10000)
    category: Optional[str] = Field(default=None, max_length=50)


def create_app(services: ServiceBundle) -> FastAPI:
    app = FastAPI(title="ticketsim (REST)")

    @app.get("/healthz")
    def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/tickets/similar")
    def similar_tickets(payload: SimilarTicketsRequest) -> List[Dict[str, Any]]:
        draft = DraftTicket(
            subject=payload.subject,
            description=payload.description,
            category=payload.category,
        )
        results = services.find_similar(draft)
        return [result.model_dump(mode="json") for result in results]

    return app
