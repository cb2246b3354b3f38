"""Configuration loading for ticketsim."""

from __future__ import annotations

from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, field_validator

from ticketsim.infra.ranking import MIN_RELEVANCE_SCORE, TOP_RESULTS
from ticketsim.infra.scoring import DESCRIPTION_WEIGHT, SUBJECT_WEIGHT
from ticketsim.infra.shaping import SNIPPET_LENGTH
from ticketsim.tickets import TicketStatus
from ticketsim.tokens import MIN_TOKEN_LENGTH


class StoreConfig(BaseModel):
    tickets_paths: List[str]


class SimilaritySettings(BaseModel):
    recency_days: int = Field(default=90, ge=1)
    excluded_statuses: List[TicketStatus] = Field(
        default_factory=lambda: [TicketStatus.closed, TicketStatus.resolved]
    )
    max_candidates: int = Field(default=500, ge=1)
    require_category_match: bool = False
    subject_weight: float = Field(default=SUBJECT_WEIGHT, ge=0.0, le=1.0)
    description_weight: float = Field(default=DESCRIPTION_WEIGHT, ge=0.0, le=1.0)
    min_relevance_score: float = Field(default=MIN_RELEVANCE_SCORE, ge=0.0, le=1.0)
    top_results: int = Field(default=TOP_RESULTS, ge=1)
    min_token_length: int = Field(default=MIN_TOKEN_LENGTH, ge=1)
    snippet_length: int = Field(default=SNIPPET_LENGTH, ge=1)


class TicketsimConfig(BaseModel):
    version: int
    store: StoreConfig
    similarity: SimilaritySettings = SimilaritySettings()

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: int) -> int:
        if value != 1:
            raise ValueError("Only version 1 config is supported")
        return value


def load_config(path: str) -> TicketsimConfig:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")
    payload = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    return TicketsimConfig(**payload)
