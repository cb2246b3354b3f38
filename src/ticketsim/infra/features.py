"""Per-field feature extraction."""

from __future__ import annotations

from typing import Optional

from ticketsim.domain.models import FeatureVector
from ticketsim.normalize import normalize_text
from ticketsim.tokens import MIN_TOKEN_LENGTH, count_tokens, tokenize


def build_features(
    subject: Optional[str],
    description: Optional[str],
    *,
    min_token_length: int = MIN_TOKEN_LENGTH,
) -> FeatureVector:
    """Tokenize subject and description independently; the fields are never merged."""
    subject_text = normalize_text(subject)
    description_text = normalize_text(description)
    return FeatureVector(
        subject_tokens=tokenize(subject_text, min_length=min_token_length),
        description_tokens=tokenize(description_text, min_length=min_token_length),
        subject_counts=count_tokens(subject_text, min_length=min_token_length),
        description_counts=count_tokens(description_text, min_length=min_token_length),
    )
