"""Token extraction from normalized text."""

from __future__ import annotations

from collections import Counter
from typing import AbstractSet, Dict, FrozenSet, List

MIN_TOKEN_LENGTH = 2

STOPWORDS: FrozenSet[str] = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
        "has", "he", "in", "is", "it", "its", "of", "on", "or", "that",
        "the", "to", "was", "will", "with", "this", "but", "not",
        "if", "can", "have", "we", "they", "their", "what", "which", "who",
    }
)


def token_stream(
    normalized_text: str,
    *,
    min_length: int = MIN_TOKEN_LENGTH,
    stopwords: AbstractSet[str] = STOPWORDS,
) -> List[str]:
    """Split normalized text into meaningful tokens, keeping duplicates and order."""
    return [
        token
        for token in normalized_text.split()
        if token not in stopwords and len(token) >= min_length
    ]


def tokenize(normalized_text: str, *, min_length: int = MIN_TOKEN_LENGTH) -> FrozenSet[str]:
    return frozenset(token_stream(normalized_text, min_length=min_length))


def count_tokens(normalized_text: str, *, min_length: int = MIN_TOKEN_LENGTH) -> Dict[str, int]:
    return dict(Counter(token_stream(normalized_text, min_length=min_length)))
