"""Normalization utilities."""

import re
from typing import Optional


_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^\w\s]")


def normalize_light(text: str) -> str:
    """Collapse whitespace runs and strip leading/trailing whitespace."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_text(text: Optional[str]) -> str:
    """Lowercase, turn punctuation and symbols into spaces, then collapse whitespace.

    "VPN!!!down" and "vpn down" normalize to the same string. The result is a
    fixed point: normalizing it again returns it unchanged.
    """
    if not text:
        return ""
    return normalize_light(_NON_WORD_RE.sub(" ", text.lower()))
