"""Text normalization shared by the learner and the codecs."""

from __future__ import annotations

import re

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Lower-case, replace punctuation with spaces and collapse whitespace."""
    lowered = text.lower()
    stripped = _NON_WORD.sub(" ", lowered)
    return _WHITESPACE.sub(" ", stripped).strip()


def normalize(text: str) -> list[str]:
    cleaned = clean_text(text)
    return [word for word in cleaned.split(" ") if word]
