"""Reserved special tokens."""

from __future__ import annotations

from enum import Enum


class SpecialToken(str, Enum):
    PAD = "<PAD>"
    UNK = "<UNK>"
    BOS = "<BOS>"
    EOS = "<EOS>"
    SEP = "<SEP>"

    @property
    def id(self) -> int:
        return _FIXED_IDS[self]

    @classmethod
    def fixed_ids(cls) -> dict[str, int]:
        return {token.value: token.id for token in cls}

    @classmethod
    def lookup(cls, token: str) -> "SpecialToken | None":
        try:
            return cls(token)
        except ValueError:
            return None


_FIXED_IDS = {
    SpecialToken.PAD: 0,
    SpecialToken.UNK: 1,
    SpecialToken.BOS: 2,
    SpecialToken.EOS: 3,
    SpecialToken.SEP: 4,
}
