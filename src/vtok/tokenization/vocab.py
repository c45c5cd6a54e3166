"""Vocabulary store: the token/id bijection and its allocation counter."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from vtok.errors import InvalidId, InvalidToken
from vtok.tokenization.special import SpecialToken
from vtok.utils.logging import get_logger

logger = get_logger(__name__)


def _check_token(token: object) -> str:
    if not isinstance(token, str) or not token:
        raise InvalidToken(f"Token must be a non-empty string, got {token!r}.")
    return token


def _check_id(token_id: object) -> int:
    if isinstance(token_id, bool) or not isinstance(token_id, int):
        raise InvalidId(f"Token id must be an integer, got {token_id!r}.")
    if token_id < 0:
        raise InvalidId(f"Token id must be non-negative, got {token_id}.")
    return token_id


class Vocabulary:
    """Bidirectional token/id mapping.

    ``forward`` and ``reverse`` are kept as exact inverses and ``next_id`` is
    always one past the largest id in use. ``insert`` and ``insert_with_id``
    mutate the instance in place; operations that must leave the caller's
    vocabulary untouched on failure work on :meth:`copy`.
    """

    def __init__(self, forward: Mapping[str, int] | None = None) -> None:
        self._forward: dict[str, int] = {}
        self._reverse: dict[int, str] = {}
        if forward is None:
            forward = SpecialToken.fixed_ids()
        for token, token_id in forward.items():
            if token_id in self._reverse:
                raise ValueError(f"Duplicate id {token_id} for {token!r} and {self._reverse[token_id]!r}.")
            self._forward[token] = token_id
            self._reverse[token_id] = token
        self._next_id = max(self._reverse, default=-1) + 1

    @classmethod
    def create(cls) -> "Vocabulary":
        """Return a vocabulary holding only the five reserved special tokens."""
        return cls()

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, token: object) -> bool:
        return token in self._forward

    def __iter__(self) -> Iterator[str]:
        return iter(self._forward)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._forward == other._forward

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)}, next_id={self._next_id})"

    def copy(self) -> "Vocabulary":
        clone = Vocabulary.__new__(Vocabulary)
        clone._forward = dict(self._forward)
        clone._reverse = dict(self._reverse)
        clone._next_id = self._next_id
        return clone

    def lookup_id(self, token: str) -> int | None:
        return self._forward.get(token)

    def lookup_token(self, token_id: int) -> str | None:
        return self._reverse.get(token_id)

    def items(self) -> Iterator[tuple[str, int]]:
        return iter(self._forward.items())

    def to_mapping(self) -> dict[str, int]:
        return dict(self._forward)

    def special_ids(self) -> dict[str, int]:
        """Reserved special tokens currently present, with their ids."""
        return {
            special.value: self._forward[special.value]
            for special in SpecialToken
            if special.value in self._forward
        }

    def insert(self, token: str) -> int:
        """Add ``token`` at the next free id in place; existing ids are kept."""
        _check_token(token)
        existing = self._forward.get(token)
        if existing is not None:
            return existing
        token_id = self._next_id
        self._forward[token] = token_id
        self._reverse[token_id] = token
        self._next_id = token_id + 1
        return token_id

    def insert_with_id(self, token: str, token_id: int) -> None:
        """Map ``token`` to ``token_id`` in place.

        Whatever token held ``token_id`` before is evicted, and the previous
        id of ``token`` (if any) is released.
        """
        _check_token(token)
        _check_id(token_id)
        previous_id = self._forward.get(token)
        if previous_id == token_id:
            return
        occupant = self._reverse.get(token_id)
        if occupant is not None:
            logger.warning("Evicting %r from id %d in favour of %r", occupant, token_id, token)
            del self._forward[occupant]
        if previous_id is not None:
            del self._reverse[previous_id]
        self._forward[token] = token_id
        self._reverse[token_id] = token
        self._next_id = max(self._reverse, default=-1) + 1


def size(vocab: Vocabulary) -> int:
    return len(vocab)
