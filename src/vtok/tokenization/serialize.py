"""Conversion between a Vocabulary and its persisted record.

Record shape::

    {"vocab": {token: id, ...}, "specialTokens": {token: id, ...}, "nextTokenId": int}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vtok.errors import MalformedVocabulary
from vtok.tokenization.vocab import Vocabulary
from vtok.utils.logging import get_logger

logger = get_logger(__name__)


def serialize(vocab: Vocabulary) -> dict[str, Any]:
    return {
        "vocab": vocab.to_mapping(),
        "specialTokens": vocab.special_ids(),
        "nextTokenId": vocab.next_id,
    }


def _validated_mapping(record: object) -> dict[str, int]:
    if not isinstance(record, Mapping):
        raise MalformedVocabulary(f"Vocabulary record must be a mapping, got {type(record).__name__}.")
    raw = record.get("vocab")
    if not isinstance(raw, Mapping):
        raise MalformedVocabulary("Vocabulary record is missing a 'vocab' mapping.")

    forward: dict[str, int] = {}
    owners: dict[int, str] = {}
    for token, token_id in raw.items():
        if not isinstance(token, str) or not token:
            raise MalformedVocabulary(f"Invalid token {token!r} in vocabulary record.")
        if isinstance(token_id, bool) or not isinstance(token_id, int):
            raise MalformedVocabulary(f"Token {token!r} has non-integer id {token_id!r}.")
        if token_id < 0:
            raise MalformedVocabulary(f"Token {token!r} has negative id {token_id}.")
        if token_id in owners:
            raise MalformedVocabulary(f"Duplicate id {token_id} for {owners[token_id]!r} and {token!r}.")
        owners[token_id] = token
        forward[token] = token_id
    return forward


def deserialize(record: object) -> Vocabulary:
    """Rebuild a Vocabulary from a persisted record.

    ``nextTokenId`` is informational only; the counter is recomputed from the
    ids found in ``vocab``.
    """
    vocab = Vocabulary(_validated_mapping(record))
    declared = record.get("nextTokenId")  # type: ignore[union-attr]
    if declared is not None and declared != vocab.next_id:
        logger.debug("Ignoring nextTokenId=%r; recomputed %d from the mapping", declared, vocab.next_id)
    return vocab
