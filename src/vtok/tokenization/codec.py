"""Word-level encoding and decoding against a vocabulary."""

from __future__ import annotations

from collections.abc import Iterable

from vtok.tokenization.normalize import normalize
from vtok.tokenization.special import SpecialToken
from vtok.tokenization.vocab import Vocabulary


def wrap_boundary(ids: list[int]) -> list[int]:
    return [SpecialToken.BOS.id] + ids + [SpecialToken.EOS.id]


def encode(vocab: Vocabulary, text: str, add_boundary_tokens: bool = True) -> list[int]:
    unk_id = SpecialToken.UNK.id
    ids = []
    for word in normalize(text):
        token_id = vocab.lookup_id(word)
        ids.append(unk_id if token_id is None else token_id)
    if add_boundary_tokens:
        ids = wrap_boundary(ids)
    return ids


def decode(vocab: Vocabulary, ids: Iterable[int], remove_special_tokens: bool = True) -> str:
    """Join the tokens for ``ids`` with single spaces.

    Ids without a mapping are skipped rather than rendered.
    """
    words = []
    for token_id in ids:
        token = vocab.lookup_token(token_id)
        if token is None:
            continue
        if remove_special_tokens and SpecialToken.lookup(token) is not None:
            continue
        words.append(token)
    return " ".join(words)
