"""Best-effort subword segmentation for out-of-vocabulary words."""

from __future__ import annotations

from vtok.tokenization.codec import wrap_boundary
from vtok.tokenization.normalize import normalize
from vtok.tokenization.special import SpecialToken
from vtok.tokenization.vocab import Vocabulary

DEFAULT_MAX_SUBWORD_LENGTH = 8


def segment_word(vocab: Vocabulary, word: str, max_length: int = DEFAULT_MAX_SUBWORD_LENGTH) -> list[str]:
    """Split ``word`` into a left-to-right, non-overlapping partition.

    At each position the longest vocabulary entry (up to ``max_length``
    characters) starting there is consumed. A character that starts no
    entry becomes a piece of its own.
    """
    limit = max(1, max_length)
    pieces: list[str] = []
    idx = 0
    while idx < len(word):
        match = None
        for length in range(min(limit, len(word) - idx), 0, -1):
            candidate = word[idx : idx + length]
            if candidate in vocab:
                match = candidate
                break
        if match is None:
            match = word[idx]
        pieces.append(match)
        idx += len(match)
    return pieces


def encode_subword(
    vocab: Vocabulary,
    text: str,
    add_boundary_tokens: bool = True,
    max_length: int = DEFAULT_MAX_SUBWORD_LENGTH,
) -> list[int]:
    unk_id = SpecialToken.UNK.id
    ids: list[int] = []
    for word in normalize(text):
        whole = vocab.lookup_id(word)
        if whole is not None:
            ids.append(whole)
            continue
        for piece in segment_word(vocab, word, max_length):
            token_id = vocab.lookup_id(piece)
            ids.append(unk_id if token_id is None else token_id)
    if add_boundary_tokens:
        ids = wrap_boundary(ids)
    return ids
