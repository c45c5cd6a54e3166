"""Frequency-thresholded vocabulary growth from raw text."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from vtok.tokenization.normalize import normalize
from vtok.tokenization.vocab import Vocabulary
from vtok.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LearnResult:
    vocabulary: Vocabulary
    vocab_size: int
    added: list[str]


def count_words(chunks: Iterable[str]) -> Counter[str]:
    # Counter preserves first-seen insertion order, which fixes the id order.
    counts: Counter[str] = Counter()
    for chunk in chunks:
        counts.update(normalize(chunk))
    return counts


def learn_iter(vocab: Vocabulary, chunks: Iterable[str], min_frequency: int | None = 1) -> LearnResult:
    """Learn from several text chunks with one shared frequency count.

    The input vocabulary is not modified; the result carries a new instance.
    """
    threshold = max(1, min_frequency or 1)
    counts = count_words(chunks)
    learned = vocab.copy()
    added: list[str] = []
    for word, count in counts.items():
        if count >= threshold and word not in learned:
            learned.insert(word)
            added.append(word)
    logger.info(
        "Learned %d new tokens from %d distinct words (min_frequency=%d); vocab size %d",
        len(added),
        len(counts),
        threshold,
        len(learned),
    )
    return LearnResult(vocabulary=learned, vocab_size=len(learned), added=added)


def learn(vocab: Vocabulary, text: str, min_frequency: int | None = 1) -> LearnResult:
    return learn_iter(vocab, [text], min_frequency)
