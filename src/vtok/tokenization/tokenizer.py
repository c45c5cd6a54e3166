"""Session-level tokenizer owning a single mutable vocabulary."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from vtok.config import TokenizerConfig
from vtok.errors import InvalidToken
from vtok.tokenization import codec, learner, subword
from vtok.tokenization.external import ExternalCodec, NullCodec, TiktokenCodec
from vtok.tokenization.io import load_tokenizer, save_tokenizer
from vtok.tokenization.serialize import deserialize, serialize
from vtok.tokenization.special import SpecialToken
from vtok.tokenization.vocab import Vocabulary
from vtok.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class VocabularyStats:
    vocab_size: int
    special_tokens_count: int
    vocabulary: dict[str, int]
    special_tokens: dict[str, int]

    def to_dict(self) -> dict[str, Any]:
        return {
            "vocabSize": self.vocab_size,
            "specialTokensCount": self.special_tokens_count,
            "vocabulary": dict(self.vocabulary),
            "specialTokens": dict(self.special_tokens),
        }


class VocabTokenizer:
    """Learn, encode, decode and persist a word-level vocabulary.

    One instance owns one vocabulary. Learning, special-token registration,
    loading and resetting replace it; encoding, decoding and stats only read
    it. The class does no locking: a service sharing an instance across
    threads must allow one writer at a time.

    ``last_external`` names the external codec that served the most recent
    encode or decode, or is None when the vocabulary codec did.
    """

    def __init__(
        self,
        vocab: Vocabulary | None = None,
        external: ExternalCodec | None = None,
        max_subword_length: int = subword.DEFAULT_MAX_SUBWORD_LENGTH,
    ) -> None:
        self._vocab = vocab.copy() if vocab is not None else Vocabulary.create()
        self._external: ExternalCodec = external if external is not None else NullCodec()
        self.max_subword_length = max_subword_length
        self.last_external: str | None = None

    @classmethod
    def from_config(cls, config: TokenizerConfig, vocab: Vocabulary | None = None) -> "VocabTokenizer":
        external: ExternalCodec = TiktokenCodec(config.external_model) if config.enable_external else NullCodec()
        return cls(vocab=vocab, external=external, max_subword_length=config.max_subword_length)

    @property
    def vocab(self) -> Vocabulary:
        """A copy of the current vocabulary."""
        return self._vocab.copy()

    @property
    def vocab_size(self) -> int:
        return len(self._vocab)

    @property
    def external(self) -> ExternalCodec:
        return self._external

    def __len__(self) -> int:
        return self.vocab_size

    def learn(self, text: str, min_frequency: int | None = 1) -> int:
        result = learner.learn(self._vocab, text, min_frequency)
        self._vocab = result.vocabulary
        return result.vocab_size

    def learn_iter(self, chunks: Iterable[str], min_frequency: int | None = 1) -> int:
        result = learner.learn_iter(self._vocab, chunks, min_frequency)
        self._vocab = result.vocabulary
        return result.vocab_size

    def encode(self, text: str, add_boundary_tokens: bool = True, delegate_to_external: bool = False) -> list[int]:
        if delegate_to_external:
            used, ids = self._delegate("encode", text)
            if used:
                return ids
        self.last_external = None
        return codec.encode(self._vocab, text, add_boundary_tokens)

    def encode_subword(self, text: str, add_boundary_tokens: bool = True) -> list[int]:
        self.last_external = None
        return subword.encode_subword(self._vocab, text, add_boundary_tokens, self.max_subword_length)

    def decode(
        self,
        ids: Sequence[int],
        remove_special_tokens: bool = True,
        delegate_to_external: bool = False,
    ) -> str:
        if delegate_to_external:
            used, text = self._delegate("decode", ids)
            if used:
                return text
        self.last_external = None
        return codec.decode(self._vocab, ids, remove_special_tokens)

    def _delegate(self, method: str, payload: Any) -> tuple[bool, Any]:
        """Run ``method`` on the external codec; the flag is False when it did not answer."""
        codec_name = getattr(self._external, "name", type(self._external).__name__)
        try:
            if not self._external.available():
                logger.debug("External codec %s unavailable; using vocabulary %s", codec_name, method)
                return False, None
            result = getattr(self._external, method)(payload)
        except Exception as exc:
            logger.warning("External %s via %s failed, using vocabulary codec: %s", method, codec_name, exc)
            return False, None
        if result is None:
            return False, None
        self.last_external = codec_name
        return True, result

    def add_special_token(self, token: str, explicit_id: int | None = None) -> int:
        if not isinstance(token, str) or not token:
            raise InvalidToken(f"Special token must be a non-empty string, got {token!r}.")
        updated = self._vocab.copy()
        if explicit_id is None:
            token_id = updated.insert(token)
        else:
            updated.insert_with_id(token, explicit_id)
            token_id = explicit_id
        self._vocab = updated
        logger.info("Registered special token %r at id %d", token, token_id)
        return token_id

    def get_stats(self) -> VocabularyStats:
        specials = self._vocab.special_ids()
        return VocabularyStats(
            vocab_size=len(self._vocab),
            special_tokens_count=len(specials),
            vocabulary=self._vocab.to_mapping(),
            special_tokens=specials,
        )

    def save(self) -> dict[str, Any]:
        return serialize(self._vocab)

    def load(self, record: Any) -> None:
        self._vocab = deserialize(record)
        logger.info("Loaded vocabulary with %d tokens", len(self._vocab))

    def reset(self) -> None:
        self._vocab = Vocabulary.create()
        logger.info("Vocabulary reset to %d special tokens", len(SpecialToken))

    def save_pretrained(self, output_dir: str | Path, metadata: dict[str, object] | None = None) -> list[Path]:
        return save_tokenizer(Path(output_dir), self._vocab, metadata=metadata)

    @classmethod
    def from_pretrained(
        cls,
        artifact_dir: str | Path,
        config: TokenizerConfig | None = None,
    ) -> "VocabTokenizer":
        vocab, _manifest = load_tokenizer(Path(artifact_dir))
        return cls.from_config(config or TokenizerConfig(), vocab=vocab)
