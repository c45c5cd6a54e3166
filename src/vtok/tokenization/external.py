"""Pluggable third-party codecs the tokenizer can delegate to."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from vtok.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_EXTERNAL_MODEL = "gpt-3.5-turbo"


@runtime_checkable
class ExternalCodec(Protocol):
    """Capability interface for an external encoder/decoder."""

    @property
    def name(self) -> str: ...

    def available(self) -> bool: ...

    def encode(self, text: str) -> list[int]: ...

    def decode(self, ids: Sequence[int]) -> str: ...


class NullCodec:
    """Codec that is never available; callers always use their own path."""

    name = "none"

    def available(self) -> bool:
        return False

    def encode(self, text: str) -> list[int]:
        raise RuntimeError("NullCodec cannot encode.")

    def decode(self, ids: Sequence[int]) -> str:
        raise RuntimeError("NullCodec cannot decode.")


class TiktokenCodec:
    """Delegate to a tiktoken encoding.

    ``model`` may be a model name (``gpt-3.5-turbo``) or an encoding name
    (``cl100k_base``). The encoding is resolved on first use; if it cannot be
    loaded the codec reports itself unavailable from then on.
    """

    def __init__(self, model: str = DEFAULT_EXTERNAL_MODEL) -> None:
        self.model = model
        self._encoding: Any = None
        self._failed = False

    @property
    def name(self) -> str:
        return f"tiktoken:{self.model}"

    def _load(self) -> Any:
        if self._encoding is not None or self._failed:
            return self._encoding
        try:
            import tiktoken
        except ImportError as exc:
            self._mark_failed(exc)
            return None
        try:
            self._encoding = tiktoken.encoding_for_model(self.model)
        except KeyError:
            try:
                self._encoding = tiktoken.get_encoding(self.model)
            except Exception as exc:
                self._mark_failed(exc)
        except Exception as exc:
            self._mark_failed(exc)
        return self._encoding

    def _mark_failed(self, exc: Exception) -> None:
        self._failed = True
        logger.warning("Failed to load tiktoken for %s, falling back to the vocabulary codec: %s", self.model, exc)

    def available(self) -> bool:
        return self._load() is not None

    def encode(self, text: str) -> list[int]:
        encoding = self._load()
        if encoding is None:
            raise RuntimeError(f"tiktoken encoding {self.model!r} is unavailable.")
        return list(encoding.encode(text))

    def decode(self, ids: Sequence[int]) -> str:
        encoding = self._load()
        if encoding is None:
            raise RuntimeError(f"tiktoken encoding {self.model!r} is unavailable.")
        return encoding.decode(list(ids))

    def __repr__(self) -> str:
        return f"TiktokenCodec(model={self.model!r})"
