"""vtok: vocabulary-based word tokenizer with subword fallback."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from vtok.config import TokenizerConfig, load_config
from vtok.errors import InvalidId, InvalidInput, InvalidToken, MalformedVocabulary, TokenizerError
from vtok.tokenization.special import SpecialToken
from vtok.tokenization.tokenizer import VocabTokenizer, VocabularyStats
from vtok.tokenization.vocab import Vocabulary

try:
    __version__ = version("vtok")
except PackageNotFoundError:  # pragma: no cover - runtime fallback
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "TokenizerConfig",
    "load_config",
    "TokenizerError",
    "InvalidInput",
    "InvalidToken",
    "InvalidId",
    "MalformedVocabulary",
    "SpecialToken",
    "Vocabulary",
    "VocabTokenizer",
    "VocabularyStats",
]
