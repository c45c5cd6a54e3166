"""Errors raised by the tokenizer core and its transports."""

from __future__ import annotations


class TokenizerError(Exception):
    """Base class for all vtok errors."""


class InvalidInput(TokenizerError, ValueError):
    """Raised by transports when a request fails validation."""


class InvalidToken(TokenizerError, ValueError):
    """Raised when a special token is empty or not a string."""


class InvalidId(TokenizerError, ValueError):
    """Raised when an explicit token id is negative or not an integer."""


class MalformedVocabulary(TokenizerError, ValueError):
    """Raised when a persisted vocabulary record cannot be restored."""


__all__ = [
    "TokenizerError",
    "InvalidInput",
    "InvalidToken",
    "InvalidId",
    "MalformedVocabulary",
]
