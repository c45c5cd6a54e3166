"""Logging setup for the library and the CLI."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "VTOK_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(level: Optional[str] = None) -> int:
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    return getattr(logging, name, logging.WARNING)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure stdlib logging once, writing to stderr.

    Respects env var VTOK_LOG_LEVEL if `level` is None. stdout is left free
    for command output.
    """
    logging.basicConfig(level=resolve_level(level), format=_DEFAULT_FORMAT, stream=sys.stderr)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
