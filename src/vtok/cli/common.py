"""Options and helpers shared by every vtok subcommand."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from vtok.config import TokenizerConfig, load_config
from vtok.errors import InvalidInput
from vtok.tokenization.io import load_record, save_record
from vtok.tokenization.tokenizer import VocabTokenizer

DEFAULT_VOCAB_PATH = "vocab.json"


def add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--vocab",
        default=DEFAULT_VOCAB_PATH,
        help="Vocabulary record file. A missing file means a fresh vocabulary.",
    )
    p.add_argument("--config", default=None, help="Optional tokenizer config YAML.")


def resolve_arg(value: Any, config_value: Any) -> Any:
    return config_value if value is None else value


def open_session(args: argparse.Namespace) -> tuple[VocabTokenizer, TokenizerConfig]:
    config = load_config(args.config)
    vocab = load_record(Path(args.vocab))
    return VocabTokenizer.from_config(config, vocab=vocab), config


def commit_session(args: argparse.Namespace, tokenizer: VocabTokenizer) -> None:
    save_record(Path(args.vocab), tokenizer.vocab)


def require_text(text: str | None) -> str:
    if not text:
        raise InvalidInput("Text is required and must be a non-empty string.")
    return text


def parse_ids(raw: str) -> list[int]:
    parts = [part for part in raw.replace(",", " ").split() if part]
    if not parts:
        raise InvalidInput("A non-empty list of token ids is required.")
    try:
        return [int(part) for part in parts]
    except ValueError as exc:
        raise InvalidInput(f"Token ids must be integers: {raw!r}") from exc


def emit(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False, sort_keys=True))
