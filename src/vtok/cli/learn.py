"""Vocabulary learning command."""

from __future__ import annotations

import argparse
from pathlib import Path

from vtok.cli.common import add_common_args, commit_session, emit, open_session, require_text, resolve_arg


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("learn", help="Learn vocabulary from text.")
    add_common_args(parser)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to learn from.")
    source.add_argument("--input", help="UTF-8 text file; frequencies are counted over the whole file.")
    parser.add_argument("--min-frequency", type=int, default=None, help="Minimum word count to add a word.")
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    tokenizer, config = open_session(args)
    min_frequency = resolve_arg(args.min_frequency, config.min_frequency)
    before = tokenizer.vocab_size
    if args.input:
        with Path(args.input).open("r", encoding="utf-8") as handle:
            vocab_size = tokenizer.learn_iter(handle, min_frequency)
    else:
        vocab_size = tokenizer.learn(require_text(args.text), min_frequency)
    commit_session(args, tokenizer)
    emit(
        {
            "vocabSize": vocab_size,
            "added": vocab_size - before,
            "message": f"Learned {vocab_size - before} new tokens; vocabulary has {vocab_size} tokens",
        }
    )
    return 0
