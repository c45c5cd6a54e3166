"""Vocabulary inspection and lifecycle commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from vtok.cli.common import add_common_args, commit_session, emit, open_session
from vtok.tokenization.io import load_tokenizer
from vtok.tokenization.serialize import serialize


def add_parsers(subparsers: argparse._SubParsersAction) -> None:
    stats = subparsers.add_parser("stats", help="Show vocabulary statistics.")
    add_common_args(stats)
    stats.set_defaults(func=run_stats)

    reset = subparsers.add_parser("reset", help="Reset the vocabulary to the reserved special tokens.")
    add_common_args(reset)
    reset.set_defaults(func=run_reset)

    save = subparsers.add_parser("save", help="Export the vocabulary as a tokenizer artifact directory.")
    add_common_args(save)
    save.add_argument("--output", required=True, help="Artifact output directory.")
    save.set_defaults(func=run_save)

    load = subparsers.add_parser("load", help="Replace the vocabulary with one from an artifact directory.")
    add_common_args(load)
    load.add_argument("--artifact", required=True, help="Artifact directory written by 'save'.")
    load.set_defaults(func=run_load)


def run_stats(args: argparse.Namespace) -> int:
    tokenizer, _config = open_session(args)
    emit(tokenizer.get_stats().to_dict())
    return 0


def run_reset(args: argparse.Namespace) -> int:
    tokenizer, _config = open_session(args)
    tokenizer.reset()
    commit_session(args, tokenizer)
    emit({"vocabSize": tokenizer.vocab_size, "message": "Tokenizer reset successfully"})
    return 0


def run_save(args: argparse.Namespace) -> int:
    tokenizer, _config = open_session(args)
    paths = tokenizer.save_pretrained(args.output, metadata={"source": str(args.vocab)})
    emit({"files": [str(path) for path in paths], "data": tokenizer.save()})
    return 0


def run_load(args: argparse.Namespace) -> int:
    tokenizer, _config = open_session(args)
    vocab, _manifest = load_tokenizer(Path(args.artifact))
    tokenizer.load(serialize(vocab))
    commit_session(args, tokenizer)
    emit({"vocabSize": tokenizer.vocab_size, "message": "Tokenizer loaded successfully"})
    return 0
