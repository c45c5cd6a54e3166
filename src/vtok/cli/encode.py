"""Encoding command."""

from __future__ import annotations

import argparse

from vtok.cli.common import add_common_args, emit, open_session, require_text, resolve_arg


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("encode", help="Encode text to token ids.")
    add_common_args(parser)
    parser.add_argument("--text", required=True, help="Text to encode.")
    parser.add_argument(
        "--boundary",
        dest="boundary",
        action="store_true",
        default=None,
        help="Bracket the sequence with BOS/EOS (config default).",
    )
    parser.add_argument("--no-boundary", dest="boundary", action="store_false", help="Omit BOS/EOS.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--subword", action="store_true", help="Segment unknown words into known pieces.")
    mode.add_argument("--external", action="store_true", help="Delegate to the external codec when available.")
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    tokenizer, config = open_session(args)
    text = require_text(args.text)
    add_boundary = resolve_arg(args.boundary, config.add_boundary_tokens)

    if args.subword:
        tokens = tokenizer.encode_subword(text, add_boundary)
        method = "subword"
    else:
        tokens = tokenizer.encode(text, add_boundary, delegate_to_external=args.external)
        method = tokenizer.last_external or "word-level"

    decoded = tokenizer.decode(tokens, remove_special_tokens=not add_boundary, delegate_to_external=args.external)
    emit({"tokens": tokens, "decoded": decoded, "tokenCount": len(tokens), "method": method})
    return 0
