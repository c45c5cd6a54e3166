"""Decoding command."""

from __future__ import annotations

import argparse

from vtok.cli.common import add_common_args, emit, open_session, parse_ids, resolve_arg


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("decode", help="Decode token ids to text.")
    add_common_args(parser)
    parser.add_argument("--ids", required=True, help="Token ids, comma or space separated.")
    parser.add_argument(
        "--keep-special",
        dest="remove_special",
        action="store_false",
        default=None,
        help="Render reserved special tokens instead of dropping them.",
    )
    parser.add_argument("--external", action="store_true", help="Delegate to the external codec when available.")
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    tokenizer, config = open_session(args)
    ids = parse_ids(args.ids)
    remove_special = resolve_arg(args.remove_special, config.remove_special_tokens)
    decoded = tokenizer.decode(ids, remove_special_tokens=remove_special, delegate_to_external=args.external)
    method = tokenizer.last_external or "custom"
    emit({"decoded": decoded, "tokenCount": len(ids), "method": method})
    return 0
