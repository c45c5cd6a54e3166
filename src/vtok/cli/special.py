"""Special token registration command."""

from __future__ import annotations

import argparse

from vtok.cli.common import add_common_args, commit_session, emit, open_session


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("add-special", help="Register a custom special token.")
    add_common_args(parser)
    parser.add_argument("--token", required=True, help="Token text, e.g. <CLS>.")
    parser.add_argument("--id", type=int, default=None, help="Explicit id; defaults to the next free id.")
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    tokenizer, _config = open_session(args)
    token_id = tokenizer.add_special_token(args.token, args.id)
    commit_session(args, tokenizer)
    emit({"token": args.token, "id": token_id, "message": f"Added special token: {args.token}"})
    return 0
