"""vtok command-line entrypoint."""

from __future__ import annotations

import argparse
import sys

from vtok.cli import decode, encode, learn, special, stats
from vtok.errors import InvalidInput, TokenizerError
from vtok.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="vtok",
        description="Vocabulary-based word tokenizer with subword fallback.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g., INFO, DEBUG). Also respects VTOK_LOG_LEVEL env var.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    learn.add_parser(subparsers)
    encode.add_parser(subparsers)
    decode.add_parser(subparsers)
    special.add_parser(subparsers)
    stats.add_parsers(subparsers)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.func(args)
    except InvalidInput as exc:
        logger.error("Invalid input: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (TokenizerError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
