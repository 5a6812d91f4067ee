"""Command-line entry point: lex COOL files and print token listings.

Usage:
    coolex [-v] [--summary] FILE [FILE ...]

Each file is printed as a ``#name "FILE"`` header followed by one
``#<line> <TOKEN>`` line per token. Files that cannot be read are reported
on stderr and make the exit status 1; the remaining files are still lexed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from coolex import __version__
from coolex.config import LexConfig, lex_config_context
from coolex.lexer import Lexer, cool_rules
from coolex.profiling import profiled_lex
from coolex.render import format_listing
from coolex.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coolex",
        description="A lexer for the COOL language",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="COOL source files")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging, and log every ERROR token"
    )
    parser.add_argument(
        "--summary", action="store_true", help="Print lexing metrics as JSON on stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    lexer = Lexer(cool_rules())
    status = 0

    with profiled_lex() as metrics:
        for path in args.files:
            try:
                # Bytes keep \r and \r\n intact for the lexer;
                # undecodable bytes survive for octal escapes
                source = Path(path).read_bytes().decode("utf-8", "surrogateescape")
            except OSError as e:
                logger.error("Cannot read %s: %s", path, e)
                status = 1
                continue

            logger.debug("Lexing %s", path)
            with lex_config_context(LexConfig(log_errors=args.verbose, source_file=path)):
                pairs = lexer.lex(source)
            sys.stdout.write(format_listing(pairs, source_file=path))

    if args.summary:
        print(json.dumps(metrics.summary()), file=sys.stderr)
    return status


if __name__ == "__main__":
    sys.exit(main())
