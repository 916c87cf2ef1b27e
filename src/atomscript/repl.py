"""Line-oriented token printer for AtomScript.

Reads source from stdin one line at a time and prints every token of
each line, EOF included.

Usage:
    python -m atomscript [--strict] [--int-bits N] [-v]
    python -m atomscript -c "atom x = 1;"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from atomscript import tokenize
from atomscript.config import LexConfig
from atomscript.errors import LexError
from atomscript.utils.logger import get_logger

logger = get_logger(__name__)

BANNER = ("Welcome to AtomScript!", "Feel free to type in commands...")


def print_tokens(source: str, config: LexConfig, out: TextIO) -> None:
    """Print one token per line.

    Raises:
        LexError: In strict mode, on the first error token
    """
    for token in tokenize(source, config=config):
        print(token, file=out)


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO, config: LexConfig) -> int:
    """Tokenize stdin line by line until end of input.

    Returns:
        Process exit status
    """
    for line in BANNER:
        print(line, file=stdout)

    for lineno, line in enumerate(stdin, start=1):
        logger.debug("Scanning line %d (%d chars)", lineno, len(line))
        try:
            print_tokens(line, config, stdout)
        except LexError as e:
            print(f"error: {e}", file=stderr)
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="atomscript", description="Print AtomScript tokens")
    parser.add_argument("-c", "--command", help="Tokenize this text and exit")
    parser.add_argument("--strict", action="store_true", help="Stop at the first lexical error")
    parser.add_argument(
        "--int-bits", type=int, default=32, help="Signed width of integer literals (default: 32)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = LexConfig(
            int_bits=args.int_bits,
            strict=args.strict,
            source_file="<command>" if args.command is not None else "<stdin>",
        )
    except ValueError as e:
        parser.error(str(e))

    if args.command is not None:
        try:
            print_tokens(args.command, config, sys.stdout)
        except LexError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        return 0

    return run(sys.stdin, sys.stdout, sys.stderr, config)


if __name__ == "__main__":
    sys.exit(main())
