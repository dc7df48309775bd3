"""
Main Entry Point - Caesar Cipher

Runs an interactive session by default. Passing --phrase, --shift or
--decrypt builds the request from the command line instead of prompting.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from caesar.coreutils.logging import setup_logging
from caesar.extract.prompts import InputReadError
from caesar.orchestration.session import run_session
from caesar.transformation.schemas import (
    DEFAULT_PHRASE,
    DEFAULT_SHIFT,
    CipherRequest,
    Direction,
)
from caesar.transformation.validators import parse_phrase, parse_shift

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_FAILED = 1
EXIT_INTERRUPTED = 130


def shift_argument(value: str) -> int:
    """argparse type for --shift"""
    try:
        return parse_shift(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid shift {value!r}: expected a non-negative integer"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="caesar", description="Caesar cipher: rotate letters by a fixed shift"
    )
    parser.add_argument(
        "--phrase",
        help=f"Phrase to transform (default: {DEFAULT_PHRASE!r})",
    )
    parser.add_argument(
        "--shift",
        type=shift_argument,
        help=f"Shift amount, reduced modulo 26 (default: {DEFAULT_SHIFT})",
    )
    parser.add_argument(
        "--decrypt",
        action="store_true",
        help="Decrypt instead of encrypt",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def request_from_args(args: argparse.Namespace) -> Optional[CipherRequest]:
    """Build a request from flags, or None if the session should prompt"""
    if args.phrase is None and args.shift is None and not args.decrypt:
        return None

    return CipherRequest(
        phrase=parse_phrase(args.phrase or ""),
        shift=DEFAULT_SHIFT if args.shift is None else args.shift,
        direction=Direction.DECRYPT if args.decrypt else Direction.ENCRYPT,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else None)

    try:
        run_session(request=request_from_args(args))
    except InputReadError as e:
        logger.error(f"❌ {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_FAILED
    except KeyboardInterrupt:
        logger.info("🛑 Stopped by user")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
