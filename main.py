#!/usr/bin/env python3
"""
Telephone Color Code Reference

Runs the startup self-test and prints the 25-pair color code reference
manual for wiring personnel. Single lookups are available as options.

Usage:
    python main.py                      # self-test, then the full manual
    python main.py --skip-self-test     # manual only
    python main.py --pair 12            # -> Black Orange
    python main.py --color black orange # -> 12
"""

import argparse
import sys

from pydantic import ValidationError

from coders.color_coder import print_color_reference_manual
from coders.self_test import run_self_test
from config_models import ColorLookupRequest, PairLookupRequest
from core.errors import ColorCodeError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="25-pair telephone color code reference")
    lookup = parser.add_mutually_exclusive_group()
    lookup.add_argument(
        "--pair",
        "-p",
        type=int,
        metavar="N",
        help="Print the color pair for pair number N (1-25)",
    )
    lookup.add_argument(
        "--color",
        "-c",
        nargs=2,
        metavar=("MAJOR", "MINOR"),
        help="Print the pair number for a major/minor color combination",
    )
    parser.add_argument(
        "--skip-self-test",
        action="store_true",
        help="Print the reference manual without running the self-test first",
    )
    return parser


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(err["msg"] for err in error.errors())


def run_lookup(args: argparse.Namespace) -> int:
    """Handle --pair / --color. Returns the process exit code."""
    try:
        if args.pair is not None:
            color_pair = PairLookupRequest(pair_number=args.pair).resolve()
            print(color_pair)
        else:
            major, minor = args.color
            print(ColorLookupRequest(major=major, minor=minor).resolve())
    except ValidationError as e:
        print(f"❌ {_format_validation_error(e)}", file=sys.stderr)
        return 1
    except ColorCodeError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.pair is not None or args.color is not None:
        return run_lookup(args)

    if not args.skip_self_test:
        run_self_test()

    print_color_reference_manual()
    return 0


if __name__ == "__main__":
    sys.exit(main())
