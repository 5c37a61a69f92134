"""Command-line entry point for the batch calculator.

Usage::

    bignum-calc jobs.txt                 # writes out_jobs.txt next to it
    bignum-calc jobs.txt results.txt
    bignum-calc jobs.txt --self-check    # verify arithmetic laws first
    bignum-calc jobs.txt --max-digits 1000
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from batch import BatchCalculator, BatchSettings
from bignum import MAX_RADIX, MIN_RADIX
from verification import Verifier


def default_output_path(input_path: Path) -> Path:
    """``dir/name`` -> ``dir/out_name``."""
    return input_path.with_name(f"out_{input_path.name}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignum-calc",
        description="Arbitrary-precision batch calculator for bases 2-16.",
    )
    parser.add_argument("input", type=Path, help="input job file")
    parser.add_argument(
        "output", type=Path, nargs="?", default=None,
        help="output file (default: out_<input> next to the input)",
    )
    parser.add_argument(
        "--self-check", action="store_true",
        help="verify the arithmetic laws in every base before running",
    )
    parser.add_argument(
        "--max-digits", type=int, default=None, metavar="N",
        help="reject numerals and results longer than N digits",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def self_check() -> bool:
    verifier = Verifier()
    passed = True
    for radix in range(MIN_RADIX, MAX_RADIX + 1):
        for report in verifier.verify(radix):
            if not report.passed:
                print(report.summary())
                passed = False
    return passed


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_digits is not None and args.max_digits < 1:
        parser.error("--max-digits must be at least 1")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path: Path = args.input
    if not input_path.is_file():
        print(f"Problem with opening the input file: {input_path}", file=sys.stderr)
        return 1
    output_path: Path = args.output or default_output_path(input_path)

    if args.self_check:
        print("Verifying arithmetic laws ...")
        if not self_check():
            print("Self-check failed", file=sys.stderr)
            return 1
        print("All laws hold.\n")

    print("=" * 46)
    print("Performing operations...")
    try:
        calculator = BatchCalculator(BatchSettings(max_digits=args.max_digits))
        summary = calculator.run_file(input_path, output_path)
    except OSError as e:
        print(f"Problem with the output file {output_path}: {e}", file=sys.stderr)
        return 1
    print(f"Calculations completed: {summary}")
    print(f"Output written to {output_path}")
    print("=" * 46)
    return 0


if __name__ == "__main__":
    sys.exit(main())
