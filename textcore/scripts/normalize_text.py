"""Run the name parser or phone normalizer over a text file or stdin."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from ..config.config_loader import get_runtime_config
from ..services.batch import normalize_phones, parse_names
from ..utils.errors import ConfigError


def _read_input(source: Optional[Path], stdin: TextIO) -> str:
    if source is None:
        return stdin.read()
    return source.read_text(encoding="utf-8-sig")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _render_names(text: str, column: Optional[str], max_lines: int) -> str:
    result = parse_names(text, max_lines=max_lines)
    if column == "first":
        return result.first_names
    if column == "last":
        return result.last_names
    return f"{result.first_names}\n\n{result.last_names}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    names = subparsers.add_parser("names", help="Strip title prefixes and split first/last names.")
    names.add_argument("input", type=Path, nargs="?", default=None, help="Text file (default: stdin).")
    names.add_argument(
        "--column",
        choices=("first", "last"),
        default=None,
        help="Print only one column. Without it, first names, a blank line, then last names.",
    )

    phones = subparsers.add_parser("phones", help="Normalize phone numbers to 10-digit local form.")
    phones.add_argument("input", type=Path, nargs="?", default=None, help="Text file (default: stdin).")

    for sub in (names, phones):
        sub.add_argument(
            "--max-lines",
            type=_positive_int,
            default=None,
            help="Override the configured line cap (default: processing.max_lines, 200).",
        )
    return parser


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)

    try:
        max_lines = args.max_lines if args.max_lines is not None else get_runtime_config().processing.max_lines
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 2

    text = _read_input(args.input, stdin)
    if args.command == "names":
        output = _render_names(text, args.column, max_lines)
    else:
        output = normalize_phones(text, max_lines=max_lines)

    print(output, file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
