#!/usr/bin/env python3
"""Command-line interface for htmlescaper."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn

from .errors import InvalidOptionError
from .escaper import DEFAULT_ESCAPE_RANGES, ESCAPE_RANGES, Escaper, EscaperOpts

_CONTEXTS = {
    "data": Escaper.escape_data,
    "double": Escaper.escape_double_quoted_attribute,
    "single": Escaper.escape_single_quoted_attribute,
    "unquoted": Escaper.escape_unquoted_attribute,
}


def _get_version() -> str:
    try:
        return version("html-escaper")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="htmlescaper",
        description="Escape text for a text node or an attribute value in an HTML document.",
        epilog=(
            "Examples:\n"
            "  htmlescaper notes.txt\n"
            "  echo 'a \"b\" c' | htmlescaper - --context double\n"
            "  htmlescaper title.txt --context unquoted --base 10\n"
            "  htmlescaper page.txt --range control --range non-ascii\n"
            "\n"
            "If you don't have the 'htmlescaper' command available, use:\n"
            "  python -m htmlescaper ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Text file to escape, or '-' to read from stdin",
    )
    parser.add_argument(
        "--context",
        choices=list(_CONTEXTS),
        default="data",
        help="Where the text will be placed: text node or attribute quoting style (default: data)",
    )
    parser.add_argument(
        "--range",
        dest="ranges",
        action="append",
        choices=[*ESCAPE_RANGES, "none"],
        help=(
            "Escape every character in this range; repeat for several ranges "
            f"(default: {', '.join(DEFAULT_ESCAPE_RANGES)}). Use 'none' to disable"
        ),
    )
    parser.add_argument(
        "--base",
        type=int,
        default=16,
        help="Base for numeric character references, 10 or 16 (default: 16)",
    )
    parser.add_argument(
        "--no-force",
        action="store_false",
        dest="force",
        help="Leave characters that have no faithful numeric reference unescaped",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"htmlescaper {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    try:
        return Path(path).read_text()
    except OSError as e:
        print(f"htmlescaper: cannot read {path}: {e.strerror or e}", file=sys.stderr)
        raise SystemExit(1) from e


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])

    if args.ranges is None:
        ranges = DEFAULT_ESCAPE_RANGES
    else:
        ranges = tuple(name for name in args.ranges if name != "none")

    try:
        opts = EscaperOpts(escape_ranges=ranges, escape_base=args.base, force_escape=args.force)
    except InvalidOptionError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    escape = _CONTEXTS[args.context]
    sys.stdout.write(escape(Escaper(opts), _read_text(args.path)))
    return None


if __name__ == "__main__":
    main()
