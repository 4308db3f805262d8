"""JSON Document Example - Parse a JSON file with the bundled grammar.

Usage:
    python examples/json_document.py data.json
    python examples/json_document.py --strict data.json

Exit Codes:
    0   Parsed successfully
    1   Parse failed
    2   File read or decode error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from combparse import ParseConfig, run
from combparse.grammars.json import (
    Element,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    document,
)

logger = logging.getLogger("examples.json_document")


def to_python(value: Element) -> object:
    """Convert parsed elements to plain Python values."""
    match value:
        case JsonNull():
            return None
        case JsonBool(value=b):
            return b
        case JsonNumber(value=n):
            return n
        case JsonString(value=s):
            return s
        case JsonArray(items=items):
            return [to_python(item) for item in items]
        case JsonObject(members=members):
            return {name: to_python(member) for name, member in members.items()}


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Parse a JSON document.")
    parser.add_argument("file", type=Path, help="JSON file to parse")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat trailing unparsed input as an error",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = args.file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 2

    result = run(document(), source, ParseConfig(require_eof=args.strict, trace=args.verbose))
    if not result:
        print(f"[ERROR] {result.describe()}", file=sys.stderr)
        return 1

    print(f"Parsed: {to_python(result.value)!r}")
    print(f"Remains: {result.remaining or '-'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
