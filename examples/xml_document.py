"""XML Document Example - Parse an XML file with the bundled element grammar.

Reads a file, parses one element from it, prints the parsed tree and
whatever input the grammar left unconsumed.

Usage:
    python examples/xml_document.py examples/test.xml
    python examples/xml_document.py --strict --verbose examples/test.xml

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
from combparse.grammars.xml import Element, element

logger = logging.getLogger("examples.xml_document")


def render(node: Element, depth: int = 0) -> list[str]:
    """Indented outline of an element tree."""
    attrs = "".join(f' {name}="{value}"' for name, value in node.attributes)
    lines = [f"{'  ' * depth}<{node.name}{attrs}>"]
    for child in node.children:
        lines.extend(render(child, depth + 1))
    return lines


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Parse an XML document.")
    parser.add_argument("file", type=Path, help="XML file to parse")
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

    result = run(element(), source, ParseConfig(require_eof=args.strict, trace=args.verbose))
    if not result:
        print(f"[ERROR] {result.describe()}", file=sys.stderr)
        return 1

    print("Document parsed!")
    print("\n".join(render(result.value)))
    print(f"Remains: {result.remaining or '-'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
