"""Whitespace parsers.

Whitespace is any character for which ``str.isspace()`` is true, which
covers spaces, tabs, line endings and Unicode separators.
"""

from combparse.diagnostics import FailureReason
from combparse.syntax.cursor import Cursor
from combparse.syntax.parser.core import Parser
from combparse.syntax.result import Failure, ParseResult, Success

__all__ = [
    "skip_whitespace",
    "space0",
    "space1",
    "whitespace_char",
]


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Return a cursor past all consecutive whitespace characters.

    Example:
        >>> skip_whitespace(Cursor.of("  \\n\\t hello")).rest
        'hello'
    """
    c = cursor
    while not c.is_eof and c.current.isspace():
        c = c.advance()
    return c


def whitespace_char() -> Parser[str]:
    """Match a single whitespace character."""

    def parse_whitespace_char(cursor: Cursor) -> ParseResult[str]:
        if not cursor.is_eof and cursor.current.isspace():
            return Success(cursor.current, cursor.advance())
        return Failure(cursor, FailureReason.WHITESPACE, "whitespace")

    return Parser(parse_whitespace_char, "whitespace_char")


def space0() -> Parser[str]:
    """Consume zero or more whitespace characters. Never fails."""

    def parse_space0(cursor: Cursor) -> ParseResult[str]:
        end = skip_whitespace(cursor)
        return Success(cursor.consumed_until(end), end)

    return Parser(parse_space0, "space0")


def space1() -> Parser[str]:
    """Consume one or more whitespace characters."""

    def parse_space1(cursor: Cursor) -> ParseResult[str]:
        end = skip_whitespace(cursor)
        if end.pos == cursor.pos:
            return Failure(cursor, FailureReason.WHITESPACE, "whitespace")
        return Success(cursor.consumed_until(end), end)

    return Parser(parse_space1, "space1")
