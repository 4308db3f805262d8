"""Primitive parsers.

Each primitive works directly against the Cursor rather than by composing
other parsers. All of them are greedy, never backtrack internally, and fail
with exactly the cursor they were given.

Both forms are exported: the ``parse_*`` functions (Cursor -> ParseResult)
and the Parser values or factories built from them.
"""

from collections.abc import Callable

from combparse.diagnostics import FailureReason
from combparse.syntax.cursor import Cursor
from combparse.syntax.parser.core import Parser
from combparse.syntax.result import Failure, ParseResult, Success

__all__ = [
    "any_char",
    "end_of_input",
    "identifier",
    "integer",
    "match_literal",
    "parse_identifier",
    "parse_integer",
    "parse_quoted_string",
    "quoted_string",
    "satisfy",
]

_QUOTE: str = '"'


def match_literal(expected: str) -> Parser[str]:
    """Match expected exactly (case-sensitive) as a prefix of the input.

    Produces the literal itself.

    Example:
        >>> match_literal("null").parse("nullable").remaining
        'able'
        >>> match_literal("null").parse("nul").remaining
        'nul'
    """
    label = repr(expected)

    def parse_literal(cursor: Cursor) -> ParseResult[str]:
        if cursor.startswith(expected):
            return Success(expected, cursor.advance(len(expected)))
        return Failure(cursor, FailureReason.LITERAL, label)

    return Parser(parse_literal, label)


def parse_identifier(cursor: Cursor) -> ParseResult[str]:
    """Parse identifier: a letter followed by letters, digits or hyphens.

    Examples:
        div → "div"
        semi-bottom → "semi-bottom"
        h1 → "h1"
    """
    if cursor.is_eof or not cursor.current.isalpha():
        return Failure(cursor, FailureReason.IDENTIFIER, "identifier")

    end = cursor.advance()
    while not end.is_eof and (end.current.isalnum() or end.current == "-"):
        end = end.advance()

    return Success(cursor.consumed_until(end), end)


identifier: Parser[str] = Parser(parse_identifier, "identifier")


def parse_quoted_string(cursor: Cursor) -> ParseResult[str]:
    """Parse a double-quoted string, producing the text between the quotes.

    There are no escape sequences: the string ends at the next quote.
    """
    if not cursor.startswith(_QUOTE):
        return Failure(cursor, FailureReason.QUOTED_STRING, "opening quote")

    closing = cursor.source.find(_QUOTE, cursor.pos + 1)
    if closing < 0:
        return Failure(cursor, FailureReason.QUOTED_STRING, "closing quote")

    return Success(cursor.source[cursor.pos + 1 : closing], Cursor(cursor.source, closing + 1))


def quoted_string() -> Parser[str]:
    """Parser for a double-quoted string without escapes."""
    return Parser(parse_quoted_string, "quoted_string")


def parse_integer(cursor: Cursor) -> ParseResult[int]:
    """Parse leading digits into an int.

    Fails if there are no digits or the digits do not convert (``str.isdigit``
    accepts characters such as superscripts that ``int`` rejects).
    """
    end = cursor
    while not end.is_eof and end.current.isdigit():
        end = end.advance()

    digits = cursor.consumed_until(end)
    if not digits:
        return Failure(cursor, FailureReason.INTEGER, "digits")
    try:
        value = int(digits)
    except ValueError:
        return Failure(cursor, FailureReason.INTEGER, "decimal digits")
    return Success(value, end)


def integer() -> Parser[int]:
    """Parser for an unsigned integer literal."""
    return Parser(parse_integer, "integer")


def satisfy(predicate: Callable[[str], bool], name: str = "character") -> Parser[str]:
    """Match one character accepted by predicate."""

    def parse_satisfy(cursor: Cursor) -> ParseResult[str]:
        if not cursor.is_eof and predicate(cursor.current):
            return Success(cursor.current, cursor.advance())
        return Failure(cursor, FailureReason.CHARACTER, name)

    return Parser(parse_satisfy, name)


def any_char() -> Parser[str]:
    """Match any single character; fails only at end of input."""
    return satisfy(lambda _: True, "any character")


def end_of_input() -> Parser[None]:
    """Succeed without consuming only when the input is exhausted."""

    def parse_eof(cursor: Cursor) -> ParseResult[None]:
        if cursor.is_eof:
            return Success(None, cursor)
        return Failure(cursor, FailureReason.END_OF_INPUT, "end of input")

    return Parser(parse_eof, "end_of_input")
