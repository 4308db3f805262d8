"""Failure reason codes.

A parse failure carries only the input view it could not match plus one of
these codes. There is no line/column information by design of the engine.

Python 3.13+. Zero external dependencies.
"""

from enum import StrEnum

__all__ = ["FailureReason"]


class FailureReason(StrEnum):
    """Why a parser could not match at a given input position.

    Inherits from ``StrEnum`` so log records and error messages receive plain
    strings (``"literal"``, ``"predicate"``) rather than the enum repr.

    Codes:
        NO_MATCH: Generic failure from a user-supplied parser function
        LITERAL: Input does not start with the expected literal
        IDENTIFIER: Input does not start with an identifier
        QUOTED_STRING: Missing opening or closing double quote
        WHITESPACE: Expected at least one whitespace character
        CHARACTER: Single character did not satisfy its predicate (or EOF)
        INTEGER: No digits, or digits that do not form an integer
        PREDICATE: Value was produced but rejected by ``pred``
        END_OF_INPUT: Expected end of input, found more text
        TRAILING_INPUT: Top-level parse left input unconsumed
        NESTING_DEPTH: Input nests deeper than the configured limit
    """

    NO_MATCH = "no-match"
    LITERAL = "literal"
    IDENTIFIER = "identifier"
    QUOTED_STRING = "quoted-string"
    WHITESPACE = "whitespace"
    CHARACTER = "character"
    INTEGER = "integer"
    PREDICATE = "predicate"
    END_OF_INPUT = "end-of-input"
    TRAILING_INPUT = "trailing-input"
    NESTING_DEPTH = "nesting-depth"
