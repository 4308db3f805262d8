"""combparse exception hierarchy.

Parse failures are ordinary return values. Exceptions are reserved for
programming errors in grammar construction and for the opt-in raising API
(``Failure.unwrap()``).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from combparse.syntax.result import Failure

__all__ = [
    "CombparseError",
    "GrammarError",
    "InfiniteRepetitionError",
    "ParseError",
    "SourceTooLargeError",
]


class CombparseError(Exception):
    """Base exception for all combparse errors."""


class ParseError(CombparseError):
    """A failed parse was unwrapped.

    Attributes:
        failure: The Failure that was unwrapped

    Example:
        >>> from combparse import match_literal
        >>> match_literal("null").parse("nul").unwrap()
        Traceback (most recent call last):
        ...
        combparse.diagnostics.errors.ParseError: expected 'null' (literal) at offset 0, found 'nul'
    """

    def __init__(self, failure: Failure) -> None:
        """Initialize ParseError.

        Args:
            failure: The failed result being reported
        """
        self.failure = failure
        super().__init__(failure.describe())


class GrammarError(CombparseError):
    """Invalid grammar construction.

    Examples:
    - A combinator received something that is not parser-like
    - A forward parser was used before being defined, or defined twice
    - ``choice()`` was called without alternatives
    """


class InfiniteRepetitionError(GrammarError):
    """A repeated parser succeeded without consuming input.

    Repeating such a parser would never terminate, so the grammar itself is
    wrong; this is not reported as a parse failure.
    """


class SourceTooLargeError(CombparseError):
    """Input exceeds the configured maximum source size.

    Attributes:
        size: Length of the rejected input in characters
        limit: Configured maximum
    """

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"source of {size} characters exceeds limit of {limit}")
