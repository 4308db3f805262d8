"""Parse result types.

A parse step produces exactly one of two shapes:

- ``Success(value, cursor)``: the produced value and the cursor positioned
  after the consumed prefix.
- ``Failure(cursor, reason, expected)``: the input view at the point of
  failure. No structured diagnostic beyond a reason code.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Literal, NoReturn

from combparse.diagnostics import FailureReason, ParseError
from combparse.syntax.cursor import Cursor

__all__ = ["Failure", "ParseResult", "Success"]

# Characters of remaining input quoted in failure descriptions.
_DESCRIBE_PREVIEW: int = 20


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful parse: produced value plus the cursor after it.

    Example:
        >>> result = Success("h", Cursor("hello", 1))
        >>> result.value
        'h'
        >>> result.remaining
        'ello'
    """

    value: T
    cursor: Cursor

    @property
    def remaining(self) -> str:
        """Unconsumed suffix after this parse."""
        return self.cursor.rest

    @property
    def is_success(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        """Return the produced value."""
        return self.value

    def __bool__(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed parse: the input view that could not be matched.

    Attributes:
        cursor: Input handed to the parser that could not match
        reason: Failure classification
        expected: Short human-readable description of what was expected
            (empty when unknown)
    """

    cursor: Cursor
    reason: FailureReason = FailureReason.NO_MATCH
    expected: str = ""

    @property
    def remaining(self) -> str:
        """Unconsumed input at the point of failure."""
        return self.cursor.rest

    @property
    def is_success(self) -> Literal[False]:
        return False

    def describe(self) -> str:
        """Format a one-line description of the failure.

        Example:
            >>> Failure(Cursor("nul"), FailureReason.LITERAL, "'null'").describe()
            "expected 'null' (literal) at offset 0, found 'nul'"
        """
        rest = self.cursor.rest
        found = repr(rest[:_DESCRIBE_PREVIEW]) if rest else "end of input"
        if len(rest) > _DESCRIBE_PREVIEW:
            found += "..."
        expected = f"{self.expected} ({self.reason})" if self.expected else str(self.reason)
        return f"expected {expected} at offset {self.cursor.pos}, found {found}"

    def unwrap(self) -> NoReturn:
        """Raise ParseError for this failure.

        Raises:
            ParseError: Always
        """
        raise ParseError(self)

    def __bool__(self) -> Literal[False]:
        return False


type ParseResult[T] = Success[T] | Failure
