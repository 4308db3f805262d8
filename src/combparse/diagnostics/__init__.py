"""Failure codes and exception types for combparse.

Python 3.13+. Zero external dependencies.
"""

from .codes import FailureReason
from .errors import (
    CombparseError,
    GrammarError,
    InfiniteRepetitionError,
    ParseError,
    SourceTooLargeError,
)

__all__ = [
    "CombparseError",
    "FailureReason",
    "GrammarError",
    "InfiniteRepetitionError",
    "ParseError",
    "SourceTooLargeError",
]
