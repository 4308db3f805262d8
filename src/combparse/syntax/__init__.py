"""Input model, result types and the parsing engine.

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor
from .result import Failure, ParseResult, Success

__all__ = ["Cursor", "Failure", "ParseResult", "Success"]
