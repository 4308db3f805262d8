"""Parse driver configuration.

Provides a single frozen dataclass that carries the options accepted by
:func:`combparse.syntax.parser.core.run`.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from combparse.constants import MAX_DEPTH, MAX_SOURCE_SIZE

__all__ = ["ParseConfig"]


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable configuration for a top-level parse.

    All fields have defaults; ``ParseConfig()`` reproduces the permissive
    behaviour of calling ``parser.parse(text)`` directly.

    Attributes:
        max_source_size: Maximum input length in characters (default: 10 MiB).
            Zero disables the check.
        max_nesting_depth: Maximum depth of nested() parsers (default: 100).
            Deeper input fails with reason NESTING_DEPTH.
        require_eof: Report trailing unconsumed input as a failure
            (default: False).
        trace: Log attempt/success/failure of the top-level parser at
            DEBUG level (default: False).

    Example:
        >>> from combparse import ParseConfig, match_literal, run
        >>> result = run(match_literal("null"), "nullable", ParseConfig(require_eof=True))
        >>> result.remaining
        'able'
        >>> result.is_success
        False
    """

    max_source_size: int = MAX_SOURCE_SIZE
    max_nesting_depth: int = MAX_DEPTH
    require_eof: bool = False
    trace: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_source_size is negative or max_nesting_depth
                is below 1.
        """
        if self.max_source_size < 0:
            msg = "max_source_size must not be negative"
            raise ValueError(msg)
        if self.max_nesting_depth < 1:
            msg = "max_nesting_depth must be at least 1"
            raise ValueError(msg)
