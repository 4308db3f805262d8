"""Core parser abstraction.

This module defines :class:`Parser`, the single capability every grammar is
built from: given a :class:`~combparse.syntax.cursor.Cursor`, produce either
``Success(value, cursor_after)`` or ``Failure(cursor)``.

Architecture:
    - Plain functions and closures taking a Cursor and returning a
      ParseResult are parser-like; :func:`as_parser` wraps them so every
      combinator accepts either uniformly.
    - Derived operations (``map``, ``pred``, ``and_then``, ``or_else``) return
      new parsers; the original stays reusable.
    - Failures are return values. Nothing raises on a non-matching input.

See Also:
    - :mod:`combparse.syntax.parser.primitives` - Literal, identifier, string, integer
    - :mod:`combparse.syntax.parser.combinators` - pair, left, right, repetition, choice
"""

import logging
from collections.abc import Callable
from contextvars import ContextVar

from combparse.config import ParseConfig
from combparse.constants import MAX_DEPTH, TRACE_PREVIEW_LENGTH
from combparse.diagnostics import FailureReason, GrammarError, SourceTooLargeError
from combparse.syntax.cursor import Cursor
from combparse.syntax.result import Failure, ParseResult, Success

__all__ = [
    "Forward",
    "ParseFn",
    "Parser",
    "ParserLike",
    "as_parse_fn",
    "as_parser",
    "forward",
    "lazy",
    "nested",
    "run",
]

logger = logging.getLogger(__name__)

type ParseFn[T] = Callable[[Cursor], ParseResult[T]]
type ParserLike[T] = Parser[T] | ParseFn[T]

# Nesting state for nested(). ContextVars keep concurrent parses in separate
# threads or tasks from sharing a depth count.
_nesting_depth: ContextVar[int] = ContextVar("combparse_nesting_depth", default=0)
_nesting_limit: ContextVar[int] = ContextVar("combparse_nesting_limit", default=MAX_DEPTH)


def _preview(cursor: Cursor) -> str:
    text = cursor.slice_to(cursor.pos + TRACE_PREVIEW_LENGTH)
    if cursor.remaining_length > TRACE_PREVIEW_LENGTH:
        text += "..."
    return repr(text)


class Parser[T]:
    """A composable parsing operation producing values of type T.

    A Parser is a value: it owns no input and keeps no state between calls,
    so invoking it twice on the same cursor gives equal results.

    Example:
        >>> from combparse import match_literal
        >>> null = match_literal("null").map(lambda _: None)
        >>> null.parse("nullable").remaining
        'able'
        >>> bool(null.parse("nil"))
        False

    Operators:
        ``p + q`` pair, ``p | q`` either, ``p << q`` left, ``p >> q`` right.
    """

    __slots__ = ("_fn", "_name")

    def __init__(self, fn: ParseFn[T], name: str | None = None) -> None:
        """Wrap a parse function.

        Args:
            fn: Callable taking a Cursor and returning a ParseResult
            name: Display name for tracing and failure descriptions

        Raises:
            GrammarError: If fn is not callable
        """
        if not callable(fn):
            msg = f"parser function must be callable, got {type(fn).__name__}"
            raise GrammarError(msg)
        self._fn = fn
        self._name = name if name is not None else getattr(fn, "__name__", "parser")

    @property
    def name(self) -> str:
        """Display name of this parser."""
        return self._name

    def __call__(self, cursor: Cursor) -> ParseResult[T]:
        return self._fn(cursor)

    def __repr__(self) -> str:
        return f"Parser({self._name})"

    def parse(self, source: str | Cursor) -> ParseResult[T]:
        """Run this parser against a full input text or an existing cursor.

        Args:
            source: Input text (parsed from offset 0) or a Cursor

        Returns:
            Success with the value and remaining cursor, or Failure
        """
        cursor = source if isinstance(source, Cursor) else Cursor.of(source)
        return self._fn(cursor)

    def named(self, name: str) -> "Parser[T]":
        """Return the same parser under a different display name."""
        return Parser(self._fn, name)

    def map[U](self, f: Callable[[T], U]) -> "Parser[U]":
        """Transform the produced value; consumption and failures are unchanged."""

        def parse_map(cursor: Cursor) -> ParseResult[U]:
            result = self._fn(cursor)
            if isinstance(result, Failure):
                return result
            return Success(f(result.value), result.cursor)

        return Parser(parse_map, self._name)

    def pred(self, predicate: Callable[[T], bool]) -> "Parser[T]":
        """Reject values failing predicate as if this parser had not matched.

        A rejected value fails with the original input, so nothing this
        parser consumed leaks into the failure.
        """

        def parse_pred(cursor: Cursor) -> ParseResult[T]:
            result = self._fn(cursor)
            if isinstance(result, Success) and not predicate(result.value):
                return Failure(cursor, FailureReason.PREDICATE, self._name)
            return result

        return Parser(parse_pred, self._name)

    def and_then[U](self, f: Callable[[T], "ParserLike[U]"]) -> "Parser[U]":
        """Build a second parser from the produced value and run it on the remainder.

        Example:
            >>> from combparse import integer, match_literal
            >>> counted = integer().and_then(lambda n: match_literal("x" * n))
            >>> counted.parse("3xxxx").remaining
            'x'
        """

        def parse_and_then(cursor: Cursor) -> ParseResult[U]:
            result = self._fn(cursor)
            if isinstance(result, Failure):
                return result
            return as_parse_fn(f(result.value))(result.cursor)

        return Parser(parse_and_then, self._name)

    def or_else(self, f: Callable[[Cursor], "ParserLike[T]"]) -> "Parser[T]":
        """On failure, build an alternative from the original input and run it there."""

        def parse_or_else(cursor: Cursor) -> ParseResult[T]:
            result = self._fn(cursor)
            if isinstance(result, Success):
                return result
            return as_parse_fn(f(cursor))(cursor)

        return Parser(parse_or_else, self._name)

    def traced(self, label: str | None = None) -> "Parser[T]":
        """Log each attempt, success and failure of this parser at DEBUG level."""
        tag = label if label is not None else self._name

        def parse_traced(cursor: Cursor) -> ParseResult[T]:
            if not logger.isEnabledFor(logging.DEBUG):
                return self._fn(cursor)
            logger.debug("[attempting: %s at %d] %s", tag, cursor.pos, _preview(cursor))
            result = self._fn(cursor)
            match result:
                case Success(cursor=after):
                    logger.debug(
                        "[success: %s] consumed %r, remaining %s",
                        tag,
                        cursor.consumed_until(after),
                        _preview(after),
                    )
                case Failure(cursor=at, reason=reason):
                    logger.debug(
                        "[failure: %s] %s at %d, remaining %s", tag, reason, at.pos, _preview(at)
                    )
            return result

        return Parser(parse_traced, tag)

    # Combinators are built on Parser, so operator sugar imports them lazily.

    def __add__[U](self, other: "ParserLike[U]") -> "Parser[tuple[T, U]]":
        from combparse.syntax.parser.combinators import pair

        return pair(self, other)

    def __or__(self, other: "ParserLike[T]") -> "Parser[T]":
        from combparse.syntax.parser.combinators import either

        return either(self, other)

    def __lshift__(self, other: "ParserLike[object]") -> "Parser[T]":
        from combparse.syntax.parser.combinators import left

        return left(self, other)

    def __rshift__[U](self, other: "ParserLike[U]") -> "Parser[U]":
        from combparse.syntax.parser.combinators import right

        return right(self, other)


def as_parser[T](obj: ParserLike[T]) -> Parser[T]:
    """Coerce a parser-like value into a Parser.

    Raises:
        GrammarError: If obj is neither a Parser nor callable
    """
    if isinstance(obj, Parser):
        return obj
    if callable(obj):
        return Parser(obj)
    msg = f"expected a parser or parse function, got {type(obj).__name__}"
    raise GrammarError(msg)


def as_parse_fn[T](obj: ParserLike[T]) -> ParseFn[T]:
    """Return the bare parse function behind a parser-like value.

    Combinators call this function directly instead of going through
    ``Parser.__call__``, which keeps recursive grammars one frame shallower
    per combinator.
    """
    return as_parser(obj)._fn


class Forward[T](Parser[T]):
    """A parser declared before it is defined.

    Used for self-recursive rules such as ``value ::= ... "[" value "]" ...``.

    Example:
        >>> from combparse import match_literal, either, right
        >>> nested = forward("nested")
        >>> _ = nested.define(either(match_literal("x"), right(match_literal("("), nested)))
        >>> nested.parse("((x").value
        'x'
    """

    __slots__ = ("_target",)

    def __init__(self, name: str = "forward") -> None:
        self._target: Parser[T] | None = None
        super().__init__(self._dispatch, name)

    @property
    def is_defined(self) -> bool:
        return self._target is not None

    def define(self, parser: ParserLike[T]) -> "Forward[T]":
        """Bind the implementation.

        Raises:
            GrammarError: If already defined
        """
        if self._target is not None:
            msg = f"forward parser '{self._name}' is already defined"
            raise GrammarError(msg)
        self._target = as_parser(parser)
        return self

    def _dispatch(self, cursor: Cursor) -> ParseResult[T]:
        if self._target is None:
            msg = f"forward parser '{self._name}' used before definition"
            raise GrammarError(msg)
        return self._target._fn(cursor)


def forward[T](name: str = "forward") -> Forward[T]:
    """Declare a parser to be defined later with ``define()``."""
    return Forward(name)


def lazy[T](factory: Callable[[], ParserLike[T]], name: str = "lazy") -> Parser[T]:
    """Defer construction of a parser until it is run."""

    def parse_lazy(cursor: Cursor) -> ParseResult[T]:
        return as_parse_fn(factory())(cursor)

    return Parser(parse_lazy, name)


def nested[T](parser: ParserLike[T]) -> Parser[T]:
    """Count one level of nesting around a recursive rule.

    Wrap the self-referencing parts of a grammar (arrays, objects, parent
    elements) so that input nesting them deeper than the active limit fails
    with reason NESTING_DEPTH instead of exhausting the Python stack. The
    limit is ``MAX_DEPTH`` unless :func:`run` was given another
    ``max_nesting_depth``.

    If the interpreter stack still runs out first (a grammar spending many
    frames per level, or a lowered recursion limit), the outermost nested()
    parser reports the same NESTING_DEPTH failure.

    Example:
        >>> from combparse import either, match_literal, right
        >>> parens = forward("parens")
        >>> _ = parens.define(nested(either(match_literal("x"), right(match_literal("("), parens))))
        >>> parens.parse("(" * 3 + "x").value
        'x'
        >>> parens.parse("(" * 500 + "x").reason
        <FailureReason.NESTING_DEPTH: 'nesting-depth'>
    """
    inner = as_parser(parser)
    fn = inner._fn

    def parse_nested(cursor: Cursor) -> ParseResult[T]:
        depth = _nesting_depth.get()
        limit = _nesting_limit.get()
        if depth >= limit:
            return Failure(cursor, FailureReason.NESTING_DEPTH, f"at most {limit} nesting levels")
        token = _nesting_depth.set(depth + 1)
        try:
            if depth:
                return fn(cursor)
            try:
                return fn(cursor)
            except RecursionError:
                logger.warning(
                    "Python stack exhausted inside %s before reaching nesting limit %d",
                    inner.name,
                    limit,
                )
                return Failure(
                    cursor, FailureReason.NESTING_DEPTH, f"at most {limit} nesting levels"
                )
        finally:
            _nesting_depth.reset(token)

    return Parser(parse_nested, inner.name)


def run[T](
    parser: ParserLike[T], source: str, config: ParseConfig | None = None
) -> ParseResult[T]:
    """Top-level driver: parse a complete document.

    Without ``require_eof`` the result is exactly ``parser.parse(source)``;
    trailing input is left for the caller to judge.

    Args:
        parser: Parser to run
        source: Full input text
        config: Driver options (default: ``ParseConfig()``)

    Returns:
        The parse result. With ``require_eof``, a success that leaves input
        unconsumed becomes a Failure with reason TRAILING_INPUT.
        Input nesting deeper than ``max_nesting_depth`` inside nested()
        parsers fails with reason NESTING_DEPTH.

    Raises:
        SourceTooLargeError: If source exceeds config.max_source_size
    """
    config = config if config is not None else ParseConfig()
    if config.max_source_size and len(source) > config.max_source_size:
        raise SourceTooLargeError(len(source), config.max_source_size)

    p = as_parser(parser)
    if config.trace:
        p = p.traced()

    token = _nesting_limit.set(config.max_nesting_depth)
    try:
        result = p.parse(source)
    finally:
        _nesting_limit.reset(token)
    if config.require_eof and isinstance(result, Success) and not result.cursor.is_eof:
        result = Failure(result.cursor, FailureReason.TRAILING_INPUT, "end of input")

    if isinstance(result, Success):
        logger.debug("Parsed %d characters with %s", result.cursor.pos, p.name)
    else:
        logger.debug("Parse with %s failed: %s", p.name, result.describe())
    return result
