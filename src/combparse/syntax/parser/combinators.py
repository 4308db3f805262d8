"""Combinators: functions that build new parsers from existing ones.

Every combinator accepts parser-like values (Parser instances or plain
``Cursor -> ParseResult`` functions) and returns a new Parser; the inputs
remain reusable.

Failure propagation:
    - Sequencing (pair, left, right, between, one_or_more) short-circuits and reports
      the innermost failure unchanged.
    - Choice (either, choice) tries alternatives in order from the same
      input and reports the last alternative's failure.
"""

from collections.abc import Callable

from combparse.diagnostics import GrammarError, InfiniteRepetitionError
from combparse.syntax.cursor import Cursor
from combparse.syntax.parser.core import Parser, ParserLike, as_parse_fn, as_parser
from combparse.syntax.parser.whitespace import skip_whitespace
from combparse.syntax.result import Failure, ParseResult, Success

__all__ = [
    "and_then",
    "between",
    "choice",
    "either",
    "left",
    "map_",
    "one_or_more",
    "optional",
    "or_else",
    "pair",
    "pred",
    "right",
    "separated_by",
    "whitespace_wrap",
    "zero_or_more",
]


def pair[A, B](parser1: ParserLike[A], parser2: ParserLike[B]) -> Parser[tuple[A, B]]:
    """Run parser1, then parser2 on its remainder; produce both values.

    Example:
        >>> from combparse import identifier, match_literal
        >>> tag_opener = pair(match_literal("<"), identifier)
        >>> tag_opener.parse("<my-first-element/>").value
        ('<', 'my-first-element')
    """
    first = as_parser(parser1)
    second = as_parser(parser2)
    first_fn = first._fn
    second_fn = second._fn

    def parse_pair(cursor: Cursor) -> ParseResult[tuple[A, B]]:
        result1 = first_fn(cursor)
        if isinstance(result1, Failure):
            return result1
        result2 = second_fn(result1.cursor)
        if isinstance(result2, Failure):
            return result2
        return Success((result1.value, result2.value), result2.cursor)

    return Parser(parse_pair, f"({first.name} + {second.name})")


def left[A, B](parser1: ParserLike[A], parser2: ParserLike[B]) -> Parser[A]:
    """Sequence two parsers, keeping only the first value."""
    first = as_parser(parser1)
    second = as_parser(parser2)
    first_fn = first._fn
    second_fn = second._fn

    def parse_left(cursor: Cursor) -> ParseResult[A]:
        result1 = first_fn(cursor)
        if isinstance(result1, Failure):
            return result1
        result2 = second_fn(result1.cursor)
        if isinstance(result2, Failure):
            return result2
        return Success(result1.value, result2.cursor)

    return Parser(parse_left, f"({first.name} + {second.name})")


def right[A, B](parser1: ParserLike[A], parser2: ParserLike[B]) -> Parser[B]:
    """Sequence two parsers, keeping only the second value."""
    first = as_parser(parser1)
    second = as_parser(parser2)
    first_fn = first._fn
    second_fn = second._fn

    def parse_right(cursor: Cursor) -> ParseResult[B]:
        result1 = first_fn(cursor)
        if isinstance(result1, Failure):
            return result1
        return second_fn(result1.cursor)

    return Parser(parse_right, f"({first.name} + {second.name})")


def between[O, T, C](
    opening: ParserLike[O], parser: ParserLike[T], closing: ParserLike[C]
) -> Parser[T]:
    """Run opening, parser and closing in sequence; keep parser's value.

    Example:
        >>> from combparse import integer, match_literal
        >>> between(match_literal("("), integer(), match_literal(")")).parse("(42)").value
        42
    """
    open_fn = as_parse_fn(opening)
    inner = as_parser(parser)
    inner_fn = inner._fn
    close_fn = as_parse_fn(closing)

    def parse_between(cursor: Cursor) -> ParseResult[T]:
        opened = open_fn(cursor)
        if isinstance(opened, Failure):
            return opened
        result = inner_fn(opened.cursor)
        if isinstance(result, Failure):
            return result
        closed = close_fn(result.cursor)
        if isinstance(closed, Failure):
            return closed
        return Success(result.value, closed.cursor)

    return Parser(parse_between, inner.name)


def zero_or_more[T](parser: ParserLike[T]) -> Parser[list[T]]:
    """Apply parser until it fails, collecting the values. Never fails.

    Raises:
        InfiniteRepetitionError: At parse time, if parser succeeds without
            consuming input
    """
    inner = as_parser(parser)
    inner_fn = inner._fn

    def parse_zero_or_more(cursor: Cursor) -> ParseResult[list[T]]:
        values: list[T] = []
        while True:
            result = inner_fn(cursor)
            if isinstance(result, Failure):
                return Success(values, cursor)
            if result.cursor.pos == cursor.pos:
                msg = f"{inner.name} succeeded without consuming input inside a repetition"
                raise InfiniteRepetitionError(msg)
            values.append(result.value)
            cursor = result.cursor

    return Parser(parse_zero_or_more, f"{inner.name}*")


def one_or_more[T](parser: ParserLike[T]) -> Parser[list[T]]:
    """Like zero_or_more, but the first application must succeed."""
    inner = as_parser(parser)
    inner_fn = inner._fn
    rest_fn = zero_or_more(inner)._fn

    def parse_one_or_more(cursor: Cursor) -> ParseResult[list[T]]:
        first = inner_fn(cursor)
        if isinstance(first, Failure):
            return first
        rest = rest_fn(first.cursor)
        if isinstance(rest, Failure):
            return rest
        return Success([first.value, *rest.value], rest.cursor)

    return Parser(parse_one_or_more, f"{inner.name}+")


def either[T](parser1: ParserLike[T], parser2: ParserLike[T]) -> Parser[T]:
    """Ordered choice between two parsers; parser2 runs only if parser1 fails."""
    first = as_parser(parser1)
    second = as_parser(parser2)
    first_fn = first._fn
    second_fn = second._fn

    def parse_either(cursor: Cursor) -> ParseResult[T]:
        result = first_fn(cursor)
        if isinstance(result, Success):
            return result
        return second_fn(cursor)

    return Parser(parse_either, f"({first.name} | {second.name})")


def choice[T](*parsers: ParserLike[T]) -> Parser[T]:
    """Ordered choice over any number of alternatives.

    Raises:
        GrammarError: If no alternatives are given
    """
    if not parsers:
        msg = "choice() requires at least one alternative"
        raise GrammarError(msg)
    alternatives = tuple(as_parser(p) for p in parsers)
    alternative_fns = tuple(p._fn for p in alternatives)

    def parse_choice(cursor: Cursor) -> ParseResult[T]:
        result: ParseResult[T] = Failure(cursor)
        for fn in alternative_fns:
            result = fn(cursor)
            if isinstance(result, Success):
                return result
        return result

    return Parser(parse_choice, "(" + " | ".join(p.name for p in alternatives) + ")")


def map_[T, U](parser: ParserLike[T], f: Callable[[T], U]) -> Parser[U]:
    """Function form of ``Parser.map``."""
    return as_parser(parser).map(f)


def pred[T](parser: ParserLike[T], predicate: Callable[[T], bool]) -> Parser[T]:
    """Function form of ``Parser.pred``."""
    return as_parser(parser).pred(predicate)


def and_then[T, U](parser: ParserLike[T], f: Callable[[T], ParserLike[U]]) -> Parser[U]:
    """Function form of ``Parser.and_then``."""
    return as_parser(parser).and_then(f)


def or_else[T](parser: ParserLike[T], f: Callable[[Cursor], ParserLike[T]]) -> Parser[T]:
    """Function form of ``Parser.or_else``."""
    return as_parser(parser).or_else(f)


def whitespace_wrap[T](parser: ParserLike[T]) -> Parser[T]:
    """Discard any whitespace before and after parser.

    Example:
        >>> from combparse import match_literal
        >>> whitespace_wrap(match_literal(",")).parse("  , next").remaining
        'next'
    """
    inner = as_parser(parser)
    inner_fn = inner._fn

    def parse_whitespace_wrap(cursor: Cursor) -> ParseResult[T]:
        result = inner_fn(skip_whitespace(cursor))
        if isinstance(result, Failure):
            return result
        return Success(result.value, skip_whitespace(result.cursor))

    return Parser(parse_whitespace_wrap, inner.name)


def optional[T](parser: ParserLike[T]) -> Parser[T | None]:
    """Produce parser's value, or None without consuming if it fails."""
    inner = as_parser(parser)
    inner_fn = inner._fn

    def parse_optional(cursor: Cursor) -> ParseResult[T | None]:
        result = inner_fn(cursor)
        if isinstance(result, Failure):
            return Success(None, cursor)
        return result

    return Parser(parse_optional, f"{inner.name}?")


def separated_by[T, S](parser: ParserLike[T], separator: ParserLike[S]) -> Parser[list[T]]:
    """Zero or more parser values separated by separator. Never fails.

    A trailing separator is left unconsumed.

    Example:
        >>> from combparse import integer, match_literal
        >>> result = separated_by(integer(), match_literal(",")).parse("1,2,")
        >>> result.value, result.remaining
        ([1, 2], ',')
    """
    item = as_parser(parser)
    item_fn = item._fn
    separator_fn = as_parse_fn(separator)

    def parse_separated_by(cursor: Cursor) -> ParseResult[list[T]]:
        result = item_fn(cursor)
        if isinstance(result, Failure):
            return Success([], cursor)
        values = [result.value]
        cursor = result.cursor
        while True:
            sep = separator_fn(cursor)
            if isinstance(sep, Failure):
                break
            result = item_fn(sep.cursor)
            if isinstance(result, Failure):
                break
            if result.cursor.pos == cursor.pos:
                msg = f"{item.name} and its separator consumed no input inside a repetition"
                raise InfiniteRepetitionError(msg)
            values.append(result.value)
            cursor = result.cursor
        return Success(values, cursor)

    return Parser(parse_separated_by, f"{item.name} separated by {as_parser(separator).name}")
