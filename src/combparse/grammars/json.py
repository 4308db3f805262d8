"""JSON element grammar built from combparse combinators.

Covers null, booleans, unsigned integers, strings without escapes, arrays and
objects, with whitespace allowed around punctuation. Arrays and objects count
as nesting levels; see :func:`combparse.syntax.parser.core.nested`.

Example:
    >>> result = parse_json('{"a": true, "b": [1, null]}')
    >>> result.value.members["b"]
    JsonArray(items=(JsonNumber(value=1), JsonNull()))
"""

from dataclasses import dataclass, field

from combparse.syntax.parser import (
    Forward,
    Parser,
    as_parse_fn,
    between,
    choice,
    either,
    forward,
    integer,
    left,
    match_literal,
    nested,
    one_or_more,
    pair,
    quoted_string,
    right,
    separated_by,
    space0,
    whitespace_wrap,
    zero_or_more,
)
from combparse.syntax.cursor import Cursor
from combparse.syntax.result import Failure, ParseResult, Success

__all__ = [
    "Element",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "array",
    "boolean",
    "document",
    "element",
    "element_pair",
    "element_pairs",
    "null",
    "number",
    "object_",
    "object_body",
    "object_start",
    "parse_json",
    "string",
]

# ============================================================================
# VALUE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The ``null`` literal."""


@dataclass(frozen=True, slots=True)
class JsonBool:
    value: bool


@dataclass(frozen=True, slots=True)
class JsonNumber:
    value: int


@dataclass(frozen=True, slots=True)
class JsonString:
    value: str


@dataclass(frozen=True, slots=True)
class JsonArray:
    """Array items in document order. Hashable only if every item is."""

    items: tuple["Element", ...] = ()


@dataclass(frozen=True, slots=True)
class JsonObject:
    """Object members keyed by name. Later duplicate keys replace earlier ones.

    Compared by value like the other JSON types, but unhashable: the members
    mapping is a plain dict.
    """

    members: dict[str, "Element"] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]


type Element = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

# ============================================================================
# SCALARS
# ============================================================================


def null() -> Parser[JsonNull]:
    return match_literal("null").map(lambda _: JsonNull())


def boolean() -> Parser[JsonBool]:
    true = match_literal("true").map(lambda _: JsonBool(True))
    false = match_literal("false").map(lambda _: JsonBool(False))
    return (true | false).named("boolean")


def number() -> Parser[JsonNumber]:
    return integer().map(JsonNumber)


def string() -> Parser[JsonString]:
    return quoted_string().map(JsonString)


# ============================================================================
# COMPOSITES
# ============================================================================

# element and the containers refer to each other; the forward is bound once,
# when this module is imported.
_element: Forward[Element] = forward("element")


def element() -> Parser[Element]:
    """Any JSON value. Alternatives are tried in order: null, boolean,
    number, string, array, object."""
    return _element


def element_pair() -> Parser[tuple[str, Element]]:
    """Object member: ``"name" : value``."""
    return pair(left(quoted_string(), whitespace_wrap(match_literal(":"))), _element)


def element_pairs() -> Parser[list[tuple[str, Element]]]:
    """One or more members, each optionally followed by commas.

    Stray and trailing commas are tolerated.
    """
    return one_or_more(left(element_pair(), zero_or_more(whitespace_wrap(match_literal(",")))))


def object_start() -> Parser[tuple[str, Element]]:
    """Opening brace and the first member."""
    return right(whitespace_wrap(match_literal("{")), element_pair())


def object_body() -> Parser[dict[str, Element]]:
    """Opening brace, the first member and any comma-separated members after it."""
    start_fn = as_parse_fn(object_start())
    next_fn = as_parse_fn(right(whitespace_wrap(match_literal(",")), element_pair()))

    def parse_object_body(cursor: Cursor) -> ParseResult[dict[str, Element]]:
        result = start_fn(cursor)
        if isinstance(result, Failure):
            return result
        members = dict([result.value])
        cursor = result.cursor
        while isinstance(following := next_fn(cursor), Success):
            name, value = following.value
            members[name] = value
            cursor = following.cursor
        return Success(members, cursor)

    return Parser(parse_object_body, "object_body")


def object_() -> Parser[JsonObject]:
    """A JSON object, including ``{}``. Counts as one nesting level."""
    empty = left(whitespace_wrap(match_literal("{")), match_literal("}")).map(lambda _: {})
    members = left(object_body(), whitespace_wrap(match_literal("}")))
    return nested(either(empty, members)).map(JsonObject).named("object")


def array() -> Parser[JsonArray]:
    """A JSON array, including ``[]``. Counts as one nesting level."""
    items = separated_by(whitespace_wrap(_element), match_literal(","))
    opening = left(match_literal("["), space0())
    closing = right(space0(), match_literal("]"))
    return (
        nested(between(opening, items, closing))
        .map(lambda found: JsonArray(tuple(found)))
        .named("array")
    )


_element.define(choice(null(), boolean(), number(), string(), array(), object_()))


def document() -> Parser[Element]:
    """A value with optional surrounding whitespace."""
    return whitespace_wrap(_element)


def parse_json(text: str) -> ParseResult[Element]:
    """Parse text as a JSON document.

    Trailing input after the value is returned as the remainder, not
    treated as an error.
    """
    return document().parse(text)
