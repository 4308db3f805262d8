"""XML element grammar built from combparse combinators.

Supports nested elements, self-closing elements and double-quoted
attributes. Text content, comments, processing instructions and entity
references are not part of this grammar.

A closing tag must repeat the opening tag's name; the check is a ``pred``
on the closing tag, built by ``and_then`` from the parsed opening tag.
Each parent element counts as one nesting level.
"""

from dataclasses import dataclass

from combparse.syntax.parser import (
    Parser,
    either,
    identifier,
    left,
    match_literal,
    nested,
    pair,
    quoted_string,
    right,
    space1,
    whitespace_wrap,
    zero_or_more,
)
from combparse.syntax.result import ParseResult

__all__ = [
    "Element",
    "attribute_pair",
    "attributes",
    "close_element",
    "element",
    "element_start",
    "identifier",
    "open_element",
    "parent_element",
    "parse_xml",
    "single_element",
]


@dataclass(frozen=True, slots=True)
class Element:
    """An XML element.

    Attributes:
        name: Tag name
        attributes: (name, value) pairs in document order
        children: Child elements in document order
    """

    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple["Element", ...] = ()


def element() -> Parser[Element]:
    """An element with optional surrounding whitespace.

    Example:
        >>> result = element().parse("<a><b/></a>")
        >>> [child.name for child in result.value.children]
        ['b']
    """
    return whitespace_wrap(either(single_element(), parent_element())).named("element")


def element_start() -> Parser[tuple[str, list[tuple[str, str]]]]:
    """Start of a tag, e.g. ``<top label="x"``."""
    return right(match_literal("<"), pair(identifier, attributes()))


def single_element() -> Parser[Element]:
    """Self-closing element, e.g. ``<br/>``."""
    return left(element_start(), match_literal("/>")).map(
        lambda start: Element(start[0], tuple(start[1]))
    )


def open_element() -> Parser[Element]:
    """Opening tag, e.g. ``<top>``. Produces an element without children."""
    return left(element_start(), match_literal(">")).map(
        lambda start: Element(start[0], tuple(start[1]))
    )


def close_element(expected_name: str) -> Parser[str]:
    """Closing tag whose name must equal expected_name.

    A mismatched name fails at the start of the closing tag.
    """
    closing_tag = right(match_literal("</"), left(identifier, match_literal(">")))
    return closing_tag.named(f"</{expected_name}>").pred(lambda name: name == expected_name)


def parent_element() -> Parser[Element]:
    """Element with an opening tag, children and a matching closing tag.

    Counts as one nesting level.
    """
    return nested(
        open_element().and_then(
            lambda opened: left(zero_or_more(element()), close_element(opened.name)).map(
                lambda children: Element(opened.name, opened.attributes, tuple(children))
            )
        )
    )


def attribute_pair() -> Parser[tuple[str, str]]:
    """``name="value"``."""
    return pair(identifier, right(match_literal("="), quoted_string()))


def attributes() -> Parser[list[tuple[str, str]]]:
    """Attributes, each preceded by at least one whitespace character."""
    return zero_or_more(right(space1(), attribute_pair()))


def parse_xml(text: str) -> ParseResult[Element]:
    """Parse text as a single XML element.

    Trailing input after the element is returned as the remainder.
    """
    return element().parse(text)
