"""Combinator parsing engine.

Module Organization:
- core.py: Parser abstraction, forward declarations, run() driver
- primitives.py: Literal, identifier, quoted string, integer, single characters
- whitespace.py: Whitespace characters and runs
- combinators.py: Sequencing, repetition, choice, wrapping
"""

from combparse.syntax.parser.combinators import (
    and_then,
    between,
    choice,
    either,
    left,
    map_,
    one_or_more,
    optional,
    or_else,
    pair,
    pred,
    right,
    separated_by,
    whitespace_wrap,
    zero_or_more,
)
from combparse.syntax.parser.core import (
    Forward,
    ParseFn,
    Parser,
    ParserLike,
    as_parse_fn,
    as_parser,
    forward,
    lazy,
    nested,
    run,
)
from combparse.syntax.parser.primitives import (
    any_char,
    end_of_input,
    identifier,
    integer,
    match_literal,
    quoted_string,
    satisfy,
)
from combparse.syntax.parser.whitespace import space0, space1, whitespace_char

__all__ = [
    "Forward",
    "ParseFn",
    "Parser",
    "ParserLike",
    "and_then",
    "any_char",
    "as_parse_fn",
    "as_parser",
    "between",
    "choice",
    "either",
    "end_of_input",
    "forward",
    "identifier",
    "integer",
    "lazy",
    "left",
    "map_",
    "match_literal",
    "nested",
    "one_or_more",
    "optional",
    "or_else",
    "pair",
    "pred",
    "quoted_string",
    "right",
    "run",
    "satisfy",
    "separated_by",
    "space0",
    "space1",
    "whitespace_char",
    "whitespace_wrap",
    "zero_or_more",
]
