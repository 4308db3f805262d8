"""combparse - a small parser-combinator engine.

Build recursive-descent parsers for text grammars by composing small,
reusable parsers instead of hand-writing a tokenizer/parser pair.

Public API:
    Parser - The parser abstraction (parse, map, pred, and_then, or_else)
    Cursor - Immutable input view
    Success, Failure, ParseResult - Parse outcomes
    match_literal, identifier, quoted_string, integer, space0, space1 - Primitives
    pair, left, right, between, zero_or_more, one_or_more, either, choice,
    whitespace_wrap, nested - Combinators
    run, ParseConfig - Top-level driver and its options

Exceptions:
    CombparseError - Base exception class
    ParseError - Raised by Failure.unwrap()
    GrammarError - Invalid grammar construction

Submodules:
    combparse.grammars.json - JSON element grammar
    combparse.grammars.xml - XML element grammar
"""

from .config import ParseConfig
from .diagnostics import (
    CombparseError,
    FailureReason,
    GrammarError,
    InfiniteRepetitionError,
    ParseError,
    SourceTooLargeError,
)
from .syntax import Cursor, Failure, ParseResult, Success
from .syntax.parser import (
    Forward,
    Parser,
    ParserLike,
    and_then,
    any_char,
    as_parser,
    between,
    choice,
    either,
    end_of_input,
    forward,
    identifier,
    integer,
    lazy,
    left,
    map_,
    match_literal,
    nested,
    one_or_more,
    optional,
    or_else,
    pair,
    pred,
    quoted_string,
    right,
    run,
    satisfy,
    separated_by,
    space0,
    space1,
    whitespace_char,
    whitespace_wrap,
    zero_or_more,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("combparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CombparseError",
    "Cursor",
    "Failure",
    "FailureReason",
    "Forward",
    "GrammarError",
    "InfiniteRepetitionError",
    "ParseConfig",
    "ParseError",
    "ParseResult",
    "Parser",
    "ParserLike",
    "SourceTooLargeError",
    "Success",
    "__version__",
    "and_then",
    "any_char",
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
