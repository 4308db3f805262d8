"""Hypothesis property-based tests for the combinator engine.

Covers the engine-wide guarantees: failing primitives make no progress,
successful parses only consume a prefix, zero_or_more never fails, and
ordered choice commits to the first success.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from combparse import (
    Cursor,
    Failure,
    Parser,
    Success,
    any_char,
    either,
    identifier,
    integer,
    match_literal,
    one_or_more,
    or_else,
    pair,
    quoted_string,
    space0,
    space1,
    whitespace_char,
    whitespace_wrap,
    zero_or_more,
)
from combparse.syntax.result import ParseResult
from tests.strategies import any_text, identifiers, literals

# ============================================================================
# PARSERS UNDER TEST
# ============================================================================


def _primitives(literal: str) -> list[Parser[object]]:
    return [
        match_literal(literal),
        identifier,
        quoted_string(),
        integer(),
        space1(),
        whitespace_char(),
        any_char(),
        integer().pred(lambda n: n % 2 == 0),
    ]


def _composites(literal: str) -> list[Parser[object]]:
    lit = match_literal(literal)
    return [
        pair(lit, identifier),
        whitespace_wrap(lit),
        zero_or_more(lit),
        one_or_more(identifier),
        either(integer(), quoted_string()),
        identifier.and_then(lambda name: match_literal(name[:1])),
    ]


def _always_succeeds(cursor: Cursor) -> ParseResult[str]:
    return Success("first", cursor)


def _never_called(cursor: Cursor) -> ParseResult[str]:
    msg = "alternative must not run"
    raise AssertionError(msg)


# ============================================================================
# PROPERTY TESTS
# ============================================================================


class TestNoProgressOnFailure:
    """Failing primitives report exactly the input they were given."""

    @given(text=any_text, literal=literals, offset=st.integers(min_value=0, max_value=5))
    @settings(max_examples=200)
    def test_failure_cursor_equals_input(self, text: str, literal: str, offset: int) -> None:
        """INVARIANT: a failing primitive returns its own input unchanged."""
        cursor = Cursor(text, min(offset, len(text)))
        for parser in _primitives(literal):
            result = parser(cursor)
            if isinstance(result, Failure):
                event(f"failure: {parser.name}")
                assert result.cursor == cursor


class TestConsumptionMonotonicity:
    """Successful parses only remove a prefix."""

    @given(text=any_text, literal=literals)
    @settings(max_examples=200)
    def test_prefix_plus_suffix_is_input(self, text: str, literal: str) -> None:
        """PROPERTY: consumed + remaining == original, remaining never grows."""
        start = Cursor.of(text)
        for parser in _primitives(literal) + _composites(literal):
            result = parser(start)
            if isinstance(result, Success):
                event(f"success: {parser.name}")
                assert result.cursor.is_suffix_of(start)
                assert len(result.remaining) <= len(text)
                assert start.consumed_until(result.cursor) + result.remaining == text

    @given(text=any_text, literal=literals)
    @settings(max_examples=100)
    def test_failures_stay_within_input(self, text: str, literal: str) -> None:
        """PROPERTY: every failure points into the original input."""
        start = Cursor.of(text)
        for parser in _composites(literal):
            result = parser(start)
            if isinstance(result, Failure):
                assert result.cursor.is_suffix_of(start)


class TestZeroOrMoreTotality:
    """zero_or_more always succeeds."""

    @given(text=any_text, literal=literals)
    @settings(max_examples=200)
    def test_never_fails(self, text: str, literal: str) -> None:
        """PROPERTY: zero_or_more(p) succeeds on any input."""
        lit = match_literal(literal)
        result = zero_or_more(lit).parse(text)

        assert isinstance(result, Success)
        if not text.startswith(literal):
            event("empty repetition")
            assert result.value == []
            assert result.remaining == text

    @given(name=identifiers(), count=st.integers(min_value=0, max_value=6))
    @settings(max_examples=100)
    def test_counts_repetitions(self, name: str, count: int) -> None:
        """PROPERTY: n adjacent literals give n values."""
        result = zero_or_more(whitespace_wrap(match_literal(name))).parse(f"{name} " * count)

        assert isinstance(result, Success)
        assert result.value == [name] * count
        assert result.remaining == ""


class TestOrderedChoice:
    """First success wins; later alternatives are never attempted."""

    @given(text=any_text)
    @settings(max_examples=100)
    def test_either_commits_to_first(self, text: str) -> None:
        result = either(_always_succeeds, _never_called).parse(text)

        assert result == Success("first", Cursor.of(text))

    @given(text=any_text)
    @settings(max_examples=100)
    def test_or_else_commits_to_first(self, text: str) -> None:
        fallback_built: list[Cursor] = []

        def fallback(cursor: Cursor) -> Parser[str]:
            fallback_built.append(cursor)
            return Parser(_never_called)

        result = or_else(_always_succeeds, fallback).parse(text)

        assert result == Success("first", Cursor.of(text))
        assert fallback_built == []


class TestParserIdempotence:
    """Parsers are values: repeated runs agree."""

    @given(text=any_text, literal=literals)
    @settings(max_examples=100)
    def test_repeat_runs_equal(self, text: str, literal: str) -> None:
        for parser in _primitives(literal) + _composites(literal):
            assert parser.parse(text) == parser.parse(text)


@pytest.mark.fuzz
class TestWhitespaceFuzz:
    """Intensive whitespace handling checks."""

    @given(text=st.text(alphabet=" \t\r\n\u00a0x", max_size=200))
    @settings(max_examples=1000)
    def test_space0_stops_at_first_non_space(self, text: str) -> None:
        result = space0().parse(text)

        assert isinstance(result, Success)
        assert result.value.isspace() or result.value == ""
        assert result.remaining == text.lstrip(" \t\r\n\u00a0")
