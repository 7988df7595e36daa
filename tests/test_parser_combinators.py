"""Tests for syntax.parser.combinators.

Validates the backtracking protocol: sequencing preserves the failure
tier, alternation consults a sibling only after a SoftFailure and always
from the original cursor, repetition ends on SoftFailure and aborts on
HardFailure.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from jsonparsec.diagnostics import ErrorTemplate
from jsonparsec.syntax.cursor import (
    Cursor,
    HardFailure,
    ParseOutcome,
    Parser,
    SoftFailure,
    Success,
)
from jsonparsec.syntax.parser.combinators import (
    alternative,
    choice,
    map_value,
    optional,
    preceded,
    repeat_one_or_more,
    repeat_zero_or_more,
    sequence,
    terminated,
)
from jsonparsec.syntax.parser.primitives import digit, literal

# ============================================================================
# HELPERS
# ============================================================================


def _hard(cursor: Cursor) -> ParseOutcome[str]:
    return HardFailure(cursor.pos, ErrorTemplate.unclosed_string(1))


def _recording(calls: list[int], parser: Parser[str]) -> Parser[str]:
    """Wrap parser, recording the cursor position of every call."""

    def parse_recorded(cursor: Cursor) -> ParseOutcome[str]:
        calls.append(cursor.pos)
        return parser(cursor)

    return parse_recorded


def _tiered(tier: str) -> Callable[[Cursor], ParseOutcome[str]]:
    """Parser that always ends with the given tier."""

    def parse_tiered(cursor: Cursor) -> ParseOutcome[str]:
        match tier:
            case "success":
                return Success(cursor.advance(), tier)
            case "soft":
                return SoftFailure(cursor, ErrorTemplate.expected_digit("x"))
            case _:
                return _hard(cursor)

    return parse_tiered


# ============================================================================
# SEQUENCE
# ============================================================================


class TestSequence:
    """Test sequence() and its keep-one-side variants."""

    def test_both_succeed(self) -> None:
        """Values are paired and the cursor ends after both."""
        outcome = sequence(literal("a"), literal("b"))(Cursor("abc", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == ("a", "b")
        assert outcome.cursor.pos == 2

    def test_first_soft_stays_soft(self) -> None:
        """A SoftFailure of the first stage is returned as-is."""
        assert isinstance(sequence(literal("x"), literal("b"))(Cursor("ab", 0)), SoftFailure)

    def test_second_soft_stays_soft(self) -> None:
        """A SoftFailure of the second stage is not escalated."""
        outcome = sequence(literal("a"), literal("x"))(Cursor("ab", 0))

        assert isinstance(outcome, SoftFailure)
        assert outcome.cursor.pos == 1

    def test_hard_propagates(self) -> None:
        """A HardFailure of either stage is returned unchanged."""
        assert isinstance(sequence(literal("a"), _hard)(Cursor("ab", 0)), HardFailure)

    def test_preceded_and_terminated(self) -> None:
        """preceded() keeps the second value, terminated() the first."""
        cursor = Cursor("-5;", 0)

        kept_second = preceded(literal("-"), digit(10))(cursor)
        kept_first = terminated(preceded(literal("-"), digit(10)), literal(";"))(cursor)

        assert isinstance(kept_second, Success)
        assert kept_second.value == "5"
        assert isinstance(kept_first, Success)
        assert kept_first.value == "5"
        assert kept_first.cursor.is_eof


# ============================================================================
# ALTERNATION
# ============================================================================


class TestAlternative:
    """Test alternative() and choice()."""

    def test_first_success_wins(self) -> None:
        """The second parser is not consulted after a success."""
        calls: list[int] = []
        outcome = alternative(literal("a"), _recording(calls, literal("a")))(Cursor("a", 0))

        assert isinstance(outcome, Success)
        assert calls == []

    def test_soft_tries_second_from_original_cursor(self) -> None:
        """After a SoftFailure deep in the first, the second starts over."""
        calls: list[int] = []
        first = sequence(literal("a"), literal("x"))
        outcome = alternative(first, _recording(calls, literal("ab")))(Cursor("ab", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == "ab"
        assert calls == [0]

    def test_hard_is_never_retried(self) -> None:
        """After a HardFailure the second parser never runs."""
        calls: list[int] = []
        outcome = alternative(_hard, _recording(calls, literal("a")))(Cursor("a", 0))

        assert isinstance(outcome, HardFailure)
        assert calls == []

    def test_choice_returns_last_soft(self) -> None:
        """When every alternative fails softly, the last failure is reported."""
        outcome = choice(literal("a"), literal("b"), literal("c"))(Cursor("z", 0))

        assert isinstance(outcome, SoftFailure)
        assert outcome.diagnostic.message == "expected `c`, found `z`"

    def test_choice_requires_parsers(self) -> None:
        """choice() with no alternatives is a programming error."""
        with pytest.raises(ValueError, match="at least one parser"):
            choice()

    @given(tiers=st.lists(st.sampled_from(["success", "soft", "hard"]), min_size=1, max_size=6))
    def test_choice_stops_at_first_non_soft(self, tiers: list[str]) -> None:
        """PROPERTY: alternation never runs a sibling after Success or HardFailure."""
        calls: list[int] = []
        parsers = [_recording(calls, _tiered(tier)) for tier in tiers]
        outcome = choice(*parsers)(Cursor("abc", 0))

        decisive = next((i for i, tier in enumerate(tiers) if tier != "soft"), None)
        event(f"decisive={'none' if decisive is None else tiers[decisive]}")

        if decisive is None:
            assert len(calls) == len(tiers)
            assert isinstance(outcome, SoftFailure)
        else:
            assert len(calls) == decisive + 1
            expected = Success if tiers[decisive] == "success" else HardFailure
            assert isinstance(outcome, expected)
        assert set(calls) == {0}


# ============================================================================
# REPETITION
# ============================================================================


class TestRepetition:
    """Test repeat_zero_or_more() and repeat_one_or_more()."""

    def test_zero_matches_succeeds(self) -> None:
        """Zero-or-more succeeds without consuming when nothing matches."""
        outcome = repeat_zero_or_more(digit(10))(Cursor("x", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == ()
        assert outcome.cursor.pos == 0

    def test_collects_until_soft(self) -> None:
        """Values are collected; the cursor stays before the failed attempt."""
        outcome = repeat_zero_or_more(digit(10))(Cursor("123x", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == ("1", "2", "3")
        assert outcome.cursor.pos == 3

    def test_cursor_restored_before_partial_attempt(self) -> None:
        """A partially consumed failed iteration is rolled back."""
        pair = sequence(literal(","), digit(10))
        outcome = repeat_zero_or_more(pair)(Cursor(",1,2,x", 0))

        assert isinstance(outcome, Success)
        assert len(outcome.value) == 2
        assert outcome.cursor.pos == 4

    def test_hard_aborts(self) -> None:
        """A HardFailure inside the repetition is returned."""
        parser = choice(digit(10), _hard)
        assert isinstance(repeat_zero_or_more(parser)(Cursor("12x", 0)), HardFailure)

    def test_non_consuming_success_terminates(self) -> None:
        """A parser that succeeds without consuming does not loop forever."""
        outcome = repeat_zero_or_more(optional(digit(10)))(Cursor("x", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == ()

    def test_one_or_more_requires_one(self) -> None:
        """One-or-more reports the first SoftFailure when nothing matches."""
        outcome = repeat_one_or_more(digit(10))(Cursor("x", 0))

        assert isinstance(outcome, SoftFailure)
        assert outcome.diagnostic.message == "`x` is not a digit"

    def test_one_or_more_collects(self) -> None:
        """One-or-more returns every match in order."""
        outcome = repeat_one_or_more(digit(10))(Cursor("907", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == ("9", "0", "7")


# ============================================================================
# MAPPING AND OPTIONAL
# ============================================================================


class TestMapping:
    """Test map_value() and optional()."""

    def test_map_value_transforms_success(self) -> None:
        """map_value() applies the function to a Success value."""
        outcome = map_value(repeat_one_or_more(digit(10)), "".join)(Cursor("42", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == "42"

    def test_map_value_passes_failures(self) -> None:
        """map_value() never calls the function on failure."""
        outcome = map_value(_hard, lambda _: pytest.fail("mapped a failure"))(Cursor("", 0))

        assert isinstance(outcome, HardFailure)

    def test_optional_absent(self) -> None:
        """optional() yields None without consuming on SoftFailure."""
        outcome = optional(literal("-"))(Cursor("5", 0))

        assert isinstance(outcome, Success)
        assert outcome.value is None
        assert outcome.cursor.pos == 0

    def test_optional_keeps_hard(self) -> None:
        """optional() does not hide a HardFailure."""
        assert isinstance(optional(_hard)(Cursor("5", 0)), HardFailure)
