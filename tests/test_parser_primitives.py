"""Tests for syntax.parser.primitives and syntax.parser.whitespace.

Covers literal(), digit(), quoted_string(), whitespace skipping and
padded(), including the failure tier each one reports.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from jsonparsec.diagnostics import DiagnosticCode
from jsonparsec.syntax.cursor import Cursor, HardFailure, SoftFailure, Success
from jsonparsec.syntax.parser.primitives import digit, literal, quoted_string
from jsonparsec.syntax.parser.whitespace import padded, skip_whitespace, whitespace_skip
from tests.strategies import raw_strings

# ============================================================================
# LITERAL
# ============================================================================


class TestLiteral:
    """Test literal() exact prefix matching."""

    def test_match_advances_past_pattern(self) -> None:
        """A match consumes exactly the pattern."""
        outcome = literal("true")(Cursor("true,", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == "true"
        assert outcome.cursor.pos == 4

    def test_match_at_offset(self) -> None:
        """Matching starts at the cursor position."""
        outcome = literal(":")(Cursor('"a":1', 3))

        assert isinstance(outcome, Success)
        assert outcome.cursor.pos == 4

    def test_short_input_is_soft(self) -> None:
        """Input shorter than the pattern fails softly."""
        outcome = literal("true")(Cursor("tru", 0))

        assert isinstance(outcome, SoftFailure)
        assert outcome.cursor.pos == 0
        assert outcome.diagnostic.code == DiagnosticCode.EXPECTED_LITERAL
        assert outcome.diagnostic.message == "expected `true`, found `tru`"

    def test_case_sensitive(self) -> None:
        """literal() is case-sensitive."""
        assert isinstance(literal("null")(Cursor("NULL", 0)), SoftFailure)

    def test_found_text_stops_at_newline(self) -> None:
        """The quoted found text ends before the next newline."""
        outcome = literal("{")(Cursor("abc\ndef", 0))

        assert isinstance(outcome, SoftFailure)
        assert outcome.diagnostic.message == "expected `{`, found `abc`"

    def test_eof_reports_end_of_input(self) -> None:
        """At EOF the found text is described as end of input."""
        outcome = literal("}")(Cursor("{", 1))

        assert isinstance(outcome, SoftFailure)
        assert outcome.diagnostic.message == "expected `}`, found end of input"

    def test_empty_pattern_rejected(self) -> None:
        """An empty pattern is a programming error."""
        with pytest.raises(ValueError, match="must not be empty"):
            literal("")


# ============================================================================
# DIGIT
# ============================================================================


class TestDigit:
    """Test digit() single-character matching."""

    def test_decimal_digit(self) -> None:
        """One decimal digit is consumed."""
        outcome = digit(10)(Cursor("42", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == "4"
        assert outcome.cursor.pos == 1

    @pytest.mark.parametrize("ch", ["a", "F", "0"])
    def test_hex_digits_either_case(self, ch: str) -> None:
        """Letters count as digits above base 10, in either case."""
        assert isinstance(digit(16)(Cursor(ch, 0)), Success)

    def test_digit_outside_base_is_soft(self) -> None:
        """A digit too large for the base fails softly."""
        outcome = digit(8)(Cursor("9", 0))

        assert isinstance(outcome, SoftFailure)
        assert outcome.diagnostic.code == DiagnosticCode.EXPECTED_DIGIT
        assert outcome.diagnostic.message == "`9` is not a digit"

    def test_non_ascii_digit_is_soft(self) -> None:
        """Only ASCII digits are accepted."""
        assert isinstance(digit(10)(Cursor("٣", 0)), SoftFailure)

    def test_eof_is_soft(self) -> None:
        """End of input fails softly."""
        outcome = digit(10)(Cursor("", 0))

        assert isinstance(outcome, SoftFailure)
        assert outcome.diagnostic.message == "expected a digit, found end of input"

    @pytest.mark.parametrize("base", [0, 1, 37])
    def test_invalid_base_rejected(self, base: int) -> None:
        """Bases outside 2-36 are rejected at construction."""
        with pytest.raises(ValueError, match="base must be between 2 and 36"):
            digit(base)


# ============================================================================
# QUOTED STRING
# ============================================================================


class TestQuotedString:
    """Test quoted_string() scanning and commitment."""

    def test_simple_string(self) -> None:
        """Returns the text between the quotes."""
        outcome = quoted_string()(Cursor('"abc" rest', 0))

        assert isinstance(outcome, Success)
        assert outcome.value == "abc"
        assert outcome.cursor.pos == 5

    def test_empty_string(self) -> None:
        """Two adjacent quotes are the empty string."""
        outcome = quoted_string()(Cursor('""', 0))

        assert isinstance(outcome, Success)
        assert outcome.value == ""

    def test_escaped_quote_does_not_close(self) -> None:
        """A backslash-escaped quote is part of the content, verbatim."""
        outcome = quoted_string()(Cursor(r'"say \"hi\""', 0))

        assert isinstance(outcome, Success)
        assert outcome.value == r"say \"hi\""

    def test_escaped_backslash_then_quote_closes(self) -> None:
        """An escaped backslash does not escape the following quote."""
        outcome = quoted_string()(Cursor(r'"a\\" tail', 0))

        assert isinstance(outcome, Success)
        assert outcome.value == r"a\\"
        assert outcome.cursor.pos == 5

    def test_missing_opening_quote_is_soft(self) -> None:
        """No opening quote: the production does not apply."""
        outcome = quoted_string()(Cursor("abc", 0))

        assert isinstance(outcome, SoftFailure)

    def test_unclosed_at_eof_is_hard(self) -> None:
        """EOF before the closing quote commits, anchored at the opening quote."""
        outcome = quoted_string()(Cursor('{"a": "unterminated', 6))

        assert isinstance(outcome, HardFailure)
        assert outcome.position == 6
        assert outcome.diagnostic.code == DiagnosticCode.UNCLOSED_STRING
        assert outcome.diagnostic.message == "unclosed string delimiter"
        assert outcome.diagnostic.end == len('"unterminated')

    def test_raw_newline_ends_scan(self) -> None:
        """A raw newline before the closing quote is an unclosed string."""
        outcome = quoted_string()(Cursor('"ab\ncd"', 0))

        assert isinstance(outcome, HardFailure)
        assert outcome.position == 0
        assert outcome.diagnostic.end == 3

    def test_backslash_does_not_escape_newline(self) -> None:
        """Even an escaped raw newline ends the scan."""
        outcome = quoted_string()(Cursor('"ab\\\n"', 0))

        assert isinstance(outcome, HardFailure)

    def test_trailing_backslash_is_unclosed(self) -> None:
        """A backslash right before EOF escapes nothing and closes nothing."""
        outcome = quoted_string()(Cursor('"ab\\"', 0))

        assert isinstance(outcome, HardFailure)

    @given(raw=raw_strings())
    def test_generated_contents_scan_back(self, raw: str) -> None:
        """PROPERTY: any raw content rendered in quotes scans back verbatim."""
        event(f"escapes={raw.count(chr(92)) > 0}")

        outcome = quoted_string()(Cursor(f'"{raw}",', 0))

        assert isinstance(outcome, Success)
        assert outcome.value == raw
        assert outcome.cursor.peek() == ","


# ============================================================================
# WHITESPACE
# ============================================================================


class TestWhitespace:
    """Test whitespace skipping and padded()."""

    def test_skip_all_whitespace_kinds(self) -> None:
        """Space, tab, line feed and carriage return are skipped."""
        assert skip_whitespace(Cursor(" \t\r\n 1", 0)).pos == 5

    def test_skip_nothing(self) -> None:
        """No whitespace leaves the position unchanged."""
        assert skip_whitespace(Cursor("1 ", 0)).pos == 0

    def test_other_unicode_spaces_not_skipped(self) -> None:
        """Only the four ASCII whitespace characters are insignificant."""
        assert skip_whitespace(Cursor("\u00a01", 0)).pos == 0

    def test_whitespace_skip_never_fails(self) -> None:
        """whitespace_skip() succeeds with the skipped text."""
        outcome = whitespace_skip()(Cursor("  x", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == "  "
        assert outcome.cursor.pos == 2

    def test_whitespace_skip_at_eof(self) -> None:
        """whitespace_skip() succeeds at EOF consuming nothing."""
        outcome = whitespace_skip()(Cursor("", 0))

        assert isinstance(outcome, Success)
        assert outcome.value == ""

    def test_padded_skips_both_sides(self) -> None:
        """padded() skips whitespace before and after the token."""
        outcome = padded(literal("1"))(Cursor("  1  ,", 0))

        assert isinstance(outcome, Success)
        assert outcome.cursor.pos == 5

    def test_padded_keeps_failure(self) -> None:
        """padded() passes failures through unchanged."""
        outcome = padded(literal("1"))(Cursor("  2", 0))

        assert isinstance(outcome, SoftFailure)
        assert outcome.cursor.pos == 2
