"""Primitive parsers: literal text, single digits and quoted strings.

Each function here is a parser factory: it returns a Parser, a plain
callable from Cursor to ParseOutcome. Literal and digit mismatches are
always SoftFailure. An unclosed string is always HardFailure: once an
opening quote is seen, no other production can apply.
"""

from jsonparsec.diagnostics import ErrorTemplate
from jsonparsec.syntax.cursor import (
    Cursor,
    HardFailure,
    ParseOutcome,
    Parser,
    SoftFailure,
    Success,
)

__all__ = ["digit", "literal", "quoted_string"]

# Digit alphabet for bases 2-36, same ordering as int(text, base).
# ASCII only: str.isdigit() also accepts digits such as '٣' or '²'.
_DIGITS: str = "0123456789abcdefghijklmnopqrstuvwxyz"
_MIN_BASE: int = 2
_MAX_BASE: int = 36

_QUOTE: str = '"'
_BACKSLASH: str = "\\"


def literal(pattern: str) -> Parser[str]:
    """Match pattern exactly (case-sensitive).

    Examples:
        literal("true") on "true," -> Success("true"), cursor at ","
        literal("true") on "tru"   -> SoftFailure, "expected `true`, found `tru`"

    Args:
        pattern: Non-empty text to match

    Returns:
        Parser consuming len(pattern) characters on success

    Raises:
        ValueError: If pattern is empty
    """
    if not pattern:
        msg = "literal() pattern must not be empty"
        raise ValueError(msg)

    def parse_literal(cursor: Cursor) -> ParseOutcome[str]:
        if cursor.starts_with(pattern):
            return Success(cursor.advance(len(pattern)), pattern)
        return SoftFailure(cursor, ErrorTemplate.expected_literal(pattern, cursor.line_snippet()))

    return parse_literal


def digit(base: int = 10) -> Parser[str]:
    """Match one digit valid in base.

    Letters are accepted in either case for bases above 10.

    Args:
        base: Numeric base, 2 to 36

    Returns:
        Parser consuming one character on success

    Raises:
        ValueError: If base is outside 2-36
    """
    if not _MIN_BASE <= base <= _MAX_BASE:
        msg = f"digit() base must be between {_MIN_BASE} and {_MAX_BASE}, got {base}"
        raise ValueError(msg)

    alphabet = _DIGITS[:base]
    valid = frozenset(alphabet + alphabet.upper())

    def parse_digit(cursor: Cursor) -> ParseOutcome[str]:
        ch = cursor.peek()
        if ch is not None and ch in valid:
            return Success(cursor.advance(), ch)
        return SoftFailure(cursor, ErrorTemplate.expected_digit(ch or ""))

    return parse_digit


_opening_quote = literal(_QUOTE)


def _parse_quoted_string(cursor: Cursor) -> ParseOutcome[str]:
    opening = _opening_quote(cursor)
    if not isinstance(opening, Success):
        return opening

    source = cursor.source
    start = opening.cursor.pos
    pos = start
    escaped = False
    while pos < len(source):
        ch = source[pos]
        if ch == "\n":
            # A raw newline ends the scan even right after a backslash
            break
        if escaped:
            escaped = False
        elif ch == _BACKSLASH:
            escaped = True
        elif ch == _QUOTE:
            return Success(Cursor(source, pos + 1), source[start:pos])
        pos += 1

    # Anchored at the opening quote, spanning what was scanned
    return HardFailure(cursor.pos, ErrorTemplate.unclosed_string(pos - cursor.pos))


def quoted_string() -> Parser[str]:
    """Match a double-quoted string, returning the raw text between the quotes.

    A backslash escapes exactly the next character, so `\\"` does not
    close the string but `\\\\"` does. Escape sequences are returned
    verbatim, never decoded.

    Examples:
        "abc"          -> Success('abc')
        "say \\"hi\\"" -> Success('say \\"hi\\"')
        abc            -> SoftFailure (no opening quote)
        "abc           -> HardFailure at the opening quote

    Returns:
        Parser for a quoted string
    """
    return _parse_quoted_string
