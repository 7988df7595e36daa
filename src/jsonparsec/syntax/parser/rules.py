"""Grammar rules for the JSON subset.

This module provides the parsing rules for every value production:
- Scalars (number, string, keyword)
- Containers (array, object, member)
- value, the five-way alternation tying them together

All grammar rules are co-located in a single module to:
1. Eliminate circular imports between the mutually recursive rules
2. Simplify the import graph
3. Allow direct function calls instead of function-local imports

Scalar rules are plain Parsers. The recursive rules take an extra
ParseContext argument and are bound to it with functools.partial where
a combinator needs a one-argument Parser.

Failure tiers:
    A rule fails softly while the input does not start its production:
    no digit, no quote, no '[', no '{', no keyword. Once the first
    character commits to a production, any later problem is a
    HardFailure, and no sibling alternative is tried.

Security:
    Includes configurable nesting depth limit to prevent stack exhaustion
    via deeply nested containers (e.g., [[[[[[ ... ]]]]]]).
"""

from dataclasses import dataclass
from functools import lru_cache, partial

from jsonparsec.constants import INTEGER_MAX, INTEGER_MIN, MAX_DEPTH, MAX_SNIPPET_LENGTH
from jsonparsec.diagnostics import ErrorTemplate, ParseDiagnostic
from jsonparsec.syntax.ast import (
    JsonArray,
    JsonFalse,
    JsonInteger,
    JsonNull,
    JsonObject,
    JsonString,
    JsonTrue,
    JsonValue,
    Member,
)
from jsonparsec.syntax.cursor import (
    Cursor,
    HardFailure,
    ParseOutcome,
    Parser,
    SoftFailure,
    Success,
)
from jsonparsec.syntax.parser.combinators import (
    choice,
    map_value,
    optional,
    repeat_one_or_more,
    repeat_zero_or_more,
    sequence,
)
from jsonparsec.syntax.parser.primitives import digit, literal, quoted_string
from jsonparsec.syntax.parser.whitespace import padded, skip_whitespace

__all__ = [
    "ParseContext",
    "parse_array",
    "parse_keyword",
    "parse_member",
    "parse_number",
    "parse_object",
    "parse_string_value",
    "parse_value",
]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Replaces thread-local state with explicit parameter passing for:
    - Thread safety without global state
    - Easier testing (no state reset needed)
    - Clear dependency flow

    Frozen so that it can key the per-context parser cache.

    Attributes:
        max_nesting_depth: Maximum allowed nesting of arrays and objects
        current_depth: Number of containers enclosing the current position
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been exceeded."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nesting(self) -> "ParseContext":
        """Create new context with incremented depth for entering a container."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


# =============================================================================
# Tokens
# =============================================================================

_minus = literal("-")
_comma = literal(",")
_colon = literal(":")
_open_bracket = literal("[")
_close_bracket = literal("]")
_open_brace = literal("{")
_close_brace = literal("}")

_signed_digits = sequence(optional(_minus), repeat_one_or_more(digit(10)))

# Characters that end an unknown keyword when quoting it in a diagnostic
_TOKEN_DELIMITERS: frozenset[str] = frozenset(" \t\r\n,:[]{}\"")

# An integer with more significant digits than this cannot fit 64 bits,
# and int() refuses very long digit strings outright.
_MAX_INTEGER_DIGITS: int = len(str(INTEGER_MAX))


def _token_at(cursor: Cursor) -> str:
    """Identifier-like run at cursor, for quoting in a diagnostic."""
    source = cursor.source
    end = cursor.pos
    limit = min(len(source), cursor.pos + MAX_SNIPPET_LENGTH)
    while end < limit and source[end] not in _TOKEN_DELIMITERS:
        end += 1
    return cursor.slice_to(end)


def _specialize(failure: SoftFailure, template: ParseDiagnostic) -> HardFailure:
    """Commit failure, relabelling its diagnostic with template's wording and span."""
    failure.diagnostic.set_message(
        template.message,
        code=template.code,
        hint=template.hint,
        span=(template.start, template.end),
    )
    return failure.commit()


# =============================================================================
# Scalars
# =============================================================================


def parse_number(cursor: Cursor) -> ParseOutcome[JsonInteger]:
    """Parse number: optional '-' followed by one or more decimal digits.

    No fraction, no exponent. Leading zeros are accepted.

    Examples:
        42   -> JsonInteger(42)
        -7   -> JsonInteger(-7)
        007  -> JsonInteger(7)

    Args:
        cursor: Current position in source

    Returns:
        Success(JsonInteger) on success
        SoftFailure if no digit starts here
        HardFailure if the digits do not fit a signed 64-bit integer
    """
    outcome = _signed_digits(cursor)
    if not isinstance(outcome, Success):
        return outcome

    sign, digits = outcome.value
    text = (sign or "") + "".join(digits)
    significant = text.lstrip("-").lstrip("0")
    if len(significant) <= _MAX_INTEGER_DIGITS:
        number = int(text)
        if INTEGER_MIN <= number <= INTEGER_MAX:
            return Success(outcome.cursor, JsonInteger(number))
    return HardFailure(cursor.pos, ErrorTemplate.integer_out_of_range(text))


parse_string_value: Parser[JsonString] = map_value(quoted_string(), JsonString)
"""Parse a string value: the raw text between double quotes."""


_keywords = choice(
    map_value(literal("true"), lambda _: JsonTrue()),
    map_value(literal("false"), lambda _: JsonFalse()),
    map_value(literal("null"), lambda _: JsonNull()),
)


def parse_keyword(cursor: Cursor) -> ParseOutcome[JsonTrue | JsonFalse | JsonNull]:
    """Parse one of the keywords true, false, null.

    The keyword is matched as a prefix: "trueish" yields JsonTrue and
    leaves "ish" for the enclosing rule to reject.

    Args:
        cursor: Current position in source

    Returns:
        Success(keyword value) on success
        SoftFailure if the input does not start with a letter
        HardFailure quoting the token if it starts with a letter but is
        none of the keywords
    """
    outcome = _keywords(cursor)
    if isinstance(outcome, SoftFailure):
        ch = cursor.peek()
        if ch is not None and ch.isalpha():
            return _specialize(outcome, ErrorTemplate.invalid_keyword(_token_at(cursor)))
    return outcome


# =============================================================================
# Value
# =============================================================================


@lru_cache(maxsize=512)
def _value_alternatives(context: ParseContext) -> Parser[JsonValue]:
    """The five value productions as one soft alternation, bound to context."""
    return choice(
        parse_number,
        parse_string_value,
        partial(parse_array, context=context),
        parse_keyword,
        partial(parse_object, context=context),
    )


def parse_value(cursor: Cursor, context: ParseContext) -> ParseOutcome[JsonValue]:
    """Parse value: number | string | array | keyword | object.

    Alternatives are tried in that order, each from the same cursor, and
    only after the previous one failed softly.

    Args:
        cursor: Current position in source
        context: Nesting context of the enclosing container

    Returns:
        Success(value) on success
        HardFailure if no alternative applies or one of them failed hard
    """
    outcome = _value_alternatives(context)(cursor)
    if isinstance(outcome, SoftFailure):
        return HardFailure(cursor.pos, ErrorTemplate.invalid_value(cursor.line_snippet()))
    return outcome


# =============================================================================
# Array
# =============================================================================


@lru_cache(maxsize=512)
def _array_elements(context: ParseContext) -> Parser[tuple[JsonValue, tuple[JsonValue, ...]]]:
    """value ws ( ',' ws value ws )*, bound to the array's inner context."""
    element = padded(partial(parse_value, context=context))

    def parse_tail_element(cursor: Cursor) -> ParseOutcome[JsonValue]:
        comma = _comma(cursor)
        if not isinstance(comma, Success):
            return comma
        after = skip_whitespace(comma.cursor)
        if after.starts_with("]"):
            return HardFailure(after.pos, ErrorTemplate.array_trailing_comma())
        return element(after)

    return sequence(element, repeat_zero_or_more(parse_tail_element))


def parse_array(cursor: Cursor, context: ParseContext) -> ParseOutcome[JsonArray]:
    """Parse array: '[' ws ( value ws ( ',' ws value ws )* )? ']'

    Examples:
        []          -> JsonArray(())
        [1, "a"]    -> JsonArray((JsonInteger(1), JsonString("a")))
        [1, 2,]     -> HardFailure (trailing comma)
        [1 2]       -> HardFailure (unexpected character `2`)

    Args:
        cursor: Current position in source
        context: Nesting context of the enclosing container

    Returns:
        Success(JsonArray) on success
        SoftFailure if the input does not start with '['
        HardFailure for anything malformed after the '['
    """
    opening = _open_bracket(cursor)
    if not isinstance(opening, Success):
        return opening
    if context.is_depth_exceeded():
        return HardFailure(
            cursor.pos, ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth)
        )

    body = skip_whitespace(opening.cursor)
    if body.starts_with("]"):
        return Success(body.advance(), JsonArray())

    elements = _array_elements(context.enter_nesting())(body)
    if not isinstance(elements, Success):
        return elements

    end = elements.cursor
    closing = _close_bracket(end)
    if not isinstance(closing, Success):
        return HardFailure(end.pos, ErrorTemplate.unexpected_character(end.peek() or ""))

    first, rest = elements.value
    return Success(closing.cursor, JsonArray((first, *rest)))


# =============================================================================
# Object
# =============================================================================


def _classify_member_key(cursor: Cursor, context: ParseContext) -> HardFailure:
    """Explain why the text at cursor cannot be a member key."""
    if cursor.starts_with("}"):
        return HardFailure(cursor.pos, ErrorTemplate.object_trailing_comma())
    probe = _value_alternatives(context)(cursor)
    if isinstance(probe, Success):
        return HardFailure(
            cursor.pos,
            ErrorTemplate.invalid_member_key(probe.value.kind, probe.cursor.pos - cursor.pos),
        )
    return HardFailure(cursor.pos, ErrorTemplate.expected_member_key(cursor.line_snippet()))


def parse_member(cursor: Cursor, context: ParseContext) -> ParseOutcome[Member]:
    """Parse member: ws string ws ':' ws value ws

    A key that is some other kind of value is reported by kind:
        {1: 2}     -> "expected a string, found a number"
        {"a": 1,}  -> "trailing comma not allowed, expected a string, found `}`"

    Args:
        cursor: Current position in source
        context: Nesting context of the enclosing object

    Returns:
        Success(Member) with the cursor past trailing whitespace
        HardFailure otherwise; a member never fails softly
    """
    start = skip_whitespace(cursor)
    key = parse_string_value(start)
    if isinstance(key, SoftFailure):
        return _classify_member_key(start, context)
    if isinstance(key, HardFailure):
        return key

    after_key = skip_whitespace(key.cursor)
    colon = _colon(after_key)
    if isinstance(colon, SoftFailure):
        return _specialize(colon, ErrorTemplate.expected_colon(after_key.line_snippet()))
    if isinstance(colon, HardFailure):
        return colon

    value_start = skip_whitespace(colon.cursor)
    value = _value_alternatives(context)(value_start)
    match value:
        case Success(cursor=end, value=member_value):
            return Success(skip_whitespace(end), Member(key.value.value, member_value))
        case SoftFailure():
            return HardFailure(
                value_start.pos, ErrorTemplate.missing_value(value_start.line_snippet())
            )
        case _:
            return value


@lru_cache(maxsize=512)
def _object_members(context: ParseContext) -> Parser[tuple[Member, tuple[Member, ...]]]:
    """member ( ',' member )*, bound to the object's inner context."""
    member = partial(parse_member, context=context)

    def parse_tail_member(cursor: Cursor) -> ParseOutcome[Member]:
        comma = _comma(cursor)
        if not isinstance(comma, Success):
            return comma
        return member(comma.cursor)

    return sequence(member, repeat_zero_or_more(parse_tail_member))


def _unclosed_object(cursor: Cursor) -> HardFailure:
    """Explain what follows the last member instead of '}'."""
    stray = parse_string_value(cursor)
    if isinstance(stray, Success):
        return HardFailure(cursor.pos, ErrorTemplate.missing_comma(stray.cursor.pos - cursor.pos))
    return HardFailure(cursor.pos, ErrorTemplate.expected_closing_brace(cursor.line_snippet()))


def parse_object(cursor: Cursor, context: ParseContext) -> ParseOutcome[JsonObject]:
    """Parse object: '{' ws ( member ( ',' member )* )? '}'

    Members keep textual order; duplicate keys are kept.

    Examples:
        {}               -> JsonObject(())
        {"a": 1}         -> JsonObject((Member("a", JsonInteger(1)),))
        {"a": 1 "b": 2}  -> HardFailure (a ',' is probably missing)

    Args:
        cursor: Current position in source
        context: Nesting context of the enclosing container

    Returns:
        Success(JsonObject) on success
        SoftFailure if the input does not start with '{'
        HardFailure for anything malformed after the '{'
    """
    opening = _open_brace(cursor)
    if not isinstance(opening, Success):
        return opening
    if context.is_depth_exceeded():
        return HardFailure(
            cursor.pos, ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth)
        )

    body = skip_whitespace(opening.cursor)
    if body.starts_with("}"):
        return Success(body.advance(), JsonObject())

    members = _object_members(context.enter_nesting())(body)
    if not isinstance(members, Success):
        return members

    end = members.cursor
    closing = _close_brace(end)
    if not isinstance(closing, Success):
        return _unclosed_object(end)

    first, rest = members.value
    return Success(closing.cursor, JsonObject((first, *rest)))
