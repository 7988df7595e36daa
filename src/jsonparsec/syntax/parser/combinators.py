"""Combinator algebra over parsers.

A parser is any callable Cursor -> ParseOutcome. The combinators here
compose parsers while enforcing the backtracking protocol:

    - sequence: tiers are preserved (Soft stays Soft, Hard stays Hard)
    - alternative: a sibling is tried ONLY after a SoftFailure, and always
      from the original cursor; a HardFailure is returned untouched
    - repetition: SoftFailure ends the repetition normally (cursor restored
      to before the failed attempt); HardFailure aborts it

This is commitment parsing, not full PEG backtracking: once a branch
reports HardFailure the whole parse is over.
"""

from collections.abc import Callable

from jsonparsec.syntax.cursor import (
    Cursor,
    ParseOutcome,
    Parser,
    SoftFailure,
    Success,
)

__all__ = [
    "alternative",
    "choice",
    "map_value",
    "optional",
    "preceded",
    "repeat_one_or_more",
    "repeat_zero_or_more",
    "sequence",
    "terminated",
]


def sequence[A, B](first: Parser[A], second: Parser[B]) -> Parser[tuple[A, B]]:
    """Run first, then second from where first stopped.

    Args:
        first: Parser applied at the original cursor
        second: Parser applied at first's resulting cursor

    Returns:
        Parser producing (first value, second value); any failure of either
        stage is returned with its tier unchanged
    """

    def parse_sequence(cursor: Cursor) -> ParseOutcome[tuple[A, B]]:
        head = first(cursor)
        if not isinstance(head, Success):
            return head
        tail = second(head.cursor)
        if not isinstance(tail, Success):
            return tail
        return Success(tail.cursor, (head.value, tail.value))

    return parse_sequence


def alternative[A, B](first: Parser[A], second: Parser[B]) -> Parser[A | B]:
    """Try first; on SoftFailure only, try second from the ORIGINAL cursor.

    Args:
        first: Preferred parser
        second: Fallback parser

    Returns:
        Parser returning first's Success or HardFailure as-is, or second's
        outcome when first failed softly
    """

    def parse_alternative(cursor: Cursor) -> ParseOutcome[A | B]:
        outcome = first(cursor)
        if isinstance(outcome, SoftFailure):
            return second(cursor)
        return outcome

    return parse_alternative


def choice[T](*parsers: Parser[T]) -> Parser[T]:
    """Try parsers in order with alternative() semantics.

    If every parser fails softly, the last SoftFailure is returned.

    Args:
        *parsers: At least one parser

    Returns:
        Parser for the first alternative that does not fail softly

    Raises:
        ValueError: If no parsers are given
    """
    if not parsers:
        msg = "choice() requires at least one parser"
        raise ValueError(msg)

    def parse_choice(cursor: Cursor) -> ParseOutcome[T]:
        outcome = parsers[0](cursor)
        for parser in parsers[1:]:
            if not isinstance(outcome, SoftFailure):
                break
            outcome = parser(cursor)
        return outcome

    return parse_choice


def repeat_zero_or_more[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Apply parser until it fails softly, collecting values.

    The repetition also stops when parser succeeds without consuming
    input; repeating it would never terminate.

    Args:
        parser: Parser to repeat

    Returns:
        Parser that always succeeds unless an iteration fails hard; the
        Success cursor is the one before the first failing attempt
    """

    def parse_many(cursor: Cursor) -> ParseOutcome[tuple[T, ...]]:
        values: list[T] = []
        while True:
            outcome = parser(cursor)
            match outcome:
                case Success(cursor=after, value=value):
                    if after.pos == cursor.pos:
                        break
                    values.append(value)
                    cursor = after
                case SoftFailure():
                    break
                case _:
                    return outcome
        return Success(cursor, tuple(values))

    return parse_many


def repeat_one_or_more[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Like repeat_zero_or_more(), but at least one success is required.

    Args:
        parser: Parser to repeat

    Returns:
        Parser returning the first attempt's SoftFailure when nothing
        matched, so the caller may try another rule
    """
    rest = repeat_zero_or_more(parser)

    def parse_some(cursor: Cursor) -> ParseOutcome[tuple[T, ...]]:
        head = parser(cursor)
        if not isinstance(head, Success):
            return head
        tail = rest(head.cursor)
        if not isinstance(tail, Success):
            return tail
        return Success(tail.cursor, (head.value, *tail.value))

    return parse_some


def map_value[A, B](parser: Parser[A], func: Callable[[A], B]) -> Parser[B]:
    """Transform a Success value with func; failures pass through."""

    def parse_mapped(cursor: Cursor) -> ParseOutcome[B]:
        outcome = parser(cursor)
        if isinstance(outcome, Success):
            return Success(outcome.cursor, func(outcome.value))
        return outcome

    return parse_mapped


def preceded[A, B](first: Parser[A], second: Parser[B]) -> Parser[B]:
    """sequence() keeping only the second value."""
    return map_value(sequence(first, second), lambda pair: pair[1])


def terminated[A, B](first: Parser[A], second: Parser[B]) -> Parser[A]:
    """sequence() keeping only the first value."""
    return map_value(sequence(first, second), lambda pair: pair[0])


def optional[T](parser: Parser[T]) -> Parser[T | None]:
    """Succeed with None, consuming nothing, where parser fails softly.

    A HardFailure still propagates: an optional part that has started
    and is malformed is an error, not an absence.
    """

    def parse_optional(cursor: Cursor) -> ParseOutcome[T | None]:
        outcome = parser(cursor)
        if isinstance(outcome, SoftFailure):
            return Success(cursor, None)
        return outcome

    return parse_optional
