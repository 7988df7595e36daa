"""Whitespace handling for the grammar.

Whitespace between tokens is insignificant: space, tab, line feed and
carriage return (so CRLF documents parse like LF documents).
"""

from jsonparsec.syntax.cursor import Cursor, ParseOutcome, Parser, Success

__all__ = ["WHITESPACE", "padded", "skip_whitespace", "whitespace_skip"]

WHITESPACE: frozenset[str] = frozenset(" \t\n\r")


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Return a cursor past the maximal run of whitespace at cursor.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)

    Design:
        Immutable cursor ensures termination.
    """
    source = cursor.source
    end = cursor.pos
    while end < len(source) and source[end] in WHITESPACE:
        end += 1
    return cursor.advance(end - cursor.pos)


def _parse_whitespace(cursor: Cursor) -> Success[str]:
    after = skip_whitespace(cursor)
    return Success(after, cursor.slice_to(after.pos))


def whitespace_skip() -> Parser[str]:
    """Whitespace as a combinator: consumes zero or more, never fails.

    Returns:
        Parser whose Success carries the skipped whitespace

    Example:
        >>> whitespace_skip()(Cursor(" \\t\\n1", 0)).cursor.pos
        3
    """
    return _parse_whitespace


def padded[T](parser: Parser[T]) -> Parser[T]:
    """Run parser with whitespace skipped on both sides.

    Equivalent to preceded(whitespace_skip(), terminated(parser,
    whitespace_skip())) but costs one stack frame instead of six, which
    matters for the recursive value rules.

    Args:
        parser: Token parser to wrap

    Returns:
        Parser whose Success cursor sits after the trailing whitespace
    """

    def parse_padded(cursor: Cursor) -> ParseOutcome[T]:
        outcome = parser(skip_whitespace(cursor))
        if isinstance(outcome, Success):
            return Success(skip_whitespace(outcome.cursor), outcome.value)
        return outcome

    return parse_padded
