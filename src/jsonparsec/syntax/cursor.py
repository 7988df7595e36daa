"""Immutable cursor and parse outcome infrastructure.

Implements the immutable cursor pattern and the three-tier outcome every
combinator produces.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Every advance() returns NEW cursor (prevents infinite loops)
    - EOF is a state (is_eof), not a return value
    - Line:column resolved only for errors, through LineOffsetCache

Outcome Tiers:
    - Success: the parser matched; carries the new cursor and the value
    - SoftFailure: the production does not apply here; the caller may try
      a sibling alternative from its ORIGINAL cursor
    - HardFailure: the input committed to a production and is malformed;
      every caller propagates it unchanged

    SoftFailure carries a cursor, HardFailure carries only an absolute
    position. No code path can ask a committed failure for a cursor it
    does not have.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec (consumed/empty error split)
    - F# FParsec
"""

from collections.abc import Callable
from dataclasses import dataclass

from jsonparsec.constants import MAX_SNIPPET_LENGTH
from jsonparsec.diagnostics import ParseDiagnostic

__all__ = [
    "Cursor",
    "HardFailure",
    "LineOffsetCache",
    "ParseDiagnostic",
    "ParseOutcome",
    "Parser",
    "SoftFailure",
    "Success",
]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable view over the unconsumed input.

    The cursor keeps the whole document plus an offset instead of a
    sliced string, so advancing is O(1). The remaining text is derived.

    Invariant:
        pos == len(source) - remaining_length()

    Example:
        >>> cursor = Cursor('{"a": 1}', 0)
        >>> cursor.advance(2).text
        'a": 1}'
        >>> cursor.peek()  # Original unchanged (immutability)
        '{'
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def text(self) -> str:
        """Unconsumed input from the current position to the end.

        Copies the suffix; combinators use starts_with() and peek()
        on hot paths instead.
        """
        return self.source[self.pos :]

    def remaining_length(self) -> int:
        """Number of unconsumed characters."""
        return max(0, len(self.source) - self.pos)

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        The caller is responsible for count: combinators only advance by
        amounts they have already matched against the text. Advancing is
        clamped at EOF so the invariant holds regardless.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def starts_with(self, pattern: str) -> bool:
        """Check whether the unconsumed text starts with pattern (case-sensitive)."""
        return self.source.startswith(pattern, self.pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def line_snippet(self, limit: int = MAX_SNIPPET_LENGTH) -> str:
        """Text from the current position up to the next line break.

        Used to quote "found" text in diagnostics with a bounded length.

        Args:
            limit: Maximum number of characters returned

        Returns:
            Excerpt without the line break (LF or CR); empty at EOF

        Example:
            >>> Cursor("fals,\\n  null", 0).line_snippet()
            'fals,'
        """
        end = min(len(self.source), self.pos + limit)
        for line_break in ("\n", "\r"):
            found = self.source.find(line_break, self.pos, end)
            if found >= 0:
                end = found
        return self.source[self.pos : end]


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search.

    Example:
        >>> cache = LineOffsetCache('{\\n  "a": 1\\n}')
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(4)
        (2, 3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source.

        Args:
            source: Source text to index
        """
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Character position in source (0-indexed), clamped to the source

        Returns:
            (line, column) tuple (1-indexed, like text editors)
        """
        if pos < 0:
            pos = 0
        elif pos > self._source_len:
            pos = self._source_len

        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Parser matched.

    Type Parameters:
        T: The type of the parsed value

    Attributes:
        cursor: Position after the consumed input
        value: Parsed value

    Example:
        >>> cursor = Cursor("true", 0)
        >>> outcome = Success(cursor.advance(4), "true")
        >>> outcome.cursor.is_eof
        True
    """

    cursor: Cursor
    value: T


@dataclass(frozen=True, slots=True)
class SoftFailure:
    """Recoverable failure: this production does not apply here.

    Attributes:
        cursor: Cursor at the point of failure (NOT where the attempt began)
        diagnostic: What was expected; span relative to cursor.pos
    """

    cursor: Cursor
    diagnostic: ParseDiagnostic

    def commit(self) -> "HardFailure":
        """Escalate to a HardFailure at the same position, keeping the diagnostic."""
        return HardFailure(self.cursor.pos, self.diagnostic)


@dataclass(frozen=True, slots=True)
class HardFailure:
    """Committed failure: the input is syntactically wrong.

    Attributes:
        position: Absolute offset of the failure
        diagnostic: What went wrong; span relative to position
    """

    position: int
    diagnostic: ParseDiagnostic


type ParseOutcome[T] = Success[T] | SoftFailure | HardFailure

type Parser[T] = Callable[[Cursor], ParseOutcome[T]]
