"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ParseDiagnostic",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (grammar failures)
        2000-2999: Limit errors (resource protection)
        3000-3999: Document errors (structurally valid prefix, invalid whole)
    """

    # Syntax errors (1000-1999)
    EXPECTED_LITERAL = 1001
    EXPECTED_DIGIT = 1002
    UNCLOSED_STRING = 1003
    INVALID_VALUE = 1004
    INVALID_KEYWORD = 1005
    UNEXPECTED_CHARACTER = 1006
    INVALID_MEMBER_KEY = 1007
    TRAILING_COMMA = 1008
    EXPECTED_COLON = 1009
    MISSING_VALUE = 1010
    EXPECTED_CLOSING_BRACE = 1011
    MISSING_COMMA = 1012
    INTEGER_OUT_OF_RANGE = 1013
    EXPECTED_OBJECT = 1014

    # Limit errors (2000-2999)
    NESTING_DEPTH_EXCEEDED = 2001

    # Document errors (3000-3999)
    TRAILING_INPUT = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. This is the public, immutable
    form of a parse failure: the parser's internal ParseDiagnostic carries
    a span relative to the failing cursor, this one carries an absolute
    SourceSpan resolved against the caller's input.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no position applies)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[TRAILING_COMMA]: expected a string, found `}`
              --> line 1, column 9
              = help: trailing commas are not allowed

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)


@dataclass(slots=True)
class ParseDiagnostic:
    """Diagnostic produced by a combinator while parsing.

    The span is relative: offsets count from the failing cursor (for a
    SoftFailure) or from the failing absolute position (for a HardFailure).
    Use to_diagnostic() to resolve it into a public Diagnostic.

    Mutability Note:
        Intentionally mutable (not frozen=True). Generic low-level
        diagnostics are specialized in place by grammar rules as the
        failure bubbles up (a raw "expected '\"'" becomes "trailing comma
        not allowed" once the member rule inspects what was found).
        set_message() is the only mutation path.

    Attributes:
        code: Error code
        message: Human-readable error description
        start: Span start, relative to the failure position
        end: Span end (exclusive), relative to the failure position
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    start: int = 0
    end: int = 0
    hint: str | None = None

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"ParseDiagnostic.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"ParseDiagnostic.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def set_message(
        self,
        message: str,
        *,
        code: DiagnosticCode | None = None,
        hint: str | None = None,
        span: tuple[int, int] | None = None,
    ) -> None:
        """Replace the message, optionally the code, hint and span as well.

        Args:
            message: New human-readable description
            code: New error code (unchanged if None)
            hint: New hint (unchanged if None)
            span: New relative (start, end) span (unchanged if None)

        Raises:
            ValueError: If span ends before it starts
        """
        if span is not None:
            start, end = span
            if start < 0 or end < start:
                msg = f"ParseDiagnostic span must satisfy 0 <= start <= end, got {span}"
                raise ValueError(msg)
            self.start, self.end = start, end
        self.message = message
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def to_diagnostic(self, position: int, line: int, column: int) -> Diagnostic:
        """Resolve into a public Diagnostic.

        Args:
            position: Absolute offset the relative span is anchored at
            line: 1-indexed line of position + start
            column: 1-indexed column of position + start

        Returns:
            Immutable Diagnostic with an absolute SourceSpan
        """
        span = SourceSpan(
            start=position + self.start,
            end=position + self.end,
            line=line,
            column=column,
        )
        return Diagnostic(code=self.code, message=self.message, span=span, hint=self.hint)
