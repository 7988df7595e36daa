"""Top-level document parser.

This module provides the JsonParser class that drives the grammar rules
in :mod:`jsonparsec.syntax.parser.rules` over a whole document.

Architecture:
    The input is trimmed, the object rule runs from the first
    non-whitespace character, and the whole trimmed input must be
    consumed. Trimming only drops a suffix and moves the start offset,
    so every position the rules report is already an offset into the
    caller's untrimmed text.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation, and a nesting limit clamped against the
    interpreter recursion limit.

See Also:
    - :mod:`jsonparsec.syntax.ast` - Document model
    - :mod:`jsonparsec.syntax.cursor` - Cursor and outcome types
    - :mod:`jsonparsec.syntax.parser.rules` - Grammar rules
"""

import logging

from jsonparsec.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from jsonparsec.core.depth_guard import depth_clamp
from jsonparsec.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    JsonSyntaxError,
    ParseDiagnostic,
    TrailingInputError,
)
from jsonparsec.syntax.ast import JsonObject
from jsonparsec.syntax.cursor import (
    Cursor,
    HardFailure,
    LineOffsetCache,
    SoftFailure,
    Success,
)
from jsonparsec.syntax.parser.rules import ParseContext, parse_object
from jsonparsec.syntax.parser.whitespace import skip_whitespace

__all__ = ["JsonParser"]

logger = logging.getLogger(__name__)


class JsonParser:
    """Parser for documents of the JSON subset.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Fails on the first committed error, with line:column and a hint
    - Holds only immutable configuration: one instance may be shared

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 10 MiB
    - Configurable max_nesting_depth prevents stack exhaustion via [[[[...]]]]

    Attributes:
        max_source_size: Maximum allowed source size in characters
        max_nesting_depth: Maximum nesting of arrays and objects
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the size limit (not recommended).
            max_nesting_depth: Maximum nesting of arrays and objects (default: 100).
                              Clamped to what the recursion limit supports.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed nesting of arrays and objects (after clamping)."""
        return self._max_nesting_depth

    def parse(self, source: str) -> JsonObject:
        """Parse a document into a JsonObject.

        Args:
            source: Document text

        Returns:
            The top-level object

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)
            JsonSyntaxError: If the input is not an object, or is malformed
            TrailingInputError: If input remains after a complete object

        Example:
            >>> parser = JsonParser()
            >>> document = parser.parse('{"a": 1, "b": "x"}')
            >>> document.keys()
            ('a', 'b')
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in JsonParser constructor to increase limit."
            )
            raise ValueError(msg)

        logger.debug("Parsing document of %d characters", len(source))

        document = source.rstrip()
        start = Cursor(document, len(document) - len(document.lstrip()))
        context = ParseContext(max_nesting_depth=self._max_nesting_depth)

        match parse_object(start, context):
            case Success(cursor=end, value=result) if end.is_eof:
                logger.debug("Parsed object with %d members", len(result.members))
                return result
            case Success(cursor=end):
                rest = skip_whitespace(end)
                diagnostic = _resolve(
                    source, rest.pos, ErrorTemplate.trailing_input(rest.line_snippet())
                )
                logger.debug("Trailing input at position %d", rest.pos)
                raise TrailingInputError(diagnostic, remainder=rest.text)
            case SoftFailure():
                diagnostic = _resolve(
                    source, start.pos, ErrorTemplate.expected_object(start.line_snippet())
                )
                raise JsonSyntaxError(diagnostic)
            case HardFailure(position=position, diagnostic=parse_diagnostic):
                logger.debug(
                    "Parse failed at position %d: %s", position, parse_diagnostic.code.name
                )
                raise JsonSyntaxError(_resolve(source, position, parse_diagnostic))


def _resolve(source: str, position: int, diagnostic: ParseDiagnostic) -> Diagnostic:
    """Convert a relative ParseDiagnostic into a public Diagnostic for source."""
    line, column = LineOffsetCache(source).get_line_col(position + diagnostic.start)
    return diagnostic.to_diagnostic(position, line, column)
