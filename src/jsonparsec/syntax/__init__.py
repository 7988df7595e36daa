"""Syntax package: cursor, combinators, grammar rules and document model.

Separate from the top-level entry points so that tooling can drive the
combinators and rules directly.

Python 3.13+.
"""

import logging

from jsonparsec.diagnostics import DiagnosticFormatter, JsonParsecError

from .ast import (
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
from .cursor import Cursor, HardFailure, ParseOutcome, Parser, SoftFailure, Success
from .parser import JsonParser
from .visitor import ASTVisitor, to_python

__all__ = [
    "ASTVisitor",
    "Cursor",
    "HardFailure",
    "JsonArray",
    "JsonFalse",
    "JsonInteger",
    "JsonNull",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "JsonTrue",
    "JsonValue",
    "Member",
    "ParseOutcome",
    "Parser",
    "SoftFailure",
    "Success",
    "parse",
    "parse_json",
    "to_python",
]

logger = logging.getLogger(__name__)


def parse(source: str, *, max_nesting_depth: int | None = None) -> JsonObject:
    """Parse a document (convenience function).

    Args:
        source: Document text
        max_nesting_depth: Maximum nesting of arrays and objects (default: 100)

    Returns:
        The top-level object

    Raises:
        ValueError: If source exceeds the default size limit
        JsonSyntaxError: If the input is not a valid object
        TrailingInputError: If input remains after the object
    """
    return JsonParser(max_nesting_depth=max_nesting_depth).parse(source)


def parse_json(source: str) -> JsonObject | None:
    """Parse a document, reporting failures through logging.

    On failure the diagnostic is rendered Rust-compiler style with a
    source excerpt and logged at WARNING; None is returned.

    Args:
        source: Document text

    Returns:
        The top-level object, or None if source is not a valid document

    Raises:
        ValueError: If source exceeds the default size limit

    Example:
        >>> parse_json('{"a": 1}').get("a")
        JsonInteger(value=1)
        >>> parse_json('{"a": 1,}') is None
        True
    """
    try:
        return JsonParser().parse(source)
    except JsonParsecError as e:
        if e.diagnostic is None:
            logger.warning("%s", e)
        else:
            logger.warning("%s", DiagnosticFormatter().format_with_source(e.diagnostic, source))
        return None
