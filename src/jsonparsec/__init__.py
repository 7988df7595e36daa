"""jsonparsec - parser combinators for a strict JSON subset.

Parses documents whose top level is an object, with signed 64-bit integer,
raw string, array, keyword and nested object values. Parsers are built
from small combinators with a two-tier failure model: a SoftFailure lets
a sibling alternative run, a HardFailure commits and is reported with a
Rust-compiler-style diagnostic.

Public API:
    parse_json - Parse a document; diagnostics are logged, None on failure
    parse_document - Parse a document; diagnostics are raised
    JsonParser - Configurable parser (size and nesting limits)
    to_python - Convert a parsed document into plain Python data

Exceptions:
    JsonParsecError - Base exception class
    JsonSyntaxError - Malformed input
    TrailingInputError - Input remaining after the top-level object

Submodules:
    jsonparsec.syntax.ast - Document model (JsonObject, JsonArray, Member, ...)
    jsonparsec.syntax.parser - Combinators and grammar rules
    jsonparsec.diagnostics - Diagnostic codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import JsonParsecError, JsonSyntaxError, TrailingInputError
from .syntax import JsonObject, JsonParser, parse_json, to_python
from .syntax import parse as parse_document

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("jsonparsec")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "JsonObject",
    "JsonParsecError",
    "JsonParser",
    "JsonSyntaxError",
    "TrailingInputError",
    "__version__",
    "parse_document",
    "parse_json",
    "to_python",
]
