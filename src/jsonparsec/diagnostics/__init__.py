"""Diagnostic system for jsonparsec errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ParseDiagnostic, SourceSpan
from .errors import JsonParsecError, JsonSyntaxError, TrailingInputError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "JsonParsecError",
    "JsonSyntaxError",
    "OutputFormat",
    "ParseDiagnostic",
    "SourceSpan",
    "TrailingInputError",
]
