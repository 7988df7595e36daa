"""Shared constants for jsonparsec.

This module provides centralized configuration constants used across
the syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested arrays and objects
- Input limits: DoS prevention via size constraints
- Integer range: Bounds of the fixed-width integer produced by number literals
- Diagnostic limits: Bounds on source excerpts quoted in messages

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Integer range
    "INTEGER_MIN",
    "INTEGER_MAX",
    # Diagnostic limits
    "MAX_SNIPPET_LENGTH",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of arrays and objects.
# The grammar is recursive descent: every nested container costs several
# Python stack frames (value -> choice -> array -> repetition -> value ...).
# 100 levels keeps the parser well inside the default recursion limit of 1000
# while exceeding any document a human writes by hand.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# Prevents unbounded memory allocation from pathological inputs.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# INTEGER RANGE
# ============================================================================

# Number literals are converted to a signed 64-bit integer.
INTEGER_MIN: int = -(2**63)
INTEGER_MAX: int = 2**63 - 1

# ============================================================================
# DIAGNOSTIC LIMITS
# ============================================================================

# Maximum characters of "found" text quoted in a diagnostic message.
# Excerpts already stop at the next newline; this bounds single-line inputs.
MAX_SNIPPET_LENGTH: int = 40
