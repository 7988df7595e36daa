"""JSON subset parser module.

This module provides the JsonParser class and the combinators and grammar
rules it is built from, organized into focused submodules.

Module Organization:
- core.py: JsonParser, the top-level document driver
- primitives.py: Primitive parsers (literal, digit, quoted string)
- whitespace.py: Whitespace skipping
- combinators.py: sequence, alternative, choice, repetition, mapping
- rules.py: All grammar rules (number, string, keyword, array, object, value)

Public API:
    JsonParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from jsonparsec.syntax.parser.core import JsonParser
from jsonparsec.syntax.parser.rules import ParseContext

__all__ = ["JsonParser", "ParseContext"]
