"""Fuzz testing for jsonparsec.

This package contains:
- test_syntax_parser_property: round-trip, commitment and robustness
  properties of the document parser

All modules are marked @pytest.mark.fuzz and skipped unless run with -m fuzz.

Python 3.13+.
"""
