"""Hypothesis strategies for jsonparsec property-based testing.

Strategies are organized by domain:

- documents: document model values, raw string contents, and the
  test-only renderer that turns a model back into source text

Usage:
    from tests.strategies import json_objects, render
    from tests.strategies.documents import raw_strings, whitespace
"""

from .documents import (
    json_arrays,
    json_integers,
    json_keywords,
    json_objects,
    json_scalars,
    json_strings,
    json_values,
    raw_strings,
    render,
    rendered_documents,
    whitespace,
)

__all__ = [
    "json_arrays",
    "json_integers",
    "json_keywords",
    "json_objects",
    "json_scalars",
    "json_strings",
    "json_values",
    "raw_strings",
    "render",
    "rendered_documents",
    "whitespace",
]
