"""Performance benchmarks for jsonparsec.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in the document parser.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
