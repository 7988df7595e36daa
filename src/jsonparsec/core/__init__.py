"""Core utilities shared by the syntax layer and the public entry points.

Exports:
    depth_clamp: Clamp a nesting limit against the Python recursion limit

Python 3.13+.
"""

from .depth_guard import depth_clamp

__all__ = ["depth_clamp"]
