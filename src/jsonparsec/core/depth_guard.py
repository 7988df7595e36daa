"""Depth limiting for recursion protection.

Every nested array or object costs a handful of Python stack frames in the
recursive-descent grammar. A configured nesting limit larger than the
interpreter can honour would turn a clean diagnostic into RecursionError,
so limits are clamped here before use.

Thread-safe: pure function, no shared state.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["FRAMES_PER_LEVEL", "depth_clamp"]

logger = logging.getLogger(__name__)

# Stack frames consumed per nesting level:
# value -> choice -> array -> sequence -> repetition -> element -> padded,
# with one frame to spare.
FRAMES_PER_LEVEL: int = 8


def depth_clamp(
    requested_depth: int,
    reserve_frames: int = 50,
    frames_per_level: int = FRAMES_PER_LEVEL,
) -> int:
    """Clamp requested depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)
        frames_per_level: Stack frames one nesting level costs

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(100)  # OK, within limit
        100
        >>> depth_clamp(500)  # Exceeds limit, clamped to (1000 - 50) // 8
        118
    """
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested nesting depth %d exceeds what the Python recursion limit (%d) "
            "supports. Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
