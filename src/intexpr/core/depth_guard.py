"""Depth limiting for recursion protection.

The precedence tiers recurse once per parenthesis level and once per
exponent in a right-associative chain. Python enforces its own recursion
limit, so both configured limits are clamped against it here to turn
deep nesting into a reported parse error instead of a RecursionError.

Thread-safe: pure function, no shared state.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from intexpr.constants import FRAMES_PER_DEPTH_LEVEL, RESERVED_FRAMES

__all__ = ["depth_clamp"]

logger = logging.getLogger(__name__)


def depth_clamp(
    requested_depth: int,
    reserve_frames: int = RESERVED_FRAMES,
    frames_per_level: int = FRAMES_PER_DEPTH_LEVEL,
    *,
    label: str = "max_nesting_depth",
) -> int:
    """Clamp requested nesting depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)
        frames_per_level: Interpreter frames one nesting level consumes (default: 5)
        label: Setting name used in the warning

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(100)  # OK, 100 * 5 frames fits in 950
        100
        >>> depth_clamp(500)  # Exceeds limit, clamped to 950 // 5
        190
    """
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested %s %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            label,
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
