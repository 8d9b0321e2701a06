"""Shared constants for intexpr.

This module provides centralized configuration constants used across
the syntax and core packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Value range: Signed 64-bit integer bounds for evaluated values
- Depth limits: Recursion protection for parenthesis and exponent nesting
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Value range
    "INT64_BITS",
    "INT64_MIN",
    "INT64_MAX",
    # Depth limits
    "MAX_DEPTH",
    "MAX_POWER_DEPTH",
    "FRAMES_PER_DEPTH_LEVEL",
    "RESERVED_FRAMES",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# VALUE RANGE
# ============================================================================

# Every evaluated value is a signed 64-bit integer. Python ints are unbounded,
# so arithmetic results are wrapped back into this range (two's complement).
INT64_BITS: int = 64
INT64_MIN: int = -(2 ** (INT64_BITS - 1))
INT64_MAX: int = 2 ** (INT64_BITS - 1) - 1

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Two constructs make the parser recurse: open parentheses and right-
# associative exponent chains ("2^2^2^..."). Without limits, "((((...))))"
# with a few hundred levels would raise RecursionError from deep inside the
# interpreter.
#
# Each parenthesis level costs FRAMES_PER_DEPTH_LEVEL interpreter frames
# (add/subtract -> multiply/divide -> exponent -> unary -> parentheses); each
# "^" costs one. Both limits are clamped against sys.getrecursionlimit().
#
# ============================================================================

# Default maximum parenthesis nesting depth.
# 100 levels of nesting is almost certainly adversarial or malformed input.
MAX_DEPTH: int = 100

# Default maximum length of a right-associative "^" chain. Each "^" costs one
# interpreter frame, so chains get a separate and much larger budget.
MAX_POWER_DEPTH: int = 300

# Interpreter frames consumed per nesting level by the precedence tiers.
FRAMES_PER_DEPTH_LEVEL: int = 5

# Frames kept free for the caller and the driver when clamping.
RESERVED_FRAMES: int = 50

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# Prevents DoS via unbounded memory and CPU use from huge inputs.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
