"""Core utilities shared across the syntax and formatting layers.

This package provides foundational utilities the parser depends on.
By isolating these utilities here, we maintain a clean dependency graph:

    core <- syntax <- formatting

Exports:
    depth_clamp: Clamp a nesting depth against the interpreter recursion limit
    wrap_int64: Reduce an integer to the signed 64-bit range

Python 3.13+.
"""

from .arithmetic import (
    clamp_int64,
    int64_add,
    int64_divide,
    int64_multiply,
    int64_negate,
    int64_power,
    int64_subtract,
    wrap_int64,
)
from .depth_guard import depth_clamp

__all__ = [
    "clamp_int64",
    "depth_clamp",
    "int64_add",
    "int64_divide",
    "int64_multiply",
    "int64_negate",
    "int64_power",
    "int64_subtract",
    "wrap_int64",
]
