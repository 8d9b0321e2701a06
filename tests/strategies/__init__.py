"""Hypothesis strategies for intexpr property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- expressions: expression text with known values, whitespace, literals,
  sign runs and malformed input

Usage:
    from tests.strategies import arithmetic_expressions, whitespace_runs
    from tests.strategies.expressions import int64_values

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - arithmetic_expressions, integer_literals, sign_runs, nesting_depths
"""

from .expressions import (
    EXPRESSION_CHARS,
    WHITESPACE_CHARS,
    arithmetic_expressions,
    foreign_characters,
    int64_values,
    integer_literals,
    nesting_depths,
    nonzero_int64_operands,
    sign_runs,
    whitespace_runs,
)

__all__ = [
    "EXPRESSION_CHARS",
    "WHITESPACE_CHARS",
    "arithmetic_expressions",
    "foreign_characters",
    "int64_values",
    "integer_literals",
    "nesting_depths",
    "nonzero_int64_operands",
    "sign_runs",
    "whitespace_runs",
]
