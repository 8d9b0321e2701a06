"""Primitive scanning utilities for the expression parser.

This module provides the low-level integer literal scanner. It follows the
numeric-literal rules of C's strtoll() in base 10 for unsigned digit runs:
one or more ASCII digits, saturating to INT64_MAX on overflow. Signs are
never part of a literal; the unary tier consumes them.
"""

import logging

from intexpr.constants import INT64_MAX
from intexpr.core.arithmetic import clamp_int64
from intexpr.syntax.cursor import Cursor, ParseResult

__all__ = ["is_ascii_digit", "scan_integer_literal"]

logger = logging.getLogger(__name__)

# ASCII digits only - str.isdigit() is True for Unicode digits like ² or ٣.
_ASCII_DIGITS: str = "0123456789"

# Any literal with more significant digits than this is out of int64 range.
# Converting longer strings with int() is skipped entirely (int() also
# refuses very long digit strings by default).
_MAX_SIGNIFICANT_DIGITS: int = len(str(INT64_MAX))


def is_ascii_digit(ch: str) -> bool:
    """Check if character is an ASCII digit 0-9."""
    return len(ch) == 1 and ch in _ASCII_DIGITS


def _digits_value(digits: str) -> int:
    """Convert a run of ASCII digits to a value saturated at INT64_MAX."""
    significant = digits.lstrip("0")
    if len(significant) > _MAX_SIGNIFICANT_DIGITS:
        logger.debug("Integer literal with %d digits saturated", len(significant))
        return INT64_MAX
    value = int(significant) if significant else 0
    clamped = clamp_int64(value)
    if clamped != value:
        logger.debug("Integer literal %d saturated to %d", value, clamped)
    return clamped


def scan_integer_literal(cursor: Cursor) -> ParseResult[int] | None:
    """Scan the longest integer literal: [0-9]+

    Examples:
        42 → 42
        007 → 7
        99999999999999999999 → 9223372036854775807 (saturated)

    Args:
        cursor: Current position in source (no whitespace skipping here)

    Returns:
        ParseResult(value, cursor after the last digit) on success,
        None if no literal starts at the cursor (nothing consumed)
    """
    # Must have at least one ASCII digit
    if cursor.is_eof or cursor.current not in _ASCII_DIGITS:
        return None

    digits_start = cursor
    while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
        cursor = cursor.advance()

    digits = digits_start.slice_to(cursor.pos)
    value = _digits_value(digits)
    return ParseResult(value, cursor)
