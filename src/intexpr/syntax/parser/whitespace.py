"""Whitespace handling utilities for the expression parser.

Whitespace may appear between any two tokens but never inside a literal.
"""

from intexpr.syntax.cursor import Cursor

__all__ = ["skip_whitespace"]


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip a run of whitespace (space, tab, LF, VT, FF, CR).

    Pure and idempotent: skipping twice is the same as skipping once.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)

    Design:
        Immutable cursor ensures termination.
    """
    return cursor.skip_whitespace()  # Always makes progress or returns self
