"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - No `str | None` for the current character - EOF is a state (is_eof)
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Positions only move forward: advance() never goes back

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["WHITESPACE", "Cursor", "ParseResult"]

# C "isspace" classification in the default locale: space, \t, \n, \v, \f, \r.
# Unicode whitespace (e.g. U+00A0) is deliberately not whitespace.
WHITESPACE: frozenset[str] = frozenset(" \t\n\v\f\r")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency
        3. Simple position - Just an integer offset into the source
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed!

    Example:
        >>> cursor = Cursor("1+2", 0)
        >>> cursor.current
        '1'
        >>> cursor.advance().current
        '+'
        >>> cursor.current  # Original unchanged (immutability)
        '1'
        >>> Cursor("1", 1).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input (position >= source length)."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF).

        Example:
            >>> cursor = Cursor("42", 0)
            >>> cursor.advance().pos
            1
            >>> cursor.advance(5).pos
            2
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def at(self, char: str) -> bool:
        """Check whether the current character is `char` (False at EOF)."""
        return not self.is_eof and self.source[self.pos] == char

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip whitespace characters (space, tab, LF, VT, FF, CR).

        Returns:
            New cursor advanced past all consecutive whitespace characters

        Example:
            >>> Cursor(" \\t 7", 0).skip_whitespace().pos
            3
            >>> Cursor("7", 0).skip_whitespace().pos  # Nothing to skip
            0
        """
        source = self.source
        pos = self.pos
        end = len(source)
        while pos < end and source[pos] in WHITESPACE:
            pos += 1
        if pos == self.pos:
            return self
        return Cursor(source, pos)


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Primitive scanners have signature:
            def scan_foo(cursor: Cursor) -> ParseResult[Foo] | None:
                ...
                return ParseResult(parsed_value, new_cursor)

    Example:
        >>> result = ParseResult(42, Cursor("42", 2))
        >>> result.value
        42
        >>> result.cursor.is_eof
        True
    """

    value: T
    cursor: Cursor
