"""Shared parse state threaded through the precedence tiers.

One ParseState exists per driver call. Every tier receives the same object
by reference, reads and advances its cursor, and checks its error field
immediately after every sub-call.

Python 3.13+.
"""

import logging
from dataclasses import dataclass, field

from intexpr.constants import MAX_DEPTH, MAX_POWER_DEPTH
from intexpr.enums import ParseErrorKind
from intexpr.syntax.cursor import Cursor
from intexpr.syntax.parser.whitespace import skip_whitespace

__all__ = ["ParseState"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParseState:
    """Cursor plus write-once error for one parse invocation.

    Replaces a process-wide parser state with explicit parameter passing:
    independent parses never share a ParseState, so they cannot interfere.

    Mutability Note:
        Intentionally mutable (not frozen=True): tiers advance the cursor
        and record the error in place. The cursor itself stays immutable,
        so every move is an explicit reassignment.

    Invariants:
        - The cursor position never decreases.
        - The first fail() records the error kind and the cursor position;
          after that the error never changes and the cursor never moves.

    Attributes:
        cursor: Current position in the source
        max_depth: Maximum allowed parenthesis nesting depth
        max_power_depth: Maximum allowed length of a "^" chain
        error: First error recorded (None while parsing succeeds)
        error_position: Cursor offset at the moment the error was recorded
        depth: Current parenthesis depth (0 = top level)
        power_depth: Current number of open "^" right operands
        exceeded_limit: The limit that produced NESTING_TOO_DEEP, if any
    """

    cursor: Cursor
    max_depth: int = MAX_DEPTH
    max_power_depth: int = MAX_POWER_DEPTH
    error: ParseErrorKind | None = field(default=None, init=False)
    error_position: int | None = field(default=None, init=False)
    depth: int = field(default=0, init=False)
    power_depth: int = field(default=0, init=False)
    exceeded_limit: int | None = field(default=None, init=False)

    @classmethod
    def for_source(
        cls,
        source: str,
        max_depth: int = MAX_DEPTH,
        max_power_depth: int = MAX_POWER_DEPTH,
    ) -> "ParseState":
        """Create a fresh state positioned at the start of source."""
        return cls(
            cursor=Cursor(source, 0),
            max_depth=max_depth,
            max_power_depth=max_power_depth,
        )

    @property
    def source(self) -> str:
        """The text being parsed."""
        return self.cursor.source

    @property
    def position(self) -> int:
        """Current character offset."""
        return self.cursor.pos

    @property
    def failed(self) -> bool:
        """True once any tier has recorded an error."""
        return self.error is not None

    def skip_whitespace(self) -> None:
        """Advance past whitespace (no-op once an error is recorded)."""
        if self.error is None:
            self.cursor = skip_whitespace(self.cursor)

    def advance(self, count: int = 1) -> None:
        """Consume count characters (no-op once an error is recorded)."""
        if self.error is None:
            self.cursor = self.cursor.advance(count)

    def move_to(self, cursor: Cursor) -> None:
        """Jump forward to a cursor produced by a primitive scanner.

        Raises:
            ValueError: If the cursor belongs to another source or would
                move backwards
        """
        if self.error is not None:
            return
        if cursor.source is not self.cursor.source and cursor.source != self.cursor.source:
            msg = "Cursor belongs to a different source"
            raise ValueError(msg)
        if cursor.pos < self.cursor.pos:
            msg = f"Cursor cannot move backwards ({self.cursor.pos} -> {cursor.pos})"
            raise ValueError(msg)
        self.cursor = cursor

    def fail(self, kind: ParseErrorKind) -> None:
        """Record an error at the current position.

        Write-once: only the first error is kept. A later call indicates a
        tier that did not return after a failed sub-call; it is ignored.
        """
        if self.error is not None:
            logger.debug(
                "Ignoring %s at %d: %s already recorded at %d",
                kind,
                self.cursor.pos,
                self.error,
                self.error_position,
            )
            return
        self.error = kind
        self.error_position = self.cursor.pos

    def enter_nesting(self) -> bool:
        """Enter one parenthesis level.

        Returns:
            True if the level was entered, False if the depth limit was
            reached (NESTING_TOO_DEEP is then recorded)
        """
        if self.depth >= self.max_depth:
            self._too_deep(self.max_depth)
            return False
        self.depth += 1
        return True

    def leave_nesting(self) -> None:
        """Leave one parenthesis level entered with enter_nesting()."""
        if self.depth > 0:
            self.depth -= 1

    def enter_power(self) -> bool:
        """Enter the right operand of one "^".

        Returns:
            True if entered, False if the chain limit was reached
            (NESTING_TOO_DEEP is then recorded)
        """
        if self.power_depth >= self.max_power_depth:
            self._too_deep(self.max_power_depth)
            return False
        self.power_depth += 1
        return True

    def leave_power(self) -> None:
        """Leave a "^" right operand entered with enter_power()."""
        if self.power_depth > 0:
            self.power_depth -= 1

    def _too_deep(self, limit: int) -> None:
        if self.error is None:
            self.exceeded_limit = limit
        self.fail(ParseErrorKind.NESTING_TOO_DEEP)
