"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Evaluation errors (arithmetic failures)
        3000-3999: Syntax errors (parser failures)
    """

    # Evaluation errors (2000-2999)
    DIVISION_BY_ZERO = 2001

    # Syntax errors (3000-3999)
    # 3003, 3004: not assigned
    SYNTAX_ERROR = 3001
    UNCLOSED_PARENTHESIS = 3002
    NESTING_DEPTH_EXCEEDED = 3005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For ASCII expressions the two coincide.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or column
                is less than 1 (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, position: int) -> "SourceSpan":
        """Create a zero-width span at a character offset."""
        return cls(start=position, end=position, column=position + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when not tied to an offset)
        source: The expression the diagnostic refers to (for caret rendering)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    source: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DIVISION_BY_ZERO]: Division by 0
              --> column 4
              = help: Make sure the divisor is not zero

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
