"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
    "render_caret",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    CARET = "caret"  # Source line, caret line, message line
    RUST = "rust"  # Rust compiler-style output
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


def render_caret(source: str, position: int, message: str) -> str:
    """Render the three-line caret diagnostic.

    Line 1 is the input verbatim, line 2 is `position` spaces followed by
    a caret, line 3 is the message.

    Example:
        >>> print(render_caret("5/0", 3, "Division by 0"))
        5/0
           ^
        Division by 0
    """
    return f"{source}\n{' ' * position}^\n{message}"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Supports multiple output formats and
    optional ANSI highlighting for terminals.

    Attributes:
        output_format: Output style (caret, rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.CARET)
        >>> diagnostic = ErrorTemplate.syntax_error(2, "3 4")
        >>> print(formatter.format(diagnostic))
        3 4
          ^
        Syntax error

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        SYNTAX_ERROR: Syntax error
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.CARET:
                return self._format_caret(diagnostic)
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_caret(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as source line, caret line and message line.

        Falls back to the bare message when the diagnostic has no source
        or no span to point at.
        """
        if diagnostic.source is None or diagnostic.span is None:
            return diagnostic.message
        message = diagnostic.message
        if self.color:
            message = f"\033[1;31m{message}\033[0m"  # Bold red
        return render_caret(diagnostic.source, diagnostic.span.start, message)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[DIVISION_BY_ZERO]: Division by 0
              --> column 4
              = help: The divisor (or the base of a negative power) must not be zero
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.span:
            parts.append(f"  --> column {diagnostic.span.column}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            SYNTAX_ERROR: Syntax error
        """
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "SYNTAX_ERROR", "code_value": 3001, "message": "Syntax error", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.source is not None:
            data["source"] = diagnostic.source

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

