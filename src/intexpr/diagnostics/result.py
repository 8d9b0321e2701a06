"""Evaluation result for a single parsed expression.

The driver returns exactly one of two outcomes: the value of a fully
consumed expression, or the first error kind together with the character
offset where it was detected.

Python 3.13+.
"""

from dataclasses import dataclass

from intexpr.enums import ParseErrorKind

from .codes import Diagnostic
from .errors import error_from_diagnostic
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = ["EvaluationResult"]


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Immutable outcome of parsing and evaluating one expression.

    Exactly one of `value` or `error` is set. On failure, `position` is the
    offset recorded at the moment the error was detected; it is used as-is
    for the caret diagnostic and never re-derived.

    Attributes:
        source: The original expression text
        value: Signed 64-bit result (None on failure)
        error: Kind of the first error (None on success)
        position: Character offset of the error (None on success)
        max_depth: Nesting limit that was in effect (for depth diagnostics)

    Example:
        >>> result = EvaluationResult.success("1+2", 3)
        >>> result.is_ok
        True
        >>> result = EvaluationResult.failure("(1+2", ParseErrorKind.UNCLOSED_PARENTHESIS, 4)
        >>> print(result.render())
        (1+2
            ^
        Expecting )
    """

    source: str
    value: int | None = None
    error: ParseErrorKind | None = None
    position: int | None = None
    max_depth: int | None = None

    def __post_init__(self) -> None:
        """Validate that the result is either a success or a failure."""
        if (self.value is None) == (self.error is None):
            msg = "EvaluationResult must carry exactly one of value or error"
            raise ValueError(msg)
        if self.error is not None and self.position is None:
            msg = "Failed EvaluationResult requires an error position"
            raise ValueError(msg)

    @staticmethod
    def success(source: str, value: int) -> "EvaluationResult":
        """Create a successful result."""
        return EvaluationResult(source=source, value=value)

    @staticmethod
    def failure(
        source: str,
        error: ParseErrorKind,
        position: int,
        max_depth: int | None = None,
    ) -> "EvaluationResult":
        """Create a failed result."""
        return EvaluationResult(
            source=source, error=error, position=position, max_depth=max_depth
        )

    @property
    def is_ok(self) -> bool:
        """True if the expression evaluated without error."""
        return self.error is None

    def to_diagnostic(self) -> Diagnostic | None:
        """Build the structured diagnostic for a failure (None on success)."""
        if self.error is None or self.position is None:
            return None
        return ErrorTemplate.for_kind(
            self.error, self.position, self.source, self.max_depth
        )

    def render(
        self, output_format: OutputFormat = OutputFormat.CARET, *, color: bool = False
    ) -> str:
        """Render the failure diagnostic, or the value on success.

        Args:
            output_format: Diagnostic layout
            color: Add ANSI highlighting (caret and rust layouts)
        """
        diagnostic = self.to_diagnostic()
        if diagnostic is None:
            return str(self.value)
        formatter = DiagnosticFormatter(output_format=output_format, color=color)
        return formatter.format(diagnostic)

    def unwrap(self) -> int:
        """Return the value, raising the matching ExpressionError on failure.

        Raises:
            ExpressionSyntaxError: Missing literal or trailing input
            UnclosedParenthesisError: Missing ')'
            NestingDepthExceededError: Nesting limit exceeded
            DivisionByZeroError: Division by zero
        """
        diagnostic = self.to_diagnostic()
        if diagnostic is not None:
            raise error_from_diagnostic(diagnostic)
        assert self.value is not None  # noqa: S101 - guaranteed by __post_init__
        return self.value
