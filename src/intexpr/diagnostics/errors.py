"""Expression exception hierarchy with structured diagnostics.

The parser itself never raises for malformed input: errors are recorded in
the parse state and returned in an EvaluationResult. These exceptions are
raised by the strict API (intexpr.evaluate, EvaluationResult.unwrap) for
callers that prefer exceptions.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "DivisionByZeroError",
    "EvaluationError",
    "ExpressionError",
    "ExpressionSyntaxError",
    "NestingDepthExceededError",
    "UnclosedParenthesisError",
    "error_from_diagnostic",
]


class ExpressionError(Exception):
    """Base exception for all expression errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ExpressionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def position(self) -> int | None:
        """Character offset of the error, if the diagnostic carries one."""
        if self.diagnostic is None or self.diagnostic.span is None:
            return None
        return self.diagnostic.span.start


class ExpressionSyntaxError(ExpressionError):
    """Malformed expression: missing literal or unconsumed trailing input."""


class UnclosedParenthesisError(ExpressionSyntaxError):
    """An opening '(' was never matched by a ')'."""


class NestingDepthExceededError(ExpressionSyntaxError):
    """Parenthesis or exponent nesting exceeded the configured depth limit.

    This error indicates either adversarial input designed to exhaust the
    interpreter stack or unintended deep nesting.
    """


class EvaluationError(ExpressionError):
    """Well-formed expression whose value cannot be computed."""


class DivisionByZeroError(EvaluationError):
    """Division by zero, or zero raised to a negative power."""


_ERROR_CLASSES: dict[DiagnosticCode, type[ExpressionError]] = {
    DiagnosticCode.SYNTAX_ERROR: ExpressionSyntaxError,
    DiagnosticCode.UNCLOSED_PARENTHESIS: UnclosedParenthesisError,
    DiagnosticCode.NESTING_DEPTH_EXCEEDED: NestingDepthExceededError,
    DiagnosticCode.DIVISION_BY_ZERO: DivisionByZeroError,
}


def error_from_diagnostic(diagnostic: Diagnostic) -> ExpressionError:
    """Instantiate the exception class matching a diagnostic's code."""
    return _ERROR_CLASSES.get(diagnostic.code, ExpressionError)(diagnostic)
