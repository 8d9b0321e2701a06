"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from intexpr.enums import ParseErrorKind

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ERROR_MESSAGES", "ErrorTemplate"]

# Fixed diagnostic line for each error kind (third line of the caret output).
ERROR_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.SYNTAX: "Syntax error",
    ParseErrorKind.DIVISION_BY_ZERO: "Division by 0",
    ParseErrorKind.UNCLOSED_PARENTHESIS: "Expecting )",
    ParseErrorKind.NESTING_TOO_DEEP: "Nesting too deep",
}


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def syntax_error(position: int, source: str | None = None) -> Diagnostic:
        """Expected a literal but found none, or trailing input remains.

        Args:
            position: Character offset where the error was detected
            source: The expression being parsed

        Returns:
            Diagnostic for SYNTAX_ERROR
        """
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_ERROR,
            message=ERROR_MESSAGES[ParseErrorKind.SYNTAX],
            span=SourceSpan.at(position),
            source=source,
            hint="Expected an integer, '(' or an operator here",
        )

    @staticmethod
    def division_by_zero(position: int, source: str | None = None) -> Diagnostic:
        """Divisor evaluated to zero, or zero raised to a negative power.

        Args:
            position: Character offset where the error was detected
            source: The expression being parsed

        Returns:
            Diagnostic for DIVISION_BY_ZERO
        """
        return Diagnostic(
            code=DiagnosticCode.DIVISION_BY_ZERO,
            message=ERROR_MESSAGES[ParseErrorKind.DIVISION_BY_ZERO],
            span=SourceSpan.at(position),
            source=source,
            hint="The divisor (or the base of a negative power) must not be zero",
        )

    @staticmethod
    def unclosed_parenthesis(position: int, source: str | None = None) -> Diagnostic:
        """Opening parenthesis has no matching closing parenthesis.

        Args:
            position: Character offset where ')' was expected
            source: The expression being parsed

        Returns:
            Diagnostic for UNCLOSED_PARENTHESIS
        """
        return Diagnostic(
            code=DiagnosticCode.UNCLOSED_PARENTHESIS,
            message=ERROR_MESSAGES[ParseErrorKind.UNCLOSED_PARENTHESIS],
            span=SourceSpan.at(position),
            source=source,
            hint="Add the missing ')'",
        )

    @staticmethod
    def nesting_too_deep(
        position: int, source: str | None = None, max_depth: int | None = None
    ) -> Diagnostic:
        """Parenthesis or exponent nesting exceeded the depth limit.

        Args:
            position: Character offset where the limit was hit
            source: The expression being parsed
            max_depth: The configured limit, if known

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        hint = "Reduce parenthesis nesting or the length of '^' chains"
        if max_depth is not None:
            hint = f"{hint} (limit: {max_depth})"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=ERROR_MESSAGES[ParseErrorKind.NESTING_TOO_DEEP],
            span=SourceSpan.at(position),
            source=source,
            hint=hint,
        )

    @staticmethod
    def for_kind(
        kind: ParseErrorKind,
        position: int,
        source: str | None = None,
        max_depth: int | None = None,
    ) -> Diagnostic:
        """Build the diagnostic for a recorded parse error kind."""
        match kind:
            case ParseErrorKind.SYNTAX:
                return ErrorTemplate.syntax_error(position, source)
            case ParseErrorKind.DIVISION_BY_ZERO:
                return ErrorTemplate.division_by_zero(position, source)
            case ParseErrorKind.UNCLOSED_PARENTHESIS:
                return ErrorTemplate.unclosed_parenthesis(position, source)
            case ParseErrorKind.NESTING_TOO_DEEP:
                return ErrorTemplate.nesting_too_deep(position, source, max_depth)
