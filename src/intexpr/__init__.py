"""intexpr - single-pass integer arithmetic expression evaluator.

Parses and evaluates expressions made of integer literals, the binary
operators + - * / ^, prefix signs and parentheses in one left-to-right
recursive-descent pass, reporting the first error with its exact offset.

Public API:
    parse_expression - Evaluate to an EvaluationResult (never raises for bad input)
    evaluate - Evaluate to an int, raising ExpressionError subclasses on failure
    render_error - Three-line caret diagnostic for a failed result
    ExpressionParser - Configurable parser (size and nesting limits)
    EvaluationResult - Immutable success/failure outcome
    ParseErrorKind - Error causes

Exceptions:
    ExpressionError - Base exception class
    ExpressionSyntaxError - Missing literal or trailing input
    UnclosedParenthesisError - Missing ')'
    NestingDepthExceededError - Nesting limit exceeded
    DivisionByZeroError - Division by zero or 0 raised to a negative power

Submodules:
    intexpr.syntax - Cursor, parse state and precedence tiers
    intexpr.diagnostics - Error codes, templates and formatters
    intexpr.formatting - Locale-aware value formatting (requires Babel)
    intexpr.cli - Command-line interface
"""

from .diagnostics import (
    DivisionByZeroError,
    EvaluationError,
    EvaluationResult,
    ExpressionError,
    ExpressionSyntaxError,
    NestingDepthExceededError,
    OutputFormat,
    UnclosedParenthesisError,
)
from .enums import ParseErrorKind
from .syntax import ExpressionParser

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("intexpr")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


def parse_expression(
    source: str,
    *,
    max_nesting_depth: int | None = None,
    max_power_depth: int | None = None,
) -> EvaluationResult:
    """Parse and evaluate an expression.

    Args:
        source: Expression text
        max_nesting_depth: Optional parenthesis nesting limit (default: 100)
        max_power_depth: Optional "^" chain length limit (default: 300)

    Returns:
        EvaluationResult carrying either the value or the first error

    Example:
        >>> parse_expression("2^3^2").value
        512
        >>> parse_expression("(1+2").error
        <ParseErrorKind.UNCLOSED_PARENTHESIS: 'unclosed_parenthesis'>
    """
    return ExpressionParser(
        max_nesting_depth=max_nesting_depth, max_power_depth=max_power_depth
    ).parse(source)


def evaluate(source: str) -> int:
    """Evaluate an expression, raising on failure.

    Raises:
        ExpressionSyntaxError: Missing literal or trailing input
        UnclosedParenthesisError: Missing ')'
        NestingDepthExceededError: Nesting limit exceeded
        DivisionByZeroError: Division by zero

    Example:
        >>> evaluate("1-2+3")
        2
    """
    return parse_expression(source).unwrap()


def render_error(result: EvaluationResult) -> str:
    """Render the three-line caret diagnostic for a failed result.

    Raises:
        ValueError: If the result is a success
    """
    if result.is_ok:
        msg = "render_error() requires a failed EvaluationResult"
        raise ValueError(msg)
    return result.render(OutputFormat.CARET)


__all__ = [
    "DivisionByZeroError",
    "EvaluationError",
    "EvaluationResult",
    "ExpressionError",
    "ExpressionParser",
    "ExpressionSyntaxError",
    "NestingDepthExceededError",
    "OutputFormat",
    "ParseErrorKind",
    "UnclosedParenthesisError",
    "__version__",
    "evaluate",
    "parse_expression",
    "render_error",
]
