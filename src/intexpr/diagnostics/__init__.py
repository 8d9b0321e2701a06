"""Diagnostic system for expression errors.

Provides structured error diagnostics with codes, spans and hints, the
exception hierarchy raised by the strict API, and the evaluation result type.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DivisionByZeroError,
    EvaluationError,
    ExpressionError,
    ExpressionSyntaxError,
    NestingDepthExceededError,
    UnclosedParenthesisError,
    error_from_diagnostic,
)
from .formatter import DiagnosticFormatter, OutputFormat, render_caret
from .result import EvaluationResult
from .templates import ERROR_MESSAGES, ErrorTemplate

__all__ = [
    "ERROR_MESSAGES",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DivisionByZeroError",
    "ErrorTemplate",
    "EvaluationError",
    "EvaluationResult",
    "ExpressionError",
    "ExpressionSyntaxError",
    "NestingDepthExceededError",
    "OutputFormat",
    "SourceSpan",
    "UnclosedParenthesisError",
    "error_from_diagnostic",
    "render_caret",
]
