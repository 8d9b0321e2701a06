"""Tests for the diagnostics package: codes, templates, errors, formatter.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from intexpr.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    DivisionByZeroError,
    ErrorTemplate,
    EvaluationError,
    ExpressionError,
    ExpressionSyntaxError,
    NestingDepthExceededError,
    OutputFormat,
    SourceSpan,
    UnclosedParenthesisError,
    error_from_diagnostic,
    render_caret,
)
from intexpr.diagnostics.templates import ERROR_MESSAGES
from intexpr.enums import ParseErrorKind

# ============================================================================
# Codes and spans
# ============================================================================


class TestDiagnosticCode:
    """Test code numbering."""

    def test_code_values(self) -> None:
        assert DiagnosticCode.DIVISION_BY_ZERO.value == 2001
        assert DiagnosticCode.SYNTAX_ERROR.value == 3001
        assert DiagnosticCode.UNCLOSED_PARENTHESIS.value == 3002
        assert DiagnosticCode.NESTING_DEPTH_EXCEEDED.value == 3005

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_at_position(self) -> None:
        span = SourceSpan.at(4)

        assert span.start == 4
        assert span.end == 4
        assert span.column == 5

    @pytest.mark.parametrize(
        ("start", "end", "column", "match"),
        [
            (-1, 0, 1, "start must be >= 0"),
            (5, 4, 1, "must be >= start"),
            (0, 0, 0, "1-indexed"),
        ],
    )
    def test_invalid_spans(self, start: int, end: int, column: int, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            SourceSpan(start=start, end=end, column=column)


# ============================================================================
# Templates
# ============================================================================


class TestErrorTemplate:
    """Test the per-kind diagnostic templates."""

    def test_fixed_messages(self) -> None:
        assert ERROR_MESSAGES == {
            ParseErrorKind.SYNTAX: "Syntax error",
            ParseErrorKind.DIVISION_BY_ZERO: "Division by 0",
            ParseErrorKind.UNCLOSED_PARENTHESIS: "Expecting )",
            ParseErrorKind.NESTING_TOO_DEEP: "Nesting too deep",
        }

    @pytest.mark.parametrize(
        ("kind", "code"),
        [
            (ParseErrorKind.SYNTAX, DiagnosticCode.SYNTAX_ERROR),
            (ParseErrorKind.DIVISION_BY_ZERO, DiagnosticCode.DIVISION_BY_ZERO),
            (ParseErrorKind.UNCLOSED_PARENTHESIS, DiagnosticCode.UNCLOSED_PARENTHESIS),
            (ParseErrorKind.NESTING_TOO_DEEP, DiagnosticCode.NESTING_DEPTH_EXCEEDED),
        ],
    )
    def test_for_kind(self, kind: ParseErrorKind, code: DiagnosticCode) -> None:
        diagnostic = ErrorTemplate.for_kind(kind, 2, "3 4")

        assert diagnostic.code == code
        assert diagnostic.message == ERROR_MESSAGES[kind]
        assert diagnostic.span == SourceSpan.at(2)
        assert diagnostic.source == "3 4"
        assert diagnostic.hint

    def test_nesting_hint_includes_limit(self) -> None:
        diagnostic = ErrorTemplate.nesting_too_deep(3, "((((1))))", max_depth=3)

        assert diagnostic.hint is not None
        assert "(limit: 3)" in diagnostic.hint

    def test_str_is_message(self) -> None:
        assert str(ErrorTemplate.division_by_zero(3, "5/0")) == "Division by 0"


# ============================================================================
# Exceptions
# ============================================================================


class TestExpressionErrors:
    """Test the exception hierarchy."""

    def test_hierarchy(self) -> None:
        assert issubclass(UnclosedParenthesisError, ExpressionSyntaxError)
        assert issubclass(NestingDepthExceededError, ExpressionSyntaxError)
        assert issubclass(ExpressionSyntaxError, ExpressionError)
        assert issubclass(DivisionByZeroError, EvaluationError)
        assert issubclass(EvaluationError, ExpressionError)

    def test_plain_message(self) -> None:
        error = ExpressionError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None
        assert error.position is None

    def test_from_diagnostic(self) -> None:
        diagnostic = ErrorTemplate.unclosed_parenthesis(4, "(1+2")
        error = error_from_diagnostic(diagnostic)

        assert type(error) is UnclosedParenthesisError
        assert error.diagnostic is diagnostic
        assert error.position == 4
        assert "error[UNCLOSED_PARENTHESIS]: Expecting )" in str(error)

    @pytest.mark.parametrize(
        ("kind", "error_class"),
        [
            (ParseErrorKind.SYNTAX, ExpressionSyntaxError),
            (ParseErrorKind.DIVISION_BY_ZERO, DivisionByZeroError),
            (ParseErrorKind.UNCLOSED_PARENTHESIS, UnclosedParenthesisError),
            (ParseErrorKind.NESTING_TOO_DEEP, NestingDepthExceededError),
        ],
    )
    def test_error_class_per_kind(
        self, kind: ParseErrorKind, error_class: type[ExpressionError]
    ) -> None:
        error = error_from_diagnostic(ErrorTemplate.for_kind(kind, 0, "x"))

        assert type(error) is error_class


# ============================================================================
# Formatter
# ============================================================================


class TestRenderCaret:
    """Test the three-line caret layout."""

    def test_caret_under_position(self) -> None:
        assert render_caret("5/0", 3, "Division by 0") == "5/0\n   ^\nDivision by 0"

    def test_position_zero(self) -> None:
        assert render_caret("", 0, "Syntax error") == "\n^\nSyntax error"

    @given(source=st.text(alphabet="0123456789+-*/^() ", max_size=30), data=st.data())
    def test_caret_line_length(self, source: str, data: st.DataObject) -> None:
        """PROPERTY: the caret sits exactly `position` columns in."""
        position = data.draw(st.integers(min_value=0, max_value=len(source)))
        event(f"at_end={position == len(source)}")
        lines = render_caret(source, position, "Syntax error").split("\n")

        assert lines[0] == source
        assert lines[1] == " " * position + "^"
        assert lines[2] == "Syntax error"


class TestDiagnosticFormatter:
    """Test the output formats."""

    def _diagnostic(self) -> Diagnostic:
        return ErrorTemplate.division_by_zero(3, "5/0")

    def test_caret(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.CARET)

        assert formatter.format(self._diagnostic()) == "5/0\n   ^\nDivision by 0"

    def test_caret_without_source_falls_back_to_message(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.CARET)
        diagnostic = Diagnostic(code=DiagnosticCode.SYNTAX_ERROR, message="Syntax error")

        assert formatter.format(diagnostic) == "Syntax error"

    def test_caret_color(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.CARET, color=True)

        assert "\033[1;31mDivision by 0\033[0m" in formatter.format(self._diagnostic())

    def test_rust_color(self) -> None:
        formatter = DiagnosticFormatter(color=True)

        assert formatter.format(self._diagnostic()).startswith("\033[1;31merror\033[0m[")

    def test_rust(self) -> None:
        output = DiagnosticFormatter().format(self._diagnostic())
        lines = output.split("\n")

        assert lines[0] == "error[DIVISION_BY_ZERO]: Division by 0"
        assert lines[1] == "  --> column 4"
        assert lines[2].startswith("  = help: ")

    def test_simple(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(self._diagnostic()) == "DIVISION_BY_ZERO: Division by 0"

    def test_json(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self._diagnostic()))

        assert data["code"] == "DIVISION_BY_ZERO"
        assert data["code_value"] == 2001
        assert data["message"] == "Division by 0"
        assert data["severity"] == "error"
        assert data["column"] == 4
        assert data["start"] == 3
        assert data["source"] == "5/0"

    @pytest.mark.parametrize("output_format", list(OutputFormat))
    def test_every_format_mentions_message(self, output_format: OutputFormat) -> None:
        output = DiagnosticFormatter(output_format=output_format).format(self._diagnostic())

        assert "Division by 0" in output
