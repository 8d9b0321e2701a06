"""Tests for the top-level intexpr package API."""

from __future__ import annotations

import pytest

import intexpr
from intexpr import (
    DivisionByZeroError,
    ExpressionSyntaxError,
    NestingDepthExceededError,
    ParseErrorKind,
    UnclosedParenthesisError,
    evaluate,
    parse_expression,
    render_error,
)
from intexpr.enums import Operator


class TestPublicApi:
    """Test exports and version."""

    def test_all_exports_resolve(self) -> None:
        for name in intexpr.__all__:
            assert hasattr(intexpr, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(intexpr.__version__, str)
        assert intexpr.__version__

    def test_enum_values(self) -> None:
        assert ParseErrorKind.SYNTAX == "syntax"
        assert [op.value for op in Operator] == ["+", "-", "*", "/", "^"]


class TestParseExpression:
    """Test parse_expression()."""

    def test_value(self) -> None:
        assert parse_expression("1 + 5 * (8-(3+5*(10+20))) - 2^5^2").value == -33555156

    def test_error(self) -> None:
        result = parse_expression("(1+2")

        assert result.error == ParseErrorKind.UNCLOSED_PARENTHESIS
        assert result.position == 4

    def test_custom_depth(self) -> None:
        result = parse_expression("((1))", max_nesting_depth=1)

        assert result.error == ParseErrorKind.NESTING_TOO_DEEP

    def test_custom_power_depth(self) -> None:
        assert parse_expression("2^2^2", max_nesting_depth=1).value == 16

        result = parse_expression("2^2^2", max_power_depth=1)
        assert result.error == ParseErrorKind.NESTING_TOO_DEEP
        assert result.position == 4


class TestEvaluate:
    """Test evaluate() raising on failure."""

    def test_value(self) -> None:
        assert evaluate("1-2+3") == 2

    @pytest.mark.parametrize(
        ("source", "error_class", "position"),
        [
            ("3 4", ExpressionSyntaxError, 2),
            ("(1+2", UnclosedParenthesisError, 4),
            ("5/0", DivisionByZeroError, 3),
            ("(" * 200 + "1" + ")" * 200, NestingDepthExceededError, 100),
        ],
    )
    def test_raises(self, source: str, error_class: type, position: int) -> None:
        with pytest.raises(error_class) as exc_info:
            evaluate(source)
        assert exc_info.value.position == position


class TestRenderError:
    """Test render_error()."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("3 4", "3 4\n  ^\nSyntax error"),
            ("(1+2", "(1+2\n    ^\nExpecting )"),
            ("5/0", "5/0\n   ^\nDivision by 0"),
            ("", "\n^\nSyntax error"),
        ],
    )
    def test_caret_output(self, source: str, expected: str) -> None:
        assert render_error(parse_expression(source)) == expected

    def test_success_rejected(self) -> None:
        with pytest.raises(ValueError, match="requires a failed"):
            render_error(parse_expression("1"))
