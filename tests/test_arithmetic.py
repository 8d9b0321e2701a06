"""Tests for core/arithmetic.py signed 64-bit operations.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from intexpr.constants import INT64_MAX, INT64_MIN
from intexpr.core.arithmetic import (
    clamp_int64,
    int64_add,
    int64_divide,
    int64_multiply,
    int64_negate,
    int64_power,
    int64_subtract,
    wrap_int64,
)

from tests.strategies import int64_values

# ============================================================================
# Wrapping and saturation
# ============================================================================


class TestWrapInt64:
    """Test two's complement reduction."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, 0),
            (INT64_MAX, INT64_MAX),
            (INT64_MAX + 1, INT64_MIN),
            (INT64_MIN - 1, INT64_MAX),
            (2**64, 0),
            (-(2**64) - 5, -5),
        ],
    )
    def test_known_values(self, value: int, expected: int) -> None:
        assert wrap_int64(value) == expected

    @given(st.integers())
    def test_result_in_range(self, value: int) -> None:
        """PROPERTY: wrapped values always fit in int64."""
        assert INT64_MIN <= wrap_int64(value) <= INT64_MAX

    @given(int64_values())
    def test_identity_in_range(self, value: int) -> None:
        """PROPERTY: values already in range are unchanged."""
        assert wrap_int64(value) == value


class TestClampInt64:
    """Test saturation (used for literals)."""

    def test_saturates_high(self) -> None:
        assert clamp_int64(10**30) == INT64_MAX

    def test_saturates_low(self) -> None:
        assert clamp_int64(-(10**30)) == INT64_MIN

    def test_in_range_unchanged(self) -> None:
        assert clamp_int64(-42) == -42


# ============================================================================
# Binary operations
# ============================================================================


class TestWrappingOperations:
    """Test + - * and negation."""

    def test_add_overflow_wraps(self) -> None:
        assert int64_add(INT64_MAX, 1) == INT64_MIN

    def test_subtract_underflow_wraps(self) -> None:
        assert int64_subtract(INT64_MIN, 1) == INT64_MAX

    def test_multiply_overflow_wraps(self) -> None:
        assert int64_multiply(2**62, 2) == INT64_MIN
        assert int64_multiply(2**32, 2**32) == 0

    def test_negate_min_is_min(self) -> None:
        assert int64_negate(INT64_MIN) == INT64_MIN

    @given(int64_values(), int64_values())
    def test_add_matches_modular_sum(self, a: int, b: int) -> None:
        """PROPERTY: addition is exact sum reduced modulo 2**64."""
        result = int64_add(a, b)
        event(f"overflow={result != a + b}")
        assert (result - (a + b)) % 2**64 == 0


class TestDivide:
    """Test truncating division."""

    @pytest.mark.parametrize(
        ("dividend", "divisor", "expected"),
        [
            (7, 2, 3),
            (-7, 2, -3),
            (7, -2, -3),
            (-7, -2, 3),
            (0, 5, 0),
            (INT64_MIN, -1, INT64_MIN),
        ],
    )
    def test_truncates_toward_zero(self, dividend: int, divisor: int, expected: int) -> None:
        assert int64_divide(dividend, divisor) == expected

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            int64_divide(1, 0)

    @given(int64_values(), int64_values().filter(lambda n: n != 0))
    @example(INT64_MIN, -1)
    def test_remainder_has_dividend_sign(self, a: int, b: int) -> None:
        """PROPERTY: |q*b| <= |a| and the remainder keeps the sign of a."""
        q = int64_divide(a, b)
        if a == INT64_MIN and b == -1:
            event("case=min_over_minus_one")
            assert q == INT64_MIN
            return
        remainder = a - q * b
        assert abs(remainder) < abs(b)
        assert remainder == 0 or (remainder < 0) == (a < 0)


class TestPower:
    """Test exponent policy."""

    @pytest.mark.parametrize(
        ("base", "exponent", "expected"),
        [
            (2, 10, 1024),
            (0, 0, 1),
            (5, 0, 1),
            (2, -1, 0),
            (-1, -1, 0),
            (2, 62, 4611686018427387904),
            (2, 63, INT64_MIN),
            (2, 64, 0),
            (-1, 999_999_999_999, -1),
            (-2, 3, -8),
        ],
    )
    def test_known_values(self, base: int, exponent: int, expected: int) -> None:
        assert int64_power(base, exponent) == expected

    def test_zero_base_negative_exponent_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            int64_power(0, -3)

    @given(
        st.integers(min_value=-50, max_value=50),
        st.integers(min_value=1, max_value=80),
    )
    def test_matches_repeated_wrapped_multiplication(self, base: int, exponent: int) -> None:
        """PROPERTY: power equals multiplying base exponent times with wrapping."""
        expected = 1
        for _ in range(exponent):
            expected = int64_multiply(expected, base)
        assert int64_power(base, exponent) == expected
