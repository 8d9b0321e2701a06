"""Signed 64-bit integer arithmetic.

Python integers never overflow, but evaluated values are defined as signed
64-bit integers. Every operation here reduces its result modulo 2**64 and
reinterprets it as two's complement, which is what a fixed-width machine
integer does on overflow.

Division truncates toward zero (C semantics), unlike Python's floor
division: 7 / -2 is -3, not -4.

Python 3.13+. Zero external dependencies.
"""

from intexpr.constants import INT64_BITS, INT64_MAX, INT64_MIN

__all__ = [
    "clamp_int64",
    "int64_add",
    "int64_divide",
    "int64_multiply",
    "int64_negate",
    "int64_power",
    "int64_subtract",
    "wrap_int64",
]

_MODULUS: int = 1 << INT64_BITS
_SIGN_BIT: int = 1 << (INT64_BITS - 1)


def wrap_int64(value: int) -> int:
    """Reduce an arbitrary integer to the signed 64-bit range.

    Example:
        >>> wrap_int64(2**63)
        -9223372036854775808
        >>> wrap_int64(-1)
        -1
    """
    return ((value + _SIGN_BIT) % _MODULUS) - _SIGN_BIT


def clamp_int64(value: int) -> int:
    """Saturate an arbitrary integer to the signed 64-bit range.

    Used for literals, which saturate instead of wrapping.
    """
    if value > INT64_MAX:
        return INT64_MAX
    if value < INT64_MIN:
        return INT64_MIN
    return value


def int64_add(left: int, right: int) -> int:
    """Wrapping addition."""
    return wrap_int64(left + right)


def int64_subtract(left: int, right: int) -> int:
    """Wrapping subtraction."""
    return wrap_int64(left - right)


def int64_multiply(left: int, right: int) -> int:
    """Wrapping multiplication."""
    return wrap_int64(left * right)


def int64_negate(value: int) -> int:
    """Wrapping negation (-INT64_MIN is INT64_MIN)."""
    return wrap_int64(-value)


def int64_divide(dividend: int, divisor: int) -> int:
    """Divide, truncating toward zero.

    INT64_MIN / -1 wraps to INT64_MIN.

    Raises:
        ZeroDivisionError: If divisor is zero. Callers are expected to
            check for zero first and report it as a parse error.
    """
    if divisor == 0:
        msg = "int64 division by zero"
        raise ZeroDivisionError(msg)
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return wrap_int64(quotient)


def int64_power(base: int, exponent: int) -> int:
    """Raise base to exponent with integer semantics.

    Policy:
        - exponent == 0: 1, including 0^0
        - exponent < 0, base != 0: 0 (the fractional result truncates)
        - exponent > 0: base multiplied by itself exponent times, wrapping

    Modular exponentiation gives the same value as repeated wrapped
    multiplication without looping exponent times.

    Raises:
        ZeroDivisionError: If base is zero and exponent is negative.
            Callers are expected to check first and report it as a
            parse error.

    Example:
        >>> int64_power(2, 10)
        1024
        >>> int64_power(2, -1)
        0
        >>> int64_power(2, 64)
        0
    """
    if exponent == 0:
        return 1
    if exponent < 0:
        if base == 0:
            msg = "zero cannot be raised to a negative power"
            raise ZeroDivisionError(msg)
        return 0
    return wrap_int64(pow(base, exponent, _MODULUS))
