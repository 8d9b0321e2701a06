"""Enumerations for intexpr type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ParseErrorKind(StrEnum):
    """Cause of a failed parse.

    StrEnum provides automatic string conversion:
    str(ParseErrorKind.SYNTAX) == "syntax"
    """

    SYNTAX = "syntax"
    """Expected a literal but found none, or unconsumed trailing input: 3 4"""

    DIVISION_BY_ZERO = "division_by_zero"
    """Right operand of / is zero, or zero base with negative exponent: 0^-1"""

    UNCLOSED_PARENTHESIS = "unclosed_parenthesis"
    """Opening parenthesis never matched by a closing one: (1+2"""

    NESTING_TOO_DEEP = "nesting_too_deep"
    """Parenthesis or exponent nesting exceeded the configured depth limit."""


class Operator(StrEnum):
    """Binary operator characters, grouped by precedence tier.

    StrEnum provides automatic string conversion: str(Operator.ADD) == "+"
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"


__all__ = [
    "Operator",
    "ParseErrorKind",
]
