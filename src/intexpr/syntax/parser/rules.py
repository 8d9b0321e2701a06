"""Grammar rules for integer arithmetic expressions.

One function per precedence tier, ordered here from lowest to highest
binding strength. Each tier obtains its operands by calling the next
higher tier, so precedence is encoded purely by call order:

    parse_add_subtract   + -   left-to-right (accumulation loop)
    parse_mul_div        * /   left-to-right (accumulation loop)
    parse_exponent       ^     right-to-left (same-tier recursion)
    parse_unary_minus    prefix - and +
    parse_parentheses    ( ... ) re-enters parse_add_subtract
    parse_value          integer literal

Parsing and evaluation happen together in one left-to-right pass: no token
list, no AST, no operator stack.

Error propagation is fail-fast through the shared ParseState. A tier that
detects an error records it and returns 0; every caller checks
``state.failed`` right after each sub-call and returns immediately, without
applying its own operator to the operands it already holds.

Grammar notes:
    - Unary minus binds tighter than ``^``: "-2^4" is (-2)^4 = 16.
    - A run of prefix signs is consumed in one go ("--5", "2----5", "-+-5");
      the number of '-' signs decides the sign.
    - Parenthesis depth is bounded by ParseState.max_depth and ``^`` chain
      length by ParseState.max_power_depth; exceeding either records
      NESTING_TOO_DEEP.
"""

from intexpr.core.arithmetic import (
    int64_add,
    int64_divide,
    int64_multiply,
    int64_negate,
    int64_power,
    int64_subtract,
)
from intexpr.enums import Operator, ParseErrorKind
from intexpr.syntax.parser.primitives import scan_integer_literal
from intexpr.syntax.parser.state import ParseState

__all__ = [
    "parse_add_subtract",
    "parse_exponent",
    "parse_mul_div",
    "parse_parentheses",
    "parse_unary_minus",
    "parse_value",
]

_ADDITIVE: tuple[str, ...] = (Operator.ADD, Operator.SUBTRACT)
_MULTIPLICATIVE: tuple[str, ...] = (Operator.MULTIPLY, Operator.DIVIDE)
_PREFIX_SIGNS: tuple[str, ...] = ("-", "+")


def _next_operator(state: ParseState, operators: tuple[str, ...]) -> str | None:
    """Skip whitespace and return the next character if it is one of operators.

    Does not consume the operator.
    """
    state.skip_whitespace()
    cursor = state.cursor
    if cursor.is_eof or cursor.current not in operators:
        return None
    return cursor.current


# =============================================================================
# Binary operators
# =============================================================================


def parse_add_subtract(state: ParseState) -> int:
    """Parse binary + and - (lowest precedence, left-to-right).

    Entry point for the whole input and for every parenthesized
    sub-expression.

    Examples:
        "1-2+3" → (1-2)+3 = 2
        "1+2*3" → 1+(2*3) = 7
    """
    result = parse_mul_div(state)
    if state.failed:
        return 0

    # Operators of this tier may repeat: "1+2+3-4-5"
    while (op := _next_operator(state, _ADDITIVE)) is not None:
        state.advance()  # Skip operator
        right = parse_mul_div(state)
        if state.failed:
            return 0

        if op == Operator.ADD:
            result = int64_add(result, right)
        else:
            result = int64_subtract(result, right)

    return result


def parse_mul_div(state: ParseState) -> int:
    """Parse binary * and / (left-to-right), detecting division by zero.

    Division truncates toward zero.

    Examples:
        "8/2/2" → (8/2)/2 = 2
        "7/-2" → -3
        "5/0" → DIVISION_BY_ZERO
    """
    result = parse_exponent(state)
    if state.failed:
        return 0

    while (op := _next_operator(state, _MULTIPLICATIVE)) is not None:
        state.advance()  # Skip operator
        right = parse_exponent(state)
        if state.failed:
            return 0

        if op == Operator.MULTIPLY:
            result = int64_multiply(result, right)
        elif right == 0:
            state.fail(ParseErrorKind.DIVISION_BY_ZERO)
            return 0
        else:
            result = int64_divide(result, right)

    return result


def parse_exponent(state: ParseState) -> int:
    """Parse binary ^ (right-to-left).

    The right operand is parsed by calling this same tier rather than the
    next higher one, so "2^3^2" groups as 2^(3^2) = 512. The recursion is
    the loop; there is no while here.

    Evaluation:
        - exponent 0 → 1 (also for base 0)
        - negative exponent, base 0 → DIVISION_BY_ZERO
        - negative exponent otherwise → 0
        - positive exponent → repeated multiplication (wrapping)
    """
    base = parse_unary_minus(state)
    if state.failed:
        return 0

    if _next_operator(state, (Operator.POWER,)) is None:
        return base

    state.advance()  # Skip '^'
    if not state.enter_power():
        return 0
    exponent = parse_exponent(state)
    state.leave_power()
    if state.failed:
        return 0

    if exponent < 0 and base == 0:
        state.fail(ParseErrorKind.DIVISION_BY_ZERO)
        return 0
    return int64_power(base, exponent)


# =============================================================================
# Prefix operators and primaries
# =============================================================================


def parse_unary_minus(state: ParseState) -> int:
    """Parse a run of prefix signs followed by a parenthesized term or literal.

    Whitespace may separate the signs. An odd number of '-' negates.

    Examples:
        "-5" → -5
        "--5" → 5
        "- (2+3)" → -5
    """
    state.skip_whitespace()
    negate = False
    cursor = state.cursor
    while not cursor.is_eof and cursor.current in _PREFIX_SIGNS:
        if cursor.current == "-":
            negate = not negate
        state.advance()
        state.skip_whitespace()
        cursor = state.cursor

    value = parse_parentheses(state)
    if state.failed:
        return 0
    return int64_negate(value) if negate else value


def parse_parentheses(state: ParseState) -> int:
    """Parse "(" expression ")" or fall through to a literal.

    Inside the parentheses the lowest tier is re-entered, so any full
    expression may appear there.

    Errors:
        - missing ")" → UNCLOSED_PARENTHESIS at the offending position
        - nesting beyond max_depth → NESTING_TOO_DEEP at the "("
    """
    state.skip_whitespace()
    if not state.cursor.at("("):
        return parse_value(state)

    if not state.enter_nesting():
        return 0
    state.advance()  # Skip '('
    value = parse_add_subtract(state)
    state.leave_nesting()
    if state.failed:
        return 0

    state.skip_whitespace()
    if not state.cursor.at(")"):
        state.fail(ParseErrorKind.UNCLOSED_PARENTHESIS)
        return 0

    state.advance()  # Skip ')'
    return value


def parse_value(state: ParseState) -> int:
    """Parse an integer literal (highest precedence).

    Errors:
        - no literal at the cursor → SYNTAX at the cursor (after whitespace)
    """
    state.skip_whitespace()
    result = scan_integer_literal(state.cursor)
    if result is None:
        state.fail(ParseErrorKind.SYNTAX)
        return 0

    state.move_to(result.cursor)
    return result.value
