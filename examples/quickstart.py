"""Quickstart example for intexpr.

This example demonstrates evaluating integer expressions, inspecting
failures, and rendering diagnostics in the available output formats.

Note: Example 5 needs Babel (pip install intexpr[babel]).
"""

from intexpr import (
    DivisionByZeroError,
    ExpressionParser,
    OutputFormat,
    evaluate,
    parse_expression,
    render_error,
)

# Example 1: Simple evaluation
print("=" * 50)
print("Example 1: Simple Evaluation")
print("=" * 50)

print(evaluate("1 + 5 * (8-(3+5*(10+20))) - 2^5^2"))
# Output: -33555156

print(evaluate("2^3^2"))
# Output: 512 (right-associative)

print(evaluate("-2^4"))
# Output: 16 (prefix minus binds tighter than ^)

# Example 2: Signed 64-bit results
print("\n" + "=" * 50)
print("Example 2: Signed 64-bit Results")
print("=" * 50)

print(evaluate("9223372036854775807 + 1"))
# Output: -9223372036854775808 (wraps)

print(evaluate("99999999999999999999"))
# Output: 9223372036854775807 (literals saturate)

print(evaluate("-7 / 2"))
# Output: -3 (division truncates toward zero)

# Example 3: Inspecting failures without exceptions
print("\n" + "=" * 50)
print("Example 3: Caret Diagnostics")
print("=" * 50)

for source in ["3 4", "(1+2", "5/0"]:
    result = parse_expression(source)
    print(f"{result.error} at {result.position}")
    print(render_error(result))
    print()
# Output:
# syntax at 2
# 3 4
#   ^
# Syntax error
# ...

# Example 4: Strict API and other output formats
print("=" * 50)
print("Example 4: Exceptions and Output Formats")
print("=" * 50)

try:
    evaluate("1 / (2-2)")
except DivisionByZeroError as e:
    print(f"Caught at position {e.position}")
# Output: Caught at position 9

result = parse_expression("2*(3+4")
print(result.render(OutputFormat.RUST))
print(result.render(OutputFormat.JSON))

# Example 5: Limits and locale formatting
print("\n" + "=" * 50)
print("Example 5: Limits and Locale Formatting")
print("=" * 50)

parser = ExpressionParser(max_nesting_depth=3)
print(parser.parse("((((1))))").render())
# Output:
# ((((1))))
#    ^
# Nesting too deep

try:
    from intexpr.formatting import format_value

    print(format_value(evaluate("2^40"), "de_DE"))
    # Output: 1.099.511.627.776
except ImportError:
    print("Babel not installed: pip install intexpr[babel]")
