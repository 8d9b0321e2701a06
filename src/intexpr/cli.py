"""Command-line interface.

Evaluates each expression argument independently and prints one result per
line. The first failure prints its diagnostic and stops processing.

Options come before the expressions. Everything from the first expression
on is treated as an expression, so "-2^4" or "-(3)" need no quoting beyond
the shell's.

Usage:
    intexpr "1 + 2*3" "(1+2)*3"
    intexpr --format rust "5/0"
    intexpr --locale de_DE "2^40"
    intexpr "-2^4" "-(1+2)"

Exit Codes:
    0   Every expression evaluated (including no expressions at all)
    1   An expression failed to parse or evaluate
    2   Invalid options (unknown locale, Babel missing, bad limits)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Sequence

from intexpr import __version__
from intexpr.constants import MAX_DEPTH, MAX_POWER_DEPTH
from intexpr.core.babel_compat import BabelImportError
from intexpr.diagnostics import OutputFormat
from intexpr.formatting import format_value
from intexpr.syntax import ExpressionParser

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EXPRESSION_ERROR = 1
EXIT_USAGE_ERROR = 2

# Options that take a separate value argument.
_VALUE_OPTIONS = frozenset({"--format", "--locale", "--max-depth", "--max-power-depth"})

# "-v", "--format", "--max-depth=3". Expressions such as "-2", "-(1)" and
# "--5" never match.
_OPTION_PATTERN = re.compile(r"--?[A-Za-z]")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="intexpr",
        description="Evaluate integer arithmetic expressions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Evaluate several expressions, one result per line:
  intexpr "1 + 5 * (8-(3+5*(10+20))) - 2^5^2" "2^3^2"

  # Machine-readable diagnostics:
  intexpr --format json "(1+2"

  # Leading signs are fine; options must come first:
  intexpr --format simple "-2^4" "-(1+2)"
""",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        metavar="EXPRESSION",
        help="Expression to evaluate",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.CARET.value,
        help="Diagnostic output format (default: caret)",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Highlight diagnostics with ANSI colors (caret and rust formats)",
    )
    parser.add_argument(
        "--locale",
        default=None,
        help="Format results for a locale, e.g. de_DE (requires Babel)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Maximum parenthesis nesting depth (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--max-power-depth",
        type=int,
        default=MAX_POWER_DEPTH,
        help=f"Maximum length of a '^' chain (default: {MAX_POWER_DEPTH})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _separate_expressions(argv: Sequence[str]) -> list[str]:
    """Insert "--" before the first expression argument.

    argparse reads "-2^4" as an unknown option. Ending option parsing at the
    first argument that is not an option (or an option's value) lets such
    expressions through unchanged.
    """
    args = list(argv)
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "--":
            return args
        if not _OPTION_PATTERN.match(arg):
            return [*args[:index], "--", *args[index:]]
        if arg in _VALUE_OPTIONS:
            index += 1
        index += 1
    return args


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(_separate_expressions(argv))
    _configure_logging(args.verbose)

    try:
        parser = ExpressionParser(
            max_nesting_depth=args.max_depth,
            max_power_depth=args.max_power_depth,
        )
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    # Fail on a bad locale before printing anything.
    if args.locale is not None:
        try:
            format_value(0, args.locale)
        except (BabelImportError, ValueError) as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return EXIT_USAGE_ERROR

    output_format = OutputFormat(args.format)
    for expression in args.expressions:
        try:
            result = parser.parse(expression)
        except ValueError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return EXIT_USAGE_ERROR

        if result.value is None:
            print(result.render(output_format, color=args.color))
            logger.debug("Stopping after failed expression %r", expression)
            return EXIT_EXPRESSION_ERROR

        if args.locale is not None:
            print(format_value(result.value, args.locale))
        else:
            print(result.value)

    return EXIT_OK
