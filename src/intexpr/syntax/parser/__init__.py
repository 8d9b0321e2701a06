"""Integer expression parser module.

This module provides the main ExpressionParser class and the precedence
tiers it drives, organized into focused submodules.

Module Organization:
- core.py: ExpressionParser driver (size/depth limits, end-of-input check)
- rules.py: The six precedence tiers (add/subtract down to literal)
- state.py: ParseState shared by reference through the tiers
- primitives.py: Integer literal scanner
- whitespace.py: Whitespace skipping

Public API:
    ExpressionParser: Main parser class
    ParseState: Parse state for driving individual tiers (advanced usage)
"""

from intexpr.syntax.parser.core import ExpressionParser
from intexpr.syntax.parser.state import ParseState

__all__ = ["ExpressionParser", "ParseState"]
