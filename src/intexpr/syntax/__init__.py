"""Expression syntax package.

Provides the cursor, the parse state and the recursive-descent parser.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .parser import ExpressionParser, ParseState

__all__ = [
    "Cursor",
    "ExpressionParser",
    "ParseResult",
    "ParseState",
]
