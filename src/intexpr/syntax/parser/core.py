"""Expression parser driver.

This module provides the ExpressionParser class that runs the precedence
tiers of :mod:`intexpr.syntax.parser.rules` over one input string and turns
the final parse state into an :class:`~intexpr.diagnostics.EvaluationResult`.

Architecture:
    The driver creates one :class:`~intexpr.syntax.parser.state.ParseState`
    per call, invokes the lowest-precedence tier once, then requires that
    only whitespace remains. Nothing is shared between calls, so one parser
    instance may be used from several threads.

Security:
    Includes a configurable input size limit and a nesting depth limit so
    that hostile input can neither allocate unbounded memory nor exhaust the
    interpreter stack.

See Also:
    - :mod:`intexpr.syntax.parser.rules` - The precedence tiers
    - :mod:`intexpr.syntax.parser.state` - Shared cursor and error state
"""

import logging

from intexpr.constants import (
    FRAMES_PER_DEPTH_LEVEL,
    MAX_DEPTH,
    MAX_POWER_DEPTH,
    MAX_SOURCE_SIZE,
    RESERVED_FRAMES,
)
from intexpr.core.depth_guard import depth_clamp
from intexpr.diagnostics import EvaluationResult
from intexpr.enums import ParseErrorKind
from intexpr.syntax.parser.rules import parse_add_subtract
from intexpr.syntax.parser.state import ParseState

__all__ = ["ExpressionParser"]

logger = logging.getLogger(__name__)


class ExpressionParser:
    """Single-pass integer expression parser and evaluator.

    Design:
    - One function per precedence tier, no tokens and no AST
    - Fail-fast: the first error stops all further consumption
    - Errors carry the exact character offset where they were detected

    Security:
    - Configurable max_source_size prevents DoS via huge inputs
    - Configurable max_nesting_depth prevents RecursionError via "((((...))))"
    - Configurable max_power_depth does the same for long "^" chains

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
        max_nesting_depth: Maximum parenthesis nesting depth (default: 100)
        max_power_depth: Maximum "^" chain length (default: 300)

    Example:
        >>> parser = ExpressionParser()
        >>> parser.parse("1 + 5 * (8-(3+5*(10+20))) - 2^5^2").value
        -33555156
        >>> result = parser.parse("3 4")
        >>> result.error, result.position
        (<ParseErrorKind.SYNTAX: 'syntax'>, 2)
    """

    __slots__ = ("_max_nesting_depth", "_max_power_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
        max_power_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the size limit (not recommended).
            max_nesting_depth: Maximum parenthesis depth (default: 100). Clamped
                              against the interpreter recursion limit.
            max_power_depth: Maximum "^" chain length (default: 300). Clamped
                            against the frames left after max_nesting_depth.

        Raises:
            ValueError: If a limit is negative, or a depth limit is zero
        """
        if max_source_size is not None and max_source_size < 0:
            msg = f"max_source_size must be >= 0, got {max_source_size}"
            raise ValueError(msg)
        if max_nesting_depth is not None and max_nesting_depth < 1:
            msg = f"max_nesting_depth must be >= 1, got {max_nesting_depth}"
            raise ValueError(msg)
        if max_power_depth is not None and max_power_depth < 1:
            msg = f"max_power_depth must be >= 1, got {max_power_depth}"
            raise ValueError(msg)

        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )
        # Each "^" costs one frame on top of the frames parentheses may use.
        self._max_power_depth = depth_clamp(
            max_power_depth if max_power_depth is not None else MAX_POWER_DEPTH,
            reserve_frames=RESERVED_FRAMES
            + FRAMES_PER_DEPTH_LEVEL * self._max_nesting_depth,
            frames_per_level=1,
            label="max_power_depth",
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed nesting depth (after clamping)."""
        return self._max_nesting_depth

    @property
    def max_power_depth(self) -> int:
        """Maximum allowed "^" chain length (after clamping)."""
        return self._max_power_depth

    def parse(self, source: str) -> EvaluationResult:
        """Parse and evaluate one expression.

        Args:
            source: Expression text

        Returns:
            EvaluationResult with the value, or with the first error and its
            character offset

        Raises:
            TypeError: If source is not a str
            ValueError: If source exceeds max_source_size (DoS prevention)
        """
        if not isinstance(source, str):
            msg = f"source must be str, not {type(source).__name__}"
            raise TypeError(msg)
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in ExpressionParser constructor to increase limit."
            )
            raise ValueError(msg)

        state = ParseState.for_source(
            source,
            max_depth=self._max_nesting_depth,
            max_power_depth=self._max_power_depth,
        )
        value = parse_add_subtract(state)

        # Anything other than whitespace after a complete expression is
        # invalid syntax at the outermost level.
        if not state.failed:
            state.skip_whitespace()
            if not state.cursor.is_eof:
                state.fail(ParseErrorKind.SYNTAX)

        if state.error is not None and state.error_position is not None:
            logger.debug(
                "Expression %r failed: %s at %d",
                source,
                state.error,
                state.error_position,
            )
            return EvaluationResult.failure(
                source,
                state.error,
                state.error_position,
                max_depth=state.exceeded_limit,
            )

        logger.debug("Expression %r evaluated to %d", source, value)
        return EvaluationResult.success(source, value)
