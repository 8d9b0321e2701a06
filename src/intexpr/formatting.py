"""Locale-aware rendering of evaluated values.

Requires the optional Babel dependency (``pip install intexpr[babel]``).
Values are always integers, so only grouping separators and digit shapes
vary between locales.

Python 3.13+.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from intexpr.core.babel_compat import (
    get_babel_numbers,
    get_locale_class,
    get_unknown_locale_error,
)

__all__ = ["format_value", "normalize_locale"]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Normalize a locale code to Babel's underscore form.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
    """
    return locale_code.strip().replace("-", "_")


@lru_cache(maxsize=64)
def _validated_locale(locale_code: str) -> str:
    """Parse a locale code once, raising ValueError for unknown locales."""
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        locale = locale_class.parse(locale_code)
    except (unknown_locale_error, ValueError) as e:
        msg = f"Unknown locale '{locale_code}': {e}"
        raise ValueError(msg) from e
    logger.debug("Resolved locale %s to %s", locale_code, locale)
    return str(locale)


def format_value(value: int, locale_code: str) -> str:
    """Format an evaluated value with CLDR grouping for a locale.

    Args:
        value: Evaluated integer
        locale_code: Locale identifier ("en_US", "de-DE", ...)

    Returns:
        Locale-formatted decimal string

    Raises:
        BabelImportError: If Babel is not installed
        ValueError: If the locale is unknown

    Example:
        >>> format_value(-33555156, "en_US")
        '-33,555,156'
        >>> format_value(1234567, "de_DE")
        '1.234.567'
    """
    locale = _validated_locale(normalize_locale(locale_code))
    return get_babel_numbers().format_decimal(value, locale=locale)
