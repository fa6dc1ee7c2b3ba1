"""Datehelper exception hierarchy.

All datehelper-specific exceptions inherit from DateHelperError.

Two failure classes are kept apart:
    - LayoutRequiredError signals a caller bug (no layout given) and is
      never absorbed by the library.
    - ParseError / ValidationError signal bad input text. The legacy
      entry points turn them into the zero sentinel or None.
"""

from __future__ import annotations


class DateHelperError(Exception):
    """Base exception for all datehelper errors."""

    pass


class LayoutRequiredError(DateHelperError, TypeError):
    """A layout was required but None was given.

    This is a programming error, not a data problem. It propagates out of
    every entry point, including the ones that otherwise report failures
    through a sentinel value.
    """

    pass


class ParseError(DateHelperError):
    """Failed to parse string representation.

    Raised when text cannot be read under a layout.

    Examples:
        - Text is None or empty
        - Text matches a different layout
        - Trailing characters after the last field
    """

    pass


class ValidationError(DateHelperError):
    """Invalid component values.

    Raised when text has the right shape but a component is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour 13 under a 12-hour field
        - Wall time skipped by a daylight-saving transition
    """

    pass


class TimezoneError(DateHelperError):
    """Invalid or unknown timezone.

    Raised when a configured zone name cannot be resolved.
    """

    pass


class LocaleError(DateHelperError):
    """Unknown locale code.

    Raised when no symbol table is registered for a locale code.
    """

    pass


__all__ = [
    "DateHelperError",
    "LayoutRequiredError",
    "ParseError",
    "ValidationError",
    "TimezoneError",
    "LocaleError",
]
