"""Gregorian calendar arithmetic used when validating parsed dates.

This module is not part of the public API.
"""

from __future__ import annotations

from datehelper._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """True for Gregorian leap years (every 4th, except centuries not divisible by 400).

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    if year % 400 == 0:
        return True
    return year % 4 == 0 and year % 100 != 0


def days_in_month(year: int, month: int) -> int:
    """Length of ``month`` in ``year``.

    Raises:
        ValueError: If month is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return DAYS_IN_MONTH[month] + (month == 2 and is_leap_year(year))


def resolve_two_digit_year(two_digit: int, current_year: int, window: int) -> int:
    """Place a two-digit year in the 100-year window around current_year.

    The window starts ``window`` years before ``current_year`` and spans
    100 years, so with the default of 80 a two-digit year lands between
    80 years in the past and 20 years in the future.

    Args:
        two_digit: Year value 0-99 as written in the text.
        current_year: The reference year (from the clock).
        window: Years before current_year where the window starts.

    Returns:
        The full year.

    Examples:
        >>> resolve_two_digit_year(24, 2025, 80)
        2024
        >>> resolve_two_digit_year(50, 2025, 80)
        1950
        >>> resolve_two_digit_year(44, 2025, 80)
        2044
    """
    start = current_year - window
    year = start - start % 100 + two_digit
    if year < start:
        year += 100
    return year


__all__ = [
    "is_leap_year",
    "days_in_month",
    "resolve_two_digit_year",
]
