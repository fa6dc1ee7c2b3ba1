"""Validation utilities for datehelper.

This module provides the layout contract check and range checks for
parsed calendar components.

This module is not part of the public API.
"""

from __future__ import annotations

from datehelper._internal.calendar import days_in_month
from datehelper._internal.constants import MAX_YEAR, MIN_YEAR
from datehelper.errors import LayoutRequiredError, ValidationError
from datehelper.layouts import Layout


def require_layout(layout: Layout | None) -> Layout:
    """Check the caller passed a layout.

    Args:
        layout: The layout argument as received.

    Returns:
        The same layout.

    Raises:
        LayoutRequiredError: If layout is None.
        TypeError: If layout is not a Layout member.
    """
    if layout is None:
        raise LayoutRequiredError("layout must not be None")
    if not isinstance(layout, Layout):
        raise TypeError(f"layout must be a Layout, got {type(layout).__name__}")
    return layout


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that a component is within [min_val, max_val].

    Raises:
        ValidationError: If value is out of range.
    """
    if value < min_val or value > max_val:
        raise ValidationError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )


def validate_year(year: int) -> None:
    """Reject years a datetime cannot hold (MIN_YEAR-MAX_YEAR)."""
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Reject days past the end of the month, e.g. 2023-02-29 or 2024-04-31.

    Raises:
        ValidationError: With the month's real length in the message.
    """
    last = days_in_month(year, month)
    if not 1 <= day <= last:
        raise ValidationError(
            f"day must be between 1 and {last} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "require_layout",
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
]
