"""Internal constants for datehelper.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND  # 60_000
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE  # 3_600_000
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

# Year limits (what datetime can represent)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Components used when a pattern has no field for them
DEFAULT_YEAR: int = 1970
DEFAULT_MONTH: int = 1
DEFAULT_DAY: int = 1

# Two-digit years land in the 100-year window that starts this many
# years before the current year.
TWO_DIGIT_YEAR_WINDOW: int = 80


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DEFAULT_YEAR",
    "DEFAULT_MONTH",
    "DEFAULT_DAY",
    "TWO_DIGIT_YEAR_WINDOW",
]
