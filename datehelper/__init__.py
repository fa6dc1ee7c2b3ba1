"""DateHelper: date/time parsing, formatting and differences over named layouts.

Timestamps are integer milliseconds since 1970-01-01 00:00:00 UTC. Text is
parsed and rendered under named layouts (D_YYYYMMDD, S_DDMMYYYYHHMMSSA, ...)
in the zone, locale and clock carried by a HelperOptions.

Core Types:
    Layout: The catalog of named patterns
    Converter: Strict and best-effort parsing, formatting
    DeltaCalculator: Days/hours/minutes between two texts
    RelativeFormatter: "04:00 PM" today, "14 Apr 04:00 PM" otherwise
    DateHelper: Facade over all of the above

Configuration:
    HelperOptions: Zone, locale, clock and two-digit-year window
    LocaleSymbols: Month/weekday names and AM/PM markers
    TimeUnit: Fixed-length units (DAY, HOUR, MINUTE, ...)

Module Functions:
    parse_date, parse_any_date, get_desired_format, get_date_from_days,
    get_days_between_two_date, get_hours_between_two_date,
    get_minutes_between_two_dates, get_today, get_tomorrow,
    get_today_with_time, get_date_only, get_date_and_time, get_time_only,
    prettify_date

Exceptions:
    DateHelperError: Base exception
    LayoutRequiredError: A layout argument was missing
    ParseError: Text did not match a layout
    ValidationError: A parsed component was out of range
    TimezoneError: Unknown zone
    LocaleError: Unknown or malformed locale

Example:
    >>> from datehelper import DateHelper, HelperOptions, Layout
    >>> helper = DateHelper(HelperOptions())
    >>> helper.parse_date("2024-04-14", Layout.D_YYYYMMDD)
    1713052800000
    >>> helper.get_desired_format(Layout.S_DDMMYY, 1713052800000)
    '14/04/24'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datehelper.arithmetic.delta import DeltaCalculator
from datehelper.convert.converter import PARSE_FAILED, Converter, ParseResult
from datehelper.helper import DateHelper, default_helper
from datehelper.layouts import CATALOG_ORDER, Layout, iter_layouts
from datehelper.relative import RelativeFormatter

# Configuration
from datehelper.config import HelperOptions, system_clock
from datehelper.units.locale import LocaleSymbols, get_locale
from datehelper.units.timeunit import TimeUnit
from datehelper.units.timezone import resolve_timezone

# Exceptions
from datehelper.errors import (
    DateHelperError,
    LayoutRequiredError,
    LocaleError,
    ParseError,
    TimezoneError,
    ValidationError,
)

# Module functions
from datehelper.helper import (
    get_date_and_time,
    get_date_from_days,
    get_date_only,
    get_days_between_two_date,
    get_desired_format,
    get_hours_between_two_date,
    get_minutes_between_two_dates,
    get_time_only,
    get_today,
    get_today_with_time,
    get_tomorrow,
    parse_any_date,
    parse_date,
    prettify_date,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Layout",
    "CATALOG_ORDER",
    "iter_layouts",
    "Converter",
    "ParseResult",
    "PARSE_FAILED",
    "DeltaCalculator",
    "RelativeFormatter",
    "DateHelper",
    "default_helper",
    # Configuration
    "HelperOptions",
    "system_clock",
    "LocaleSymbols",
    "get_locale",
    "TimeUnit",
    "resolve_timezone",
    # Exceptions
    "DateHelperError",
    "LayoutRequiredError",
    "ParseError",
    "ValidationError",
    "TimezoneError",
    "LocaleError",
    # Module functions
    "parse_date",
    "parse_any_date",
    "get_desired_format",
    "get_date_from_days",
    "get_days_between_two_date",
    "get_hours_between_two_date",
    "get_minutes_between_two_dates",
    "get_today",
    "get_tomorrow",
    "get_today_with_time",
    "get_date_only",
    "get_date_and_time",
    "get_time_only",
    "prettify_date",
]
