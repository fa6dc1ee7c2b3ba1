"""The DateHelper facade and its module-level shortcuts.

DateHelper bundles a Converter, a DeltaCalculator and a RelativeFormatter
built from one HelperOptions and exposes the whole call surface:

Parsing:
    parse_date: text under a layout -> timestamp (0 on bad text)
    parse_any_date: text under the first matching layout -> timestamp (0 if none)

Formatting:
    get_desired_format: timestamp (default now) under a layout -> text
    get_date_from_days: now + n days as "dd-MMM-yy"

Differences:
    get_days_between_two_date / get_hours_between_two_date /
    get_minutes_between_two_dates: old - new in whole units, None on bad text

Convenience:
    get_today, get_tomorrow, get_today_with_time, get_date_only,
    get_date_and_time, get_time_only, prettify_date

The module-level functions of the same names call a default helper built
lazily from HelperOptions.from_environment().

Examples:
    >>> from datehelper import DateHelper, HelperOptions, Layout
    >>> helper = DateHelper(HelperOptions(clock=lambda: 1744819200000))
    >>> helper.get_today()
    '16/04/2025'
    >>> helper.get_days_between_two_date("2025-04-10", "2025-04-14", Layout.D_YYYYMMDD)
    -4
"""

from __future__ import annotations

import functools
from datetime import timedelta
from typing import overload

from datehelper.arithmetic.delta import DeltaCalculator
from datehelper.config import HelperOptions
from datehelper.convert.converter import PARSE_FAILED, Converter
from datehelper.convert.epoch import from_epoch_millis, to_epoch_millis
from datehelper.errors import ParseError, ValidationError
from datehelper.layouts import Layout
from datehelper.relative import RelativeFormatter, SameDayCheck

DATE_ONLY_PATTERN = "dd/MM/yyyy"
DATE_AND_TIME_PATTERN = "dd/MM/yyyy, hh:mm a"
TIME_ONLY_PATTERN = "hh:mm a"
TODAY_WITH_TIME_PATTERN = "dd/MM/yyyy HH:mm:ss"
DATE_FROM_DAYS_LAYOUT = Layout.D_DDMMYY_N


class DateHelper:
    """Parsing, formatting and differences under one configuration."""

    def __init__(
        self,
        options: HelperOptions | None = None,
        *,
        is_same_calendar_day: SameDayCheck | None = None,
    ) -> None:
        self.converter = Converter(options)
        self.delta = DeltaCalculator(self.converter)
        self.relative = RelativeFormatter(self.converter, is_same_calendar_day)

    @property
    def options(self) -> HelperOptions:
        return self.converter.options

    def __repr__(self) -> str:
        return f"DateHelper({self.converter!r})"

    # Parsing

    def parse_date(self, text: str | None, layout: Layout | None) -> int:
        return self.converter.parse_date(text, layout)

    def parse_any_date(self, text: str | None) -> int:
        return self.converter.parse_any_date(text)

    # Formatting

    def get_desired_format(self, layout: Layout | None, timestamp: int | None = None) -> str:
        return self.converter.format(layout, timestamp)

    def get_date_from_days(self, days: int) -> str:
        """Format now + ``days`` calendar days as "dd-MMM-yy"."""
        return self.converter.format(DATE_FROM_DAYS_LAYOUT, self._shift_days(days))

    def _shift_days(self, days: int) -> int:
        """Move the clock's now by whole calendar days, keeping the wall time.

        Raises:
            ValidationError: If the result falls outside years 1-9999.
        """
        opts = self.options
        local = from_epoch_millis(opts.now(), opts.timezone)
        try:
            wall = local.replace(tzinfo=None) + timedelta(days=days)
        except OverflowError as e:
            raise ValidationError(f"{days} days from now is outside years 1-9999") from e
        return to_epoch_millis(wall.replace(tzinfo=opts.timezone))

    # Differences

    def get_days_between_two_date(
        self, old: str | None, new: str | None, layout: Layout | None
    ) -> int | None:
        return self.delta.days_between(old, new, layout)

    def get_hours_between_two_date(
        self, old: str | None, new: str | None, layout: Layout | None
    ) -> int | None:
        return self.delta.hours_between(old, new, layout)

    def get_minutes_between_two_dates(
        self, old: str | None, new: str | None, layout: Layout | None
    ) -> int | None:
        return self.delta.minutes_between(old, new, layout)

    # Convenience

    def get_today(self) -> str:
        """Today as "dd/MM/yyyy"."""
        return self.converter.format_pattern(DATE_ONLY_PATTERN)

    def get_tomorrow(self) -> str:
        """Tomorrow as "dd/MM/yyyy"."""
        return self.converter.format_pattern(DATE_ONLY_PATTERN, self._shift_days(1))

    def get_today_with_time(self) -> str:
        """Now as "dd/MM/yyyy HH:mm:ss"."""
        return self.converter.format_pattern(TODAY_WITH_TIME_PATTERN)

    @overload
    def get_date_only(self, value: int) -> str: ...

    @overload
    def get_date_only(self, value: str | None) -> int: ...

    def get_date_only(self, value: int | str | None) -> str | int:
        """Format a timestamp as "dd/MM/yyyy", or parse such text (0 on failure)."""
        if isinstance(value, int):
            return self.converter.format_pattern(DATE_ONLY_PATTERN, value)
        return self._parse_or_zero(value, DATE_ONLY_PATTERN)

    @overload
    def get_date_and_time(self, value: int) -> str: ...

    @overload
    def get_date_and_time(self, value: str | None) -> int: ...

    def get_date_and_time(self, value: int | str | None) -> str | int:
        """Format a timestamp as "dd/MM/yyyy, hh:mm a", or parse such text (0 on failure)."""
        if isinstance(value, int):
            return self.converter.format_pattern(DATE_AND_TIME_PATTERN, value)
        return self._parse_or_zero(value, DATE_AND_TIME_PATTERN)

    def get_time_only(self, timestamp: int) -> str:
        """Format a timestamp as "hh:mm a"."""
        return self.converter.format_pattern(TIME_ONLY_PATTERN, timestamp)

    def prettify_date(self, value: int | str) -> str:
        """Relative rendering; text must be a decimal timestamp (ValueError otherwise)."""
        if isinstance(value, str):
            return self.relative.prettify_text(value)
        return self.relative.prettify(value)

    def _parse_or_zero(self, text: str | None, pattern: str) -> int:
        try:
            return self.converter.parse_pattern(text, pattern)
        except (ParseError, ValidationError):
            return PARSE_FAILED


@functools.lru_cache(maxsize=None)
def default_helper() -> DateHelper:
    """The helper behind the module-level functions, built on first use."""
    return DateHelper(HelperOptions.from_environment())


def parse_date(text: str | None, layout: Layout | None) -> int:
    return default_helper().parse_date(text, layout)


def parse_any_date(text: str | None) -> int:
    return default_helper().parse_any_date(text)


def get_desired_format(layout: Layout | None, timestamp: int | None = None) -> str:
    return default_helper().get_desired_format(layout, timestamp)


def get_date_from_days(days: int) -> str:
    return default_helper().get_date_from_days(days)


def get_days_between_two_date(old: str | None, new: str | None, layout: Layout | None) -> int | None:
    return default_helper().get_days_between_two_date(old, new, layout)


def get_hours_between_two_date(old: str | None, new: str | None, layout: Layout | None) -> int | None:
    return default_helper().get_hours_between_two_date(old, new, layout)


def get_minutes_between_two_dates(old: str | None, new: str | None, layout: Layout | None) -> int | None:
    return default_helper().get_minutes_between_two_dates(old, new, layout)


def get_today() -> str:
    return default_helper().get_today()


def get_tomorrow() -> str:
    return default_helper().get_tomorrow()


def get_today_with_time() -> str:
    return default_helper().get_today_with_time()


def get_date_only(value: int | str | None) -> str | int:
    return default_helper().get_date_only(value)


def get_date_and_time(value: int | str | None) -> str | int:
    return default_helper().get_date_and_time(value)


def get_time_only(timestamp: int) -> str:
    return default_helper().get_time_only(timestamp)


def prettify_date(value: int | str) -> str:
    return default_helper().prettify_date(value)


__all__ = [
    "DateHelper",
    "default_helper",
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
