"""Relative ("prettified") rendering of timestamps.

A timestamp from today renders as a time only ("04:00 PM"); anything else
renders with day and month ("14 Apr 04:00 PM"). Whether a timestamp is
"today" is decided by an injectable ``is_same_calendar_day(t1, t2)``
capability, defaulting to a comparison of local calendar dates in the
converter's zone.
"""

from __future__ import annotations

import re
from datetime import tzinfo
from typing import Callable

from datehelper.convert.converter import Converter
from datehelper.convert.epoch import from_epoch_millis

SameDayCheck = Callable[[int, int], bool]

TODAY_PATTERN = "hh:mm a"
OTHER_DAY_PATTERN = "dd MMM hh:mm a"

_DECIMAL_TIMESTAMP = re.compile(r"-?[0-9]+")


def same_local_day(zone: tzinfo) -> SameDayCheck:
    """Build a same-calendar-day check for ``zone``.

    Examples:
        >>> import datetime as _datetime
        >>> check = same_local_day(_datetime.timezone.utc)
        >>> check(0, 86_399_999)
        True
        >>> check(0, 86_400_000)
        False
    """

    def is_same_calendar_day(first: int, second: int) -> bool:
        return (
            from_epoch_millis(first, zone).date()
            == from_epoch_millis(second, zone).date()
        )

    return is_same_calendar_day


class RelativeFormatter:
    """Renders timestamps relative to the converter's clock."""

    def __init__(
        self,
        converter: Converter | None = None,
        is_same_calendar_day: SameDayCheck | None = None,
    ) -> None:
        self._converter = converter if converter is not None else Converter()
        if is_same_calendar_day is None:
            is_same_calendar_day = same_local_day(self._converter.options.timezone)
        self._is_same_calendar_day = is_same_calendar_day

    def is_today(self, timestamp: int) -> bool:
        """True if ``timestamp`` falls on the clock's current day."""
        return self._is_same_calendar_day(timestamp, self._converter.options.now())

    def prettify(self, timestamp: int) -> str:
        """Render a timestamp as a time today, or day, month and time otherwise."""
        pattern = TODAY_PATTERN if self.is_today(timestamp) else OTHER_DAY_PATTERN
        return self._converter.format_pattern(pattern, timestamp)

    def prettify_text(self, text: str) -> str:
        """Prettify a timestamp written as decimal digits.

        Raises:
            ValueError: If text is not an optional minus sign followed by
                ASCII digits (no spaces, "+" or underscores).
        """
        if not _DECIMAL_TIMESTAMP.fullmatch(text):
            raise ValueError(f"not a decimal timestamp: {text!r}")
        return self.prettify(int(text))


__all__ = [
    "SameDayCheck",
    "TODAY_PATTERN",
    "OTHER_DAY_PATTERN",
    "same_local_day",
    "RelativeFormatter",
]
