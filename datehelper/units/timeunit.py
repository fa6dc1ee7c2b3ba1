"""TimeUnit enumeration for difference units.

This module provides the TimeUnit enum used by the difference engine to
convert a millisecond delta into whole units.
"""

from __future__ import annotations

from enum import Enum

from datehelper._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)


class TimeUnit(Enum):
    """Fixed-length time units.

    Every unit has an exact length in milliseconds. A day is always
    86_400_000 ms here: differences are measured on the absolute time
    line, not in calendar days.

    Examples:
        >>> TimeUnit.HOUR.to_millis()
        3600000

        >>> TimeUnit.MINUTE.truncate(-119_999)
        -1
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"

    def to_millis(self) -> int:
        """Return the length of one unit in milliseconds.

        Examples:
            >>> TimeUnit.DAY.to_millis()
            86400000
        """
        conversions: dict[TimeUnit, int] = {
            TimeUnit.MILLISECOND: 1,
            TimeUnit.SECOND: MILLIS_PER_SECOND,
            TimeUnit.MINUTE: MILLIS_PER_MINUTE,
            TimeUnit.HOUR: MILLIS_PER_HOUR,
            TimeUnit.DAY: MILLIS_PER_DAY,
        }
        return conversions[self]

    def truncate(self, millis: int) -> int:
        """Convert a millisecond delta to whole units, truncating toward zero.

        Python's ``//`` floors toward negative infinity, so the magnitude
        is divided and the sign reapplied.

        Examples:
            >>> TimeUnit.DAY.truncate(86_399_999)
            0
            >>> TimeUnit.DAY.truncate(-1)
            0
            >>> TimeUnit.HOUR.truncate(-7_200_000)
            -2
        """
        whole = abs(millis) // self.to_millis()
        return -whole if millis < 0 else whole


__all__ = ["TimeUnit"]
