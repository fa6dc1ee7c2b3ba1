"""Units, symbols and zones.

This module provides:
    - TimeUnit: Fixed-length units for differences (DAY, HOUR, MINUTE, ...)
    - LocaleSymbols: Month/weekday names and AM/PM markers per locale
    - resolve_timezone / local_timezone: Zone lookup
"""

from __future__ import annotations

from datehelper.units.locale import LocaleSymbols, get_locale
from datehelper.units.timeunit import TimeUnit
from datehelper.units.timezone import local_timezone, resolve_timezone

__all__: list[str] = [
    "LocaleSymbols",
    "TimeUnit",
    "get_locale",
    "local_timezone",
    "resolve_timezone",
]
