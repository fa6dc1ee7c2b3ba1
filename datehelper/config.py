"""Converter configuration.

The zone, locale and clock used for parsing and formatting are passed in
explicitly through HelperOptions rather than read from process globals,
so converters configured differently can run side by side.

Environment variables read by HelperOptions.from_environment():
    DATEHELPER_TZ: Zone name (falls back to TZ, then the host zone).
    DATEHELPER_LOCALE: Locale code (falls back to LANG, then "en").
"""

from __future__ import annotations

import datetime as _datetime
import os
import time
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Callable

from datehelper._internal.constants import TWO_DIGIT_YEAR_WINDOW
from datehelper.errors import LocaleError
from datehelper.units.locale import ENGLISH, LocaleSymbols, get_locale
from datehelper.units.timezone import local_timezone, resolve_timezone


def system_clock() -> int:
    """Return the current time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class HelperOptions:
    """Configuration for parsing and formatting.

    Attributes:
        timezone: Zone in which wall-clock text is interpreted and rendered.
        locale: Symbol table for month/weekday names and AM/PM markers.
        clock: Zero-argument callable returning "now" in epoch milliseconds.
        two_digit_year_window: Two-digit years land in the 100-year window
            starting this many years before the clock's current year.

    Examples:
        >>> opts = HelperOptions(timezone=resolve_timezone("Europe/Paris"))
        >>> opts.locale.code
        'en'

        >>> frozen = HelperOptions(clock=lambda: 0)
        >>> frozen.now()
        0
    """

    timezone: tzinfo = _datetime.timezone.utc
    locale: LocaleSymbols = ENGLISH
    clock: Callable[[], int] = field(default=system_clock, compare=False)
    two_digit_year_window: int = TWO_DIGIT_YEAR_WINDOW

    def now(self) -> int:
        """Return the clock's current epoch milliseconds."""
        return self.clock()

    @classmethod
    def from_environment(cls, environ: dict[str, str] | None = None) -> HelperOptions:
        """Build options from environment variables and the host zone.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            Options for the host's zone and the configured locale.

        Raises:
            TimezoneError: If DATEHELPER_TZ names an unknown zone.
            LocaleError: If DATEHELPER_LOCALE names an unknown locale.
        """
        env = os.environ if environ is None else environ

        tz_name = env.get("DATEHELPER_TZ")
        zone = resolve_timezone(tz_name) if tz_name else local_timezone()

        locale_code = env.get("DATEHELPER_LOCALE")
        if locale_code:
            locale = get_locale(locale_code)
        else:
            locale = _locale_from_lang(env.get("LANG", ""))

        return cls(timezone=zone, locale=locale)


def _locale_from_lang(lang: str) -> LocaleSymbols:
    """Pick a locale from a POSIX LANG value, defaulting to English."""
    if not lang or lang in ("C", "POSIX") or lang.startswith("C."):
        return ENGLISH
    try:
        return get_locale(lang)
    except LocaleError:
        return ENGLISH


__all__ = ["HelperOptions", "system_clock"]
