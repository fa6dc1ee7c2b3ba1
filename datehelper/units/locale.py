"""Locale symbol tables for symbolic pattern fields.

Month names, weekday names and the AM/PM marker are the only
locale-dependent parts of a layout. They are kept in plain tables rather
than read from the host's C library locale, so rendering is identical on
every machine and can vary per converter.
"""

from __future__ import annotations

from dataclasses import dataclass

from datehelper.errors import LocaleError


@dataclass(frozen=True)
class LocaleSymbols:
    """Names used when formatting and parsing symbolic fields.

    Attributes:
        code: Locale code, e.g. "en".
        month_names: Full month names, January first.
        month_abbreviations: Abbreviated month names, January first.
        weekday_names: Full weekday names, Monday first.
        weekday_abbreviations: Abbreviated weekday names, Monday first.
        am_pm: The (AM, PM) markers.

    Examples:
        >>> ENGLISH.month_abbreviations[3]
        'Apr'
        >>> ENGLISH.month_from_name("april")
        4
    """

    code: str
    month_names: tuple[str, ...]
    month_abbreviations: tuple[str, ...]
    weekday_names: tuple[str, ...]
    weekday_abbreviations: tuple[str, ...]
    am_pm: tuple[str, str] = ("AM", "PM")

    def __post_init__(self) -> None:
        if len(self.month_names) != 12 or len(self.month_abbreviations) != 12:
            raise LocaleError(f"locale {self.code!r} must define 12 month names")
        if len(self.weekday_names) != 7 or len(self.weekday_abbreviations) != 7:
            raise LocaleError(f"locale {self.code!r} must define 7 weekday names")

    def month_from_name(self, name: str) -> int | None:
        """Return the month (1-12) for a full or abbreviated name, or None."""
        folded = name.casefold()
        for names in (self.month_names, self.month_abbreviations):
            for index, candidate in enumerate(names):
                if candidate.casefold() == folded:
                    return index + 1
        return None

    def weekday_from_name(self, name: str) -> int | None:
        """Return the weekday (Monday=0) for a full or abbreviated name, or None."""
        folded = name.casefold()
        for names in (self.weekday_names, self.weekday_abbreviations):
            for index, candidate in enumerate(names):
                if candidate.casefold() == folded:
                    return index
        return None

    def is_pm(self, marker: str) -> bool | None:
        """Return True for the PM marker, False for AM, None for anything else."""
        folded = marker.casefold()
        if folded == self.am_pm[0].casefold():
            return False
        if folded == self.am_pm[1].casefold():
            return True
        return None


ENGLISH = LocaleSymbols(
    code="en",
    month_names=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    month_abbreviations=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekday_names=(
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    ),
    weekday_abbreviations=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
)

FRENCH = LocaleSymbols(
    code="fr",
    month_names=(
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
    month_abbreviations=(
        "janv.", "févr.", "mars", "avr.", "mai", "juin",
        "juil.", "août", "sept.", "oct.", "nov.", "déc.",
    ),
    weekday_names=(
        "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche",
    ),
    weekday_abbreviations=("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
)

GERMAN = LocaleSymbols(
    code="de",
    month_names=(
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    month_abbreviations=(
        "Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
        "Jul", "Aug", "Sep", "Okt", "Nov", "Dez",
    ),
    weekday_names=(
        "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag",
    ),
    weekday_abbreviations=("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"),
)

SPANISH = LocaleSymbols(
    code="es",
    month_names=(
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ),
    month_abbreviations=(
        "ene", "feb", "mar", "abr", "may", "jun",
        "jul", "ago", "sept", "oct", "nov", "dic",
    ),
    weekday_names=(
        "lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo",
    ),
    weekday_abbreviations=("lun", "mar", "mié", "jue", "vie", "sáb", "dom"),
    am_pm=("a. m.", "p. m."),
)

_LOCALES: dict[str, LocaleSymbols] = {
    symbols.code: symbols for symbols in (ENGLISH, FRENCH, GERMAN, SPANISH)
}


def get_locale(code: str) -> LocaleSymbols:
    """Look up a locale symbol table.

    Accepts bare language codes ("fr") as well as POSIX-style names
    ("fr_FR.UTF-8", "de-AT"); only the language part is used.

    Args:
        code: The locale code.

    Returns:
        The matching LocaleSymbols.

    Raises:
        LocaleError: If no table is registered for the language.

    Examples:
        >>> get_locale("en_US.UTF-8").code
        'en'
    """
    language = code.split(".")[0].replace("-", "_").split("_")[0].lower()
    try:
        return _LOCALES[language]
    except KeyError:
        raise LocaleError(
            f"unknown locale: {code!r}. Available: {', '.join(sorted(_LOCALES))}"
        ) from None


def available_locales() -> list[str]:
    """Return the registered locale codes, sorted."""
    return sorted(_LOCALES)


__all__ = [
    "LocaleSymbols",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "SPANISH",
    "get_locale",
    "available_locales",
]
