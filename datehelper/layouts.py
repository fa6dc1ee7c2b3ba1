"""The catalog of named textual date/time layouts.

Each Layout member carries its SimpleDateFormat-style pattern text. Naming
follows a fixed scheme:

    D_ / S_      dash-separated / slash-separated date
    YY / YYYY    two-digit / four-digit year
    DDMM / YYMM  day-first / year-first order
    HHMMA        12-hour time with AM/PM marker (HHMMSSA adds seconds)
    _N           month written as an abbreviated name

CATALOG_ORDER fixes the iteration order used by best-effort parsing,
independently of the order of the enum definition.

Examples:
    >>> Layout.D_YYYYMMDD.pattern
    'yyyy-MM-dd'
    >>> get_pattern("S_DDMMYY")
    'dd/MM/yy'
    >>> next(iter_layouts())
    <Layout.D_YYMMDD: 'yy-MM-dd'>
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator


class Layout(Enum):
    """A named textual date/time layout.

    The member value is the pattern text. Patterns are unique; the only
    aliases are the mixed-case spellings of three two-digit-year layouts,
    which resolve to the canonical member and are skipped by iteration.
    """

    # Two-digit years
    D_YYMMDD = "yy-MM-dd"
    D_DDMMYY = "dd-MM-yy"
    D_YYMMDD_N = "yy-MMM-dd"
    D_DDMMYY_N = "dd-MMM-yy"
    D_YYMMDDHHMMA_N = "yy-MMM-dd, hh:mma"
    D_DDMMYYHHMMA_N = "dd-MMM-yy, hh:mma"
    S_YYMMDD = "yy/MM/dd"
    S_DDMMYY = "dd/MM/yy"
    S_YYMMDDHHMMA = "yy/MM/dd, hh:mma"
    S_DDMMYYHHMMA = "dd/MM/yy, hh:mma"
    S_YYMMDDHHMMA_N = "yy/MMM/dd, hh:mma"
    S_DDMMYYHHMMA_N = "dd/MMM/yy, hh:mma"

    # Four-digit years
    D_YYYYMMDD = "yyyy-MM-dd"
    D_DDMMYYYY = "dd-MM-yyyy"
    D_YYYYMMDD_N = "yyyy-MMM-dd"
    D_DDMMYYYY_N = "dd-MMM-yyyy"
    D_YYYYMMDDHHMMA_N = "yyyy-MMM-dd, hh:mma"
    D_DDMMYYYYHHMMA_N = "dd-MMM-yyyy, hh:mma"
    S_YYYYMMDD = "yyyy/MM/dd"
    S_DDMMYYYY = "dd/MM/yyyy"
    S_YYYYMMDDHHMMA = "yyyy/MM/dd, hh:mma"
    S_DDMMYYYYHHMMA = "dd/MM/yyyy, hh:mma"
    S_YYYYMMDDHHMMA_N = "yyyy/MMM/dd, hh:mma"
    S_DDMMYYYYHHMMA_N = "dd/MMM/yyyy, hh:mma"

    # With seconds, two-digit years
    D_YYMMDDHHMMSSA_N = "yy-MMM-dd, hh:mm:ssa"
    D_DDMMYYHHMMSSA_N = "dd-MMM-yy, hh:mm:ssa"
    S_YYMMDDHHMMSSA = "yy/MM/dd, hh:mm:ssa"
    S_DDMMYYHHMMSSA = "dd/MM/yy, hh:mm:ssa"
    S_YYMMDDHHMMSSA_N = "yy/MMM/dd, hh:mm:ssa"
    S_DDMMYYHHMMSSA_N = "dd/MMM/yy, hh:mm:ssa"

    # With seconds, four-digit years
    D_YYYYMMDDHHMMSSA_N = "yyyy-MMM-dd, hh:mm:ssa"
    D_DDMMYYYYHHMMSSA_N = "dd-MMM-yyyy, hh:mm:ssa"
    S_YYYYMMDDHHMMSSA = "yyyy/MM/dd, hh:mm:ssa"
    S_DDMMYYYYHHMMSSA = "dd/MM/yyyy, hh:mm:ssa"
    S_YYYYMMDDHHMMSSA_N = "yyyy/MMM/dd, hh:mm:ssa"
    S_DDMMYYYYHHMMSSA_N = "dd/MMM/yyyy, hh:mm:ssa"

    # Time only
    HHMMA = "hh:mma"
    HHMM = "HH:mm"
    HHMMSSA = "hh:mm:ssa"

    # Legacy identifiers with a lowercase yy
    D_DDMMyy_N = "dd-MMM-yy"
    S_DDMMyy = "dd/MM/yy"
    S_DDMMyyHHMMA = "dd/MM/yy, hh:mma"

    @property
    def pattern(self) -> str:
        """The pattern text of this layout."""
        return self.value

    @property
    def has_date(self) -> bool:
        """True if the pattern carries a calendar date."""
        return "d" in self.value

    @property
    def has_time(self) -> bool:
        """True if the pattern carries a time of day."""
        return "m" in self.value

    @classmethod
    def from_name(cls, name: str) -> Layout:
        """Look up a layout by its identifier.

        Args:
            name: The member name, e.g. "D_YYYYMMDD".

        Returns:
            The matching Layout.

        Raises:
            KeyError: If no layout has that identifier.
        """
        return cls[name]


CATALOG_ORDER: tuple[Layout, ...] = (
    Layout.D_YYMMDD,
    Layout.D_DDMMYY,
    Layout.D_YYMMDD_N,
    Layout.D_DDMMYY_N,
    Layout.D_YYMMDDHHMMA_N,
    Layout.D_DDMMYYHHMMA_N,
    Layout.S_YYMMDD,
    Layout.S_DDMMYY,
    Layout.S_YYMMDDHHMMA,
    Layout.S_DDMMYYHHMMA,
    Layout.S_YYMMDDHHMMA_N,
    Layout.S_DDMMYYHHMMA_N,
    Layout.D_YYYYMMDD,
    Layout.D_DDMMYYYY,
    Layout.D_YYYYMMDD_N,
    Layout.D_DDMMYYYY_N,
    Layout.D_YYYYMMDDHHMMA_N,
    Layout.D_DDMMYYYYHHMMA_N,
    Layout.S_YYYYMMDD,
    Layout.S_DDMMYYYY,
    Layout.S_YYYYMMDDHHMMA,
    Layout.S_DDMMYYYYHHMMA,
    Layout.S_YYYYMMDDHHMMA_N,
    Layout.S_DDMMYYYYHHMMA_N,
    Layout.D_YYMMDDHHMMSSA_N,
    Layout.D_DDMMYYHHMMSSA_N,
    Layout.S_YYMMDDHHMMSSA,
    Layout.S_DDMMYYHHMMSSA,
    Layout.S_YYMMDDHHMMSSA_N,
    Layout.S_DDMMYYHHMMSSA_N,
    Layout.D_YYYYMMDDHHMMSSA_N,
    Layout.D_DDMMYYYYHHMMSSA_N,
    Layout.S_YYYYMMDDHHMMSSA,
    Layout.S_DDMMYYYYHHMMSSA,
    Layout.S_YYYYMMDDHHMMSSA_N,
    Layout.S_DDMMYYYYHHMMSSA_N,
    Layout.HHMMA,
    Layout.HHMM,
    Layout.HHMMSSA,
)


def iter_layouts() -> Iterator[Layout]:
    """Iterate the catalog in best-effort parsing order."""
    return iter(CATALOG_ORDER)


def get_pattern(name: str) -> str:
    """Return the pattern text for a layout identifier.

    Raises:
        KeyError: If no layout has that identifier.
    """
    return Layout.from_name(name).pattern


__all__ = [
    "Layout",
    "CATALOG_ORDER",
    "iter_layouts",
    "get_pattern",
]
