"""Whole-unit differences between two texts.

Both texts are parsed under the same layout with the converter's strict
parser, then the millisecond difference ``old - new`` is truncated toward
zero into days, hours or minutes. A day is a fixed 86_400_000 ms, so a
span that crosses a daylight-saving change can be one unit short:
"2024-03-10" to "2024-03-11" in New York is 23 hours, i.e. 0 days.

Results:
    int: the signed whole-unit difference (0 means "less than one unit").
    None: one of the texts was absent or did not parse.

A missing layout raises LayoutRequiredError before anything is parsed.

Examples:
    >>> from datehelper.layouts import Layout
    >>> calc = DeltaCalculator()
    >>> calc.days_between("2024-02-28", "2024-03-01", Layout.D_YYYYMMDD)
    -2
    >>> calc.minutes_between("15:30", "09:00", Layout.HHMM)
    390
    >>> calc.days_between("2024-02-28", None, Layout.D_YYYYMMDD) is None
    True
"""

from __future__ import annotations

import logging

from datehelper._internal.validation import require_layout
from datehelper.convert.converter import Converter
from datehelper.errors import ParseError, ValidationError
from datehelper.layouts import Layout
from datehelper.units.timeunit import TimeUnit

logger = logging.getLogger(__name__)


class DeltaCalculator:
    """Computes truncated differences between two texts under one layout."""

    def __init__(self, converter: Converter | None = None) -> None:
        self._converter = converter if converter is not None else Converter()

    @property
    def converter(self) -> Converter:
        return self._converter

    def between(
        self,
        old: str | None,
        new: str | None,
        layout: Layout | None,
        unit: TimeUnit,
    ) -> int | None:
        """Return ``old - new`` in whole ``unit``s, or None if either fails to parse.

        Args:
            old: The first text.
            new: The second text.
            layout: The layout both texts are written in.
            unit: The unit to truncate to.

        Returns:
            The signed difference truncated toward zero, or None.

        Raises:
            LayoutRequiredError: If layout is None.
        """
        layout = require_layout(layout)
        try:
            old_millis = self._converter.parse_strict(old, layout)
            new_millis = self._converter.parse_strict(new, layout)
        except (ParseError, ValidationError) as e:
            logger.debug("difference under %s has no value: %s", layout.name, e)
            return None
        return unit.truncate(old_millis - new_millis)

    def days_between(self, old: str | None, new: str | None, layout: Layout | None) -> int | None:
        """Return ``old - new`` in whole days."""
        return self.between(old, new, layout, TimeUnit.DAY)

    def hours_between(self, old: str | None, new: str | None, layout: Layout | None) -> int | None:
        """Return ``old - new`` in whole hours."""
        return self.between(old, new, layout, TimeUnit.HOUR)

    def minutes_between(self, old: str | None, new: str | None, layout: Layout | None) -> int | None:
        """Return ``old - new`` in whole minutes."""
        return self.between(old, new, layout, TimeUnit.MINUTE)


__all__ = ["DeltaCalculator"]
