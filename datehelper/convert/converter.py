"""Multi-layout date/time conversion.

The Converter parses text under a catalog layout into a timestamp
(epoch milliseconds), formats timestamps back into text, and tries every
catalog layout in order when the layout is unknown.

Three parse surfaces report bad input differently:
    parse_strict: raises ParseError / ValidationError.
    try_parse: returns None.
    parse_date / parse_any_date: return the zero sentinel. A text that
        really denotes the epoch also yields 0; use one of the other two
        surfaces when that matters.

A missing layout is a caller bug on every surface and raises
LayoutRequiredError.

Examples:
    >>> from datehelper.config import HelperOptions
    >>> from datehelper.layouts import Layout
    >>> conv = Converter(HelperOptions())
    >>> conv.parse_date("1970-01-02", Layout.D_YYYYMMDD)
    86400000
    >>> conv.format(Layout.D_DDMMYYYY_N, 86400000)
    '02-Jan-1970'
    >>> conv.parse_date("not-a-date", Layout.D_YYYYMMDD)
    0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from datehelper._internal.validation import require_layout
from datehelper.config import HelperOptions
from datehelper.convert.epoch import from_epoch_millis, localize, to_epoch_millis
from datehelper.errors import ParseError, ValidationError
from datehelper.format.pattern import format_datetime, parse_components
from datehelper.layouts import Layout, iter_layouts

logger = logging.getLogger(__name__)

# Returned by the legacy parse entry points when nothing could be parsed
PARSE_FAILED: int = 0


@dataclass(frozen=True)
class ParseResult:
    """A successful best-effort parse.

    Attributes:
        timestamp: Epoch milliseconds.
        layout: The catalog layout that matched.
    """

    timestamp: int
    layout: Layout


class Converter:
    """Parses and formats timestamps under catalog layouts.

    All zone, locale and clock dependence comes from the options given at
    construction; a Converter holds no other state and can be shared
    between threads.
    """

    def __init__(self, options: HelperOptions | None = None) -> None:
        self._options = options if options is not None else HelperOptions()

    @property
    def options(self) -> HelperOptions:
        return self._options

    def __repr__(self) -> str:
        return (
            f"Converter(timezone={self._options.timezone!s}, "
            f"locale={self._options.locale.code!r})"
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_pattern(self, text: str | None, pattern: str) -> int:
        """Strictly parse text under an arbitrary pattern.

        Args:
            text: The string to parse.
            pattern: The pattern text.

        Returns:
            Epoch milliseconds.

        Raises:
            ParseError: If text is None, empty, or does not match.
            ValidationError: If a component is out of range or the wall
                time does not exist in the configured zone.
        """
        opts = self._options
        current_year = from_epoch_millis(opts.now(), opts.timezone).year
        fields = parse_components(
            text,
            pattern,
            opts.locale,
            current_year=current_year,
            two_digit_year_window=opts.two_digit_year_window,
        )
        try:
            wall = fields.to_datetime()
        except ValueError as e:
            raise ValidationError(str(e)) from e
        return to_epoch_millis(localize(wall, opts.timezone))

    def parse_strict(self, text: str | None, layout: Layout | None) -> int:
        """Parse text using exactly ``layout``'s pattern.

        Raises:
            LayoutRequiredError: If layout is None.
            ParseError: If text is None, empty, or does not match.
            ValidationError: If a component is out of range or the instant
                falls outside years 1-9999 in UTC.
        """
        layout = require_layout(layout)
        return self.parse_pattern(text, layout.pattern)

    def try_parse(self, text: str | None, layout: Layout | None) -> int | None:
        """Parse text under ``layout``, returning None on bad input.

        Raises:
            LayoutRequiredError: If layout is None.
        """
        layout = require_layout(layout)
        try:
            return self.parse_pattern(text, layout.pattern)
        except (ParseError, ValidationError) as e:
            logger.debug("parse under %s failed: %s", layout.name, e)
            return None

    def parse_date(self, text: str | None, layout: Layout | None) -> int:
        """Parse text under ``layout``, returning 0 on bad input.

        Raises:
            LayoutRequiredError: If layout is None.
        """
        result = self.try_parse(text, layout)
        return PARSE_FAILED if result is None else result

    def detect_layouts(self, text: str | None) -> list[ParseResult]:
        """Return every catalog layout that parses ``text``, in catalog order.

        Examples:
            >>> conv = Converter(HelperOptions(clock=lambda: 1744819200000))
            >>> [r.layout.name for r in conv.detect_layouts("14/04/25")]
            ['S_YYMMDD', 'S_DDMMYY']
        """
        if not text:
            return []

        results: list[ParseResult] = []
        for layout in iter_layouts():
            try:
                timestamp = self.parse_pattern(text, layout.pattern)
            except (ParseError, ValidationError):
                continue
            results.append(ParseResult(timestamp=timestamp, layout=layout))
        return results

    def parse_any(self, text: str | None) -> ParseResult:
        """Parse text under the first catalog layout that accepts it.

        Layouts are tried in catalog order and the first success wins,
        even if a later layout would also match.

        Raises:
            ParseError: If text is None, empty, or matches no layout.
        """
        if not text:
            raise ParseError("cannot parse empty or None text")

        for layout in iter_layouts():
            try:
                timestamp = self.parse_pattern(text, layout.pattern)
            except (ParseError, ValidationError):
                continue
            return ParseResult(timestamp=timestamp, layout=layout)

        raise ParseError(f"no catalog layout matches {text!r}")

    def parse_any_date(self, text: str | None) -> int:
        """Best-effort parse returning 0 when no layout matches."""
        try:
            return self.parse_any(text).timestamp
        except ParseError as e:
            logger.debug("best-effort parse failed: %s", e)
            return PARSE_FAILED

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_pattern(self, pattern: str, timestamp: int | None = None) -> str:
        """Render a timestamp under an arbitrary pattern.

        Args:
            pattern: The pattern text.
            timestamp: Epoch milliseconds; None means the clock's now.

        Returns:
            The formatted string in the configured zone and locale.

        Raises:
            ValidationError: If the timestamp is outside years 1-9999.
        """
        opts = self._options
        if timestamp is None:
            timestamp = opts.now()
        local = from_epoch_millis(timestamp, opts.timezone)
        return format_datetime(local, pattern, opts.locale)

    def format(self, layout: Layout | None, timestamp: int | None = None) -> str:
        """Render a timestamp under ``layout``.

        Raises:
            LayoutRequiredError: If layout is None.
        """
        layout = require_layout(layout)
        return self.format_pattern(layout.pattern, timestamp)


__all__ = [
    "PARSE_FAILED",
    "ParseResult",
    "Converter",
]
