"""Layout-pattern formatting and parsing.

Layouts use SimpleDateFormat-style pattern letters, where the number of
repeated letters selects the width or the textual form of a field.

Supported Letters:
    y - Year (yy = two digits, yyyy = four digits)
    M - Month (M/MM = number, MMM = abbreviated name, MMMM = full name)
    d - Day of month
    E - Day of week name (EEE = abbreviated, EEEE = full)
    a - AM/PM marker
    H - Hour of day (0-23)
    k - Hour of day (1-24)
    K - Hour in AM/PM (0-11)
    h - Hour in AM/PM (1-12)
    m - Minute
    s - Second
    S - Millisecond

Literal text can be quoted with single quotes ('at'); two single quotes
produce one literal quote. Any other character that is not a letter is
literal.

Parsing is strict: the whole text must match, numeric fields take exactly
as many digits as the pattern has letters (a single letter accepts any
width up to the field maximum), and out-of-range values are rejected
instead of rolling over. Spaces and tabs before a field are skipped, so
"10:00 AM" parses under "hh:mma".

Functions:
    compile_pattern: Split a pattern into field and literal tokens.
    format_datetime: Render a datetime under a pattern.
    parse_components: Parse text under a pattern into calendar fields.

Examples:
    >>> import datetime as _datetime
    >>> format_datetime(_datetime.datetime(2024, 4, 14, 16, 0), "dd-MMM-yyyy, hh:mma")
    '14-Apr-2024, 04:00PM'

    >>> parse_components("14/04/2025, 10:00 AM", "dd/MM/yyyy, hh:mma").hour
    10
"""

from __future__ import annotations

import datetime as _datetime
import re
from dataclasses import dataclass

from datehelper._internal.calendar import resolve_two_digit_year
from datehelper._internal.constants import (
    DEFAULT_DAY,
    DEFAULT_MONTH,
    DEFAULT_YEAR,
    TWO_DIGIT_YEAR_WINDOW,
)
from datehelper._internal.decorators import memoize
from datehelper._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)
from datehelper.errors import ParseError, ValidationError
from datehelper.units.locale import ENGLISH, LocaleSymbols

# Maximum digit count of each numeric field
_MAX_DIGITS: dict[str, int] = {
    "y": 4,
    "M": 2,
    "d": 2,
    "H": 2,
    "k": 2,
    "K": 2,
    "h": 2,
    "m": 2,
    "s": 2,
    "S": 3,
}

_TEXT_LETTERS = frozenset("Ea")

_FIELD_LETTERS = frozenset(_MAX_DIGITS) | _TEXT_LETTERS


@dataclass(frozen=True)
class PatternToken:
    """One piece of a compiled pattern.

    Attributes:
        letter: The pattern letter, or None for literal text.
        width: Number of repeated letters (0 for literals).
        text: The literal text, or the letter run as written.
    """

    letter: str | None
    width: int
    text: str

    @property
    def is_literal(self) -> bool:
        return self.letter is None


@dataclass(frozen=True)
class ParsedFields:
    """Calendar fields read from text.

    Fields without a pattern letter keep their defaults, so a time-only
    pattern yields a time on 1970-01-01.
    """

    year: int = DEFAULT_YEAR
    month: int = DEFAULT_MONTH
    day: int = DEFAULT_DAY
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def to_datetime(self) -> _datetime.datetime:
        """Return the fields as a naive wall-clock datetime."""
        return _datetime.datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
        )


@memoize
def compile_pattern(pattern: str) -> tuple[PatternToken, ...]:
    """Split a pattern into tokens.

    Adjacent literal characters are merged into one literal token.

    Args:
        pattern: The pattern text.

    Returns:
        Tuple of PatternToken in pattern order.

    Raises:
        ValueError: If the pattern uses an unsupported letter or has an
            unterminated quote.

    Examples:
        >>> [t.text for t in compile_pattern("HH:mm")]
        ['HH', ':', 'mm']
        >>> [t.text for t in compile_pattern("hh 'o''clock'")]
        ['hh', " o'clock"]
    """
    tokens: list[PatternToken] = []
    literal: list[str] = []

    def flush_literal() -> None:
        if literal:
            tokens.append(PatternToken(letter=None, width=0, text="".join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            # Quoted run: ends at the next lone quote
            j = i + 1
            while True:
                if j >= n:
                    raise ValueError(f"unterminated quote in pattern {pattern!r}")
                if pattern[j] == "'":
                    if j + 1 < n and pattern[j + 1] == "'":
                        literal.append("'")
                        j += 2
                        continue
                    break
                literal.append(pattern[j])
                j += 1
            i = j + 1
        elif ch.isascii() and ch.isalpha():
            if ch not in _FIELD_LETTERS:
                raise ValueError(
                    f"unsupported pattern letter {ch!r} in {pattern!r}. "
                    f"Supported: {''.join(sorted(_FIELD_LETTERS))}"
                )
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            flush_literal()
            tokens.append(PatternToken(letter=ch, width=j - i, text=pattern[i:j]))
            i = j
        else:
            literal.append(ch)
            i += 1

    flush_literal()
    return tuple(tokens)


def format_datetime(
    value: _datetime.datetime,
    pattern: str,
    locale: LocaleSymbols = ENGLISH,
) -> str:
    """Render a datetime's wall-clock fields under a pattern.

    The datetime is used as given; convert it to the wanted zone first.

    Args:
        value: The datetime to render.
        pattern: The pattern text.
        locale: Names for symbolic fields.

    Returns:
        The formatted string.

    Raises:
        ValueError: If the pattern is invalid.

    Examples:
        >>> d = _datetime.datetime(2024, 4, 14, 0, 5, 9)
        >>> format_datetime(d, "yy/MM/dd, hh:mm:ssa")
        '24/04/14, 12:05:09AM'
        >>> format_datetime(d, "EEEE d MMMM")
        'Sunday 14 April'
    """
    parts: list[str] = []
    for token in compile_pattern(pattern):
        if token.is_literal:
            parts.append(token.text)
        else:
            parts.append(_format_field(value, token, locale))
    return "".join(parts)


def _format_field(
    value: _datetime.datetime,
    token: PatternToken,
    locale: LocaleSymbols,
) -> str:
    """Format a single field token."""
    letter = token.letter
    width = token.width

    if letter == "y":
        if width == 2:
            return f"{value.year % 100:02d}"
        return f"{value.year:0{width}d}"

    elif letter == "M":
        if width >= 4:
            return locale.month_names[value.month - 1]
        if width == 3:
            return locale.month_abbreviations[value.month - 1]
        number = value.month

    elif letter == "E":
        if width >= 4:
            return locale.weekday_names[value.weekday()]
        return locale.weekday_abbreviations[value.weekday()]

    elif letter == "a":
        return locale.am_pm[1 if value.hour >= 12 else 0]

    elif letter == "d":
        number = value.day
    elif letter == "H":
        number = value.hour
    elif letter == "k":
        number = value.hour or 24
    elif letter == "K":
        number = value.hour % 12
    elif letter == "h":
        number = value.hour % 12 or 12
    elif letter == "m":
        number = value.minute
    elif letter == "s":
        number = value.second
    elif letter == "S":
        number = value.microsecond // 1000

    else:
        raise ValueError(f"unsupported pattern letter: {letter!r}")

    return f"{number:0{width}d}"


def _digits_regex(letter: str, width: int) -> str:
    """Regex for a numeric field of the given letter count."""
    max_digits = _MAX_DIGITS[letter]
    if letter == "y" and width == 2:
        return "[0-9]{2}"
    if width >= max_digits:
        return f"[0-9]{{{width}}}"
    return f"[0-9]{{{width},{max_digits}}}"


def _names_regex(names: tuple[str, ...]) -> str:
    """Alternation of names, longest first so prefixes never win early."""
    ordered = sorted(set(names), key=len, reverse=True)
    return "|".join(re.escape(name) for name in ordered)


@memoize
def _compile_parser(
    pattern: str,
    locale: LocaleSymbols,
) -> tuple[re.Pattern[str], tuple[PatternToken, ...]]:
    """Build the matching regex for a pattern and locale.

    Returns:
        The compiled regex and the field tokens, where field i is captured
        by group ``f{i}``.
    """
    parts: list[str] = []
    fields: list[PatternToken] = []

    for token in compile_pattern(pattern):
        if token.is_literal:
            parts.append(re.escape(token.text))
            continue

        letter = token.letter
        if letter == "M" and token.width >= 3:
            body = _names_regex(locale.month_names + locale.month_abbreviations)
        elif letter == "E":
            body = _names_regex(locale.weekday_names + locale.weekday_abbreviations)
        elif letter == "a":
            body = _names_regex(locale.am_pm)
        else:
            body = _digits_regex(letter, token.width)  # type: ignore[arg-type]

        parts.append(rf"[ \t]*(?P<f{len(fields)}>{body})")
        fields.append(token)

    return re.compile("".join(parts), re.IGNORECASE), tuple(fields)


def parse_components(
    text: str | None,
    pattern: str,
    locale: LocaleSymbols = ENGLISH,
    *,
    current_year: int | None = None,
    two_digit_year_window: int = TWO_DIGIT_YEAR_WINDOW,
) -> ParsedFields:
    """Parse text under a pattern into calendar fields.

    Args:
        text: The string to parse.
        pattern: The pattern text.
        locale: Names for symbolic fields.
        current_year: Reference year for two-digit years. Defaults to the
            current local year.
        two_digit_year_window: Years before current_year where the
            100-year window for two-digit years starts.

    Returns:
        The parsed fields.

    Raises:
        ParseError: If text is None, empty, or does not match the pattern.
        ValidationError: If a component is out of range.
        ValueError: If the pattern is invalid.

    Examples:
        >>> parse_components("24/Apr/14, 11:00AM", "yy/MMM/dd, hh:mma", current_year=2025)
        ParsedFields(year=2024, month=4, day=14, hour=11, minute=0, second=0, millisecond=0)

        >>> parse_components("2024-13-01", "yyyy-MM-dd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValidationError: month must be between 1 and 12, got 13
    """
    if text is None:
        raise ParseError("cannot parse None")
    if not text:
        raise ParseError("cannot parse empty string")

    regex, fields = _compile_parser(pattern, locale)
    match = regex.fullmatch(text)
    if not match:
        raise ParseError(f"string {text!r} does not match pattern {pattern!r}")

    values: dict[str, int] = {}
    is_pm: bool | None = None
    weekday: int | None = None

    for index, token in enumerate(fields):
        raw = match.group(f"f{index}")
        letter = token.letter

        if letter == "a":
            is_pm = locale.is_pm(raw)
        elif letter == "E":
            weekday = locale.weekday_from_name(raw)
        elif letter == "M" and token.width >= 3:
            values["M"] = locale.month_from_name(raw)  # type: ignore[assignment]
        elif letter == "y" and token.width == 2:
            if current_year is None:
                current_year = _datetime.date.today().year
            values["y"] = resolve_two_digit_year(
                int(raw), current_year, two_digit_year_window
            )
        else:
            values[letter] = int(raw)  # type: ignore[index]

    year = values.get("y", DEFAULT_YEAR)
    month = values.get("M", DEFAULT_MONTH)
    day = values.get("d", DEFAULT_DAY)

    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)

    hour = _resolve_hour(values, is_pm)

    minute = values.get("m", 0)
    validate_range("minute", minute, 0, 59)
    second = values.get("s", 0)
    validate_range("second", second, 0, 59)
    millisecond = values.get("S", 0)
    validate_range("millisecond", millisecond, 0, 999)

    if weekday is not None and _datetime.date(year, month, day).weekday() != weekday:
        raise ValidationError(
            f"{text!r}: day of week does not match {year}-{month:02d}-{day:02d}"
        )

    return ParsedFields(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        millisecond=millisecond,
    )


def _resolve_hour(values: dict[str, int], is_pm: bool | None) -> int:
    """Combine the hour fields and AM/PM marker into an hour 0-23.

    A 24-hour field wins over a 12-hour one. A 12-hour field without a
    marker is read as AM.
    """
    if "H" in values:
        validate_range("hour", values["H"], 0, 23)
        return values["H"]

    if "k" in values:
        validate_range("hour", values["k"], 1, 24)
        return values["k"] % 24

    if "h" in values:
        validate_range("hour", values["h"], 1, 12)
        hour = values["h"] % 12
    elif "K" in values:
        validate_range("hour", values["K"], 0, 11)
        hour = values["K"]
    else:
        return 0

    return hour + 12 if is_pm else hour


__all__ = [
    "PatternToken",
    "ParsedFields",
    "compile_pattern",
    "format_datetime",
    "parse_components",
]
