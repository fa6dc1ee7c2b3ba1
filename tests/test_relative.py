"""Tests for relative rendering."""

from __future__ import annotations

import datetime as _datetime

import pytest

from datehelper.convert.converter import Converter
from datehelper.relative import RelativeFormatter, same_local_day
from datehelper.units.timezone import resolve_timezone

# 2025-04-16 12:00 in New York, the clock of the converter fixture
FIXED_NOW = 1744819200000
# 2024-04-14 16:00 in New York
OTHER_DAY = 1713124800000
# 2025-04-16 00:00 in New York
START_OF_TODAY = FIXED_NOW - 12 * 3_600_000


class TestPrettify:
    """Tests for prettify with the local same-day check."""

    def test_now_is_time_only(self, converter: Converter) -> None:
        assert RelativeFormatter(converter).prettify(FIXED_NOW) == "12:00 PM"

    def test_start_of_today(self, converter: Converter) -> None:
        assert RelativeFormatter(converter).prettify(START_OF_TODAY) == "12:00 AM"

    def test_previous_evening(self, converter: Converter) -> None:
        result = RelativeFormatter(converter).prettify(START_OF_TODAY - 60_000)
        assert result == "15 Apr 11:59 PM"

    def test_other_day(self, converter: Converter) -> None:
        assert RelativeFormatter(converter).prettify(OTHER_DAY) == "14 Apr 04:00 PM"

    def test_is_today(self, converter: Converter) -> None:
        formatter = RelativeFormatter(converter)
        assert formatter.is_today(START_OF_TODAY)
        assert not formatter.is_today(START_OF_TODAY - 1)


class TestInjectedSameDay:
    """Tests for a caller-supplied same-day check."""

    def test_always_today(self, converter: Converter) -> None:
        formatter = RelativeFormatter(converter, lambda first, second: True)
        assert formatter.prettify(OTHER_DAY) == "04:00 PM"

    def test_never_today(self, converter: Converter) -> None:
        formatter = RelativeFormatter(converter, lambda first, second: False)
        assert formatter.prettify(FIXED_NOW) == "16 Apr 12:00 PM"

    def test_receives_timestamp_and_now(self, converter: Converter) -> None:
        seen: list[tuple[int, int]] = []

        def check(first: int, second: int) -> bool:
            seen.append((first, second))
            return True

        RelativeFormatter(converter, check).prettify(OTHER_DAY)
        assert seen == [(OTHER_DAY, FIXED_NOW)]


class TestPrettifyText:
    """Tests for prettify_text."""

    def test_decimal_text(self, converter: Converter) -> None:
        assert RelativeFormatter(converter).prettify_text("1713124800000") == "14 Apr 04:00 PM"

    def test_non_numeric_raises(self, converter: Converter) -> None:
        with pytest.raises(ValueError):
            RelativeFormatter(converter).prettify_text("yesterday")

    @pytest.mark.parametrize("text", [" 12 ", "+5", "1_000", "", "12\n", "--1"])
    def test_loose_integer_text_raises(self, converter: Converter, text: str) -> None:
        """Only an optional minus sign and ASCII digits are accepted."""
        with pytest.raises(ValueError, match="not a decimal timestamp"):
            RelativeFormatter(converter).prettify_text(text)

    def test_negative_decimal_text(self, converter: Converter) -> None:
        """One second before the epoch is the evening of 1969-12-31 in New York."""
        assert RelativeFormatter(converter).prettify_text("-1000") == "31 Dec 06:59 PM"


class TestSameLocalDay:
    """Tests for same_local_day."""

    def test_utc(self) -> None:
        check = same_local_day(_datetime.timezone.utc)
        assert check(0, 86_399_999)
        assert not check(0, 86_400_000)

    def test_zone_matters(self) -> None:
        """UTC midnight is the previous evening in New York."""
        check = same_local_day(resolve_timezone("America/New_York"))
        assert not check(0, 86_399_999)
        assert check(1713067200000, OTHER_DAY)
