"""Edge case tests for datehelper.

This module tests boundary conditions of the internal helpers: the
@memoize decorator, validation, calendar arithmetic, epoch conversion
and unit truncation.
"""

from __future__ import annotations

import datetime as _datetime

import pytest

from datehelper._internal.calendar import days_in_month, is_leap_year, resolve_two_digit_year
from datehelper._internal.constants import MAX_YEAR, MILLIS_PER_DAY, MIN_YEAR
from datehelper._internal.decorators import memoize
from datehelper._internal.validation import (
    require_layout,
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)
from datehelper.convert.epoch import UNIX_EPOCH, from_epoch_millis, localize, to_epoch_millis
from datehelper.errors import DateHelperError, LayoutRequiredError, ParseError, ValidationError
from datehelper.format.pattern import compile_pattern
from datehelper.layouts import Layout
from datehelper.units.timeunit import TimeUnit
from datehelper.units.timezone import resolve_timezone


# ============================================================================
# Test @memoize Decorator
# ============================================================================


class TestMemoizeDecorator:
    """Tests for the @memoize decorator."""

    def test_memoize_caches_results(self) -> None:
        """Test that @memoize caches function results."""
        call_count = 0

        @memoize
        def double(n: int) -> int:
            nonlocal call_count
            call_count += 1
            return n * 2

        assert double(5) == 10
        assert double(5) == 10
        assert call_count == 1
        assert double(6) == 12
        assert call_count == 2

    def test_memoize_keys_on_kwargs(self) -> None:
        """Test that keyword arguments are part of the cache key."""

        @memoize
        def greet(name: str, greeting: str = "Hello") -> str:
            return f"{greeting}, {name}"

        assert greet("Ada") == "Hello, Ada"
        assert greet("Ada", greeting="Hi") == "Hi, Ada"

    def test_memoize_clear_cache(self) -> None:
        """Test that the cache can be cleared."""

        @memoize
        def identity(n: int) -> int:
            return n

        identity(1)
        assert len(identity._cache) == 1  # type: ignore[attr-defined]
        identity._clear_cache()  # type: ignore[attr-defined]
        assert len(identity._cache) == 0  # type: ignore[attr-defined]

    def test_compiled_patterns_are_shared(self) -> None:
        """Test that compile_pattern returns the cached tuple."""
        assert compile_pattern("yyyy-MM-dd") is compile_pattern("yyyy-MM-dd")


# ============================================================================
# Test Validation
# ============================================================================


class TestValidation:
    """Tests for the validation helpers."""

    def test_require_layout_passes_through(self) -> None:
        assert require_layout(Layout.HHMM) is Layout.HHMM

    def test_require_layout_none(self) -> None:
        with pytest.raises(LayoutRequiredError, match="must not be None"):
            require_layout(None)

    def test_require_layout_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="must be a Layout"):
            require_layout("HH:mm")  # type: ignore[arg-type]

    def test_layout_required_is_not_caught_as_data_error(self) -> None:
        """LayoutRequiredError is not a ParseError or ValidationError."""
        assert not issubclass(LayoutRequiredError, ParseError)
        assert not issubclass(LayoutRequiredError, ValidationError)
        assert issubclass(LayoutRequiredError, DateHelperError)

    def test_validate_range(self) -> None:
        validate_range("minute", 0, 0, 59)
        validate_range("minute", 59, 0, 59)
        with pytest.raises(ValidationError, match="minute must be between 0 and 59, got 60"):
            validate_range("minute", 60, 0, 59)

    def test_validate_year_limits(self) -> None:
        validate_year(MIN_YEAR)
        validate_year(MAX_YEAR)
        with pytest.raises(ValidationError):
            validate_year(MIN_YEAR - 1)
        with pytest.raises(ValidationError):
            validate_year(MAX_YEAR + 1)

    def test_validate_month(self) -> None:
        with pytest.raises(ValidationError):
            validate_month(0)

    def test_validate_day(self) -> None:
        validate_day(2024, 2, 29)
        with pytest.raises(ValidationError, match="for 2023-02"):
            validate_day(2023, 2, 29)


# ============================================================================
# Test Calendar Helpers
# ============================================================================


class TestCalendar:
    """Tests for leap years, month lengths and two-digit years."""

    @pytest.mark.parametrize(
        ("year", "leap"),
        [(2000, True), (1900, False), (2024, True), (2023, False)],
    )
    def test_is_leap_year(self, year: int, leap: bool) -> None:
        assert is_leap_year(year) is leap

    def test_days_in_month(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2024, 4) == 30
        with pytest.raises(ValueError):
            days_in_month(2024, 13)

    @pytest.mark.parametrize(
        ("two_digit", "expected"),
        [(45, 1945), (44, 2044), (46, 1946), (0, 2000), (99, 1999)],
    )
    def test_window_boundaries(self, two_digit: int, expected: int) -> None:
        """With 2025 and a window of 80 the years run 1945-2044."""
        assert resolve_two_digit_year(two_digit, 2025, 80) == expected


# ============================================================================
# Test Epoch Conversion
# ============================================================================


class TestEpoch:
    """Tests for epoch millisecond conversion."""

    def test_epoch_is_zero(self) -> None:
        assert to_epoch_millis(UNIX_EPOCH) == 0

    def test_naive_rejected(self) -> None:
        with pytest.raises(ValueError, match="naive"):
            to_epoch_millis(_datetime.datetime(2024, 4, 14))

    def test_sub_millisecond_floored(self) -> None:
        dt = UNIX_EPOCH + _datetime.timedelta(microseconds=1999)
        assert to_epoch_millis(dt) == 1

    def test_negative(self) -> None:
        dt = from_epoch_millis(-1, _datetime.timezone.utc)
        assert (dt.year, dt.month, dt.day) == (1969, 12, 31)
        assert dt.microsecond == 999_000

    def test_zone_applied(self) -> None:
        dt = from_epoch_millis(0, resolve_timezone("America/New_York"))
        assert dt.hour == 19

    def test_localize_gap(self) -> None:
        zone = resolve_timezone("America/New_York")
        with pytest.raises(ValidationError):
            localize(_datetime.datetime(2024, 3, 10, 2, 30), zone)

    def test_localize_fixed_offset(self) -> None:
        zone = resolve_timezone("+05:30")
        aware = localize(_datetime.datetime(1970, 1, 1, 5, 30), zone)
        assert to_epoch_millis(aware) == 0

    def test_from_epoch_millis_year_limits(self) -> None:
        utc = _datetime.timezone.utc
        assert from_epoch_millis(253402300799999, utc).year == MAX_YEAR
        assert from_epoch_millis(-62135596800000, utc).year == MIN_YEAR
        with pytest.raises(ValidationError, match="outside years"):
            from_epoch_millis(253402300800000, utc)
        with pytest.raises(ValidationError, match="outside years"):
            from_epoch_millis(-62135596800001, utc)

    def test_from_epoch_millis_past_limit_in_zone(self) -> None:
        """The last UTC millisecond is already year 10000 in Tokyo."""
        with pytest.raises(ValidationError):
            from_epoch_millis(253402300799999, resolve_timezone("Asia/Tokyo"))

    @pytest.mark.parametrize(
        ("wall", "zone_name"),
        [
            (_datetime.datetime(1, 1, 1), "Asia/Tokyo"),
            (_datetime.datetime(9999, 12, 31, 23), "America/New_York"),
        ],
    )
    def test_localize_outside_utc_years(self, wall: _datetime.datetime, zone_name: str) -> None:
        with pytest.raises(ValidationError, match="outside years"):
            localize(wall, resolve_timezone(zone_name))

    @pytest.mark.parametrize(
        ("wall", "zone_name"),
        [
            (_datetime.datetime(1, 1, 1), "America/New_York"),
            (_datetime.datetime(9999, 12, 31, 23), "Asia/Tokyo"),
        ],
    )
    def test_localize_inside_utc_years(self, wall: _datetime.datetime, zone_name: str) -> None:
        aware = localize(wall, resolve_timezone(zone_name))
        assert aware.replace(tzinfo=None) == wall


# ============================================================================
# Test TimeUnit
# ============================================================================


class TestTimeUnit:
    """Tests for unit lengths and truncation."""

    def test_day_length(self) -> None:
        assert TimeUnit.DAY.to_millis() == MILLIS_PER_DAY

    @pytest.mark.parametrize(
        ("unit", "millis", "expected"),
        [
            (TimeUnit.DAY, MILLIS_PER_DAY - 1, 0),
            (TimeUnit.DAY, -(MILLIS_PER_DAY - 1), 0),
            (TimeUnit.DAY, -1, 0),
            (TimeUnit.DAY, -MILLIS_PER_DAY, -1),
            (TimeUnit.HOUR, 7_199_999, 1),
            (TimeUnit.HOUR, -7_199_999, -1),
            (TimeUnit.MINUTE, -119_999, -1),
            (TimeUnit.MILLISECOND, -5, -5),
        ],
    )
    def test_truncate_toward_zero(self, unit: TimeUnit, millis: int, expected: int) -> None:
        assert unit.truncate(millis) == expected
