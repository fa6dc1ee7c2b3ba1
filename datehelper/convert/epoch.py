"""Epoch conversion utilities.

This module converts between aware datetimes and timestamps, where a
timestamp is an integer count of milliseconds since the Unix epoch.

Functions:
    to_epoch_millis: Convert an aware datetime to epoch milliseconds.
    from_epoch_millis: Convert epoch milliseconds to an aware datetime.
    localize: Attach a zone to a wall-clock datetime, rejecting gaps.

The Unix epoch is 1970-01-01 00:00:00 UTC. All arithmetic is done on
integers through timedelta, so no float rounding creeps in.

Examples:
    >>> import datetime as _datetime
    >>> utc = _datetime.timezone.utc
    >>> to_epoch_millis(_datetime.datetime(1970, 1, 1, 0, 0, 1, tzinfo=utc))
    1000
    >>> from_epoch_millis(1000, utc).second
    1
"""

from __future__ import annotations

import datetime as _datetime
from datetime import tzinfo

from datehelper._internal.constants import MAX_YEAR, MIN_YEAR
from datehelper.errors import ValidationError

UNIX_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)

_ONE_MILLISECOND = _datetime.timedelta(milliseconds=1)


def to_epoch_millis(dt: _datetime.datetime) -> int:
    """Convert an aware datetime to epoch milliseconds.

    Sub-millisecond precision is dropped (floored).

    Args:
        dt: A timezone-aware datetime.

    Returns:
        Milliseconds since 1970-01-01 00:00:00 UTC.

    Raises:
        ValueError: If dt is naive.

    Examples:
        >>> utc = _datetime.timezone.utc
        >>> to_epoch_millis(_datetime.datetime(2024, 4, 14, 4, 0, tzinfo=utc))
        1713067200000
    """
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError(f"cannot convert naive datetime {dt} to epoch millis")
    return (dt - UNIX_EPOCH) // _ONE_MILLISECOND


def from_epoch_millis(millis: int, zone: tzinfo) -> _datetime.datetime:
    """Convert epoch milliseconds to an aware datetime in ``zone``.

    Args:
        millis: Milliseconds since 1970-01-01 00:00:00 UTC (may be negative).
        zone: The zone for the result's wall-clock fields.

    Returns:
        An aware datetime.

    Raises:
        ValidationError: If the instant falls outside years 1-9999 in
            UTC or in ``zone``.

    Examples:
        >>> utc = _datetime.timezone.utc
        >>> from_epoch_millis(-1, utc).year
        1969
    """
    try:
        return (UNIX_EPOCH + _datetime.timedelta(milliseconds=millis)).astimezone(zone)
    except OverflowError as e:
        raise ValidationError(
            f"timestamp {millis} is outside years {MIN_YEAR}-{MAX_YEAR} in {zone}"
        ) from e


def localize(wall: _datetime.datetime, zone: tzinfo) -> _datetime.datetime:
    """Interpret a naive wall-clock datetime in ``zone``.

    Ambiguous wall times (clocks set back) resolve to the first
    occurrence. Wall times that never happen (clocks set forward) are
    rejected.

    Args:
        wall: A naive datetime holding wall-clock fields.
        zone: The zone to interpret them in.

    Returns:
        The aware datetime.

    Raises:
        ValidationError: If the wall time falls in a daylight-saving gap,
            or lies outside years 1-9999 once converted to UTC.
    """
    aware = wall.replace(tzinfo=zone, fold=0)
    try:
        round_trip = aware.astimezone(_datetime.timezone.utc).astimezone(zone)
    except OverflowError as e:
        raise ValidationError(
            f"wall time {wall.isoformat()} in {zone} is outside years {MIN_YEAR}-{MAX_YEAR} in UTC"
        ) from e
    if round_trip.replace(tzinfo=None) != wall.replace(fold=0):
        raise ValidationError(f"wall time {wall.isoformat()} does not exist in {zone}")
    return aware


__all__ = [
    "UNIX_EPOCH",
    "to_epoch_millis",
    "from_epoch_millis",
    "localize",
]
