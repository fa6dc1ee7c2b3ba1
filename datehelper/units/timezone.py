"""Timezone resolution.

Converters work with any ``tzinfo``; this module turns configuration
values (IANA names, "UTC", fixed offsets such as "+05:30") into one and
finds the host's default zone.
"""

from __future__ import annotations

import logging
import os
import re
from datetime import datetime, timedelta, timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datehelper.errors import TimezoneError

logger = logging.getLogger(__name__)

# Fixed offset: +HH:MM, -HH:MM, +HHMM, -HHMM, +HH, -HH
_OFFSET_PATTERN = re.compile(r"^([+-])(\d{2}):?(\d{2})?$")

# Maximum offset is +/- 14 hours (Pacific/Kiritimati is UTC+14)
_MAX_OFFSET = timedelta(hours=14)

_HOST_ZONE_FILE = Path("/etc/localtime")


def resolve_timezone(name: str) -> tzinfo:
    """Resolve a zone name to a tzinfo.

    Args:
        name: An IANA zone name ("America/New_York"), "UTC"/"Z", or a
            fixed UTC offset ("+05:30", "-0800", "+02").

    Returns:
        The resolved tzinfo.

    Raises:
        TimezoneError: If the name cannot be resolved.

    Examples:
        >>> resolve_timezone("UTC")
        datetime.timezone.utc
        >>> resolve_timezone("+05:30").utcoffset(None)
        datetime.timedelta(seconds=19800)
    """
    name = name.strip()
    if not name:
        raise TimezoneError("empty timezone name")

    if name.upper() in ("UTC", "Z", "GMT"):
        return timezone.utc

    match = _OFFSET_PATTERN.match(name)
    if match:
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
        if offset > _MAX_OFFSET:
            raise TimezoneError(f"offset {name!r} is outside valid range +/-14:00")
        if sign == "-":
            offset = -offset
        return timezone(offset)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimezoneError(f"unknown timezone: {name!r}") from e


def local_timezone() -> tzinfo:
    """Return the host's default zone.

    Checks the ``TZ`` environment variable, then the host zone file, and
    finally falls back to the current fixed local offset (which does not
    follow daylight-saving changes).
    """
    tz_name = os.environ.get("TZ")
    if tz_name:
        # POSIX allows a leading colon: TZ=":Europe/Paris"
        try:
            return resolve_timezone(tz_name.lstrip(":"))
        except TimezoneError:
            logger.debug("ignoring unresolvable TZ=%r", tz_name)

    if _HOST_ZONE_FILE.exists():
        try:
            with _HOST_ZONE_FILE.open("rb") as f:
                return ZoneInfo.from_file(f, key="localtime")
        except (OSError, ValueError):
            logger.debug("could not read %s", _HOST_ZONE_FILE)

    fallback = datetime.now().astimezone().tzinfo
    logger.debug("using fixed local offset %s as default zone", fallback)
    return fallback if fallback is not None else timezone.utc


__all__ = ["resolve_timezone", "local_timezone"]
