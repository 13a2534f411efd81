"""Time zone resolution and identifiers.

Calendate uses standard library ``tzinfo`` objects throughout:

    - ``datetime.timezone.utc`` for UTC
    - ``datetime.timezone`` instances for fixed UTC offsets
    - ``zoneinfo.ZoneInfo`` for IANA names such as "Asia/Tokyo"
    - LocalTimezone for the live system time zone

This module turns user-supplied values into one of those, and gives each
a stable identifier for use in formatter cache keys.
"""

from __future__ import annotations

import datetime as _datetime
import re
import time as _time
import zoneinfo

from calendate._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE

_EPOCH = _datetime.datetime(1970, 1, 1)

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")

# Maximum offset is +/- 14 hours (Pacific/Kiritimati is UTC+14)
_MAX_OFFSET_HOURS = 14


class LocalTimezone(_datetime.tzinfo):
    """The system time zone, looked up each time it is used.

    Offsets are read from the C library for every conversion, so a
    change of the process time zone (``TZ`` plus ``time.tzset()``) is
    picked up by existing instances.

    Examples:
        >>> tz = LocalTimezone()
        >>> now = datetime.datetime.now(tz)
        >>> now.utcoffset() == now.astimezone().utcoffset()
        True
    """

    identifier = "Local"

    def utcoffset(self, dt: _datetime.datetime | None) -> _datetime.timedelta:
        return _datetime.timedelta(seconds=self._local_struct(dt).tm_gmtoff)

    def dst(self, dt: _datetime.datetime | None) -> _datetime.timedelta | None:
        tm = self._local_struct(dt)
        if tm.tm_isdst > 0:
            return _datetime.timedelta(seconds=tm.tm_gmtoff + _time.timezone)
        return _datetime.timedelta(0)

    def tzname(self, dt: _datetime.datetime | None) -> str:
        return self._local_struct(dt).tm_zone

    def fromutc(self, dt: _datetime.datetime) -> _datetime.datetime:
        stamp = (dt.replace(tzinfo=None) - _EPOCH) // _datetime.timedelta(seconds=1)
        try:
            offset = _time.localtime(stamp).tm_gmtoff
        except (OverflowError, OSError, ValueError):
            offset = _time.localtime().tm_gmtoff
        return dt + _datetime.timedelta(seconds=offset)

    @staticmethod
    def _local_struct(dt: _datetime.datetime | None) -> _time.struct_time:
        """Return the C library's view of a local wall time."""
        if dt is None:
            return _time.localtime()
        wall = dt.replace(tzinfo=None).timetuple()[:8] + (-1,)
        try:
            return _time.localtime(_time.mktime(wall))
        except (OverflowError, OSError, ValueError):
            return _time.localtime()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTimezone):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(LocalTimezone)

    def __repr__(self) -> str:
        return "LocalTimezone()"

    def __str__(self) -> str:
        return self.identifier


_local_instance = LocalTimezone()


def utc() -> _datetime.tzinfo:
    """Return the UTC time zone."""
    return _datetime.timezone.utc


def local_timezone() -> LocalTimezone:
    """Return the live system time zone."""
    return _local_instance


def fixed_offset(hours: int, minutes: int = 0) -> _datetime.tzinfo:
    """Create a fixed offset time zone.

    Args:
        hours: Hour component of offset (-14 to +14). Sign determines
            direction (positive = east of UTC).
        minutes: Minute component of offset (0 to 59). The sign is taken
            from hours.

    Raises:
        ValueError: If hours or minutes are out of range.

    Examples:
        >>> fixed_offset(5, 30)
        datetime.timezone(datetime.timedelta(seconds=19800))
    """
    if minutes < 0 or minutes > 59:
        raise ValueError(f"minutes must be 0-59, got {minutes}")
    if abs(hours) > _MAX_OFFSET_HOURS or (abs(hours) == _MAX_OFFSET_HOURS and minutes):
        raise ValueError(f"offset hours out of range: {hours}")

    sign = -1 if hours < 0 else 1
    seconds = sign * (abs(hours) * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE)
    if seconds == 0:
        return utc()
    return _datetime.timezone(_datetime.timedelta(seconds=seconds))


def resolve_timezone(value: _datetime.tzinfo | str | None) -> _datetime.tzinfo:
    """Turn a time zone specification into a tzinfo.

    Supported values:
        - None: the live system time zone
        - A tzinfo instance: returned unchanged
        - "Z", "UTC", "GMT": UTC
        - "Local": the live system time zone
        - "+HH:MM", "-HHMM", "+HH": fixed offsets
        - Any IANA name known to zoneinfo, e.g. "Europe/Paris"

    Raises:
        ValueError: If the string names no known time zone.

    Examples:
        >>> resolve_timezone("Z") is resolve_timezone("UTC")
        True

        >>> resolve_timezone("+09:00").utcoffset(None)
        datetime.timedelta(seconds=32400)
    """
    if value is None:
        return local_timezone()
    if isinstance(value, _datetime.tzinfo):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected tzinfo or string, got {type(value).__name__}")

    s = value.strip()
    if s.upper() in ("Z", "UTC", "GMT"):
        return utc()
    if s == LocalTimezone.identifier:
        return local_timezone()

    match = _OFFSET_PATTERN.match(s)
    if match:
        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        if sign_str == "-":
            hours = -hours
            if hours == 0 and minutes:
                return _datetime.timezone(-_datetime.timedelta(minutes=minutes))
        return fixed_offset(hours, minutes)

    try:
        return zoneinfo.ZoneInfo(s)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown time zone: {value!r}") from exc


def timezone_identifier(tz: _datetime.tzinfo) -> str:
    """Return a stable identifier for a time zone.

    Fixed offsets are identified by their offset, whatever display name
    they were given. Zones without a name of their own (a ZoneInfo read
    from a file, other tzinfo classes) are identified by object, so only
    the same instance shares an identifier.

    Examples:
        >>> timezone_identifier(utc())
        'UTC'

        >>> timezone_identifier(resolve_timezone("-05:00"))
        'UTC-05:00'
    """
    if isinstance(tz, zoneinfo.ZoneInfo) and tz.key is not None:
        return str(tz.key)
    if isinstance(tz, LocalTimezone):
        return tz.identifier
    if isinstance(tz, _datetime.timezone):
        return _offset_identifier(tz.utcoffset(None))
    return f"{type(tz).__name__}@{id(tz):#x}"


def _offset_identifier(offset: _datetime.timedelta) -> str:
    """Format a fixed offset as "UTC", "UTC+09:00" or "UTC-05:30:15"."""
    total = int(offset.total_seconds())
    if total == 0:
        return "UTC"
    sign = "+" if total > 0 else "-"
    hours, rest = divmod(abs(total), SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    identifier = f"UTC{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        identifier += f":{seconds:02d}"
    return identifier


__all__ = [
    "LocalTimezone",
    "utc",
    "local_timezone",
    "fixed_offset",
    "resolve_timezone",
    "timezone_identifier",
]
