"""Calendar contexts and the calendar primitive.

A Calendar couples a calendar kind with a time zone and a locale, and
answers three questions about instants:

    - component(): what is the value of a field at this instant?
    - add(): which instant is a signed delta of fields away from this one?
    - date_from(): which instant do these components name?

Instants are aware ``datetime.datetime`` objects. Results are returned
in UTC. Calendar instances are immutable; with_timezone() and
with_locale() return modified copies.

GregorianCalendar is the only calendar kind. Leap years, month lengths
and ordinals come from the standard library.
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar

from calendate._internal.calendar import (
    add_days,
    date_from_lenient,
    days_in_month,
    is_supported_year,
    normalize_year_month,
    sunday_based_weekday,
)
from calendate._internal.constants import (
    DAYS_PER_WEEK,
    DEFAULT_LOCALE,
    GREGORIAN,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_MINUTE,
)
from calendate.components import DateComponents
from calendate.units.field import CalendarField
from calendate.units.timezone import resolve_timezone, timezone_identifier, utc


def _elapsed_seconds(components: DateComponents) -> int:
    """Return the hour, minute and second fields as a number of seconds."""
    return sum(
        (components.value(field) or 0) * field.to_seconds()
        for field in CalendarField
        if field.is_time
    )


class Calendar:
    """Base class for calendar contexts.

    Subclasses provide the arithmetic for one calendar kind and set the
    ``identifier`` class attribute.

    Attributes:
        identifier: The calendar kind, e.g. "gregorian".
        timezone: The time zone used to read wall-clock fields.
        locale: The locale identifier.
    """

    identifier: ClassVar[str] = ""

    __slots__ = ("_timezone", "_locale")

    def __init__(
        self,
        timezone: _datetime.tzinfo | str | None = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        """Create a calendar.

        Args:
            timezone: Time zone or identifier. None selects the live
                system time zone.
            locale: Locale identifier.

        Raises:
            ValueError: If the time zone identifier is unknown.
        """
        self._timezone: _datetime.tzinfo = resolve_timezone(timezone)
        self._locale: str = locale

    @property
    def timezone(self) -> _datetime.tzinfo:
        return self._timezone

    @property
    def locale(self) -> str:
        return self._locale

    def with_timezone(self, timezone: _datetime.tzinfo | str | None) -> Calendar:
        """Return a copy of this calendar in another time zone."""
        return type(self)(timezone=resolve_timezone(timezone), locale=self._locale)

    def with_locale(self, locale: str) -> Calendar:
        """Return a copy of this calendar with another locale."""
        return type(self)(timezone=self._timezone, locale=locale)

    def component(self, field: CalendarField, instant: _datetime.datetime) -> int:
        """Return the value of one field at an instant."""
        raise NotImplementedError

    def components(self, instant: _datetime.datetime) -> DateComponents:
        """Return every field at an instant, with this calendar attached."""
        raise NotImplementedError

    def add(
        self,
        delta: DateComponents,
        instant: _datetime.datetime,
        *,
        wrapping: bool = False,
    ) -> _datetime.datetime | None:
        """Return the instant a signed delta away, or None if unrepresentable."""
        raise NotImplementedError

    def date_from(self, components: DateComponents) -> _datetime.datetime | None:
        """Resolve components into an instant, or None if they do not resolve."""
        raise NotImplementedError

    def is_valid(self, components: DateComponents) -> bool:
        """Return True if the components name an existing date without overflow."""
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return (
            self.identifier == other.identifier
            and timezone_identifier(self._timezone) == timezone_identifier(other._timezone)
            and self._locale == other._locale
        )

    def __hash__(self) -> int:
        return hash((self.identifier, timezone_identifier(self._timezone), self._locale))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(timezone={timezone_identifier(self._timezone)!r}, "
            f"locale={self._locale!r})"
        )


class GregorianCalendar(Calendar):
    """The proleptic Gregorian calendar.

    Weekdays are numbered Sunday=1 through Saturday=7. Supported years
    are those of the standard library datetime (1-9999).

    Examples:
        >>> cal = GregorianCalendar("UTC")
        >>> instant = cal.date_from(DateComponents(year=2015, month=12, day=2))
        >>> cal.component(CalendarField.WEEKDAY, instant)
        4

        >>> later = cal.add(DateComponents(day=30), instant)
        >>> (later.year, later.month, later.day)
        (2016, 1, 1)
    """

    identifier: ClassVar[str] = GREGORIAN

    __slots__ = ()

    def _wall(self, instant: _datetime.datetime) -> _datetime.datetime:
        """Return the instant as wall-clock time in this calendar's zone."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=self._timezone)
        return instant.astimezone(self._timezone)

    def _localize(
        self,
        date: _datetime.date,
        wall: _datetime.datetime,
        tz: _datetime.tzinfo | None = None,
    ) -> _datetime.datetime | None:
        """Attach a wall time to a date in a zone and convert to UTC."""
        local = _datetime.datetime.combine(
            date, wall.timetz().replace(tzinfo=tz or self._timezone)
        )
        try:
            return local.astimezone(utc())
        except OverflowError:
            return None

    def component(self, field: CalendarField, instant: _datetime.datetime) -> int:
        wall = self._wall(instant)
        if field is CalendarField.WEEKDAY:
            return sunday_based_weekday(wall.date())
        return getattr(wall, field.value)

    def components(self, instant: _datetime.datetime) -> DateComponents:
        wall = self._wall(instant)
        return DateComponents(
            year=wall.year,
            month=wall.month,
            day=wall.day,
            hour=wall.hour,
            minute=wall.minute,
            second=wall.second,
            weekday=sunday_based_weekday(wall.date()),
            timezone=self._timezone,
            calendar=self,
        )

    def add(
        self,
        delta: DateComponents,
        instant: _datetime.datetime,
        *,
        wrapping: bool = False,
    ) -> _datetime.datetime | None:
        """Add a signed delta of fields to an instant.

        Without wrapping, overflow carries into larger fields: fields are
        applied from largest to smallest, years and months keep the day
        clamped to the target month's length, days and weekdays move the
        wall date keeping the wall time, and hours, minutes and seconds
        move the instant by elapsed time.

        With wrapping, each field stays inside its own range and larger
        fields are left alone (adding 1 month to December gives January of
        the same year).

        Args:
            delta: Signed amounts per field. Missing fields are zero.
            instant: The starting instant.
            wrapping: Keep each field inside its own range.

        Returns:
            The resulting instant in UTC, or None if it cannot be
            represented.

        Examples:
            >>> cal = GregorianCalendar("UTC")
            >>> start = cal.date_from(DateComponents(year=2016, month=1, day=31))
            >>> cal.add(DateComponents(month=1), start).day
            29
        """
        try:
            wall = self._wall(instant)
            if wrapping:
                return self._add_wrapping(delta, wall)
            return self._add_carrying(delta, wall)
        except OverflowError:
            return None

    def _add_carrying(
        self, delta: DateComponents, wall: _datetime.datetime
    ) -> _datetime.datetime | None:
        date: _datetime.date | None = wall.date()

        if delta.year or delta.month:
            year, month = normalize_year_month(
                wall.year + (delta.year or 0), wall.month + (delta.month or 0)
            )
            if not is_supported_year(year):
                return None
            day = min(wall.day, days_in_month(year, month))
            date = _datetime.date(year, month, day)

        days = (delta.day or 0) + (delta.weekday or 0)
        if days:
            date = add_days(date, days)
            if date is None:
                return None

        result = self._localize(date, wall)
        if result is None:
            return None

        seconds = _elapsed_seconds(delta)
        if seconds:
            result = result + _datetime.timedelta(seconds=seconds)
            # The wall time in this zone must be representable too
            self._wall(result)
        return result

    def _add_wrapping(
        self, delta: DateComponents, wall: _datetime.datetime
    ) -> _datetime.datetime | None:
        year = wall.year + (delta.year or 0)
        if not is_supported_year(year):
            return None
        month = (wall.month - 1 + (delta.month or 0)) % 12 + 1
        month_length = days_in_month(year, month)
        day = min(wall.day, month_length)
        days = (delta.day or 0) + (delta.weekday or 0)
        day = (day - 1 + days) % month_length + 1

        hour = (wall.hour + (delta.hour or 0)) % HOURS_PER_DAY
        minute = (wall.minute + (delta.minute or 0)) % MINUTES_PER_HOUR
        second = (wall.second + (delta.second or 0)) % SECONDS_PER_MINUTE

        moved = wall.replace(
            year=year, month=month, day=day, hour=hour, minute=minute, second=second
        )
        return self._localize(moved.date(), moved)

    def date_from(self, components: DateComponents) -> _datetime.datetime | None:
        """Resolve components leniently.

        Month and day overflow carry into larger fields (month 13 is
        January of the next year, day 0 is the last day of the previous
        month) and time fields carry into days. Missing month and day
        default to 1, missing time fields to 0. A weekday is not used.

        Returns:
            The instant in UTC, or None if there is no year or the date
            falls outside the supported range.
        """
        if components.year is None:
            return None

        month = components.month if components.month is not None else 1
        day = components.day if components.day is not None else 1
        date = date_from_lenient(components.year, month, day)
        if date is None:
            return None

        seconds = _elapsed_seconds(components)
        days, seconds = divmod(seconds, SECONDS_PER_DAY)
        if days:
            date = add_days(date, days)
            if date is None:
                return None

        midnight = _datetime.datetime.combine(date, _datetime.time())
        wall = midnight + _datetime.timedelta(seconds=seconds)
        return self._localize(wall.date(), wall, components.timezone)

    def is_valid(self, components: DateComponents) -> bool:
        if components.year is None or not is_supported_year(components.year):
            return False
        month = components.month if components.month is not None else 1
        if not 1 <= month <= 12:
            return False
        day = components.day if components.day is not None else 1
        if not 1 <= day <= days_in_month(components.year, month):
            return False

        limits = (
            (components.hour, HOURS_PER_DAY),
            (components.minute, MINUTES_PER_HOUR),
            (components.second, SECONDS_PER_MINUTE),
        )
        for value, limit in limits:
            if value is not None and not 0 <= value < limit:
                return False

        if components.weekday is not None:
            if not 1 <= components.weekday <= DAYS_PER_WEEK:
                return False
            date = _datetime.date(components.year, month, day)
            return sunday_based_weekday(date) == components.weekday
        return True


_default_calendar: Calendar | None = None


def default_calendar() -> Calendar:
    """Return the working calendar used when none is given.

    Unless configured with set_default_calendar(), this is a
    GregorianCalendar in the live system time zone.
    """
    if _default_calendar is not None:
        return _default_calendar
    return GregorianCalendar()


def set_default_calendar(calendar: Calendar | None) -> None:
    """Configure the working calendar. None restores the built-in default."""
    global _default_calendar
    _default_calendar = calendar


__all__ = [
    "Calendar",
    "GregorianCalendar",
    "default_calendar",
    "set_default_calendar",
]
