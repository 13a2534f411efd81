"""DateTime value combining an instant with a calendar.

This module provides the DateTime class. A DateTime is an absolute
instant read through a calendar context (calendar kind, time zone and
locale). Each calendar field can be read and written as a property;
writing a field moves the instant so that the other fields keep their
values wherever the calendar allows it.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import TYPE_CHECKING

from calendate._internal.constants import DEFAULT_LOCALE
from calendate.calendar import Calendar, default_calendar
from calendate.components import DateComponents
from calendate.errors import (
    InvalidDateComponents,
    InvalidDateFormat,
    InvalidStringForAutoDetect,
)
from calendate.format.cache import FormatterParameters, shared_cache
from calendate.format.pattern import CommonFormat, DateFormatter
from calendate.units.field import CalendarField
from calendate.units.timezone import local_timezone, utc

if TYPE_CHECKING:
    from calendate.format.cache import FormatterCache

logger = logging.getLogger(__name__)


def _field_property(field: CalendarField, doc: str) -> property:
    """Build a property reading a field through the calendar.

    Assigning to the property calls DateTime.set_field and logs instead
    of raising when the new value cannot be represented.
    """

    def getter(self: DateTime) -> int:
        return self._calendar.component(field, self._instant)

    def setter(self: DateTime, value: int) -> None:
        self._set_field_quietly(field, value)

    return property(getter, setter, doc=doc)


def _check_readable(calendar: Calendar, instant: _datetime.datetime) -> None:
    """Raise InvalidDateComponents if the calendar cannot read the instant.

    Instants near the ends of the supported range may have a wall time
    outside years 1-9999 in some zones.
    """
    try:
        calendar.components(instant)
    except OverflowError as exc:
        raise InvalidDateComponents(instant.year, instant.month, instant.day) from exc


class DateTime:
    """An instant read through a calendar.

    DateTime has value semantics: copy() returns an independent value, and
    field assignment only changes the value it is applied to.

    Field properties can be assigned. Overflow carries into larger
    fields, so ``dt.day += 30`` moves into the next month and
    ``dt.month -= 2`` into the previous year when needed. Assignments
    that cannot be represented are logged and leave the value unchanged;
    use set_field() to get an exception instead.

    Attributes:
        instant: The absolute instant, as an aware UTC datetime.
        calendar: The calendar the fields are read through.
        year, month, day, hour, minute, second: Calendar fields.
        weekday: Day of week, Sunday=1 through Saturday=7.
        timezone: The calendar's time zone.

    Examples:
        >>> dt = DateTime.from_string("2015-12-02", "yyyy-MM-dd")
        >>> dt.month += 1
        >>> (dt.year, dt.month, dt.day)
        (2016, 1, 2)

        >>> dt = DateTime.from_string("2016-07-18T09:23:34+00:00",
        ...                           CommonFormat.ISO8601_TIMESTAMP)
        >>> dt.timezone = "UTC"
        >>> dt.hour += 21
        >>> (dt.day, dt.hour)
        (19, 6)
    """

    __slots__ = ("_instant", "_calendar")

    def __init__(
        self,
        instant: _datetime.datetime | None = None,
        calendar: Calendar | None = None,
    ) -> None:
        """Create a DateTime from an existing instant.

        Args:
            instant: The instant; None means now. A naive datetime is
                taken to be wall time in the calendar's time zone.
            calendar: The calendar; None selects the default calendar.

        Raises:
            InvalidDateComponents: If the instant cannot be read as a date
                in the calendar's time zone.
        """
        calendar = calendar if calendar is not None else default_calendar()
        if instant is None:
            instant = _datetime.datetime.now(utc())
        elif instant.tzinfo is None:
            instant = instant.replace(tzinfo=calendar.timezone)
        try:
            instant = instant.astimezone(utc())
        except OverflowError as exc:
            raise InvalidDateComponents(instant.year, instant.month, instant.day) from exc
        _check_readable(calendar, instant)
        self._calendar: Calendar = calendar
        self._instant: _datetime.datetime = instant

    @classmethod
    def now(cls, calendar: Calendar | None = None) -> DateTime:
        """Return the current instant read through a calendar."""
        return cls(None, calendar)

    @classmethod
    def from_components(cls, components: DateComponents) -> DateTime:
        """Create a DateTime from components and their attached calendar.

        Overflowing fields carry: month 13 is January of the next year and
        day 0 is the last day of the previous month.

        Raises:
            InvalidDateComponents: If no calendar is attached, there is no
                year, or the date is outside the supported range.

        Examples:
            >>> from calendate.calendar import GregorianCalendar
            >>> DateTime.from_components(DateComponents(
            ...     year=2015, month=3, day=0, calendar=GregorianCalendar())).day
            28
        """
        instant = components.date()
        if instant is None:
            raise InvalidDateComponents(components.year, components.month, components.day)
        return cls(instant, components.calendar)

    @classmethod
    def from_string(
        cls,
        string: str,
        format: str | DateFormatter,
        calendar: Calendar | None = None,
        *,
        cache: FormatterCache | None = None,
    ) -> DateTime:
        """Parse a string.

        When format is a pattern, the formatter comes from the cache and
        parses strings without an offset in the live system time zone.
        When format is a DateFormatter it is used as given and added to
        the cache.

        Args:
            string: The text to parse.
            format: A pattern, CommonFormat or DateFormatter.
            calendar: Calendar for the result; None selects the default.
            cache: Formatter cache; None selects the shared cache.

        Raises:
            InvalidDateFormat: If the string does not match.
        """
        calendar = calendar if calendar is not None else default_calendar()
        cache = cache if cache is not None else shared_cache()

        if isinstance(format, DateFormatter):
            formatter = format
            cache.add_formatter(formatter)
        else:
            formatter = cache.formatter_for(FormatterParameters(format, calendar=calendar))

        instant = formatter.parse(string)
        if instant is None:
            raise InvalidDateFormat(string, formatter.format)
        return cls(instant, calendar)

    @classmethod
    def detect(
        cls,
        string: str,
        calendar: Calendar | None = None,
        *,
        cache: FormatterCache | None = None,
    ) -> DateTime:
        """Parse a string in whichever CommonFormat it matches.

        Raises:
            InvalidStringForAutoDetect: If no common format matches.

        Examples:
            >>> DateTime.detect("2015-12-02").day
            2
        """
        for candidate in CommonFormat:
            try:
                return cls.from_string(string, candidate, calendar, cache=cache)
            except InvalidDateFormat:
                continue
        raise InvalidStringForAutoDetect(string)

    @property
    def instant(self) -> _datetime.datetime:
        return self._instant

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    year = _field_property(CalendarField.YEAR, "The year.")
    month = _field_property(CalendarField.MONTH, "The month (1-12).")
    day = _field_property(CalendarField.DAY, "The day of the month.")
    hour = _field_property(CalendarField.HOUR, "The hour (0-23).")
    minute = _field_property(CalendarField.MINUTE, "The minute (0-59).")
    second = _field_property(CalendarField.SECOND, "The second (0-59).")
    weekday = _field_property(
        CalendarField.WEEKDAY, "The day of week. Sunday = 1 and Saturday = 7."
    )

    @property
    def timezone(self) -> _datetime.tzinfo:
        """The time zone fields are read in.

        Assigning a zone (tzinfo or identifier) keeps the instant, so the
        same moment reads as different wall-clock fields afterwards. A zone
        in which the instant falls outside years 1-9999 is logged and not
        applied.
        """
        return self._calendar.timezone

    @timezone.setter
    def timezone(self, value: _datetime.tzinfo | str) -> None:
        calendar = self._calendar.with_timezone(value)
        try:
            _check_readable(calendar, self._instant)
        except InvalidDateComponents as exc:
            logger.warning("cannot set timezone to %r on %s: %s", value, self, exc)
            return
        self._calendar = calendar

    @property
    def components(self) -> DateComponents:
        """Snapshot of every field, with calendar and time zone attached."""
        return self._calendar.components(self._instant)

    def get(self, field: CalendarField | str) -> int:
        """Return the value of a field."""
        return self._calendar.component(CalendarField(field), self._instant)

    def set_field(self, field: CalendarField | str, value: int) -> None:
        """Set one field, keeping the others where possible.

        The calendar is asked to move by the difference between the new
        and current value, carrying overflow into larger fields. If it
        cannot, the target is rebuilt from the current components plus
        that difference and resolved from scratch.

        Raises:
            InvalidDateComponents: If neither way gives a valid instant.
                The value is left unchanged.

        Examples:
            >>> dt = DateTime.from_string("2015-12-02", "yyyy-MM-dd")
            >>> dt.set_field(CalendarField.DAY, 32)
            >>> (dt.month, dt.day)
            (1, 1)
        """
        self._instant = self._instant_by_setting(CalendarField(field), value)

    def _set_field_quietly(self, field: CalendarField, value: int) -> None:
        try:
            self.set_field(field, value)
        except InvalidDateComponents as exc:
            logger.warning("cannot set %s to %d on %s: %s", field.value, value, self, exc)

    def _instant_by_setting(self, field: CalendarField, value: int) -> _datetime.datetime:
        calendar = self._calendar
        delta = DateComponents.delta(field, value - calendar.component(field, self._instant))

        moved = calendar.add(delta, self._instant)
        if moved is not None:
            return moved

        # Calendars may only support moving forward; resolve the target directly
        target = calendar.components(self._instant).offset_by(delta)
        resolved = calendar.date_from(target)
        if resolved is None:
            raise InvalidDateComponents(target.year, target.month, target.day)
        return resolved

    def adding(self, *, wrapping: bool = False, **deltas: int) -> DateTime:
        """Return a new DateTime moved by signed field amounts.

        Args:
            wrapping: Keep each field inside its own range instead of
                carrying into larger fields.
            **deltas: Amounts keyed by field name (year, month, day, hour,
                minute, second, weekday).

        Raises:
            TypeError: If a keyword is not a field name.
            InvalidDateComponents: If the result cannot be represented.

        Examples:
            >>> dt = DateTime.from_string("2015-12-02", "yyyy-MM-dd")
            >>> dt.adding(month=1).year
            2016
            >>> dt.adding(month=1, wrapping=True).year
            2015
        """
        names = {field.value for field in CalendarField}
        unknown = sorted(set(deltas) - names)
        if unknown:
            raise TypeError(f"unknown calendar fields: {', '.join(unknown)}")

        delta = DateComponents(**deltas)
        moved = self._calendar.add(delta, self._instant, wrapping=wrapping)
        if moved is None:
            target = self.components.offset_by(delta)
            raise InvalidDateComponents(target.year, target.month, target.day)
        return DateTime(moved, self._calendar)

    def copy(self) -> DateTime:
        """Return an independent copy."""
        return DateTime(self._instant, self._calendar)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> DateTime:
        return self.copy()

    def string_for_format(
        self, format: str, *, cache: FormatterCache | None = None
    ) -> str:
        """Render in UTC with the default locale and this value's calendar.

        Examples:
            >>> dt = DateTime.from_string("2016-07-18T09:23:34+00:00",
            ...                           CommonFormat.ISO8601_TIMESTAMP)
            >>> dt.string_for_format("HH:mm")
            '09:23'
        """
        return self._render(format, utc(), cache)

    def string_for_format_current_timezone(
        self, format: str, *, cache: FormatterCache | None = None
    ) -> str:
        """Render in the live system time zone."""
        return self._render(format, local_timezone(), cache)

    def _render(
        self,
        format: str,
        timezone: _datetime.tzinfo,
        cache: FormatterCache | None,
    ) -> str:
        cache = cache if cache is not None else shared_cache()
        parameters = FormatterParameters(format, timezone, DEFAULT_LOCALE, self._calendar)
        return cache.formatter_for(parameters).render(self._instant)

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        """Two DateTimes are equal if they are the same instant."""
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant == other._instant

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant < other._instant

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant <= other._instant

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant > other._instant

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant >= other._instant

    # Mutable values are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Return the ISO 8601 timestamp in UTC."""
        return self.string_for_format(CommonFormat.ISO8601_TIMESTAMP)

    def __repr__(self) -> str:
        return f"DateTime({str(self)!r}, calendar={self._calendar!r})"


__all__ = ["DateTime"]
