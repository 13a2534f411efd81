"""DateComponents: a bag of optional calendar fields.

DateComponents serves two purposes:
    - Construction input for DateTime.from_components, where the fields
      name a wall-clock date in an attached calendar.
    - Signed deltas for Calendar.add, where each field is an amount to
      move by.

Every field is optional. Resolution into an instant requires a calendar.
"""

from __future__ import annotations

import dataclasses
import datetime as _datetime
from typing import TYPE_CHECKING

from calendate.units.field import CalendarField

if TYPE_CHECKING:
    from calendate.calendar import Calendar


@dataclasses.dataclass
class DateComponents:
    """Optional year/month/day/hour/minute/second/weekday fields.

    Attributes:
        year: The year.
        month: The month; may overflow (13 is January of the next year).
        day: The day; may overflow (0 is the last day of the previous month).
        hour: The hour.
        minute: The minute.
        second: The second.
        weekday: Sunday=1 through Saturday=7. Informational when resolving;
            a day delta when used with Calendar.add.
        timezone: Time zone for resolution. Overrides the calendar's zone.
        calendar: The calendar used to resolve the fields.

    Examples:
        >>> from calendate.calendar import GregorianCalendar
        >>> components = DateComponents(year=2016, month=3, day=0,
        ...                             calendar=GregorianCalendar("UTC"))
        >>> components.date().day
        29
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    weekday: int | None = None
    timezone: _datetime.tzinfo | None = None
    calendar: Calendar | None = None

    def value(self, field: CalendarField) -> int | None:
        """Return the value stored for a field."""
        return getattr(self, field.value)

    @classmethod
    def delta(cls, field: CalendarField, amount: int) -> DateComponents:
        """Return components holding a single signed delta.

        Examples:
            >>> DateComponents.delta(CalendarField.DAY, -3).day
            -3
        """
        return cls(**{field.value: amount})

    def offset_by(self, delta: DateComponents) -> DateComponents:
        """Return these components with a delta added field by field.

        Fields missing from the delta are kept as they are. A weekday
        delta moves the day. The result is not normalized; month 13 or
        day 0 are left for the calendar to carry.

        Examples:
            >>> DateComponents(year=2015, month=12, day=2).offset_by(
            ...     DateComponents(month=-2)).month
            10
        """
        summed: dict[str, int | None] = {}
        for field in CalendarField:
            if field is CalendarField.WEEKDAY:
                continue
            current = self.value(field)
            amount = delta.value(field) or 0
            if field is CalendarField.DAY:
                amount += delta.weekday or 0
            summed[field.value] = None if current is None else current + amount
        return dataclasses.replace(self, weekday=None, **summed)

    def date(self) -> _datetime.datetime | None:
        """Resolve into an instant, or None if that is not possible."""
        if self.calendar is None:
            return None
        return self.calendar.date_from(self)

    @property
    def is_valid_date(self) -> bool:
        """Return True if the fields name an existing date exactly.

        Unlike date(), no overflow is accepted: month 13 or day 0 make
        the components invalid.
        """
        if self.calendar is None:
            return False
        return self.calendar.is_valid(self)


__all__ = ["DateComponents"]
