"""CalendarField enumeration for the readable and writable date fields.

This module provides the CalendarField enum naming the calendar
components that a DateTime exposes as properties.
"""

from __future__ import annotations

from enum import Enum


class CalendarField(Enum):
    """Calendar components of a date.

    The value of each member is the name of the matching DateTime
    property and DateComponents attribute.

    Examples:
        >>> CalendarField.MONTH.value
        'month'

        >>> CalendarField("day")
        <CalendarField.DAY: 'day'>

        >>> CalendarField.HOUR.is_time
        True
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    WEEKDAY = "weekday"

    @property
    def is_time(self) -> bool:
        """Return True for fields that measure absolute elapsed time.

        Hours, minutes and seconds move the instant by a fixed number of
        seconds. Date fields move the wall calendar instead.
        """
        return self in (CalendarField.HOUR, CalendarField.MINUTE, CalendarField.SECOND)

    def to_seconds(self) -> int | None:
        """Return the length of one unit in seconds.

        Returns:
            The number of seconds, or None for calendar fields whose
            length varies (year, month, day and weekday, which may span a
            daylight saving transition).
        """
        conversions: dict[CalendarField, int | None] = {
            CalendarField.SECOND: 1,
            CalendarField.MINUTE: 60,
            CalendarField.HOUR: 3600,
        }
        return conversions.get(self)


__all__ = ["CalendarField"]
