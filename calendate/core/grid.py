"""Calendar grids: month boundaries and day sequences.

Functions:
    first_day_of_month: The first day of a year/month.
    last_day_of_month: The last day of a year/month.
    all_days_in_month: Every day of a year/month, in order.
    all_days_with_complete_weeks: Every day of a year/month, padded with
        days of the adjacent months so that the sequence covers whole
        Sunday-to-Saturday weeks, as shown by a calendar view.

Examples:
    >>> days = all_days_with_complete_weeks(2015, 12)
    >>> len(days)
    35
    >>> (days[0].month, days[0].day), (days[-1].month, days[-1].day)
    ((11, 29), (1, 2))
"""

from __future__ import annotations

from calendate._internal.constants import SATURDAY, SUNDAY
from calendate.calendar import Calendar, GregorianCalendar, default_calendar
from calendate.components import DateComponents
from calendate.core.datetime import DateTime
from calendate.errors import InvalidComponentsForDateArray, InvalidDateComponents


def first_day_of_month(
    year: int, month: int, calendar: Calendar | None = None
) -> DateTime:
    """Return the first day of a month at midnight.

    Months outside 1-12 carry into the year (month 13 is January of the
    next year).

    Raises:
        InvalidDateComponents: If the year is not supported.

    Examples:
        >>> first_day_of_month(2016, 2).weekday  # a Monday
        2
    """
    calendar = calendar if calendar is not None else default_calendar()
    return DateTime.from_components(
        DateComponents(year=year, month=month, day=1, calendar=calendar)
    )


def last_day_of_month(
    year: int, month: int, calendar: Calendar | None = None
) -> DateTime:
    """Return the last day of a month at midnight.

    Day 0 of the following month is the last day of this one, so month
    lengths and leap years come from the calendar.

    Raises:
        InvalidDateComponents: If the year is not supported.

    Examples:
        >>> last_day_of_month(2016, 2).day
        29
        >>> last_day_of_month(2015, 2).day
        28
    """
    calendar = calendar if calendar is not None else default_calendar()
    return DateTime.from_components(
        DateComponents(year=year, month=month + 1, day=0, calendar=calendar)
    )


def _days_of_month(
    year: int, month: int, first: DateTime, last: DateTime, calendar: Calendar
) -> list[DateTime]:
    return [
        DateTime.from_components(
            DateComponents(year=year, month=month, day=day, calendar=calendar)
        )
        for day in range(first.day, last.day + 1)
    ]


def all_days_in_month(
    year: int, month: int, calendar: Calendar | None = None
) -> list[DateTime]:
    """Return every day of a month, in ascending order.

    Raises:
        InvalidComponentsForDateArray: If the month cannot be built.

    Examples:
        >>> [dt.day for dt in all_days_in_month(2015, 2)][-3:]
        [26, 27, 28]
    """
    calendar = calendar if calendar is not None else default_calendar()
    try:
        first = first_day_of_month(year, month, calendar)
        last = last_day_of_month(year, month, calendar)
        return _days_of_month(year, month, first, last, calendar)
    except InvalidDateComponents as exc:
        raise InvalidComponentsForDateArray(year, month) from exc


def all_days_with_complete_weeks(year: int, month: int) -> list[DateTime]:
    """Return the days of a month padded to whole weeks.

    If the month does not start on a Sunday, the preceding days back to
    Sunday are prepended; if it does not end on a Saturday, the following
    days up to Saturday are appended. The Gregorian calendar is always
    used, since the grid is laid out by Gregorian weekdays.

    Returns:
        A list whose length is a multiple of 7.

    Raises:
        InvalidComponentsForDateArray: If the month or its padding cannot
            be built.

    Examples:
        >>> len(all_days_with_complete_weeks(2015, 2))  # Sunday to Saturday
        28
    """
    calendar = GregorianCalendar()
    try:
        first = first_day_of_month(year, month, calendar)
        last = last_day_of_month(year, month, calendar)

        days: list[DateTime] = []

        # Days of the previous month back to Sunday
        for i in range(first.weekday - SUNDAY, 0, -1):
            padding = first.copy()
            padding.set_field("day", first.day - i)
            days.append(padding)

        days.extend(_days_of_month(year, month, first, last, calendar))

        # Days of the next month up to Saturday
        for offset in range(1, SATURDAY - last.weekday + 1):
            padding = last.copy()
            padding.set_field("day", last.day + offset)
            days.append(padding)

        return days
    except InvalidDateComponents as exc:
        raise InvalidComponentsForDateArray(year, month) from exc


__all__ = [
    "first_day_of_month",
    "last_day_of_month",
    "all_days_in_month",
    "all_days_with_complete_weeks",
]
