"""Calendar helpers for Calendate.

Thin wrappers around the standard library ``calendar`` and ``datetime``
modules. Leap years and month lengths come from the standard library;
this module only adds the carrying rules used when components overflow.

This module is not part of the public API.
"""

from __future__ import annotations

import calendar as _calendar
import datetime as _datetime

from calendate._internal.constants import MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return _calendar.monthrange(year, month)[1]


def normalize_year_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year.

    Month 13 becomes month 1 of the next year, month 0 becomes
    December of the previous year.

    Examples:
        >>> normalize_year_month(2015, 13)
        (2016, 1)
        >>> normalize_year_month(2016, -1)
        (2015, 11)
    """
    carry, month_index = divmod(month - 1, MONTHS_PER_YEAR)
    return year + carry, month_index + 1


def is_supported_year(year: int) -> bool:
    """Return True if the year can be represented."""
    return MIN_YEAR <= year <= MAX_YEAR


def date_from_lenient(year: int, month: int, day: int) -> _datetime.date | None:
    """Resolve year/month/day, carrying overflow into larger fields.

    Day 0 is the last day of the previous month and day 32 of a 31-day
    month is the first of the next one.

    Returns:
        The resolved date, or None if it falls outside the supported range.

    Examples:
        >>> date_from_lenient(2016, 3, 0)
        datetime.date(2016, 2, 29)
        >>> date_from_lenient(2015, 13, 1)
        datetime.date(2016, 1, 1)
    """
    year, month = normalize_year_month(year, month)
    if not is_supported_year(year):
        return None
    first = _datetime.date(year, month, 1)
    return add_days(first, day - 1)


def add_days(date: _datetime.date, days: int) -> _datetime.date | None:
    """Return date moved by a signed number of days, or None on overflow."""
    ordinal = date.toordinal() + days
    if ordinal < 1 or ordinal > _datetime.date.max.toordinal():
        return None
    return _datetime.date.fromordinal(ordinal)


def sunday_based_weekday(date: _datetime.date) -> int:
    """Return the weekday with Sunday=1 through Saturday=7.

    Examples:
        >>> sunday_based_weekday(datetime.date(2015, 2, 1))  # a Sunday
        1
        >>> sunday_based_weekday(datetime.date(2015, 2, 28))  # a Saturday
        7
    """
    return date.isoweekday() % 7 + 1


__all__ = [
    "days_in_month",
    "normalize_year_month",
    "is_supported_year",
    "date_from_lenient",
    "add_days",
    "sunday_based_weekday",
]
