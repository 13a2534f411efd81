"""Calendate exception hierarchy.

All Calendate-specific exceptions inherit from CalendateError. Every error
keeps the values that caused it as attributes so callers can report them.
"""

from __future__ import annotations


class CalendateError(Exception):
    """Base exception for all Calendate errors."""

    pass


class InvalidDateFormat(CalendateError):
    """A string does not match the format used to parse it.

    Examples:
        - "01-02-2015" parsed with "yyyy-MM-dd"
        - "2016-13-01" parsed with "yyyy-MM-dd" (month out of range)
    """

    def __init__(self, string: str, format: str) -> None:
        self.string = string
        self.format = format
        super().__init__(f"invalid date format: string {string!r} does not match {format!r}")


class InvalidStringForAutoDetect(CalendateError):
    """No known format could parse a string during format detection."""

    def __init__(self, string: str) -> None:
        self.string = string
        super().__init__(f"could not detect a date format for string {string!r}")


class InvalidDateComponents(CalendateError):
    """Date components do not resolve to a valid instant.

    Any of the fields may be None when it was unknown or did not apply.

    Examples:
        - Components without a calendar attached
        - Components without a year
        - A year outside the supported range
    """

    def __init__(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> None:
        self.year = year
        self.month = month
        self.day = day
        super().__init__(
            f"invalid date components: year={year}, month={month}, day={day}"
        )


class InvalidComponentsForDateArray(CalendateError):
    """A year/month pair cannot be expanded into a sequence of days."""

    def __init__(self, year: int | None, month: int | None) -> None:
        self.year = year
        self.month = month
        super().__init__(
            f"invalid components for date array: year={year}, month={month}"
        )


__all__ = [
    "CalendateError",
    "InvalidDateFormat",
    "InvalidStringForAutoDetect",
    "InvalidDateComponents",
    "InvalidComponentsForDateArray",
]
