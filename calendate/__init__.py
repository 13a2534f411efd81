"""Calendate: calendar-aware date handling and calendar grids.

Calendate reads and writes the fields of an instant through a calendar
(calendar kind, time zone and locale), and builds the day sequences that
calendar views display.

Core Types:
    DateTime: An instant with writable year/month/day/hour/minute/second/
        weekday fields and a time zone
    DateComponents: Optional calendar fields used to build dates
    Calendar, GregorianCalendar: Calendar contexts

Grid Functions:
    first_day_of_month, last_day_of_month: Month boundaries
    all_days_in_month: Every day of a month
    all_days_with_complete_weeks: A month padded to whole Sunday-Saturday weeks

Formatting:
    DateFormatter: Pattern-based formatter ("yyyy-MM-dd'T'HH:mm:ssZZZZZ")
    CommonFormat: ISO 8601 timestamp and date patterns
    FormatterCache: Bounded, thread-safe formatter store

Exceptions:
    CalendateError: Base exception
    InvalidDateFormat: String does not match its pattern
    InvalidStringForAutoDetect: No common format matches a string
    InvalidDateComponents: Components do not resolve to a date
    InvalidComponentsForDateArray: A month cannot be expanded into days

Example:
    >>> from calendate import DateTime, all_days_in_month
    >>> dt = DateTime.from_string("2015-12-02", "yyyy-MM-dd")
    >>> dt.day += 30
    >>> (dt.year, dt.month, dt.day)
    (2016, 1, 1)
    >>> len(all_days_in_month(2016, 2))
    29
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Calendars and components
from calendate.calendar import (
    Calendar,
    GregorianCalendar,
    default_calendar,
    set_default_calendar,
)
from calendate.components import DateComponents

# Core types
from calendate.core.datetime import DateTime
from calendate.core.grid import (
    all_days_in_month,
    all_days_with_complete_weeks,
    first_day_of_month,
    last_day_of_month,
)

# Exceptions
from calendate.errors import (
    CalendateError,
    InvalidComponentsForDateArray,
    InvalidDateComponents,
    InvalidDateFormat,
    InvalidStringForAutoDetect,
)

# Formatting
from calendate.format import (
    CommonFormat,
    DateFormatter,
    FormatterCache,
    FormatterParameters,
    shared_cache,
)

# Units
from calendate.units import CalendarField

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Calendars and components
    "Calendar",
    "GregorianCalendar",
    "default_calendar",
    "set_default_calendar",
    "DateComponents",
    # Core types
    "DateTime",
    "first_day_of_month",
    "last_day_of_month",
    "all_days_in_month",
    "all_days_with_complete_weeks",
    # Exceptions
    "CalendateError",
    "InvalidDateFormat",
    "InvalidStringForAutoDetect",
    "InvalidDateComponents",
    "InvalidComponentsForDateArray",
    # Formatting
    "CommonFormat",
    "DateFormatter",
    "FormatterCache",
    "FormatterParameters",
    "shared_cache",
    # Units
    "CalendarField",
]
