"""Internal constants for Calendate.

These constants define the limits and defaults used throughout the
library. This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

HOURS_PER_DAY: int = 24
MINUTES_PER_HOUR: int = 60
MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# Year limits follow the standard library datetime range
MIN_YEAR: int = _datetime.MINYEAR
MAX_YEAR: int = _datetime.MAXYEAR

# Weekday numbering used by the calendar fields (Sunday=1 ... Saturday=7)
SUNDAY: int = 1
SATURDAY: int = 7

# Locale used for formatting when none is given. POSIX English keeps
# fixed-format parsing independent of the user's settings.
DEFAULT_LOCALE: str = "en_US_POSIX"

# Calendar kind identifiers
GREGORIAN: str = "gregorian"

# Maximum number of formatters kept by a FormatterCache
CACHE_ENTRY_LIMIT: int = 16

# Default date for parsed strings that carry no date fields
PARSE_DEFAULT_YEAR: int = 1970
PARSE_DEFAULT_MONTH: int = 1
PARSE_DEFAULT_DAY: int = 1

MONTH_NAMES: tuple[str, ...] = (
    "",  # Placeholder for 1-indexed access
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Indexed by Sunday-based weekday (1-7)
WEEKDAY_NAMES: tuple[str, ...] = (
    "",  # Placeholder for 1-indexed access
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "MIN_YEAR",
    "MAX_YEAR",
    "SUNDAY",
    "SATURDAY",
    "DEFAULT_LOCALE",
    "GREGORIAN",
    "CACHE_ENTRY_LIMIT",
    "PARSE_DEFAULT_YEAR",
    "PARSE_DEFAULT_MONTH",
    "PARSE_DEFAULT_DAY",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
]
