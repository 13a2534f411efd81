"""Date formatting and parsing.

This module provides conversion between instants and strings using
Unicode date field patterns:
    - DateFormatter: a formatter bound to pattern, time zone, locale and calendar
    - CommonFormat: the ISO 8601 timestamp and date patterns
    - FormatterCache: bounded, thread-safe store of formatters

Examples:
    >>> from calendate.format import DateFormatter, CommonFormat
    >>> formatter = DateFormatter(CommonFormat.ISO8601_DATE, timezone="UTC")
    >>> formatter.parse("2015-12-02").day
    2
"""

from __future__ import annotations

from calendate.format.cache import FormatterCache, FormatterParameters, shared_cache
from calendate.format.pattern import CommonFormat, DateFormatter

__all__: list[str] = [
    "CommonFormat",
    "DateFormatter",
    "FormatterCache",
    "FormatterParameters",
    "shared_cache",
]
