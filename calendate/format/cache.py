"""Formatter cache.

Building a DateFormatter compiles its pattern, so formatters are kept in
a FormatterCache keyed by everything that affects their output: pattern,
time zone, locale and calendar kind.

The cache holds at most ``capacity`` formatters. Adding one more first
evicts a single entry chosen at random; there is no recency tracking.
All access goes through a lock so one cache can be shared by threads.

A process-wide cache is returned by shared_cache(). Functions that use
formatters accept a ``cache`` argument to use another one instead.
"""

from __future__ import annotations

import dataclasses
import datetime as _datetime
import logging
import random
import threading

from calendate._internal.constants import CACHE_ENTRY_LIMIT, DEFAULT_LOCALE
from calendate.calendar import Calendar, default_calendar
from calendate.format.pattern import CommonFormat, DateFormatter
from calendate.units.timezone import resolve_timezone, timezone_identifier

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class FormatterParameters:
    """The combination a formatter is bound to.

    Attributes:
        format: The pattern. Mandatory.
        timezone: Time zone; None selects the live system time zone.
        locale: Locale identifier; defaults to en_US_POSIX.
        calendar: Calendar; None selects the default calendar.

    Examples:
        >>> FormatterParameters("yyyy-MM-dd", timezone="UTC").id
        'yyyy-MM-dd|UTC|en_US_POSIX|gregorian'
    """

    format: str
    timezone: _datetime.tzinfo | str | None = None
    locale: str = DEFAULT_LOCALE
    calendar: Calendar | None = None

    @property
    def id(self) -> str:
        """Composite key naming this combination."""
        fmt = self.format.value if isinstance(self.format, CommonFormat) else self.format
        calendar = self.calendar if self.calendar is not None else default_calendar()
        return "|".join(
            (
                fmt,
                timezone_identifier(resolve_timezone(self.timezone)),
                self.locale,
                calendar.identifier,
            )
        )

    def build(self) -> DateFormatter:
        """Create a new formatter bound to these parameters."""
        return DateFormatter(
            self.format,
            timezone=self.timezone,
            locale=self.locale,
            calendar=self.calendar,
        )


class FormatterCache:
    """Bounded, thread-safe mapping of parameters to formatters.

    Examples:
        >>> cache = FormatterCache(capacity=2)
        >>> first = cache.formatter_for(FormatterParameters("yyyy", "UTC"))
        >>> cache.formatter_for(FormatterParameters("yyyy", "UTC")) is first
        True
        >>> len(cache)
        1
    """

    def __init__(self, capacity: int = CACHE_ENTRY_LIMIT) -> None:
        """Create an empty cache.

        Raises:
            ValueError: If capacity is less than 1.
        """
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._formatters: dict[str, DateFormatter] = {}
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def formatter_for(self, parameters: FormatterParameters) -> DateFormatter:
        """Return the cached formatter for parameters, building it on a miss.

        The returned formatter is shared; it must not be modified.
        """
        key = parameters.id
        with self._lock:
            formatter = self._formatters.get(key)
            if formatter is not None:
                return formatter

            formatter = parameters.build()
            self._insert(key, formatter)
            return formatter

    def add_formatter(self, formatter: DateFormatter) -> None:
        """Store a caller-built formatter, replacing any entry with its key."""
        key = formatter.cache_key
        with self._lock:
            self._insert(key, formatter)

    def _insert(self, key: str, formatter: DateFormatter) -> None:
        # Caller holds the lock
        if len(self._formatters) >= self._capacity:
            self._evict_one()
        self._formatters[key] = formatter

    def _evict_one(self) -> None:
        victim = random.choice(list(self._formatters))
        del self._formatters[victim]
        logger.debug("evicted formatter %r from cache", victim)

    def clear(self) -> None:
        """Remove every cached formatter."""
        with self._lock:
            self._formatters.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._formatters)

    def __contains__(self, parameters: object) -> bool:
        if isinstance(parameters, FormatterParameters):
            key = parameters.id
        elif isinstance(parameters, str):
            key = parameters
        else:
            return False
        with self._lock:
            return key in self._formatters

    def __repr__(self) -> str:
        return f"FormatterCache(capacity={self._capacity}, size={len(self)})"


_shared_cache = FormatterCache()


def shared_cache() -> FormatterCache:
    """Return the process-wide formatter cache."""
    return _shared_cache


__all__ = ["FormatterParameters", "FormatterCache", "shared_cache"]
