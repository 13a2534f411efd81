"""Date pattern formatting and parsing.

This module provides DateFormatter, which renders instants to strings
and parses strings back using Unicode date field patterns (the pattern
language of ICU and Apple platforms).

Supported Symbols:
    y, yyyy - Year (yyyy zero-pads to 4 digits)
    yy      - Two-digit year (parsed into 2000-2099)
    M, MM   - Month number
    MMM     - Abbreviated month name (Jan)
    MMMM    - Full month name (January)
    d, dd   - Day of month
    E..EEE  - Abbreviated weekday name (Sun)
    EEEE    - Full weekday name (Sunday)
    H, HH   - Hour 0-23
    h, hh   - Hour 1-12
    a       - AM/PM marker
    m, mm   - Minute
    s, ss   - Second
    S...    - Fraction of a second, one digit per letter
    Z..ZZZ  - UTC offset (+0900)
    ZZZZ    - Localized GMT offset (GMT+09:00)
    ZZZZZ   - ISO 8601 offset (Z, +09:00)
    '...'   - Literal text; '' is a single quote

Names are rendered in POSIX English whatever the locale.

Examples:
    >>> from calendate.units.timezone import utc
    >>> formatter = DateFormatter("yyyy-MM-dd'T'HH:mm:ssZZZZZ", timezone=utc())
    >>> instant = formatter.parse("2016-07-18T09:23:34+00:00")
    >>> formatter.render(instant)
    '2016-07-18T09:23:34Z'
"""

from __future__ import annotations

import datetime as _datetime
import re
from enum import Enum
from typing import NamedTuple

from calendate._internal.constants import (
    DEFAULT_LOCALE,
    MONTH_NAMES,
    PARSE_DEFAULT_DAY,
    PARSE_DEFAULT_MONTH,
    PARSE_DEFAULT_YEAR,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    WEEKDAY_NAMES,
)
from calendate.calendar import Calendar, default_calendar
from calendate.components import DateComponents
from calendate.units.timezone import resolve_timezone, timezone_identifier


class CommonFormat(str, Enum):
    """Frequently used patterns."""

    # Timestamp based on ISO 8601. Preferably used with UTC.
    ISO8601_TIMESTAMP = "yyyy-MM-dd'T'HH:mm:ssZZZZZ"

    # Calendar date as defined by ISO 8601
    ISO8601_DATE = "yyyy-MM-dd"


class _Token(NamedTuple):
    """A pattern field (symbol and repeat count) or a run of literal text."""

    symbol: str
    count: int
    text: str = ""


_LITERAL = ""
_SUPPORTED_SYMBOLS = frozenset("yMdEHhamsSZ")

_MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)
_WEEKDAY_ABBREVIATIONS = tuple(name[:3] for name in WEEKDAY_NAMES)


def tokenize(pattern: str) -> list[_Token]:
    """Split a pattern into field tokens and literal text.

    Raises:
        ValueError: If the pattern uses an unsupported letter or has an
            unterminated quote.

    Examples:
        >>> [t.symbol or t.text for t in tokenize("yyyy-MM")]
        ['y', '-', 'M']
    """
    tokens: list[_Token] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(_Token(_LITERAL, 0, "'"))
                i += 2
                continue
            text = []
            i += 1
            while True:
                if i >= n:
                    raise ValueError(f"unterminated quote in pattern {pattern!r}")
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        text.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                text.append(pattern[i])
                i += 1
            tokens.append(_Token(_LITERAL, 0, "".join(text)))
        elif char.isascii() and char.isalpha():
            if char not in _SUPPORTED_SYMBOLS:
                raise ValueError(
                    f"unsupported pattern symbol {char!r} in {pattern!r}"
                )
            j = i
            while j < n and pattern[j] == char:
                j += 1
            tokens.append(_Token(char, j - i))
            i = j
        else:
            tokens.append(_Token(_LITERAL, 0, char))
            i += 1
    return tokens


def _names_pattern(names: tuple[str, ...]) -> str:
    # Longest first so "June" is not matched as "Jun"
    ordered = sorted((name for name in names if name), key=len, reverse=True)
    return "(?i:" + "|".join(re.escape(name) for name in ordered) + ")"


def _token_regex(token: _Token) -> str:
    """Return the regex matching one token (without a capture group)."""
    symbol, count = token.symbol, token.count
    if symbol == "y":
        if count == 2:
            return r"\d{2}"
        if count == 1:
            return r"\d{1,4}"
        # Rendering pads to count digits but never truncates
        return rf"\d{{{count},}}"
    if symbol == "M" and count >= 3:
        return _names_pattern(MONTH_NAMES if count >= 4 else _MONTH_ABBREVIATIONS)
    if symbol == "E":
        return _names_pattern(WEEKDAY_NAMES if count >= 4 else _WEEKDAY_ABBREVIATIONS)
    if symbol in "MdHhms":
        return r"\d{1,2}" if count == 1 else r"\d{2}"
    if symbol == "a":
        return "(?i:AM|PM)"
    if symbol == "S":
        return rf"\d{{{count}}}"
    if symbol == "Z":
        if count == 5:
            return r"Z|[+-]\d{2}:\d{2}"
        if count == 4:
            return r"GMT(?:[+-]\d{2}:\d{2})?"
        return r"[+-]\d{4}"
    raise ValueError(f"unsupported pattern symbol {symbol!r}")


def _offset_from_text(text: str) -> _datetime.tzinfo:
    """Convert a parsed offset ("Z", "+0900", "GMT+09:00") to a tzinfo."""
    if text.startswith("GMT"):
        text = text[3:] or "Z"
    return resolve_timezone(text)


def _format_offset(offset: _datetime.timedelta, count: int) -> str:
    total = int(offset.total_seconds())
    if count == 5 and total == 0:
        return "Z"
    if count == 4 and total == 0:
        return "GMT"
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    hours = total // SECONDS_PER_HOUR
    minutes = (total % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
    if count == 5:
        return f"{sign}{hours:02d}:{minutes:02d}"
    if count == 4:
        return f"GMT{sign}{hours:02d}:{minutes:02d}"
    return f"{sign}{hours:02d}{minutes:02d}"


class DateFormatter:
    """Formatter bound to a pattern, time zone, locale and calendar.

    A DateFormatter is immutable once built, so a single instance can be
    shared by every caller using the same combination.

    Attributes:
        format: The pattern string.
        timezone: Zone used to render, and to parse strings without an offset.
        locale: Locale identifier.
        calendar: Calendar whose kind resolves parsed fields.

    Examples:
        >>> formatter = DateFormatter("dd/MM/yyyy", timezone="UTC")
        >>> instant = formatter.parse("02/12/2015")
        >>> (instant.year, instant.month, instant.day)
        (2015, 12, 2)
        >>> formatter.parse("2015-12-02") is None
        True
    """

    __slots__ = ("_format", "_timezone", "_locale", "_calendar", "_tokens", "_regex")

    def __init__(
        self,
        format: str,
        timezone: _datetime.tzinfo | str | None = None,
        locale: str = DEFAULT_LOCALE,
        calendar: Calendar | None = None,
    ) -> None:
        """Create a formatter.

        Args:
            format: The pattern.
            timezone: Time zone or identifier; None selects the live
                system time zone.
            locale: Locale identifier.
            calendar: Calendar kind to use; None selects the default
                calendar.

        Raises:
            ValueError: If the pattern or time zone is invalid.
        """
        if isinstance(format, CommonFormat):
            format = format.value
        self._format: str = format
        self._timezone: _datetime.tzinfo = resolve_timezone(timezone)
        self._locale: str = locale
        base = calendar if calendar is not None else default_calendar()
        self._calendar: Calendar = base.with_timezone(self._timezone).with_locale(locale)
        self._tokens: list[_Token] = tokenize(format)
        self._regex: re.Pattern[str] = re.compile(
            "".join(
                re.escape(token.text) if token.symbol == _LITERAL
                else f"({_token_regex(token)})"
                for token in self._tokens
            )
        )

    @property
    def format(self) -> str:
        return self._format

    @property
    def timezone(self) -> _datetime.tzinfo:
        return self._timezone

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    def render(self, instant: _datetime.datetime) -> str:
        """Render an instant in this formatter's time zone.

        Naive instants are taken to be in the formatter's time zone.
        """
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=self._timezone)
        components = self._calendar.components(instant)
        offset = instant.astimezone(self._timezone).utcoffset() or _datetime.timedelta(0)

        parts = []
        for token in self._tokens:
            if token.symbol == _LITERAL:
                parts.append(token.text)
            else:
                parts.append(self._render_token(token, components, instant, offset))
        return "".join(parts)

    def _render_token(
        self,
        token: _Token,
        components: DateComponents,
        instant: _datetime.datetime,
        offset: _datetime.timedelta,
    ) -> str:
        symbol, count = token.symbol, token.count

        if symbol == "y":
            if count == 2:
                return f"{components.year % 100:02d}"
            return f"{components.year:0{count}d}"
        if symbol == "M":
            if count >= 4:
                return MONTH_NAMES[components.month]
            if count == 3:
                return _MONTH_ABBREVIATIONS[components.month]
            return f"{components.month:0{count}d}"
        if symbol == "E":
            if count >= 4:
                return WEEKDAY_NAMES[components.weekday]
            return _WEEKDAY_ABBREVIATIONS[components.weekday]
        if symbol == "a":
            return "AM" if components.hour < 12 else "PM"
        if symbol == "h":
            return f"{(components.hour % 12) or 12:0{count}d}"
        if symbol == "S":
            digits = f"{instant.microsecond:06d}"
            return (digits + "0" * count)[:count]
        if symbol == "Z":
            return _format_offset(offset, count)

        value = {
            "d": components.day,
            "H": components.hour,
            "m": components.minute,
            "s": components.second,
        }[symbol]
        return f"{value:0{count}d}"

    def parse(self, string: str) -> _datetime.datetime | None:
        """Parse a string that matches the pattern exactly.

        Fields are checked strictly (no month 13 or February 30). Date
        fields missing from the pattern default to 1970-01-01 and time
        fields to zero. An offset in the string takes precedence over the
        formatter's time zone.

        Returns:
            The parsed instant in UTC, or None if the string does not
            match.
        """
        match = self._regex.fullmatch(string)
        if match is None:
            return None

        fields: dict[str, int] = {}
        timezone: _datetime.tzinfo | None = None
        hour12: int | None = None
        is_pm: bool | None = None
        microsecond = 0

        groups = iter(match.groups())
        for token in self._tokens:
            if token.symbol == _LITERAL:
                continue
            text = next(groups)
            symbol = token.symbol

            if symbol == "y":
                year = int(text)
                fields["year"] = 2000 + year if token.count == 2 else year
            elif symbol == "M":
                if token.count >= 3:
                    names = MONTH_NAMES if token.count >= 4 else _MONTH_ABBREVIATIONS
                    fields["month"] = [n.lower() for n in names].index(text.lower())
                else:
                    fields["month"] = int(text)
            elif symbol == "d":
                fields["day"] = int(text)
            elif symbol == "H":
                fields["hour"] = int(text)
            elif symbol == "h":
                hour12 = int(text)
            elif symbol == "a":
                is_pm = text.upper() == "PM"
            elif symbol == "m":
                fields["minute"] = int(text)
            elif symbol == "s":
                fields["second"] = int(text)
            elif symbol == "S":
                microsecond = int((text + "000000")[:6])
            elif symbol == "Z":
                try:
                    timezone = _offset_from_text(text)
                except ValueError:
                    return None

        if hour12 is not None:
            if not 1 <= hour12 <= 12:
                return None
            fields["hour"] = hour12 % 12 + (12 if is_pm else 0)

        components = DateComponents(
            year=fields.get("year", PARSE_DEFAULT_YEAR),
            month=fields.get("month", PARSE_DEFAULT_MONTH),
            day=fields.get("day", PARSE_DEFAULT_DAY),
            hour=fields.get("hour", 0),
            minute=fields.get("minute", 0),
            second=fields.get("second", 0),
            timezone=timezone,
            calendar=self._calendar,
        )
        if not components.is_valid_date:
            return None

        instant = components.date()
        if instant is None:
            return None
        return instant + _datetime.timedelta(microseconds=microsecond)

    @property
    def cache_key(self) -> str:
        """Identity of the (format, time zone, locale, calendar) combination."""
        from calendate.format.cache import FormatterParameters

        return FormatterParameters(
            self._format, self._timezone, self._locale, self._calendar
        ).id

    def __repr__(self) -> str:
        return (
            f"DateFormatter({self._format!r}, "
            f"timezone={timezone_identifier(self._timezone)!r}, "
            f"locale={self._locale!r}, calendar={self._calendar.identifier!r})"
        )


__all__ = ["CommonFormat", "DateFormatter", "tokenize"]
