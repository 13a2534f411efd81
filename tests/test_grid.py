"""Tests for calendar grid functions."""

from __future__ import annotations

import calendar
import datetime

import pytest

from calendate.core.grid import (
    all_days_in_month,
    all_days_with_complete_weeks,
    first_day_of_month,
    last_day_of_month,
)
from calendate.errors import InvalidComponentsForDateArray, InvalidDateComponents

MONTHS_2015_2016 = [(year, month) for year in (2015, 2016) for month in range(1, 13)]


def _ymd(dt):
    return (dt.year, dt.month, dt.day)


class TestFirstDayOfMonth:
    """Tests for first_day_of_month()."""

    def test_first_day(self):
        """The first day is day 1 at midnight."""
        dt = first_day_of_month(2016, 2)
        assert _ymd(dt) == (2016, 2, 1)
        assert (dt.hour, dt.minute, dt.second) == (0, 0, 0)

    def test_uses_given_calendar(self, utc_calendar):
        """The given calendar is attached."""
        dt = first_day_of_month(2016, 2, utc_calendar)
        assert dt.calendar is utc_calendar
        assert dt.instant == datetime.datetime(2016, 2, 1, tzinfo=datetime.timezone.utc)

    def test_rolls_forward_into_next_year(self):
        """Month 13 is January of the next year."""
        assert _ymd(first_day_of_month(2015, 13)) == (2016, 1, 1)

    def test_rolls_back_into_previous_year(self):
        """Month 0 is December of the previous year."""
        assert _ymd(first_day_of_month(2016, 0)) == (2015, 12, 1)

    def test_invalid_year(self):
        """Unsupported years raise InvalidDateComponents."""
        with pytest.raises(InvalidDateComponents):
            first_day_of_month(10000, 1)


class TestLastDayOfMonth:
    """Tests for last_day_of_month()."""

    @pytest.mark.parametrize(
        "year,month,day",
        [
            (2016, 2, 29),
            (2015, 2, 28),
            (2000, 2, 29),
            (1900, 2, 28),
            (2015, 4, 30),
            (2015, 1, 31),
        ],
    )
    def test_month_lengths(self, year, month, day):
        """The last day follows month lengths and leap years."""
        assert _ymd(last_day_of_month(year, month)) == (year, month, day)

    def test_december(self):
        """December ends on the 31st of the same year."""
        assert _ymd(last_day_of_month(2015, 12)) == (2015, 12, 31)

    def test_rolls_forward_into_next_year(self):
        """Month 13 ends on January 31 of the next year."""
        assert _ymd(last_day_of_month(2015, 13)) == (2016, 1, 31)

    def test_month_zero(self):
        """Month 0 ends on December 31 of the previous year."""
        assert _ymd(last_day_of_month(2016, 0)) == (2015, 12, 31)


class TestAllDaysInMonth:
    """Tests for all_days_in_month()."""

    @pytest.mark.parametrize("year,month", MONTHS_2015_2016)
    def test_every_day_in_order(self, year, month):
        """Each month of 2015 and 2016 yields its days in order."""
        days = all_days_in_month(year, month)
        length = calendar.monthrange(year, month)[1]
        assert [_ymd(dt) for dt in days] == [
            (year, month, day) for day in range(1, length + 1)
        ]

    def test_uses_given_calendar(self, utc_calendar):
        """Every day carries the given calendar."""
        days = all_days_in_month(2015, 2, utc_calendar)
        assert len(days) == 28
        assert all(dt.calendar is utc_calendar for dt in days)

    def test_invalid_year(self):
        """Failures are reported for the requested month."""
        with pytest.raises(InvalidComponentsForDateArray) as exc_info:
            all_days_in_month(10000, 1)
        assert (exc_info.value.year, exc_info.value.month) == (10000, 1)
        assert isinstance(exc_info.value.__cause__, InvalidDateComponents)


class TestAllDaysWithCompleteWeeks:
    """Tests for all_days_with_complete_weeks()."""

    def test_february_2015_needs_no_padding(self):
        """February 2015 runs Sunday to Saturday."""
        days = all_days_with_complete_weeks(2015, 2)
        assert len(days) == 28
        assert _ymd(days[0]) == (2015, 2, 1)
        assert _ymd(days[-1]) == (2015, 2, 28)

    def test_december_2015_pads_both_ends(self):
        """December 2015 borrows days from November and January."""
        days = all_days_with_complete_weeks(2015, 12)
        assert len(days) == 35
        assert [_ymd(dt) for dt in days[:3]] == [
            (2015, 11, 29),
            (2015, 11, 30),
            (2015, 12, 1),
        ]
        assert [_ymd(dt) for dt in days[-3:]] == [
            (2015, 12, 31),
            (2016, 1, 1),
            (2016, 1, 2),
        ]

    def test_january_pads_from_previous_year(self):
        """January 2016 starts on the Sunday of the previous year."""
        days = all_days_with_complete_weeks(2016, 1)
        assert _ymd(days[0]) == (2015, 12, 27)
        assert _ymd(days[-1]) == (2016, 2, 6)

    @pytest.mark.parametrize("year,month", MONTHS_2015_2016)
    def test_whole_weeks(self, year, month):
        """Every grid runs from Sunday to Saturday in consecutive days."""
        days = all_days_with_complete_weeks(year, month)
        assert len(days) % 7 == 0
        assert days[0].weekday == 1
        assert days[-1].weekday == 7
        dates = [datetime.date(*_ymd(dt)) for dt in days]
        assert all(b - a == datetime.timedelta(days=1) for a, b in zip(dates, dates[1:]))

    def test_invalid_year(self):
        """An unsupported year raises InvalidComponentsForDateArray."""
        with pytest.raises(InvalidComponentsForDateArray) as exc_info:
            all_days_with_complete_weeks(10000, 1)
        assert (exc_info.value.year, exc_info.value.month) == (10000, 1)

    def test_padding_past_last_year(self):
        """December 9999 cannot be padded into year 10000."""
        with pytest.raises(InvalidComponentsForDateArray) as exc_info:
            all_days_with_complete_weeks(9999, 12)
        assert exc_info.value.month == 12
