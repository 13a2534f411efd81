"""Tests for the Calendate exception hierarchy."""

from __future__ import annotations

import pytest

from calendate.errors import (
    CalendateError,
    InvalidComponentsForDateArray,
    InvalidDateComponents,
    InvalidDateFormat,
    InvalidStringForAutoDetect,
)


class TestInvalidDateFormat:
    """Tests for InvalidDateFormat."""

    def test_keeps_string_and_format(self):
        """The failing string and pattern are available as attributes."""
        exc = InvalidDateFormat("01-02-2015", "yyyy-MM-dd")
        assert exc.string == "01-02-2015"
        assert exc.format == "yyyy-MM-dd"

    def test_message_names_both(self):
        """The message mentions the string and the pattern."""
        message = str(InvalidDateFormat("01-02-2015", "yyyy-MM-dd"))
        assert "'01-02-2015'" in message
        assert "'yyyy-MM-dd'" in message


class TestInvalidStringForAutoDetect:
    """Tests for InvalidStringForAutoDetect."""

    def test_keeps_string(self):
        """The undetectable string is kept."""
        exc = InvalidStringForAutoDetect("next tuesday")
        assert exc.string == "next tuesday"
        assert "next tuesday" in str(exc)


class TestInvalidDateComponents:
    """Tests for InvalidDateComponents."""

    def test_defaults_to_unknown_fields(self):
        """All fields are optional."""
        exc = InvalidDateComponents()
        assert exc.year is None
        assert exc.month is None
        assert exc.day is None

    def test_keeps_fields(self):
        """Year, month and day are kept."""
        exc = InvalidDateComponents(10000, 1, 1)
        assert (exc.year, exc.month, exc.day) == (10000, 1, 1)
        assert "year=10000" in str(exc)


class TestInvalidComponentsForDateArray:
    """Tests for InvalidComponentsForDateArray."""

    def test_keeps_year_and_month(self):
        """Year and month of the requested grid are kept."""
        exc = InvalidComponentsForDateArray(10000, 2)
        assert exc.year == 10000
        assert exc.month == 2
        assert "month=2" in str(exc)


class TestHierarchy:
    """Every error can be caught as CalendateError."""

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidDateFormat("x", "yyyy"),
            InvalidStringForAutoDetect("x"),
            InvalidDateComponents(2015, 13, 1),
            InvalidComponentsForDateArray(2015, 13),
        ],
    )
    def test_caught_as_base(self, exc):
        """Raising any error is caught by the base class."""
        with pytest.raises(CalendateError):
            raise exc
