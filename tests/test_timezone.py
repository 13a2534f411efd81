"""Tests for time zone resolution and identifiers."""

from __future__ import annotations

import datetime

import pytest

from calendate.units.timezone import (
    LocalTimezone,
    fixed_offset,
    local_timezone,
    resolve_timezone,
    timezone_identifier,
    utc,
)


class TestResolveTimezone:
    """Tests for resolve_timezone()."""

    @pytest.mark.parametrize("name", ["Z", "UTC", "utc", "GMT"])
    def test_utc_names(self, name):
        """UTC aliases resolve to the UTC singleton."""
        assert resolve_timezone(name) is utc()

    def test_none_is_local(self):
        """None selects the live system zone."""
        assert resolve_timezone(None) is local_timezone()

    def test_local_identifier(self):
        """'Local' selects the live system zone."""
        assert resolve_timezone("Local") is local_timezone()

    def test_tzinfo_passes_through(self):
        """A tzinfo instance is returned unchanged."""
        tz = datetime.timezone(datetime.timedelta(hours=3))
        assert resolve_timezone(tz) is tz

    @pytest.mark.parametrize(
        "text,minutes",
        [
            ("+09:00", 540),
            ("+0900", 540),
            ("+09", 540),
            ("-05:30", -330),
            ("-00:30", -30),
        ],
    )
    def test_fixed_offsets(self, text, minutes):
        """Offset strings resolve to fixed offsets."""
        tz = resolve_timezone(text)
        assert tz.utcoffset(None) == datetime.timedelta(minutes=minutes)

    def test_zero_offset_is_utc(self):
        """+00:00 resolves to UTC itself."""
        assert resolve_timezone("+00:00") is utc()

    def test_unknown_name(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="unknown time zone"):
            resolve_timezone("Not/AZone")

    def test_offset_out_of_range(self):
        """Offsets beyond 14 hours are rejected."""
        with pytest.raises(ValueError):
            resolve_timezone("+15:00")


class TestFixedOffset:
    """Tests for fixed_offset()."""

    def test_positive(self):
        """Hours and minutes are combined."""
        tz = fixed_offset(5, 30)
        assert tz.utcoffset(None) == datetime.timedelta(hours=5, minutes=30)

    def test_negative(self):
        """The sign of hours applies to minutes."""
        tz = fixed_offset(-3, 30)
        assert tz.utcoffset(None) == -datetime.timedelta(hours=3, minutes=30)

    def test_minutes_range(self):
        """Minutes must be 0-59."""
        with pytest.raises(ValueError):
            fixed_offset(1, 60)


class TestTimezoneIdentifier:
    """Tests for timezone_identifier()."""

    def test_utc(self):
        """UTC is identified as 'UTC'."""
        assert timezone_identifier(utc()) == "UTC"

    def test_fixed_offset(self):
        """Fixed offsets are identified by their offset."""
        assert timezone_identifier(fixed_offset(-5)) == "UTC-05:00"

    def test_local(self):
        """The live system zone is identified as 'Local'."""
        assert timezone_identifier(local_timezone()) == "Local"

    def test_display_name_is_ignored(self):
        """Fixed offsets are identified by offset, not by their name."""
        east = datetime.timezone(datetime.timedelta(hours=9), "X")
        west = datetime.timezone(datetime.timedelta(hours=-3), "X")
        assert timezone_identifier(east) == "UTC+09:00"
        assert timezone_identifier(west) == "UTC-03:00"

    def test_named_zero_offset(self):
        """A renamed zero offset is still UTC."""
        assert timezone_identifier(datetime.timezone(datetime.timedelta(0), "Zulu")) == "UTC"

    def test_offset_seconds(self):
        """Offsets with seconds keep them."""
        tz = datetime.timezone(datetime.timedelta(hours=5, minutes=30, seconds=15))
        assert timezone_identifier(tz) == "UTC+05:30:15"

    def test_other_tzinfo_by_instance(self):
        """Unknown tzinfo classes only share an identifier with themselves."""

        class Shifted(datetime.tzinfo):
            def __init__(self, hours):
                self.hours = hours

            def utcoffset(self, dt):
                return datetime.timedelta(hours=self.hours)

            def tzname(self, dt):
                return "Shifted"

            def dst(self, dt):
                return datetime.timedelta(0)

        first, second = Shifted(1), Shifted(2)
        assert timezone_identifier(first) == timezone_identifier(first)
        assert timezone_identifier(first) != timezone_identifier(second)


class TestLocalTimezone:
    """Tests for LocalTimezone."""

    def test_offset_matches_system(self):
        """Offsets agree with the standard library's local conversion."""
        wall = datetime.datetime(2016, 7, 18, 12, 0)
        aware = wall.replace(tzinfo=local_timezone())
        assert aware.utcoffset() == wall.astimezone().utcoffset()

    def test_fromutc_matches_system(self):
        """Converting from UTC agrees with the standard library."""
        instant = datetime.datetime(2016, 1, 18, 12, 0, tzinfo=utc())
        ours = instant.astimezone(local_timezone()).replace(tzinfo=None)
        system = instant.astimezone().replace(tzinfo=None)
        assert ours == system

    def test_instances_are_equal(self):
        """Every LocalTimezone is the same zone."""
        assert LocalTimezone() == local_timezone()
        assert hash(LocalTimezone()) == hash(local_timezone())
