"""Pytest configuration and fixtures for Calendate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so calendate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from calendate.calendar import GregorianCalendar, set_default_calendar  # noqa: E402
from calendate.format.cache import FormatterCache  # noqa: E402


@pytest.fixture
def utc_calendar() -> GregorianCalendar:
    """A Gregorian calendar reading fields in UTC."""
    return GregorianCalendar("UTC")


@pytest.fixture
def cache() -> FormatterCache:
    """A formatter cache private to one test."""
    return FormatterCache()


@pytest.fixture(autouse=True)
def restore_default_calendar():
    """Undo set_default_calendar() calls made by a test."""
    yield
    set_default_calendar(None)
