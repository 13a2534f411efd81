"""Calendar units and time zones.

This module provides:
    - CalendarField: The readable and writable date fields
    - Time zone helpers: resolve_timezone, timezone_identifier, LocalTimezone
"""

from __future__ import annotations

from calendate.units.field import CalendarField
from calendate.units.timezone import (
    LocalTimezone,
    local_timezone,
    resolve_timezone,
    timezone_identifier,
    utc,
)

__all__: list[str] = [
    "CalendarField",
    "LocalTimezone",
    "local_timezone",
    "resolve_timezone",
    "timezone_identifier",
    "utc",
]
