"""Internal utilities for Calendate.

This module contains private implementation details:
    - Constants and defaults
    - Standard library calendar helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calendate._internal.calendar import (
    add_days,
    date_from_lenient,
    days_in_month,
    normalize_year_month,
    sunday_based_weekday,
)

__all__: list[str] = [
    "add_days",
    "date_from_lenient",
    "days_in_month",
    "normalize_year_month",
    "sunday_based_weekday",
]
