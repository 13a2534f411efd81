"""Core calendar types and grids.

This module provides:
    - DateTime: An instant read through a calendar, with writable fields
    - Grid functions: month boundaries and day sequences for calendar views
"""

from __future__ import annotations

from calendate.core.datetime import DateTime
from calendate.core.grid import (
    all_days_in_month,
    all_days_with_complete_weeks,
    first_day_of_month,
    last_day_of_month,
)

__all__: list[str] = [
    "DateTime",
    "all_days_in_month",
    "all_days_with_complete_weeks",
    "first_day_of_month",
    "last_day_of_month",
]
