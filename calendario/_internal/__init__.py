"""Internal utilities for Calendario.

This module contains private implementation details:
    - Calendar arithmetic (leap years, ordinal day counting)
    - Field validation
    - Constants and magic numbers
    - Custom decorators (@memoize)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calendario._internal.calendar import (
    count_days,
    days_before_month,
    days_before_year,
    days_in_year,
    is_leap_year,
)
from calendario._internal.decorators import memoize

__all__: list[str] = [
    "count_days",
    "days_before_month",
    "days_before_year",
    "days_in_year",
    "is_leap_year",
    "memoize",
]
