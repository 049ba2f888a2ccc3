"""Internal constants for Calendario.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Smallest accepted year; the upper bound is the current year
MIN_YEAR: int = 0

# Day counting starts at 0001-01-01 (ordinal 1)
EPOCH_YEAR: int = 1

DAYS_IN_COMMON_YEAR: int = 365
DAYS_IN_LEAP_YEAR: int = 366

MONTHS_IN_YEAR: int = 12
FEBRUARY: int = 2

# Environment variable that pins the default clock to a fixed date
TODAY_ENV_VAR: str = "CALENDARIO_TODAY"


__all__ = [
    "MIN_YEAR",
    "EPOCH_YEAR",
    "DAYS_IN_COMMON_YEAR",
    "DAYS_IN_LEAP_YEAR",
    "MONTHS_IN_YEAR",
    "FEBRUARY",
    "TODAY_ENV_VAR",
]
