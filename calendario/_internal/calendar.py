"""Calendar utilities for Calendario.

This module provides internal functions for calendar calculations:
the leap year rule and the ordinal day count used to order and
difference dates.

The ordinal day count is the number of days from 0001-01-01 up to and
including a date, so 0001-01-01 has ordinal 1. Year 0 has no prior
years to count and shares that base: 0000-01-01 also has ordinal 1.

This module is not part of the public API.
"""

from __future__ import annotations

from calendario._internal.constants import (
    DAYS_IN_COMMON_YEAR,
    DAYS_IN_LEAP_YEAR,
    EPOCH_YEAR,
)
from calendario._internal.decorators import memoize


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def days_in_year(year: int) -> int:
    """Return the number of days in a year.

    Args:
        year: The year to check.

    Returns:
        366 for leap years, 365 otherwise.
    """
    return DAYS_IN_LEAP_YEAR if is_leap_year(year) else DAYS_IN_COMMON_YEAR


@memoize
def days_before_year(year: int) -> int:
    """Return the number of days in all years from year 1 up to ``year``.

    Years before year 1 contribute nothing, so years 0 and 1 both
    return 0.

    Args:
        year: The year.

    Returns:
        Total days in years 1 through year - 1.

    Examples:
        >>> days_before_year(1)
        0
        >>> days_before_year(2)
        365
        >>> days_before_year(6)  # Year 4 is a leap year
        1826
    """
    return sum(days_in_year(y) for y in range(EPOCH_YEAR, year))


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.

    Examples:
        >>> days_before_month(2023, 3)
        59
        >>> days_before_month(2024, 3)
        60
    """
    from calendario.units.month import days_in_month, month_from_ordinal

    return sum(
        days_in_month(month_from_ordinal(m), year) for m in range(1, month)
    )


def count_days(year: int, month: int, day: int) -> int:
    """Return the ordinal day count of a date.

    The fields are assumed to be already validated.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Days from 0001-01-01 up to and including the date.

    Examples:
        >>> count_days(1, 1, 1)
        1
        >>> count_days(1, 12, 31)
        365
        >>> count_days(2024, 1, 15)
        738900
    """
    return days_before_year(year) + days_before_month(year, month) + day


__all__ = [
    "is_leap_year",
    "days_in_year",
    "days_before_year",
    "days_before_month",
    "count_days",
]
