"""Validation utilities for Calendario.

This module checks candidate date fields and returns them as a single
immutable record. Nothing is mutated here; a Date commits the record
only after validation has fully succeeded.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from calendario._internal.constants import MIN_YEAR
from calendario.errors import InvalidDayError, InvalidYearError, ValidationError
from calendario.units.month import Month, days_in_month, month_from_ordinal

logger = logging.getLogger(__name__)


class DateFields(NamedTuple):
    """A validated (year, month, day) triple."""

    year: int
    month: Month
    day: int


def require_int(name: str, value: object) -> int:
    """Return value if it is an int, else raise TypeError.

    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def validate_year(year: int, current_year: int) -> None:
    """Validate that a year is between MIN_YEAR and the current year.

    Args:
        year: The year to validate.
        current_year: The latest accepted year, as read from a clock.

    Raises:
        InvalidYearError: If year is negative or after current_year.
    """
    if year < MIN_YEAR or year > current_year:
        raise InvalidYearError(
            f"year must be between {MIN_YEAR} and {current_year}, got {year}", year
        )


def validate_day(year: int, month: Month, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year, already validated.
        month: The month, already validated.
        day: The day to validate.

    Raises:
        InvalidDayError: If day is invalid for the month.
    """
    max_day = days_in_month(month, year)
    if day < 1 or day > max_day:
        raise InvalidDayError(
            f"day must be between 1 and {max_day} for {year:04d}/{month.value:02d}, "
            f"got {day}",
            day,
        )


def validate_fields(year: int, month: int, day: int, *, current_year: int) -> DateFields:
    """Validate a candidate date and return its fields.

    Checks run in a fixed order: year, then month, then day. The day
    range depends on the month and the year, so an invalid year or
    month is always reported before any day problem.

    Args:
        year: The year.
        month: The 1-based month number.
        day: The day of the month.
        current_year: The latest accepted year.

    Returns:
        The validated fields.

    Raises:
        TypeError: If any field is not an int.
        InvalidYearError: If the year is out of range.
        InvalidMonthError: If the month is outside 1-12.
        InvalidDayError: If the day is out of range for the month.

    Examples:
        >>> validate_fields(2024, 2, 29, current_year=2024)
        DateFields(year=2024, month=<Month.FEBRUARY: 2>, day=29)
    """
    require_int("year", year)
    require_int("month", month)
    require_int("day", day)

    try:
        validate_year(year, current_year)
        month_of_year = month_from_ordinal(month)
        validate_day(year, month_of_year, day)
    except ValidationError as exc:
        logger.debug("rejected date %r/%r/%r: %s", year, month, day, exc)
        raise

    return DateFields(year, month_of_year, day)


__all__ = [
    "DateFields",
    "require_int",
    "validate_year",
    "validate_day",
    "validate_fields",
]
