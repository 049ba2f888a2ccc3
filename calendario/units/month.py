"""Month enumeration and the month table.

This module provides the Month enum for the twelve calendar months plus
the NO_MONTH marker carried by unset dates. Names and nominal day counts
live in a single ordered table; the lookup and leap-year adjustment are
plain functions over that table and the enum members delegate to them.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from calendario._internal.calendar import is_leap_year
from calendario._internal.constants import FEBRUARY, MONTHS_IN_YEAR
from calendario.errors import InvalidMonthError, UnsetDateError


class MonthInfo(NamedTuple):
    """Display name and nominal (non-leap) day count of a month."""

    name: str
    nominal_days: int


# Index 0 is January
_MONTH_TABLE: tuple[MonthInfo, ...] = (
    MonthInfo("Janeiro", 31),
    MonthInfo("Fevereiro", 28),
    MonthInfo("Março", 31),
    MonthInfo("Abril", 30),
    MonthInfo("Maio", 31),
    MonthInfo("Junho", 30),
    MonthInfo("Julho", 31),
    MonthInfo("Agosto", 31),
    MonthInfo("Setembro", 30),
    MonthInfo("Outubro", 31),
    MonthInfo("Novembro", 30),
    MonthInfo("Dezembro", 31),
)

_NO_MONTH_INFO = MonthInfo("Sem mês", 0)


class Month(Enum):
    """Calendar month.

    Members are in calendar order and their values are the 1-based month
    numbers. NO_MONTH (value 0) only marks an unset date and is never
    returned by from_ordinal().

    Examples:
        >>> Month.from_ordinal(2)
        <Month.FEBRUARY: 2>
        >>> Month.FEBRUARY.days_in(2024)
        29
        >>> Month.MARCH.display_name
        'Março'
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12
    NO_MONTH = 0

    @classmethod
    def from_ordinal(cls, number: int) -> Month:
        """Return the month with the given 1-based number.

        Raises:
            InvalidMonthError: If number is outside 1-12.
        """
        return month_from_ordinal(number)

    @classmethod
    def calendar_months(cls) -> tuple[Month, ...]:
        """Return the twelve calendar months in order, without NO_MONTH."""
        return tuple(m for m in cls if m is not cls.NO_MONTH)

    @property
    def number(self) -> int:
        """Return the 1-based month number.

        Raises:
            UnsetDateError: For NO_MONTH, which has no number.
        """
        if self is Month.NO_MONTH:
            raise UnsetDateError("NO_MONTH has no month number")
        return self.value

    @property
    def nominal_days(self) -> int:
        """Return the day count of this month in a non-leap year."""
        return month_info(self).nominal_days

    @property
    def display_name(self) -> str:
        """Return the human-readable month name."""
        return display_name(self)

    def days_in(self, year: int) -> int:
        """Return the number of days of this month in the given year."""
        return days_in_month(self, year)

    def __str__(self) -> str:
        return display_name(self)


def month_info(month: Month) -> MonthInfo:
    """Return the table entry for a month."""
    if month is Month.NO_MONTH:
        return _NO_MONTH_INFO
    return _MONTH_TABLE[month.value - 1]


def month_from_ordinal(number: int) -> Month:
    """Return the month with the given 1-based number.

    This is the only place where a month number is range checked.

    Args:
        number: The month number (1-12).

    Returns:
        The corresponding Month.

    Raises:
        TypeError: If number is not an int.
        InvalidMonthError: If number is outside 1-12.

    Examples:
        >>> month_from_ordinal(12)
        <Month.DECEMBER: 12>
        >>> month_from_ordinal(13)
        Traceback (most recent call last):
        ...
        calendario.errors.InvalidMonthError: month must be between 1 and 12, got 13
    """
    from calendario._internal.validation import require_int

    require_int("month", number)
    if number < 1 or number > MONTHS_IN_YEAR:
        raise InvalidMonthError(
            f"month must be between 1 and {MONTHS_IN_YEAR}, got {number}", number
        )
    return Month(number)


def days_in_month(month: Month, year: int) -> int:
    """Return the number of days in a month of the given year.

    February gains a day in leap years; every other month ignores the
    year. NO_MONTH has 0 days.

    Examples:
        >>> days_in_month(Month.FEBRUARY, 2023)
        28
        >>> days_in_month(Month.FEBRUARY, 2024)
        29
        >>> days_in_month(Month.APRIL, 2024)
        30
    """
    days = month_info(month).nominal_days
    if month.value == FEBRUARY and is_leap_year(year):
        return days + 1
    return days


def display_name(month: Month) -> str:
    """Return the fixed display name of a month.

    Examples:
        >>> display_name(Month.JANUARY)
        'Janeiro'
        >>> display_name(Month.NO_MONTH)
        'Sem mês'
    """
    return month_info(month).name


__all__ = [
    "Month",
    "MonthInfo",
    "month_info",
    "month_from_ordinal",
    "days_in_month",
    "display_name",
]
