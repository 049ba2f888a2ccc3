"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar, from year 0 up to the current year.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from calendario._internal.calendar import count_days, days_before_month, is_leap_year
from calendario._internal.validation import DateFields, validate_fields
from calendario.arithmetic import comparisons
from calendario.clock import resolve_clock
from calendario.errors import UnsetDateError
from calendario.format.text import format_long, format_sortable
from calendario.units.month import Month, days_in_month

if TYPE_CHECKING:
    from calendario.clock import Clock


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date holds a year, a month and a day that satisfy:

    - 0 <= year <= the current year, as reported by a clock
    - 1 <= month <= 12
    - 1 <= day <= the number of days in that month of that year

    Every change goes through set(), which validates all three fields
    before committing any of them. A Date built with no arguments is
    unset: it holds no fields, its accessors raise UnsetDateError, and
    it cannot be ordered or differenced.

    Ordering and differences use the ordinal day count (days from
    0001-01-01 up to and including the date). Equality compares the
    three fields.

    Attributes:
        year: The year.
        month: The month (1-12).
        day: The day of the month.

    Examples:
        >>> from calendario.clock import FixedClock
        >>> clock = FixedClock(2024, 12, 31)
        >>> d = Date(2024, 3, 5, clock=clock)
        >>> d.year, d.month, d.day
        (2024, 3, 5)
        >>> str(d)
        '5 de Março de 2024'
        >>> d.to_year_month_day_string()
        '2024/03/05'
        >>> Date(2023, 1, 1, clock=clock).difference_in_days(2023, 12, 31, clock=clock)
        364
    """

    __slots__ = ("_fields",)

    def __init__(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        """Create a Date from year, month, and day.

        With no fields the Date is unset and nothing is validated.

        Args:
            year: The year (0 up to the current year).
            month: The month (1-12).
            day: The day of the month.
            clock: Clock that supplies the current year. Defaults to the
                process-wide clock.

        Raises:
            TypeError: If only some of the fields are given, or a field
                is not an int.
            InvalidYearError: If the year is out of range.
            InvalidMonthError: If the month is outside 1-12.
            InvalidDayError: If the day is out of range for the month.
        """
        self._fields: DateFields | None = None

        supplied = (year, month, day)
        if all(value is None for value in supplied):
            return
        if any(value is None for value in supplied):
            raise TypeError("Date() takes either no fields or all of year, month and day")

        self.set(year, month, day, clock=clock)  # type: ignore[arg-type]

    @classmethod
    def unset(cls) -> Date:
        """Return an unset Date.

        Equivalent to Date().
        """
        return cls()

    @classmethod
    def from_date(cls, other: Date) -> Date:
        """Return a copy of another Date.

        The fields are copied as they are, without validating them again,
        so copying an unset Date gives an unset Date.
        """
        copy = cls()
        copy._fields = other._fields
        return copy

    @classmethod
    def today(cls, clock: Clock | None = None) -> Date:
        """Return today's date as reported by a clock.

        Args:
            clock: Clock to read. Defaults to the process-wide clock.

        Returns:
            A Date representing the current day.

        Examples:
            >>> from calendario.clock import FixedClock
            >>> Date.today(FixedClock(2024, 3, 5))
            Date(2024, 3, 5)
        """
        source = resolve_clock(clock)
        year, month, day = source.today()
        return cls(year, month, day, clock=source)

    def set(self, year: int, month: int, day: int, *, clock: Clock | None = None) -> None:
        """Replace the year, month and day of this date.

        The new fields are validated in order (year, month, day) and
        committed together. If validation fails the date keeps its
        previous value.

        Args:
            year: The new year (0 up to the current year).
            month: The new month (1-12).
            day: The new day of the month.
            clock: Clock that supplies the current year. Defaults to the
                process-wide clock.

        Raises:
            TypeError: If a field is not an int.
            InvalidYearError: If the year is out of range.
            InvalidMonthError: If the month is outside 1-12.
            InvalidDayError: If the day is out of range for the month.

        Examples:
            >>> from calendario.clock import FixedClock
            >>> clock = FixedClock(2024, 12, 31)
            >>> d = Date(2024, 1, 15, clock=clock)
            >>> d.set(2023, 2, 29, clock=clock)
            Traceback (most recent call last):
            ...
            calendario.errors.InvalidDayError: day must be between 1 and 28 for 2023/02, got 29
            >>> d
            Date(2024, 1, 15)
        """
        current_year, _, _ = resolve_clock(clock).today()
        self._fields = validate_fields(year, month, day, current_year=current_year)

    def _require_fields(self) -> DateFields:
        if self._fields is None:
            raise UnsetDateError("date has not been set")
        return self._fields

    @property
    def is_set(self) -> bool:
        """Return True if this date holds a year, month and day."""
        return self._fields is not None

    @property
    def year(self) -> int:
        """Return the year component.

        Raises:
            UnsetDateError: If the date is unset.
        """
        return self._require_fields().year

    @property
    def month(self) -> int:
        """Return the month component as a number (1-12).

        Raises:
            UnsetDateError: If the date is unset.
        """
        return self._require_fields().month.value

    @property
    def month_of_year(self) -> Month:
        """Return the month component as a Month.

        An unset date reports Month.NO_MONTH.
        """
        if self._fields is None:
            return Month.NO_MONTH
        return self._fields.month

    @property
    def day(self) -> int:
        """Return the day component.

        Raises:
            UnsetDateError: If the date is unset.
        """
        return self._require_fields().day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> from calendario.clock import FixedClock
            >>> Date(2000, 1, 1, clock=FixedClock(2024, 1, 1)).is_leap_year
            True
            >>> Date(1900, 1, 1, clock=FixedClock(2024, 1, 1)).is_leap_year
            False
        """
        return is_leap_year(self._require_fields().year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        fields = self._require_fields()
        return days_in_month(fields.month, fields.year)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        fields = self._require_fields()
        return days_before_month(fields.year, fields.month.value) + fields.day

    def to_ordinal(self) -> int:
        """Return the ordinal day count for this date.

        The ordinal is the number of days from 0001-01-01 up to and
        including this date, so 0001-01-01 has ordinal 1.

        Raises:
            UnsetDateError: If the date is unset.

        Examples:
            >>> from calendario.clock import FixedClock
            >>> Date(1, 1, 1, clock=FixedClock(2024, 1, 1)).to_ordinal()
            1
            >>> Date(2024, 1, 15, clock=FixedClock(2024, 1, 15)).to_ordinal()
            738900
        """
        fields = self._require_fields()
        return count_days(fields.year, fields.month.value, fields.day)

    def is_greater_than(self, other: Date) -> bool:
        """Return True if this date falls after other.

        Raises:
            UnsetDateError: If either date is unset.
        """
        return comparisons.greater_than(self, other)

    def compare_to(self, other: Date) -> int:
        """Three-way comparison with another date.

        Returns:
            -1 if other is later, 1 if this date is later, 0 otherwise.

        Raises:
            UnsetDateError: If either date is unset.
        """
        return comparisons.compare(self, other)

    @overload
    def difference_in_days(self, other: Date) -> int: ...

    @overload
    def difference_in_days(
        self, other: int, month: int, day: int, *, clock: Clock | None = None
    ) -> int: ...

    def difference_in_days(
        self,
        other: Date | int,
        month: int | None = None,
        day: int | None = None,
        *,
        clock: Clock | None = None,
    ) -> int:
        """Return the number of days between this date and another.

        The other date is either a Date or a year, month and day. Fields
        are turned into a Date with the validating constructor first, so
        invalid fields raise the usual validation errors.

        Args:
            other: A Date, or the year of the other date.
            month: The month of the other date when other is a year.
            day: The day of the other date when other is a year.
            clock: Clock used to validate the fields form.

        Returns:
            The absolute difference of the two ordinal day counts.

        Raises:
            TypeError: If a Date is mixed with month or day.
            UnsetDateError: If either date is unset.
            ValidationError: If the fields form does not make a valid date.
        """
        if isinstance(other, Date):
            if month is not None or day is not None:
                raise TypeError("month and day are only accepted with a year")
            return comparisons.difference_in_days(self, other)
        if other is None:
            raise TypeError("difference_in_days() needs a Date or a year, month and day")

        return comparisons.difference_in_days(self, Date(other, month, day, clock=clock))

    def to_year_month_day_string(self) -> str:
        """Return the date as zero-padded YYYY/MM/DD.

        Examples:
            >>> from calendario.clock import FixedClock
            >>> Date(2024, 3, 5, clock=FixedClock(2024, 3, 5)).to_year_month_day_string()
            '2024/03/05'
        """
        return format_sortable(self)

    def __copy__(self) -> Date:
        return Date.from_date(self)

    def __deepcopy__(self, memo: dict) -> Date:
        return Date.from_date(self)

    def __eq__(self, other: object) -> bool:
        """Check field-wise equality with another date."""
        if not isinstance(other, Date):
            return NotImplemented
        return comparisons.equal(self, other)

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        if not isinstance(other, Date):
            return NotImplemented
        return comparisons.not_equal(self, other)

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        """Return a hash consistent with field-wise equality.

        Changing a date with set() changes its hash, so a date should
        not be mutated while it is a dict key or set member.
        """
        return hash(self._fields)

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)', or 'Date()' when unset.
        """
        if self._fields is None:
            return "Date()"
        year, month, day = self._fields
        return f"Date({year}, {month.value}, {day})"

    def __str__(self) -> str:
        """Return the long form, like '5 de Março de 2024'."""
        return format_long(self)

    def __bool__(self) -> bool:
        """Unset dates are falsy."""
        return self._fields is not None


__all__ = ["Date"]
