"""Comparison operations for dates.

This module provides explicit comparison functions for Date values.
They are the canonical implementation behind Date's comparison
methods and operators.

Comparison Rules:
    - Ordering and difference use the ordinal day count only.
    - Equality is field-wise: same year, month and day.
    - Ordering or differencing an unset date raises UnsetDateError.

Supported Operations:
    - equal: Test equality
    - not_equal: Test inequality
    - greater_than: Test greater-than
    - less_than: Test less-than
    - compare: Three-way comparison (-1, 0, 1)
    - difference_in_days: Absolute distance in days
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calendario.core.date import Date


def equal(left: Date, right: Date) -> bool:
    """Test field-wise equality between two dates.

    Two unset dates are equal to each other and to nothing else.

    Examples:
        >>> from calendario.core.date import Date
        >>> from calendario.clock import FixedClock
        >>> clock = FixedClock(2024, 12, 31)
        >>> equal(Date(2024, 1, 15, clock=clock), Date(2024, 1, 15, clock=clock))
        True
    """
    return left._fields == right._fields


def not_equal(left: Date, right: Date) -> bool:
    """Test inequality between two dates."""
    return not equal(left, right)


def greater_than(left: Date, right: Date) -> bool:
    """Test if left falls after right.

    Raises:
        UnsetDateError: If either date is unset.
    """
    return left.to_ordinal() > right.to_ordinal()


def less_than(left: Date, right: Date) -> bool:
    """Test if left falls before right.

    Raises:
        UnsetDateError: If either date is unset.
    """
    return greater_than(right, left)


def compare(left: Date, right: Date) -> int:
    """Three-way comparison of two dates.

    Returns:
        -1 if right is later than left, 1 if left is later than right,
        0 otherwise.

    Raises:
        UnsetDateError: If either date is unset.
    """
    if greater_than(right, left):
        return -1
    if greater_than(left, right):
        return 1
    return 0


def difference_in_days(left: Date, right: Date) -> int:
    """Return the number of days between two dates.

    The result is never negative, so the argument order does not matter.

    Raises:
        UnsetDateError: If either date is unset.

    Examples:
        >>> from calendario.core.date import Date
        >>> from calendario.clock import FixedClock
        >>> clock = FixedClock(2024, 12, 31)
        >>> difference_in_days(
        ...     Date(2023, 1, 1, clock=clock), Date(2023, 12, 31, clock=clock)
        ... )
        364
    """
    return abs(left.to_ordinal() - right.to_ordinal())


__all__ = [
    "equal",
    "not_equal",
    "greater_than",
    "less_than",
    "compare",
    "difference_in_days",
]
