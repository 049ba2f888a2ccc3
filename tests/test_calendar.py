"""Tests for the leap year rule and ordinal day counting."""

from __future__ import annotations

import pytest

from calendario._internal.calendar import (
    count_days,
    days_before_month,
    days_before_year,
    days_in_year,
    is_leap_year,
)


class TestIsLeapYear:
    """Tests for is_leap_year()."""

    def test_divisible_by_400(self) -> None:
        """Test that 2000 is a leap year."""
        assert is_leap_year(2000)

    def test_divisible_by_100_not_400(self) -> None:
        """Test that 1900 is not a leap year."""
        assert not is_leap_year(1900)

    def test_divisible_by_4(self) -> None:
        """Test that 2024 is a leap year."""
        assert is_leap_year(2024)

    def test_not_divisible_by_4(self) -> None:
        """Test that 2023 is not a leap year."""
        assert not is_leap_year(2023)

    def test_year_zero(self) -> None:
        """Test that year 0 is a leap year."""
        assert is_leap_year(0)

    def test_matches_rule_over_range(self) -> None:
        """Test the predicate against the divisibility rule."""
        for year in range(0, 2401):
            expected = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
            assert is_leap_year(year) is expected, year


class TestDaysInYear:
    """Tests for days_in_year()."""

    def test_leap_year(self) -> None:
        assert days_in_year(2024) == 366

    def test_common_year(self) -> None:
        assert days_in_year(2023) == 365
        assert days_in_year(1900) == 365


class TestDaysBeforeYear:
    """Tests for days_before_year()."""

    def test_epoch(self) -> None:
        """Test that nothing precedes year 1."""
        assert days_before_year(1) == 0

    def test_year_zero(self) -> None:
        """Test that year 0 has no prior years to count."""
        assert days_before_year(0) == 0

    def test_second_year(self) -> None:
        assert days_before_year(2) == 365

    def test_includes_leap_day(self) -> None:
        """Test that year 4 contributes 366 days."""
        assert days_before_year(6) == 5 * 365 + 1

    def test_four_centuries(self) -> None:
        """Test a full 400-year cycle."""
        assert days_before_year(401) == 146097

    def test_repeated_calls_agree(self) -> None:
        """Test that a cached year gives the same count again."""
        assert days_before_year(1999) == days_before_year(1999) == 729754


class TestDaysBeforeMonth:
    """Tests for days_before_month()."""

    def test_january(self) -> None:
        assert days_before_month(2023, 1) == 0

    def test_march_common_year(self) -> None:
        assert days_before_month(2023, 3) == 59

    def test_march_leap_year(self) -> None:
        assert days_before_month(2024, 3) == 60

    def test_december(self) -> None:
        assert days_before_month(2023, 12) == 334
        assert days_before_month(2024, 12) == 335


class TestCountDays:
    """Tests for count_days()."""

    def test_epoch_is_one(self) -> None:
        assert count_days(1, 1, 1) == 1

    def test_end_of_first_year(self) -> None:
        assert count_days(1, 12, 31) == 365

    def test_start_of_second_year(self) -> None:
        assert count_days(2, 1, 1) == 366

    def test_year_zero_shares_base(self) -> None:
        """Test that year 0 counts from the same base as year 1."""
        assert count_days(0, 1, 1) == 1
        assert count_days(0, 3, 1) == 61

    @pytest.mark.parametrize(
        ("year", "month", "day", "expected"),
        [
            (1970, 1, 1, 719163),
            (2000, 2, 29, 730179),
            (2024, 1, 1, 738886),
            (2024, 1, 15, 738900),
        ],
    )
    def test_known_ordinals(self, year: int, month: int, day: int, expected: int) -> None:
        """Test ordinals against known proleptic Gregorian values."""
        assert count_days(year, month, day) == expected

    def test_monotonic_across_year_end(self) -> None:
        assert count_days(2023, 12, 31) + 1 == count_days(2024, 1, 1)

    def test_monotonic_across_leap_day(self) -> None:
        assert count_days(2024, 2, 28) + 1 == count_days(2024, 2, 29)
        assert count_days(2024, 2, 29) + 1 == count_days(2024, 3, 1)
