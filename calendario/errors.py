"""Calendario exception hierarchy.

All Calendario-specific exceptions inherit from CalendarioError.
"""

from __future__ import annotations


class CalendarioError(Exception):
    """Base exception for all Calendario errors."""

    pass


class ValidationError(CalendarioError, ValueError):
    """Invalid input values.

    Raised when a date component is out of range. The offending value
    is kept on the ``value`` attribute so callers can message on it.
    """

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidYearError(ValidationError):
    """Year is negative or later than the current year.

    Examples:
        - Year -1
        - A year after the one reported by the clock
    """

    pass


class InvalidMonthError(ValidationError):
    """Month is outside 1-12.

    Examples:
        - Month 0
        - Month 13
    """

    pass


class InvalidDayError(ValidationError):
    """Day is outside the valid range for its month and year.

    Examples:
        - Day 0
        - February 29 in a non-leap year
        - April 31
    """

    pass


class UnsetDateError(CalendarioError):
    """Operation requires a date that has been set.

    Raised when reading the fields of, ordering, or differencing an
    unset Date.
    """

    pass


class ConfigurationError(CalendarioError):
    """Invalid configuration values.

    Raised when an environment override such as CALENDARIO_TODAY
    cannot be interpreted.
    """

    pass


__all__ = [
    "CalendarioError",
    "ValidationError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "UnsetDateError",
    "ConfigurationError",
]
