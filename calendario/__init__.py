"""Calendario: a validated calendar date value type.

Calendario provides a Date made of a year, a month and a day, validated
against the Gregorian leap year rule, with ordering, day differences and
two fixed text renderings. Validation and arithmetic do not use the
standard library's datetime; it is only consulted by SystemClock to find
out what day it is.

Core Types:
    Date: Calendar date (year, month, day)
    Month: Calendar month with leap-aware day counts

Clocks:
    Clock: Protocol for "what is today"
    SystemClock: Host clock
    FixedClock: Clock pinned to one date
    get_clock / set_clock / use_clock: Process-wide default clock

Format Functions:
    format_long: "<day> de <month name> de <year>"
    format_sortable: Zero-padded YYYY/MM/DD

Exceptions:
    CalendarioError: Base exception
    ValidationError: Invalid field values
    InvalidYearError / InvalidMonthError / InvalidDayError: Specific failures
    UnsetDateError: Operation needs a set date
    ConfigurationError: Invalid environment configuration

Example:
    >>> from calendario import Date, FixedClock
    >>> clock = FixedClock(2024, 12, 31)
    >>> a = Date(2023, 1, 1, clock=clock)
    >>> b = Date(2023, 12, 31, clock=clock)
    >>> a < b
    True
    >>> a.difference_in_days(b)
    364
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Exceptions
from calendario.errors import (
    CalendarioError,
    ConfigurationError,
    InvalidDayError,
    InvalidMonthError,
    InvalidYearError,
    UnsetDateError,
    ValidationError,
)

# Clocks
from calendario.clock import (
    Clock,
    FixedClock,
    SystemClock,
    get_clock,
    set_clock,
    use_clock,
)

# Units
from calendario.units.month import Month

# Core types
from calendario.core.date import Date

# Format functions
from calendario.format import format_long, format_sortable

# Calendar helpers
from calendario._internal.calendar import is_leap_year

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    # Units
    "Month",
    # Clocks
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_clock",
    "set_clock",
    "use_clock",
    # Exceptions
    "CalendarioError",
    "ValidationError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "UnsetDateError",
    "ConfigurationError",
    # Format functions
    "format_long",
    "format_sortable",
    # Calendar helpers
    "is_leap_year",
]
