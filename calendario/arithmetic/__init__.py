"""Comparison and difference operations for dates.

Functions:
    equal: Field-wise equality.
    not_equal: Field-wise inequality.
    greater_than: Later-than by ordinal day count.
    less_than: Earlier-than by ordinal day count.
    compare: Three-way comparison (-1, 0, 1).
    difference_in_days: Absolute distance in days.
"""

from __future__ import annotations

from calendario.arithmetic.comparisons import (
    compare,
    difference_in_days,
    equal,
    greater_than,
    less_than,
    not_equal,
)

__all__: list[str] = [
    "compare",
    "difference_in_days",
    "equal",
    "greater_than",
    "less_than",
    "not_equal",
]
