"""Core calendar types.

This module provides the fundamental type:
    - Date: Calendar date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from calendario.core.date import Date

__all__: list[str] = [
    "Date",
]
