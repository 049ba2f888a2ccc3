"""Calendar units and enumerations.

This module provides:
    - Month: calendar month enum with leap-aware day counts
"""

from __future__ import annotations

from calendario.units.month import Month

__all__: list[str] = [
    "Month",
]
