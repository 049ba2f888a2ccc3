"""Date formatting.

This module provides functions for converting dates to their fixed
string representations. Parsing is not supported.

Functions:
    format_long: Format as "<day> de <month name> de <year>".
    format_sortable: Format as zero-padded YYYY/MM/DD.

Examples:
    >>> from calendario import Date, FixedClock
    >>> from calendario.format import format_long, format_sortable

    >>> d = Date(2024, 3, 5, clock=FixedClock(2024, 12, 31))
    >>> format_long(d)
    '5 de Março de 2024'
    >>> format_sortable(d)
    '2024/03/05'
"""

from __future__ import annotations

from calendario.format.text import format_long, format_sortable

__all__: list[str] = [
    "format_long",
    "format_sortable",
]
