"""Text renderings of a Date.

Two fixed renderings are supported:
    - Long form: "5 de Março de 2024"
    - Sortable form: "2024/03/05"

An unset date renders with zero fields and the NO_MONTH name, so both
functions accept any Date.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calendario.units.month import Month, display_name

if TYPE_CHECKING:
    from calendario.core.date import Date


def _parts(date: Date) -> tuple[int, Month, int]:
    fields = date._fields
    if fields is None:
        return (0, Month.NO_MONTH, 0)
    return (fields.year, fields.month, fields.day)


def format_long(date: Date) -> str:
    """Format a date as "<day> de <month name> de <year>".

    Examples:
        >>> from calendario import Date, FixedClock
        >>> format_long(Date(2024, 3, 5, clock=FixedClock(2024, 12, 31)))
        '5 de Março de 2024'
        >>> format_long(Date())
        '0 de Sem mês de 0'
    """
    year, month, day = _parts(date)
    return f"{day} de {display_name(month)} de {year}"


def format_sortable(date: Date) -> str:
    """Format a date as zero-padded YYYY/MM/DD.

    Strings in this form sort in calendar order.

    Examples:
        >>> from calendario import Date, FixedClock
        >>> format_sortable(Date(2024, 3, 5, clock=FixedClock(2024, 12, 31)))
        '2024/03/05'
        >>> format_sortable(Date())
        '0000/00/00'
    """
    year, month, day = _parts(date)
    return f"{year:04d}/{month.value:02d}/{day:02d}"


__all__ = [
    "format_long",
    "format_sortable",
]
