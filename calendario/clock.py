"""Clocks that report the current calendar date.

A Date reads "today" in two places: the upper bound on the year during
validation and the Date.today() factory. Both go through a Clock so the
time-dependent rule can be pinned in tests and simulations.

The process-wide default clock is a SystemClock unless the
CALENDARIO_TODAY environment variable holds a YYYY-MM-DD date, in which
case it is a FixedClock on that date.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import os
import re
from contextlib import contextmanager
from typing import TYPE_CHECKING, Protocol

from calendario._internal.constants import TODAY_ENV_VAR
from calendario.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

logger = logging.getLogger(__name__)

_TODAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class Clock(Protocol):
    """Anything that can report today's date as (year, month, day)."""

    def today(self) -> tuple[int, int, int]: ...


class SystemClock:
    """Clock backed by the host's local date."""

    def today(self) -> tuple[int, int, int]:
        now = _datetime.date.today()
        return (now.year, now.month, now.day)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that always reports the same date.

    The fields are reported as given; they are not validated here.

    Examples:
        >>> FixedClock(2024, 3, 5).today()
        (2024, 3, 5)
    """

    __slots__ = ("_today",)

    def __init__(self, year: int, month: int, day: int) -> None:
        self._today = (year, month, day)

    def today(self) -> tuple[int, int, int]:
        return self._today

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedClock):
            return NotImplemented
        return self._today == other._today

    def __hash__(self) -> int:
        return hash(self._today)

    def __repr__(self) -> str:
        year, month, day = self._today
        return f"FixedClock({year}, {month}, {day})"


def clock_from_env(environ: Mapping[str, str] | None = None) -> Clock:
    """Build the default clock from the environment.

    Args:
        environ: Mapping to read instead of os.environ.

    Returns:
        A FixedClock when CALENDARIO_TODAY is set, else a SystemClock.

    Raises:
        ConfigurationError: If CALENDARIO_TODAY is not a real YYYY-MM-DD date.
    """
    source = os.environ if environ is None else environ
    raw = source.get(TODAY_ENV_VAR)
    if raw is None or not raw.strip():
        return SystemClock()

    value = raw.strip()
    if not _TODAY_PATTERN.match(value):
        raise ConfigurationError(
            f"{TODAY_ENV_VAR} must be formatted YYYY-MM-DD, got {raw!r}"
        )
    try:
        pinned = _datetime.date.fromisoformat(value)
    except ValueError as exc:
        raise ConfigurationError(
            f"{TODAY_ENV_VAR} is not a calendar date: {raw!r} ({exc})"
        ) from exc

    logger.debug("default clock pinned to %s by %s", pinned.isoformat(), TODAY_ENV_VAR)
    return FixedClock(pinned.year, pinned.month, pinned.day)


_default_clock: Clock | None = None


def get_clock() -> Clock:
    """Return the process-wide default clock, creating it on first use."""
    global _default_clock
    if _default_clock is None:
        _default_clock = clock_from_env()
    return _default_clock


def set_clock(clock: Clock | None) -> None:
    """Replace the process-wide default clock.

    Passing None drops the current clock so the next get_clock() call
    rebuilds it from the environment.
    """
    global _default_clock
    logger.debug("default clock set to %r", clock)
    _default_clock = clock


@contextmanager
def use_clock(clock: Clock) -> Iterator[Clock]:
    """Temporarily install a default clock.

    Examples:
        >>> from calendario import Date
        >>> with use_clock(FixedClock(2024, 3, 5)):
        ...     Date.today()
        Date(2024, 3, 5)
    """
    global _default_clock
    previous = _default_clock
    set_clock(clock)
    try:
        yield clock
    finally:
        _default_clock = previous


def resolve_clock(clock: Clock | None) -> Clock:
    """Return clock, or the default clock when clock is None."""
    return get_clock() if clock is None else clock


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "clock_from_env",
    "get_clock",
    "set_clock",
    "use_clock",
    "resolve_clock",
]
