"""Custom decorators for Calendario.

This module provides decorator utilities for the library:
    - @memoize: Per-year result cache for the day counter

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable, TypeVar

T = TypeVar("T")


def memoize(func: Callable[[int], T]) -> Callable[[int], T]:
    """Cache the results of a function taking a single int.

    days_before_year() walks every year before the one it is given, so
    its results are kept per year.

    Args:
        func: The function to wrap. It must take one positional int.

    Returns:
        A caching version of the function.

    Examples:
        >>> @memoize
        ... def square(n: int) -> int:
        ...     return n ** 2
    """
    results: dict[int, T] = {}

    @functools.wraps(func)
    def wrapper(n: int) -> T:
        if n not in results:
            results[n] = func(n)
        return results[n]

    return wrapper


__all__ = [
    "memoize",
]
