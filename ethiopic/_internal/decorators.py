"""Custom decorators for the Ethiopic calendar.

This module provides decorator utilities for the library:
    - @memoize: Simple memoization decorator

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Simple memoization decorator for functions with hashable arguments.

    Caches the result of each call keyed on its arguments. Used for
    values that are fixed for the life of the process, such as the
    calendar epoch. Two threads racing on a cold cache both compute
    the same value, and the later store overwrites the earlier one
    with an equal result.

    Args:
        func: The function to memoize.

    Returns:
        A memoized version of the function.

    Examples:
        >>> @memoize
        ... def epoch() -> int:
        ...     return julian_to_iso_days(8, 8, 29)
    """
    cache: dict[tuple, T] = {}

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        if key not in cache:
            cache[key] = func(*args, **kwargs)
        return cache[key]

    # Expose cache for testing/introspection
    wrapper._cache = cache  # type: ignore[attr-defined]
    wrapper._clear_cache = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "memoize",
]
