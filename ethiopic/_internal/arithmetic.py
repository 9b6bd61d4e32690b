"""Integer helpers with floor semantics.

Python's // and % already round toward negative infinity, so these
helpers only add the 1-based "adjusted" variants used for weekdays
and month rollover.

This module is not part of the public API.
"""

from __future__ import annotations


def amod(x: int, y: int) -> int:
    """Return x mod y in the range 1..y instead of 0..y-1.

    Examples:
        >>> amod(7, 7)
        7
        >>> amod(8, 7)
        1
        >>> amod(0, 13)
        13
    """
    return (x - 1) % y + 1


def div_amod(x: int, y: int) -> tuple[int, int]:
    """Split x into (quotient, adjusted remainder) with remainder in 1..y.

    The pair satisfies ``quotient * y + remainder == x`` and floors for
    negative x, so it stays exact across any number of wraps.

    Examples:
        >>> div_amod(14, 13)
        (1, 1)
        >>> div_amod(13, 13)
        (0, 13)
        >>> div_amod(0, 13)
        (-1, 13)
    """
    quotient, remainder = divmod(x - 1, y)
    return quotient, remainder + 1


__all__ = [
    "amod",
    "div_amod",
]
