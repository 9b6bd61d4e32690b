"""DateRange class representing an inclusive run of dates.

This module provides the DateRange class returned by the calendar's
year and month constructors.
"""

from __future__ import annotations

from typing import Iterator

from ethiopic.core.date import EthiopicDate


class DateRange:
    """An inclusive range of dates, [first, last].

    Unlike a half-open interval, both endpoints belong to the range, so
    the range for a month runs from its first day to its last day.

    Attributes:
        first: The first date in the range.
        last: The last date in the range.

    Examples:
        >>> r = DateRange(EthiopicDate(2016, 13, 1), EthiopicDate(2016, 13, 5))
        >>> len(r)
        5
        >>> EthiopicDate(2016, 13, 5) in r
        True
    """

    __slots__ = ("_first", "_last")

    def __init__(self, first: EthiopicDate, last: EthiopicDate) -> None:
        """Create a range from first to last, both inclusive.

        Raises:
            ValueError: If last is before first.
        """
        if last < first:
            raise ValueError(
                f"last must not be before first: got first={first}, last={last}"
            )
        self._first = first
        self._last = last

    @property
    def first(self) -> EthiopicDate:
        return self._first

    @property
    def last(self) -> EthiopicDate:
        return self._last

    def __len__(self) -> int:
        return self._last - self._first + 1

    def __iter__(self) -> Iterator[EthiopicDate]:
        start = self._first.to_iso_days()
        for days in range(start, self._last.to_iso_days() + 1):
            yield EthiopicDate.from_iso_days(days)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, EthiopicDate):
            return False
        return self._first <= item <= self._last

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return self._first == other._first and self._last == other._last

    def __hash__(self) -> int:
        return hash((self._first, self._last))

    def __repr__(self) -> str:
        return f"DateRange({self._first!r}, {self._last!r})"


__all__ = ["DateRange"]
