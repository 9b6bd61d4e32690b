"""EthiopicDate class representing a calendar date.

This module provides the EthiopicDate class for representing dates in
the Ethiopic calendar: twelve 30-day months followed by a 13th month
of 5 days (6 in leap years).
"""

from __future__ import annotations

import datetime
from typing import overload

from ethiopic._internal.calendar import (
    add_months,
    date_from_iso_days,
    date_to_iso_days,
    day_of_week,
    day_of_year,
    days_in_month,
    is_leap_year,
    year_of_era,
)
from ethiopic._internal.validation import validate_date
from ethiopic.convert.iso import gregorian_to_iso_days, iso_days_to_gregorian
from ethiopic.format.iso8601 import date_to_string, parse_date
from ethiopic.units.era import Era


class EthiopicDate:
    """A date in the Ethiopic calendar.

    EthiopicDate is an immutable (year, month, day) value. Year 0 is an
    ordinary 365-day year between -1 and 1, so every day count in the
    supported range maps to a date. Years before year 1 belong to
    Era.AMETE_ALEM.

    Internal representation is the ISO day count (days since proleptic
    Gregorian 0000-01-01), so comparison and day arithmetic are plain
    integer operations.

    Attributes:
        year: The year (0 or negative before year 1).
        month: The month (1-13).
        day: The day of the month (1-30, or 1-6 in month 13).

    Examples:
        >>> d = EthiopicDate(2016, 1, 1)
        >>> d.to_gregorian()
        datetime.date(2023, 9, 12)

        >>> EthiopicDate(2015, 13, 6)  # 2015 is a leap year
        EthiopicDate(2015, 13, 6)

        >>> EthiopicDate(-1, 1, 1).era
        <Era.AMETE_ALEM: 0>
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a date from year, month, and day.

        Args:
            year: The year (within -9999..9999).
            month: The month (1-13).
            day: The day of the month.

        Raises:
            TypeError: If a component is not an int.
            ValidationError: If any component is out of range.

        Examples:
            >>> EthiopicDate(2016, 13, 6)  # 2016 is not a leap year
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 5 for 2016-13, got 6
        """
        validate_date(year, month, day)
        self._days = date_to_iso_days(year, month, day)

    @classmethod
    def from_iso_days(cls, days: int) -> EthiopicDate:
        """Create a date from an ISO day count.

        Args:
            days: Days since proleptic Gregorian 0000-01-01.

        Returns:
            The corresponding EthiopicDate.

        Raises:
            ValidationError: If the day count falls outside the supported
                year range.

        Examples:
            >>> EthiopicDate.from_iso_days(739140)
            EthiopicDate(2016, 1, 1)
        """
        year, month, day = date_from_iso_days(days)
        return cls(year, month, day)

    @classmethod
    def from_gregorian(cls, date: datetime.date) -> EthiopicDate:
        """Create a date from a standard-library Gregorian date.

        Examples:
            >>> EthiopicDate.from_gregorian(datetime.date(2024, 1, 7))
            EthiopicDate(2016, 4, 28)
        """
        return cls.from_iso_days(gregorian_to_iso_days(date))

    @classmethod
    def today(cls) -> EthiopicDate:
        """Return today's date in the local timezone."""
        return cls.from_gregorian(datetime.date.today())

    @classmethod
    def from_iso_format(cls, s: str) -> EthiopicDate:
        """Parse a date from YYYY-MM-DD format.

        Args:
            s: The date string, e.g. "2015-13-06".

        Returns:
            The parsed EthiopicDate.

        Raises:
            ParseError: If the string is not in YYYY-MM-DD form.
            ValidationError: If the date components are invalid.
        """
        return cls(*parse_date(s))

    @property
    def year(self) -> int:
        """Return the year component."""
        year, _, _ = date_from_iso_days(self._days)
        return year

    @property
    def month(self) -> int:
        """Return the month component (1-13)."""
        _, month, _ = date_from_iso_days(self._days)
        return month

    @property
    def day(self) -> int:
        """Return the day component."""
        _, _, day = date_from_iso_days(self._days)
        return day

    @property
    def era(self) -> Era:
        """Return the era of this date.

        Returns:
            Era.AMETE_MIHRET for years 1 and later, Era.AMETE_ALEM before.
            Year 0 counts as Era.AMETE_ALEM.
        """
        return Era.AMETE_MIHRET if self.year > 0 else Era.AMETE_ALEM

    @property
    def year_of_era(self) -> tuple[int, Era]:
        """Return the year counted within its era, with the era.

        Raises:
            ValidationError: If the year is 0, which belongs to neither era.

        Examples:
            >>> EthiopicDate(-5, 1, 1).year_of_era
            (5, <Era.AMETE_ALEM: 0>)
        """
        return year_of_era(self.year)

    @property
    def day_of_week(self) -> int:
        """Return the day of the week.

        Returns:
            Day of week (1=Monday, 7=Sunday).

        Examples:
            >>> EthiopicDate(2016, 1, 1).day_of_week  # Tuesday
            2
        """
        return day_of_week(*date_from_iso_days(self._days))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> EthiopicDate(2015, 13, 6).day_of_year
            366
        """
        return day_of_year(*date_from_iso_days(self._days))

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        year, month, _ = date_from_iso_days(self._days)
        return days_in_month(year, month)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> EthiopicDate:
        """Return a new date with specified components replaced.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> EthiopicDate(2016, 1, 15).replace(month=13, day=5)
            EthiopicDate(2016, 13, 5)
        """
        y, m, d = date_from_iso_days(self._days)
        new_year = year if year is not None else y
        new_month = month if month is not None else m
        new_day = day if day is not None else d
        return EthiopicDate(new_year, new_month, new_day)

    def add_days(self, days: int) -> EthiopicDate:
        """Return a new date offset by the given number of days.

        Raises:
            ValidationError: If the result is out of range.

        Examples:
            >>> EthiopicDate(2015, 13, 6).add_days(1)
            EthiopicDate(2016, 1, 1)
        """
        return EthiopicDate.from_iso_days(self._days + days)

    def add_months(self, months: int) -> EthiopicDate:
        """Return a new date offset by the given number of months.

        If the day does not exist in the target month, it is clamped to
        the last day of that month.

        Args:
            months: Number of months to add (can be negative).

        Returns:
            A new EthiopicDate offset by the specified months.

        Raises:
            ValidationError: If the result is out of range.

        Examples:
            >>> EthiopicDate(2016, 12, 30).add_months(1)
            EthiopicDate(2016, 13, 5)

            >>> EthiopicDate(2016, 1, 10).add_months(-1)
            EthiopicDate(2015, 13, 6)
        """
        year, month, day = date_from_iso_days(self._days)
        return EthiopicDate(*add_months(year, month, day, months, coerce=True))

    def to_iso_days(self) -> int:
        """Return the ISO day count of this date."""
        return self._days

    def to_gregorian(self) -> datetime.date:
        """Return the proleptic Gregorian date for this date.

        Raises:
            ValidationError: If the date falls before Gregorian year 1.
        """
        return iso_days_to_gregorian(self._days)

    def to_iso_format(self) -> str:
        """Return the date as a YYYY-MM-DD string.

        Examples:
            >>> EthiopicDate(2015, 13, 6).to_iso_format()
            '2015-13-06'
        """
        return date_to_string(*date_from_iso_days(self._days))

    def __add__(self, other: object) -> EthiopicDate:
        """Add a number of days to this date."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(other)

    __radd__ = __add__

    @overload
    def __sub__(self, other: EthiopicDate) -> int: ...

    @overload
    def __sub__(self, other: int) -> EthiopicDate: ...

    def __sub__(self, other: object) -> EthiopicDate | int:
        """Subtract a number of days or another date.

        Subtracting an int returns a new date. Subtracting a date
        returns the number of days between them.

        Examples:
            >>> EthiopicDate(2016, 1, 1) - EthiopicDate(2015, 1, 1)
            366
        """
        if isinstance(other, EthiopicDate):
            return self._days - other._days
        if isinstance(other, int) and not isinstance(other, bool):
            return self.add_days(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EthiopicDate):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EthiopicDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, EthiopicDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, EthiopicDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, EthiopicDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = date_from_iso_days(self._days)
        return f"EthiopicDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["EthiopicDate"]
