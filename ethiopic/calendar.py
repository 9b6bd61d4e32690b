"""The Ethiopic calendar.

EthiopicCalendar implements the full CalendarBehaviour operation set on
top of the internal arithmetic in ethiopic._internal.calendar. It is
stateless; the module-level ETHIOPIC instance is the one registered
under the "ethiopic" identifier.

The calendar is month based. It has thirteen months: twelve of 30 days
and a 13th of 5 days, or 6 in leap years. Years with ``year mod 4 == 3``
are leap years. Day 1 of year 1 is Julian 8-08-29.

Week and quarter queries return NOT_DEFINED. Time of day and string
handling are delegated to the calendar-agnostic ethiopic.convert and
ethiopic.format modules.

Examples:
    >>> from ethiopic import ETHIOPIC
    >>> ETHIOPIC.date_to_iso_days(2016, 1, 1)
    739140
    >>> ETHIOPIC.plus(2015, 13, 5, "months", 1)
    (2016, 1, 5)
    >>> ETHIOPIC.week_of_year(2016, 1, 1)
    NOT_DEFINED
"""

from __future__ import annotations

from ethiopic._internal import calendar as _calendar
from ethiopic._internal.constants import (
    CALENDAR_BASE,
    CALENDAR_TYPE,
    DAYS_IN_WEEK,
    MONTHS_IN_YEAR,
)
from ethiopic._internal.validation import validate_month
from ethiopic.convert.iso import time_from_day_fraction, time_to_day_fraction, valid_time
from ethiopic.core.date import EthiopicDate
from ethiopic.core.date_range import DateRange
from ethiopic.format.iso8601 import date_to_string, parse_date
from ethiopic.units.era import Era
from ethiopic.units.undefined import NOT_DEFINED, NotDefined
from ethiopic.units.unit import DateUnit


class EthiopicCalendar:
    """The Ethiopic calendar operation set.

    All methods are pure functions of their arguments. The raw
    conversion methods accept any integer year; the range constructors
    build EthiopicDate endpoints and therefore reject invalid dates.
    """

    def cldr_calendar_type(self) -> str:
        return CALENDAR_TYPE

    def calendar_base(self) -> str:
        return CALENDAR_BASE

    def epoch(self) -> int:
        """Return the ISO day count of 1 Meskerem, year 1."""
        return _calendar.epoch()

    def valid_date(self, year: int, month: int, day: int) -> bool:
        """Return True if (year, month, day) is a date in this calendar.

        Months 1-12 have days 1-30. Month 13 has days 1-5, plus day 6
        in leap years. Anything else is invalid. Never raises.
        """
        return _calendar.valid_date(year, month, day)

    def is_leap_year(self, year: int) -> bool:
        """Return True if ``year mod 4 == 3`` (floor modulo)."""
        return _calendar.is_leap_year(year)

    def days_in_month(self, year: int, month: int) -> int:
        """Return 30 for months 1-12, and 5 or 6 for month 13.

        Raises:
            ValidationError: If month is not in 1-13.
        """
        validate_month(month)
        return _calendar.days_in_month(year, month)

    def days_in_year(self, year: int) -> int:
        return _calendar.days_in_year(year)

    def days_in_week(self) -> int:
        return DAYS_IN_WEEK

    def months_in_year(self, year: int) -> int:
        return MONTHS_IN_YEAR

    def periods_in_year(self, year: int) -> int:
        """Return the number of months in the year, which is always 13."""
        return MONTHS_IN_YEAR

    def weeks_in_year(self, year: int) -> NotDefined:
        return NOT_DEFINED

    def day_of_week(self, year: int, month: int, day: int) -> int:
        """Return the day of the week, 1 = Monday through 7 = Sunday."""
        return _calendar.day_of_week(year, month, day)

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return _calendar.day_of_year(year, month, day)

    def day_of_era(self, year: int, month: int, day: int) -> tuple[int, Era]:
        """Return the day count offset by the epoch, with the era.

        Raises:
            ValidationError: If year is 0.
        """
        _, era = self.year_of_era(year)
        days = _calendar.date_to_iso_days(year, month, day)
        return (days + _calendar.epoch(), era)

    def year_of_era(self, year: int) -> tuple[int, Era]:
        """Return the year counted within its era, with the era.

        Years after the epoch are in era 1; years before it are in
        era 0 and are counted by magnitude.

        Raises:
            ValidationError: If year is 0, which belongs to neither era.

        Examples:
            >>> ETHIOPIC.year_of_era(2016)
            (2016, <Era.AMETE_MIHRET: 1>)
            >>> ETHIOPIC.year_of_era(-7)
            (7, <Era.AMETE_ALEM: 0>)
        """
        return _calendar.year_of_era(year)

    def month_of_year(self, year: int, month: int, day: int) -> int:
        return month

    def quarter_of_year(self, year: int, month: int, day: int) -> NotDefined:
        return NOT_DEFINED

    def week_of_year(self, year: int, month: int, day: int) -> NotDefined:
        return NOT_DEFINED

    def iso_week_of_year(self, year: int, month: int, day: int) -> NotDefined:
        return NOT_DEFINED

    def week_of_month(self, year: int, month: int, day: int) -> NotDefined:
        return NOT_DEFINED

    def year(self, year: int) -> DateRange:
        """Return the range from the first to the last day of a year.

        Raises:
            ValidationError: If the year is outside the supported range.

        Examples:
            >>> ETHIOPIC.year(2015)
            DateRange(EthiopicDate(2015, 1, 1), EthiopicDate(2015, 13, 6))
        """
        last_month = self.months_in_year(year)
        first = EthiopicDate(year, 1, 1)
        last = EthiopicDate(year, last_month, self.days_in_month(year, last_month))
        return DateRange(first, last)

    def quarter(self, year: int, quarter: int) -> NotDefined:
        return NOT_DEFINED

    def month(self, year: int, month: int) -> DateRange:
        """Return the range from the first to the last day of a month.

        Raises:
            ValidationError: If the year or month is invalid.

        Examples:
            >>> ETHIOPIC.month(2016, 13)
            DateRange(EthiopicDate(2016, 13, 1), EthiopicDate(2016, 13, 5))
        """
        ending_day = self.days_in_month(year, month)
        first = EthiopicDate(year, month, 1)
        last = EthiopicDate(year, month, ending_day)
        return DateRange(first, last)

    def week(self, year: int, week: int) -> NotDefined:
        return NOT_DEFINED

    def plus(
        self,
        year: int,
        month: int,
        day: int,
        unit: DateUnit | str = DateUnit.MONTHS,
        increment: int = 0,
        *,
        coerce: bool = False,
    ) -> tuple[int, int, int] | NotDefined:
        """Add ``increment`` units to a year-month-day.

        Only DateUnit.MONTHS is supported; any other unit returns
        NOT_DEFINED. The day is kept as is, even when the target month
        is shorter, unless coerce is set.

        Args:
            year: The starting year.
            month: The starting month (1-13).
            day: The starting day.
            unit: A DateUnit or its name, e.g. "months".
            increment: Number of units to add (can be negative).
            coerce: Clamp the day to the length of the target month.

        Returns:
            The new (year, month, day), or NOT_DEFINED.

        Raises:
            ValueError: If unit is a string that names no DateUnit.

        Examples:
            >>> ETHIOPIC.plus(2016, 5, 10, DateUnit.MONTHS, -40)
            (2013, 4, 10)
            >>> ETHIOPIC.plus(2015, 13, 6, DateUnit.MONTHS, 13, coerce=True)
            (2016, 13, 5)
        """
        if DateUnit(unit) is not DateUnit.MONTHS:
            return NOT_DEFINED
        return _calendar.add_months(year, month, day, increment, coerce=coerce)

    def date_to_iso_days(self, year: int, month: int, day: int) -> int:
        """Return the ISO day count (days since Gregorian 0000-01-01)."""
        return _calendar.date_to_iso_days(year, month, day)

    def date_from_iso_days(self, days: int) -> tuple[int, int, int]:
        """Return the (year, month, day) for an ISO day count."""
        return _calendar.date_from_iso_days(days)

    def naive_datetime_to_iso_days(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        microsecond: int = 0,
    ) -> tuple[int, tuple[int, int]]:
        """Return (iso_days, (parts, parts_per_day)) for a date and time."""
        return (
            _calendar.date_to_iso_days(year, month, day),
            time_to_day_fraction(hour, minute, second, microsecond),
        )

    def naive_datetime_from_iso_days(
        self, iso_days: tuple[int, tuple[int, int]]
    ) -> tuple[int, int, int, int, int, int, int]:
        """Return (year, month, day, hour, minute, second, microsecond)."""
        days, fraction = iso_days
        year, month, day = _calendar.date_from_iso_days(days)
        hour, minute, second, microsecond = time_from_day_fraction(fraction)
        return (year, month, day, hour, minute, second, microsecond)

    def date_to_string(self, year: int, month: int, day: int) -> str:
        return date_to_string(year, month, day)

    def parse_date(self, s: str) -> tuple[int, int, int]:
        return parse_date(s)

    def valid_time(
        self, hour: int, minute: int, second: int, microsecond: int = 0
    ) -> bool:
        return valid_time(hour, minute, second, microsecond)

    def __repr__(self) -> str:
        return "EthiopicCalendar()"


ETHIOPIC = EthiopicCalendar()


__all__ = [
    "EthiopicCalendar",
    "ETHIOPIC",
]
