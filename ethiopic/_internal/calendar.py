"""Calendar arithmetic for the Ethiopic calendar.

This module provides the internal functions behind every public
calendar operation: the epoch, the leap year rule, conversion between
(year, month, day) and ISO day counts, and the fields derived from
that conversion.

The year has twelve 30-day months followed by a short 13th month of
5 days, or 6 days in a leap year. Leap years repeat every four years
with no century exception.

ISO day 0 = 0000-01-01 in the proleptic Gregorian calendar. All
division here is floor division, which keeps the conversions exact
for negative years.

This module is not part of the public API.
"""

from __future__ import annotations

import logging

from ethiopic._internal.arithmetic import amod, div_amod
from ethiopic._internal.constants import (
    DAYS_IN_LEAP_CYCLE,
    DAYS_IN_LEAP_YEAR,
    DAYS_IN_SHORT_MONTH,
    DAYS_IN_SHORT_MONTH_LEAP,
    DAYS_IN_STANDARD_MONTH,
    DAYS_IN_WEEK,
    DAYS_IN_YEAR,
    EPOCH_DAY_OF_WEEK,
    EPOCH_JULIAN_DATE,
    LEAP_CYCLE_YEARS,
    LEAP_YEAR_REMAINDER,
    MONTHS_IN_YEAR,
)
from ethiopic._internal.decorators import memoize
from ethiopic._internal.julian import julian_to_iso_days
from ethiopic.errors import ValidationError
from ethiopic.units.era import Era

logger = logging.getLogger(__name__)


@memoize
def epoch() -> int:
    """Return the ISO day count of 1 Meskerem, year 1.

    The epoch is Julian 8-08-29. It is computed on first use and
    cached for the life of the process.

    Returns:
        The ISO day count of the first day of the calendar (3161).
    """
    days = julian_to_iso_days(*EPOCH_JULIAN_DATE)
    logger.debug("computed ethiopic epoch %d from julian %s", days, EPOCH_JULIAN_DATE)
    return days


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the Ethiopic calendar.

    A year is a leap year if ``year mod 4 == 3``, taking the modulo
    with floor semantics so that negative years follow the same cycle.

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2015)
        True
        >>> is_leap_year(2016)
        False
        >>> is_leap_year(-1)
        True
    """
    return year % LEAP_CYCLE_YEARS == LEAP_YEAR_REMAINDER


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for month 13 in leap years).
        month: The month (1-13).

    Returns:
        30 for months 1-12; 6 or 5 for month 13.

    Raises:
        ValueError: If month is not in 1-13.
    """
    if month < 1 or month > MONTHS_IN_YEAR:
        raise ValueError(f"month must be 1-{MONTHS_IN_YEAR}, got {month}")

    if month < MONTHS_IN_YEAR:
        return DAYS_IN_STANDARD_MONTH
    return DAYS_IN_SHORT_MONTH_LEAP if is_leap_year(year) else DAYS_IN_SHORT_MONTH


def days_in_year(year: int) -> int:
    """Return the number of days in a year.

    Args:
        year: The year to check.

    Returns:
        366 for leap years, 365 otherwise.
    """
    return DAYS_IN_LEAP_YEAR if is_leap_year(year) else DAYS_IN_YEAR


def valid_date(year: int, month: int, day: int) -> bool:
    """Return True if (year, month, day) is a date in this calendar.

    Never raises. Components must be integers. Day 6 of month 13
    only exists in leap years.

    Examples:
        >>> valid_date(2016, 12, 30)
        True
        >>> valid_date(2015, 13, 6)
        True
        >>> valid_date(2016, 13, 6)
        False
    """
    if not all(
        isinstance(value, int) and not isinstance(value, bool)
        for value in (year, month, day)
    ):
        return False

    if 1 <= month < MONTHS_IN_YEAR:
        return 1 <= day <= DAYS_IN_STANDARD_MONTH
    if month == MONTHS_IN_YEAR:
        if day == DAYS_IN_SHORT_MONTH_LEAP:
            return is_leap_year(year)
        return 1 <= day <= DAYS_IN_SHORT_MONTH
    return False


def date_to_iso_days(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ISO day count.

    The formula is linear in the month because every month before the
    13th has exactly 30 days; ``year // 4`` adds one day for each leap
    year that has already ended.

    Args:
        year: The year (can be negative).
        month: The month (1-13).
        day: The day of the month.

    Returns:
        Days since proleptic Gregorian 0000-01-01.

    Examples:
        >>> date_to_iso_days(1, 1, 1)
        3161
        >>> date_to_iso_days(2016, 1, 1)  # 2023-09-12 Gregorian
        739140
    """
    return (
        epoch()
        - 1
        + DAYS_IN_YEAR * (year - 1)
        + year // LEAP_CYCLE_YEARS
        + DAYS_IN_STANDARD_MONTH * (month - 1)
        + day
    )


def date_from_iso_days(days: int) -> tuple[int, int, int]:
    """Convert an ISO day count to year, month, day.

    This is the exact inverse of date_to_iso_days.

    Args:
        days: Days since proleptic Gregorian 0000-01-01.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> date_from_iso_days(739140)
        (2016, 1, 1)
        >>> date_from_iso_days(739139)
        (2015, 13, 6)
    """
    year = (4 * (days - epoch()) + DAYS_IN_LEAP_CYCLE + 2) // DAYS_IN_LEAP_CYCLE
    month = (days - date_to_iso_days(year, 1, 1)) // DAYS_IN_STANDARD_MONTH + 1
    day = days + 1 - date_to_iso_days(year, month, 1)
    return (year, month, day)


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the day of the week, 1 = Monday through 7 = Sunday.

    Examples:
        >>> day_of_week(2016, 1, 1)  # 2023-09-12 was a Tuesday
        2
    """
    days = date_to_iso_days(year, month, day)
    return amod(days % DAYS_IN_WEEK + EPOCH_DAY_OF_WEEK, DAYS_IN_WEEK)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the day of the year (1-366)."""
    return date_to_iso_days(year, month, day) - date_to_iso_days(year, 1, 1) + 1


def year_of_era(year: int) -> tuple[int, Era]:
    """Return the year counted within its era, with the era.

    Raises:
        ValidationError: If year is 0, which belongs to neither era.
    """
    if year > 0:
        return (year, Era.AMETE_MIHRET)
    if year < 0:
        return (abs(year), Era.AMETE_ALEM)
    raise ValidationError("year 0 does not belong to an era")


def add_months(
    year: int, month: int, day: int, months: int, coerce: bool = False
) -> tuple[int, int, int]:
    """Add a signed number of months to year, month, day.

    The month wraps over the 13-month year as many times as needed in
    either direction. The day is carried over unchanged, even when it
    does not exist in the target month, unless coerce is set, in which
    case it is clamped to the last day of the target month.

    Args:
        year: The starting year.
        month: The starting month (1-13).
        day: The starting day.
        months: Number of months to add (can be negative).
        coerce: Clamp the day to the length of the target month.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> add_months(2015, 13, 5, 1)
        (2016, 1, 5)
        >>> add_months(2015, 13, 6, 13)
        (2016, 13, 6)
        >>> add_months(2015, 13, 6, 13, coerce=True)
        (2016, 13, 5)
    """
    year_increment, new_month = div_amod(month + months, MONTHS_IN_YEAR)
    new_year = year + year_increment

    if coerce:
        day = min(day, days_in_month(new_year, new_month))

    return (new_year, new_month, day)


__all__ = [
    "epoch",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "valid_date",
    "date_to_iso_days",
    "date_from_iso_days",
    "day_of_week",
    "day_of_year",
    "year_of_era",
    "add_months",
]
