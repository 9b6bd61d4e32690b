"""Julian calendar day counts.

The Ethiopic epoch is defined as a Julian calendar date, so this module
carries just enough of the Julian calendar to turn that date into an
ISO day count. ISO day 0 is proleptic Gregorian 0000-01-01.

The Julian calendar has no year 0: year -1 is followed by year 1.

This module is not part of the public API.
"""

from __future__ import annotations

# Julian 0001-01-01 falls on proleptic Gregorian 0000-12-30
JULIAN_EPOCH_ISO_DAYS: int = 364


def is_julian_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the Julian calendar.

    Every fourth year is a leap year. Because there is no year 0,
    the leap years before the common era are -1, -5, -9, ...

    Args:
        year: The Julian year (non-zero).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_julian_leap_year(8)
        True
        >>> is_julian_leap_year(1900)  # No century rule
        True
        >>> is_julian_leap_year(-1)
        True
    """
    return year % 4 == (0 if year > 0 else 3)


def julian_to_iso_days(year: int, month: int, day: int) -> int:
    """Convert a Julian calendar date to an ISO day count.

    Args:
        year: The Julian year (non-zero, negative before the common era).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Days since proleptic Gregorian 0000-01-01.

    Examples:
        >>> julian_to_iso_days(1, 1, 1)
        364
        >>> julian_to_iso_days(8, 8, 29)
        3161
    """
    y = year + 1 if year < 0 else year

    if month <= 2:
        correction = 0
    elif is_julian_leap_year(year):
        correction = -1
    else:
        correction = -2

    return (
        JULIAN_EPOCH_ISO_DAYS
        - 1
        + 365 * (y - 1)
        + (y - 1) // 4
        + (367 * month - 362) // 12
        + correction
        + day
    )


__all__ = [
    "JULIAN_EPOCH_ISO_DAYS",
    "is_julian_leap_year",
    "julian_to_iso_days",
]
