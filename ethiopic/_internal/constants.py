"""Internal constants for the Ethiopic calendar.

These constants define the shape of the calendar and the limits used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Calendar shape: twelve 30-day months followed by a short 13th month
MONTHS_IN_YEAR: int = 13
DAYS_IN_STANDARD_MONTH: int = 30
DAYS_IN_SHORT_MONTH: int = 5
DAYS_IN_SHORT_MONTH_LEAP: int = 6
DAYS_IN_YEAR: int = 365
DAYS_IN_LEAP_YEAR: int = 366
DAYS_IN_WEEK: int = 7

# Leap years are those with year mod 4 == LEAP_YEAR_REMAINDER
LEAP_CYCLE_YEARS: int = 4
LEAP_YEAR_REMAINDER: int = 3
DAYS_IN_LEAP_CYCLE: int = 4 * DAYS_IN_YEAR + 1  # 1461

# Day 1 of month 1 of year 1 is Julian 8-08-29
EPOCH_JULIAN_DATE: tuple[int, int, int] = (8, 8, 29)

# Weekday of ISO day 0 (0000-01-01, a Saturday), Monday=1
EPOCH_DAY_OF_WEEK: int = 6

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# ISO day count of proleptic Gregorian 0001-01-01 minus its ordinal (1)
GREGORIAN_ORDINAL_OFFSET: int = 365

# Time of day, in the microsecond resolution of datetime.time
MICROSECONDS_PER_SECOND: int = 1_000_000
SECONDS_PER_DAY: int = 86_400
MICROSECONDS_PER_DAY: int = SECONDS_PER_DAY * MICROSECONDS_PER_SECOND

# Calendar identifiers
CALENDAR_TYPE: str = "ethiopic"
CALENDAR_BASE: str = "month"


__all__ = [
    "MONTHS_IN_YEAR",
    "DAYS_IN_STANDARD_MONTH",
    "DAYS_IN_SHORT_MONTH",
    "DAYS_IN_SHORT_MONTH_LEAP",
    "DAYS_IN_YEAR",
    "DAYS_IN_LEAP_YEAR",
    "DAYS_IN_WEEK",
    "LEAP_CYCLE_YEARS",
    "LEAP_YEAR_REMAINDER",
    "DAYS_IN_LEAP_CYCLE",
    "EPOCH_JULIAN_DATE",
    "EPOCH_DAY_OF_WEEK",
    "MIN_YEAR",
    "MAX_YEAR",
    "GREGORIAN_ORDINAL_OFFSET",
    "MICROSECONDS_PER_SECOND",
    "SECONDS_PER_DAY",
    "MICROSECONDS_PER_DAY",
    "CALENDAR_TYPE",
    "CALENDAR_BASE",
]
