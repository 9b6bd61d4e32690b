"""Bridge between ISO day counts and the standard library.

This module is calendar-agnostic. It converts the ISO day counts used
throughout the package to and from ``datetime.date`` in the proleptic
Gregorian calendar, and handles the time-of-day part of a datetime as
a fraction of a day. Any calendar that speaks ISO day counts can
compose with it.

Functions:
    gregorian_to_iso_days: Convert a datetime.date to an ISO day count.
    iso_days_to_gregorian: Convert an ISO day count to a datetime.date.
    valid_time: Check an hour/minute/second/microsecond combination.
    time_to_day_fraction: Convert a time of day to (parts, parts_per_day).
    time_from_day_fraction: Convert (parts, parts_per_day) to a time of day.

ISO day 0 = 0000-01-01. datetime.date cannot represent years before 1,
so only ISO day counts from 366 upward map to a datetime.date.

Examples:
    >>> import datetime
    >>> gregorian_to_iso_days(datetime.date(2023, 9, 12))
    739140
    >>> time_to_day_fraction(12, 0, 0, 0)
    (43200000000, 86400000000)
"""

from __future__ import annotations

import datetime

from ethiopic._internal.constants import (
    GREGORIAN_ORDINAL_OFFSET,
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_SECOND,
)
from ethiopic.errors import ValidationError


def gregorian_to_iso_days(date: datetime.date) -> int:
    """Return the ISO day count of a standard-library date.

    Args:
        date: A datetime.date (a datetime.datetime is truncated to its date).

    Returns:
        Days since proleptic Gregorian 0000-01-01.
    """
    return date.toordinal() + GREGORIAN_ORDINAL_OFFSET


def iso_days_to_gregorian(days: int) -> datetime.date:
    """Return the standard-library date for an ISO day count.

    Args:
        days: Days since proleptic Gregorian 0000-01-01.

    Returns:
        The corresponding datetime.date.

    Raises:
        ValidationError: If the day count falls outside the years
            datetime.date supports (1-9999).
    """
    try:
        return datetime.date.fromordinal(days - GREGORIAN_ORDINAL_OFFSET)
    except (ValueError, OverflowError) as e:
        raise ValidationError(
            f"iso day count {days} is outside the range of datetime.date"
        ) from e


def valid_time(hour: int, minute: int, second: int, microsecond: int = 0) -> bool:
    """Return True if the components form a valid time of day.

    Examples:
        >>> valid_time(23, 59, 59, 999999)
        True
        >>> valid_time(24, 0, 0)
        False
    """
    try:
        datetime.time(hour, minute, second, microsecond)
    except ValueError:
        return False
    return True


def time_to_day_fraction(
    hour: int, minute: int, second: int, microsecond: int = 0
) -> tuple[int, int]:
    """Convert a time of day to a fraction of a day.

    Args:
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        microsecond: The microsecond (0-999999).

    Returns:
        Tuple of (parts, parts_per_day), counted in microseconds.

    Raises:
        ValidationError: If the time of day is invalid.
    """
    if not valid_time(hour, minute, second, microsecond):
        raise ValidationError(
            f"invalid time of day {hour:02d}:{minute:02d}:{second:02d}.{microsecond:06d}"
        )
    seconds = (hour * 60 + minute) * 60 + second
    return (seconds * MICROSECONDS_PER_SECOND + microsecond, MICROSECONDS_PER_DAY)


def time_from_day_fraction(fraction: tuple[int, int]) -> tuple[int, int, int, int]:
    """Convert a fraction of a day to a time of day.

    The fraction is rescaled to microseconds, rounding down.

    Args:
        fraction: Tuple of (parts, parts_per_day) with 0 <= parts < parts_per_day.

    Returns:
        Tuple of (hour, minute, second, microsecond).

    Raises:
        ValidationError: If the fraction is not within one day.
    """
    parts, parts_per_day = fraction
    if parts_per_day <= 0 or parts < 0 or parts >= parts_per_day:
        raise ValidationError(
            f"day fraction must be within [0, 1), got {parts}/{parts_per_day}"
        )
    micros = parts * MICROSECONDS_PER_DAY // parts_per_day
    seconds, microsecond = divmod(micros, MICROSECONDS_PER_SECOND)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return (hour, minute, second, microsecond)


__all__ = [
    "gregorian_to_iso_days",
    "iso_days_to_gregorian",
    "valid_time",
    "time_to_day_fraction",
    "time_from_day_fraction",
]
