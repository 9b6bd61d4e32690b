"""Validation utilities for the Ethiopic calendar.

Constructors call these helpers before building a date so that an
out-of-range component is rejected rather than normalized.

This module is not part of the public API.
"""

from __future__ import annotations

from ethiopic._internal.constants import MAX_YEAR, MIN_YEAR, MONTHS_IN_YEAR
from ethiopic.errors import ValidationError


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )

def validate_month(month: int) -> None:
    """Validate that a month is within 1-13.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-13.
    """
    if month < 1 or month > MONTHS_IN_YEAR:
        raise ValidationError(
            f"month must be between 1 and {MONTHS_IN_YEAR}, got {month}"
        )


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-13).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from ethiopic._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate all three components of a date.

    Raises:
        TypeError: If a component is not an integer.
        ValidationError: If any component is invalid.
    """
    for name, value in (("year", year), ("month", month), ("day", day)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
]
