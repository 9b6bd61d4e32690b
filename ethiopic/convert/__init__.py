"""Conversion utilities shared with the standard library.

This module provides calendar-agnostic functions for moving between
ISO day counts, datetime.date, and time-of-day fractions.

Functions:
    gregorian_to_iso_days: datetime.date to ISO day count.
    iso_days_to_gregorian: ISO day count to datetime.date.
    valid_time: Check a time of day.
    time_to_day_fraction: Time of day to (parts, parts_per_day).
    time_from_day_fraction: (parts, parts_per_day) to time of day.
"""

from __future__ import annotations

from ethiopic.convert.iso import (
    gregorian_to_iso_days,
    iso_days_to_gregorian,
    time_from_day_fraction,
    time_to_day_fraction,
    valid_time,
)

__all__: list[str] = [
    "gregorian_to_iso_days",
    "iso_days_to_gregorian",
    "valid_time",
    "time_to_day_fraction",
    "time_from_day_fraction",
]
