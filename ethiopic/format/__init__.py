"""Date formatting and parsing.

Functions:
    date_to_string: Format (year, month, day) as YYYY-MM-DD.
    parse_date: Parse YYYY-MM-DD into a validated (year, month, day).
    time_to_string: Format a time of day.
    naive_datetime_to_string: Format a date and time of day.
"""

from __future__ import annotations

from ethiopic.format.iso8601 import (
    date_to_string,
    naive_datetime_to_string,
    parse_date,
    time_to_string,
)

__all__: list[str] = [
    "date_to_string",
    "parse_date",
    "time_to_string",
    "naive_datetime_to_string",
]
