"""ISO 8601 style formatting and parsing for Ethiopic dates.

Dates are written in the extended ISO layout with this calendar's
components, so the 13th month is written as ``13``:

    - YYYY-MM-DD
    - -YYYY-MM-DD (years before year 1)

Times of day are calendar-agnostic and are formatted by
``datetime.time.isoformat``.

Functions:
    date_to_string: Format (year, month, day) as YYYY-MM-DD.
    parse_date: Parse YYYY-MM-DD into a validated (year, month, day).
    time_to_string: Format a time of day as HH:MM:SS[.ffffff].
    naive_datetime_to_string: Format a date and time joined by 'T'.

Examples:
    >>> date_to_string(2015, 13, 6)
    '2015-13-06'
    >>> parse_date("2015-13-06")
    (2015, 13, 6)
"""

from __future__ import annotations

import datetime
import re

from ethiopic._internal.validation import validate_date
from ethiopic.errors import ParseError, ValidationError

# Match patterns: YYYY-MM-DD or -YYYY-MM-DD
_DATE_PATTERN = re.compile(r"^([+-]?\d{4,})-(\d{2})-(\d{2})$")


def date_to_string(year: int, month: int, day: int) -> str:
    """Format a date as YYYY-MM-DD.

    Negative years get a leading minus and at least four digits.

    Examples:
        >>> date_to_string(2016, 1, 1)
        '2016-01-01'
        >>> date_to_string(-44, 3, 15)
        '-0044-03-15'
    """
    if year >= 0:
        return f"{year:04d}-{month:02d}-{day:02d}"
    return f"{year:05d}-{month:02d}-{day:02d}"


def parse_date(s: str) -> tuple[int, int, int]:
    """Parse a YYYY-MM-DD string into (year, month, day).

    Args:
        s: The date string.

    Returns:
        The validated (year, month, day) tuple.

    Raises:
        ParseError: If the string is not in YYYY-MM-DD form.
        ValidationError: If the components do not form a valid date.

    Examples:
        >>> parse_date("-0044-03-15")
        (-44, 3, 15)

        >>> parse_date("2016-13-06")  # 2016 is not a leap year
        Traceback (most recent call last):
        ...
        ValidationError: day must be between 1 and 5 for 2016-13, got 6
    """
    match = _DATE_PATTERN.match(s.strip())
    if not match:
        raise ParseError(
            f"Invalid date format: {s!r}. Expected YYYY-MM-DD or -YYYY-MM-DD"
        )

    year = int(match.group(1))
    month = int(match.group(2))
    day = int(match.group(3))

    validate_date(year, month, day)
    return (year, month, day)


def time_to_string(hour: int, minute: int, second: int, microsecond: int = 0) -> str:
    """Format a time of day as HH:MM:SS, adding .ffffff when non-zero.

    Raises:
        ValidationError: If the components do not form a valid time of day.
    """
    try:
        time = datetime.time(hour, minute, second, microsecond)
    except ValueError as e:
        raise ValidationError(
            f"invalid time of day {hour:02d}:{minute:02d}:{second:02d}.{microsecond:06d}"
        ) from e
    return time.isoformat()


def naive_datetime_to_string(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: int = 0,
) -> str:
    """Format a date and time of day as YYYY-MM-DDTHH:MM:SS[.ffffff]."""
    return (
        f"{date_to_string(year, month, day)}T"
        f"{time_to_string(hour, minute, second, microsecond)}"
    )


__all__ = [
    "date_to_string",
    "parse_date",
    "time_to_string",
    "naive_datetime_to_string",
]
