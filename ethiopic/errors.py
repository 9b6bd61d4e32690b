"""Ethiopic exception hierarchy.

All package-specific exceptions inherit from EthiopicError.

Week- and quarter-based queries are not errors: they return the
NOT_DEFINED marker from ethiopic.units.undefined instead of raising.
"""

from __future__ import annotations


class EthiopicError(Exception):
    """Base exception for all Ethiopic calendar errors."""

    pass


class ValidationError(EthiopicError):
    """Invalid input values.

    Raised when a date component is out of range or the combination
    does not form a valid date in this calendar.

    Examples:
        - Month value outside 1-13
        - Day 31 in any month
        - Day 6 of month 13 in a non-leap year
        - Year 0 passed to an era query, since it belongs to neither era
    """

    pass


class ParseError(EthiopicError):
    """Failed to parse string representation.

    Examples:
        - Missing separators in a YYYY-MM-DD string
        - Non-numeric components
    """

    pass


class UnknownCalendarError(EthiopicError):
    """No calendar is registered under the requested identifier."""

    pass


__all__ = [
    "EthiopicError",
    "ValidationError",
    "ParseError",
    "UnknownCalendarError",
]
