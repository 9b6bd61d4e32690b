"""Marker for calendar concepts this calendar does not define.

The Ethiopic calendar is month based: it has no weeks of the year and
no quarters. Queries for those concepts return NOT_DEFINED instead of
raising, so callers can tell "this calendar has no such thing" apart
from a ValidationError caused by bad input.
"""

from __future__ import annotations

from enum import Enum


class NotDefined(Enum):
    """Result of a query the calendar does not define.

    The single member is falsy, and the usual test is by identity.

    Examples:
        >>> from ethiopic import ETHIOPIC
        >>> ETHIOPIC.week_of_year(2016, 1, 1) is NOT_DEFINED
        True
        >>> bool(NOT_DEFINED)
        False
    """

    NOT_DEFINED = "not_defined"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_DEFINED"


NOT_DEFINED = NotDefined.NOT_DEFINED


def is_not_defined(value: object) -> bool:
    """Return True if value is the NOT_DEFINED marker."""
    return value is NOT_DEFINED


__all__ = [
    "NotDefined",
    "NOT_DEFINED",
    "is_not_defined",
]
