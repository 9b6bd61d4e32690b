"""Calendar lookup by identifier.

The registry maps calendar identifiers (the value of
``cldr_calendar_type()``) to calendar implementations, so a dispatch
layer can select a calendar from configuration or user input and then
call it through CalendarBehaviour.

Examples:
    >>> from ethiopic.registry import get_calendar
    >>> get_calendar("ethiopic").days_in_month(2015, 13)
    6
"""

from __future__ import annotations

import logging

from ethiopic.behaviour import CalendarBehaviour
from ethiopic.calendar import ETHIOPIC
from ethiopic.errors import UnknownCalendarError

logger = logging.getLogger(__name__)

_CALENDARS: dict[str, CalendarBehaviour] = {
    ETHIOPIC.cldr_calendar_type(): ETHIOPIC,
}


def register_calendar(identifier: str, calendar: CalendarBehaviour) -> None:
    """Register a calendar implementation under an identifier.

    Args:
        identifier: The lookup key, e.g. "ethiopic".
        calendar: An object providing the CalendarBehaviour operations.

    Raises:
        TypeError: If calendar does not provide CalendarBehaviour.
        ValueError: If the identifier is already registered.
    """
    if not isinstance(calendar, CalendarBehaviour):
        raise TypeError(
            f"calendar must implement CalendarBehaviour, got {type(calendar).__name__}"
        )
    if identifier in _CALENDARS:
        raise ValueError(f"calendar {identifier!r} is already registered")

    _CALENDARS[identifier] = calendar
    logger.debug("registered calendar %r as %r", calendar, identifier)


def get_calendar(identifier: str) -> CalendarBehaviour:
    """Return the calendar registered under an identifier.

    Raises:
        UnknownCalendarError: If nothing is registered under identifier.
    """
    try:
        calendar = _CALENDARS[identifier]
    except KeyError:
        raise UnknownCalendarError(
            f"unknown calendar {identifier!r}; known calendars: {available_calendars()}"
        ) from None

    logger.debug("resolved calendar %r to %r", identifier, calendar)
    return calendar


def available_calendars() -> list[str]:
    """Return the registered identifiers in sorted order."""
    return sorted(_CALENDARS)


__all__ = [
    "register_calendar",
    "get_calendar",
    "available_calendars",
]
