"""Ethiopic: arithmetic for the 13-month Ethiopic calendar.

The calendar has twelve 30-day months followed by a short 13th month
of 5 days (6 in leap years). Dates convert to and from ISO day counts
(days since proleptic Gregorian 0000-01-01), which is how they compose
with other calendars and with the standard library.

Calendar:
    EthiopicCalendar: The full operation set (validity, lengths, fields,
        ranges, month arithmetic, day-count conversion)
    ETHIOPIC: The shared EthiopicCalendar instance
    CalendarBehaviour: Protocol every calendar implementation satisfies
    get_calendar / register_calendar: Lookup by calendar identifier

Core Types:
    EthiopicDate: Immutable calendar date
    DateRange: Inclusive range of dates

Units:
    Era: The two eras (0 and 1)
    DateUnit: Units accepted by date arithmetic
    NOT_DEFINED: Result of week and quarter queries

Exceptions:
    EthiopicError: Base exception
    ValidationError: Invalid date components
    ParseError: Failed to parse string
    UnknownCalendarError: No calendar registered under an identifier

Example:
    >>> from ethiopic import ETHIOPIC, EthiopicDate
    >>> ETHIOPIC.is_leap_year(2015)
    True
    >>> EthiopicDate(2016, 1, 1).to_gregorian()
    datetime.date(2023, 9, 12)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Calendar
from ethiopic.behaviour import CalendarBehaviour
from ethiopic.calendar import ETHIOPIC, EthiopicCalendar
from ethiopic.registry import available_calendars, get_calendar, register_calendar

# Core types
from ethiopic.core.date import EthiopicDate
from ethiopic.core.date_range import DateRange

# Units
from ethiopic.units.era import Era
from ethiopic.units.undefined import NOT_DEFINED, NotDefined, is_not_defined
from ethiopic.units.unit import DateUnit

# Exceptions
from ethiopic.errors import (
    EthiopicError,
    ParseError,
    UnknownCalendarError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Calendar
    "CalendarBehaviour",
    "EthiopicCalendar",
    "ETHIOPIC",
    "get_calendar",
    "register_calendar",
    "available_calendars",
    # Core types
    "EthiopicDate",
    "DateRange",
    # Units
    "Era",
    "DateUnit",
    "NotDefined",
    "NOT_DEFINED",
    "is_not_defined",
    # Exceptions
    "EthiopicError",
    "ValidationError",
    "ParseError",
    "UnknownCalendarError",
]
