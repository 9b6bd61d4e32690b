"""The operation set every calendar implementation provides.

A multi-calendar dispatch layer looks calendars up by identifier in
ethiopic.registry and then calls them only through this protocol, so
every calendar can be used interchangeably.

Queries a calendar does not define (weeks and quarters in a month-based
calendar) return NOT_DEFINED rather than raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ethiopic.core.date_range import DateRange
    from ethiopic.units.era import Era
    from ethiopic.units.undefined import NotDefined
    from ethiopic.units.unit import DateUnit


@runtime_checkable
class CalendarBehaviour(Protocol):
    """Protocol for a calendar that converts through ISO day counts."""

    def cldr_calendar_type(self) -> str:
        """The calendar identifier, e.g. "ethiopic"."""
        ...

    def calendar_base(self) -> str:
        """Either "month" or "week"."""
        ...

    def valid_date(self, year: int, month: int, day: int) -> bool: ...

    def is_leap_year(self, year: int) -> bool: ...

    def days_in_month(self, year: int, month: int) -> int: ...

    def days_in_year(self, year: int) -> int: ...

    def months_in_year(self, year: int) -> int: ...

    def periods_in_year(self, year: int) -> int: ...

    def weeks_in_year(self, year: int) -> int | NotDefined: ...

    def day_of_week(self, year: int, month: int, day: int) -> int: ...

    def day_of_year(self, year: int, month: int, day: int) -> int: ...

    def day_of_era(self, year: int, month: int, day: int) -> tuple[int, Era]: ...

    def year_of_era(self, year: int) -> tuple[int, Era]: ...

    def month_of_year(self, year: int, month: int, day: int) -> int: ...

    def quarter_of_year(self, year: int, month: int, day: int) -> int | NotDefined: ...

    def week_of_year(
        self, year: int, month: int, day: int
    ) -> tuple[int, int] | NotDefined: ...

    def iso_week_of_year(
        self, year: int, month: int, day: int
    ) -> tuple[int, int] | NotDefined: ...

    def week_of_month(
        self, year: int, month: int, day: int
    ) -> tuple[int, int] | NotDefined: ...

    def year(self, year: int) -> DateRange: ...

    def quarter(self, year: int, quarter: int) -> DateRange | NotDefined: ...

    def month(self, year: int, month: int) -> DateRange: ...

    def week(self, year: int, week: int) -> DateRange | NotDefined: ...

    def plus(
        self,
        year: int,
        month: int,
        day: int,
        unit: DateUnit | str = ...,
        increment: int = 0,
        *,
        coerce: bool = False,
    ) -> tuple[int, int, int] | NotDefined: ...

    def date_to_iso_days(self, year: int, month: int, day: int) -> int: ...

    def date_from_iso_days(self, days: int) -> tuple[int, int, int]: ...


__all__ = ["CalendarBehaviour"]
