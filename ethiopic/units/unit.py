"""DateUnit enumeration for calendar arithmetic.

This module provides the DateUnit enum naming the units that date
arithmetic can be asked to add.
"""

from __future__ import annotations

from enum import Enum


class DateUnit(Enum):
    """Units accepted by calendar arithmetic.

    The Ethiopic calendar only adds whole months; asking for any other
    unit yields the NOT_DEFINED marker. Members can be looked up from
    their lowercase plural names.

    Examples:
        >>> DateUnit("months")
        <DateUnit.MONTHS: 'months'>
    """

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    QUARTERS = "quarters"
    YEARS = "years"


__all__ = ["DateUnit"]
