"""Era enumeration for the Ethiopic calendar.

This module provides the Era enum for splitting the year axis into the
two eras of the calendar, numbered 0 and 1.
"""

from __future__ import annotations

from enum import IntEnum


class Era(IntEnum):
    """Era designation.

    Years 1 and later belong to era 1 (Amete Mihret, the era of mercy).
    Years -1 and earlier belong to era 0 (Amete Alem, the era of the
    world). Year 0 is a valid calendar year but has no year-of-era
    number; a date in year 0 reports Era.AMETE_ALEM.

    The members are integers so that ``(year, era)`` pairs compare equal
    to plain ``(year, 0)`` and ``(year, 1)`` tuples.

    Examples:
        >>> Era.AMETE_MIHRET == 1
        True

        >>> Era.AMETE_ALEM.is_before_epoch
        True
    """

    AMETE_ALEM = 0
    AMETE_MIHRET = 1

    @property
    def is_before_epoch(self) -> bool:
        """Return True if this era precedes year 1.

        Returns:
            True if this is Era.AMETE_ALEM, False if Era.AMETE_MIHRET.
        """
        return self == Era.AMETE_ALEM


__all__ = ["Era"]
