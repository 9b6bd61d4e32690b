"""Calendar units and enumerations.

This module provides:
    - Era: the two eras of the calendar (0 and 1)
    - DateUnit: units accepted by date arithmetic
    - NotDefined / NOT_DEFINED: marker for undefined week and quarter queries
"""

from __future__ import annotations

from ethiopic.units.era import Era
from ethiopic.units.undefined import NOT_DEFINED, NotDefined, is_not_defined
from ethiopic.units.unit import DateUnit

__all__: list[str] = [
    "Era",
    "DateUnit",
    "NotDefined",
    "NOT_DEFINED",
    "is_not_defined",
]
