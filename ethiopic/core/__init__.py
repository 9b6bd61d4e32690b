"""Core calendar types.

This module provides the fundamental value types:
    - EthiopicDate: A date in the Ethiopic calendar
    - DateRange: An inclusive run of dates [first, last]
"""

from __future__ import annotations

from ethiopic.core.date import EthiopicDate
from ethiopic.core.date_range import DateRange

__all__: list[str] = [
    "EthiopicDate",
    "DateRange",
]
