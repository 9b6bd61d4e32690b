"""Internal utilities for the Ethiopic calendar.

This module contains private implementation details:
    - Calendar arithmetic (epoch, leap rule, day-count conversion)
    - Validation helpers
    - Constants
    - Custom decorators (@memoize)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from ethiopic._internal.decorators import memoize
from ethiopic._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "memoize",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_year",
]
