"""Internal utilities for civiltime.

This module contains private implementation details:
    - Calendar (Julian day number) and clock conversions
    - Validation helpers
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.validation import (
    validate_clock_units,
    validate_date_units,
    validate_day,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "validate_clock_units",
    "validate_date_units",
    "validate_day",
    "validate_month",
    "validate_year",
]
