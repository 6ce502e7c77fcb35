"""Core value types.

This module provides the two value types:
    - Date: Calendar date in the proleptic Gregorian calendar, 1753-9999
    - TimeOfDay: Clock time with nanosecond precision
"""

from __future__ import annotations

from civiltime.core.date import Date
from civiltime.core.timeofday import TimeOfDay

__all__: list[str] = [
    "Date",
    "TimeOfDay",
]
