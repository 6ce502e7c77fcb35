"""Calendar units and enumerations.

This module provides:
    - Weekday: Day-of-week enum (Monday=0 .. Sunday=6)
"""

from __future__ import annotations

from civiltime.units.weekday import Weekday

__all__: list[str] = [
    "Weekday",
]
