"""Weekday enumeration.

This module provides the Weekday enum used by Date.weekday and the
next/previous weekday arithmetic.
"""

from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, Monday=0 through Sunday=6.

    The numbering matches datetime.date.weekday(), so a Weekday compares
    equal to the plain integer returned by the standard library.

    Examples:
        >>> Weekday.MONDAY
        <Weekday.MONDAY: 0>
        >>> Weekday(6).short_name
        'Sun'
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def full_name(self) -> str:
        """Return the English name, e.g. 'Monday'."""
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        """Return the three-letter English abbreviation, e.g. 'Mon'."""
        return self.name[:3].capitalize()

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self >= Weekday.SATURDAY


__all__ = ["Weekday"]
