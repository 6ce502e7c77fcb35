"""Validation utilities for civiltime.

This module provides validation utilities for
ensuring date and clock units are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.calendar import days_in_month
from civiltime._internal.clock import is_valid_units as is_valid_clock_units
from civiltime._internal.constants import MIN_YEAR, MAX_YEAR, NANOS_PER_SECOND
from civiltime.errors import InvalidUnitError


def is_valid_year(year: int) -> bool:
    """Return True if year is within MIN_YEAR to MAX_YEAR."""
    return MIN_YEAR <= year <= MAX_YEAR


def is_valid_month(month: int) -> bool:
    """Return True if month is within 1-12."""
    return 1 <= month <= 12


def is_valid_date_units(year: int, month: int, day: int) -> bool:
    """Return True if year, month and day form a supported calendar date."""
    return (
        is_valid_year(year)
        and is_valid_month(month)
        and 1 <= day <= days_in_month(year, month)
    )


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        InvalidUnitError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if not is_valid_year(year):
        raise InvalidUnitError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidUnitError: If month is outside 1-12.
    """
    if not is_valid_month(month):
        raise InvalidUnitError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidUnitError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidUnitError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_date_units(year: int, month: int, day: int) -> None:
    """Validate year, month and day, in that order.

    Raises:
        InvalidUnitError: If any unit is out of range.
    """
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


def validate_clock_units(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate hour, minute, second and nanosecond units.

    Raises:
        InvalidUnitError: If any unit is out of range.
    """
    if is_valid_clock_units(hour, minute, second, nanosecond):
        return
    if not (0 <= hour <= 23):
        raise InvalidUnitError(f"hour must be between 0 and 23, got {hour}")
    if not (0 <= minute <= 59):
        raise InvalidUnitError(f"minute must be between 0 and 59, got {minute}")
    if not (0 <= second <= 59):
        raise InvalidUnitError(f"second must be between 0 and 59, got {second}")
    raise InvalidUnitError(
        f"nanosecond must be between 0 and {NANOS_PER_SECOND - 1}, got {nanosecond}"
    )


__all__ = [
    "is_valid_year",
    "is_valid_month",
    "is_valid_date_units",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date_units",
    "validate_clock_units",
]
