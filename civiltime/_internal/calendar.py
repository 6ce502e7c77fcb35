"""Calendar utilities for civiltime.

This module provides internal functions for converting between proleptic
Gregorian dates and Julian day numbers, plus leap year logic.

The conversion is the Fliegel-Van Flandern style algorithm: the calendar is
shifted so that March is the first month of a computational year, which puts
the leap day at the end of the year, and the year is then split into a
century and a remainder. Only integer floor division is used, and every
operand stays non-negative for years 1753 through 9999.

Day number 2361331 = 1753-01-01, day number 5373484 = 9999-12-31.

This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    DAYS_IN_MONTH,
    EPOCH_WEEKDAY,
    JULIAN_EPOCH_OFFSET,
)

# Days in a 400-year Gregorian cycle and in a 4-year Julian cycle
_DAYS_PER_400_YEARS = 146_097
_DAYS_PER_4_YEARS = 1_461


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(1996)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def gregorian_to_day_number(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to a Julian day number.

    No validation is performed; callers must range-check the units first.

    Args:
        year: The year (1753-9999).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The day number.

    Examples:
        >>> gregorian_to_day_number(1753, 1, 1)
        2361331
        >>> gregorian_to_day_number(9999, 12, 31)
        5373484
    """
    # March-based computational year
    if month > 2:
        month -= 3
    else:
        month += 9
        year -= 1

    century = year // 100
    year_of_century = year - 100 * century
    return (
        (_DAYS_PER_400_YEARS * century) // 4
        + (_DAYS_PER_4_YEARS * year_of_century) // 4
        + (153 * month + 2) // 5
        + day
        + JULIAN_EPOCH_OFFSET
    )


def day_number_to_gregorian(day_number: int) -> tuple[int, int, int]:
    """Convert a Julian day number to a proleptic Gregorian date.

    This is the exact inverse of gregorian_to_day_number() for every
    day number between 1753-01-01 and 9999-12-31.

    Args:
        day_number: The day number.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> day_number_to_gregorian(2361331)
        (1753, 1, 1)
    """
    n = day_number - JULIAN_EPOCH_OFFSET

    century = (4 * n - 1) // _DAYS_PER_400_YEARS
    n = 4 * n - 1 - _DAYS_PER_400_YEARS * century
    day_of_century = n // 4

    year_of_century = (4 * day_of_century + 3) // _DAYS_PER_4_YEARS
    n = 4 * day_of_century + 3 - _DAYS_PER_4_YEARS * year_of_century
    day_of_year = (n + 4) // 4

    month = (5 * day_of_year - 3) // 153
    n = 5 * day_of_year - 3 - 153 * month
    day = (n + 5) // 5
    year = 100 * century + year_of_century

    # Back from the March-based computational year
    if month < 10:
        month += 3
    else:
        month -= 9
        year += 1
    return (year, month, day)


def day_number_to_weekday(day_number: int) -> int:
    """Convert a day number to day of week (Monday=0, Sunday=6).

    Args:
        day_number: The day number.

    Returns:
        Day of week (0=Monday, 6=Sunday).
    """
    return (day_number + EPOCH_WEEKDAY) % 7


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "gregorian_to_day_number",
    "day_number_to_gregorian",
    "day_number_to_weekday",
]
