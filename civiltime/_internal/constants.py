"""Internal constants for civiltime.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

HOURS_PER_DAY: int = 24
MINUTES_PER_HOUR: int = 60
SECONDS_PER_MINUTE: int = 60

# Year limits
MIN_YEAR: int = 1753
MAX_YEAR: int = 9999

# Day numbers on the Julian-day scale used by the calendar converter
JULIAN_EPOCH_OFFSET: int = 1_721_119
MIN_DAY_NUMBER: int = 2_361_331  # 1753-01-01
MAX_DAY_NUMBER: int = 5_373_484  # 9999-12-31
NIL_DAY_NUMBER: int = -2

# Unit values reported for nil and out-of-range dates
NIL_UNIT: int = -2
INVALID_UNIT: int = -1
INVALID_WEEKDAY: int = -1

# Day number modulo 7 is 0 on a Monday (1753-01-01 was a Monday)
EPOCH_WEEKDAY: int = 0

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Codec limits
BINARY_SIZE: int = 8
MIN_TIME_TEXT_LENGTH: int = 8  # hh:mm:ss
MAX_TIME_TEXT_LENGTH: int = 18  # hh:mm:ss.fffffffff
DATE_TEXT_LENGTH: int = 10  # YYYY-MM-DD


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "MIN_YEAR",
    "MAX_YEAR",
    "JULIAN_EPOCH_OFFSET",
    "MIN_DAY_NUMBER",
    "MAX_DAY_NUMBER",
    "NIL_DAY_NUMBER",
    "NIL_UNIT",
    "INVALID_UNIT",
    "INVALID_WEEKDAY",
    "EPOCH_WEEKDAY",
    "DAYS_IN_MONTH",
    "BINARY_SIZE",
    "MIN_TIME_TEXT_LENGTH",
    "MAX_TIME_TEXT_LENGTH",
    "DATE_TEXT_LENGTH",
]
