"""civiltime: civil dates and clock times with fixed-width codecs.

civiltime provides two small value types for data that carries no time
zone: a calendar date and a clock time, each with canonical text, 8-byte
binary and JSON encodings plus database driver interop.

Core Types:
    Date: Calendar date (1753-01-01 to 9999-12-31), or Date.NIL
    TimeOfDay: Clock time with nanosecond precision

Units:
    Weekday: Day of the week (MONDAY=0 to SUNDAY=6)

Driver Interop:
    NullDate, NullTimeOfDay: Holders for nullable columns
    scan_date, scan_time_of_day: Decode driver values

Exceptions:
    CivilTimeError: Base exception
    ValidationError: Invalid input values
    OutOfRangeError: Result outside the supported range
    ParseError: Failed to decode text, binary or JSON
    UnsupportedSourceTypeError: Driver value of an unknown type

Example:
    >>> from civiltime import Date, TimeOfDay
    >>> Date(2024, 1, 15).end_of_month()
    Date(2024, 1, 31)
    >>> TimeOfDay(23, 0, 0) + 2 * 3_600_000_000_000
    TimeOfDay(1, 0, 0, nanosecond=0)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from civiltime.core.date import Date
from civiltime.core.timeofday import TimeOfDay

# Units
from civiltime.units.weekday import Weekday

# Exceptions
from civiltime.errors import (
    CivilTimeError,
    InvalidBinaryLengthError,
    InvalidDurationError,
    InvalidJSONShapeError,
    InvalidTextFormatError,
    InvalidTextLengthError,
    InvalidUnitError,
    OutOfRangeError,
    ParseError,
    UnsupportedSourceTypeError,
    ValidationError,
)

# Driver interop
from civiltime.sql import NullDate, NullTimeOfDay, scan_date, scan_time_of_day

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "TimeOfDay",
    # Units
    "Weekday",
    # Exceptions
    "CivilTimeError",
    "ValidationError",
    "InvalidUnitError",
    "InvalidDurationError",
    "OutOfRangeError",
    "ParseError",
    "InvalidBinaryLengthError",
    "InvalidTextLengthError",
    "InvalidTextFormatError",
    "InvalidJSONShapeError",
    "UnsupportedSourceTypeError",
    # Driver interop
    "NullDate",
    "NullTimeOfDay",
    "scan_date",
    "scan_time_of_day",
]
