"""Canonical text encoding for Date and TimeOfDay.

Formats:
    Date:      YYYY-MM-DD (exactly 10 characters); Date.NIL is the empty string
    TimeOfDay: hh:mm:ss[.fffffffff] (8 to 18 characters), the fraction is
               omitted when zero and trimmed of trailing zeros otherwise

Parsing is strict: only ASCII digits are accepted, and no timezone is ever
applied, so there is no Daylight Saving ambiguity.

Examples:
    >>> from civiltime import Date, TimeOfDay
    >>> format_time_of_day(TimeOfDay(12, 34, 56, 100_000_000))
    '12:34:56.1'
    >>> parse_date("2024-01-15")
    Date(2024, 1, 15)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from civiltime._internal.clock import is_valid_units as is_valid_clock_units
from civiltime._internal.constants import (
    DATE_TEXT_LENGTH,
    MAX_TIME_TEXT_LENGTH,
    MIN_TIME_TEXT_LENGTH,
)
from civiltime._internal.validation import is_valid_date_units
from civiltime.errors import InvalidTextFormatError, InvalidTextLengthError

if TYPE_CHECKING:
    from civiltime.core.date import Date
    from civiltime.core.timeofday import TimeOfDay

_TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]{1,9}))?")
_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

TextInput = str | bytes | bytearray | memoryview


def _decode(text: TextInput) -> tuple[bytes, str | None]:
    """Return the raw bytes of text and its ASCII string, or None if not ASCII."""
    if isinstance(text, str):
        # Lone surrogates are kept as bytes so they fail the ASCII check below
        raw = text.encode("utf-8", "surrogatepass")
    else:
        raw = bytes(text)
    try:
        return raw, raw.decode("ascii")
    except UnicodeDecodeError:
        return raw, None


def format_time_of_day(value: TimeOfDay) -> str:
    """Return the canonical hh:mm:ss[.fffffffff] form of a TimeOfDay.

    Examples:
        >>> from civiltime import TimeOfDay
        >>> format_time_of_day(TimeOfDay(14, 30, 45))
        '14:30:45'
        >>> format_time_of_day(TimeOfDay(14, 30, 45, 123_000_000))
        '14:30:45.123'
    """
    hour, minute, second, nanosecond = value.to_units()
    base = f"{hour:02d}:{minute:02d}:{second:02d}"
    if nanosecond <= 0:
        return base
    frac = f"{nanosecond:09d}".rstrip("0")
    return f"{base}.{frac}"


def parse_time_of_day(text: TextInput) -> TimeOfDay:
    """Parse the canonical hh:mm:ss[.fffffffff] form.

    The supported format has the following constraints:
        - "hh" must be 2 decimal digits between 00 and 23
        - "mm" must be 2 decimal digits between 00 and 59
        - "ss" must be 2 decimal digits between 00 and 59
        - ".fffffffff" is optional; if present it has 1 to 9 decimal digits

    Args:
        text: The text, as str or bytes.

    Raises:
        InvalidTextLengthError: If the text is not 8 to 18 bytes long.
        InvalidTextFormatError: If the text does not match the format or a
            unit is out of range.

    Examples:
        >>> parse_time_of_day("12:34:56.1")
        TimeOfDay(12, 34, 56, nanosecond=100000000)
    """
    from civiltime.core.timeofday import TimeOfDay

    raw, s = _decode(text)
    if not (MIN_TIME_TEXT_LENGTH <= len(raw) <= MAX_TIME_TEXT_LENGTH):
        raise InvalidTextLengthError(
            f"TimeOfDay: text data must be between {MIN_TIME_TEXT_LENGTH} and "
            f"{MAX_TIME_TEXT_LENGTH} bytes, got {len(raw)}"
        )
    match = _TIME_PATTERN.fullmatch(s) if s is not None else None
    if match is None:
        raise InvalidTextFormatError(f"TimeOfDay: invalid time of day format: {text!r}")

    hour_str, minute_str, second_str, frac_str = match.groups()
    hour = int(hour_str)
    minute = int(minute_str)
    second = int(second_str)
    nanosecond = int(frac_str.ljust(9, "0")) if frac_str else 0
    if not is_valid_clock_units(hour, minute, second, nanosecond):
        raise InvalidTextFormatError(f"TimeOfDay: time of day out of range: {text!r}")
    return TimeOfDay(hour, minute, second, nanosecond)


def format_date(value: Date) -> str:
    """Return the canonical YYYY-MM-DD form of a Date.

    Nil and out-of-range dates format as the empty string.

    Examples:
        >>> from civiltime import Date
        >>> format_date(Date(1753, 1, 1))
        '1753-01-01'
        >>> format_date(Date.NIL)
        ''
    """
    if not value.is_valid:
        return ""
    year, month, day = value.to_units()
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_date(text: TextInput) -> Date:
    """Parse the canonical YYYY-MM-DD form.

    The empty string parses to Date.NIL.

    Raises:
        InvalidTextLengthError: If the text is neither empty nor 10 bytes.
        InvalidTextFormatError: If the text does not match the format or
            the units do not form a date between 1753-01-01 and 9999-12-31.
    """
    from civiltime.core.date import Date

    raw, s = _decode(text)
    if not raw:
        return Date.NIL
    if len(raw) != DATE_TEXT_LENGTH:
        raise InvalidTextLengthError(
            f"Date: text data must be {DATE_TEXT_LENGTH} bytes, got {len(raw)}"
        )
    match = _DATE_PATTERN.fullmatch(s) if s is not None else None
    if match is None:
        raise InvalidTextFormatError(f"Date: invalid date format: {text!r}")

    year, month, day = (int(g) for g in match.groups())
    if not is_valid_date_units(year, month, day):
        raise InvalidTextFormatError(f"Date: date out of range: {text!r}")
    return Date(year, month, day)


__all__ = [
    "format_time_of_day",
    "parse_time_of_day",
    "format_date",
    "parse_date",
]
