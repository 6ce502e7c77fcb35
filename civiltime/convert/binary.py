"""Fixed-width binary encoding for Date and TimeOfDay.

Both types encode to exactly 8 bytes: a signed 64-bit integer in
big-endian byte order. A Date carries its day number (Date.NIL included),
a TimeOfDay its nanoseconds since midnight.

Examples:
    >>> from civiltime import TimeOfDay
    >>> encode_time_of_day(TimeOfDay.MAX).hex()
    '00004e94914effff'
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

from civiltime._internal.constants import BINARY_SIZE
from civiltime.errors import InvalidBinaryLengthError, InvalidDurationError

if TYPE_CHECKING:
    from civiltime.core.date import Date
    from civiltime.core.timeofday import TimeOfDay

_INT64_BE = struct.Struct(">q")


def _unpack(data: bytes | bytearray | memoryview, type_name: str) -> int:
    if len(data) != BINARY_SIZE:
        raise InvalidBinaryLengthError(
            f"{type_name}: binary data must be {BINARY_SIZE} bytes, got {len(data)}"
        )
    (value,) = _INT64_BE.unpack(bytes(data))
    return value


def encode_date(value: Date) -> bytes:
    """Encode a Date as its 8-byte big-endian day number."""
    return _INT64_BE.pack(value.day_number)


def decode_date(data: bytes | bytearray | memoryview) -> Date:
    """Decode an 8-byte big-endian day number.

    Raises:
        InvalidBinaryLengthError: If data is not exactly 8 bytes.
        InvalidDurationError: If the day number is neither Date.NIL nor
            between Date.MIN and Date.MAX.
    """
    from civiltime.core.date import Date

    days = _unpack(data, "Date")
    return Date.from_day_number(days)


def encode_time_of_day(value: TimeOfDay) -> bytes:
    """Encode a TimeOfDay as its 8-byte big-endian nanosecond count."""
    return _INT64_BE.pack(value._nanos)


def decode_time_of_day(data: bytes | bytearray | memoryview) -> TimeOfDay:
    """Decode an 8-byte big-endian nanosecond count.

    The integer must be between 0 (00:00:00) and 86_399_999_999_999
    (23:59:59.999999999).

    Raises:
        InvalidBinaryLengthError: If data is not exactly 8 bytes.
        InvalidDurationError: If the nanosecond count is out of range.
    """
    from civiltime.core.timeofday import TimeOfDay

    nanos = _unpack(data, "TimeOfDay")
    try:
        return TimeOfDay.from_duration(nanos)
    except InvalidDurationError as e:
        raise InvalidDurationError(f"TimeOfDay: {e}") from None


__all__ = [
    "encode_date",
    "decode_date",
    "encode_time_of_day",
    "decode_time_of_day",
]
