"""Value conversion utilities.

This module provides functions for converting Date and TimeOfDay values
to and from wire representations:
    - Canonical text (YYYY-MM-DD, hh:mm:ss[.fffffffff])
    - Fixed 8-byte big-endian binary
    - JSON strings

Examples:
    >>> from civiltime import TimeOfDay
    >>> from civiltime.convert import encode_time_of_day, decode_time_of_day

    >>> data = encode_time_of_day(TimeOfDay(14, 30, 45))
    >>> len(data)
    8
    >>> decode_time_of_day(data)
    TimeOfDay(14, 30, 45, nanosecond=0)
"""

from __future__ import annotations

from civiltime.convert.binary import (
    decode_date,
    decode_time_of_day,
    encode_date,
    encode_time_of_day,
)
from civiltime.convert.json import (
    CivilTimeJSONEncoder,
    from_json,
    to_json,
    to_json_value,
)
from civiltime.convert.text import (
    format_date,
    format_time_of_day,
    parse_date,
    parse_time_of_day,
)

__all__ = [
    # Text
    "format_date",
    "parse_date",
    "format_time_of_day",
    "parse_time_of_day",
    # Binary
    "encode_date",
    "decode_date",
    "encode_time_of_day",
    "decode_time_of_day",
    # JSON
    "to_json",
    "to_json_value",
    "from_json",
    "CivilTimeJSONEncoder",
]
