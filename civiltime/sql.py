"""Database driver interop.

Drivers hand back column values as bytes (binary protocol) or str (text
protocol). The scan functions dispatch on that source type and decode with
the matching codec. NullDate and NullTimeOfDay hold a value that may be SQL
NULL, tracked by their `valid` flag.

Examples:
    >>> scan_date("2024-01-15")
    Date(2024, 1, 15)

    >>> holder = NullTimeOfDay()
    >>> holder.scan(None)
    >>> holder.valid, holder.driver_value()
    (False, None)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from civiltime.convert.binary import decode_date, decode_time_of_day
from civiltime.convert.text import parse_date, parse_time_of_day
from civiltime.core.date import Date
from civiltime.core.timeofday import TimeOfDay
from civiltime.errors import UnsupportedSourceTypeError

logger = logging.getLogger(__name__)

_BINARY_TYPES = (bytes, bytearray, memoryview)


def scan_date(src: Any) -> Date:
    """Decode a driver value into a Date.

    Args:
        src: bytes-like (8-byte day number) or str (YYYY-MM-DD).

    Raises:
        UnsupportedSourceTypeError: If src is neither bytes-like nor str.
        ParseError: If src cannot be decoded.
    """
    if isinstance(src, _BINARY_TYPES):
        logger.debug("Scanning Date from %d-byte binary source", len(src))
        return decode_date(src)
    if isinstance(src, str):
        logger.debug("Scanning Date from text source %r", src)
        return parse_date(src)
    raise UnsupportedSourceTypeError(
        f"cannot scan Date from source of type {type(src).__name__}"
    )


def scan_time_of_day(src: Any) -> TimeOfDay:
    """Decode a driver value into a TimeOfDay.

    Args:
        src: bytes-like (8-byte nanosecond count) or str (hh:mm:ss[.f]).

    Raises:
        UnsupportedSourceTypeError: If src is neither bytes-like nor str.
        ParseError: If src cannot be decoded.
        InvalidDurationError: If a binary source is outside [0, 24h).
    """
    if isinstance(src, _BINARY_TYPES):
        logger.debug("Scanning TimeOfDay from %d-byte binary source", len(src))
        return decode_time_of_day(src)
    if isinstance(src, str):
        logger.debug("Scanning TimeOfDay from text source %r", src)
        return parse_time_of_day(src)
    raise UnsupportedSourceTypeError(
        f"cannot scan TimeOfDay from source of type {type(src).__name__}"
    )


@dataclass
class NullDate:
    """A Date that may be SQL NULL.

    Attributes:
        value: The date; Date.NIL while invalid.
        valid: False when the column was NULL.
    """

    value: Date = field(default_factory=lambda: Date.NIL)
    valid: bool = False

    def scan(self, src: Any) -> None:
        """Load a driver value; None marks the holder invalid."""
        if src is None:
            self.value, self.valid = Date.NIL, False
            return
        value = scan_date(src)
        self.value, self.valid = value, True

    def driver_value(self) -> str | None:
        """Return the canonical text, or None when invalid."""
        if not self.valid:
            return None
        return self.value.to_driver_value()

    def to_json(self) -> str:
        """Return the JSON encoding; null when invalid."""
        if not self.valid:
            return "null"
        return self.value.to_json()

    def load_json(self, document: str | bytes) -> None:
        """Load a JSON document; null marks the holder invalid."""
        value = Date.from_json(document)
        self.value, self.valid = value, not _is_json_null(document)


@dataclass
class NullTimeOfDay:
    """A TimeOfDay that may be SQL NULL.

    Attributes:
        value: The clock time; TimeOfDay.ZERO while invalid.
        valid: False when the column was NULL.
    """

    value: TimeOfDay = field(default_factory=lambda: TimeOfDay.ZERO)
    valid: bool = False

    def scan(self, src: Any) -> None:
        """Load a driver value; None marks the holder invalid."""
        if src is None:
            self.value, self.valid = TimeOfDay.ZERO, False
            return
        value = scan_time_of_day(src)
        self.value, self.valid = value, True

    def driver_value(self) -> str | None:
        """Return the canonical text, or None when invalid."""
        if not self.valid:
            return None
        return self.value.to_driver_value()

    def to_json(self) -> str:
        if not self.valid:
            return "null"
        return self.value.to_json()

    def load_json(self, document: str | bytes) -> None:
        value = TimeOfDay.from_json(document)
        self.value, self.valid = value, not _is_json_null(document)


def _is_json_null(document: str | bytes) -> bool:
    # Only called after a successful decode, so the document is well formed
    return json.loads(document) is None


__all__ = ["scan_date", "scan_time_of_day", "NullDate", "NullTimeOfDay"]
