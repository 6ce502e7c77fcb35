"""TimeOfDay class representing a clock time.

This module provides the TimeOfDay class for representing a time of day
with nanosecond precision, independent of any date, timezone or Daylight
Saving Time considerations.
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar

from civiltime._internal.clock import (
    is_valid_nanos,
    nanos_to_units,
    units_to_nanos,
)
from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_SECOND,
)
from civiltime._internal.validation import validate_clock_units
from civiltime.errors import InvalidDurationError

# Returned by to_duration() for a value outside [0, 24h)
INVALID_DURATION: int = -1


class TimeOfDay:
    """A clock time (hh:mm:ss.fffffffff) with nanosecond precision.

    TimeOfDay represents the time portion of a day, from midnight
    (00:00:00) to just before the next midnight (23:59:59.999999999).
    It does not include any date or timezone information.

    The internal representation stores the total nanoseconds since
    midnight in a single `_nanos` slot.

    Examples:
        >>> t = TimeOfDay(14, 30, 45)
        >>> t.hour, t.minute, t.second
        (14, 30, 45)

        >>> str(TimeOfDay(12, 34, 56, 100_000_000))
        '12:34:56.1'
    """

    __slots__ = ("_nanos",)

    ZERO: ClassVar[TimeOfDay]
    MIN: ClassVar[TimeOfDay]
    MAX: ClassVar[TimeOfDay]

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a TimeOfDay from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).

        Raises:
            InvalidUnitError: If any component is out of range.

        Examples:
            >>> TimeOfDay(24, 0, 0)
            Traceback (most recent call last):
            ...
            InvalidUnitError: hour must be between 0 and 23, got 24
        """
        validate_clock_units(hour, minute, second, nanosecond)
        self._nanos: int = units_to_nanos(hour, minute, second, nanosecond)

    @classmethod
    def _from_nanos(cls, nanos: int) -> TimeOfDay:
        """Create a TimeOfDay from nanoseconds since midnight.

        This is an internal factory method that bypasses validation
        for use when the value is known to be valid.
        """
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def from_units(
        cls, hour: int, minute: int, second: int, nanosecond: int = 0
    ) -> TimeOfDay:
        """Create a TimeOfDay from hour, minute, second and nanosecond units.

        Raises:
            InvalidUnitError: If any component is out of range.
        """
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_duration(cls, duration: int | _datetime.timedelta) -> TimeOfDay:
        """Create a TimeOfDay from the time elapsed since midnight.

        Args:
            duration: Nanoseconds as an int, or a timedelta.

        Raises:
            InvalidDurationError: If duration is negative or 24 hours or more.

        Examples:
            >>> import datetime
            >>> TimeOfDay.from_duration(datetime.timedelta(hours=1, minutes=30))
            TimeOfDay(1, 30, 0, nanosecond=0)
        """
        nanos = _duration_to_nanos(duration)
        if not is_valid_nanos(nanos):
            raise InvalidDurationError(
                f"duration must be between 0 and {NANOS_PER_DAY - 1} nanoseconds, "
                f"got {nanos}"
            )
        return cls._from_nanos(nanos)

    @classmethod
    def from_duration_string(cls, text: str) -> TimeOfDay:
        """Create a TimeOfDay from a duration string such as "1h30m" or "90.5s".

        Raises:
            InvalidTextFormatError: If text is not a valid duration string.
            InvalidDurationError: If the duration is outside [0, 24h).
        """
        from civiltime.format.duration import parse_duration

        return cls.from_duration(parse_duration(text))

    @classmethod
    def now(cls) -> TimeOfDay:
        """Return the current local time of day."""
        now = _datetime.datetime.now()
        return cls(
            now.hour,
            now.minute,
            now.second,
            now.microsecond * NANOS_PER_MICROSECOND,
        )

    @property
    def is_valid(self) -> bool:
        """Return True if this value is within [00:00:00, 24:00:00)."""
        return is_valid_nanos(self._nanos)

    def to_units(self) -> tuple[int, int, int, int]:
        """Return (hour, minute, second, nanosecond).

        Examples:
            >>> TimeOfDay.MAX.to_units()
            (23, 59, 59, 999999999)
        """
        return nanos_to_units(self._nanos)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self.to_units()[0]

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self.to_units()[1]

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self.to_units()[2]

    @property
    def nanosecond(self) -> int:
        """Return the nanoseconds within the second (0-999999999)."""
        return self.to_units()[3]

    def to_duration(self) -> int:
        """Return the nanoseconds since midnight, or -1 if this value is invalid."""
        if not self.is_valid:
            return INVALID_DURATION
        return self._nanos

    def to_timedelta(self) -> _datetime.timedelta:
        """Return the time since midnight as a timedelta.

        Nanoseconds are truncated to microseconds.
        """
        return _datetime.timedelta(microseconds=self._nanos // NANOS_PER_MICROSECOND)

    def add(self, duration: int | _datetime.timedelta) -> TimeOfDay:
        """Add a duration, wrapping the result around midnight.

        Args:
            duration: Nanoseconds as an int, or a timedelta. Can be negative
                and can span several days.

        Examples:
            >>> TimeOfDay.ZERO.add(25 * 3_600_000_000_000)
            TimeOfDay(1, 0, 0, nanosecond=0)
        """
        total = self._nanos + _duration_to_nanos(duration)
        return TimeOfDay._from_nanos(total % NANOS_PER_DAY)

    def sub(self, duration: int | _datetime.timedelta) -> TimeOfDay:
        """Subtract a duration, wrapping the result around midnight.

        Examples:
            >>> TimeOfDay.ZERO.sub(3_600_000_000_000)
            TimeOfDay(23, 0, 0, nanosecond=0)
        """
        return self.add(-_duration_to_nanos(duration))

    def to_datetime(
        self,
        year: int,
        month: int,
        day: int,
        tz: _datetime.tzinfo | None = _datetime.timezone.utc,
    ) -> _datetime.datetime:
        """Compose this clock time with a calendar date in the given timezone.

        Nanoseconds are truncated to microseconds. Passing tz=None produces a
        naive datetime.
        """
        hour, minute, second, nanosecond = self.to_units()
        return _datetime.datetime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            nanosecond // NANOS_PER_MICROSECOND,
            tzinfo=tz,
        )

    def to_datetime_utc(self, year: int, month: int, day: int) -> _datetime.datetime:
        """Compose this clock time with a calendar date in UTC."""
        return self.to_datetime(year, month, day, _datetime.timezone.utc)

    def to_datetime_local(self, year: int, month: int, day: int) -> _datetime.datetime:
        """Compose this clock time with a calendar date in the local timezone."""
        return self.to_datetime(year, month, day, None).astimezone()

    def to_text(self) -> str:
        """Return the canonical hh:mm:ss[.fffffffff] form."""
        from civiltime.convert.text import format_time_of_day

        return format_time_of_day(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> TimeOfDay:
        """Parse the canonical hh:mm:ss[.fffffffff] form."""
        from civiltime.convert.text import parse_time_of_day

        return parse_time_of_day(text)

    def to_bytes(self) -> bytes:
        """Return the 8-byte big-endian nanosecond count."""
        from civiltime.convert.binary import encode_time_of_day

        return encode_time_of_day(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> TimeOfDay:
        """Decode an 8-byte big-endian nanosecond count."""
        from civiltime.convert.binary import decode_time_of_day

        return decode_time_of_day(data)

    def to_json(self) -> str:
        """Return the JSON encoding, a string of the canonical text form."""
        from civiltime.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, document: str | bytes) -> TimeOfDay:
        """Decode a JSON string, or null for TimeOfDay.ZERO."""
        from civiltime.convert.json import from_json

        return from_json(document, TimeOfDay)

    def to_driver_value(self) -> str:
        """Return the value handed to a database driver: the canonical text."""
        return self.to_text()

    def __add__(self, other: object) -> TimeOfDay:
        if not isinstance(other, (int, _datetime.timedelta)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> TimeOfDay:
        if not isinstance(other, (int, _datetime.timedelta)):
            return NotImplemented
        return self.sub(other)

    def __eq__(self, other: object) -> bool:
        """Check equality with another TimeOfDay.

        Examples:
            >>> TimeOfDay(12, 0, 0) == TimeOfDay(12, 0, 0)
            True
        """
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        hour, minute, second, nanosecond = self.to_units()
        return f"TimeOfDay({hour}, {minute}, {second}, nanosecond={nanosecond})"

    def __str__(self) -> str:
        return self.to_text()

    def __bool__(self) -> bool:
        """Clock times are always truthy (even midnight)."""
        return True


TimeOfDay.ZERO = TimeOfDay._from_nanos(0)
TimeOfDay.MIN = TimeOfDay.ZERO
TimeOfDay.MAX = TimeOfDay._from_nanos(NANOS_PER_DAY - 1)


def _duration_to_nanos(duration: int | _datetime.timedelta) -> int:
    """Convert an int nanosecond count or a timedelta to nanoseconds."""
    if isinstance(duration, _datetime.timedelta):
        seconds = duration.days * 86_400 + duration.seconds
        return seconds * NANOS_PER_SECOND + duration.microseconds * NANOS_PER_MICROSECOND
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise TypeError(f"expected int nanoseconds or timedelta, got {type(duration).__name__}")
    return duration


__all__ = ["TimeOfDay", "INVALID_DURATION"]
