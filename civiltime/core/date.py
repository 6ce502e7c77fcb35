"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates in
the proleptic Gregorian calendar between 1753-01-01 and 9999-12-31, plus
a distinguished nil date.
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar

from civiltime._internal.calendar import (
    day_number_to_gregorian,
    day_number_to_weekday,
    gregorian_to_day_number,
    is_leap_year as _is_leap_year,
    days_in_month as _days_in_month,
    days_in_year as _days_in_year,
)
from civiltime._internal.constants import (
    INVALID_UNIT,
    INVALID_WEEKDAY,
    MAX_DAY_NUMBER,
    MAX_YEAR,
    MIN_DAY_NUMBER,
    NIL_DAY_NUMBER,
    NIL_UNIT,
)
from civiltime._internal.validation import (
    is_valid_date_units,
    is_valid_month,
    is_valid_year,
    validate_date_units,
    validate_month,
    validate_year,
)
from civiltime.errors import InvalidDurationError, InvalidUnitError, OutOfRangeError
from civiltime.units.weekday import Weekday


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Internal representation is a Julian day number, where 1753-01-01 is
    day 2361331 (Date.MIN) and 9999-12-31 is day 5373484 (Date.MAX).

    Date.NIL represents a nil/undefined date. It is not less than, equal
    to, or greater than any value, itself included, and every unit
    accessor reports NIL_UNIT (-2) for it.

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(1996, 2, 29)  # Valid leap year date
        Date(1996, 2, 29)

        >>> Date.NIL == Date.NIL
        False
    """

    __slots__ = ("_days",)

    NIL: ClassVar[Date]
    MIN: ClassVar[Date]
    MAX: ClassVar[Date]

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (1753-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            InvalidUnitError: If any component is out of range.

        Examples:
            >>> Date(1997, 2, 29)
            Traceback (most recent call last):
            ...
            InvalidUnitError: day must be between 1 and 28 for 1997-02, got 29
        """
        validate_date_units(year, month, day)
        self._days: int = gregorian_to_day_number(year, month, day)

    @classmethod
    def _from_day_number(cls, days: int) -> Date:
        """Create a Date from a day number without validation."""
        instance = object.__new__(cls)
        instance._days = days
        return instance

    @classmethod
    def from_units(cls, year: int, month: int, day: int) -> Date:
        """Create a Date from year, month and day units.

        The nil unit triple (-2, -2, -2) produces Date.NIL, so that
        from_units() accepts everything to_units() returns for a valid
        or nil date.

        Raises:
            InvalidUnitError: If any component is out of range.
        """
        if year == NIL_UNIT and month == NIL_UNIT and day == NIL_UNIT:
            return cls.NIL
        return cls(year, month, day)

    @classmethod
    def from_day_number(cls, days: int) -> Date:
        """Create a Date from a raw day number.

        Args:
            days: Date.NIL's day number (-2), or a value between the day
                numbers of Date.MIN and Date.MAX.

        Raises:
            InvalidDurationError: If days is outside the supported range.
        """
        if days == NIL_DAY_NUMBER:
            return cls.NIL
        if not (MIN_DAY_NUMBER <= days <= MAX_DAY_NUMBER):
            raise InvalidDurationError(
                f"day number must be between {MIN_DAY_NUMBER} and {MAX_DAY_NUMBER}, "
                f"got {days}"
            )
        return cls._from_day_number(days)

    @classmethod
    def from_datetime(cls, value: _datetime.date) -> Date:
        """Create a Date from the date portion of a datetime.date or datetime.

        Time of day and timezone are ignored; the calendar date is taken as
        it reads on the value itself.

        Raises:
            InvalidUnitError: If the date is outside 1753-01-01..9999-12-31.

        Examples:
            >>> import datetime
            >>> Date.from_datetime(datetime.datetime(2024, 1, 15, 23, 59))
            Date(2024, 1, 15)
        """
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> Date:
        """Return today's date in the local timezone."""
        return cls.from_datetime(_datetime.date.today())

    @property
    def day_number(self) -> int:
        """Return the underlying Julian day number."""
        return self._days

    @property
    def is_nil(self) -> bool:
        """Return True if this is Date.NIL."""
        return self._days == NIL_DAY_NUMBER

    @property
    def is_valid(self) -> bool:
        """Return True if this date is between Date.MIN and Date.MAX, inclusive."""
        return MIN_DAY_NUMBER <= self._days <= MAX_DAY_NUMBER

    def to_units(self) -> tuple[int, int, int]:
        """Return the (year, month, day) components of this date.

        Returns:
            (-2, -2, -2) for Date.NIL, (-1, -1, -1) for a day number that is
            neither nil nor in range, and the Gregorian units otherwise.

        Examples:
            >>> Date(2024, 1, 15).to_units()
            (2024, 1, 15)
            >>> Date.NIL.to_units()
            (-2, -2, -2)
        """
        if self.is_nil:
            return (NIL_UNIT, NIL_UNIT, NIL_UNIT)
        if not self.is_valid:
            return (INVALID_UNIT, INVALID_UNIT, INVALID_UNIT)
        return day_number_to_gregorian(self._days)

    @property
    def year(self) -> int:
        """Return the year (1753-9999), or NIL_UNIT for Date.NIL."""
        return self.to_units()[0]

    @property
    def month(self) -> int:
        """Return the month (1-12), or NIL_UNIT for Date.NIL."""
        return self.to_units()[1]

    @property
    def day(self) -> int:
        """Return the day of the month (1-31), or NIL_UNIT for Date.NIL."""
        return self.to_units()[2]

    @property
    def weekday(self) -> int:
        """Return the day of the week.

        Returns:
            A Weekday (Monday=0 .. Sunday=6), or -1 for a nil or invalid date.

        Examples:
            >>> Date(2024, 1, 15).weekday
            <Weekday.MONDAY: 0>
        """
        if not self.is_valid:
            return INVALID_WEEKDAY
        return Weekday(day_number_to_weekday(self._days))

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month, or NIL_UNIT."""
        year, month, _ = self.to_units()
        return days_in_month(year, month)

    @property
    def days_in_year(self) -> int:
        """Return the number of days in this date's year, or NIL_UNIT."""
        return days_in_year(self.year)

    # Comparisons

    def equals(self, other: Date) -> bool:
        """Return True if both dates are non-nil and represent the same day."""
        if self.is_nil or other.is_nil:
            return False
        return self._days == other._days

    def before(self, other: Date) -> bool:
        """Return True if this date is earlier than other; False if either is nil."""
        if self.is_nil or other.is_nil:
            return False
        return self._days < other._days

    def after(self, other: Date) -> bool:
        """Return True if this date is later than other; False if either is nil."""
        if self.is_nil or other.is_nil:
            return False
        return self._days > other._days

    # Calendar arithmetic

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            The shifted date, or Date.NIL if this date is nil or invalid.

        Raises:
            OutOfRangeError: If the result is outside Date.MIN..Date.MAX.

        Examples:
            >>> Date(2024, 1, 15).add_days(-20)
            Date(2023, 12, 26)
        """
        if not self.is_valid:
            return Date.NIL
        result = self._days + days
        if not (MIN_DAY_NUMBER <= result <= MAX_DAY_NUMBER):
            raise OutOfRangeError(
                f"adding {days} days to {self} would produce an out-of-range result"
            )
        return Date._from_day_number(result)

    def add(self, duration: _datetime.timedelta) -> Date:
        """Return this date shifted by a timedelta.

        A Date has no time of day, so only whole days count: the duration is
        applied to midnight and the date of the result is kept. Negative
        partial days therefore move to the previous day.

        Returns:
            The shifted date, or Date.NIL if this date is nil or invalid or
            the result falls outside the supported range.

        Examples:
            >>> import datetime
            >>> Date(2024, 1, 15).add(datetime.timedelta(hours=36))
            Date(2024, 1, 16)
            >>> Date(2024, 1, 15).add(datetime.timedelta(hours=-1))
            Date(2024, 1, 14)
        """
        if not self.is_valid:
            return Date.NIL
        result = self._days + duration.days
        if not (MIN_DAY_NUMBER <= result <= MAX_DAY_NUMBER):
            return Date.NIL
        return Date._from_day_number(result)

    def start_of_month(self) -> Date:
        """Return the first day of this date's month."""
        if not self.is_valid:
            return Date.NIL
        year, month, _ = self.to_units()
        return Date(year, month, 1)

    def middle_of_month(self) -> Date:
        """Return the middle day of this date's month, days_in_month // 2.

        Examples:
            >>> Date(2023, 2, 3).middle_of_month()
            Date(2023, 2, 14)
        """
        if not self.is_valid:
            return Date.NIL
        year, month, _ = self.to_units()
        return Date(year, month, _days_in_month(year, month) // 2)

    def end_of_month(self) -> Date:
        """Return the last day of this date's month."""
        if not self.is_valid:
            return Date.NIL
        year, month, _ = self.to_units()
        return Date(year, month, _days_in_month(year, month))

    def start_of_year(self) -> Date:
        """Return January 1 of this date's year."""
        if not self.is_valid:
            return Date.NIL
        return Date(self.year, 1, 1)

    def middle_of_year(self) -> Date:
        """Return June 30 of this date's year."""
        if not self.is_valid:
            return Date.NIL
        return Date(self.year, 6, 30)

    def end_of_year(self) -> Date:
        """Return December 31 of this date's year."""
        if not self.is_valid:
            return Date.NIL
        return Date(self.year, 12, 31)

    def next_month(self, month: int) -> Date:
        """Return the same day of the month in the next occurrence of month.

        The year is advanced when month is not strictly after the current
        month, so Date(2024, 5, 10).next_month(5) is 2025-05-10.

        Raises:
            InvalidUnitError: If month is not 1-12 or the day does not exist
                in the target month.
            OutOfRangeError: If the target year is after 9999.

        Examples:
            >>> Date(2024, 5, 10).next_month(3)
            Date(2025, 3, 10)
        """
        if not self.is_valid:
            return Date.NIL
        validate_month(month)
        year, current_month, day = self.to_units()
        if month <= current_month:
            year += 1
        if year > MAX_YEAR:
            raise OutOfRangeError(
                f"the next month {month} after {self} is beyond year {MAX_YEAR}"
            )
        return Date(year, month, day)

    def next_year(self, year: int) -> Date:
        """Return the same month and day in a later year.

        Raises:
            InvalidUnitError: If year is outside 1753-9999, or the day does
                not exist in that year (February 29).
            OutOfRangeError: If year is not after the current year.

        Examples:
            >>> Date(2024, 3, 1).next_year(2030)
            Date(2030, 3, 1)
        """
        if not self.is_valid:
            return Date.NIL
        validate_year(year)
        current_year, month, day = self.to_units()
        if year <= current_year:
            raise OutOfRangeError(
                f"the specified year, {year}, is not after the current year, {current_year}"
            )
        return Date(year, month, day)

    def next_weekday(self, weekday: int) -> Date:
        """Return the nearest date after this one that falls on weekday.

        The result is always 1 to 7 days later.

        Raises:
            InvalidUnitError: If weekday is not 0-6.
            OutOfRangeError: If the result is after Date.MAX.

        Examples:
            >>> Date(2024, 1, 15).next_weekday(Weekday.MONDAY)
            Date(2024, 1, 22)
        """
        if not self.is_valid:
            return Date.NIL
        _validate_weekday(weekday)
        delta = (weekday - self.weekday) % 7
        if delta == 0:
            delta = 7
        return self.add_days(delta)

    def previous_weekday(self, weekday: int) -> Date:
        """Return the nearest date before this one that falls on weekday.

        The result is always 1 to 7 days earlier.

        Raises:
            InvalidUnitError: If weekday is not 0-6.
            OutOfRangeError: If the result is before Date.MIN.

        Examples:
            >>> Date(2024, 1, 17).previous_weekday(Weekday.MONDAY)
            Date(2024, 1, 15)
        """
        if not self.is_valid:
            return Date.NIL
        _validate_weekday(weekday)
        delta = (weekday - self.weekday) % 7 - 7
        return self.add_days(delta)

    # Conversions

    def to_datetime(self) -> _datetime.datetime | None:
        """Return midnight UTC on this date, or None for a nil or invalid date."""
        if not self.is_valid:
            return None
        year, month, day = self.to_units()
        return _datetime.datetime(year, month, day, tzinfo=_datetime.timezone.utc)

    def format(self, layout: str) -> str:
        """Format this date with a datetime.strftime() layout.

        The time portion is always midnight UTC. Nil and invalid dates
        format as the empty string.

        Examples:
            >>> Date(2024, 1, 15).format("%B %d, %Y")
            'January 15, 2024'
        """
        from civiltime.format.strftime import strftime

        return strftime(self, layout)

    @classmethod
    def parse(cls, layout: str, text: str) -> Date:
        """Parse text with a datetime.strptime() layout.

        Raises:
            ParseError: If text does not match the layout or names a day
                that does not exist.
            InvalidUnitError: If the parsed year is outside 1753-9999.
        """
        from civiltime.format.strftime import strptime_date

        return strptime_date(text, layout)

    def to_text(self) -> str:
        """Return the canonical YYYY-MM-DD text ('' for a nil date)."""
        from civiltime.convert.text import format_date

        return format_date(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> Date:
        """Parse the canonical YYYY-MM-DD text form."""
        from civiltime.convert.text import parse_date

        return parse_date(text)

    def to_bytes(self) -> bytes:
        """Return the 8-byte big-endian day number."""
        from civiltime.convert.binary import encode_date

        return encode_date(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> Date:
        """Decode an 8-byte big-endian day number."""
        from civiltime.convert.binary import decode_date

        return decode_date(data)

    def to_json(self) -> str:
        """Return the JSON encoding: a string of the text form, or null."""
        from civiltime.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, document: str | bytes) -> Date:
        """Decode a JSON string or null into a Date."""
        from civiltime.convert.json import from_json

        return from_json(document, Date)

    def to_driver_value(self) -> str:
        """Return the value handed to a database driver: the canonical text."""
        return self.to_text()

    # Operators

    def __add__(self, other: object) -> Date:
        """Add a timedelta's whole days; raises OutOfRangeError at the limits."""
        if not isinstance(other, _datetime.timedelta):
            return NotImplemented
        return self.add_days(other.days)

    def __sub__(self, other: object) -> Date:
        """Subtract a timedelta's whole days."""
        if not isinstance(other, _datetime.timedelta):
            return NotImplemented
        return self.add_days((-other).days)

    def __eq__(self, other: object) -> bool:
        """Check equality with another date; always False if either is nil.

        Examples:
            >>> Date(2024, 1, 15) == Date(2024, 1, 15)
            True
            >>> Date.NIL == Date.NIL
            False
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.before(other) or self.equals(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.after(other) or self.equals(other)

    def __hash__(self) -> int:
        """Hash by day number.

        Date.NIL hashes like itself but never compares equal, so it only
        behaves as a set member or mapping key through the identity check
        on the Date.NIL singleton. Do not use nil dates as keys.
        """
        return hash(self._days)

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            'Date(2024, 1, 15)', 'Date.NIL', or '<invalid Date: day number n>'
            for an out-of-range value.
        """
        if self.is_nil:
            return "Date.NIL"
        if not self.is_valid:
            return f"<invalid Date: day number {self._days}>"
        year, month, day = self.to_units()
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_text()

    def __bool__(self) -> bool:
        """Nil and out-of-range dates are falsy."""
        return self.is_valid


Date.NIL = Date._from_day_number(NIL_DAY_NUMBER)
Date.MIN = Date._from_day_number(MIN_DAY_NUMBER)
Date.MAX = Date._from_day_number(MAX_DAY_NUMBER)


def _validate_weekday(weekday: int) -> None:
    if not (Weekday.MONDAY <= weekday <= Weekday.SUNDAY):
        raise InvalidUnitError(f"weekday must be between 0 and 6, got {weekday}")


def is_valid_units(year: int, month: int, day: int) -> bool:
    """Return True if the units form a date between 1753-01-01 and 9999-12-31."""
    return is_valid_date_units(year, month, day)


def is_leap_year(year: int) -> bool:
    """Return True if year is a supported leap year.

    Always False for a year outside 1753-9999.
    """
    return is_valid_year(year) and _is_leap_year(year)


def days_in_month(year: int, month: int) -> int:
    """Return the days in a month, or NIL_UNIT for an invalid year or month.

    Examples:
        >>> days_in_month(2000, 2)
        29
        >>> days_in_month(1900, 2)
        28
        >>> days_in_month(2000, 13)
        -2
    """
    if not is_valid_year(year) or not is_valid_month(month):
        return NIL_UNIT
    return _days_in_month(year, month)


def days_in_year(year: int) -> int:
    """Return 365 or 366, or NIL_UNIT for a year outside 1753-9999."""
    if not is_valid_year(year):
        return NIL_UNIT
    return _days_in_year(year)


__all__ = [
    "Date",
    "is_valid_units",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
]
