"""strftime-style formatting and parsing.

Layouts use the directives of datetime.strftime() and
datetime.strptime(). A Date is formatted as midnight UTC on that day, so
time directives render as zeros and %z / %Z render as "+0000" / "UTC". A
TimeOfDay is formatted as a naive datetime.time, so %z / %Z render as
empty strings.

Functions:
    strftime: Format a Date or TimeOfDay using a strftime-style layout.
    strptime_date: Parse a string into a Date using a strptime-style layout.

Examples:
    >>> from civiltime import Date, TimeOfDay
    >>> strftime(Date(2024, 1, 15), "%B %d, %Y")
    'January 15, 2024'

    >>> strptime_date("15 Jan 2024 14:30", "%d %b %Y %H:%M")
    Date(2024, 1, 15)
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Union

from civiltime._internal.constants import NANOS_PER_MICROSECOND
from civiltime.errors import ParseError

if TYPE_CHECKING:
    from civiltime.core.date import Date
    from civiltime.core.timeofday import TimeOfDay

# Type alias for formattable values
CivilType = Union["Date", "TimeOfDay"]


def strftime(value: CivilType, fmt: str) -> str:
    """Format a Date or TimeOfDay using a strftime-style layout.

    Nil and out-of-range dates format as the empty string. Nanoseconds are
    truncated to microseconds for %f.

    Args:
        value: A Date or TimeOfDay to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        TypeError: If value is not a Date or TimeOfDay.

    Examples:
        >>> from civiltime import Date, TimeOfDay
        >>> strftime(Date(2024, 1, 15), "%Y-%m-%dT%H:%M:%S%z")
        '2024-01-15T00:00:00+0000'

        >>> strftime(TimeOfDay(14, 30, 45, 123_456_789), "%H:%M:%S.%f")
        '14:30:45.123456'
    """
    from civiltime.core.date import Date
    from civiltime.core.timeofday import TimeOfDay

    if isinstance(value, Date):
        dt = value.to_datetime()
        if dt is None:
            return ""
        return dt.strftime(fmt)
    elif isinstance(value, TimeOfDay):
        hour, minute, second, nanosecond = value.to_units()
        t = _datetime.time(hour, minute, second, nanosecond // NANOS_PER_MICROSECOND)
        return t.strftime(fmt)
    else:
        raise TypeError(f"expected Date or TimeOfDay, got {type(value).__name__}")


def strptime_date(s: str, fmt: str) -> Date:
    """Parse a string into a Date using a strptime-style layout.

    Time, weekday and zone fields must match the input but do not affect
    the result: the date is taken as written.

    Args:
        s: The string to parse.
        fmt: Format string with %-directives.

    Returns:
        The parsed Date.

    Raises:
        ParseError: If the string doesn't match the layout or names a day
            that does not exist.
        InvalidUnitError: If the year is outside 1753-9999.

    Examples:
        >>> strptime_date("2024-01-15", "%Y-%m-%d")
        Date(2024, 1, 15)

        >>> strptime_date("2024/046", "%Y/%j")
        Date(2024, 2, 15)
    """
    from civiltime.core.date import Date

    try:
        dt = _datetime.datetime.strptime(s, fmt)
    except ValueError as e:
        raise ParseError(f"string {s!r} does not match format {fmt!r}: {e}") from e

    return Date.from_datetime(dt)


__all__ = ["strftime", "strptime_date"]
