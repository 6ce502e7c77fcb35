"""Clock utilities for civiltime.

Partitioning of a nanosecond count since midnight into hour, minute,
second and nanosecond units, and back. This module is not part of the
public API.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


def units_to_nanos(hour: int, minute: int, second: int, nanosecond: int) -> int:
    """Return the nanoseconds since midnight for the given units.

    Examples:
        >>> units_to_nanos(0, 0, 1, 5)
        1000000005
    """
    return (
        hour * NANOS_PER_HOUR
        + minute * NANOS_PER_MINUTE
        + second * NANOS_PER_SECOND
        + nanosecond
    )


def nanos_to_units(total: int) -> tuple[int, int, int, int]:
    """Split nanoseconds since midnight into (hour, minute, second, nanosecond).

    Args:
        total: Nanoseconds since midnight, expected in [0, NANOS_PER_DAY).

    Returns:
        Tuple of (hour, minute, second, nanosecond).

    Examples:
        >>> nanos_to_units(86_399_999_999_999)
        (23, 59, 59, 999999999)
    """
    hour = total // NANOS_PER_HOUR
    total -= hour * NANOS_PER_HOUR

    minute = total // NANOS_PER_MINUTE
    total -= minute * NANOS_PER_MINUTE

    second = total // NANOS_PER_SECOND
    total -= second * NANOS_PER_SECOND

    return (hour, minute, second, total)


def is_valid_units(hour: int, minute: int, second: int, nanosecond: int) -> bool:
    """Return True if the units describe a clock time in [00:00:00, 24:00:00)."""
    return (
        0 <= hour < 24
        and 0 <= minute < 60
        and 0 <= second < 60
        and 0 <= nanosecond < NANOS_PER_SECOND
    )


def is_valid_nanos(total: int) -> bool:
    """Return True if total lies in [0, NANOS_PER_DAY)."""
    return 0 <= total < NANOS_PER_DAY


__all__ = [
    "units_to_nanos",
    "nanos_to_units",
    "is_valid_units",
    "is_valid_nanos",
]
