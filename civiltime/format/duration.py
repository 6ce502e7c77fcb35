"""Duration string parsing.

Parses strings such as "300ms", "-1.5h" or "2h45m" into a nanosecond
count. A duration string is an optional sign followed by a sequence of
decimal numbers, each with an optional fraction and a required unit
suffix. Valid units are "ns", "us" (or "µs"), "ms", "s", "m" and "h".
"""

from __future__ import annotations

import re

from civiltime._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from civiltime.errors import InvalidTextFormatError

_UNITS: dict[str, int] = {
    "ns": 1,
    "us": NANOS_PER_MICROSECOND,
    "µs": NANOS_PER_MICROSECOND,  # micro sign
    "μs": NANOS_PER_MICROSECOND,  # Greek small letter mu
    "ms": NANOS_PER_MILLISECOND,
    "s": NANOS_PER_SECOND,
    "m": NANOS_PER_MINUTE,
    "h": NANOS_PER_HOUR,
}

# Longer suffixes first so "ms" is not read as "m"
_COMPONENT = re.compile(
    r"([0-9]*)(?:\.([0-9]*))?(ns|us|µs|μs|ms|s|m|h)"
)


def parse_duration(text: str) -> int:
    """Parse a duration string into nanoseconds.

    Args:
        text: Duration string, e.g. "1h30m" or "-90.5s".

    Returns:
        The duration in nanoseconds. Fractions are truncated to whole
        nanoseconds.

    Raises:
        InvalidTextFormatError: If text is not a valid duration string.

    Examples:
        >>> parse_duration("1h30m")
        5400000000000
        >>> parse_duration("-1.5s")
        -1500000000
        >>> parse_duration("0")
        0
    """
    if not isinstance(text, str):
        raise InvalidTextFormatError(f"invalid duration: {text!r}")

    s = text
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]

    # A bare zero needs no unit
    if s == "0":
        return 0
    if not s:
        raise InvalidTextFormatError(f"invalid duration: {text!r}")

    total = 0
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        if match is None:
            raise InvalidTextFormatError(f"invalid duration: {text!r}")
        whole, fraction, unit = match.groups()
        fraction = fraction or ""
        if not whole and not fraction:
            raise InvalidTextFormatError(f"invalid duration: {text!r}")

        scale = _UNITS[unit]
        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        pos = match.end()

    return -total if negative else total


__all__ = ["parse_duration"]
