"""civiltime exception hierarchy.

All civiltime-specific exceptions inherit from CivilTimeError.
"""

from __future__ import annotations


class CivilTimeError(Exception):
    """Base exception for all civiltime errors."""

    pass


class ValidationError(CivilTimeError):
    """Invalid input values.

    Raised when a value cannot be represented by a Date or TimeOfDay.
    """

    pass


class InvalidUnitError(ValidationError):
    """One or more unit values are outside their valid range.

    Examples:
        - Year outside 1753-9999
        - Day 29 of February in a non-leap year
        - Hour value of 24
    """

    pass


class InvalidDurationError(ValidationError):
    """A raw integer value is outside the representable range.

    Raised for nanosecond counts outside [0, 24h) and for day numbers
    that are neither Date.NIL nor between Date.MIN and Date.MAX.
    """

    pass


class OutOfRangeError(CivilTimeError):
    """Arithmetic produced a result outside the supported range.

    Examples:
        - Date.MAX.add_days(1)
        - Requesting a year that is not after the current one
    """

    pass


class ParseError(CivilTimeError):
    """Failed to decode a text, binary or JSON representation."""

    pass


class InvalidBinaryLengthError(ParseError):
    """Binary data is not exactly 8 bytes long."""

    pass


class InvalidTextLengthError(ParseError):
    """Text data length is outside the accepted bounds."""

    pass


class InvalidTextFormatError(ParseError):
    """Text data does not match the canonical grammar.

    Also raised when the text is well-formed but encodes an out-of-range
    unit, such as "24:00:00".
    """

    pass


class InvalidJSONShapeError(ParseError):
    """JSON document is neither a string nor null."""

    pass


class UnsupportedSourceTypeError(CivilTimeError):
    """A driver value of an unsupported type was passed to a scan function."""

    pass


__all__ = [
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
]
