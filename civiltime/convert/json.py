"""JSON encoding for Date and TimeOfDay.

A value is encoded as a JSON string holding its canonical text form:

    TimeOfDay(14, 30, 45)  ->  "14:30:45"
    Date(2024, 1, 15)      ->  "2024-01-15"
    Date.NIL               ->  null

Decoding accepts a JSON string (parsed with the text rules) or null, which
produces the type's zero value: TimeOfDay.ZERO or Date.NIL. Any other JSON
value is rejected with InvalidJSONShapeError.

Functions:
    to_json: Encode a Date or TimeOfDay as a JSON document.
    from_json: Decode a JSON document into a Date or TimeOfDay.

Classes:
    CivilTimeJSONEncoder: json.JSONEncoder that understands both types.

Examples:
    >>> import json
    >>> from civiltime import Date, TimeOfDay
    >>> to_json(TimeOfDay(14, 30, 45))
    '"14:30:45"'
    >>> from_json('"2024-01-15"', Date)
    Date(2024, 1, 15)
    >>> json.dumps({"on": Date(2024, 1, 15)}, cls=CivilTimeJSONEncoder)
    '{"on": "2024-01-15"}'
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypeVar, Union

from civiltime.errors import InvalidJSONShapeError

if TYPE_CHECKING:
    from civiltime.core.date import Date
    from civiltime.core.timeofday import TimeOfDay

# Type alias for the encodable value types
CivilType = Union["Date", "TimeOfDay"]

C = TypeVar("C", "Date", "TimeOfDay")


def to_json_value(value: CivilType) -> str | None:
    """Return the JSON-serializable form of a value: its text, or None for nil.

    Raises:
        TypeError: If value is not a Date or TimeOfDay.
    """
    # Import here to avoid circular imports
    from civiltime.core.date import Date
    from civiltime.core.timeofday import TimeOfDay

    if isinstance(value, Date):
        if not value.is_valid:
            return None
        return value.to_text()
    elif isinstance(value, TimeOfDay):
        return value.to_text()
    else:
        raise TypeError(f"expected Date or TimeOfDay, got {type(value).__name__}")


def to_json(value: CivilType) -> str:
    """Encode a Date or TimeOfDay as a JSON document.

    Raises:
        TypeError: If value is not a Date or TimeOfDay.
    """
    return json.dumps(to_json_value(value))


def from_json(document: str | bytes | bytearray, cls: type[C]) -> C:
    """Decode a JSON document into a Date or TimeOfDay.

    Args:
        document: The JSON text.
        cls: Date or TimeOfDay.

    Returns:
        The decoded value; the zero value of cls for JSON null.

    Raises:
        InvalidJSONShapeError: If the document is not valid JSON, or is
            neither a string nor null.
        InvalidTextLengthError: If the string has an invalid length.
        InvalidTextFormatError: If the string is not in canonical form.
        TypeError: If cls is not Date or TimeOfDay.
    """
    from civiltime.core.date import Date
    from civiltime.core.timeofday import TimeOfDay

    if cls is not Date and cls is not TimeOfDay:
        raise TypeError(f"expected Date or TimeOfDay, got {cls!r}")

    try:
        data: Any = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise InvalidJSONShapeError(f"{cls.__name__}: can only decode JSON strings: {e}") from e

    if data is None:
        return Date.NIL if cls is Date else TimeOfDay.ZERO
    if not isinstance(data, str):
        raise InvalidJSONShapeError(
            f"{cls.__name__}: can only decode JSON strings, got {type(data).__name__}"
        )
    return cls.from_text(data)


class CivilTimeJSONEncoder(json.JSONEncoder):
    """JSON encoder that serializes Date and TimeOfDay values as text."""

    def default(self, o: Any) -> Any:
        from civiltime.core.date import Date
        from civiltime.core.timeofday import TimeOfDay

        if isinstance(o, (Date, TimeOfDay)):
            return to_json_value(o)
        return super().default(o)


__all__ = ["to_json", "to_json_value", "from_json", "CivilTimeJSONEncoder"]
