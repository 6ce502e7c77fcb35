"""Tests for the fixed-width binary encoding."""

from __future__ import annotations

import pytest

from civiltime import Date, TimeOfDay
from civiltime.convert import decode_date, decode_time_of_day, encode_date, encode_time_of_day
from civiltime.errors import InvalidBinaryLengthError, InvalidDurationError, ParseError


class TestTimeOfDayBinary:
    """Tests for TimeOfDay binary encoding."""

    def test_encode_max(self) -> None:
        """MAX encodes as its big-endian nanosecond count."""
        assert encode_time_of_day(TimeOfDay.MAX) == bytes.fromhex("00004e94914effff")
        assert TimeOfDay.MAX.to_bytes().hex() == "00004e94914effff"

    def test_encode_zero(self) -> None:
        """Midnight encodes as eight zero bytes."""
        assert TimeOfDay.ZERO.to_bytes() == b"\x00" * 8

    def test_round_trip(self) -> None:
        """Decoding an encoding gives the same value."""
        for t in [TimeOfDay.ZERO, TimeOfDay(12, 34, 56, 789), TimeOfDay.MAX]:
            assert decode_time_of_day(encode_time_of_day(t)) == t

    def test_decode_bytes_like(self) -> None:
        """bytearray and memoryview are accepted."""
        data = TimeOfDay(1, 0, 0).to_bytes()
        assert TimeOfDay.from_bytes(bytearray(data)) == TimeOfDay(1, 0, 0)
        assert TimeOfDay.from_bytes(memoryview(data)) == TimeOfDay(1, 0, 0)

    @pytest.mark.parametrize("size", [0, 1, 7, 9, 16])
    def test_decode_wrong_length(self, size: int) -> None:
        """Anything but 8 bytes is rejected."""
        with pytest.raises(InvalidBinaryLengthError, match="must be 8 bytes"):
            decode_time_of_day(b"\x00" * size)

    def test_length_error_is_parse_error(self) -> None:
        """Length errors are ParseErrors."""
        with pytest.raises(ParseError):
            TimeOfDay.from_bytes(b"\x00" * 7)

    def test_decode_negative(self) -> None:
        """-1 is not a time of day."""
        with pytest.raises(InvalidDurationError):
            decode_time_of_day(b"\xff" * 8)

    def test_decode_full_day(self) -> None:
        """86_400_000_000_000 is not a time of day."""
        with pytest.raises(InvalidDurationError):
            decode_time_of_day((86_400_000_000_000).to_bytes(8, "big"))


class TestDateBinary:
    """Tests for Date binary encoding."""

    def test_encode(self) -> None:
        """A date encodes as its big-endian day number."""
        assert encode_date(Date(1753, 1, 1)) == (2361331).to_bytes(8, "big")

    def test_nil(self) -> None:
        """Date.NIL round trips through its day number -2."""
        data = Date.NIL.to_bytes()
        assert data == bytes.fromhex("fffffffffffffffe")
        assert decode_date(data).is_nil

    def test_round_trip(self) -> None:
        """Decoding an encoding gives the same value."""
        for d in [Date.MIN, Date(2024, 2, 29), Date.MAX]:
            assert Date.from_bytes(d.to_bytes()) == d

    def test_decode_wrong_length(self) -> None:
        """Anything but 8 bytes is rejected."""
        with pytest.raises(InvalidBinaryLengthError):
            decode_date(b"\x00" * 4)

    def test_decode_out_of_range(self) -> None:
        """Day numbers outside the range are rejected."""
        with pytest.raises(InvalidDurationError):
            decode_date((5373485).to_bytes(8, "big"))
        with pytest.raises(InvalidDurationError):
            decode_date(b"\x00" * 8)
