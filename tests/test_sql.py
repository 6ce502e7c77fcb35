"""Tests for database driver interop."""

from __future__ import annotations

import logging

import pytest

from civiltime import Date, TimeOfDay
from civiltime.errors import (
    InvalidBinaryLengthError,
    InvalidJSONShapeError,
    InvalidTextFormatError,
    UnsupportedSourceTypeError,
)
from civiltime.sql import NullDate, NullTimeOfDay, scan_date, scan_time_of_day


class TestScan:
    """Tests for scan_date and scan_time_of_day."""

    def test_scan_text(self) -> None:
        """str sources use the text codec."""
        assert scan_date("2024-01-15") == Date(2024, 1, 15)
        assert scan_time_of_day("12:34:56.1") == TimeOfDay(12, 34, 56, 100_000_000)

    def test_scan_binary(self) -> None:
        """bytes-like sources use the binary codec."""
        assert scan_date(Date(2024, 1, 15).to_bytes()) == Date(2024, 1, 15)
        assert scan_time_of_day(bytearray(TimeOfDay.MAX.to_bytes())) == TimeOfDay.MAX
        assert scan_time_of_day(memoryview(TimeOfDay.ZERO.to_bytes())) == TimeOfDay.ZERO

    @pytest.mark.parametrize("src", [42, 1.5, None, ["2024-01-15"]])
    def test_scan_unsupported(self, src: object) -> None:
        """Other source types are rejected."""
        with pytest.raises(UnsupportedSourceTypeError, match="cannot scan"):
            scan_date(src)
        with pytest.raises(UnsupportedSourceTypeError):
            scan_time_of_day(src)

    def test_scan_errors_propagate(self) -> None:
        """Codec errors are raised unchanged."""
        with pytest.raises(InvalidBinaryLengthError):
            scan_date(b"\x00")
        with pytest.raises(InvalidTextFormatError):
            scan_time_of_day("25:00:00")

    def test_scan_logs_source_type(self, caplog: pytest.LogCaptureFixture) -> None:
        """Dispatch is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="civiltime.sql"):
            scan_date("2024-01-15")
        assert "text source" in caplog.text

    def test_driver_values(self) -> None:
        """Values hand their canonical text to drivers."""
        assert Date(2024, 1, 15).to_driver_value() == "2024-01-15"
        assert TimeOfDay(9, 0).to_driver_value() == "09:00:00"


class TestNullDate:
    """Tests for the NullDate holder."""

    def test_defaults(self) -> None:
        """A new holder is invalid and nil."""
        holder = NullDate()
        assert not holder.valid
        assert holder.value.is_nil
        assert holder.driver_value() is None

    def test_scan(self) -> None:
        """Scanning a value marks the holder valid."""
        holder = NullDate()
        holder.scan("2024-01-15")
        assert holder.valid
        assert holder.value == Date(2024, 1, 15)
        assert holder.driver_value() == "2024-01-15"

    def test_scan_none(self) -> None:
        """Scanning None resets the holder."""
        holder = NullDate(Date(2024, 1, 15), True)
        holder.scan(None)
        assert not holder.valid
        assert holder.value.is_nil

    def test_failed_scan_leaves_holder_unchanged(self) -> None:
        """A failed decode does not touch either field."""
        holder = NullDate(Date(2024, 1, 15), True)
        with pytest.raises(InvalidBinaryLengthError):
            holder.scan(b"\x00\x01")
        assert holder.valid
        assert holder.value == Date(2024, 1, 15)

    def test_json(self) -> None:
        """Invalid holders are null in JSON."""
        holder = NullDate()
        assert holder.to_json() == "null"
        holder.load_json('"2024-01-15"')
        assert holder.valid
        assert holder.to_json() == '"2024-01-15"'
        holder.load_json("null")
        assert not holder.valid
        assert holder.value.is_nil


class TestNullTimeOfDay:
    """Tests for the NullTimeOfDay holder."""

    def test_defaults(self) -> None:
        """A new holder is invalid and midnight."""
        holder = NullTimeOfDay()
        assert not holder.valid
        assert holder.value == TimeOfDay.ZERO
        assert holder.driver_value() is None

    def test_scan(self) -> None:
        """Scanning a value marks the holder valid."""
        holder = NullTimeOfDay()
        holder.scan(TimeOfDay(7, 45).to_bytes())
        assert holder.valid
        assert holder.driver_value() == "07:45:00"

    def test_scan_none(self) -> None:
        """Scanning None resets the holder."""
        holder = NullTimeOfDay(TimeOfDay(7, 45), True)
        holder.scan(None)
        assert not holder.valid
        assert holder.value == TimeOfDay.ZERO

    def test_json(self) -> None:
        """Invalid holders are null in JSON."""
        holder = NullTimeOfDay()
        assert holder.to_json() == "null"
        holder.load_json(b'"07:45:00"')
        assert holder.valid
        assert holder.value == TimeOfDay(7, 45)
        holder.load_json("null")
        assert not holder.valid

    def test_failed_load_leaves_holder_unchanged(self) -> None:
        """A failed decode does not touch either field."""
        holder = NullTimeOfDay(TimeOfDay(7, 45), True)
        with pytest.raises(InvalidJSONShapeError):
            holder.load_json("42")
        assert holder.valid
        assert holder.value == TimeOfDay(7, 45)
