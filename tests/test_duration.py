"""Tests for duration string parsing."""

from __future__ import annotations

import pytest

from civiltime.errors import InvalidTextFormatError
from civiltime.format.duration import parse_duration


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("-0", 0),
            ("0s", 0),
            ("300ns", 300),
            ("1.5us", 1_500),
            ("1.5µs", 1_500),
            ("1.5μs", 1_500),
            ("5ms", 5_000_000),
            ("+5ms", 5_000_000),
            ("-1.5s", -1_500_000_000),
            ("1h30m", 5_400_000_000_000),
            ("2h45m30.5s", 9_930_500_000_000),
            (".5m", 30_000_000_000),
            ("1.0000000001s", 1_000_000_000),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        """Valid duration strings."""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "-", "1", "h", "1x", ".s", "1h 30m", "1d", "one hour"])
    def test_invalid(self, text: str) -> None:
        """Malformed strings are format errors."""
        with pytest.raises(InvalidTextFormatError, match="invalid duration"):
            parse_duration(text)
