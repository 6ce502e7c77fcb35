"""Tests for the TimeOfDay class."""

from __future__ import annotations

import datetime

import pytest

from civiltime._internal.clock import nanos_to_units, units_to_nanos
from civiltime.core.timeofday import INVALID_DURATION, TimeOfDay
from civiltime.errors import InvalidDurationError, InvalidTextFormatError, InvalidUnitError

HOUR = 3_600_000_000_000


class TestTimeOfDayConstruction:
    """Tests for TimeOfDay construction and validation."""

    def test_basic_construction(self) -> None:
        """Test basic construction."""
        t = TimeOfDay(14, 30, 45, 123_456_789)
        assert t.hour == 14
        assert t.minute == 30
        assert t.second == 45
        assert t.nanosecond == 123_456_789

    def test_defaults_to_midnight(self) -> None:
        """All components default to zero."""
        assert TimeOfDay() == TimeOfDay.ZERO

    @pytest.mark.parametrize(
        ("units", "message"),
        [
            ((24, 0, 0, 0), "hour must be between 0 and 23"),
            ((-1, 0, 0, 0), "hour must be between 0 and 23"),
            ((0, 60, 0, 0), "minute must be between 0 and 59"),
            ((0, 0, 60, 0), "second must be between 0 and 59"),
            ((0, 0, 0, 1_000_000_000), "nanosecond must be between 0 and 999999999"),
        ],
    )
    def test_invalid_units(self, units: tuple[int, int, int, int], message: str) -> None:
        """Out-of-range components raise InvalidUnitError."""
        with pytest.raises(InvalidUnitError, match=message):
            TimeOfDay.from_units(*units)

    def test_from_duration(self) -> None:
        """from_duration accepts nanoseconds and timedeltas."""
        assert TimeOfDay.from_duration(HOUR + 1) == TimeOfDay(1, 0, 0, 1)
        assert TimeOfDay.from_duration(datetime.timedelta(hours=1, minutes=30)) == TimeOfDay(1, 30)

    def test_from_duration_out_of_range(self) -> None:
        """Negative durations and durations of a day or more are rejected."""
        with pytest.raises(InvalidDurationError):
            TimeOfDay.from_duration(-1)
        with pytest.raises(InvalidDurationError):
            TimeOfDay.from_duration(24 * HOUR)
        with pytest.raises(InvalidDurationError):
            TimeOfDay.from_duration(datetime.timedelta(days=1))

    def test_from_duration_rejects_other_types(self) -> None:
        """Floats and bools are not durations."""
        with pytest.raises(TypeError):
            TimeOfDay.from_duration(1.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            TimeOfDay.from_duration(True)

    def test_from_duration_string(self) -> None:
        """Duration strings are parsed before validation."""
        assert TimeOfDay.from_duration_string("1h30m") == TimeOfDay(1, 30)
        assert TimeOfDay.from_duration_string("90.5s") == TimeOfDay(0, 1, 30, 500_000_000)
        with pytest.raises(InvalidDurationError):
            TimeOfDay.from_duration_string("25h")
        with pytest.raises(InvalidTextFormatError):
            TimeOfDay.from_duration_string("noon")

    def test_now(self) -> None:
        """now() returns a valid value."""
        assert TimeOfDay.now().is_valid


class TestTimeOfDayConstants:
    """Tests for ZERO, MIN and MAX."""

    def test_zero_and_min(self) -> None:
        """ZERO and MIN are midnight."""
        assert TimeOfDay.ZERO.to_units() == (0, 0, 0, 0)
        assert TimeOfDay.MIN == TimeOfDay.ZERO

    def test_max(self) -> None:
        """MAX is the last nanosecond of the day."""
        assert TimeOfDay.MAX.to_units() == (23, 59, 59, 999_999_999)
        assert TimeOfDay.MAX.to_duration() == 86_399_999_999_999

    def test_midnight_is_truthy(self) -> None:
        """Midnight is still a time."""
        assert TimeOfDay.ZERO


class TestTimeOfDayDuration:
    """Tests for duration accessors."""

    def test_to_duration(self) -> None:
        """to_duration returns nanoseconds since midnight."""
        assert TimeOfDay(1, 0, 0).to_duration() == HOUR

    def test_to_duration_invalid(self) -> None:
        """An out-of-range value reports -1."""
        t = TimeOfDay._from_nanos(24 * HOUR)
        assert not t.is_valid
        assert t.to_duration() == INVALID_DURATION == -1

    def test_to_timedelta(self) -> None:
        """to_timedelta truncates to microseconds."""
        t = TimeOfDay(1, 2, 3, 4_005_999)
        assert t.to_timedelta() == datetime.timedelta(hours=1, minutes=2, seconds=3, microseconds=4005)


class TestTimeOfDayArithmetic:
    """Tests for wrap-around arithmetic."""

    def test_add_wraps_forward(self) -> None:
        """Adding 25 hours to midnight gives 01:00."""
        assert TimeOfDay.ZERO.add(25 * HOUR) == TimeOfDay(1, 0, 0)

    def test_sub_wraps_backward(self) -> None:
        """Subtracting one hour from midnight gives 23:00."""
        assert TimeOfDay.ZERO.sub(HOUR) == TimeOfDay(23, 0, 0)
        assert TimeOfDay.ZERO.add(-HOUR) == TimeOfDay(23, 0, 0)

    def test_add_many_days(self) -> None:
        """Whole days leave the time unchanged."""
        t = TimeOfDay(12, 34, 56)
        assert t.add(datetime.timedelta(days=-400)) == t
        assert t.add(1000 * 24 * HOUR) == t

    def test_add_timedelta(self) -> None:
        """Timedeltas are accepted."""
        assert TimeOfDay(23, 30).add(datetime.timedelta(minutes=45)) == TimeOfDay(0, 15)

    def test_max_plus_one(self) -> None:
        """The nanosecond after MAX is midnight."""
        assert TimeOfDay.MAX.add(1) == TimeOfDay.ZERO

    def test_operators(self) -> None:
        """+ and - accept ints and timedeltas."""
        t = TimeOfDay(23, 0, 0)
        assert t + 2 * HOUR == TimeOfDay(1, 0, 0)
        assert t - datetime.timedelta(hours=24) == t
        with pytest.raises(TypeError):
            t + "1h"  # type: ignore[operator]


class TestTimeOfDayComparison:
    """Tests for ordering and hashing."""

    def test_ordering(self) -> None:
        """Earlier times compare less."""
        a, b = TimeOfDay(9, 0), TimeOfDay(17, 0)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a != b
        assert max(a, b) == b

    def test_hash(self) -> None:
        """Equal values hash alike."""
        assert len({TimeOfDay(9, 0), TimeOfDay.from_duration(9 * HOUR)}) == 1


class TestTimeOfDayDatetime:
    """Tests for composing with a calendar date."""

    def test_to_datetime_utc(self) -> None:
        """Composes in UTC by default."""
        dt = TimeOfDay(14, 30, 45, 123_456_789).to_datetime_utc(2024, 1, 15)
        assert dt == datetime.datetime(2024, 1, 15, 14, 30, 45, 123456, tzinfo=datetime.timezone.utc)

    def test_to_datetime_with_zone(self) -> None:
        """A given zone is attached as is."""
        tz = datetime.timezone(datetime.timedelta(hours=5))
        dt = TimeOfDay(8, 0).to_datetime(2024, 1, 15, tz)
        assert dt.hour == 8
        assert dt.utcoffset() == datetime.timedelta(hours=5)

    def test_to_datetime_local(self) -> None:
        """Local composition keeps the wall clock time."""
        dt = TimeOfDay(12, 0).to_datetime_local(2024, 7, 1)
        assert dt.tzinfo is not None
        assert (dt.hour, dt.minute) == (12, 0)


class TestTimeOfDayRepr:
    """Tests for string forms."""

    def test_repr(self) -> None:
        """repr shows all components."""
        assert repr(TimeOfDay(1, 2, 3, 4)) == "TimeOfDay(1, 2, 3, nanosecond=4)"

    def test_str(self) -> None:
        """str is the canonical text."""
        assert str(TimeOfDay(12, 34, 56, 100_000_000)) == "12:34:56.1"
        assert str(TimeOfDay.ZERO) == "00:00:00"


class TestClockConversion:
    """Tests for nanosecond <-> unit conversion."""

    @pytest.mark.parametrize(
        ("units", "nanos"),
        [
            ((0, 0, 0, 0), 0),
            ((0, 0, 0, 1), 1),
            ((0, 0, 0, 999_999_999), 999_999_999),
            ((0, 0, 1, 0), 1_000_000_000),
            ((0, 0, 59, 999_999_999), 59_999_999_999),
            ((0, 1, 0, 0), 60_000_000_000),
            ((0, 59, 59, 999_999_999), HOUR - 1),
            ((1, 0, 0, 0), HOUR),
            ((12, 0, 0, 0), 12 * HOUR),
            ((23, 59, 59, 999_999_999), 86_399_999_999_999),
        ],
    )
    def test_round_trip(self, units: tuple[int, int, int, int], nanos: int) -> None:
        """Units and nanoseconds convert both ways."""
        assert units_to_nanos(*units) == nanos
        assert nanos_to_units(nanos) == units
        assert nanos_to_units(units_to_nanos(*units)) == units
