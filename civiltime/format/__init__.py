"""Layout-based formatting and duration parsing for civiltime."""

from civiltime.format.duration import parse_duration
from civiltime.format.strftime import strftime, strptime_date

__all__ = ["parse_duration", "strftime", "strptime_date"]
