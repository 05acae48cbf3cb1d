"""Date layouts, day differences and timer-style duration formatting."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone

__all__ = [
    "DATE_LAYOUT",
    "CLOCK_LAYOUT",
    "TIME_LAYOUT",
    "DEFAULT_TIME_LOCATION_NAME",
    "REFERENCE_TIME",
    "reference_time",
    "day_difference_hours",
    "string_difference_days",
    "day_time_difference_hours",
    "time_difference_days",
    "day_seconds_difference_hours",
    "seconds_difference_days",
    "format_timer",
    "format_timerf",
    "duration_hms",
]

DATE_LAYOUT = "%Y-%m-%d"
CLOCK_LAYOUT = "%H:%M:%S"
TIME_LAYOUT = DATE_LAYOUT + " " + CLOCK_LAYOUT

DEFAULT_TIME_LOCATION_NAME = "Asia/Shanghai"

REFERENCE_TIME = datetime(
    2006, 1, 2, 15, 4, 5, 999999, tzinfo=timezone(timedelta(hours=-7), "MST")
)

_NS_PER_SECOND = 1_000_000_000
_NS_PER_MINUTE = 60 * _NS_PER_SECOND
_NS_PER_HOUR = 60 * _NS_PER_MINUTE
_MAX_NS = 2**63 - 1
_MIN_NS = -(2**63)

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    q = abs(a) // b
    return q if a >= 0 else -q


def _timedelta_ns(delta: timedelta) -> int:
    return (delta.days * 86400 + delta.seconds) * _NS_PER_SECOND + delta.microseconds * 1000


def _hours(ns: int) -> float:
    """Hours in a span of ``ns`` nanoseconds, saturating at 64 bits."""
    ns = max(_MIN_NS, min(_MAX_NS, ns))
    whole = _tdiv(ns, _NS_PER_HOUR)
    rest = ns - whole * _NS_PER_HOUR
    return float(whole) + rest / _NS_PER_HOUR


def _days_from_hours(hours: float) -> int:
    if hours == 0:
        return 0
    return int(math.ceil(hours / 24))


def _parse_date(text: str) -> datetime:
    """Parse ``YYYY-MM-DD`` as UTC midnight; the zero time if it does not parse."""
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return _ZERO_TIME
    try:
        year, month, day = (int(part) for part in match.groups())
        return datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        return _ZERO_TIME


def reference_time() -> datetime:
    """Return the fixed reference time 2006-01-02 15:04:05.999999 -07:00."""
    return REFERENCE_TIME


def day_difference_hours(start_date: str, end_date: str) -> float:
    """Hours between two ``YYYY-MM-DD`` dates."""
    delta = _parse_date(end_date) - _parse_date(start_date)
    return _hours(_timedelta_ns(delta))


def string_difference_days(start_date: str, end_date: str) -> int:
    """Days between two ``YYYY-MM-DD`` dates, rounded up."""
    return _days_from_hours(day_difference_hours(start_date, end_date))


def _local_midnight_timestamp(moment: datetime) -> float:
    return datetime(moment.year, moment.month, moment.day).timestamp()


def day_time_difference_hours(start_date: datetime, end_date: datetime) -> float:
    """Hours between the local midnights of the calendar days of two times."""
    seconds = _local_midnight_timestamp(end_date) - _local_midnight_timestamp(start_date)
    return _hours(int(round(seconds)) * _NS_PER_SECOND)


def time_difference_days(start_date: datetime, end_date: datetime) -> int:
    """Days between the calendar days of two times, rounded up."""
    return _days_from_hours(day_time_difference_hours(start_date, end_date))


def day_seconds_difference_hours(start_second: int, end_second: int) -> float:
    """Hours between two Unix timestamps in seconds."""
    return _hours((end_second - start_second) * _NS_PER_SECOND)


def seconds_difference_days(start_second: int, end_second: int) -> int:
    """Days between two Unix timestamps in seconds, rounded up."""
    return _days_from_hours(day_seconds_difference_hours(start_second, end_second))


def _round_to_second(ns: int) -> int:
    """Round to the nearest second, halves away from zero."""
    magnitude = abs(ns)
    rest = magnitude % _NS_PER_SECOND
    if rest + rest < _NS_PER_SECOND:
        magnitude -= rest
    else:
        magnitude += _NS_PER_SECOND - rest
    return magnitude if ns >= 0 else -magnitude


def duration_hms(duration: timedelta) -> tuple[int, int, int]:
    """Split ``duration``, rounded to the second, into hours, minutes, seconds."""
    ns = _round_to_second(_timedelta_ns(duration))
    hours = _tdiv(ns, _NS_PER_HOUR)
    ns -= hours * _NS_PER_HOUR
    minutes = _tdiv(ns, _NS_PER_MINUTE)
    ns -= minutes * _NS_PER_MINUTE
    seconds = _tdiv(ns, _NS_PER_SECOND)
    return hours, minutes, seconds


def format_timer(duration: timedelta) -> str:
    """Format ``duration`` as ``[H]H:MM:SS``, dropping a zero hour field."""
    out = "%02d:%02d:%02d" % duration_hms(duration)
    return out.removeprefix("00:").removeprefix("0")


def format_timerf(fmt: str, duration: timedelta) -> str:
    """Format hours, minutes and seconds of ``duration`` with a printf-style ``fmt``."""
    return fmt % duration_hms(duration)