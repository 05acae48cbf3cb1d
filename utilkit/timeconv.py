"""Conversions between timestamps, time strings, datetimes and protobuf times."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Optional, TypeVar, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from google.protobuf.duration_pb2 import Duration
from google.protobuf.timestamp_pb2 import Timestamp

from utilkit.timefmt import DATE_LAYOUT, DEFAULT_TIME_LOCATION_NAME, TIME_LAYOUT

__all__ = [
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "refresh_default_time_location",
    "unix_milli_to_string",
    "string_to_unix_milli",
    "string_time_to_time",
    "time_to_time_string",
    "string_date_to_time",
    "time_to_date_string",
    "timestamp_to_time",
    "time_to_timestamp",
    "float_to_duration",
    "duration_to_float",
    "number_to_duration",
    "duration_to_number",
    "duration_to_durationpb",
    "durationpb_to_duration",
]

# Time precisions, in nanoseconds.
NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_MAX_NS = 2**63 - 1
_MIN_NS = -(2**63)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_TIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2}) (\d{1,2}):(\d{2}):(\d{2})(?:[.,](\d+))?"
)
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2}):(\d{2})(?:[.,](\d+))?")

_default_location: Optional[tzinfo] = None

Precision = Union[int, timedelta]
N = TypeVar("N", int, float)


def _load_location(name: str) -> Optional[tzinfo]:
    if name in ("", "UTC"):
        return timezone.utc
    if name == "Local":
        return datetime.now().astimezone().tzinfo
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def refresh_default_time_location(name: str) -> None:
    """Set the zone used to read time strings; an unknown name clears it."""
    global _default_location
    _default_location = _load_location(name)


def _location() -> tzinfo:
    if _default_location is None:
        refresh_default_time_location(DEFAULT_TIME_LOCATION_NAME)
    if _default_location is None:
        raise LookupError(f"time zone {DEFAULT_TIME_LOCATION_NAME!r} is not available")
    return _default_location


def _microseconds(fraction: Optional[str]) -> int:
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _build(year, month, day, hour, minute, second, fraction, zone) -> Optional[datetime]:
    try:
        return datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second),
            _microseconds(fraction), tzinfo=zone,
        )
    except ValueError:
        return None


def _parse(text: Optional[str]) -> Optional[datetime]:
    """Read a date-time, a date or a clock time in the default zone."""
    if not text:
        return None
    zone = _location()

    match = _TIME_RE.fullmatch(text)
    if match:
        result = _build(*match.groups(), zone)
        if result is not None:
            return result

    match = _DATE_RE.fullmatch(text)
    if match:
        result = _build(*match.groups(), 0, 0, 0, None, zone)
        if result is not None:
            return result

    match = _CLOCK_RE.fullmatch(text)
    if match:
        # A clock time alone falls on the earliest representable date.
        return _build(1, 1, 1, *match.groups(), zone)

    return None


def unix_milli_to_string(value: Optional[int]) -> Optional[str]:
    """Format a Unix time in milliseconds as local ``YYYY-MM-DD HH:MM:SS``."""
    if value is None:
        return None
    return datetime.fromtimestamp(value // 1000).strftime(TIME_LAYOUT)


def string_to_unix_milli(value: Optional[str]) -> Optional[int]:
    """Read a time string in the default zone as Unix milliseconds."""
    moment = string_time_to_time(value)
    if moment is None:
        return None
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def string_time_to_time(value: Optional[str]) -> Optional[datetime]:
    """Read a date-time, date or clock string in the default zone."""
    return _parse(value)


def time_to_time_string(value: Optional[datetime]) -> Optional[str]:
    """Format ``value`` as ``YYYY-MM-DD HH:MM:SS``."""
    return None if value is None else value.strftime(TIME_LAYOUT)


def string_date_to_time(value: Optional[str]) -> Optional[datetime]:
    """Read a date-time, date or clock string in the default zone."""
    return _parse(value)


def time_to_date_string(value: Optional[datetime]) -> Optional[str]:
    """Format ``value`` as ``YYYY-MM-DD``."""
    return None if value is None else value.strftime(DATE_LAYOUT)


def timestamp_to_time(value: Optional[Timestamp]) -> Optional[datetime]:
    """Convert a protobuf ``Timestamp`` to a UTC datetime."""
    if value is None:
        return None
    return _EPOCH + timedelta(seconds=value.seconds, microseconds=value.nanos // 1000)


def time_to_timestamp(value: Optional[datetime]) -> Optional[Timestamp]:
    """Convert a datetime to a protobuf ``Timestamp``; naive values are local."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.astimezone()
    delta = value - _EPOCH
    return Timestamp(
        seconds=delta.days * 86400 + delta.seconds,
        nanos=delta.microseconds * 1000,
    )


def _wrap_int64(number: int) -> int:
    return ((number + 2**63) % 2**64) - 2**63


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // b
    return q if a >= 0 else -q


def _precision_ns(precision: Precision) -> int:
    if isinstance(precision, timedelta):
        return (precision.days * 86400 + precision.seconds) * SECOND + precision.microseconds * MICROSECOND
    return int(precision)


def _ns_to_durationpb(ns: int) -> Duration:
    seconds = _tdiv(ns, SECOND)
    return Duration(seconds=seconds, nanos=ns - seconds * SECOND)


def _durationpb_ns(value: Duration) -> int:
    total = value.seconds * SECOND + value.nanos
    if total > _MAX_NS or total < _MIN_NS:
        if value.seconds < 0:
            return _MIN_NS
        if value.seconds > 0:
            return _MAX_NS
    return total


def _seconds(ns: int) -> float:
    whole = _tdiv(ns, SECOND)
    return float(whole) + (ns - whole * SECOND) / 1e9


def float_to_duration(value: Optional[float], precision: Precision) -> Optional[Duration]:
    """Whole units of ``value`` (truncated) times ``precision`` as a ``Duration``."""
    return number_to_duration(value, precision)


def duration_to_float(value: Optional[Duration], precision: Precision) -> Optional[float]:
    """A ``Duration`` expressed as a float count of ``precision`` units."""
    if value is None:
        return None
    return _seconds(_durationpb_ns(value)) / _seconds(_precision_ns(precision))


def number_to_duration(value: Optional[Union[int, float]], precision: Precision) -> Optional[Duration]:
    """Whole units of ``value`` (truncated) times ``precision`` as a ``Duration``."""
    if value is None:
        return None
    units = _wrap_int64(int(value))
    return _ns_to_durationpb(_wrap_int64(units * _precision_ns(precision)))


def duration_to_number(
    value: Optional[Duration], precision: Precision, number_type: Callable[[float], N]
) -> Optional[N]:
    """A ``Duration`` in ``precision`` units, converted with ``number_type``."""
    amount = duration_to_float(value, precision)
    return None if amount is None else number_type(amount)


def duration_to_durationpb(value: Optional[timedelta]) -> Optional[Duration]:
    """Convert a ``timedelta`` to a protobuf ``Duration``."""
    if value is None:
        return None
    return _ns_to_durationpb(_precision_ns(value))


def durationpb_to_duration(value: Optional[Duration]) -> Optional[timedelta]:
    """Convert a protobuf ``Duration`` to a ``timedelta``, truncating to microseconds."""
    if value is None:
        return None
    return timedelta(microseconds=_tdiv(_durationpb_ns(value), MICROSECOND))