import time
from datetime import datetime, timedelta, timezone

import pytest
from google.protobuf.duration_pb2 import Duration
from google.protobuf.timestamp_pb2 import Timestamp

from utilkit.timeconv import (
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    duration_to_durationpb,
    duration_to_float,
    duration_to_number,
    durationpb_to_duration,
    float_to_duration,
    number_to_duration,
    refresh_default_time_location,
    string_date_to_time,
    string_time_to_time,
    string_to_unix_milli,
    time_to_date_string,
    time_to_time_string,
    time_to_timestamp,
    timestamp_to_time,
    unix_milli_to_string,
)


@pytest.fixture(autouse=True)
def default_zone():
    refresh_default_time_location("Asia/Shanghai")
    yield
    refresh_default_time_location("Asia/Shanghai")


@pytest.fixture
def utc_local(monkeypatch):
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_string_to_unix_milli_in_default_zone():
    assert string_to_unix_milli("2023-03-09 00:00:00") == 1678291200000
    assert string_to_unix_milli("2023-03-09 23:59:59") == 1678377599000


def test_string_to_unix_milli_with_fraction():
    assert string_to_unix_milli("2023-03-09 00:00:00.5") == 1678291200500


def test_string_to_unix_milli_none_and_empty():
    assert string_to_unix_milli(None) is None
    assert string_to_unix_milli("") is None
    assert string_to_unix_milli("not a time") is None


def test_unix_milli_to_string(utc_local):
    assert unix_milli_to_string(1678291200000) == "2023-03-08 16:00:00"
    assert unix_milli_to_string(None) is None


def test_string_time_to_time_date_time():
    result = string_time_to_time("2023-03-01 00:00:00")
    assert result.utcoffset() == timedelta(hours=8)
    assert (result.year, result.month, result.day, result.hour) == (2023, 3, 1, 0)


def test_string_date_to_time_date_only():
    result = string_date_to_time("2023-03-07")
    assert (result - datetime(1970, 1, 1, tzinfo=timezone.utc)) // timedelta(
        milliseconds=1
    ) == 1678118400000


def test_string_time_to_time_clock_only():
    result = string_time_to_time("12:30:45")
    assert (result.hour, result.minute, result.second) == (12, 30, 45)
    assert (result.year, result.month, result.day) == (1, 1, 1)


def test_string_time_to_time_rejects_out_of_range():
    assert string_time_to_time("2023-02-30") is None
    assert string_time_to_time("2023-3-1") is None
    assert string_time_to_time("24:00:00") is None


def test_refresh_default_time_location_changes_zone():
    refresh_default_time_location("UTC")
    assert string_to_unix_milli("2023-03-09 00:00:00") == 1678320000000


def test_unknown_zone_falls_back_to_default():
    refresh_default_time_location("No/Such_Zone")
    assert string_to_unix_milli("2023-03-09 00:00:00") == 1678291200000


def test_time_to_strings():
    moment = datetime(2023, 3, 1, 8, 9, 10)
    assert time_to_time_string(moment) == "2023-03-01 08:09:10"
    assert time_to_date_string(moment) == "2023-03-01"
    assert time_to_time_string(None) is None
    assert time_to_date_string(None) is None


def test_timestamp_round_trip():
    moment = datetime(2023, 3, 1, 8, 9, 10, 123456, tzinfo=timezone.utc)
    stamp = time_to_timestamp(moment)
    assert (stamp.seconds, stamp.nanos) == (1677658150, 123456000)
    assert timestamp_to_time(stamp) == moment


def test_timestamp_none():
    assert time_to_timestamp(None) is None
    assert timestamp_to_time(None) is None


def test_timestamp_to_time_is_utc():
    result = timestamp_to_time(Timestamp(seconds=0, nanos=0))
    assert result == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert result.utcoffset() == timedelta(0)


def test_float_to_duration():
    assert float_to_duration(100.0, NANOSECOND) == Duration(seconds=0, nanos=100)
    assert float_to_duration(100.0, SECOND) == Duration(seconds=100)
    assert float_to_duration(100.0, MINUTE) == Duration(seconds=6000)
    assert float_to_duration(1.9, SECOND) == Duration(seconds=1)
    assert float_to_duration(None, SECOND) is None


def test_duration_to_float():
    assert duration_to_float(Duration(nanos=100), NANOSECOND) == pytest.approx(100.0)
    assert duration_to_float(Duration(seconds=100), SECOND) == 100.0
    assert duration_to_float(Duration(seconds=6000), MINUTE) == 100.0
    assert duration_to_float(None, SECOND) is None


def test_number_to_duration():
    assert number_to_duration(100.0, NANOSECOND) == Duration(nanos=100)
    assert number_to_duration(100, SECOND) == Duration(seconds=100)
    assert number_to_duration(100.0, MINUTE) == Duration(seconds=6000)
    assert number_to_duration(7, MILLISECOND) == Duration(nanos=7_000_000)
    assert number_to_duration(3, timedelta(seconds=2)) == Duration(seconds=6)


def test_duration_to_number():
    assert duration_to_number(Duration(nanos=100), NANOSECOND, float) == pytest.approx(100.0)
    assert duration_to_number(Duration(seconds=100), SECOND, float) == 100.0
    assert duration_to_number(Duration(seconds=6000), MINUTE, float) == 100.0
    assert duration_to_number(Duration(seconds=150), MINUTE, int) == 2
    assert duration_to_number(Duration(seconds=150), MINUTE, float) == 2.5
    assert duration_to_number(None, MINUTE, int) is None


def test_timedelta_durationpb_round_trip():
    pb = duration_to_durationpb(timedelta(seconds=-1.5))
    assert (pb.seconds, pb.nanos) == (-1, -500000000)
    assert durationpb_to_duration(pb) == timedelta(seconds=-1.5)


def test_durationpb_to_duration_truncates_nanoseconds():
    assert durationpb_to_duration(Duration(seconds=90, nanos=1500)) == timedelta(
        seconds=90, microseconds=1
    )
    assert durationpb_to_duration(None) is None
    assert duration_to_durationpb(None) is None