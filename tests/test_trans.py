from datetime import datetime, timedelta

import pytest

from utilkit.trans import (
    bool_value,
    float_value,
    int_value,
    map_keys,
    map_values,
    string_value,
    time_value,
    value_list,
)


def test_string_value():
    assert string_value("tea") == "tea"
    assert string_value(None) == ""


def test_bool_value():
    assert bool_value(True) is True
    assert bool_value(None) is False


def test_float_value():
    assert float_value(2.0) == 2.0
    assert float_value(None) == 0.0


def test_int_value():
    assert int_value(1) == 1
    assert int_value(None) == 0


def test_time_value_given():
    moment = datetime(2023, 3, 9, 12, 0, 0)
    assert time_value(moment) == moment


def test_time_value_none_is_now():
    before = datetime.now()
    result = time_value(None)
    after = datetime.now()
    assert before <= result <= after + timedelta(seconds=1)


@pytest.mark.parametrize(
    "values, default, expected",
    [
        (["tea"], "", ["tea"]),
        ([False], False, [False]),
        ([2.0], 0.0, [2.0]),
        ([1], 0, [1]),
        ([1, None, 3], 0, [1, 0, 3]),
        ([None, "x"], "", ["", "x"]),
    ],
)
def test_value_list(values, default, expected):
    assert value_list(values, default) == expected


def test_value_list_none():
    assert value_list(None, 0) is None


def test_value_list_empty_and_sequence():
    assert value_list([], 0) == []
    assert value_list((1, 2, 3, 4, 5), 0) == [1, 2, 3, 4, 5]


def test_map_keys_and_values():
    source = {"a": 1, "b": 2, "c": 3}
    assert sorted(map_keys(source)) == ["a", "b", "c"]
    assert sorted(map_values(source)) == [1, 2, 3]


def test_map_keys_empty():
    assert map_keys({}) == []
    assert map_values({}) == []