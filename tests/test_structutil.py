from dataclasses import dataclass, field

import pytest

from utilkit.structutil import for_each, to_map


@dataclass
class Sample:
    first: str
    second: int
    third: bool = field(default=False, metadata={"struct": "third_key"})


@dataclass
class WithOmitted:
    shown: int
    hidden: int = field(default=0, metadata={"json": "-"})
    renamed: str = field(default="", metadata={"json": "", "db": "renamed_col"})


def test_for_each():
    instance = Sample("moishe", 22, True)
    seen = []
    for_each(instance, lambda key, value, tag: seen.append((key, value, dict(tag))))
    assert seen == [
        ("first", "moishe", {}),
        ("second", 22, {}),
        ("third", True, {"struct": "third_key"}),
    ]


def test_to_map_plain():
    instance = Sample("moishe", 22, True)
    assert to_map(instance) == {"first": "moishe", "second": 22, "third": True}


def test_to_map_with_tag():
    instance = Sample("moishe", 22, True)
    assert to_map(instance, "struct") == {"first": "moishe", "second": 22, "third_key": True}


def test_to_map_unknown_tag_keeps_names():
    instance = Sample("moishe", 22, True)
    assert to_map(instance, "other") == {"first": "moishe", "second": 22, "third": True}


def test_to_map_omits_dash_and_skips_empty_tag():
    instance = WithOmitted(1, 2, "x")
    assert to_map(instance, "json", "db") == {"shown": 1, "renamed_col": "x"}


def test_for_each_rejects_non_dataclass():
    with pytest.raises(TypeError):
        for_each({"a": 1}, lambda key, value, tag: None)
    with pytest.raises(TypeError):
        to_map(Sample)