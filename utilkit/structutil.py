"""Walk the fields of a dataclass instance and turn it into a dict."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any

__all__ = ["for_each", "to_map"]


def for_each(instance: Any, function: Callable[[str, Any, Mapping[str, Any]], None]) -> None:
    """Call ``function(name, value, metadata)`` for every field of ``instance``.

    ``instance`` must be a dataclass instance; ``metadata`` is the field's
    metadata mapping, which plays the role of a field tag.
    """
    if not dataclasses.is_dataclass(instance) or isinstance(instance, type):
        raise TypeError(f"expected a dataclass instance, got {type(instance).__name__}")
    for field in dataclasses.fields(instance):
        function(field.name, getattr(instance, field.name), field.metadata)


def to_map(instance: Any, *args: str) -> dict[str, Any]:
    """Convert a dataclass instance to a dict of field names to values.

    Each name in ``args`` is looked up in a field's metadata; the first
    non-empty entry replaces the field's key, and a key of ``"-"`` omits
    the field.
    """
    output: dict[str, Any] = {}

    def collect(key: str, value: Any, tag: Mapping[str, Any]) -> None:
        if tag:
            for tag_name in args:
                renamed = tag.get(tag_name)
                if renamed:
                    key = renamed
                    break
        if key != "-":
            output[key] = value

    for_each(instance, collect)
    return output