"""Helpers that fill in defaults for missing values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Optional, TypeVar

__all__ = [
    "string_value",
    "int_value",
    "float_value",
    "bool_value",
    "time_value",
    "value_list",
    "map_keys",
    "map_values",
]

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def string_value(value: Optional[str]) -> str:
    """Return ``value``, or an empty string if it is ``None``."""
    return "" if value is None else value


def int_value(value: Optional[int]) -> int:
    """Return ``value``, or ``0`` if it is ``None``."""
    return 0 if value is None else value


def float_value(value: Optional[float]) -> float:
    """Return ``value``, or ``0.0`` if it is ``None``."""
    return 0.0 if value is None else value


def bool_value(value: Optional[bool]) -> bool:
    """Return ``value``, or ``False`` if it is ``None``."""
    return False if value is None else value


def time_value(value: Optional[datetime]) -> datetime:
    """Return ``value``, or the current local time if it is ``None``."""
    return datetime.now() if value is None else value


def value_list(values: Optional[Iterable[Optional[T]]], default: T) -> Optional[list[T]]:
    """Replace each ``None`` in ``values`` with ``default``.

    ``None`` in place of the whole sequence gives ``None`` back.
    """
    if values is None:
        return None
    return [default if item is None else item for item in values]


def map_keys(source: Mapping[K, V]) -> list[K]:
    """Return the keys of ``source`` as a list."""
    return list(source.keys())


def map_values(source: Mapping[K, V]) -> list[V]:
    """Return the values of ``source`` as a list."""
    return list(source.values())