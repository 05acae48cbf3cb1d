"""Helpers for case conversion, random strings, time handling, UUIDs and dataclass mapping."""

__version__ = "0.1.0"