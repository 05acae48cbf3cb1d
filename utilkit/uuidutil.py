"""Conversions between strings and UUIDs."""

from __future__ import annotations

import string
import uuid
from typing import Optional

__all__ = ["to_uuid_or_none", "to_uuid", "to_string_or_none"]

_HEX_DIGITS = frozenset(string.hexdigits)
_HYPHEN_POSITIONS = (8, 13, 18, 23)


def _parse(text: str) -> uuid.UUID:
    """Parse the standard, URN, braced and bare-hex forms of a UUID."""
    if len(text) == 45 and text[:9].lower() == "urn:uuid:":
        text = text[9:]
    elif len(text) == 38 and text[0] == "{" and text[-1] == "}":
        text = text[1:-1]

    if len(text) == 36:
        if any(text[pos] != "-" for pos in _HYPHEN_POSITIONS):
            raise ValueError(f"invalid UUID format: {text!r}")
        digits = text.replace("-", "")
    elif len(text) == 32:
        digits = text
    else:
        raise ValueError(f"invalid UUID length: {len(text)}")

    if len(digits) != 32 or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"invalid UUID format: {text!r}")
    return uuid.UUID(hex=digits)


def to_uuid_or_none(text: Optional[str]) -> Optional[uuid.UUID]:
    """Parse ``text`` as a UUID; ``None`` if it is ``None`` or invalid."""
    if text is None:
        return None
    try:
        return _parse(text)
    except ValueError:
        return None


def to_uuid(text: str) -> uuid.UUID:
    """Parse ``text`` as a UUID; the nil UUID if it is invalid."""
    try:
        return _parse(text)
    except ValueError:
        return uuid.UUID(int=0)


def to_string_or_none(value: Optional[uuid.UUID]) -> Optional[str]:
    """Format ``value`` in canonical form, or ``None`` if it is ``None``."""
    return None if value is None else str(value)