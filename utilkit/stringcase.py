"""Conversions between snake_case, PascalCase and lowerCamelCase."""

from __future__ import annotations

__all__ = ["to_snake_case", "to_pascal_case", "to_low_camel_case"]

_CAMEL_SEPARATORS = frozenset(b"_ -.")


def _is_lower(ch: str) -> bool:
    return ch.islower()


def _is_digit(ch: str) -> bool:
    return ch.isdecimal()


def _is_letter(ch: str) -> bool:
    return ch.isalpha()


def to_snake_case(text: str) -> str:
    """Convert ``text`` to snake_case.

    Spaces are dropped, ``-`` and ``_`` become ``_`` and an underscore is
    put in front of each upper-case letter that starts a new word.
    """
    if not text:
        return text
    if len(text) == 1:
        return text.lower()

    chars = text.replace(" ", "")
    out: list[str] = []
    skip_next = False

    for i, cur in enumerate(chars):
        if cur in "-_":
            out.append("_")
            skip_next = True
            continue
        if _is_lower(cur) or _is_digit(cur):
            out.append(cur)
            continue
        if i == 0:
            out.append(cur.lower())
            continue

        last = chars[i - 1]
        starts_word = not _is_letter(last) or _is_lower(last)
        if not starts_word and i < len(chars) - 1:
            # The previous letter is upper case: a new word begins only
            # where the following letter is lower case.
            starts_word = _is_lower(chars[i + 1])

        if starts_word:
            if skip_next:
                skip_next = False
            else:
                out.append("_")
        out.append(cur.lower())

    return "".join(out)


def _to_camel_case(text: str, capitalise_first: bool) -> str:
    text = text.strip()
    if not text:
        return text

    out = bytearray()
    cap_next = capitalise_first
    for i, byte in enumerate(text.encode("utf-8")):
        is_upper = 0x41 <= byte <= 0x5A
        is_lower = 0x61 <= byte <= 0x7A
        if cap_next:
            if is_lower:
                byte -= 0x20
        elif i == 0 and is_upper:
            byte += 0x20

        if is_upper or is_lower:
            out.append(byte)
            cap_next = False
        elif 0x30 <= byte <= 0x39:
            out.append(byte)
            cap_next = True
        else:
            cap_next = byte in _CAMEL_SEPARATORS
    return out.decode("ascii")


def to_pascal_case(text: str) -> str:
    """Convert ``text`` to PascalCase (upper camel case)."""
    return _to_camel_case(text, True)


def to_low_camel_case(text: str) -> str:
    """Convert ``text`` to lowerCamelCase."""
    return _to_camel_case(text, False)