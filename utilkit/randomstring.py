"""Random strings drawn from code-point ranges or from a set of characters."""

from __future__ import annotations

import random
import secrets
from collections.abc import Callable, Sequence
from typing import Optional, Union

__all__ = [
    "random_seed",
    "random_string",
    "random_non_alpha_numeric",
    "random_ascii",
    "random_numeric",
    "random_alphabetic",
    "random_alpha_numeric",
    "random_alpha_numeric_custom",
    "crypto_random",
    "crypto_random_non_alpha_numeric",
    "crypto_random_ascii",
    "crypto_random_numeric",
    "crypto_random_alphabetic",
    "crypto_random_alpha_numeric",
    "crypto_random_alpha_numeric_custom",
]

_MAX_INT32 = 2**31 - 1
_MAX_CODE_POINT = 0x10FFFF

# high surrogates: 0xD800-0xDBFF, low surrogates: 0xDC00-0xDFFF
_HIGH_START = 0xD800
_HIGH_PARTIAL_END = 0xDB7F
_PRIVATE_HIGH_START = 0xDB80
_PRIVATE_HIGH_END = 0xDBFF
_LOW_START = 0xDC00
_LOW_END = 0xDFFF

_REPLACEMENT = "\ufffd"

_RANDOM = random.Random()

CharSource = Optional[Sequence[Union[str, int]]]


def _is_text_code_point(cp: int) -> bool:
    return 0 <= cp <= _MAX_CODE_POINT and not (_HIGH_START <= cp <= _LOW_END)


def _to_char(cp: int) -> str:
    """Code points that cannot appear in text become U+FFFD."""
    return chr(cp) if _is_text_code_point(cp) else _REPLACEMENT


def _accepted(cp: int, letters: bool, numbers: bool) -> bool:
    if not letters and not numbers:
        return True
    if not 0 <= cp <= _MAX_CODE_POINT:
        return False
    ch = chr(cp)
    return (letters and ch.isalpha()) or (numbers and ch.isdecimal())


def _generate(
    count: int,
    start: int,
    end: int,
    letters: bool,
    numbers: bool,
    chars: CharSource,
    below: Callable[[int], int],
) -> str:
    if count == 0:
        return ""
    if count < 0:
        raise ValueError(
            "randomstringutils illegal argument: "
            f"Requested random string length {count} is less than 0"
        )

    pool: Optional[list[int]] = None
    if chars is not None:
        pool = [ord(c) if isinstance(c, str) else int(c) for c in chars]
        if not pool:
            raise ValueError(
                "randomstringutils illegal argument: The chars array must not be empty"
            )

    if start == 0 and end == 0:
        if pool is not None:
            end = len(pool)
        elif not letters and not numbers:
            end = _MAX_INT32
        else:
            end = ord("z") + 1
            start = ord(" ")
    else:
        if end <= start:
            raise ValueError(
                "randomstringutils illegal argument: "
                f"Parameter end ({end}) must be greater than start ({start})"
            )
        if pool is not None and end > len(pool):
            raise ValueError(
                "randomstringutils illegal argument: "
                f"Parameter end ({end}) cannot be greater than len(chars) ({len(pool)})"
            )

    gap = end - start
    buffer = [0] * count
    pos = count
    # The buffer is filled from its end towards its start.
    while pos:
        pos -= 1
        offset = below(gap) + start
        cp = offset if pool is None else pool[offset]

        if not _accepted(cp, letters, numbers):
            pos += 1
            continue

        if _LOW_START <= cp <= _LOW_END:
            if pos == 0:
                pos += 1
            else:
                buffer[pos] = cp
                pos -= 1
                buffer[pos] = _HIGH_START + below(128)
        elif _HIGH_START <= cp <= _HIGH_PARTIAL_END:
            if pos == 0:
                pos += 1
            else:
                buffer[pos] = _LOW_START + below(128)
                pos -= 1
                buffer[pos] = cp
        elif _PRIVATE_HIGH_START <= cp <= _PRIVATE_HIGH_END:
            pos += 1
        else:
            buffer[pos] = cp

    return "".join(_to_char(cp) for cp in buffer)


def random_seed(
    count: int,
    start: int,
    end: int,
    letters: bool,
    numbers: bool,
    chars: CharSource,
    rng: random.Random,
) -> str:
    """Build a random string of ``count`` characters using ``rng``.

    With ``start`` and ``end`` both ``0`` the range is chosen from the
    other arguments: all of ``chars`` if given, printable ASCII up to
    ``z`` when letters or numbers are asked for, otherwise every 31-bit
    code point. ``letters`` and ``numbers`` filter the drawn characters.
    Raises ``ValueError`` on a negative count, an empty ``chars``, or a
    bad ``start``/``end`` pair.
    """
    return _generate(count, start, end, letters, numbers, chars, rng.randrange)


def random_string(
    count: int, start: int, end: int, letters: bool, numbers: bool, *args: Union[str, int]
) -> str:
    """Like :func:`random_seed`, with the module's generator and ``args`` as chars."""
    chars = args if args else None
    return random_seed(count, start, end, letters, numbers, chars, _RANDOM)


def random_non_alpha_numeric(count: int) -> str:
    """Random string drawn from every code point, with no filtering."""
    return random_alpha_numeric_custom(count, False, False)


def random_ascii(count: int) -> str:
    """Random string of printable ASCII characters (32 to 126)."""
    return random_string(count, 32, 127, False, False)


def random_numeric(count: int) -> str:
    """Random string of digits."""
    return random_string(count, 0, 0, False, True)


def random_alphabetic(count: int) -> str:
    """Random string of ASCII letters."""
    return random_string(count, 0, 0, True, False)


def random_alpha_numeric(count: int) -> str:
    """Random string of ASCII letters and digits."""
    return random_string(count, 0, 0, True, True)


def random_alpha_numeric_custom(count: int, letters: bool, numbers: bool) -> str:
    """Random string filtered to letters and/or digits as requested."""
    return random_string(count, 0, 0, letters, numbers)


def crypto_random(
    count: int, start: int, end: int, letters: bool, numbers: bool, *args: Union[str, int]
) -> str:
    """Like :func:`random_string`, drawing from the system's secure source."""
    chars = args if args else None
    return _generate(count, start, end, letters, numbers, chars, secrets.randbelow)


def crypto_random_non_alpha_numeric(count: int) -> str:
    """Secure random string drawn from every code point, with no filtering."""
    return crypto_random_alpha_numeric_custom(count, False, False)


def crypto_random_ascii(count: int) -> str:
    """Secure random string of printable ASCII characters (32 to 126)."""
    return crypto_random(count, 32, 127, False, False)


def crypto_random_numeric(count: int) -> str:
    """Secure random string of digits."""
    return crypto_random(count, 0, 0, False, True)


def crypto_random_alphabetic(count: int) -> str:
    """Secure random string of ASCII letters."""
    return crypto_random(count, 0, 0, True, False)


def crypto_random_alpha_numeric(count: int) -> str:
    """Secure random string of ASCII letters and digits."""
    return crypto_random(count, 0, 0, True, True)


def crypto_random_alpha_numeric_custom(count: int, letters: bool, numbers: bool) -> str:
    """Secure random string filtered to letters and/or digits as requested."""
    return crypto_random(count, 0, 0, letters, numbers)