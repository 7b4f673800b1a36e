"""String conversion, splitting, searching and comparison helpers."""

from __future__ import annotations

from itertools import zip_longest

_SPACES = frozenset("\n\t\v\r\f ")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, two's complement style."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer as C's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. The result wraps to a
    signed 32-bit integer.
    """
    rest = text.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    total = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        total = total * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(total * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def find_char(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the terminator at ``len(text)``.
    """
    if c == "\0":
        return len(text)
    index = text.find(c)
    return index if index >= 0 else None


def rfind_char(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the terminator at ``len(text)``.
    """
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def compare_prefix(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, as C's ``strncmp``.

    Returns the difference of the first differing character codes, or 0
    when the first ``n`` characters match or both strings end together.
    """
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0