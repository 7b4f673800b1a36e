"""Substring search, slicing, trimming, mapping and bounded copies."""

from __future__ import annotations

from typing import Callable


def find_bounded(big: str, little: str, length: int) -> int | None:
    """Find ``little`` within the first ``length`` characters of ``big``.

    Returns the index of the first match, 0 when ``little`` is empty, or
    None when there is no match that fits wholly inside the bound.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return index if index >= 0 else None


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A ``start`` at or past the end of ``text`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def trim(text: str, charset: str) -> str:
    """Strip every character in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("text and charset must be strings")
    if not charset:
        return text
    return text.strip(charset)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def for_each_indexed(text: str, func: Callable[[int, str], str | None]) -> str:
    """Call ``func(index, char)`` for every character of ``text``.

    ``func`` may return a replacement character; returning None keeps the
    original one. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, as ``strlcpy``.

    Returns the copied text, at most ``size - 1`` characters long, and
    the full length of ``src``, which tells whether it was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str | None, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size``, as ``strlcat``.

    Returns the resulting text and the length the full concatenation
    would have had. When ``dst`` already fills the buffer nothing is
    appended and the reported length is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if dst is None:
        if size == 0:
            return "", len(src)
        raise TypeError("dst must be a string when size is not zero")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)