"""Character classification and case conversion in the ASCII range.

Every function accepts either a one-character string or an integer
character code.
"""

from __future__ import annotations

_UPPER_TO_LOWER = ord("a") - ord("A")


def _code(c: str | int) -> int:
    """Return the integer code of ``c``, a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; return anything else unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _UPPER_TO_LOWER
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; return anything else unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _UPPER_TO_LOWER
    return chr(code) if isinstance(c, str) else code