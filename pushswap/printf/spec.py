"""Conversion specifications for the formatter: flags, width, precision."""

from __future__ import annotations

from dataclasses import dataclass

_FLAGS = "-0# +"


@dataclass
class Spec:
    """One parsed ``%`` conversion.

    ``precision`` is None when no ``.`` was given. ``specifier`` is the
    conversion character, a space before parsing, or an empty string when
    the format ended before one was found.
    """

    minus: bool = False
    zero: bool = False
    plus: bool = False
    space: bool = False
    hash: bool = False
    width: int = 0
    precision: int | None = None
    specifier: str = " "


def _read_digits(fmt: str, index: int) -> tuple[int, int]:
    """Read a run of decimal digits at ``index``; return (value, next index)."""
    end = index
    while end < len(fmt) and fmt[end].isascii() and fmt[end].isdigit():
        end += 1
    value = int(fmt[index:end]) if end > index else 0
    return value, end


def parse_spec(fmt: str, index: int) -> tuple[Spec, int]:
    """Parse the conversion whose ``%`` sits at ``fmt[index]``.

    Returns the specification and the index just past the conversion
    character. Flags come first, then an optional width, then an optional
    ``.`` and precision, then the conversion character.
    """
    if not 0 <= index < len(fmt) or fmt[index] != "%":
        raise ValueError(f"no conversion starts at index {index} of {fmt!r}")
    spec = Spec()
    idx = index + 1
    while idx < len(fmt) and fmt[idx] in _FLAGS:
        flag = fmt[idx]
        if flag == "-":
            spec.minus = True
        elif flag == "0":
            spec.zero = True
        elif flag == "#":
            spec.hash = True
        elif flag == " ":
            spec.space = True
        else:
            spec.plus = True
        idx += 1
    spec.width, idx = _read_digits(fmt, idx)
    if idx < len(fmt) and fmt[idx] == ".":
        spec.precision, idx = _read_digits(fmt, idx + 1)
    if idx >= len(fmt):
        spec.specifier = ""
        return spec, len(fmt)
    spec.specifier = fmt[idx]
    return spec, idx + 1