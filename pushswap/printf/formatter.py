"""A small printf: ``%c %s %p %d %i %u %x %X %%`` with flags, width, precision."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from .numbers import format_hex, format_int, format_unsigned
from .spec import Spec, parse_spec
from .text import format_char, format_pointer, format_str

_UINT32 = 0xFFFFFFFF


def _int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value >= 0x80000000 else value


def _next_arg(args: Iterator[Any], spec: Spec) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for conversion %{spec.specifier}"
        ) from None


def _integer(value: Any, spec: Spec) -> int:
    if not isinstance(value, int):
        raise TypeError(
            f"%{spec.specifier} expects an integer, got {type(value).__name__}"
        )
    return value


def _convert(spec: Spec, args: Iterator[Any]) -> str:
    kind = spec.specifier
    if kind == "%":
        return "%"
    if kind == "c":
        value = _next_arg(args, spec)
        char = chr(value & 0xFF) if isinstance(value, int) else value
        return format_char(char, spec)
    if kind == "s":
        value = _next_arg(args, spec)
        return format_str(None if value is None else str(value), spec)
    if kind == "p":
        value = _next_arg(args, spec)
        return format_pointer(None if value is None else _integer(value, spec), spec)
    if kind in ("d", "i"):
        return format_int(_int32(_integer(_next_arg(args, spec), spec)), spec)
    if kind == "u":
        return format_unsigned(_integer(_next_arg(args, spec), spec) & _UINT32, spec)
    if kind in ("x", "X"):
        value = _integer(_next_arg(args, spec), spec) & _UINT32
        return format_hex(value, spec, kind == "X")
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Unknown conversion characters produce no output and consume no
    argument. Integers wrap to 32 bits as the C conversions do.
    """
    parts: list[str] = []
    remaining = iter(args)
    index = 0
    while index < len(fmt):
        percent = fmt.find("%", index)
        if percent < 0:
            parts.append(fmt[index:])
            break
        parts.append(fmt[index:percent])
        spec, index = parse_spec(fmt, percent)
        parts.append(_convert(spec, remaining))
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)