"""Formatting of the character, string and pointer conversions."""

from __future__ import annotations

from .digits import pad, to_hex
from .spec import Spec

_NULL_STR = "(null)"
_NIL_PTR = "(nil)"


def _align(body: str, padding: str, spec: Spec) -> str:
    return body + padding if spec.minus else padding + body


def format_char(c: str, spec: Spec) -> str:
    """Format the single character ``c`` for ``%c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    fill = spec.width - 1 if spec.width else 0
    return _align(c, pad(fill), spec)


def _visible(text: str, spec: Spec) -> str:
    return text if spec.precision is None else text[:spec.precision]


def format_str(text: str | None, spec: Spec) -> str:
    """Format ``text`` for ``%s``.

    A None string prints as ``(null)``, unless a precision too small to
    hold it is given, in which case only the padding is printed.
    """
    if text is None:
        shown = _visible(_NULL_STR, spec)
        body = _NULL_STR if len(shown) == len(_NULL_STR) else ""
        return _align(body, pad(spec.width - len(body)), spec)
    body = _visible(text, spec)
    return _align(body, pad(spec.width - len(body)), spec)


def format_pointer(address: int | None, spec: Spec) -> str:
    """Format ``address`` for ``%p``; None or 0 prints as ``(nil)``.

    A precision larger than the address widens the field but adds no
    zeros.
    """
    if not address:
        return _align(_NIL_PTR, pad(spec.width - len(_NIL_PTR)), spec)
    if address < 0:
        raise ValueError(f"address must not be negative, got {address}")
    body = "0x" + to_hex(address)
    field = len(body)
    if spec.precision is not None and spec.precision > field:
        field = spec.precision
    return _align(body, pad(spec.width - field), spec)