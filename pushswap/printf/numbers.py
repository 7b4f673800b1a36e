"""Formatting of the signed, unsigned and hexadecimal conversions."""

from __future__ import annotations

from .digits import pad, to_decimal, to_hex, zero_or_space
from .spec import Spec


def _precision_zeros(digits: str, spec: Spec) -> str:
    """Leading zeros that bring ``digits`` up to the requested precision."""
    if spec.precision is None:
        return ""
    return "0" * max(spec.precision - len(digits), 0)


def _sign(n: int, spec: Spec) -> str:
    if n < 0:
        return "-"
    if spec.space:
        return " "
    if spec.plus:
        return "+"
    return ""


def format_int(n: int, spec: Spec) -> str:
    """Format the signed integer ``n`` for ``%d`` and ``%i``.

    With the ``0`` flag, no ``-`` flag and no precision, the field is
    filled with zeros after a minus sign; the ``+`` and space flags then
    widen the field but print no sign.
    """
    digits = to_decimal(abs(n))
    length = len(digits)
    if spec.precision is not None and spec.precision > length:
        length = spec.precision
    if spec.plus or spec.space or n < 0:
        length += 1
    padding = max(spec.width - length, 0)
    if n == 0 and spec.precision == 0:
        return pad(spec.width)
    if not spec.minus and spec.zero and spec.precision is None:
        return ("-" if n < 0 else "") + "0" * padding + digits
    body = _sign(n, spec) + _precision_zeros(digits, spec) + digits
    return body + pad(padding) if spec.minus else pad(padding) + body


def format_unsigned(n: int, spec: Spec) -> str:
    """Format the non-negative integer ``n`` for ``%u``."""
    digits = to_decimal(n)
    length = len(digits)
    if spec.precision is not None and spec.precision > length:
        length = spec.precision
    padding = max(spec.width - length, 0)
    if n == 0 and spec.precision == 0:
        return pad(spec.width)
    body = _precision_zeros(digits, spec) + digits
    if spec.minus:
        return body + pad(padding)
    return zero_or_space(spec, padding) + body


def format_hex(n: int, spec: Spec, upper: bool = False) -> str:
    """Format the non-negative integer ``n`` for ``%x`` or, if ``upper``, ``%X``.

    The ``#`` prefix is written after any precision zeros and after any
    zero padding, directly in front of the digits.
    """
    digits = to_hex(n, upper)
    prefix = ("0X" if upper else "0x") if spec.hash and n != 0 else ""
    length = len(digits)
    if spec.precision is not None and spec.precision > length:
        length = spec.precision
    length += len(prefix)
    padding = max(spec.width - length, 0)
    if n == 0 and spec.precision == 0:
        return pad(spec.width)
    body = _precision_zeros(digits, spec) + prefix + digits
    if spec.minus:
        return body + pad(padding)
    return zero_or_space(spec, padding) + body