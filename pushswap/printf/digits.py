"""Digit strings and padding used by the formatter."""

from __future__ import annotations

from .spec import Spec


def to_decimal(n: int) -> str:
    """Decimal digits of the non-negative integer ``n``."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return str(n)


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of the non-negative integer ``n``, without prefix."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return format(n, "X" if upper else "x")


def pad(length: int) -> str:
    """A run of ``length`` spaces; nothing when ``length`` is not positive."""
    return " " * max(length, 0)


def zero_or_space(spec: Spec, length: int) -> str:
    """Padding of ``length`` characters: zeros for the ``0`` flag, else spaces.

    The ``0`` flag is ignored when a precision is given.
    """
    if spec.zero and spec.precision is None:
        return "0" * max(length, 0)
    return pad(length)