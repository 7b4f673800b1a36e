"""Reading, validating and ranking the integers given on the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

from .libft.strings import atoi, split

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """The command-line integers are missing, malformed or repeated."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_arguments(argv: Sequence[str]) -> list[str]:
    """Words of ``argv``, the arguments after the program name.

    A single argument is split on spaces; several are taken as given.
    """
    if len(argv) == 1:
        return split(argv[0], " ")
    return list(argv)


def parse_int(text: str) -> int:
    """Read a leading decimal integer that must fit in 32 signed bits."""
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    total = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        total = total * 10 + (ord(ch) - ord("0"))
    value = sign * total
    if not INT_MIN <= value <= INT_MAX:
        raise ArgumentError()
    return value


def _is_digit_str(text: str) -> bool:
    body = text[1:] if text[:1] in ("+", "-") else text
    return all("0" <= ch <= "9" for ch in body)


def validate_args(args: Sequence[str]) -> list[str]:
    """Check the words and return them as a list.

    Each word must be an optional sign followed by digits, within 32-bit
    range, and no word may appear twice. Raises ``ArgumentError`` otherwise
    or when there are no words at all.
    """
    words = list(args)
    if not words:
        raise ArgumentError()
    for word in words:
        if not _is_digit_str(word):
            raise ArgumentError()
        parse_int(word)
    if len(set(words)) != len(words):
        raise ArgumentError()
    return words


def compress(values: Iterable[int]) -> list[int]:
    """Replace each value by its rank among all values, starting at 0."""
    values = list(values)
    rank: dict[int, int] = {}
    for position, value in enumerate(sorted(values)):
        rank.setdefault(value, position)
    return [rank[value] for value in values]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Split, validate and rank the command-line arguments.

    Raises ``ArgumentError`` when they do not form a valid list of integers.
    """
    words = validate_args(split_arguments(args))
    return compress(atoi(word) for word in words)