"""Command that checks whether a list of operations sorts the given integers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .args import ArgumentError, parse_arguments
from .libft.lines import LineReader
from .stacks import Operation, Stacks


class CommandError(ValueError):
    """A line of input is not one of the eleven operations."""


def parse_command(line: str) -> Operation:
    """The operation named exactly by ``line``."""
    try:
        return Operation(line)
    except ValueError:
        raise CommandError(f"unknown operation {line!r}") from None


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply each operation in ``lines``; True when ``a`` ends sorted and ``b`` empty."""
    stacks = Stacks(values)
    for line in lines:
        stacks.apply(parse_command(line))
    return stacks.is_sorted() and not stacks.b


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from stdin and print ``OK`` or ``KO``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    try:
        sorted_ok = run_checker(values, LineReader(sys.stdin))
    except CommandError:
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())