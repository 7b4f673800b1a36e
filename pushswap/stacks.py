"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from itertools import pairwise
from typing import Iterable, Sequence


class Operation(Enum):
    """An instruction, named as it is written in a solution."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


def _swap(stack: deque[int]) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stack ``a``, filled with the given values, and an empty stack ``b``.

    The top of each stack is its left end. Every operation that is carried
    out is appended to ``log``; a push from an empty stack does nothing and
    is not logged.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.log: list[Operation] = []

    def apply(self, op: Operation | str) -> None:
        """Carry out ``op``, given as an ``Operation`` or its name."""
        op = Operation(op)
        a, b = self.a, self.b
        if op is Operation.PA:
            if not b:
                return
            a.appendleft(b.popleft())
        elif op is Operation.PB:
            if not a:
                return
            b.appendleft(a.popleft())
        elif op is Operation.SA:
            _swap(a)
        elif op is Operation.SB:
            _swap(b)
        elif op is Operation.SS:
            _swap(a)
            _swap(b)
        elif op is Operation.RA:
            _rotate(a)
        elif op is Operation.RB:
            _rotate(b)
        elif op is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif op is Operation.RRA:
            _reverse_rotate(a)
        elif op is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)
        self.log.append(op)

    def is_sorted(self) -> bool:
        """True when stack ``a`` reads in non-decreasing order from the top."""
        return is_ascending(self.a)


def is_ascending(values: Iterable[int]) -> bool:
    """True when no value is greater than the one after it."""
    return all(x <= y for x, y in pairwise(values))


def max_value(values: Iterable[int]) -> int:
    """The largest value, never less than 0."""
    return max([0, *values])


def min_value(values: Iterable[int]) -> int:
    """The smallest value, never more than 0."""
    return min([0, *values])


def index_of(values: Sequence[int] | Iterable[int], value: int) -> int:
    """Position of the first ``value`` from the top, or 0 when absent."""
    return next((i for i, v in enumerate(values) if v == value), 0)