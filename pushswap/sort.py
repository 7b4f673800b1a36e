"""The sorting strategy: short fixed sequences for small inputs, chunks for large."""

from __future__ import annotations

from typing import Iterable

from .args import compress
from .stacks import Operation, Stacks, index_of, max_value

_SMALL_RANGE = 13
_LARGE_RANGE = 32
_SMALL_LIMIT = 100


def sort_three(stacks: Stacks) -> None:
    """Sort the three values of stack ``a`` with at most two operations."""
    a, b, c = stacks.a[0], stacks.a[1], stacks.a[2]
    if a > b and b < c and a < c:
        stacks.apply(Operation.SA)
    elif a > b and b > c:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RRA)
    elif a > b and b < c and a > c:
        stacks.apply(Operation.RA)
    elif a < b and b > c and a < c:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RA)
    elif a < b and b > c and a > c:
        stacks.apply(Operation.RRA)


def sort_under_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of one to three values.

    Two values are always swapped, so they must be out of order.
    """
    size = len(stacks.a)
    if size == 2:
        stacks.apply(Operation.SA)
    elif size == 3:
        sort_three(stacks)


def _bring_to_top(stacks: Stacks, index: int) -> None:
    """Rotate the value at ``index`` of a four-value stack ``a`` to the top."""
    if index <= 2:
        for _ in range(index):
            stacks.apply(Operation.RA)
    else:
        stacks.apply(Operation.RRA)


def _sort_four(stacks: Stacks) -> None:
    _bring_to_top(stacks, index_of(stacks.a, 0))
    stacks.apply(Operation.PB)
    sort_under_three(stacks)
    stacks.apply(Operation.PA)


def _sort_five(stacks: Stacks) -> None:
    min_idx = index_of(stacks.a, 0)
    if min_idx <= 2:
        for _ in range(min_idx):
            stacks.apply(Operation.RA)
    else:
        for _ in range(5 - min_idx):
            stacks.apply(Operation.RRA)
    stacks.apply(Operation.PB)
    _bring_to_top(stacks, index_of(stacks.a, 4))
    stacks.apply(Operation.PB)
    sort_under_three(stacks)
    stacks.apply(Operation.PA)
    stacks.apply(Operation.RA)
    stacks.apply(Operation.PA)


def sort_under_five(stacks: Stacks) -> None:
    """Sort four or five ranked values (0 to size - 1) in stack ``a``."""
    if len(stacks.a) == 4:
        _sort_four(stacks)
    else:
        _sort_five(stacks)


def _push_all_to_b(stacks: Stacks) -> None:
    chunk = _SMALL_RANGE if len(stacks.a) <= _SMALL_LIMIT else _LARGE_RANGE
    pushed = 0
    while stacks.a:
        top = stacks.a[0]
        if top <= pushed:
            stacks.apply(Operation.PB)
            pushed += 1
        elif top <= pushed + chunk:
            stacks.apply(Operation.PB)
            stacks.apply(Operation.RB)
            pushed += 1
        else:
            stacks.apply(Operation.RA)


def _push_all_to_a(stacks: Stacks) -> None:
    b = stacks.b
    while b:
        largest = max_value(b)
        if b[0] == largest:
            stacks.apply(Operation.PA)
        elif len(b) > 1 and b[1] == largest:
            stacks.apply(Operation.SB)
            stacks.apply(Operation.PA)
        elif index_of(b, largest) <= len(b) // 2:
            stacks.apply(Operation.RB)
        else:
            stacks.apply(Operation.RRB)


def sort_over_six(stacks: Stacks) -> None:
    """Sort ranked values by pushing them to ``b`` in chunks and back by maximum."""
    _push_all_to_b(stacks)
    _push_all_to_a(stacks)


def push_swap(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` onto stack ``a``."""
    stacks = Stacks(compress(values))
    if stacks.is_sorted():
        return stacks.log
    size = len(stacks.a)
    if size <= 3:
        sort_under_three(stacks)
    elif size <= 5:
        sort_under_five(stacks)
    else:
        sort_over_six(stacks)
    return stacks.log