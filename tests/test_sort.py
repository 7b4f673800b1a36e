import itertools
import random
from collections import deque

import pytest

from pushswap.sort import (
    push_swap,
    sort_over_six,
    sort_three,
    sort_under_five,
    sort_under_three,
)
from pushswap.stacks import Operation, Stacks


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        stacks.apply(op)
    return stacks


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_every_small_permutation_is_sorted(size):
    for perm in itertools.permutations(range(size)):
        result = _replay(perm, push_swap(perm))
        assert list(result.a) == sorted(perm)
        assert not result.b


def test_three_values_take_at_most_two_operations():
    for perm in itertools.permutations(range(3)):
        assert len(push_swap(perm)) <= 2


def test_sorted_input_needs_nothing():
    assert push_swap([1, 2, 3]) == []
    assert push_swap([]) == []


def test_two_values_swapped():
    assert push_swap([2, 1]) == [Operation.SA]


def test_descending_three():
    assert push_swap([3, 2, 1]) == [Operation.SA, Operation.RRA]


def test_sort_three_directly():
    stacks = Stacks([1, 0, 2])
    sort_three(stacks)
    assert stacks.a == deque([0, 1, 2])
    assert stacks.log == [Operation.SA]


def test_sort_under_three_single_value():
    stacks = Stacks([0])
    sort_under_three(stacks)
    assert stacks.log == []
    assert stacks.a == deque([0])


def test_sort_under_five_directly():
    stacks = Stacks([4, 2, 0, 3, 1])
    sort_under_five(stacks)
    assert list(stacks.a) == [0, 1, 2, 3, 4]
    assert not stacks.b


def test_sort_over_six_directly():
    stacks = Stacks([5, 3, 0, 4, 1, 2])
    sort_over_six(stacks)
    assert list(stacks.a) == [0, 1, 2, 3, 4, 5]
    assert not stacks.b


def test_arbitrary_integers_are_ranked():
    values = [50, -3, 7, 1000]
    result = _replay(values, push_swap(values))
    assert list(result.a) == sorted(values)


@pytest.mark.parametrize("size", [6, 7, 20, 100, 101, 500])
def test_large_random_inputs(size):
    rng = random.Random(size)
    values = rng.sample(range(-10000, 10000), size)
    result = _replay(values, push_swap(values))
    assert list(result.a) == sorted(values)
    assert not result.b