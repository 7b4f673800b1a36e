import pytest

from pushswap.args import (
    ArgumentError,
    compress,
    parse_arguments,
    parse_int,
    split_arguments,
    validate_args,
)


def test_split_single_argument():
    assert split_arguments(["1 2  3"]) == ["1", "2", "3"]


def test_split_several_arguments_unchanged():
    assert split_arguments(["1", "2 3"]) == ["1", "2 3"]


def test_split_blank_argument_is_empty():
    assert split_arguments(["   "]) == []


@pytest.mark.parametrize("text", ["2147483647", "-2147483648", "0", "+42"])
def test_parse_int_in_range(text):
    assert parse_int(text) == int(text)


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
def test_parse_int_out_of_range(text):
    with pytest.raises(ArgumentError):
        parse_int(text)


def test_validate_returns_words():
    words = ["1", "-2", "+3"]
    assert validate_args(words) == words


@pytest.mark.parametrize(
    "args",
    [[], ["1", "a"], ["1", "1"], ["1", "2147483648"], ["1-"], ["1", " 2"]],
)
def test_validate_rejects(args):
    with pytest.raises(ArgumentError):
        validate_args(args)


def test_error_message():
    with pytest.raises(ArgumentError, match="^Error$"):
        validate_args([])


def test_compress_gives_ranks():
    values = [10, -5, 3, 2147483647, -2147483648]
    ranks = compress(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, x in enumerate(values):
        for j, y in enumerate(values):
            assert (x < y) == (ranks[i] < ranks[j])


def test_compress_keeps_permutation_of_ranks():
    values = [2, 0, 1, 3]
    assert compress(values) == values


def test_compress_equal_values_share_rank():
    ranks = compress([7, 7, 1])
    assert ranks[0] == ranks[1]
    assert ranks[2] < ranks[0]


def test_parse_arguments_single_string():
    assert parse_arguments(["2 0 1"]) == [2, 0, 1]


def test_parse_arguments_many():
    ranks = parse_arguments(["50", "-7", "13"])
    assert sorted(ranks) == [0, 1, 2]
    assert ranks.index(0) == 1


@pytest.mark.parametrize("args", [["5", "x"], [""], ["1 1"]])
def test_parse_arguments_errors(args):
    with pytest.raises(ArgumentError):
        parse_arguments(args)