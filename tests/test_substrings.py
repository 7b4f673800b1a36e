import pytest

from pushswap.libft.substrings import (
    bounded_concat,
    bounded_copy,
    find_bounded,
    for_each_indexed,
    map_indexed,
    substr,
    trim,
)


@pytest.mark.parametrize(
    "big, little, length, expected",
    [
        ("hello world", "world", 11, 6),
        ("hello world", "world", 5, None),
        ("abcdef", "def", 6, 3),
        ("abcdef", "def", 3, None),
        ("abcdef", "", 6, 0),
        ("", "abc", 3, None),
        ("", "", 0, 0),
        ("abcabcabc", "abc", 2, None),
        ("abcabcabc", "abcabcabc", 9, 0),
        ("abbbcdefg", "bbc", 20, 2),
    ],
)
def test_find_bounded(big, little, length, expected):
    assert find_bounded(big, little, length) == expected


def test_find_bounded_match_lies_inside_bound():
    index = find_bounded("abcabcabc", "cab", 8)
    assert index is not None
    assert "abcabcabc"[index:index + 3] == "cab"
    assert index + 3 <= 8


def test_find_bounded_negative_length():
    with pytest.raises(ValueError):
        find_bounded("abc", "a", -1)


def test_substr_from_source_example():
    assert substr("hoge", 2, 2) == "ge"


def test_substr_start_past_end_is_empty():
    assert substr("hoge", 4, 3) == ""
    assert substr("hoge", 10, 3) == ""


def test_substr_length_clamped():
    text = "hogehoge"
    assert substr(text, 3, 100) == text[3:]


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("hoge", -1, 2)


def test_trim_both_ends():
    assert trim("--hogehgoe--", "-") == "hogehgoe"


def test_trim_empty_inputs():
    assert trim("", "") == ""
    assert trim("hoge", "") == "hoge"


def test_trim_all_in_set():
    assert trim("----", "-") == ""


def test_trim_none_rejected():
    with pytest.raises(TypeError):
        trim("--hogehgoe--", None)


def test_map_indexed_receives_indices():
    seen = []

    def record(index, ch):
        seen.append(index)
        return ch.upper()

    assert map_indexed("hoge", record) == "HOGE"
    assert seen == [0, 1, 2, 3]


def test_map_indexed_empty():
    assert map_indexed("", lambda i, c: c * 2) == ""


def test_for_each_indexed_keeps_on_none():
    calls = []
    result = for_each_indexed("hoge", lambda i, c: calls.append((i, c)))
    assert result == "hoge"
    assert calls == [(0, "h"), (1, "o"), (2, "g"), (3, "e")]


def test_for_each_indexed_replaces():
    result = for_each_indexed("hogehoge", lambda i, c: c.upper() if i % 2 else None)
    assert result.lower() == "hogehoge"
    assert result[1] == "O"
    assert result[0] == "h"


def test_bounded_copy_zero_size():
    assert bounded_copy("hogehoge", 0) == ("", 8)


def test_bounded_copy_truncates():
    copied, total = bounded_copy("hogehoge", 5)
    assert copied == "hoge"
    assert total == len("hogehoge")


def test_bounded_copy_fits():
    assert bounded_copy("hoge", 100) == ("hoge", 4)


def test_bounded_concat_appends_within_room():
    result, total = bounded_concat("hoge", "foobar", 7)
    assert result == "hogefo"
    assert total == len("hoge") + len("foobar")
    assert len(result) == 7 - 1


def test_bounded_concat_full_buffer():
    result, total = bounded_concat("ABCDE", "1234", 0)
    assert result == "ABCDE"
    assert total == 0 + len("1234")


def test_bounded_concat_large_buffer():
    result, total = bounded_concat("hoge", "foobar", 100)
    assert result == "hoge" + "foobar"
    assert total == len(result)


def test_bounded_concat_none_dst():
    assert bounded_concat(None, "WORLD", 0) == ("", 5)
    with pytest.raises(TypeError):
        bounded_concat(None, "WORLD", 1)