import os

import pytest

from algokit.text import (
    is_anagram,
    is_isomorphic,
    largest_odd_number,
    longest_common_prefix,
    reverse_words,
    rotate_string,
)


@pytest.mark.parametrize(
    "strs",
    [
        ["flower", "flow", "flight"],
        ["dog", "racecar", "car"],
        ["interspecies", "interstellar", "interstate"],
        ["same", "same"],
        ["", "abc"],
    ],
)
def test_common_prefix_matches_stdlib(strs):
    result = longest_common_prefix(strs)
    assert result == os.path.commonprefix(strs)
    assert all(s.startswith(result) for s in strs)


def test_common_prefix_single_string():
    assert longest_common_prefix(["alone"]) == "alone"


def test_common_prefix_of_extension():
    assert longest_common_prefix(["base", "base" + "ment"]) == "base"


def test_common_prefix_requires_input():
    with pytest.raises(ValueError):
        longest_common_prefix([])


def test_reverse_words_trims_spaces():
    assert reverse_words("  hello world  ") == "world hello"
    assert reverse_words("a good   example") == "example good a"


def test_reverse_words_only_spaces():
    assert reverse_words("    ") == ""


def test_largest_odd_number():
    assert largest_odd_number("52") == "5"
    assert largest_odd_number("4206") == ""
    assert largest_odd_number("35427") == "35427"


@pytest.mark.parametrize("num", ["123456", "7", "1000", "2468"])
def test_largest_odd_number_is_prefix_ending_odd(num):
    result = largest_odd_number(num)
    assert num.startswith(result)
    assert result == "" or int(result[-1]) % 2 == 1
    assert all(int(d) % 2 == 0 for d in num[len(result):])


@pytest.mark.parametrize("s,t", [("egg", "add"), ("paper", "title"), ("", "")])
def test_isomorphic_true(s, t):
    assert is_isomorphic(s, t)
    assert is_isomorphic(t, s)


@pytest.mark.parametrize("s,t", [("foo", "bar"), ("badc", "baba"), ("ab", "a")])
def test_isomorphic_false(s, t):
    assert not is_isomorphic(s, t)


def test_anagram():
    assert is_anagram("anagram", "nagaram")
    assert not is_anagram("rat", "car")
    assert not is_anagram("a", "ab")


def test_anagram_of_reversed():
    word = "listening"
    assert is_anagram(word, word[::-1])


def test_rotate_string_all_rotations():
    s = "abcde"
    for i in range(len(s)):
        assert rotate_string(s, s[i:] + s[:i])


def test_rotate_string_false():
    assert not rotate_string("abcde", "abced")
    assert not rotate_string("abc", "abcabc")