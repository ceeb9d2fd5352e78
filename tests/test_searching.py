import bisect
import random

import pytest

from algokit.searching import (
    binary_search,
    find_min_rotated,
    missing_number,
    search_insert,
    search_range,
    search_rotated,
    search_rotated_with_duplicates,
    single_non_duplicate,
)


def _rotations(values):
    return [values[i:] + values[:i] for i in range(len(values))]


SORTED = [-7, -1, 0, 3, 5, 9, 12, 20]


@pytest.mark.parametrize("target", SORTED)
def test_binary_search_finds_every_element(target):
    assert SORTED[binary_search(SORTED, target)] == target


@pytest.mark.parametrize("target", [-10, 2, 4, 100])
def test_binary_search_absent(target):
    assert binary_search(SORTED, target) == -1


def test_binary_search_empty():
    assert binary_search([], 1) == -1


@pytest.mark.parametrize("target", range(-10, 25))
def test_search_insert_matches_bisect(target):
    assert search_insert(SORTED, target) == bisect.bisect_left(SORTED, target)


def test_search_insert_empty():
    assert search_insert([], 5) == 0


@pytest.mark.parametrize("target", range(0, 8))
def test_search_range_matches_bisect(target):
    nums = [1, 2, 2, 2, 4, 5, 5, 7]
    first, last = search_range(nums, target)
    if target in nums:
        assert first == bisect.bisect_left(nums, target)
        assert last == bisect.bisect_right(nums, target) - 1
    else:
        assert (first, last) == (-1, -1)


def test_search_range_empty():
    assert search_range([], 0) == (-1, -1)


@pytest.mark.parametrize("nums", _rotations(SORTED))
def test_find_min_rotated(nums):
    assert find_min_rotated(nums) == min(nums)


def test_find_min_rotated_single():
    assert find_min_rotated([42]) == 42


def test_find_min_rotated_empty_raises():
    with pytest.raises(ValueError):
        find_min_rotated([])


@pytest.mark.parametrize("nums", _rotations(SORTED))
def test_search_rotated_present_and_absent(nums):
    for target in nums:
        assert nums[search_rotated(nums, target)] == target
    for target in (-100, 1, 4, 100):
        assert search_rotated(nums, target) == -1


def test_search_rotated_empty():
    assert search_rotated([], 3) == -1


@pytest.mark.parametrize(
    "base",
    [[0, 0, 1, 2, 2, 5, 6], [1, 1, 1, 1, 2], [0, 1, 1, 1, 1], [3, 3, 3]],
)
def test_search_rotated_with_duplicates_matches_membership(base):
    for nums in _rotations(base):
        for target in range(-1, 8):
            assert search_rotated_with_duplicates(nums, target) == (target in nums)


def test_search_rotated_with_duplicates_empty():
    assert search_rotated_with_duplicates([], 1) is False


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_missing_number_each_position(n):
    rng = random.Random(n)
    for gone in range(n + 1):
        nums = [v for v in range(n + 1) if v != gone]
        rng.shuffle(nums)
        assert missing_number(nums) == gone


def test_missing_number_does_not_mutate():
    nums = [3, 0, 1]
    missing_number(nums)
    assert nums == [3, 0, 1]


@pytest.mark.parametrize("count", range(1, 7))
def test_single_non_duplicate_each_position(count):
    for single in range(count):
        nums = sorted(
            [v for v in range(count) if v != single] * 2 + [single]
        )
        assert single_non_duplicate(nums) == single


def test_single_non_duplicate_empty_raises():
    with pytest.raises(ValueError):
        single_non_duplicate([])