import itertools
from collections import deque

import pytest

from algokit.inplace import (
    is_sorted_and_rotated,
    merge_sorted,
    move_zeroes,
    next_permutation,
    rearrange_by_sign,
    remove_duplicates,
    rotate,
    sort_colors,
)


@pytest.mark.parametrize("k", [0, 1, 3, 7, 10, 23])
def test_rotate_matches_deque_rotation(k):
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, k)
    expected = deque(original)
    expected.rotate(k)
    assert nums == list(expected)


def test_rotate_by_length_is_identity():
    nums = [-1, -100, 3, 99]
    rotate(nums, len(nums))
    assert nums == [-1, -100, 3, 99]


def test_rotate_empty_stays_empty():
    nums = []
    rotate(nums, 5)
    assert nums == []


def test_remove_duplicates_front_holds_unique_values():
    original = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    nums = list(original)
    count = remove_duplicates(nums)
    assert count == len(set(original))
    assert nums[:count] == sorted(set(original))
    assert sorted(nums) == sorted(original)


def test_remove_duplicates_all_distinct_unchanged():
    nums = [1, 2, 3, 4]
    assert remove_duplicates(nums) == len(nums)
    assert nums == [1, 2, 3, 4]


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == 0


def test_move_zeroes_keeps_order_of_nonzeros():
    original = [0, 1, 0, 3, 12, 0, -4]
    nums = list(original)
    move_zeroes(nums)
    nonzero = [x for x in original if x != 0]
    assert nums[: len(nonzero)] == nonzero
    assert nums[len(nonzero) :] == [0] * original.count(0)


def test_next_permutation_walks_all_permutations_in_order():
    ordered = sorted(set(itertools.permutations([1, 2, 2, 3])))
    nums = list(ordered[0])
    for expected in ordered[1:]:
        next_permutation(nums)
        assert tuple(nums) == expected


def test_next_permutation_wraps_from_last_to_first():
    nums = [3, 2, 1]
    next_permutation(nums)
    assert nums == sorted([3, 2, 1])


@pytest.mark.parametrize(
    "original", [[2, 0, 2, 1, 1, 0], [2, 0, 1], [0], [2, 2, 1, 1, 0, 0], []]
)
def test_sort_colors_sorts(original):
    nums = list(original)
    sort_colors(nums)
    assert nums == sorted(original)


def test_merge_sorted_fills_first_list():
    live = [1, 2, 3]
    other = [2, 5, 6]
    nums1 = live + [0] * len(other)
    merge_sorted(nums1, len(live), other, len(other))
    assert nums1 == sorted(live + other)


def test_merge_sorted_with_empty_first():
    other = [1, 4]
    nums1 = [0, 0]
    merge_sorted(nums1, 0, other, len(other))
    assert nums1 == other


def test_merge_sorted_with_empty_second():
    nums1 = [1, 5, 9]
    merge_sorted(nums1, 3, [], 0)
    assert nums1 == [1, 5, 9]


def test_rearrange_by_sign_alternates_and_keeps_order():
    original = [3, 1, -2, -5, 2, -4]
    result = rearrange_by_sign(original)
    assert result[0::2] == [x for x in original if x > 0]
    assert result[1::2] == [x for x in original if x < 0]


def test_rearrange_by_sign_unbalanced_raises():
    with pytest.raises(ValueError):
        rearrange_by_sign([1, 2, 3, -1])


def test_is_sorted_and_rotated_accepts_every_rotation():
    base = [1, 1, 2, 3, 5, 8]
    for shift in range(len(base)):
        assert is_sorted_and_rotated(base[shift:] + base[:shift])


def test_is_sorted_and_rotated_rejects_decreasing():
    assert not is_sorted_and_rotated([3, 2, 1])
    assert not is_sorted_and_rotated([2, 1, 3, 4])


def test_is_sorted_and_rotated_trivial_inputs():
    assert is_sorted_and_rotated([])
    assert is_sorted_and_rotated([7, 7, 7])