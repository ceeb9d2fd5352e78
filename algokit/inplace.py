"""In-place rearrangements of mutable sequences."""

from __future__ import annotations

from typing import MutableSequence, Sequence


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Move the distinct values of ascending ``nums`` to its front; return their count."""
    if not nums:
        return 0
    write = 0
    for read in range(1, len(nums)):
        if nums[read] != nums[write]:
            write += 1
            nums[write], nums[read] = nums[read], nums[write]
    return write + 1


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end, keeping the order of the other values, in place."""
    write = 0
    for read in range(len(nums)):
        if nums[read] != 0:
            nums[write], nums[read] = nums[read], nums[write]
            write += 1


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` into its next lexicographic permutation, wrapping to the first."""
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    swap = next(j for j in range(n - 1, pivot, -1) if nums[j] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = list(reversed(nums[pivot + 1 :]))


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` of ``nums2`` into ``nums1``, whose first ``m`` are live."""
    i, j, k = m - 1, n - 1, m + n - 1
    while i >= 0 and j >= 0:
        if nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1
    while j >= 0:
        nums1[k] = nums2[j]
        j -= 1
        k -= 1


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Alternate positives and negatives, positives first, keeping their relative order."""
    size = len(nums)
    result = [0] * size
    positive_at, negative_at = 0, 1
    for value in nums:
        if value > 0:
            if positive_at >= size:
                raise ValueError("more positive values than negative ones")
            result[positive_at] = value
            positive_at += 2
        elif value < 0:
            if negative_at >= size:
                raise ValueError("more negative values than positive ones")
            result[negative_at] = value
            negative_at += 2
    return result


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """True if ``nums`` is some rotation of a non-decreasing sequence."""
    descents = 0
    for current, following in zip(nums, [*nums[1:], *nums[:1]]):
        if current > following:
            descents += 1
            if descents > 1:
                return False
    return True