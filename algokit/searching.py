"""Binary search over sorted and rotated sorted sequences."""

from __future__ import annotations

from typing import Iterable, Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in ascending ``nums``, or -1 if absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` if present, else the index where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left


def _boundary(nums: Sequence[int], target: int, *, first: bool) -> int:
    left, right = 0, len(nums) - 1
    found = -1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            found = mid
            if first:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return found


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in ascending ``nums``; (-1, -1) if absent."""
    return _boundary(nums, target, first=True), _boundary(nums, target, first=False)


def find_min_rotated(nums: Sequence[int]) -> int:
    """Smallest value of a rotated ascending sequence of distinct values."""
    if not nums:
        raise ValueError("find_min_rotated() requires a non-empty sequence")
    left, right = 0, len(nums) - 1
    smallest = nums[0]
    while left <= right:
        mid = (left + right) // 2
        if nums[left] <= nums[right]:
            # the whole window is sorted
            smallest = min(smallest, nums[left])
            break
        if nums[left] <= nums[mid]:
            smallest = min(smallest, nums[left])
            left = mid + 1
        else:
            smallest = min(smallest, nums[mid])
            right = mid - 1
    return smallest


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence of distinct values, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[-1]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """True if ``target`` occurs in a rotated ascending sequence that may repeat values."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return True
        if nums[left] == nums[mid] == nums[right]:
            # cannot tell which half is sorted; shrink from both ends
            left += 1
            right -= 1
            continue
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return False


def missing_number(nums: Iterable[int]) -> int:
    """The one value of ``0..n`` missing from ``n`` distinct values."""
    ordered = sorted(nums)
    left, right = 0, len(ordered)
    while left < right:
        mid = (left + right) // 2
        if ordered[mid] > mid:
            right = mid
        else:
            left = mid + 1
    return left


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value that appears once in a sorted sequence where all others appear twice."""
    n = len(nums)
    if n == 0:
        raise ValueError("single_non_duplicate() requires a non-empty sequence")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]

    left, right = 1, n - 2
    while left <= right:
        mid = (left + right) // 2
        if nums[mid - 1] != nums[mid] != nums[mid + 1]:
            return nums[mid]
        # pairs start at even indices before the single value, odd ones after it
        if (mid % 2 == 0 and nums[mid] == nums[mid + 1]) or (
            mid % 2 == 1 and nums[mid - 1] == nums[mid]
        ):
            left = mid + 1
        else:
            right = mid - 1
    raise ValueError("no value appears exactly once")