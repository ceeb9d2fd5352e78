"""Monotonic-stack algorithms over integer sequences."""

from __future__ import annotations

import operator
from typing import Callable, Iterable, Sequence

MODULUS = 10**9 + 7

_Compare = Callable[[int, int], bool]


def _previous_indices(values: Sequence[int], pop_while: _Compare) -> list[int]:
    """For each position, the nearest index to its left surviving ``pop_while``, or -1."""
    stack: list[int] = []
    result: list[int] = []
    for i, value in enumerate(values):
        while stack and pop_while(values[stack[-1]], value):
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(i)
    return result


def _next_indices(values: Sequence[int], pop_while: _Compare) -> list[int]:
    """For each position, the nearest index to its right surviving ``pop_while``, or n."""
    n = len(values)
    stack: list[int] = []
    result = [n] * n
    for i in range(n - 1, -1, -1):
        value = values[i]
        while stack and pop_while(values[stack[-1]], value):
            stack.pop()
        result[i] = stack[-1] if stack else n
        stack.append(i)
    return result


def _weighted_total(
    values: Sequence[int], previous: Sequence[int], following: Sequence[int]
) -> Iterable[int]:
    for i, (value, before, after) in enumerate(zip(values, previous, following)):
        yield (i - before) * (after - i) * value


def _sum_of_minimums(values: Sequence[int]) -> int:
    # previous smaller-or-equal and next strictly smaller, so ties count once
    previous = _previous_indices(values, operator.gt)
    following = _next_indices(values, operator.ge)
    return sum(_weighted_total(values, previous, following))


def _sum_of_maximums(values: Sequence[int]) -> int:
    previous = _previous_indices(values, operator.lt)
    following = _next_indices(values, operator.le)
    return sum(_weighted_total(values, previous, following))


def sum_subarray_ranges(nums: Sequence[int]) -> int:
    """Sum of ``max - min`` over every contiguous subarray of ``nums``."""
    values = list(nums)
    return _sum_of_maximums(values) - _sum_of_minimums(values)


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Sum of the minimum of every contiguous subarray, modulo 10**9 + 7."""
    values = list(arr)
    previous = _previous_indices(values, operator.gt)
    following = _next_indices(values, operator.ge)
    total = 0
    for contribution in _weighted_total(values, previous, following):
        total = (total + contribution % MODULUS) % MODULUS
    return total


def next_greater_element(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """For each value of ``nums1``, the first larger value after it in ``nums2``, or -1.

    Raises ValueError if a value of ``nums1`` does not occur in ``nums2``.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for num in nums2:
        while stack and num > stack[-1]:
            greater[stack.pop()] = num
        stack.append(num)
    while stack:
        greater[stack.pop()] = -1

    result = []
    for num in nums1:
        if num not in greater:
            raise ValueError(f"{num} does not occur in the second sequence")
        result.append(greater[num])
    return result


def next_greater_elements_circular(nums: Sequence[int]) -> list[int]:
    """For each value, the first larger value found walking right and wrapping, or -1."""
    n = len(nums)
    stack: list[int] = []
    result = [-1] * n
    for i in range(2 * n - 1, -1, -1):
        value = nums[i % n]
        while stack and value >= stack[-1]:
            stack.pop()
        if i < n:
            result[i] = stack[-1] if stack else -1
        stack.append(value)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under a histogram of unit-width bars."""
    n = len(heights)
    stack: list[int] = []
    best = 0

    def settle(next_smaller: int) -> None:
        nonlocal best
        height = heights[stack.pop()]
        previous_smaller = stack[-1] if stack else -1
        best = max(best, (next_smaller - previous_smaller - 1) * height)

    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] > height:
            settle(i)
        stack.append(i)
    while stack:
        settle(n)
    return best


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        left_max = max(left_max, height[left])
        right_max = max(right_max, height[right])
        if left_max <= right_max:
            water += left_max - height[left]
            left += 1
        else:
            water += right_max - height[right]
            right -= 1
    return water