"""Frequency and run-counting problems over integer sequences."""

from __future__ import annotations

import operator
from functools import reduce
from typing import Iterable, Sequence


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among the values."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def single_number(nums: Iterable[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(operator.xor, nums, 0)


def majority_element(nums: Iterable[int]) -> int:
    """The value that fills more than half of ``nums``."""
    candidate: int | None = None
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is None:
        raise ValueError("majority_element() requires a non-empty sequence")
    return candidate


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Every value that appears more than ``len(nums) // 3`` times."""
    first: int | None = None
    second: int | None = None
    first_count = second_count = 0
    for value in nums:
        if first_count == 0 and value != second:
            first, first_count = value, 1
        elif second_count == 0 and value != first:
            second, second_count = value, 1
        elif value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        else:
            first_count -= 1
            second_count -= 1

    first_count = second_count = 0
    for value in nums:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1

    threshold = len(nums) // 3
    result = []
    if first is not None and first_count > threshold:
        result.append(first)
    if second is not None and second_count > threshold:
        result.append(second)
    return result


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run of 1s."""
    best = run = 0
    for value in nums:
        if value == 1:
            run += 1
            best = max(best, run)
        else:
            run = 0
    return best