"""Pair, triplet and subarray sum problems, and best-profit scans."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Indices ``(i, j)``, ``i < j``, of two values of ``nums`` adding up to ``target``.

    Raises ValueError when no such pair exists.
    """
    seen: dict[int, int] = {}
    for j, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], j
        seen[value] = j
    raise ValueError(f"no two values add up to {target}")


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """All distinct ascending triplets of values from ``nums`` that sum to zero."""
    ordered = sorted(nums)
    n = len(ordered)
    triplets: list[list[int]] = []
    for i in range(n - 2):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        left, right = i + 1, n - 1
        while left < right:
            total = ordered[i] + ordered[left] + ordered[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                triplets.append([ordered[i], ordered[left], ordered[right]])
                left += 1
                right -= 1
                while left < right and ordered[left] == ordered[left - 1]:
                    left += 1
                while left < right and ordered[right] == ordered[right + 1]:
                    right -= 1
    return triplets


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All distinct ascending quadruplets of values from ``nums`` that sum to ``target``."""
    ordered = sorted(nums)
    n = len(ordered)
    quadruplets: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            k, m = j + 1, n - 1
            while k < m:
                total = ordered[i] + ordered[j] + ordered[k] + ordered[m]
                if total == target:
                    quadruplets.append([ordered[i], ordered[j], ordered[k], ordered[m]])
                    k += 1
                    m -= 1
                    while k < m and ordered[k] == ordered[k - 1]:
                        k += 1
                    while k < m and ordered[m] == ordered[m + 1]:
                        m -= 1
                elif total < target:
                    k += 1
                else:
                    m -= 1
    return quadruplets


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays of ``nums`` whose values sum to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        count += prefix_counts[prefix - k]
        prefix_counts[prefix] += 1
    return count


def max_subarray(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray() requires a non-empty sequence")
    return best


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_product() requires a non-empty sequence")
    prefix = suffix = 1
    best = nums[0]
    for forward, backward in zip(nums, reversed(nums)):
        # a zero ends every product through it; start afresh after it
        if prefix == 0:
            prefix = 1
        if suffix == 0:
            suffix = 1
        prefix *= forward
        suffix *= backward
        best = max(best, prefix, suffix)
    return best


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from buying once and selling once later; 0 if none is possible."""
    lowest: int | None = None
    profit = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit