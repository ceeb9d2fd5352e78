"""Binary search over the answer space for minimum-feasible-value problems."""

from __future__ import annotations

from typing import Callable, Sequence


def _lowest_feasible(low: int, high: int, feasible: Callable[[int], bool]) -> int:
    """Smallest value in ``[low, high]`` accepted by ``feasible``, or ``high + 1``.

    ``feasible`` must be monotonic: once true, true for every larger value.
    """
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def _days_needed(weights: Sequence[int], capacity: int) -> int:
    days = 1
    load = 0
    for weight in weights:
        if load + weight > capacity:
            days += 1
            load = weight
        else:
            load += weight
    return days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that carries ``weights``, in order, within ``days`` days."""
    if not weights:
        raise ValueError("ship_within_days() requires at least one weight")
    return _lowest_feasible(
        max(weights),
        sum(weights),
        lambda capacity: _days_needed(weights, capacity) <= days,
    )


def _divided_sum(nums: Sequence[int], divisor: int, threshold: int) -> int:
    total = 0
    for num in nums:
        total += -(-num // divisor)
        if total > threshold:
            break
    return total


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Smallest divisor whose rounded-up quotients over ``nums`` sum to at most ``threshold``."""
    if not nums:
        raise ValueError("smallest_divisor() requires at least one number")
    return _lowest_feasible(
        1,
        max(nums),
        lambda divisor: _divided_sum(nums, divisor, threshold) <= threshold,
    )


def _bouquets_possible(bloom_day: Sequence[int], m: int, k: int, day: int) -> bool:
    bouquets = 0
    streak = 0
    for bloom in bloom_day:
        if bloom <= day:
            streak += 1
        else:
            bouquets += streak // k
            streak = 0
    bouquets += streak // k
    return bouquets >= m


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """First day on which ``m`` bouquets of ``k`` adjacent bloomed flowers can be made.

    Returns -1 when there are not enough flowers for that many bouquets.
    """
    if m * k > len(bloom_day):
        return -1
    if not bloom_day:
        raise ValueError("min_days() requires at least one bloom day")
    return _lowest_feasible(
        min(bloom_day),
        max(bloom_day),
        lambda day: _bouquets_possible(bloom_day, m, k, day),
    )


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """The ``k``-th positive integer missing from the ascending sequence ``arr``."""
    missing = 0
    candidate = 1
    for value in arr:
        while value > candidate:
            missing += 1
            if missing == k:
                return candidate
            candidate += 1
        candidate += 1
    last = arr[-1] if arr else 0
    return last + (k - missing)


def int_sqrt(x: int) -> int:
    """Integer square root of ``x``, rounded down."""
    if x < 0:
        raise ValueError("int_sqrt() is undefined for negative numbers")
    low, high = 0, x
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            low = mid + 1
        else:
            high = mid - 1
    return high


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum((pile + speed - 1) // speed for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Least bananas-per-hour rate that finishes every pile within ``h`` hours."""
    if not piles:
        raise ValueError("min_eating_speed() requires at least one pile")
    return _lowest_feasible(
        1,
        max(piles),
        lambda speed: _hours_needed(piles, speed) <= h,
    )