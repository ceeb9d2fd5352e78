"""Interval merging."""

from __future__ import annotations

from typing import Iterable, Sequence


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals, sorted by start."""
    merged: list[list[int]] = []
    for interval in sorted(list(iv) for iv in intervals):
        start, end = interval[0], interval[1]
        if not merged or start > merged[-1][1]:
            merged.append(list(interval))
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged