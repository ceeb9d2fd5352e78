"""Stack-based string and sequence algorithms."""

from __future__ import annotations

from typing import Iterable

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """True if every bracket in ``s`` is closed by its match in the right order.

    Any character that is not an opening bracket is treated as a closer, so
    characters other than ``()[]{}`` make the string invalid.
    """
    if len(s) % 2:
        return False
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or _PAIRS.get(ch) != stack.pop():
            return False
    return not stack


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair from every primitive group of a balanced string."""
    kept: list[str] = []
    depth = 0
    for ch in s:
        if ch == "(":
            if depth > 0:
                kept.append(ch)
            depth += 1
        else:
            depth -= 1
            if depth > 0:
                kept.append(ch)
    return "".join(kept)


def remove_k_digits(num: str, k: int) -> str:
    """Smallest number left after deleting ``k`` digits from ``num``, as a string."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k > len(num):
        raise ValueError("cannot remove more digits than the number has")
    digits: list[str] = []
    for digit in num:
        while digits and k > 0 and digits[-1] > digit:
            digits.pop()
            k -= 1
        digits.append(digit)
    if k:
        del digits[-k:]
    return "".join(digits).lstrip("0") or "0"


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """State of a row of asteroids after all collisions.

    Sign gives direction (positive moves right), magnitude gives size. When two
    meet the smaller explodes; equal sizes both explode.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        if asteroid > 0:
            survivors.append(asteroid)
            continue
        size = -asteroid
        while survivors and 0 < survivors[-1] < size:
            survivors.pop()
        if survivors and survivors[-1] == size:
            survivors.pop()
        elif not survivors or survivors[-1] < 0:
            survivors.append(asteroid)
    return survivors