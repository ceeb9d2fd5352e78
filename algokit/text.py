"""String algorithms: prefixes, word order, odd numbers, anagrams and rotations."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest string that every element of ``strs`` starts with."""
    if not strs:
        raise ValueError("longest_common_prefix() requires at least one string")
    prefix = strs[0]
    for word in strs[1:]:
        length = 0
        for a, b in zip(prefix, word):
            if a != b:
                break
            length += 1
        prefix = prefix[:length]
        if not prefix:
            break
    return prefix


def reverse_words(s: str) -> str:
    """Words of ``s`` in reverse order, joined by single spaces.

    Only the space character separates words.
    """
    return " ".join(reversed([word for word in s.split(" ") if word]))


def largest_odd_number(num: str) -> str:
    """Largest odd-valued prefix of the digit string ``num``, or ``""`` if none."""
    return num.rstrip("02468")


def is_isomorphic(s: str, t: str) -> bool:
    """True if the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if a not in forward and b not in backward:
            forward[a] = b
            backward[b] = a
        elif forward.get(a) != b or backward.get(b) != a:
            return False
    return True


def is_anagram(s: str, t: str) -> bool:
    """True if ``t`` holds exactly the same characters as ``s``."""
    return Counter(s) == Counter(t)


def rotate_string(s: str, goal: str) -> bool:
    """True if some rotation of ``s`` equals ``goal``."""
    return len(s) == len(goal) and goal in s + s