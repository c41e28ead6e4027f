"""Sliding-window algorithms over sequences and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence


def _at_most_k_distinct(nums: Sequence[Hashable], k: int) -> int:
    """Count the subarrays holding at most ``k`` distinct values."""
    if k <= 0:
        return 0
    counts: Counter[Hashable] = Counter()
    left = total = 0
    for right, value in enumerate(nums):
        if counts[value] == 0:
            k -= 1
        counts[value] += 1
        while k < 0:
            leaving = nums[left]
            counts[leaving] -= 1
            if counts[leaving] == 0:
                k += 1
            left += 1
        total += right - left + 1
    return total


def subarrays_with_k_distinct(nums: Sequence[Hashable], k: int) -> int:
    """Count the subarrays holding exactly ``k`` distinct values."""
    return _at_most_k_distinct(nums, k) - _at_most_k_distinct(nums, k - 1)


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of ones after flipping at most ``k`` zeros."""
    left = zeros = best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = -1
    best = 0
    for i, ch in enumerate(s):
        if last_seen.get(ch, -1) > start:
            start = last_seen[ch]
        last_seen[ch] = i
        best = max(best, i - start)
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` containing every character of
    ``t`` with multiplicity; the leftmost on ties, "" if there is none."""
    if not t or len(s) < len(t):
        return ""
    need = Counter(t)
    window: Counter[str] = Counter()
    satisfied = 0
    left = 0
    best_start, best_len = 0, None
    for right, ch in enumerate(s, 1):
        if ch in need:
            window[ch] += 1
            if window[ch] == need[ch]:
                satisfied += 1
        while satisfied == len(need):
            if best_len is None or right - left < best_len:
                best_start, best_len = left, right - left
            leaving = s[left]
            left += 1
            if leaving in need:
                if window[leaving] == need[leaving]:
                    satisfied -= 1
                window[leaving] -= 1
    if best_len is None:
        return ""
    return s[best_start:best_start + best_len]