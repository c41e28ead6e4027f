"""Binary searches over arrays and answer ranges."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _can_ship(weights: Sequence[int], days: int, capacity: int) -> bool:
    """Return True when ``weights`` fit into ``days`` loads of ``capacity``."""
    used_days = 1
    load = 0
    for weight in weights:
        if load + weight > capacity:
            used_days += 1
            load = 0
        load += weight
    return used_days <= days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries ``weights``, in order,
    within ``days`` days.

    Raises ValueError for no weights or fewer than one day.
    """
    if not weights:
        raise ValueError("there must be at least one package")
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")
    low, high = max(weights), sum(weights)
    while low <= high:
        mid = (low + high) // 2
        if _can_ship(weights, days, mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element larger than its neighbours.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("cannot find a peak in an empty sequence")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] < nums[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it
    would be inserted to keep the order."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if target == nums[mid]:
            return mid
        if target < nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return low


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of two sorted sequences taken together.

    Raises ValueError when both are empty or an input is not sorted.
    """
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    m, n = len(nums1), len(nums2)
    if m + n == 0:
        raise ValueError("cannot take the median of no numbers")
    total_left = (m + n + 1) // 2
    left, right = 0, m
    while left <= right:
        i = (left + right) // 2
        j = total_left - i
        l1 = nums1[i - 1] if i > 0 else -math.inf
        r1 = nums1[i] if i < m else math.inf
        l2 = nums2[j - 1] if j > 0 else -math.inf
        r2 = nums2[j] if j < n else math.inf
        if l1 <= r2 and l2 <= r1:
            if (m + n) % 2 == 0:
                return (max(l1, l2) + min(r1, r2)) / 2.0
            return float(max(l1, l2))
        if l1 > r2:
            right = i - 1
        else:
            left = i + 1
    raise ValueError("inputs must be sorted")


def my_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, rounded down.

    Raises ValueError for a negative number.
    """
    if x < 0:
        raise ValueError(f"cannot take the square root of {x}")
    low, high = 0, x
    result = 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            result = mid
            low = mid + 1
        else:
            high = mid - 1
    return result