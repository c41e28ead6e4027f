"""Array algorithms: two pointers, monotonic stacks, heaps and grids."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence
from itertools import product


def max_area(height: Sequence[int]) -> int:
    """Return the most water two lines of ``height`` can hold between them."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def calculate_minimum_hp(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the least starting health needed to cross ``dungeon`` from
    top-left to bottom-right moving only right or down.

    Raises ValueError for an empty grid.
    """
    if not dungeon or not dungeon[0]:
        raise ValueError("dungeon must have at least one cell")
    cols = len(dungeon[0])
    needed: list[float] = [math.inf] * (cols + 1)
    needed[cols - 1] = 1
    for row in reversed(dungeon):
        for j in reversed(range(cols)):
            need = min(needed[j], needed[j + 1]) - row[j]
            needed[j] = max(1, need)
    return int(needed[0])


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value of ``nums``.

    Raises ValueError when ``k`` is not between 1 and ``len(nums)``.
    """
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    heap = list(nums[:k])
    heapq.heapify(heap)
    for value in nums[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


def sub_array_ranges(nums: Sequence[int]) -> int:
    """Sum, over all subarrays, the largest minus the smallest element."""
    total = 0
    for i, first in enumerate(nums):
        low = high = first
        for value in nums[i + 1:]:
            low = min(low, value)
            high = max(high, value)
            total += high - low
    return total


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` holds."""
    left, right = 0, len(height) - 1
    left_max = right_max = trapped = 0
    while left < right:
        if height[left] < height[right]:
            if height[left] >= left_max:
                left_max = height[left]
            else:
                trapped += left_max - height[left]
            left += 1
        else:
            if height[right] >= right_max:
                right_max = height[right]
            else:
                trapped += right_max - height[right]
            right -= 1
    return trapped


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first larger value after it
    in ``nums2``, or -1 when there is none."""
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in nums2:
        while stack and stack[-1] < value:
            greater[stack.pop()] = value
        stack.append(value)
    return [greater.get(value, -1) for value in nums1]


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    The sign gives the direction and the magnitude the size; the smaller
    of two colliding asteroids explodes, and equal ones both explode.
    """
    stack: list[int] = []
    for asteroid in asteroids:
        while stack and stack[-1] > 0 and asteroid < 0:
            if stack[-1] < -asteroid:
                stack.pop()
                continue
            if stack[-1] == -asteroid:
                stack.pop()
            break
        else:
            stack.append(asteroid)
    return stack


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, those holding earlier elements first."""
    items = list(nums)
    return [
        [item for item, keep in zip(items, choice) if keep]
        for choice in product((True, False), repeat=len(items))
    ]