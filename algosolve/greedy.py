"""Greedy algorithms: cookies, task scheduling, card hands and change."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def find_content_children(g: Iterable[int], s: Iterable[int]) -> int:
    """Return how many children with greed ``g`` can be satisfied by
    cookies of sizes ``s``, one cookie each."""
    greed = sorted(g)
    content = 0
    for cookie in sorted(s):
        if content == len(greed):
            break
        if greed[content] <= cookie:
            content += 1
    return content


def least_interval(tasks: Iterable[Hashable], n: int) -> int:
    """Return the fewest time units to run ``tasks`` when equal tasks
    must be at least ``n`` units apart.

    Raises ValueError when ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"cooling interval must not be negative, got {n}")
    heap = [-count for count in Counter(tasks).values()]
    heapq.heapify(heap)
    time = 0
    while heap:
        leftover: list[int] = []
        for _ in range(n + 1):
            if heap:
                remaining = -heapq.heappop(heap) - 1
                if remaining:
                    leftover.append(remaining)
                time += 1
            elif not leftover:
                break
            else:
                time += 1
        for remaining in leftover:
            heapq.heappush(heap, -remaining)
    return time


def is_n_straight_hand(hand: Sequence[int], group_size: int) -> bool:
    """Return True when ``hand`` splits into runs of ``group_size``
    consecutive cards.

    Raises ValueError when ``group_size`` is less than 1.
    """
    if group_size < 1:
        raise ValueError(f"group size must be at least 1, got {group_size}")
    if len(hand) % group_size:
        return False
    freq = Counter(hand)
    for start in sorted(freq):
        count = freq[start]
        if count > 0:
            for card in range(start, start + group_size):
                if freq[card] < count:
                    return False
                freq[card] -= count
    return True


def lemonade_change(bills: Iterable[int]) -> bool:
    """Return True when every customer paying with ``bills`` for a 5-unit
    lemonade can be given correct change.

    Any bill other than 5 or 10 is treated as a 20.
    """
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif tens and fives:
            tens -= 1
            fives -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True