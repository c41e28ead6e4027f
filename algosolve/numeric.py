"""Bit tricks and fast exponentiation."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

_WORD_MASK = (1 << 32) - 1


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def is_power_of_two(n: int) -> bool:
    """Return True when ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many of the low 32 bits differ between ``start`` and ``goal``."""
    return bin((start ^ goal) & _WORD_MASK).count("1")


def my_pow(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n`` by repeated squaring.

    Raises ZeroDivisionError for zero raised to a negative power.
    """
    result = 1.0
    base = float(x)
    power = abs(n)
    while power:
        if power % 2:
            result *= base
            power -= 1
        else:
            base *= base
            power //= 2
    return 1.0 / result if n < 0 else result