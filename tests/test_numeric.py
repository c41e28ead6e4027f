import math

import pytest

from algosolve.numeric import is_power_of_two, min_bit_flips, my_pow, single_number


@pytest.mark.parametrize("unique", [-7, 0, 4, 99])
def test_single_number_finds_unique(unique):
    pairs = [1, 2, 3, 1000, -5]
    nums = pairs + [unique] + list(reversed(pairs))
    assert single_number(nums) == unique


def test_single_number_single_element():
    assert single_number([42]) == 42


def test_powers_of_two_accepted():
    assert all(is_power_of_two(2**k) for k in range(40))


def test_non_powers_rejected():
    candidates = [0, -1, -2, -8, 3, 6, 12, 100, 2**20 + 1]
    assert not any(is_power_of_two(n) for n in candidates)


def test_min_bit_flips_example():
    assert min_bit_flips(10, 7) == 3


@pytest.mark.parametrize("k", range(0, 33))
def test_min_bit_flips_counts_low_bits(k):
    assert min_bit_flips(0, (1 << k) - 1) == k


def test_min_bit_flips_symmetric_and_reflexive():
    for a, b in [(3, 4), (100, 7), (-1, 5), (12345, 54321)]:
        assert min_bit_flips(a, b) == min_bit_flips(b, a)
        assert min_bit_flips(a, a) == min_bit_flips(b, b)


def test_min_bit_flips_negative_uses_32_bits():
    assert min_bit_flips(0, -1) == 32


@pytest.mark.parametrize(
    "x, n", [(2.0, 10), (2.1, 3), (0.5, 7), (-3.0, 5), (1.5, -4), (10.0, 0)]
)
def test_my_pow_matches_builtin(x, n):
    assert math.isclose(my_pow(x, n), x**n, rel_tol=1e-12)


def test_my_pow_negative_exponent():
    assert my_pow(2.0, -2) == 0.25


def test_my_pow_min_int_exponent():
    assert my_pow(1.0, -(2**31)) == 1.0


def test_my_pow_zero_negative_power():
    with pytest.raises(ZeroDivisionError):
        my_pow(0.0, -1)