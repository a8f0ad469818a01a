"""Hypothesis property tests for the numeric toolkit.

Covers the algebraic identities each function must satisfy for arbitrary
inputs, including values well outside the 64-bit range.
"""

from __future__ import annotations

import importlib.util
import math
import random

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from src.numeric import (
    average,
    factorial,
    fibonacci,
    gcd,
    is_prime,
    lcm,
    median,
    mode,
    power,
    random_in_range,
)

ints = st.integers(min_value=-(10**30), max_value=10**30)
nonzero_ints = ints.filter(lambda x: x != 0)
# Bounded so float conversion and summation stay exact.
stat_values = st.lists(st.integers(min_value=-(10**12), max_value=10**12), min_size=1, max_size=60)
# Full finite float range, extremes and subnormals included, mixed with ints.
mixed_values = st.lists(
    st.one_of(
        st.floats(allow_nan=False, allow_infinity=False),
        st.integers(min_value=-(10**15), max_value=10**15),
        st.sampled_from([1.7976931348623157e308, -1.7976931348623157e308, 5e-324, -5e-324, 0.0, -0.0]),
    ),
    min_size=1,
    max_size=60,
)


# ---------------------------------------------------------------------------
# gcd / lcm
# ---------------------------------------------------------------------------

class TestGcdLcmProperties:
    @given(a=ints, b=ints)
    def test_gcd_sign_invariant_and_non_negative(self, a: int, b: int):
        g = gcd(a, b)
        assert g >= 0
        assert g == gcd(abs(a), abs(b))

    @given(a=ints, b=ints)
    def test_gcd_matches_math(self, a: int, b: int):
        assert gcd(a, b) == math.gcd(a, b)

    @given(a=ints, b=ints)
    def test_gcd_divides_both(self, a: int, b: int):
        g = gcd(a, b)
        if g:
            assert a % g == 0
            assert b % g == 0

    @given(a=nonzero_ints, b=nonzero_ints)
    def test_lcm_times_gcd(self, a: int, b: int):
        assert lcm(a, b) * gcd(a, b) == abs(a * b)

    @given(a=ints)
    def test_lcm_with_zero(self, a: int):
        assert lcm(a, 0) == 0
        assert lcm(0, a) == 0


# ---------------------------------------------------------------------------
# fibonacci / factorial / power
# ---------------------------------------------------------------------------

class TestSequenceProperties:
    @given(n=st.integers(min_value=2, max_value=400))
    def test_fibonacci_recurrence(self, n: int):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)

    @given(n=st.integers(min_value=1, max_value=300))
    def test_factorial_recurrence(self, n: int):
        assert factorial(n) == n * factorial(n - 1)

    @given(n=st.integers(min_value=0, max_value=300))
    def test_factorial_matches_math(self, n: int):
        assert factorial(n) == math.factorial(n)

    @given(base=st.integers(min_value=-1000, max_value=1000), exponent=st.integers(min_value=0, max_value=60))
    def test_power_matches_builtin(self, base: int, exponent: int):
        assert power(base, exponent) == pow(base, exponent)


# ---------------------------------------------------------------------------
# is_prime
# ---------------------------------------------------------------------------

class TestPrimeProperties:
    @given(n=st.integers(min_value=-100, max_value=20_000))
    def test_matches_naive_trial_division(self, n: int):
        expected = n > 1 and all(n % d for d in range(2, math.isqrt(n) + 1))
        assert is_prime(n) is expected

    @given(a=st.integers(min_value=2, max_value=10_000), b=st.integers(min_value=2, max_value=10_000))
    def test_products_are_composite(self, a: int, b: int):
        assert is_prime(a * b) is False


# ---------------------------------------------------------------------------
# statistics
# ---------------------------------------------------------------------------

class TestStatisticsProperties:
    @given(values=stat_values)
    def test_average_between_min_and_max(self, values: list[int]):
        assert min(values) <= average(values) <= max(values)

    @given(values=stat_values)
    def test_median_between_min_and_max(self, values: list[int]):
        assert min(values) <= median(values) <= max(values)

    @given(values=mixed_values)
    def test_average_between_min_and_max_full_float_range(self, values: list[float]):
        assert min(values) <= average(values) <= max(values)

    @given(values=mixed_values)
    def test_median_between_min_and_max_full_float_range(self, values: list[float]):
        assert min(values) <= median(values) <= max(values)

    @given(values=stat_values, seed=st.integers(min_value=0, max_value=2**32))
    def test_median_order_independent(self, values: list[int], seed: int):
        shuffled = list(values)
        random.Random(seed).shuffle(shuffled)
        assert median(shuffled) == median(values)

    @given(values=st.lists(st.integers(min_value=-5, max_value=5), max_size=40))
    def test_mode_is_max_frequency_subset(self, values: list[int]):
        result = mode(values)
        if not values:
            assert result == []
            return
        top = max(values.count(v) for v in values)
        assert set(result) <= set(values)
        assert len(result) == len(set(result))
        assert set(result) == {v for v in values if values.count(v) == top}

    @given(values=st.lists(st.integers(min_value=-5, max_value=5), max_size=40), seed=st.integers(min_value=0, max_value=2**32))
    def test_mode_order_independent(self, values: list[int], seed: int):
        shuffled = list(values)
        random.Random(seed).shuffle(shuffled)
        assert set(mode(shuffled)) == set(mode(values))


# ---------------------------------------------------------------------------
# random_in_range
# ---------------------------------------------------------------------------

class TestRandomProperties:
    @settings(max_examples=200)
    @given(
        lo=st.integers(min_value=-(10**20), max_value=10**20),
        width=st.integers(min_value=0, max_value=10**20),
        seed=st.integers(min_value=0, max_value=2**32),
    )
    def test_always_in_closed_range(self, lo: int, width: int, seed: int):
        hi = lo + width
        rng = random.Random(seed)
        for _ in range(20):
            assert lo <= random_in_range(lo, hi, rng=rng) <= hi
