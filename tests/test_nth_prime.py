"""
Tests for the n-th prime resolver.

Known values are the 0-based positions of well-tabulated primes.
Property checks sample indices from a seeded generator so failures reproduce.
"""

import math

import numpy as np
import pytest

from nthprime import nth_prime
from nthprime.nth_prime import PrimeNumberSieve, estimate_upper_bound, prime_at_indices
from nthprime.sieves import BasicSieve, SegmentedSieve, Sieve


SEED = 20240101

KNOWN_PRIMES = [
    (0, 2),
    (1, 3),
    (5, 13),
    (6, 17),
    (19, 71),
    (99, 541),
    (500, 3581),
    (986, 7793),
    (2000, 17393),
]


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    for d in range(2, math.isqrt(n) + 1):
        if n % d == 0:
            return False
    return True


class CountingSieve(Sieve):
    """Segmented sieve that records the bounds it was asked for."""

    name = 'counting'

    def __init__(self):
        self.bounds = []
        self._inner = SegmentedSieve()

    def primes_upto(self, N):
        self.bounds.append(N)
        return self._inner.primes_upto(N)


class TestKnownValues:
    """Test nth_prime against tabulated primes."""

    @pytest.mark.parametrize("n,expected", KNOWN_PRIMES)
    def test_known_primes(self, n, expected):
        assert nth_prime(n) == expected, f"nth_prime({n}) should be {expected}"

    @pytest.mark.parametrize("n,expected", KNOWN_PRIMES)
    def test_known_primes_basic_sieve(self, n, expected):
        assert nth_prime(n, BasicSieve()) == expected

    def test_one_millionth(self):
        assert nth_prime(1_000_000) == 15485867

    @pytest.mark.slow
    def test_ten_millionth(self):
        assert nth_prime(10_000_000) == 179424691

    def test_first_hundred_match_trial_division(self):
        expected = [n for n in range(2, 600) if is_prime(n)][:100]
        assert [nth_prime(i) for i in range(100)] == expected

    def test_returns_python_int(self):
        assert type(nth_prime(10)) is int


class TestNegativeIndices:
    """Negative indices resolve to the sentinel 0."""

    @pytest.mark.parametrize("n", [-1, -2, -6, -1000, -(2**63)])
    def test_negative_returns_zero(self, n):
        assert nth_prime(n) == 0

    def test_sampled_negative_indices(self):
        rng = np.random.default_rng(SEED)
        for n in rng.integers(-(2**62), 0, size=200):
            assert nth_prime(int(n)) == 0, f"nth_prime({n}) should be 0"

    def test_negative_never_sieves(self):
        sieve = CountingSieve()
        nth_prime(-3, sieve)
        assert sieve.bounds == []


class TestProperties:
    """Properties that hold for every non-negative index."""

    def test_sampled_indices_are_prime(self):
        rng = np.random.default_rng(SEED)
        for n in rng.integers(0, 20_000, size=50):
            p = nth_prime(int(n))
            assert is_prime(p), f"nth_prime({n}) = {p} is not prime"

    def test_monotonic(self):
        values = [nth_prime(n) for n in range(300)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_consecutive_sampled_pairs_monotonic(self):
        rng = np.random.default_rng(SEED + 1)
        for n in rng.integers(0, 50_000, size=10):
            n = int(n)
            assert nth_prime(n) < nth_prime(n + 1)

    def test_idempotent(self):
        first = nth_prime(4321)
        for _ in range(3):
            assert nth_prime(4321) == first

    def test_numpy_integer_index(self):
        assert nth_prime(np.int64(19)) == 71


class TestIndexValidation:
    """Non-integer indices are rejected."""

    @pytest.mark.parametrize("n", [1.0, 2.5, "3", None, True])
    def test_non_integer_raises(self, n):
        with pytest.raises(TypeError):
            nth_prime(n)


class TestBoundEstimation:
    """Test the initial bound and the doubling retry."""

    @pytest.mark.parametrize("n", range(6))
    def test_small_indices_use_fixed_bound(self, n):
        assert estimate_upper_bound(n) == 20

    @pytest.mark.parametrize("n", [6, 7, 10, 100, 10**6, 10**9])
    def test_large_indices_use_log_estimate(self, n):
        assert estimate_upper_bound(n) == int(n * math.log(n))

    def test_bound_always_positive(self):
        assert all(estimate_upper_bound(n) > 0 for n in range(1000))

    def test_bound_doubles_until_enough_primes(self):
        # n=6: estimate is int(6*ln 6) = 10, which holds only 4 primes
        sieve = CountingSieve()
        assert nth_prime(6, sieve) == 17
        assert sieve.bounds == [10, 20]

    def test_single_pass_when_estimate_suffices(self):
        sieve = CountingSieve()
        nth_prime(3, sieve)
        assert sieve.bounds == [20]

    def test_every_bound_doubles(self):
        sieve = CountingSieve()
        nth_prime(100_000, sieve)
        assert all(b == 2 * a for a, b in zip(sieve.bounds, sieve.bounds[1:]))


class TestSieveSelection:
    """Test choosing the sieve by instance or name."""

    def test_sieve_by_name(self):
        assert nth_prime(500, 'basic') == 3581
        assert nth_prime(500, 'segmented') == 3581

    def test_unknown_sieve_name(self):
        with pytest.raises(ValueError):
            nth_prime(5, 'atkin')

    def test_resolver_object(self):
        resolver = PrimeNumberSieve()
        assert isinstance(resolver.sieve, SegmentedSieve)
        assert resolver.nth_prime(99) == 541
        assert resolver.nth_prime(-1) == 0

    def test_resolver_from_config(self):
        resolver = PrimeNumberSieve.from_config({'sieve': 'basic'})
        assert isinstance(resolver.sieve, BasicSieve)
        assert resolver.nth_prime(986) == 7793


class TestPrimeAtIndices:
    """Batch resolution agrees with single lookups."""

    def test_matches_nth_prime(self):
        indices = [0, 19, 99, 500, 986, 2000, 7]
        result = prime_at_indices(indices)
        assert result == {n: nth_prime(n) for n in indices}

    def test_negative_and_empty(self):
        assert prime_at_indices([]) == {}
        assert prime_at_indices([-1, -5]) == {-1: 0, -5: 0}
        assert prime_at_indices([-1, 0]) == {-1: 0, 0: 2}

    def test_single_sieve_pass(self):
        sieve = CountingSieve()
        prime_at_indices([1, 2, 3, 4], sieve)
        assert sieve.bounds == [20]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
