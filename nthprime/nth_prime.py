"""
N-th prime resolver.

Index convention is 0-based: nth_prime(0) == 2, nth_prime(1) == 3.
Negative indices are not positions and resolve to the sentinel 0.

The sieve bound starts at the prime number theorem estimate n*ln(n) and
doubles until the sieve yields enough primes. A low estimate only costs
extra passes, never a wrong answer.

Python integers do not overflow, so bound arithmetic is exact. Prime lists
are int64 arrays, so bounds must stay below 2**63; in practice memory for
the list runs out long before that.
"""

import math
import numbers
from typing import Dict, Iterable, Union

from .sieves import Sieve, SegmentedSieve, get_sieve

# Below this index ln(n) is too small (or <= 0) to give a usable bound
SMALL_INDEX_CUTOFF = 6
SMALL_INDEX_BOUND = 20

SieveLike = Union[Sieve, str, None]


def _check_index(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"Prime index must be an integer, got {type(n).__name__}")
    return int(n)


def _resolve_sieve(sieve: SieveLike) -> Sieve:
    if sieve is None:
        return SegmentedSieve()
    if isinstance(sieve, str):
        return get_sieve(sieve)
    return sieve


def estimate_upper_bound(n: int) -> int:
    """
    Initial sieve bound for the n-th prime (0-based).

    Returns 20 for n < 6, otherwise int(n * ln(n)). Always positive.
    """
    if n < SMALL_INDEX_CUTOFF:
        return SMALL_INDEX_BOUND
    return int(n * math.log(n))


def nth_prime(n: int, sieve: SieveLike = None) -> int:
    """
    Return the prime at 0-based position n, or 0 if n < 0.

    Parameters
    ----------
    n : int
        Prime index.
    sieve : Sieve or str, optional
        Sieve implementation or registered name. Defaults to segmented.

    Returns
    -------
    int
        The (n+1)-th prime, or 0 for negative n.
    """
    n = _check_index(n)
    if n < 0:
        return 0

    sieve = _resolve_sieve(sieve)
    bound = estimate_upper_bound(n)
    while True:
        primes = sieve.primes_upto(bound)
        if len(primes) > n:
            return int(primes[n])
        bound *= 2


def prime_at_indices(indices: Iterable[int], sieve: SieveLike = None) -> Dict[int, int]:
    """
    Resolve several indices, sieving once for the largest.

    Returns a dict index -> prime, with 0 for negative indices.
    """
    indices = [_check_index(i) for i in indices]
    result = {i: 0 for i in indices if i < 0}
    valid = [i for i in indices if i >= 0]
    if not valid:
        return result

    sieve = _resolve_sieve(sieve)
    largest = max(valid)
    bound = estimate_upper_bound(largest)
    primes = sieve.primes_upto(bound)
    while len(primes) <= largest:
        bound *= 2
        primes = sieve.primes_upto(bound)

    for i in valid:
        result[i] = int(primes[i])
    return result


class PrimeNumberSieve:
    """Resolver bound to one sieve implementation."""

    def __init__(self, sieve: SieveLike = None):
        self.sieve = _resolve_sieve(sieve)

    @classmethod
    def from_config(cls, config: dict) -> 'PrimeNumberSieve':
        return cls(config['sieve'])

    def nth_prime(self, n: int) -> int:
        return nth_prime(n, self.sieve)

    def __repr__(self):
        return f"PrimeNumberSieve(sieve={self.sieve!r})"
