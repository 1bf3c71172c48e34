"""
Segmented Sieve of Eratosthenes.

Sieves (sqrt(N), N] in blocks of width floor(sqrt(N)), seeding every block
with the small primes from the basic sieve. Only one block's flags are
alive at a time, so peak memory is O(sqrt(N)) plus the output.
"""

import math
from typing import Iterator, Tuple

import numpy as np

from .primes import primes_upto


def iter_segments(N: int, width: int) -> Iterator[Tuple[int, int]]:
    """
    Yield inclusive (low, high) blocks covering (width, N].

    Blocks are disjoint, ascending and `width` wide except the last, which
    is clipped at N. Values below 2 are skipped.
    """
    if width < 1:
        return
    low = max(width + 1, 2)
    while low <= N:
        high = min(low + width - 1, N)
        yield low, high
        low = high + 1


def _sieve_segment(low: int, high: int, small_primes: np.ndarray) -> np.ndarray:
    """
    Return the primes in [low, high] given every prime <= sqrt(high).

    Assumes low is above every small prime, so each marked multiple is a
    proper multiple.
    """
    segment = np.ones(high - low + 1, dtype=bool)

    # Smallest multiple of each p that is >= low
    starts = (low + small_primes - 1) // small_primes * small_primes

    for p, start in zip(small_primes.tolist(), starts.tolist()):
        if start < low:
            start += p
        if start > high:
            continue
        segment[start - low::p] = False

    return np.nonzero(segment)[0].astype(np.int64) + low


def segmented_primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N using a segmented sieve.

    Output is identical to primes.primes_upto(N).

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Ascending int64 array of primes; empty when N < 2.
    """
    if N < 2:
        return np.empty(0, dtype=np.int64)

    width = math.isqrt(N)
    small_primes = primes_upto(width)

    chunks = [small_primes.copy()]
    for low, high in iter_segments(N, width):
        chunks.append(_sieve_segment(low, high, small_primes))

    return np.concatenate(chunks)
