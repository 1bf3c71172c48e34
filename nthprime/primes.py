"""
Basic Sieve of Eratosthenes.

Responsibility: primes up to N in a single pass. No segmentation, no indexing.
"""

import numpy as np


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Multiples of each prime p are crossed off starting at p*p; the smaller
    multiples were already crossed off by smaller prime factors.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1 (empty for N < 0).
    """
    flags = np.ones(max(N + 1, 0), dtype=bool)
    flags[:2] = False
    p = 2
    while p * p <= N:
        if flags[p]:
            flags[p*p::p] = False
        p += 1
    return flags


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

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
    flags = prime_flags_upto(N)
    return np.nonzero(flags)[0].astype(np.int64)
