"""
N-th prime via an adaptive-bound segmented Sieve of Eratosthenes.
"""

from .nth_prime import PrimeNumberSieve, estimate_upper_bound, nth_prime, prime_at_indices
from .primes import prime_flags_upto, primes_upto
from .segmented_sieve import segmented_primes_upto
from .sieves import SIEVES, BasicSieve, SegmentedSieve, Sieve, get_sieve

__all__ = [
    'nth_prime',
    'prime_at_indices',
    'estimate_upper_bound',
    'PrimeNumberSieve',
    'prime_flags_upto',
    'primes_upto',
    'segmented_primes_upto',
    'Sieve',
    'BasicSieve',
    'SegmentedSieve',
    'SIEVES',
    'get_sieve',
]
