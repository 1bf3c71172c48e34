"""
Interchangeable sieve implementations.

Every sieve answers one question: the ordered primes up to N. The resolver
only talks to this interface, so a new algorithm is one subclass plus a
registry entry.
"""

from abc import ABC, abstractmethod
from typing import Dict, Type

import numpy as np

from .primes import primes_upto
from .segmented_sieve import segmented_primes_upto


class Sieve(ABC):
    """Produces the ascending primes in [2, N]."""

    name = None

    @abstractmethod
    def primes_upto(self, N: int) -> np.ndarray:
        """Return an ascending int64 array of every prime <= N."""

    def __repr__(self):
        return f"{type(self).__name__}()"


class BasicSieve(Sieve):
    """Single-pass Sieve of Eratosthenes; O(N) memory."""

    name = 'basic'

    def primes_upto(self, N: int) -> np.ndarray:
        return primes_upto(N)


class SegmentedSieve(Sieve):
    """Block-wise Sieve of Eratosthenes; O(sqrt(N)) working memory."""

    name = 'segmented'

    def primes_upto(self, N: int) -> np.ndarray:
        return segmented_primes_upto(N)


SIEVES: Dict[str, Type[Sieve]] = {
    BasicSieve.name: BasicSieve,
    SegmentedSieve.name: SegmentedSieve,
}

DEFAULT_SIEVE = SegmentedSieve.name


def get_sieve(name: str = DEFAULT_SIEVE) -> Sieve:
    """Instantiate a registered sieve by name."""
    try:
        return SIEVES[name]()
    except KeyError:
        available = ', '.join(sorted(SIEVES))
        raise ValueError(f"Unknown sieve {name!r} (available: {available})") from None
