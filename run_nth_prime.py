#!/usr/bin/env python3
"""
Resolve n-th primes from the command line.

Usage:
    python run_nth_prime.py                      # indices from config/default.yaml
    python run_nth_prime.py 0 19 1000000         # explicit indices
    python run_nth_prime.py 2000 --sieve basic
"""

import argparse
import time

from nthprime.config import DEFAULT_CONFIG_PATH, load_config
from nthprime.nth_prime import PrimeNumberSieve
from nthprime.sieves import SIEVES


def main():
    parser = argparse.ArgumentParser(description='Compute the n-th prime (0-based)')
    parser.add_argument('indices', type=int, nargs='*',
                        help='Prime indices (default: config indices)')
    parser.add_argument('--config', type=str, default=str(DEFAULT_CONFIG_PATH),
                        help='Path to config file')
    parser.add_argument('--sieve', type=str, choices=sorted(SIEVES), default=None,
                        help='Sieve implementation (overrides config)')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.sieve is not None:
        config['sieve'] = args.sieve
    indices = args.indices or config['indices']

    resolver = PrimeNumberSieve.from_config(config)

    print("=" * 60)
    print(f"N-th prime ({config['sieve']} sieve)")
    print("=" * 60)

    total_start = time.time()
    for n in indices:
        t0 = time.time()
        p = resolver.nth_prime(n)
        print(f"  {n:>12,} -> {p:>14,}   ({time.time() - t0:.3f}s)")

    print(f"\nTotal runtime: {time.time() - total_start:.2f}s")


if __name__ == '__main__':
    main()
