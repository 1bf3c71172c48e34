#!/usr/bin/env python3
"""
Benchmark the registered sieves on the n-th prime resolver.

Times every configured index against every sieve, checks that the sieves
agree, and writes nth_prime_benchmark.csv to the output directory.

Usage:
    python benchmark.py
    python benchmark.py --repeats 5 --config config/custom.yaml
"""

import argparse
import time
from pathlib import Path

import numpy as np
import pandas as pd

from nthprime.config import DEFAULT_CONFIG_PATH, load_config
from nthprime.nth_prime import nth_prime
from nthprime.sieves import SIEVES, get_sieve


def benchmark(indices: list, repeats: int, output_dir: Path) -> pd.DataFrame:
    """Time nth_prime for each (sieve, index) pair."""
    print("=" * 60)
    print(f"N-th prime benchmark: {len(indices)} indices x {len(SIEVES)} sieves, {repeats} repeats")
    print("=" * 60)

    rows = []
    for name in sorted(SIEVES):
        sieve = get_sieve(name)
        print("-" * 60)
        print(f"Sieve: {name}")
        print("-" * 60)

        for n in indices:
            times = []
            for _ in range(repeats):
                t0 = time.time()
                p = nth_prime(n, sieve)
                times.append(time.time() - t0)

            rows.append({
                'sieve': name,
                'index': n,
                'prime': p,
                'mean_s': float(np.mean(times)),
                'min_s': float(np.min(times)),
            })
            print(f"  n={n:,}: {p:,}  mean {np.mean(times):.4f}s  min {np.min(times):.4f}s")
        print()

    df = pd.DataFrame(rows)

    # Every sieve must resolve every index to the same prime
    agreement = df.groupby('index')['prime'].nunique()
    mismatched = agreement[agreement > 1]
    if len(mismatched):
        print(f"MISMATCH at indices: {list(mismatched.index)}")
    else:
        print("All sieves agree.")

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'nth_prime_benchmark.csv', index=False)
    print(f"  Results saved to {output_dir}")

    return df


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Benchmark n-th prime sieves')
    parser.add_argument('--config', type=str, default=str(DEFAULT_CONFIG_PATH),
                        help='Path to config file')
    parser.add_argument('--repeats', type=int, default=None,
                        help='Timing repeats (overrides config)')
    args = parser.parse_args()

    config = load_config(args.config)
    repeats = args.repeats if args.repeats is not None else config['repeats']

    df = benchmark(config['indices'], repeats, Path(config['output_dir']))
    print("\nSummary:")
    print(df.pivot(index='index', columns='sieve', values='mean_s').to_string())
