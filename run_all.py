#!/usr/bin/env python3
"""
Full verification script.

Running this file cross-validates the sieve, the primality tester, the
prime counter, the divisor enumeration and the factorial instantiations,
and writes the summary table.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
import sys
import time
import yaml
from pathlib import Path

from numtheory.verification import DEFAULT_CONFIG, run_verification


def main():
    parser = argparse.ArgumentParser(description='Run all number-theory verifications')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the summary')
    args = parser.parse_args()

    # Load config
    with open(args.config) as f:
        config = yaml.safe_load(f) or {}

    print("=" * 60)
    print("Number Theory Utilities - Verification Suite")
    print("=" * 60)
    print("\nConfiguration:")
    for key in ('sieve_bounds', 'prime_counts', 'factor_numbers', 'factorial_inputs'):
        print(f"  {key} = {config.get(key, DEFAULT_CONFIG[key])}")
    print()

    output_dir = Path(config.get('output_dir', DEFAULT_CONFIG['output_dir']))
    output_dir.mkdir(parents=True, exist_ok=True)

    start = time.time()
    df = run_verification(config, verbose=not args.quiet)
    total_time = time.time() - start

    csv_path = output_dir / 'verification_summary.csv'
    df.to_csv(csv_path, index=False)

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(df.to_string(index=False))
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"Results saved to: {csv_path.absolute()}")

    failed = df[~df['passed']]
    if len(failed) == 0:
        print("\n✓ All verifications passed!")
    else:
        print(f"\n✗ {len(failed)} verifications failed!")
        sys.exit(1)


if __name__ == '__main__':
    main()
