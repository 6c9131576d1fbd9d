"""
Cross-validation of the prime, divisor and factorial routines.

Compares:
1. list_of_primes(B) against is_prime over [2, B)
2. find_number_of_primes(N) against a prefix of list_of_primes
3. factors_for_number(M) against the divisor properties (divides M,
   paired, strictly ascending)
4. factorial over Python int against numpy fixed-width instantiations

The primality tester reports 1 (and 0) as prime, so the sieve comparison
starts at 2.
"""

import time
import numpy as np
import pandas as pd
from typing import Any, Dict, List

from .primes import is_prime, list_of_primes, find_number_of_primes, prime_count_estimate
from .factorization import factors_for_number
from .factorial import factorial
from .str_util import string_for_sequence


DEFAULT_CONFIG = {
    'sieve_bounds': [2, 12, 1000, 100000],
    'prime_counts': [1, 5, 1000],
    'factor_numbers': [1, 4, 15, 360, 6857, 75031],
    'factorial_inputs': [0, 1, 9, 20],
    'output_dir': 'data/results',
}

# Largest n whose factorial fits each fixed-width type
FIXED_WIDTH_LIMITS = {
    np.int32: 12,
    np.int64: 20,
    np.uint64: 20,
}


def verify_sieve_against_tester(bound: int, verbose: bool = True) -> bool:
    """Verify list_of_primes(bound) equals the is_prime filter of [2, bound)."""
    if verbose:
        print(f"\n=== Verifying sieve against tester for bound={bound:,} ===")

    sieved = list_of_primes(bound)
    if bound < 2:
        ok = sieved is None
        if verbose:
            status = "✓" if ok else "✗"
            print(f"  {status} bound < 2 gives no result")
        return ok

    candidates = np.arange(2, bound, dtype=np.int64)
    flags = np.array([is_prime(n) for n in candidates], dtype=bool)
    tested = candidates[flags]

    ok = np.array_equal(np.asarray(sieved, dtype=np.int64), tested)
    if not ok and verbose:
        mismatches = np.setxor1d(np.asarray(sieved, dtype=np.int64), tested)
        for n in mismatches[:10]:
            print(f"  MISMATCH at n={n}: sieve={n in sieved}, tester={is_prime(n)}")

    if verbose:
        if ok:
            print(f"  ✓ All {len(sieved):,} primes below {bound:,} match!")
        else:
            print(f"  ✗ sieve found {len(sieved):,}, tester found {len(tested):,}")
    return ok


def verify_counter_against_sieve(count: int, verbose: bool = True) -> bool:
    """Verify find_number_of_primes(count) is a prefix of the sieve output."""
    if verbose:
        print(f"\n=== Verifying prime counter for count={count:,} ===")

    counted = find_number_of_primes(count)
    if count < 1:
        ok = counted is None
        if verbose:
            status = "✓" if ok else "✗"
            print(f"  {status} count < 1 gives no result")
        return ok

    # grow the bound until the sieve holds enough primes
    bound = max(16, count * 2)
    sieved = list_of_primes(bound)
    while len(sieved) < count:
        bound *= 2
        sieved = list_of_primes(bound)

    ok = len(counted) == count and counted == sieved[:count]
    if verbose:
        if ok:
            print(f"  ✓ First {count:,} primes match (last={counted[-1]:,})")
        else:
            errors = [i for i, (a, b) in enumerate(zip(counted, sieved)) if a != b]
            for i in errors[:10]:
                print(f"  MISMATCH at position {i}: counter={counted[i]}, sieve={sieved[i]}")
            print(f"  ✗ {len(errors)} mismatches, length {len(counted)} vs {count}")
    return ok


def verify_factors(number: int, verbose: bool = True) -> bool:
    """Verify factors_for_number(number) is a complete paired divisor list."""
    factors = factors_for_number(number)
    divisors = set(factors)

    divides = all(number % d == 0 for d in factors)
    paired = all(number // d in divisors for d in factors)
    ascending = all(a < b for a, b in zip(factors, factors[1:]))
    # brute-force completeness only where it stays cheap
    complete = True
    if number <= 10**6:
        complete = len(factors) == sum(1 for d in range(1, number + 1) if number % d == 0)

    ok = divides and paired and ascending and complete
    if verbose:
        status = "✓" if ok else "✗"
        print(f"  {status} factors({number:,}) = {string_for_sequence(factors)}")
    return ok


def verify_factorial(n: int, verbose: bool = True) -> bool:
    """Verify factorial(n) agrees across int and fixed-width numpy types."""
    expected = factorial(int(n))
    ok = True
    for dtype, limit in FIXED_WIDTH_LIMITS.items():
        if n > limit:
            continue
        got = factorial(dtype(n))
        if type(got) is not dtype or int(got) != expected:
            ok = False
            if verbose:
                print(f"  MISMATCH {dtype.__name__}: {n}! = {got}, expected {expected}")

    if verbose:
        status = "✓" if ok else "✗"
        print(f"  {status} {n}! = {expected:,}")
    return ok


def _int_list(config: Dict[str, Any], key: str, minimum: int = None) -> List[int]:
    values = config.get(key, DEFAULT_CONFIG[key])
    if not isinstance(values, (list, tuple)) or not all(
            isinstance(v, (int, np.integer)) and not isinstance(v, bool) for v in values):
        raise ValueError(f"config '{key}' must be a list of integers, got {values!r}")
    if minimum is not None and any(v < minimum for v in values):
        raise ValueError(f"config '{key}' values must be >= {minimum}, got {values!r}")
    return [int(v) for v in values]


def run_verification(config: Dict[str, Any] = None, verbose: bool = True) -> pd.DataFrame:
    """
    Run every check over the configured inputs.

    Parameters
    ----------
    config : dict, optional
        Keys from DEFAULT_CONFIG; missing keys use the defaults.
    verbose : bool
        Print progress.

    Returns
    -------
    pd.DataFrame
        One row per check: check, input, passed, size, estimate, elapsed_s.
    """
    if config is None:
        config = {}

    sieve_bounds = _int_list(config, 'sieve_bounds')
    prime_counts = _int_list(config, 'prime_counts')
    factor_numbers = _int_list(config, 'factor_numbers', minimum=1)
    factorial_inputs = _int_list(config, 'factorial_inputs', minimum=0)

    rows = []

    for bound in sieve_bounds:
        t0 = time.time()
        ok = verify_sieve_against_tester(bound, verbose)
        primes = list_of_primes(bound)
        rows.append({
            'check': 'sieve_vs_tester',
            'input': bound,
            'passed': ok,
            'size': len(primes) if primes is not None else 0,
            'estimate': prime_count_estimate(bound - 1),
            'elapsed_s': time.time() - t0,
        })

    for count in prime_counts:
        t0 = time.time()
        ok = verify_counter_against_sieve(count, verbose)
        rows.append({
            'check': 'counter_vs_sieve',
            'input': count,
            'passed': ok,
            'size': max(count, 0),
            'estimate': np.nan,
            'elapsed_s': time.time() - t0,
        })

    if verbose and factor_numbers:
        print("\n=== Verifying divisor lists ===")
    for number in factor_numbers:
        t0 = time.time()
        ok = verify_factors(number, verbose)
        rows.append({
            'check': 'factors',
            'input': number,
            'passed': ok,
            'size': len(factors_for_number(number)),
            'estimate': np.nan,
            'elapsed_s': time.time() - t0,
        })

    if verbose and factorial_inputs:
        print("\n=== Verifying factorial instantiations ===")
    for n in factorial_inputs:
        t0 = time.time()
        ok = verify_factorial(n, verbose)
        rows.append({
            'check': 'factorial',
            'input': n,
            'passed': ok,
            'size': len(str(factorial(n))),
            'estimate': np.nan,
            'elapsed_s': time.time() - t0,
        })

    return pd.DataFrame(rows, columns=['check', 'input', 'passed', 'size',
                                       'estimate', 'elapsed_s'])
