"""
Prime generation utilities.

Responsibility: primality and prime enumeration only. No factorization.

Three independent routines live here:
- is_prime: trial division over 6k±1 candidates
- list_of_primes: odd-only Sieve of Eratosthenes (exclusive bound)
- find_number_of_primes: first N primes by trial division against
  the primes found so far

Odd-only index mapping used by the sieve:
- Index i → 2i + 3
- n (odd, n >= 3) → (n - 3) // 2

For n=3: index 0 ✓
For n=9: index 3 ✓
For n=p²: index (p² - 3) // 2, step p in index space (2p in value space)
"""

import math
import numpy as np
from typing import List, Optional


def is_prime(num: int) -> bool:
    """
    Return True iff num is prime.

    Uses trial division by i and i+2 for i = 5, 11, 17, ... (the 6k±1
    candidates). Values 0 through 3 take the early branch and are all
    reported prime, so is_prime(1) is True. Negative values are not prime.

    Parameters
    ----------
    num : int
        Integer to test.

    Returns
    -------
    bool
        True if num is prime (or num <= 3 and non-negative).
    """
    num = int(num)
    if num < 0:
        return False
    if num <= 3:
        return True

    # multiples of 2 or 3 above 3
    if num % 2 == 0 or num % 3 == 0:
        return False

    i = 5
    while i * i <= num:
        if num % i == 0 or num % (i + 2) == 0:
            return False
        i += 6
    return True


def prime_count_estimate(n: int) -> int:
    """
    Approximate pi(n), the number of primes <= n.

    Uses n/ln(n) * (1 + 1.2762/ln(n)), an upper bound for n >= 2.
    """
    if n < 2:
        return 0
    log_n = math.log(n)
    return int(math.ceil(n / log_n * (1 + 1.2762 / log_n)))


def _odd_sieve(bound: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff 2i+3 is prime.

    Covers odd candidates in [3, bound) only.
    """
    size = max((bound - 2) // 2, 0)
    flags = np.ones(size, dtype=bool)

    for i in range(size):
        p = 2 * i + 3
        start = (p * p - 3) // 2
        if start >= size:
            break
        if flags[i]:
            flags[start::p] = False
    return flags


def list_of_primes(bound: int) -> Optional[List[int]]:
    """
    Return all primes strictly less than bound, ascending.

    Parameters
    ----------
    bound : int
        Upper bound (exclusive).

    Returns
    -------
    list or None
        Primes in [2, bound), or None if bound < 2.
    """
    bound = int(bound)
    if bound < 2:
        return None
    if bound == 2:
        return []

    flags = _odd_sieve(bound)
    odd_primes = 2 * np.nonzero(flags)[0] + 3
    return [2] + odd_primes.tolist()


def find_number_of_primes(count: int) -> Optional[List[int]]:
    """
    Return the first count primes, ascending.

    Each odd candidate is divided only by the primes already found,
    stopping at the first divisor or once p*p exceeds the candidate.

    Parameters
    ----------
    count : int
        Number of primes wanted (>= 1).

    Returns
    -------
    list or None
        The first count primes, or None if count < 1.
    """
    count = int(count)
    if count < 1:
        return None

    primes = [2]
    candidate = 3
    while len(primes) < count:
        for p in primes:
            if p * p > candidate:
                primes.append(candidate)
                break
            if candidate % p == 0:
                break
        else:
            primes.append(candidate)
        candidate += 2
    return primes
