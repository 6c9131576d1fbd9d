"""
Factorization utilities.

Responsibility: divisor enumeration, cleanly separated.
This file must not know about sieves or prime generation.
"""

from typing import List


def factors_for_number(number: int) -> List[int]:
    """
    Return all positive divisors of number, ascending.

    Trial-divides candidates from 2 upward while candidate < limit,
    where limit shrinks to number // candidate on each exact division.
    Small divisors collect in a head list, their paired large divisors
    in a tail list; perfect-square midpoints are kept once.

    Parameters
    ----------
    number : int
        Positive integer to factor.

    Returns
    -------
    list
        Divisors of number, including 1 and number itself.

    Raises
    ------
    ValueError
        If number < 1.
    """
    number = int(number)
    if number < 1:
        raise ValueError(f"{number} is not a positive integer")
    if number == 1:
        return [1]

    head = [1]
    tail = [number]
    current = 2
    limit = number

    while current < limit:
        if number % current == 0:
            limit = number // current
            tail.append(limit)
            if limit != current:
                head.append(current)
        current += 1

    # tail was built largest-first
    return head + tail[::-1]
