"""
Generic factorial.

Works over any integer-like type supporting +, -, *, < and ==, and
constructible from a Python int via type(n)(1). Python int
grows without bound; numpy fixed-width scalars wrap on overflow,
and detecting that is the caller's job.
"""

from typing import Any, Protocol, TypeVar


class IntegerRing(Protocol):
    """Minimal integer ring: add, subtract, multiply, compare."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __eq__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=IntegerRing)


def ring_one(n: T) -> T:
    """Return the multiplicative identity in the type of n."""
    return type(n)(1)


def factorial(n: T) -> T:
    """
    Compute n! in the type of n.

    Iterative: acc = 1; while 1 < k: acc *= k; k -= 1.
    0! = 1! = 1. Negative input is not validated and yields one.

    Parameters
    ----------
    n : IntegerRing
        Non-negative value (int, np.uint64, np.int32, ...).

    Returns
    -------
    IntegerRing
        n! with the same type as n.
    """
    one = ring_one(n)
    result = one
    k = n
    while one < k:
        result = result * k
        k = k - one
    return result
