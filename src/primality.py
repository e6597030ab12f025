from typing import List

from sympy import isprime, primefactors


def is_prime(n: int) -> bool:
    """
    Decide whether n is prime.

    sympy's isprime is deterministic below 2^64 (Miller-Rabin with a fixed
    base set) and runs the strong BPSW test above that, for which no
    composite is known to pass.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"is_prime expects an int, got {type(n).__name__}")
    if n < 2:
        return False
    return bool(isprime(n))


def prime_factors(n: int) -> List[int]:
    """Sorted distinct prime divisors of n (n >= 1)."""
    if n < 1:
        raise ValueError(f"n = {n} must be positive")
    return [int(q) for q in primefactors(n)]
