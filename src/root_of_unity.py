"""
Roots of unity in F_p.

A candidate is g^((p-1)/n) for g = 2, 3, 4, ...; its order always divides n,
and the first one whose order is exactly n is returned. Small bases are
tried first, so the answer is the smallest-generator solution.
"""

from typing import List

from field_errors import InvalidSpec, NoRootFound
from modular import mod_pow, multiplicative_order

DEFAULT_MAX_TRIALS = 100_000


def _search_root(p: int, exponent: int, n: int, max_trials: int, verbose: bool) -> int:
    if max_trials < 1:
        raise InvalidSpec(f"max_trials = {max_trials} must be positive")
    last = min(2 + max_trials, p)
    for g in range(2, last):
        omega = mod_pow(g, exponent, p)
        if multiplicative_order(omega, p, n) == n:
            if verbose:
                print(f"Found root of unity of order {n} from base g = {g}: omega = {omega}")
            return omega
    raise NoRootFound(f"No element of order {n} mod {p} among bases 2..{last - 1}")


def find_root_of_unity(p: int, cofactor: int, k: int, max_trials: int = DEFAULT_MAX_TRIALS,
                       verbose: bool = False) -> int:
    """
    Find omega of multiplicative order exactly 2^k modulo p = cofactor * 2^k + 1.

    Raises:
        InvalidSpec: If p - 1 != cofactor * 2^k
        NoRootFound: If none of the first max_trials bases gives such an omega
    """
    if k < 1 or cofactor < 1 or p - 1 != cofactor << k:
        raise InvalidSpec(f"p - 1 = {p - 1} is not cofactor * 2^k = {cofactor} * 2^{k}")
    if verbose:
        print(f"Searching for root of unity of order 2^{k} mod {p}")
    return _search_root(p, cofactor, 1 << k, max_trials, verbose)


def find_nth_root_of_unity(p: int, n: int, max_trials: int = DEFAULT_MAX_TRIALS,
                           verbose: bool = False) -> int:
    """Find a primitive nth root of unity modulo prime p, where n divides p - 1."""
    if n < 1 or (p - 1) % n != 0:
        raise InvalidSpec(f"n = {n} does not divide p - 1 = {p - 1}")
    if n == 1:
        return 1
    return _search_root(p, (p - 1) // n, n, max_trials, verbose)


def power_series(omega: int, p: int, limit: int = 1 << 20) -> List[int]:
    """
    Return [1, omega, omega^2, ...] up to (not including) the first repeat of 1.

    Raises:
        ValueError: If the order of omega exceeds limit
    """
    omega %= p
    if omega == 0:
        raise ValueError("0 is not a root of unity")
    powers = [1]
    x = omega
    while x != 1:
        if len(powers) >= limit:
            raise ValueError(f"Order of {omega} mod {p} exceeds {limit}")
        powers.append(x)
        x = (x * omega) % p
    return powers
