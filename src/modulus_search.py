"""
Search for FFT-friendly primes p = cofactor * 2^k + 1 of a fixed bit width.

Cofactors are walked downwards from 2^(target_bits - k) - 1, so the first
hit is the largest such prime that still has exactly target_bits bits.
"""

from typing import Iterator, Tuple

from field_errors import InvalidSpec, SearchExhausted
from field_params import FieldSpec
from primality import is_prime

DEFAULT_MAX_TRIALS = 10_000


def candidate_cofactors(target_bits: int, k: int) -> Iterator[int]:
    """
    Yield cofactors c with 2^(target_bits-k-1) <= c < 2^(target_bits-k), largest first.
    Every c in this range gives p = c * 2^k + 1 of exactly target_bits bits.
    """
    upper = (1 << (target_bits - k)) - 1
    lower = 1 << (target_bits - k - 1)
    for cofactor in range(upper, lower - 1, -1):
        yield cofactor


def find_modulus(target_bits: int, k: int, max_trials: int = DEFAULT_MAX_TRIALS,
                 skip_multiples_of_three: bool = True, verbose: bool = False) -> Tuple[int, int]:
    """
    Find the first prime p = cofactor * 2^k + 1 with target_bits bits.

    Args:
        target_bits: Bit width of p
        k: Power of two that must divide p - 1
        max_trials: Number of cofactors to step through (skipped ones included)
        skip_multiples_of_three: Skip cofactors divisible by 3 without a primality test
        verbose: Print search progress

    Returns:
        (p, cofactor)

    Raises:
        InvalidSpec: If k < 1, k >= target_bits or max_trials < 1
        SearchExhausted: If no prime is found in the range or within max_trials
    """
    FieldSpec(target_bits, k).validate()
    if max_trials < 1:
        raise InvalidSpec(f"max_trials = {max_trials} must be positive")

    if verbose:
        print(f"Searching for prime p = c * 2^{k} + 1 with {target_bits} bits")
        print(f"Starting from c = 2^{target_bits - k} - 1, at most {max_trials} candidates")

    tested = 0
    for trial, cofactor in enumerate(candidate_cofactors(target_bits, k)):
        if trial >= max_trials:
            raise SearchExhausted(
                f"No prime p = c * 2^{k} + 1 with {target_bits} bits after {max_trials} candidates "
                f"({tested} primality tests)"
            )
        if skip_multiples_of_three and cofactor % 3 == 0:
            continue
        p = (cofactor << k) + 1
        tested += 1
        if is_prime(p):
            if verbose:
                print(f"Found prime after {trial + 1} candidates ({tested} primality tests): "
                      f"p = {p} = {cofactor} * 2^{k} + 1")
            return p, cofactor

    raise SearchExhausted(
        f"Cofactor range for {target_bits}-bit p = c * 2^{k} + 1 exhausted "
        f"({tested} primality tests)"
    )
