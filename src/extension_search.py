"""
Defining polynomials for extension fields F_p^d.

Only the shape x^d + x + c is searched, with c = 1, 2, 3, ...
"""

from field_errors import InvalidSpec, NoPolynomialFound
from field_params import ExtensionPolynomial
from gf_poly import GFPoly, is_irreducible
from primality import is_prime

DEFAULT_MAX_TRIALS = 10_000


def trinomial(p: int, degree: int, c: int) -> GFPoly:
    """x^degree + x + c over F_p."""
    coeffs = [0] * (degree + 1)
    coeffs[0] = c
    coeffs[1] = 1
    coeffs[degree] = 1
    return GFPoly(coeffs, p)


def find_irreducible(p: int, degree: int, max_trials: int = DEFAULT_MAX_TRIALS,
                     verbose: bool = False) -> ExtensionPolynomial:
    """
    Find the irreducible x^degree + x + c over F_p with the smallest c >= 1.

    Args:
        p: Prime modulus of the base field
        degree: Extension degree (>= 2)
        max_trials: Largest constant term to try
        verbose: Print search progress

    Raises:
        InvalidSpec: If degree < 2, p is not prime or max_trials < 1
        NoPolynomialFound: If no c in 1..min(max_trials, p - 1) works
    """
    if degree < 2:
        raise InvalidSpec(f"Extension degree {degree} must be at least 2")
    if not is_prime(p):
        raise InvalidSpec(f"Base field modulus {p} is not prime")
    if max_trials < 1:
        raise InvalidSpec(f"max_trials = {max_trials} must be positive")

    last = min(max_trials, p - 1)
    if verbose:
        print(f"Searching for irreducible x^{degree} + x + c over F_{p}, c = 1..{last}")

    for c in range(1, last + 1):
        f = trinomial(p, degree, c)
        if is_irreducible(f):
            if verbose:
                print(f"Found irreducible polynomial {f} after {c} trials")
            return ExtensionPolynomial(p, f.coeffs)

    raise NoPolynomialFound(f"No irreducible x^{degree} + x + c over F_{p} for c = 1..{last}")
