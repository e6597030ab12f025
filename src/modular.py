from math import gcd

from sympy import factorint


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Compute (base^exp) % mod efficiently."""
    if exp < 0:
        raise ValueError(f"Negative exponent {exp} is not supported")
    if mod < 1:
        raise ValueError(f"Modulus must be positive, got {mod}")
    if mod == 1:
        return 0
    result = 1
    base = base % mod
    while exp > 0:
        if exp % 2 == 1:
            result = (result * base) % mod
        exp = exp >> 1
        base = (base * base) % mod
    return result


def two_adic_order(element: int, modulus: int, k: int) -> int:
    """
    Return e such that the multiplicative order of element mod modulus is 2^e.

    The order must divide 2^k. Squares the element until it reaches 1; the
    number of squarings needed is the exponent.

    Raises:
        ValueError: If element^(2^k) != 1 (mod modulus)
    """
    if k < 0:
        raise ValueError(f"k = {k} must be non-negative")
    x = element % modulus
    for e in range(k + 1):
        if x == 1:
            return e
        x = (x * x) % modulus
    raise ValueError(f"Order of {element} mod {modulus} does not divide 2^{k}")


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def multiplicative_order(element: int, modulus: int, known_order_upper_bound: int) -> int:
    """
    Exact multiplicative order of element modulo modulus.

    Args:
        element: Unit modulo modulus
        modulus: Modulus (> 1)
        known_order_upper_bound: A multiple of the order, e.g. p - 1 or 2^k

    Returns:
        The smallest n >= 1 with element^n == 1 (mod modulus)
    """
    if modulus < 2:
        raise ValueError(f"Modulus must be at least 2, got {modulus}")
    if known_order_upper_bound < 1:
        raise ValueError(f"Order bound must be positive, got {known_order_upper_bound}")
    if gcd(element % modulus, modulus) != 1:
        raise ValueError(f"{element} is not invertible mod {modulus}")

    if _is_power_of_two(known_order_upper_bound):
        k = known_order_upper_bound.bit_length() - 1
        return 1 << two_adic_order(element, modulus, k)

    if mod_pow(element, known_order_upper_bound, modulus) != 1:
        raise ValueError(f"Order of {element} mod {modulus} does not divide {known_order_upper_bound}")

    order = known_order_upper_bound
    for q in factorint(known_order_upper_bound):
        while order % q == 0 and mod_pow(element, order // q, modulus) == 1:
            order //= q
    return order


def is_primitive_root_of_unity(omega: int, n: int, p: int) -> bool:
    """Check that omega has multiplicative order exactly n modulo p."""
    if n < 1 or (p - 1) % n != 0:
        return False
    if omega % p == 0:
        return False
    if mod_pow(omega, n, p) != 1:
        return False
    return multiplicative_order(omega, p, n) == n
