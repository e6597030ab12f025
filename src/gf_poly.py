"""
gf_poly.py

Polynomials over the prime field F_p and the irreducibility test built on them.

Classes:
 - GFPoly: immutable polynomial with coefficients in F_p, stored low-to-high.

Functions:
 - is_irreducible(f): Rabin's test, x^(p^d) == x mod f and
   gcd(x^(p^(d/q)) - x, f) == 1 for every prime q dividing d.
 - has_root(f): whether f has a root in F_p, via gcd(x^p - x, f).

The modulus p is assumed prime; inverses are taken with Fermat's little theorem.
"""

from typing import Iterable, List, Tuple

from modular import mod_pow
from primality import prime_factors


class GFPoly:
    """
    Polynomial over F_p.

    Coefficients are reduced mod p and trailing zeros are dropped, so the
    zero polynomial has no coefficients and degree -1.
    """
    __slots__ = ("coeffs", "p")

    def __init__(self, coeffs: Iterable[int], p: int):
        self.p = int(p)
        c = [int(a) % self.p for a in coeffs]
        while c and c[-1] == 0:
            c.pop()
        self.coeffs: Tuple[int, ...] = tuple(c)

    @classmethod
    def x(cls, p: int) -> "GFPoly":
        return cls([0, 1], p)

    @classmethod
    def constant(cls, value: int, p: int) -> "GFPoly":
        return cls([value], p)

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    @property
    def is_zero(self) -> bool:
        return not self.coeffs

    @property
    def leading(self) -> int:
        return self.coeffs[-1] if self.coeffs else 0

    def _coerce(self, other) -> "GFPoly":
        if isinstance(other, GFPoly):
            if other.p != self.p:
                raise ValueError(f"Polynomials over different fields: F_{self.p} and F_{other.p}")
            return other
        return GFPoly.constant(int(other), self.p)

    def __add__(self, other):
        other = self._coerce(other)
        n = max(len(self.coeffs), len(other.coeffs))
        a = self.coeffs + (0,) * (n - len(self.coeffs))
        b = other.coeffs + (0,) * (n - len(other.coeffs))
        return GFPoly([x + y for x, y in zip(a, b)], self.p)

    __radd__ = __add__

    def __neg__(self):
        return GFPoly([-a for a in self.coeffs], self.p)

    def __sub__(self, other):
        return self + (-self._coerce(other))

    def __rsub__(self, other):
        return self._coerce(other) - self

    def __mul__(self, other):
        other = self._coerce(other)
        if self.is_zero or other.is_zero:
            return GFPoly([], self.p)
        out = [0] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            if a == 0:
                continue
            for j, b in enumerate(other.coeffs):
                out[i + j] += a * b
        return GFPoly(out, self.p)

    __rmul__ = __mul__

    def __divmod__(self, other) -> Tuple["GFPoly", "GFPoly"]:
        other = self._coerce(other)
        if other.is_zero:
            raise ZeroDivisionError("polynomial division by zero")
        p = self.p
        dq = other.degree
        if self.degree < dq:
            return GFPoly([], p), self
        inv = mod_pow(other.leading, p - 2, p)
        rem = list(self.coeffs)
        quot = [0] * (self.degree - dq + 1)
        for i in range(self.degree - dq, -1, -1):
            coef = (rem[i + dq] * inv) % p
            quot[i] = coef
            if coef:
                for j, b in enumerate(other.coeffs):
                    rem[i + j] = (rem[i + j] - coef * b) % p
        return GFPoly(quot, p), GFPoly(rem[:dq], p)

    def __floordiv__(self, other):
        return divmod(self, other)[0]

    def __mod__(self, other):
        return divmod(self, other)[1]

    def monic(self) -> "GFPoly":
        """Scale so the leading coefficient is 1 (the zero polynomial is returned as is)."""
        if self.is_zero or self.leading == 1:
            return self
        inv = mod_pow(self.leading, self.p - 2, self.p)
        return GFPoly([a * inv for a in self.coeffs], self.p)

    def gcd(self, other) -> "GFPoly":
        """Monic greatest common divisor."""
        a, b = self, self._coerce(other)
        while not b.is_zero:
            a, b = b, a % b
        return a.monic()

    def pow_mod(self, exponent: int, modulus: "GFPoly") -> "GFPoly":
        """Compute self^exponent mod modulus by square-and-multiply in F_p[x]/(modulus)."""
        if exponent < 0:
            raise ValueError(f"Negative exponent {exponent} is not supported")
        modulus = self._coerce(modulus)
        result = GFPoly.constant(1, self.p) % modulus
        base = self % modulus
        while exponent > 0:
            if exponent & 1:
                result = (result * base) % modulus
            exponent >>= 1
            if exponent:
                base = (base * base) % modulus
        return result

    def evaluate(self, x: int) -> int:
        acc = 0
        for a in reversed(self.coeffs):
            acc = (acc * x + a) % self.p
        return acc

    def __eq__(self, other):
        if isinstance(other, GFPoly):
            return self.p == other.p and self.coeffs == other.coeffs
        return NotImplemented

    def __hash__(self):
        return hash((self.p, self.coeffs))

    def __repr__(self):
        return f"GFPoly({list(self.coeffs)} mod {self.p})"

    def __str__(self):
        if self.is_zero:
            return "0"
        terms: List[str] = []
        for i in range(self.degree, -1, -1):
            a = self.coeffs[i]
            if a == 0:
                continue
            if i == 0:
                terms.append(str(a))
            else:
                mono = "x" if i == 1 else f"x^{i}"
                terms.append(mono if a == 1 else f"{a}*{mono}")
        return " + ".join(terms)


def is_irreducible(f: GFPoly) -> bool:
    """Rabin irreducibility test for f over F_p."""
    d = f.degree
    if d < 1:
        return False
    if d == 1:
        return True
    f = f.monic()
    x = GFPoly.x(f.p)

    # frobenius[i] = x^(p^i) mod f
    frobenius = [x]
    for _ in range(d):
        frobenius.append(frobenius[-1].pow_mod(f.p, f))

    if frobenius[d] != x:
        return False
    for q in prime_factors(d):
        if (frobenius[d // q] - x).gcd(f).degree != 0:
            return False
    return True


def has_root(f: GFPoly) -> bool:
    """True if f has a root in F_p."""
    if f.degree < 1:
        return False
    x = GFPoly.x(f.p)
    return (x.pow_mod(f.p, f) - x).gcd(f).degree > 0
