"""
field_params.py

Value types passed between the searches and handed to callers.

 - FieldSpec: the request (target bit width, smooth exponent, extension degree)
 - FieldParameters: prime modulus p = cofactor * 2^k + 1 with a root of unity of order 2^k
 - ExtensionPolynomial: monic irreducible polynomial defining F_p[x]/(poly)
 - GeneratedField: everything produced for one FieldSpec
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from field_errors import InvalidSpec
from gf_poly import GFPoly


@dataclass(frozen=True)
class FieldSpec:
    target_bits: int           # bit width of the modulus
    min_smooth_exponent: int   # k such that 2^k divides p - 1
    extension_degree: int = 0  # 0 for the prime field itself

    def validate(self) -> "FieldSpec":
        """Raise InvalidSpec if no field of this shape can be searched for."""
        if self.target_bits < 2:
            raise InvalidSpec(f"target_bits = {self.target_bits} must be at least 2")
        if self.min_smooth_exponent < 1:
            raise InvalidSpec(f"min_smooth_exponent = {self.min_smooth_exponent} must be at least 1")
        if self.min_smooth_exponent >= self.target_bits:
            raise InvalidSpec(
                f"min_smooth_exponent = {self.min_smooth_exponent} must be smaller than "
                f"target_bits = {self.target_bits}"
            )
        if self.extension_degree < 0 or self.extension_degree == 1:
            raise InvalidSpec(f"extension_degree = {self.extension_degree} must be 0 or at least 2")
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldSpec":
        """
        Build a FieldSpec from a config entry.

        Accepts "k" for min_smooth_exponent and "degree" for extension_degree.
        """
        try:
            bits = data["target_bits"]
            k = data["min_smooth_exponent"] if "min_smooth_exponent" in data else data["k"]
        except KeyError as e:
            raise InvalidSpec(f"Field entry {dict(data)} is missing {e}") from None
        degree = data.get("extension_degree", data.get("degree", 0))
        try:
            return cls(int(bits), int(k), int(degree or 0))
        except (TypeError, ValueError):
            raise InvalidSpec(f"Field entry {dict(data)} has a non-integer value") from None


@dataclass(frozen=True)
class FieldParameters:
    p: int         # the prime modulus
    cofactor: int  # p - 1 = cofactor * 2^k
    k: int         # smooth exponent
    omega: int     # root of unity of order exactly 2^k

    @property
    def bits(self) -> int:
        return self.p.bit_length()

    @property
    def order(self) -> int:
        return 1 << self.k

    def __str__(self) -> str:
        return (f"p = {self.p}  (bit-length {self.bits})\n"
                f"    p - 1 = {self.cofactor} * 2^{self.k}\n"
                f"    omega = {self.omega}  (order 2^{self.k})")


@dataclass(frozen=True)
class ExtensionPolynomial:
    modulus: int
    coefficients: Tuple[int, ...]  # low-to-high, last entry is 1

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def to_gf_poly(self) -> GFPoly:
        return GFPoly(self.coefficients, self.modulus)

    def __str__(self) -> str:
        return str(self.to_gf_poly())


@dataclass(frozen=True)
class GeneratedField:
    spec: FieldSpec
    parameters: FieldParameters
    extension: Optional[ExtensionPolynomial] = None

    def to_dict(self) -> Dict[str, Any]:
        """Structured output for transcription into the arithmetic library."""
        params = self.parameters
        return {
            "modulus": params.p,
            "bits": params.bits,
            "cofactor": params.cofactor,
            "smooth_exponent": params.k,
            "root_of_unity": params.omega,
            "extension_polynomial": list(self.extension.coefficients) if self.extension else None,
            "degree": self.spec.extension_degree,
        }
