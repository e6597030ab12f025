"""
field_gen.py

Generate, verify and export complete field parameter sets.

API:
 - generate_field(spec, config) -> GeneratedField
 - generate_fields(specs, config) -> [GeneratedField]
 - find_field_with_root_of_unity(n, min_value) -> (p, omega)
 - verify_generated_field(field) -> (ok, issues_list)
 - write_fields_json(path, fields)
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from field_config import DEFAULT_CONFIG
from field_errors import InvalidSpec, SearchExhausted
from extension_search import find_irreducible
from field_params import ExtensionPolynomial, FieldParameters, FieldSpec, GeneratedField
from gf_poly import has_root, is_irreducible
from modular import is_primitive_root_of_unity
from modulus_search import find_modulus
from primality import is_prime
from root_of_unity import find_nth_root_of_unity, find_root_of_unity


def _merged(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    cfg = DEFAULT_CONFIG.copy()
    if config:
        cfg.update(config)
    return cfg


def generate_field(spec: FieldSpec, config: Optional[Dict[str, Any]] = None,
                   verbose: bool = False) -> GeneratedField:
    """
    Run the modulus search, the root-of-unity search and, for extension_degree >= 2,
    the extension polynomial search for one request.
    """
    cfg = _merged(config)
    spec.validate()
    k = spec.min_smooth_exponent

    p, cofactor = find_modulus(
        spec.target_bits, k,
        max_trials=cfg["max_modulus_trials"],
        skip_multiples_of_three=cfg["skip_multiples_of_three"],
        verbose=verbose,
    )
    omega = find_root_of_unity(p, cofactor, k, max_trials=cfg["max_root_trials"], verbose=verbose)
    params = FieldParameters(p, cofactor, k, omega)

    extension = None
    if spec.extension_degree:
        extension = find_irreducible(
            p, spec.extension_degree,
            max_trials=cfg["max_polynomial_trials"],
            verbose=verbose,
        )
    return GeneratedField(spec, params, extension)


def generate_fields(specs: Iterable[FieldSpec], config: Optional[Dict[str, Any]] = None,
                    verbose: bool = False) -> List[GeneratedField]:
    """Generate each request independently; the first failure propagates."""
    return [generate_field(spec, config=config, verbose=verbose) for spec in specs]


def find_field_with_root_of_unity(n: int, min_value: int, max_trials: int = 1_000_000,
                                  verbose: bool = False) -> Tuple[int, int]:
    """
    Find the smallest prime p >= min_value with p = 1 (mod n), and a primitive
    nth root of unity mod p.

    Args:
        n: Required root-of-unity order
        min_value: Lower bound for p
        max_trials: Number of candidates j * n + 1 to examine

    Returns:
        (p, omega)
    """
    if n < 1:
        raise InvalidSpec(f"n = {n} must be positive")

    # Start search from the smallest j such that j * n + 1 >= min_value
    j = max(1, (min_value - 1) // n)

    if verbose:
        print(f"Searching for prime p = 1 (mod {n}) with p >= {min_value}")
        print(f"Starting search from j = {j}")

    for _ in range(max_trials):
        candidate = j * n + 1
        if candidate >= min_value and is_prime(candidate):
            if verbose:
                print(f"Found suitable prime: p = {candidate} ({candidate.bit_length()} bits)")
            return candidate, find_nth_root_of_unity(candidate, n, verbose=verbose)
        j += 1

    raise SearchExhausted(f"No prime p = 1 (mod {n}) with p >= {min_value} after {max_trials} candidates")


def verify_field_parameters(params: FieldParameters) -> Tuple[bool, List[str]]:
    """Re-check primality, the shape of p - 1 and the order of omega."""
    issues: List[str] = []
    p, k = params.p, params.k
    if not is_prime(p):
        issues.append(f"p = {p} is not prime")
    if k < 1:
        issues.append(f"smooth exponent {k} must be at least 1")
    elif p - 1 != params.cofactor << k:
        issues.append(f"p - 1 != cofactor * 2^{k}")
    elif not is_primitive_root_of_unity(params.omega, params.order, p):
        issues.append(f"omega = {params.omega} does not have order exactly 2^{k} mod p")
    return (len(issues) == 0, issues)


def verify_extension(ext: ExtensionPolynomial) -> Tuple[bool, List[str]]:
    """Check that the extension polynomial is monic, root-free and irreducible over F_p."""
    issues: List[str] = []
    f = ext.to_gf_poly()
    if f.degree != ext.degree or f.leading != 1:
        issues.append(f"{ext.coefficients} is not monic of degree {ext.degree}")
    if has_root(f):
        issues.append(f"{f} has a root in F_{ext.modulus}")
    if not is_irreducible(f):
        issues.append(f"{f} is reducible over F_{ext.modulus}")
    return (len(issues) == 0, issues)


def verify_generated_field(field: GeneratedField) -> Tuple[bool, List[str]]:
    _, issues = verify_field_parameters(field.parameters)
    if field.spec.extension_degree:
        if field.extension is None:
            issues.append("extension polynomial missing")
        else:
            if field.extension.modulus != field.parameters.p:
                issues.append("extension polynomial defined over a different modulus")
            if field.extension.degree != field.spec.extension_degree:
                issues.append(f"extension degree {field.extension.degree} != requested "
                              f"{field.spec.extension_degree}")
            issues.extend(verify_extension(field.extension)[1])
    if field.parameters.bits != field.spec.target_bits:
        issues.append(f"p has {field.parameters.bits} bits, requested {field.spec.target_bits}")
    return (len(issues) == 0, issues)


def write_fields_json(path: str, fields: Iterable[GeneratedField], indent: int = 2) -> None:
    """
    Write the fields' to_dict() outputs to a temp file and atomically move into place.
    """
    data = [f.to_dict() for f in fields]
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=p.name, dir=str(p.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=indent)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp, str(p))
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)
