"""
field_config.py
Default search bounds and field requests, plus a loader to override them via JSON files.

A config file may hold any of the DEFAULT_CONFIG keys and an optional "fields"
list, e.g.

    {"max_modulus_trials": 20000,
     "fields": [{"target_bits": 64, "k": 25, "degree": 3}]}
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from field_params import FieldSpec

DEFAULT_CONFIG: Dict[str, Any] = {
    "max_modulus_trials": 10_000,      # cofactor decrements per modulus search
    "max_root_trials": 100_000,        # bases g tried per root-of-unity search
    "max_polynomial_trials": 10_000,   # constant terms c tried per extension search
    "skip_multiples_of_three": True,   # drop cofactors divisible by 3 before testing
}

# Fields generated when nothing else is requested.
DEFAULT_FIELD_SPECS: List[FieldSpec] = [
    FieldSpec(target_bits=160, min_smooth_exponent=25),
    FieldSpec(target_bits=64, min_smooth_exponent=25, extension_degree=3),
    FieldSpec(target_bits=128, min_smooth_exponent=32, extension_degree=4),
]


def load_config(path: str, base: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Load a JSON config file and merge it into base (shallow merge).

    :param path: path to JSON config file
    :param base: base configuration dictionary to update (if None use DEFAULT_CONFIG)
    :return: merged configuration dictionary
    """
    base = base.copy() if base is not None else DEFAULT_CONFIG.copy()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must hold a JSON object, got {type(data).__name__}")
    for k, v in data.items():
        base[k] = v
    return base


def specs_from_config(cfg: Dict[str, Any]) -> List[FieldSpec]:
    """Field requests listed under "fields", or the defaults if there are none."""
    entries = cfg.get("fields")
    if not entries:
        return list(DEFAULT_FIELD_SPECS)
    return [FieldSpec.from_dict(entry) for entry in entries]
