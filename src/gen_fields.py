#!/usr/bin/env python3
"""
Command-line entry point for generating NTT-friendly field parameters.

For every requested field this finds a prime p = c * 2^k + 1 of the given bit
width, a root of unity of order 2^k and, optionally, an irreducible
x^d + x + c defining the degree-d extension.
"""

import argparse
import sys

from field_config import DEFAULT_CONFIG, load_config, specs_from_config
from field_errors import FieldGenerationError
from field_gen import generate_field, verify_generated_field, write_fields_json
from field_params import FieldSpec, GeneratedField


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return n


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search and verify FFT-friendly prime fields and extension polynomials",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Generate the default fields
  %(prog)s -b 160 -k 25             # One prime field
  %(prog)s -b 64 -k 25 -d 3 -v      # Cubic extension over a 64-bit prime
  %(prog)s -c fields.json -o out/fields.json --verify
        """)
    parser.add_argument('-b', '--bits', type=int,
                        help='Bit width of the prime modulus')
    parser.add_argument('-k', '--smooth-exponent', type=int,
                        help='Power of two that must divide p - 1 (required with --bits)')
    parser.add_argument('-d', '--degree', type=int, default=0,
                        help='Extension degree, 0 for the prime field only (default: 0)')
    parser.add_argument('-c', '--config', default=None,
                        help='Optional JSON config file with search bounds and a "fields" list')
    parser.add_argument('-o', '--output', default=None,
                        help='Write the generated parameters as JSON to this path')
    parser.add_argument('--max-trials', type=_positive_int, default=None,
                        help=f'Cofactors tried per modulus search (default: {DEFAULT_CONFIG["max_modulus_trials"]})')
    parser.add_argument('--no-skip-three', action='store_true',
                        help='Also test cofactors divisible by 3')
    parser.add_argument('--verify', action='store_true',
                        help='Re-check every invariant of the generated parameters')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show search progress')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print errors')
    return parser


def print_field(field: GeneratedField) -> None:
    spec = field.spec
    print(f"\n🔢 FIELD ({spec.target_bits} bits, 2^{spec.min_smooth_exponent} | p - 1"
          f"{f', degree {spec.extension_degree}' if spec.extension_degree else ''})")
    print("-" * 40)
    print(f"    {field.parameters}")
    if field.extension is not None:
        print(f"    extension: F_p[x] / ({field.extension})")


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.bits is not None and args.smooth_exponent is None:
        parser.error("--smooth-exponent is required with --bits")
    if args.bits is None and args.smooth_exponent is not None:
        parser.error("--bits is required with --smooth-exponent")

    cfg = DEFAULT_CONFIG.copy()
    if args.config:
        try:
            cfg = load_config(args.config, base=cfg)
        except (OSError, ValueError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2
    if args.max_trials is not None:
        cfg["max_modulus_trials"] = args.max_trials
    if args.no_skip_three:
        cfg["skip_multiples_of_three"] = False

    try:
        if args.bits is not None:
            specs = [FieldSpec(args.bits, args.smooth_exponent, args.degree)]
        else:
            specs = specs_from_config(cfg)
    except FieldGenerationError as e:
        print(f"❌ {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    verbose = args.verbose and not args.quiet
    success = True
    fields = []
    for spec in specs:
        try:
            field = generate_field(spec, config=cfg, verbose=verbose)
        except FieldGenerationError as e:
            print(f"❌ {type(e).__name__}: {e}", file=sys.stderr)
            success = False
            continue
        fields.append(field)
        if not args.quiet:
            print_field(field)

        if args.verify:
            ok, issues = verify_generated_field(field)
            if ok:
                if not args.quiet:
                    print("✅ Verified")
            else:
                success = False
                for issue in issues:
                    print(f"❌ {issue}", file=sys.stderr)

    if args.output and fields:
        write_fields_json(args.output, fields)
        if not args.quiet:
            print(f"\nWrote {len(fields)} field(s) to: {args.output}")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
