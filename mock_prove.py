#!/usr/bin/env python3
"""
Mock-prove y = x^3 + x + c.

Builds the polynomial circuit for a private x and constant c, lays it out
in a 2^k-row table and checks every constraint against the claimed public
output (by default the correct one).

Usage:
    python mock_prove.py --x 3 --constant 5
    python mock_prove.py --x 3 --constant 5 --public 36   # fails
    python mock_prove.py --constant 5 --shape             # structural pass only
"""

import argparse
import sys

from circuits.polynomial import PolynomialCircuit, expected_output
from primitives.errors import SynthesisError
from primitives.value import Value
from protocol.keygen import keygen
from protocol.mock_prover import MockProver

DEFAULT_K = 4


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Check a witness for y = x^3 + x + c with the mock prover'
    )
    parser.add_argument(
        '--x',
        type=int,
        default=None,
        help='Private input x (omit for an unknown witness)'
    )
    parser.add_argument(
        '--constant',
        type=int,
        default=5,
        help='Circuit constant c (default: 5)'
    )
    parser.add_argument(
        '--k',
        type=int,
        default=DEFAULT_K,
        help=f'log2 of the table height (default: {DEFAULT_K})'
    )
    parser.add_argument(
        '--public',
        type=int,
        default=None,
        help='Claimed public output y (default: x^3 + x + c)'
    )
    parser.add_argument(
        '--shape',
        action='store_true',
        help='Only run the structural pass and print the table shape'
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    x = Value.unknown() if args.x is None else Value.known(args.x)
    circuit = PolynomialCircuit(constant=args.constant, x=x)

    if args.shape:
        try:
            shape = keygen(args.k, circuit)
        except SynthesisError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(shape.summary())
        return 0

    if args.public is not None:
        public = args.public
    elif args.x is not None:
        public = int(expected_output(args.x, args.constant))
    else:
        print("Error: --public is required when --x is omitted", file=sys.stderr)
        return 1

    print(f"Running mock prover (k = {args.k}, c = {args.constant}, y = {public})...")
    try:
        prover = MockProver.run(args.k, circuit, [[public]])
    except SynthesisError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    failures = prover.verify()
    if not failures:
        print("Verification succeeded")
        return 0

    print(f"Verification failed with {len(failures)} failure(s):")
    for failure in failures:
        print(f"  ERROR: {failure}")
    return 1


if __name__ == '__main__':
    sys.exit(main())
