"""Command-line access to a few of the drills."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from drills.arrays import reverse_in_place, rotate_left
from drills.recursion import fibonacci, power


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drills", description="Run a small array or recursion drill."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    reverse = commands.add_parser("reverse", help="reverse a list of integers")
    reverse.add_argument("values", nargs="+", type=int)

    rotate = commands.add_parser("rotate", help="rotate integers K places to the left")
    rotate.add_argument("k", type=int)
    rotate.add_argument("values", nargs="+", type=int)

    raise_to = commands.add_parser("power", help="raise a base to an exponent")
    raise_to.add_argument("base", type=int)
    raise_to.add_argument("exponent", type=int)

    fib = commands.add_parser("fibonacci", help="print the N-th Fibonacci term")
    fib.add_argument("n", type=int)
    return parser


def _join(values: Sequence[int]) -> str:
    return " ".join(str(item) for item in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, run the chosen drill and print its result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "reverse":
            values = list(args.values)
            reverse_in_place(values)
            output = _join(values)
        elif args.command == "rotate":
            output = _join(rotate_left(args.values, args.k))
        elif args.command == "power":
            output = str(power(args.base, args.exponent))
        else:
            output = str(fibonacci(args.n))
    except ValueError as exc:
        parser.error(str(exc))
    print(output)
    return 0