"""
solve_quadratic.py

Command line tool to solve quadratic equations of the form ax^2 + bx + c = 0.
"""
import argparse
import sys
from typing import List, Optional

from coefficient_reader import parse_coefficient, read_coefficients
from quadratic import solve
from quadratic_errors import InvalidCoefficient, ParseError
from roots_writer import RECORD_EXTENSION, print_roots, write_record


def _coefficient(name: str):
    def convert(text: str) -> float:
        try:
            return parse_coefficient(text, name)
        except ParseError as e:
            raise argparse.ArgumentTypeError(str(e)) from None
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solve-quadratic",
        description="Solve a quadratic equation of the form ax^2 + bx + c = 0.",
        epilog="""\
Examples:
  # Equation: x^2 - 7x + 10 = 0 (two distinct real roots)
  solve-quadratic -a 1 -b -7 -c 10

  # Equation: x^2 + x + 1 = 0 (two complex conjugate roots)
  solve-quadratic -a 1 -b 1 -c 1

  # Equation: 2x^2 + 5x - 3 = 0, also saving the result record
  solve-quadratic -a 2 -b 5 -c -3 -o roots.csv

  # Negative values in scientific notation need the '=' form
  solve-quadratic -a 1 -b=-1e3 -c 1

  # Type the coefficients in one at a time
  solve-quadratic -i""",
        formatter_class=argparse.RawTextHelpFormatter # Preserve formatting for epilog
    )
    parser.add_argument('-a', type=_coefficient('a'), help="Coefficient 'a' (cannot be zero)")
    parser.add_argument('-b', type=_coefficient('b'), help="Coefficient 'b' (write -b=-1e3 for negative exponent forms)")
    parser.add_argument('-c', type=_coefficient('c'), help="Constant term")
    parser.add_argument('-o', '--output', metavar='PATH',
                        help=f"Also write the result record to PATH (expected to end in '{RECORD_EXTENSION}')")
    parser.add_argument('-i', '--interactive', action='store_true',
                        help="Prompt on standard input for any coefficient not given as a flag")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parses arguments, solves the equation and reports the roots.

    Returns:
        int: 0 on success, 1 if the coefficients are rejected or the record
             file cannot be written. Usage errors exit with status 2.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.interactive:
        missing = [f"-{name}" for name in "abc" if getattr(args, name) is None]
        if missing:
            parser.error(f"the following arguments are required: {', '.join(missing)} (or use -i)")

    try:
        a, b, c = read_coefficients(args.a, args.b, args.c)
        roots = solve(a, b, c)
    except (InvalidCoefficient, ParseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_roots(roots)

    if args.output:
        if not args.output.lower().endswith(RECORD_EXTENSION):
            print(f"Warning: output file '{args.output}' does not end in '{RECORD_EXTENSION}'.", file=sys.stderr)
        try:
            write_record(roots, args.output)
        except OSError as e:
            print(f"Error: could not write result record to '{args.output}': {e}", file=sys.stderr)
            return 1
        print(f"Result record written to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
