"""
coefficient_reader.py

Reads quadratic coefficients from text, either given directly or typed in
at an interactive prompt.
"""
import math
import sys
from typing import Optional, TextIO, Tuple

from quadratic_errors import InvalidCoefficient, ParseError


def parse_coefficient(text: str, name: str) -> float:
    """
    Parses one coefficient.

    Args:
        text (str): The raw text, surrounding whitespace is ignored.
        name (str): Coefficient name used in error messages ('a', 'b' or 'c').

    Returns:
        float: The parsed value.

    Raises:
        ParseError: If the text is empty, not a number, NaN or infinite.
    """
    stripped = text.strip()
    try:
        value = float(stripped)
    except ValueError:
        raise ParseError(f"Coefficient '{name}' must be a number, got {stripped!r}.") from None
    if not math.isfinite(value):
        raise ParseError(f"Coefficient '{name}' must be a finite number, got {stripped!r}.")
    return value


def prompt_coefficient(name: str, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> float:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    print(f"Enter {name}: ", end="", file=stdout, flush=True)
    line = stdin.readline()
    if not line:
        raise ParseError(f"No input received for coefficient '{name}'.")
    return parse_coefficient(line, name)


def read_coefficients(
    a: Optional[float] = None,
    b: Optional[float] = None,
    c: Optional[float] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Tuple[float, float, float]:
    """
    Prompts for whichever of a, b and c were not already given, in that order.

    'a' is checked before the other prompts, so a zero leading coefficient
    stops the run without asking for 'b' and 'c'.

    Raises:
        ParseError: If an answer is not a finite number or input ends early.
        InvalidCoefficient: If 'a' is zero.
    """
    if a is None:
        a = prompt_coefficient("a", stdin, stdout)
    if a == 0:
        raise InvalidCoefficient("Coefficient 'a' cannot be zero for a quadratic equation.")
    if b is None:
        b = prompt_coefficient("b", stdin, stdout)
    if c is None:
        c = prompt_coefficient("c", stdin, stdout)
    return a, b, c
