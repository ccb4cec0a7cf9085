"""
roots_writer.py

Turns a RootResult into console text and a one-line result record, and reads
such records back.

Record layout: v1,<kind>,<value1>,<value2>
    kind 'r': value1, value2 are root1 and root2.
    kind 'c': value1, value2 are the real and imaginary part of root1;
              root2 is its conjugate.
"""
import math
import sys
from typing import Optional, TextIO

from quadratic import ComplexRoots, RealRoots, RootResult
from quadratic_errors import ParseError

RECORD_VERSION = "v1"
RECORD_EXTENSION = ".csv"
DECIMALS = 4


def _fixed(value: float, sign: str = "") -> str:
    text = f"{value:{sign}.{DECIMALS}f}"
    if float(text) == 0:
        # no "-0.0000"
        text = f"{0.0:{sign}.{DECIMALS}f}"
    return text


def format_roots(result: RootResult) -> str:
    """
    Formats both roots for display, one per line.

    Example:
        >>> print(format_roots(RealRoots(5.0, 2.0)))
        Root1: 5.0000
        Root2: 2.0000
        >>> print(format_roots(ComplexRoots(complex(-1, 2), complex(-1, -2))))
        Root1: -1.0000 +2.0000i
        Root2: -1.0000 -2.0000i
    """
    if isinstance(result, RealRoots):
        return f"Root1: {_fixed(result.root1)}\nRoot2: {_fixed(result.root2)}"
    lines = []
    for label, root in (("Root1", result.root1), ("Root2", result.root2)):
        lines.append(f"{label}: {_fixed(root.real)} {_fixed(root.imag, '+')}i")
    return "\n".join(lines)


def format_record(result: RootResult) -> str:
    if isinstance(result, RealRoots):
        values = (result.root1, result.root2)
    else:
        values = (result.root1.real, result.root1.imag)
    return ",".join([RECORD_VERSION, result.kind] + [_fixed(v) for v in values])


def print_roots(result: RootResult, file: Optional[TextIO] = None) -> None:
    print(format_roots(result), file=file if file is not None else sys.stdout)


def write_record(result: RootResult, path: str) -> None:
    """
    Writes the result record to 'path', replacing any existing file.

    Args:
        result (RootResult): The roots to record.
        path (str): Destination file. Its directory must already exist.

    Raises:
        OSError: If the file cannot be created or written.
    """
    record = format_record(result) + "\n"
    with open(path, "w", encoding="utf-8") as f:
        f.write(record)


def parse_record(line: str) -> RootResult:
    """
    Parses a record produced by format_record.

    Raises:
        ParseError: If the version, kind, field count or a value is invalid.
    """
    fields = line.strip().split(",")
    if len(fields) != 4:
        raise ParseError(f"Expected 4 comma-separated fields, got {len(fields)}: {line.strip()!r}")

    version, kind, first, second = fields
    if version != RECORD_VERSION:
        raise ParseError(f"Unsupported record version: {version!r}")

    try:
        value1, value2 = float(first), float(second)
    except ValueError:
        raise ParseError(f"Record values must be numbers: {first!r}, {second!r}") from None
    if not (math.isfinite(value1) and math.isfinite(value2)):
        raise ParseError(f"Record values must be finite: {first!r}, {second!r}")

    if kind == RealRoots.kind:
        return RealRoots(value1, value2)
    if kind == ComplexRoots.kind:
        root = complex(value1, value2)
        return ComplexRoots(root, root.conjugate())
    raise ParseError(f"Unknown record kind: {kind!r}")


def read_record(path: str) -> RootResult:
    with open(path, "r", encoding="utf-8") as f:
        return parse_record(f.readline())
