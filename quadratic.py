"""
quadratic.py

Solves quadratic equations of the form ax^2 + bx + c = 0.
"""
import math
from dataclasses import dataclass
from typing import ClassVar, Union

from quadratic_errors import InvalidCoefficient


@dataclass(frozen=True, slots=True)
class RealRoots:
    kind: ClassVar[str] = "r"

    root1: float
    root2: float


@dataclass(frozen=True, slots=True)
class ComplexRoots:
    kind: ClassVar[str] = "c"

    root1: complex
    root2: complex  # always root1.conjugate()


RootResult = Union[RealRoots, ComplexRoots]


def discriminant(a: float, b: float, c: float) -> float:
    return b * b - 4 * a * c


def _check_finite(a: float, b: float, c: float, *values: float) -> None:
    if not all(math.isfinite(v) for v in values):
        raise InvalidCoefficient(f"Roots overflow for a={a}, b={b}, c={c}.")


def solve(a: float, b: float, c: float) -> RootResult:
    """
    Solves a quadratic equation of the form ax^2 + bx + c = 0.

    Args:
        a (float): Coefficient of x^2. Must not be zero.
        b (float): Coefficient of x.
        c (float): Constant term.

    Returns:
        RootResult: RealRoots when the discriminant is non-negative,
                    otherwise ComplexRoots holding a conjugate pair.
                    root1 always takes the '+' branch of the formula.

    Raises:
        InvalidCoefficient: If 'a' is zero, any coefficient is NaN or infinite,
                            or the discriminant or a root overflows.

    Example:
        >>> solve(1, -7, 10)
        RealRoots(root1=5.0, root2=2.0)
        >>> solve(1, 2, 5)
        ComplexRoots(root1=(-1+2j), root2=(-1-2j))
    """
    for name, value in (("a", a), ("b", b), ("c", c)):
        if not math.isfinite(value):
            raise InvalidCoefficient(f"Coefficient '{name}' must be a finite number, got {value}.")
    if a == 0:
        raise InvalidCoefficient("Coefficient 'a' cannot be zero for a quadratic equation.")

    delta = discriminant(a, b, c)
    if not math.isfinite(delta):
        raise InvalidCoefficient(f"Discriminant overflows for a={a}, b={b}, c={c}.")

    if delta >= 0:
        root = math.sqrt(delta)
        x1, x2 = (-b + root) / (2 * a), (-b - root) / (2 * a)
        _check_finite(a, b, c, x1, x2)
        return RealRoots(x1, x2)

    # Complex roots
    real, imag = -b / (2 * a), math.sqrt(-delta) / (2 * a)
    _check_finite(a, b, c, real, imag)
    x1 = complex(real, imag)
    return ComplexRoots(x1, x1.conjugate())
