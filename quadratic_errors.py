"""
quadratic_errors.py

Exceptions raised by the quadratic solver and its input/output helpers.
"""


class InvalidCoefficient(ValueError):
    """The coefficients do not describe a quadratic equation."""


class ParseError(ValueError):
    """Text could not be parsed as a coefficient or a result record."""
