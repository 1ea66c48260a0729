"""polysolve — polynomial arithmetic and closed-form equation solving."""

from polysolve.equation import INFINITE, Equation, Solutions
from polysolve.polynomial import Polynomial
from polysolve.engine import solve_equation
from polysolve.parsing import parse_equation, parse_polynomial

__all__ = [
    "Polynomial",
    "Equation",
    "Solutions",
    "INFINITE",
    "solve_equation",
    "parse_equation",
    "parse_polynomial",
]
