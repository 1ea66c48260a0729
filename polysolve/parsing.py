"""Parse equation strings into :class:`Polynomial` / :class:`Equation`.

Accepts the forms people type, e.g. ``x^2 - 5x + 6 = 0``,
``3(x + 1) = 2x`` or ``(x - 1)(x + 2) = 4``.  Exactly one letter may be used
as the unknown; expressions are expanded with SymPy and must come out as a
polynomial with whole, non-negative exponents.
"""

import math
import re

from sympy import Symbol, expand
from sympy.parsing.sympy_parser import (
    parse_expr, standard_transformations, implicit_multiplication_application,
    convert_xor, rationalize,
)

from polysolve.equation import Equation
from polysolve.polynomial import Polynomial

TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
    rationalize,  # "12.5" → Rational(25, 2) so expansion stays exact
)

DEFAULT_VARIABLE = "x"

_ALLOWED_CHARS = set(
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
    " \t+-*/^=()[]{}."
)


def _validate_characters(text: str) -> None:
    """Reject input containing characters outside the allowed set."""
    bad = {ch for ch in text if ch not in _ALLOWED_CHARS}
    if bad:
        bad_sorted = " ".join(sorted(bad))
        raise ValueError(
            f"Invalid character(s): {bad_sorted}\n"
            f"Only letters, numbers, and math symbols "
            f"(+ - * / ^ = ( ) .) are allowed."
        )


def detect_variable(text: str) -> str:
    """Return the single letter used as the unknown in *text*.

    Constant-only input (``1 = 2``) falls back to ``x``.  Raises
    ValueError when more than one distinct letter appears.
    """
    letters = sorted(set(re.findall(r"[A-Za-z]", text)))
    if not letters:
        return DEFAULT_VARIABLE
    if len(letters) > 1:
        raise ValueError(
            f"Only one variable is supported, found: {', '.join(letters)}."
        )
    return letters[0]


def _expand_repeated_letters(s: str, name: str) -> str:
    """Turn ``xx`` into ``x*x`` so multi-letter runs are never parsed as names."""
    def _repl(m):
        tok = m.group(0)
        if set(tok) == {name}:
            return "*".join(tok)
        return tok
    return re.sub(r"[A-Za-z]+", _repl, s)


def _to_number(coef) -> float:
    """Convert a SymPy coefficient to ``float``.

    Raises ValueError when the value does not fit in a float.
    """
    try:
        value = float(coef)
    except OverflowError:
        value = math.inf
    if math.isinf(value):
        raise ValueError(
            "Coefficient too large: every coefficient must fit in a "
            "floating-point number."
        )
    return value


def parse_polynomial(text: str, variable: str = None) -> Polynomial:
    """Parse one side of an equation into a :class:`Polynomial`.

    Raises ValueError for empty input, syntax errors, or expressions that
    are not polynomials in *variable* (``1/x``, ``x^0.5`` …).
    """
    s = text.strip()
    if not s:
        raise ValueError("Expression cannot be empty.")
    _validate_characters(s)
    if variable is None:
        variable = detect_variable(s)
    var = Symbol(variable)
    s = s.replace("[", "(").replace("]", ")")
    s = s.replace("{", "(").replace("}", ")")
    s = _expand_repeated_letters(s, variable)
    try:
        expr = parse_expr(s, local_dict={variable: var}, transformations=TRANSFORMATIONS)
    except Exception as e:
        raise ValueError(f"Could not parse expression: '{text}'. Error: {e}")

    poly = expand(expr).as_poly(var)
    if poly is None:
        raise ValueError(
            f"'{text.strip()}' is not a polynomial in {variable}. "
            f"Only whole, non-negative powers of {variable} are supported."
        )
    if poly.free_symbols - {var}:
        raise ValueError(f"'{text.strip()}' has coefficients that are not numbers.")
    coeffs = [_to_number(c) for c in reversed(poly.all_coeffs())]
    return Polynomial(coeffs).trim()


def parse_equation(text: str) -> Equation:
    """Parse ``lhs = rhs`` into an :class:`Equation`."""
    _validate_characters(text)
    if "=" not in text:
        raise ValueError("Equation must contain '='. Example: x^2 - 5x + 6 = 0")
    parts = text.split("=")
    if len(parts) != 2:
        raise ValueError("Equation must contain exactly one '=' sign.")
    lhs_str, rhs_str = parts[0].strip(), parts[1].strip()
    if not lhs_str or not rhs_str:
        raise ValueError("Both sides of the equation must have expressions.")

    variable = detect_variable(text)
    return Equation(
        parse_polynomial(lhs_str, variable),
        parse_polynomial(rhs_str, variable),
    )
