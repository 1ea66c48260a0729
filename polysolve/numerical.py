"""Numerical (approximate) checks for closed-form roots using NumPy.

The closed-form solver in :mod:`polysolve.equation` is exact up to float
rounding; this module evaluates polynomials numerically, computes
residuals of reported roots and finds real roots independently from the
companion matrix so the two can be compared.
"""

import numpy as np
from numpy.polynomial import polynomial as P

DEFAULT_TOLERANCE = 1e-9


def _fmt_num(value: float, max_decimals: int = 10) -> str:
    """Format a float into a clean decimal string.

    - Removes trailing zeros after the decimal point.
    - Uses up to *max_decimals* digits of precision.
    - Returns integers without a decimal point (e.g. ``7`` not ``7.0``).
    """
    if not np.isfinite(value):
        return str(value)
    if abs(value - round(value)) < 1e-12:
        return str(int(round(value)))
    formatted = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
    return formatted


def evaluate(polynomial, x):
    """Evaluate *polynomial* at *x* (a scalar or an array)."""
    coeffs = np.asarray(polynomial.parts, dtype=float)
    result = P.polyval(np.asarray(x, dtype=float), coeffs)
    if np.ndim(result) == 0:
        return float(result)
    return result


def residuals(equation, roots) -> list:
    """Return ``left(r) - right(r)`` for every root in *roots*."""
    reduced = equation.reduced()
    return [evaluate(reduced, r) for r in roots]


def verify_roots(equation, roots, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True when every root satisfies the equation within *tolerance*.

    The tolerance is relative to the size of the coefficients so large
    polynomials are not held to an impossible absolute bound.
    """
    scale = max(1.0, float(np.max(np.abs(equation.reduced().parts))))
    return all(abs(r) <= tolerance * scale for r in residuals(equation, roots))


def real_roots(polynomial, tolerance: float = DEFAULT_TOLERANCE) -> list:
    """Real roots of *polynomial*, largest first, via the companion matrix.

    Roots whose imaginary part exceeds *tolerance* are discarded.  A
    constant polynomial has no roots.
    """
    coeffs = np.asarray(polynomial.copy().trim().parts, dtype=float)
    if len(coeffs) < 2 or not np.all(np.isfinite(coeffs)):
        return []
    found = P.polyroots(coeffs)
    real = [float(np.real(r)) for r in np.atleast_1d(found) if abs(np.imag(r)) <= tolerance]
    return sorted(real, reverse=True)
