"""Equations between two polynomials and the closed-form solver.

An :class:`Equation` holds a ``left`` and a ``right`` :class:`Polynomial`,
each kept trimmed.  ``add``/``sub``/``mult``/``div``/``pow`` transform both
sides identically and return the equation, so they chain like the
polynomial methods.

:attr:`Equation.solutions` handles linear and quadratic equations only.
Always check :attr:`Equation.solvable` first, or treat a count of
:data:`INFINITE` as "not handled here" rather than "no real roots".
"""

import logging
import math
from collections import namedtuple

from polysolve.formatting import render_equation
from polysolve.polynomial import Polynomial

logger = logging.getLogger(__name__)

# Root count reported for identities and equations above degree 2.
INFINITE = math.inf

Solutions = namedtuple("Solutions", ["first", "second", "count"])
Solutions.__doc__ = """Roots of an equation.

``first``/``second`` are floats or ``None``; ``count`` is 0, 1, 2 or
:data:`INFINITE`.
"""

# Highest number of coefficients per side the solver accepts (degree 2).
MAX_PARTS = 3


class Equation:
    """An equation ``left = right``."""

    def __init__(self, left: Polynomial = None, right: Polynomial = None):
        self.left = (Polynomial() if left is None else left).copy().trim()
        self.right = (Polynomial() if right is None else right).copy().trim()

    def copy(self) -> "Equation":
        return Equation(self.left, self.right)

    def to_string(self) -> str:
        return render_equation(self.left.parts, self.right.parts, "text")

    def to_html(self) -> str:
        return render_equation(self.left.parts, self.right.parts, "html")

    def to_unicode(self) -> str:
        return render_equation(self.left.parts, self.right.parts, "unicode")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Equation({self.left!r}, {self.right!r})"

    # ── Queries ─────────────────────────────────────────────────────────

    @property
    def infinite_solutions(self) -> bool:
        """True when both sides are the same polynomial (an identity)."""
        return self.left.equal(self.right)

    @property
    def solvable(self) -> bool:
        """True for non-identity equations of degree 2 or lower."""
        return (
            len(self.left.parts) <= MAX_PARTS
            and len(self.right.parts) <= MAX_PARTS
            and not self.infinite_solutions
        )

    def reduced(self) -> Polynomial:
        """Return ``left - right`` as a new trimmed polynomial."""
        return self.left.copy().sub(self.right).trim()

    @property
    def degree(self) -> int:
        return len(self.reduced().parts) - 1

    # ── Both-sides transformations ──────────────────────────────────────

    def add(self, expr: Polynomial) -> "Equation":
        expr = expr.copy()
        self.left.add(expr).trim()
        self.right.add(expr).trim()
        return self

    def sub(self, expr: Polynomial) -> "Equation":
        expr = expr.copy()
        self.left.sub(expr).trim()
        self.right.sub(expr).trim()
        return self

    def mult(self, expr: Polynomial) -> "Equation":
        """Multiply both sides.  Negative-exponent terms are dropped."""
        expr = expr.copy()
        self.left.mult(expr).trim()
        self.right.mult(expr).trim()
        return self

    def div(self, expr: Polynomial) -> "Equation":
        """Divide both sides (term-wise, see :meth:`Polynomial.div`)."""
        expr = expr.copy()
        self.left.div(expr).trim()
        self.right.div(expr).trim()
        return self

    def pow(self, exponent=1) -> "Equation":
        self.left.pow(exponent).trim()
        self.right.pow(exponent).trim()
        return self

    # ── Solver ──────────────────────────────────────────────────────────

    @property
    def solutions(self) -> Solutions:
        """Solve the equation.

        Returns ``Solutions(first, second, count)``.  Unsolvable equations
        give ``Solutions(None, None, INFINITE)``.
        """
        if not self.solvable:
            return Solutions(None, None, INFINITE)
        work = self.copy()
        work.sub(work.right)
        if len(work.left.parts) == 3:
            logger.debug("Solving %s as a quadratic", self)
            return _solve_quadratic(work.left.parts)
        logger.debug("Solving %s as linear", self)
        return _solve_linear(work)


def _solve_quadratic(parts) -> Solutions:
    """Roots of ``c + bx + ax^2 = 0`` via the halved-``b`` formula."""
    c, b, a = parts
    half = (b / a) / 2
    discriminant = half * half - c / a
    root = math.sqrt(discriminant) if discriminant >= 0 else math.nan
    high = -half + root
    low = -half - root
    first = None if math.isnan(high) else high
    second = None if math.isnan(low) or low == high else low
    count = (first is not None) + (second is not None)
    return Solutions(first, second, count)


def _solve_linear(work: Equation) -> Solutions:
    """Solve ``bx + c = 0`` held as ``work.left = 0``.

    The constant is moved to the right; a bare ``0 = k`` with ``k != 0``
    has no solution.
    """
    work.sub(Polynomial.single(work.left.parts[0], 0))
    if len(work.left.parts) == 1:
        if work.right.parts[0] != work.left.parts[0]:
            return Solutions(None, None, 0)
        return Solutions(None, None, INFINITE)
    work.div(Polynomial.single(work.left.parts[1], 0))
    return Solutions(work.right.parts[0], None, 1)
