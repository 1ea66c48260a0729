"""Single-variable polynomials with whole-number exponents.

A :class:`Polynomial` is a dense list of coefficients where ``parts[i]`` is
the coefficient of ``x**i``::

    Polynomial([6, -5, 1])      # 6 - 5x + x^2

Two calling conventions are offered and must not be confused:

  - The named methods (``add``, ``sub``, ``mult``, ``div``, ``pow``,
    ``mult_single``, ``div_single``, ``trim``) **mutate** the receiver and
    return it, so they chain: ``p.copy().mult(q).trim()``.
  - The operators (``+ - * / **`` and unary ``-``) **return new**
    polynomials and leave both operands untouched.  The augmented forms
    (``+=`` …) mutate like the named methods.

Call :meth:`Polynomial.copy` before a mutating call whenever the original
must survive.
"""

import math
from itertools import zip_longest
from numbers import Number

from polysolve.formatting import render


def _reciprocal(value):
    """``1 / value`` with IEEE-754 semantics for a zero divisor."""
    if value == 0:
        return math.copysign(math.inf, float(value))
    return 1 / value


class Polynomial:
    """An algebraic expression ``c0 + c1x + c2x^2 + …``."""

    ZERO = None
    ONE = None
    X = None

    __hash__ = None

    def __init__(self, parts=None):
        self.parts = [0] if parts is None else list(parts)
        if not self.parts:
            self.parts = [0]

    def copy(self) -> "Polynomial":
        """Return a clone that shares no storage with this polynomial."""
        return Polynomial(self.parts)

    @classmethod
    def single(cls, coefficient=0, exponent: int = 0) -> "Polynomial":
        """Build the monomial ``coefficient * x**exponent``.

        Only defined for ``exponent >= 0``.
        """
        return cls([0] * int(exponent) + [coefficient])

    # ── Rendering ───────────────────────────────────────────────────────

    def to_string(self) -> str:
        return render(self.parts, "text")

    def to_html(self) -> str:
        return render(self.parts, "html")

    def to_unicode(self) -> str:
        return render(self.parts, "unicode")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({self.parts!r})"

    # ── Sequence access ─────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self):
        return iter(self.parts)

    def __getitem__(self, index):
        return self.parts[index]

    @property
    def degree(self) -> int:
        """Highest exponent with a nonzero coefficient (0 for constants)."""
        return len(self.copy().trim().parts) - 1

    # ── In-place arithmetic ─────────────────────────────────────────────

    def add(self, other: "Polynomial") -> "Polynomial":
        """Add *other* term by term, extending with zeros as needed."""
        addend = list(other.parts)
        if len(self.parts) < len(addend):
            self.parts.extend([0] * (len(addend) - len(self.parts)))
        for i, coef in enumerate(addend):
            self.parts[i] += coef
        return self

    def sub(self, other: "Polynomial") -> "Polynomial":
        """Subtract *other* term by term, extending with zeros as needed."""
        subtrahend = list(other.parts)
        if len(self.parts) < len(subtrahend):
            self.parts.extend([0] * (len(subtrahend) - len(self.parts)))
        for i, coef in enumerate(subtrahend):
            self.parts[i] -= coef
        return self

    def mult_single(self, coefficient=0, exponent: int = 0) -> "Polynomial":
        """Multiply by the monomial ``coefficient * x**exponent``.

        Terms whose resulting exponent would be negative are dropped.
        """
        result = Polynomial()
        for power, coef in enumerate(self.parts):
            if power + exponent >= 0:
                result.add(Polynomial.single(coef * coefficient, power + exponent))
        self.parts = result.parts
        return self

    def div_single(self, coefficient=0, exponent: int = 0) -> "Polynomial":
        """Divide by the monomial ``coefficient * x**exponent``.

        A zero *coefficient* yields ``inf``/``nan`` coefficients rather than
        an exception.  Terms whose resulting exponent would be negative are
        dropped.
        """
        return self.mult_single(_reciprocal(coefficient), -exponent)

    def mult(self, other: "Polynomial") -> "Polynomial":
        """Multiply by *other* (ordinary polynomial product)."""
        result = Polynomial()
        for power, coef in enumerate(list(other.parts)):
            result.add(self.copy().mult_single(coef, power))
        self.parts = result.parts
        return self

    def div(self, other: "Polynomial") -> "Polynomial":
        """Divide by each term of *other* and sum the quotients.

        This is not polynomial long division: ``(x^2).div(1 + x)`` gives
        ``x + x^2``.  Every coefficient of *other* is a divisor, so the zero
        terms below a monomial such as ``[0, 2]`` divide by zero and yield
        ``nan``; only a nonzero constant divides exactly.
        """
        result = Polynomial()
        for power, coef in enumerate(list(other.parts)):
            result.add(self.copy().div_single(coef, power))
        self.parts = result.parts
        return self

    def pow(self, exponent=1) -> "Polynomial":
        """Raise to a whole-number power.

        Negative or fractional exponents leave the polynomial unchanged.
        """
        if exponent % 1 != 0 or exponent < 0:
            return self
        result = Polynomial.ONE.copy()
        for _ in range(int(exponent)):
            result.mult(self)
        self.parts = result.parts
        return self

    def trim(self) -> "Polynomial":
        """Drop trailing zero coefficients, keeping at least one."""
        while len(self.parts) > 1 and self.parts[-1] == 0:
            self.parts.pop()
        return self

    def equal(self, other: "Polynomial") -> bool:
        """Exact coefficient-wise equality; missing terms count as zero."""
        return all(a == b for a, b in zip_longest(self.parts, other.parts, fillvalue=0))

    # ── Operators (non-mutating) ────────────────────────────────────────

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.equal(other)

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.copy().add(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.copy().sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.copy().mult(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.copy().div(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.div(self)

    def __pow__(self, exponent):
        return self.copy().pow(exponent)

    def __neg__(self):
        return self.copy().mult_single(-1, 0)

    # ── Augmented assignment (mutating) ─────────────────────────────────

    def __iadd__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.add(other)

    def __isub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.sub(other)

    def __imul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.mult(other)

    def __itruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.div(other)


def _coerce(value):
    """Promote a plain number to a constant polynomial (a fresh copy)."""
    if isinstance(value, Polynomial):
        return value.copy()
    if isinstance(value, Number):
        return Polynomial([value])
    return NotImplemented


Polynomial.ZERO = Polynomial([0])
Polynomial.ONE = Polynomial([1])
Polynomial.X = Polynomial([0, 1])
