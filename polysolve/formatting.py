"""Rendering helpers for polynomial coefficient lists.

Three output styles share one layout, ``c0 + c1x + c2x^2 + …``:

  - ``text``    : caret exponents  (``x^2``)
  - ``html``    : superscript tags (``x<sup>2</sup>``)
  - ``unicode`` : superscript glyphs (``x²``)

Zero terms are skipped, a coefficient of ``1`` is elided on ``x`` terms and
negative coefficients are printed as-is (``6 + -5x + x^2``).
"""

import math

STYLES = ("text", "html", "unicode")

_SUPERSCRIPT = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _to_superscript(text: str) -> str:
    """Convert a string of digits / signs into Unicode superscript."""
    return text.translate(_SUPERSCRIPT)


def format_number(value) -> str:
    """Format a coefficient for display.

    Integral finite floats drop their ``.0`` (``7.0`` → ``7``), non-finite
    values print as ``Infinity``, ``-Infinity`` and ``NaN``, and everything
    else prints the way Python prints it (``2.5``).
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == int(value):
            return str(int(value))
        return repr(value)
    return str(value)


def _exponent(power: int, style: str) -> str:
    if power == 1:
        return "x"
    if style == "html":
        return f"x<sup>{power}</sup>"
    if style == "unicode":
        return "x" + _to_superscript(str(power))
    return f"x^{power}"


def render(parts, style: str = "text") -> str:
    """Render a coefficient list (index = exponent) in *style*."""
    if style not in STYLES:
        raise ValueError(f"Unknown render style '{style}'. Use one of: {', '.join(STYLES)}")
    terms = []
    for power, coef in enumerate(parts):
        if coef == 0:
            continue
        if power == 0:
            terms.append(format_number(coef))
        elif coef == 1:
            terms.append(_exponent(power, style))
        else:
            terms.append(format_number(coef) + _exponent(power, style))
    if not terms:
        return "0"
    return " + ".join(terms)


def render_equation(left, right, style: str = "text") -> str:
    return f"{render(left, style)} = {render(right, style)}"
