"""Step-by-step solver for linear and quadratic equations.

Takes an equation string (e.g. ``"x^2 - 5x + 6 = 0"``) or an
:class:`~polysolve.equation.Equation`, solves it with the closed-form solver
and produces human-readable step-by-step explanations, followed by a
numerical verification of every root.
"""

import logging
import time

from polysolve.equation import INFINITE, Equation
from polysolve.formatting import render
from polysolve.numerical import _fmt_num, evaluate, real_roots, verify_roots
from polysolve.parsing import detect_variable, parse_equation
from polysolve.polynomial import Polynomial
from polysolve.storage import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

_DEGREE_NAMES = {
    0: "constant",
    1: "linear",
    2: "quadratic",
    3: "cubic",
    4: "quartic",
    5: "quintic",
}


def _degree_name(degree: int) -> str:
    """Return the conventional name for a polynomial of the given degree."""
    return _DEGREE_NAMES.get(degree, f"degree-{degree} polynomial")


class _Renderer:
    """Renders polynomials in the configured style with the user's variable."""

    def __init__(self, variable: str, style: str, decimals: int):
        self.variable = variable
        self.style = style
        self.decimals = decimals

    def poly(self, polynomial) -> str:
        return render(polynomial.parts, self.style).replace("x", self.variable)

    def equation(self, left, right) -> str:
        return f"{self.poly(left)} = {self.poly(right)}"

    def num(self, value) -> str:
        return _fmt_num(value, self.decimals)


def _step(description: str, expression: str, explanation: str) -> dict:
    return {
        "description": description,
        "expression": expression,
        "explanation": explanation,
    }


def solve_equation(equation, settings: dict = None) -> dict:
    """
    Solve a linear or quadratic equation step by step.

    *equation* may be a string such as ``"2x + 4 = 0"`` or an
    :class:`Equation`.  *settings* overrides :data:`DEFAULT_SETTINGS`
    (render style, decimals, verification tolerance).

    Returns a dict with trail-format sections:
      - equation, given, method, steps, final_answer, solutions,
        verification_steps, summary

    Raises ValueError when the string cannot be parsed.
    """
    t_start = time.perf_counter()
    config = dict(DEFAULT_SETTINGS)
    config.update(settings or {})

    if isinstance(equation, Equation):
        eq = equation.copy()
        variable = "x"
    else:
        equation_str = str(equation).strip()
        if not equation_str:
            raise ValueError("Equation cannot be empty.")
        eq = parse_equation(equation_str)
        variable = detect_variable(equation_str)

    fmt = _Renderer(variable, config["render"], config["max_decimals"])
    display = fmt.equation(eq.left, eq.right)
    reduced = eq.reduced()
    degree = len(reduced.parts) - 1
    result_solutions = eq.solutions

    steps = [
        _step(
            "Starting with the original equation",
            display,
            f"We are given the equation {display}. "
            f"Our goal is to find every real value of {variable} that makes "
            f"both sides equal.",
        )
    ]

    if eq.infinite_solutions:
        case, final_answer, method = _identity_steps(steps, eq, fmt)
    elif not eq.solvable:
        case, final_answer, method = _unsupported_steps(steps, eq, fmt)
    else:
        steps.append(_step(
            "Move every term to the left side",
            f"{fmt.poly(reduced)} = 0",
            f"Subtract {fmt.poly(eq.right)} from both sides so the right side "
            f"becomes 0. What remains is a {_degree_name(degree)} expression.",
        ))
        if len(reduced.parts) == 3:
            case, final_answer = _quadratic_steps(steps, reduced, result_solutions, fmt)
            method = "Quadratic formula (halved middle coefficient)"
        else:
            case, final_answer = _linear_steps(steps, reduced, result_solutions, fmt)
            method = "Isolate the variable"

    roots = [r for r in (result_solutions.first, result_solutions.second) if r is not None]
    verification_steps, status = _verify(eq, roots, case, fmt, config["verify_tolerance"])

    runtime_ms = (time.perf_counter() - t_start) * 1000
    logger.info("Solved %s -> %s (%s)", display, final_answer.replace("\n", ", "), case)

    count = result_solutions.count
    return {
        "equation": display,
        "given": {
            "problem": f"Solve for {variable}",
            "inputs": {
                "equation": display,
                "left_side": fmt.poly(eq.left),
                "right_side": fmt.poly(eq.right),
                "variable": variable,
            },
        },
        "method": method,
        "steps": steps,
        "final_answer": final_answer,
        "solutions": {
            "first": result_solutions.first,
            "second": result_solutions.second,
            "count": "infinite" if count == INFINITE else count,
        },
        "verification_steps": verification_steps,
        "summary": {
            "runtime_ms": round(runtime_ms, 3),
            "total_steps": len(steps),
            "verification_steps": len(verification_steps),
            "validation_status": status,
            "library": "polysolve closed form + NumPy verification",
            "degree": degree,
            "case": case,
        },
    }


# ── Case narrators ──────────────────────────────────────────────────────

def _identity_steps(steps, eq, fmt):
    v = fmt.variable
    steps.append(_step(
        "Compare both sides",
        fmt.equation(eq.left, eq.right),
        f"Both sides are the same expression, so the equation is an identity "
        f"and holds for every value of {v}.",
    ))
    return "infinite", f"Infinite solutions: every real {v} satisfies the equation", "Identity check"


def _unsupported_steps(steps, eq, fmt):
    degree = max(len(eq.left.parts), len(eq.right.parts)) - 1
    name = _degree_name(degree)
    steps.append(_step(
        "Check the degree",
        fmt.equation(eq.left, eq.right),
        f"This equation contains a {name} term. Only linear and quadratic "
        f"equations have a closed-form solution here.",
    ))
    return (
        "unsupported_degree",
        f"Cannot solve: {name} equations are not supported.",
        "Degree check",
    )


def _linear_steps(steps, reduced, sols, fmt):
    v = fmt.variable
    const = reduced.parts[0]
    if len(reduced.parts) == 1:
        steps.append(_step(
            "Check the remaining constant",
            f"{fmt.num(const)} = 0",
            f"Every {v} term cancelled, leaving {fmt.num(const)} = 0, which is "
            f"false. No value of {v} can satisfy the equation.",
        ))
        return "no_solution", "No solution"

    coef = reduced.parts[1]
    steps.append(_step(
        "Move the constant to the right side",
        f"{fmt.num(coef)}{v} = {fmt.num(-const)}",
        f"Subtract {fmt.num(const)} from both sides to isolate the {v} term.",
    ))
    steps.append(_step(
        f"Divide both sides by {fmt.num(coef)}",
        f"{v} = {fmt.num(sols.first)}",
        f"Dividing by the coefficient of {v} leaves {v} on its own.",
    ))
    return "one_solution", f"{v} = {fmt.num(sols.first)}"


def _quadratic_steps(steps, reduced, sols, fmt):
    v = fmt.variable
    c, b, a = reduced.parts
    half = (b / a) / 2
    disc = half * half - c / a
    steps.append(_step(
        f"Divide every term by {fmt.num(a)}",
        f"{fmt.poly(Polynomial([c / a, b / a, 1]))} = 0",
        f"Making the leading coefficient 1 gives the form {v}^2 + B{v} + C = 0 "
        f"with B = {fmt.num(b / a)} and C = {fmt.num(c / a)}.",
    ))
    steps.append(_step(
        "Halve the middle coefficient",
        f"M = B / 2 = {fmt.num(half)}",
        f"The roots are {v} = -M ± √(M² - C).",
    ))
    steps.append(_step(
        "Compute M² - C",
        f"M² - C = {fmt.num(disc)}",
        "A negative value means there is no real root; zero means a "
        "repeated root.",
    ))

    if sols.count == 0:
        steps.append(_step(
            "Check for real roots",
            f"√({fmt.num(disc)}) is not real",
            f"The square root of a negative number is not real, so no real "
            f"{v} satisfies the equation.",
        ))
        return "no_real_solution", "No real solution"

    found = [r for r in (sols.first, sols.second) if r is not None]
    answer = "\n".join(f"{v} = {fmt.num(r)}" for r in found)
    if sols.count == 1:
        steps.append(_step(
            "Compute the repeated root",
            answer,
            "Both signs of the square root give the same value, so the "
            "equation has exactly one solution.",
        ))
        return "one_solution", answer
    steps.append(_step(
        "Compute both roots",
        answer,
        "Taking + and - in front of the square root gives the two solutions.",
    ))
    return "two_solutions", answer


# ── Verification ────────────────────────────────────────────────────────

def _verify(eq, roots, case, fmt, tolerance):
    """Substitute each root back in; returns (steps, "pass" | "fail")."""
    v = fmt.variable
    steps = []
    if case == "unsupported_degree":
        return steps, "fail"

    for root in roots:
        lhs = evaluate(eq.left, root)
        rhs = evaluate(eq.right, root)
        steps.append(_step(
            f"Substitute {v} = {fmt.num(root)}",
            f"{fmt.num(lhs)} = {fmt.num(rhs)}",
            f"Left side: {fmt.num(lhs)}. Right side: {fmt.num(rhs)}.",
        ))

    if case in ("one_solution", "two_solutions"):
        cross = real_roots(eq.reduced(), tolerance)
        listed = ", ".join(fmt.num(r) for r in cross) or "none"
        steps.append(_step(
            "Cross-check numerically",
            f"NumPy roots: {listed}",
            "The companion-matrix roots computed by NumPy should agree with "
            "the closed-form result.",
        ))

    ok = verify_roots(eq, roots, tolerance)
    return steps, "pass" if ok else "fail"
