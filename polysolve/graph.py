"""
Graph builder for polysolve.

Produces a dark-themed matplotlib Figure of both sides of an equation,
``left(x)`` and ``right(x)``, with every real root marked where the two
curves meet.  Identities (both sides the same curve) are not plotted.
"""

import numpy as np

from polysolve.numerical import evaluate
from polysolve.storage import DEFAULT_SETTINGS

# ── palette ────────────────────────────────────────────────────────────────
C_BG       = "#0f0f0f"
C_AX       = "#181818"
C_GRID     = "#252525"
C_TICK     = "#666666"
C_SPINE    = "#333333"
C_LINE1    = "#1a8cff"   # left side
C_LINE2    = "#ff8c42"   # right side
C_DOT      = "#4caf50"   # root
C_TEXT     = "#cccccc"


def _style_axes(ax, fig):
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.tick_params(colors=C_TICK, labelsize=9)
    ax.xaxis.label.set_color(C_TEXT)
    ax.yaxis.label.set_color(C_TEXT)
    ax.title.set_color(C_TEXT)
    for spine in ax.spines.values():
        spine.set_edgecolor(C_SPINE)
    ax.grid(True, color=C_GRID, linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=C_SPINE, linewidth=0.8)
    ax.axvline(0, color=C_SPINE, linewidth=0.8)


def _x_range(roots, span):
    """Sample range centred on the roots, at least ``2 * span`` wide."""
    if roots:
        lo, hi = min(roots) - span, max(roots) + span
    else:
        lo, hi = -span, span
    return np.linspace(lo, hi, 400)


def build_figure(equation, span: float = None, variable: str = "x"):
    """
    Build and return a dark-themed matplotlib Figure for *equation*.
    Returns None for identities, which have nothing to intersect.
    """
    from matplotlib.figure import Figure

    if equation.infinite_solutions:
        return None
    if span is None:
        span = DEFAULT_SETTINGS["graph_span"]

    sols = equation.solutions
    roots = [r for r in (sols.first, sols.second)
             if r is not None and np.isfinite(r)]
    x_range = _x_range(roots, span)
    y_lhs = np.asarray(evaluate(equation.left, x_range), dtype=float)
    y_rhs = np.asarray(evaluate(equation.right, x_range), dtype=float)

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax  = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(x_range, y_lhs, color=C_LINE1, linewidth=2,
            label=f"LHS: {equation.left.to_string().replace('x', variable)}")
    ax.plot(x_range, y_rhs, color=C_LINE2, linewidth=2,
            label=f"RHS: {equation.right.to_string().replace('x', variable)}")

    if roots:
        y_at = [evaluate(equation.right, r) for r in roots]
        ax.scatter(roots, y_at, color=C_DOT, s=80, zorder=5, label="Solutions")
        for r in roots:
            ax.axvline(r, color=C_DOT, linewidth=1, linestyle=":", alpha=0.6)
        listed = ", ".join(f"{variable} = {r:g}" for r in roots)
        ax.set_title(f"Solutions: {listed}", color=C_TEXT, fontsize=10)
    elif sols.count == 0:
        ax.set_title("No real solution — the curves never meet", color=C_TEXT, fontsize=10)
    else:
        ax.set_title("Not solvable in closed form (degree above 2)", color=C_TEXT, fontsize=10)

    # Clip y-axis to avoid extreme values
    y_all = np.concatenate([y_lhs, y_rhs])
    y_finite = y_all[np.isfinite(y_all)]
    if len(y_finite):
        ylo, yhi = np.percentile(y_finite, 2), np.percentile(y_finite, 98)
        pad = max((yhi - ylo) * 0.2, 1.0)
        ax.set_ylim(ylo - pad, yhi + pad)

    ax.set_xlabel(variable, color=C_TEXT)
    ax.set_ylabel("value", color=C_TEXT)
    ax.legend(fontsize=8, facecolor="#1e1e1e", edgecolor=C_SPINE,
              labelcolor=C_TEXT)
    fig.tight_layout(pad=1.2)
    return fig
