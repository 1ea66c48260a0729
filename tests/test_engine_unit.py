import pytest

from polysolve import engine
from polysolve.equation import Equation
from polysolve.polynomial import Polynomial


def test_degree_name() -> None:
    assert engine._degree_name(2) == "quadratic"
    assert engine._degree_name(7) == "degree-7 polynomial"


def test_solve_equation_required_fields_type_and_range_checks() -> None:
    result = engine.solve_equation("2x + 4 = 0")

    required_fields = {
        "equation",
        "given",
        "method",
        "steps",
        "final_answer",
        "solutions",
        "verification_steps",
        "summary",
    }
    assert required_fields.issubset(set(result.keys()))

    summary = result["summary"]
    assert isinstance(summary["runtime_ms"], (int, float)) and summary["runtime_ms"] >= 0
    assert summary["total_steps"] == len(result["steps"])
    assert summary["verification_steps"] == len(result["verification_steps"])
    assert summary["validation_status"] == "pass"
    for step in result["steps"]:
        assert set(step) == {"description", "expression", "explanation"}


@pytest.mark.parametrize(
    "equation,final_answer,case,count",
    [
        ("2x + 4 = 0", "x = -2", "one_solution", 1),
        ("x^2 - 5x + 6 = 0", "x = 3\nx = 2", "two_solutions", 2),
        ("x^2 - 4x + 4 = 0", "x = 2", "one_solution", 1),
        ("x^2 + x + 1 = 0", "No real solution", "no_real_solution", 0),
        ("x + 1 = x + 2", "No solution", "no_solution", 0),
        ("3y = 9", "y = 3", "one_solution", 1),
    ],
)
def test_solver_cases(equation, final_answer, case, count) -> None:
    result = engine.solve_equation(equation)
    assert result["final_answer"] == final_answer
    assert result["summary"]["case"] == case
    assert result["solutions"]["count"] == count
    assert result["summary"]["validation_status"] == "pass"


def test_identity_reports_infinite() -> None:
    result = engine.solve_equation("x = x")
    assert result["summary"]["case"] == "infinite"
    assert result["solutions"]["count"] == "infinite"
    assert "Infinite solutions" in result["final_answer"]


def test_cubic_is_rejected_with_fail_status() -> None:
    result = engine.solve_equation("x^3 = 0")
    assert result["summary"]["case"] == "unsupported_degree"
    assert result["summary"]["validation_status"] == "fail"
    assert result["solutions"]["count"] == "infinite"
    assert "cubic" in result["final_answer"]


def test_quadratic_steps_and_cross_check() -> None:
    result = engine.solve_equation("x^2 - 5x + 6 = 0")
    descriptions = [s["description"] for s in result["steps"]]
    assert "Halve the middle coefficient" in descriptions
    assert result["method"].startswith("Quadratic formula")
    assert any("NumPy" in s["expression"] for s in result["verification_steps"])
    assert result["summary"]["degree"] == 2


def test_variable_name_is_kept_in_output() -> None:
    result = engine.solve_equation("t^2 = 4")
    assert result["given"]["inputs"]["variable"] == "t"
    assert result["equation"] == "t^2 = 4"
    assert result["final_answer"] == "t = 2\nt = -2"


def test_accepts_equation_objects() -> None:
    eq = Equation(Polynomial([4, 2]))
    result = engine.solve_equation(eq)
    assert result["final_answer"] == "x = -2"
    assert eq.left.parts == [4, 2]


def test_render_setting() -> None:
    result = engine.solve_equation("x^2 = 4", {"render": "unicode"})
    assert result["equation"] == "x² = 4"
    result = engine.solve_equation("x^2 = 4", {"render": "html"})
    assert result["equation"] == "x<sup>2</sup> = 4"


def test_decimals_setting() -> None:
    result = engine.solve_equation("3x = 1", {"max_decimals": 3})
    assert result["final_answer"] == "x = 0.333"


def test_invalid_input_missing_equal_sign() -> None:
    with pytest.raises(ValueError, match="must contain '='"):
        engine.solve_equation("2x + 3")


def test_invalid_input_empty() -> None:
    with pytest.raises(ValueError, match="cannot be empty"):
        engine.solve_equation("   ")


def test_coefficient_too_large_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="Coefficient too large"):
        engine.solve_equation("x^2 + 10^400 x = 0")


def test_large_but_finite_coefficients_do_not_raise() -> None:
    result = engine.solve_equation("x^2 + 10^300 x = 0")
    assert result["summary"]["case"] in ("one_solution", "two_solutions", "no_real_solution")
