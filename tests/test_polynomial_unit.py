"""Tests for Polynomial arithmetic, equality and normalisation."""

import math

import pytest

from polysolve.polynomial import Polynomial


# ── Construction and copying ─────────────────────────────────────────────

class TestConstruction:
    def test_default_is_zero(self):
        assert Polynomial().parts == [0]

    def test_empty_sequence_becomes_zero(self):
        assert Polynomial([]).parts == [0]

    def test_constructor_does_not_alias_input(self):
        source = [1, 2]
        p = Polynomial(source)
        p.add(Polynomial([1]))
        assert source == [1, 2]

    def test_copy_is_independent(self):
        p = Polynomial([1, 2, 3])
        q = p.copy()
        q.add(Polynomial([5]))
        assert p.parts == [1, 2, 3]
        assert q.parts == [6, 2, 3]

    def test_single(self):
        assert Polynomial.single(3, 2).parts == [0, 0, 3]
        assert Polynomial.single(7).parts == [7]

    def test_single_zero_equals_zero_constant(self):
        assert Polynomial.single(0, 0).equal(Polynomial.ZERO)

    def test_constants(self):
        assert Polynomial.ZERO.parts == [0]
        assert Polynomial.ONE.parts == [1]
        assert Polynomial.X.parts == [0, 1]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Polynomial([1]))


# ── Add / subtract ───────────────────────────────────────────────────────

def test_add_extends_shorter_side() -> None:
    p = Polynomial([1, 2])
    result = p.add(Polynomial([0, 0, 3]))
    assert result is p
    assert p.parts == [1, 2, 3]


def test_add_longer_receiver_keeps_length() -> None:
    assert Polynomial([1, 2, 3]).add(Polynomial([1])).parts == [2, 2, 3]


def test_sub_extends_shorter_side() -> None:
    assert Polynomial([1]).sub(Polynomial([0, 2])).parts == [1, -2]


def test_sub_does_not_trim() -> None:
    assert Polynomial([1, 2]).sub(Polynomial([0, 2])).parts == [1, 0]


def test_add_self() -> None:
    p = Polynomial([1, 2])
    assert p.add(p).parts == [2, 4]


# ── Monomial multiply / divide ───────────────────────────────────────────

def test_mult_single_shifts_and_scales() -> None:
    assert Polynomial([1, 2]).mult_single(3, 2).parts == [0, 0, 3, 6]


def test_mult_single_drops_negative_exponents() -> None:
    assert Polynomial([1, 2, 3]).mult_single(2, -1).parts == [4, 6]


def test_mult_single_drops_everything() -> None:
    assert Polynomial([5]).mult_single(2, -1).parts == [0]


def test_div_single() -> None:
    assert Polynomial([0, 4, 8]).div_single(2, 1).parts == [2, 4]


def test_div_single_by_zero_gives_ieee_values() -> None:
    p = Polynomial([0, 1]).div_single(0, 0)
    assert math.isnan(p.parts[0])
    assert p.parts[1] == math.inf


def test_div_single_by_negative_zero() -> None:
    assert Polynomial([1]).div_single(-0.0, 0).parts == [-math.inf]


# ── Multiply / divide ────────────────────────────────────────────────────

def test_mult_square_of_binomial() -> None:
    assert Polynomial([1, 1]).mult(Polynomial([1, 1])).parts == [1, 2, 1]


def test_mult_by_itself() -> None:
    p = Polynomial([-1, 1])
    assert p.mult(p).parts == [1, -2, 1]


def test_mult_by_zero() -> None:
    assert Polynomial([1, 2, 3]).mult(Polynomial.ZERO).trim().parts == [0]


def test_div_by_constant_is_exact() -> None:
    p = Polynomial([2, 4]).div(Polynomial([2]))
    assert p.equal(Polynomial([1, 2]))


def test_div_by_dense_monomial_hits_zero_terms() -> None:
    p = Polynomial([0, 0, 1]).div(Polynomial([0, 1]))
    assert any(math.isnan(c) for c in p.parts)


def test_div_by_binomial_is_termwise() -> None:
    # x^2 / (1 + x) is computed as x^2/1 + x^2/x
    p = Polynomial([0, 0, 1]).div(Polynomial([1, 1]))
    assert p.parts == [0, 1, 1]


# ── Equality / trim ──────────────────────────────────────────────────────

def test_equal_zero_extends() -> None:
    assert Polynomial([1, 2, 0, 0]).equal(Polynomial([1, 2]))
    assert Polynomial([1, 2]).equal(Polynomial([1, 2, 0]))
    assert not Polynomial([1, 2]).equal(Polynomial([1, 2, 3]))


def test_equal_is_exact() -> None:
    assert not Polynomial([0.1 + 0.2]).equal(Polynomial([0.3]))


def test_nan_is_never_equal() -> None:
    assert not Polynomial([math.nan]).equal(Polynomial([math.nan]))


@pytest.mark.parametrize(
    "parts,expected",
    [
        ([0, 0, 0], [0]),
        ([1, 0, 2, 0], [1, 0, 2]),
        ([5], [5]),
        ([0], [0]),
        ([0, 3], [0, 3]),
    ],
)
def test_trim(parts, expected) -> None:
    assert Polynomial(parts).trim().parts == expected


def test_trim_is_idempotent() -> None:
    p = Polynomial([3, 0, 1, 0, 0])
    assert p.copy().trim().parts == p.copy().trim().trim().parts


# ── Powers ───────────────────────────────────────────────────────────────

def test_pow_square() -> None:
    assert Polynomial([1, 1]).pow(2).parts == [1, 2, 1]


def test_pow_zero_is_one() -> None:
    assert Polynomial([4, 5]).pow(0).parts == [1]


def test_pow_integral_float() -> None:
    assert Polynomial([0, 2]).pow(3.0).parts == [0, 0, 0, 8]


@pytest.mark.parametrize("exponent", [-1, 1.5, -0.5])
def test_pow_invalid_exponent_is_noop(exponent) -> None:
    p = Polynomial([1, 1])
    assert p.pow(exponent) is p
    assert p.parts == [1, 1]


def test_pow_leaves_one_constant_untouched() -> None:
    Polynomial([2, 1]).pow(3)
    assert Polynomial.ONE.parts == [1]


# ── Algebraic properties ─────────────────────────────────────────────────

@pytest.mark.parametrize(
    "p,q",
    [
        ([1, 2, 3], [4, 5]),
        ([0], [7, 0, 1]),
        ([-3, 0, 2], [-3, 0, 2]),
    ],
)
def test_add_then_sub_restores(p, q) -> None:
    P, Q = Polynomial(p), Polynomial(q)
    assert P.copy().add(Q).sub(Q).equal(P)


def test_mult_is_associative() -> None:
    P, Q, R = Polynomial([1, 2]), Polynomial([-3, 0, 1]), Polynomial([2, 5, 7])
    left = P.copy().mult(Q).mult(R)
    right = P.copy().mult(Q.copy().mult(R))
    assert left.equal(right)


# ── Operators ────────────────────────────────────────────────────────────

class TestOperators:
    def test_binary_operators_do_not_mutate(self):
        p, q = Polynomial([1, 1]), Polynomial([2])
        assert (p + q).parts == [3, 1]
        assert (p - q).parts == [-1, 1]
        assert (p * q).parts == [2, 2]
        assert (p ** 2).parts == [1, 2, 1]
        assert p.parts == [1, 1]
        assert q.parts == [2]

    def test_scalars_are_promoted(self):
        p = Polynomial([1, 1])
        assert (3 + p).parts == [4, 1]
        assert (p - 1).parts == [0, 1]
        assert (1 - p).parts == [0, -1]
        assert (2 * p).parts == [2, 2]

    def test_true_division_uses_termwise_div(self):
        assert (Polynomial([0, 2]) / Polynomial([2])).parts == [0, 1]

    def test_scalar_divided_by_polynomial(self):
        p = Polynomial([4])
        assert (2 / p).parts == [0.5]
        assert p.parts == [4]
        # Each coefficient of the divisor divides the scalar in turn
        assert (2 / Polynomial([1, 2])).parts == [2]

    def test_unsupported_operand_types(self):
        with pytest.raises(TypeError):
            "2" / Polynomial([1])

    def test_negation(self):
        assert (-Polynomial([1, -2])).parts == [-1, 2]

    def test_augmented_assignment_mutates(self):
        p = Polynomial([1])
        alias = p
        p += Polynomial([0, 1])
        p *= 2
        assert alias is p
        assert p.parts == [2, 2]

    def test_equality_operator(self):
        assert Polynomial([5, 0]) == 5
        assert Polynomial([1, 2]) == Polynomial([1, 2, 0])
        assert Polynomial([1, 2]) != Polynomial([2, 1])
        assert Polynomial([1]) != "1"

    def test_sequence_protocol(self):
        p = Polynomial([6, -5, 1])
        assert len(p) == 3
        assert list(p) == [6, -5, 1]
        assert p[2] == 1
        assert p.degree == 2
        assert Polynomial([4, 0, 0]).degree == 0
