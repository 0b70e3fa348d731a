import pytest
from rangekit import BoundKind, BoundaryKind, Boundary
from rangekit.boundaries import kinds_from_mode


def test_bound_kind_inversion():
    assert ~BoundKind.closed is BoundKind.open
    assert ~BoundKind.open is BoundKind.closed
    assert ~BoundKind.empty is BoundKind.unbound
    assert ~BoundKind.unbound is BoundKind.empty


@pytest.mark.parametrize("mode, kinds", [
    ("()", (BoundKind.open, BoundKind.open)),
    ("[]", (BoundKind.closed, BoundKind.closed)),
    (">", (BoundKind.open, BoundKind.unbound)),
    ("<=", (BoundKind.unbound, BoundKind.closed)),
    ("*", (BoundKind.unbound, BoundKind.unbound)),
])
def test_modes(mode, kinds):
    assert kinds_from_mode(mode) == kinds


def test_bad_mode():
    with pytest.raises(ValueError):
        kinds_from_mode("[>")


def test_boundary_kind_order():
    assert BoundaryKind.minus_infinity < BoundaryKind.closed < BoundaryKind.open < BoundaryKind.plus_infinity
    assert BoundaryKind.empty < BoundaryKind.minus_infinity


def test_left_comparison():
    # at the same value a closed left side starts before an open one
    assert Boundary(1, BoundaryKind.closed).compare_ll(Boundary(1, BoundaryKind.open))
    assert not Boundary(1, BoundaryKind.open).compare_ll(Boundary(1, BoundaryKind.closed))
    assert Boundary(None, BoundaryKind.minus_infinity).compare_ll(Boundary(-100, BoundaryKind.closed))


def test_right_comparison():
    # at the same value an open right side ends before a closed one
    assert Boundary(1, BoundaryKind.open).compare_rr(Boundary(1, BoundaryKind.closed))
    assert not Boundary(1, BoundaryKind.closed).compare_rr(Boundary(1, BoundaryKind.open))
    assert Boundary(100, BoundaryKind.closed).compare_rr(Boundary(None, BoundaryKind.plus_infinity))


def test_right_below_left():
    assert Boundary(2.0, BoundaryKind.open).compare_rl(Boundary(2.0, BoundaryKind.closed))
    assert not Boundary(2.0, BoundaryKind.closed).compare_rl(Boundary(2.0, BoundaryKind.closed))


def test_adjacency():
    assert Boundary(3.0, BoundaryKind.closed).adjacent(Boundary(3.0, BoundaryKind.open))
    assert not Boundary(3.0, BoundaryKind.open).adjacent(Boundary(3.0, BoundaryKind.open))
    assert not Boundary(3.0, BoundaryKind.closed).adjacent(Boundary(4.0, BoundaryKind.closed))
    assert Boundary(3, BoundaryKind.closed).adjacent(Boundary(4, BoundaryKind.closed))
    assert not Boundary(3, BoundaryKind.closed).adjacent(Boundary(5, BoundaryKind.closed))


def test_addition():
    assert Boundary(1, BoundaryKind.closed) + Boundary(2, BoundaryKind.closed) == Boundary(3, BoundaryKind.closed)
    assert Boundary(1, BoundaryKind.closed) + Boundary(2, BoundaryKind.open) == Boundary(3, BoundaryKind.open)
    assert Boundary(1, BoundaryKind.closed) + Boundary(None, BoundaryKind.plus_infinity) == \
        Boundary(None, BoundaryKind.plus_infinity)
    assert (Boundary.empty() + Boundary(1, BoundaryKind.closed)).kind is BoundaryKind.empty


def test_negation():
    assert -Boundary(2, BoundaryKind.open) == Boundary(-2, BoundaryKind.open)
    assert (-Boundary(None, BoundaryKind.plus_infinity)).kind is BoundaryKind.minus_infinity


def test_multiplication_signs():
    assert Boundary(-2, BoundaryKind.open) * Boundary(5, BoundaryKind.closed) == Boundary(-10, BoundaryKind.open)
    assert Boundary(-2, BoundaryKind.closed) * Boundary(-5, BoundaryKind.closed) == \
        Boundary(10, BoundaryKind.closed)


def test_multiplication_by_zero_and_infinity():
    plus_infinity = Boundary(None, BoundaryKind.plus_infinity)
    assert Boundary(0.0, BoundaryKind.closed) * plus_infinity == Boundary(0.0, BoundaryKind.closed)
    assert plus_infinity * Boundary(0.0, BoundaryKind.open) == Boundary(0.0, BoundaryKind.open)
    assert Boundary(3.0, BoundaryKind.closed) * plus_infinity == plus_infinity
    assert Boundary(-3.0, BoundaryKind.closed) * plus_infinity == Boundary(None, BoundaryKind.minus_infinity)
