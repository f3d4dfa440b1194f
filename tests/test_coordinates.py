"""
Tests for coordinate value types.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import given, strategies as st

from clplot.errors import CoordinateError
from clplot.schemas.coordinates import DomainPoint, GridDelta, GridPoint, clamp

cells = st.integers(min_value=0, max_value=10_000)
grid_points = st.builds(GridPoint, cells, cells)


@given(st.integers(), st.integers(), st.integers())
def test_clamp_is_idempotent(n: int, a: int, b: int) -> None:
    """Verify clamping an already clamped value changes nothing."""
    lower, upper = min(a, b), max(a, b)
    once = clamp(n, lower, upper)
    assert clamp(once, lower, upper) == once
    assert lower <= once <= upper


def test_clamp_floats() -> None:
    assert clamp(1.5, 0.0, 1.0) == 1.0
    assert clamp(-0.5, 0.0, 1.0) == 0.0
    assert clamp(0.25, 0.0, 1.0) == 0.25


@given(grid_points, grid_points)
def test_to_then_add_reaches_target(a: GridPoint, b: GridPoint) -> None:
    """Verify a + a.to(b) == b for any operand order."""
    assert a + a.to(b) == b


def test_to_is_signed() -> None:
    """Verify translation vectors can point backwards without underflow."""
    delta = GridPoint(5, 2).to(GridPoint(1, 7))
    assert delta == GridDelta(-4, 5)
    assert GridPoint(5, 2) - GridPoint(1, 7) == GridDelta(4, -5)


def test_add_grid_points_componentwise() -> None:
    assert GridPoint(1, 3) + GridPoint(2, 4) == GridPoint(3, 7)


def test_negative_grid_point_rejected() -> None:
    with pytest.raises(CoordinateError):
        GridPoint(-1, 0)
    with pytest.raises(CoordinateError):
        GridPoint(0, 1.5)  # type: ignore[arg-type]


def test_translation_off_grid_raises() -> None:
    with pytest.raises(CoordinateError):
        GridPoint(1, 1) + GridDelta(-2, 0)


def test_delta_arithmetic() -> None:
    delta = GridDelta(2, -3)
    assert delta + GridDelta(1, 1) == GridDelta(3, -2)
    assert delta - GridDelta(1, 1) == GridDelta(1, -4)
    assert -delta == GridDelta(-2, 3)
    assert GridDelta(0, 0).is_zero
    assert not delta.is_zero


def test_offset() -> None:
    assert GridPoint(4, 4).offset(-1, 2) == GridPoint(3, 6)


def test_domain_point_arithmetic_and_distance() -> None:
    a = DomainPoint(1.0, 3.0)
    b = DomainPoint(4.0, 7.0)
    assert a.to(b) == DomainPoint(3.0, 4.0)
    assert a + a.to(b) == b
    assert b - a == DomainPoint(3.0, 4.0)
    assert a.distance(b) == pytest.approx(5.0)


def test_domain_point_coerces_ints() -> None:
    point = DomainPoint(1, 2)
    assert isinstance(point.x, float)
    assert point == DomainPoint(1.0, 2.0)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_domain_point_rejects_non_finite(value: float) -> None:
    with pytest.raises(CoordinateError):
        DomainPoint(value, 0.0)
