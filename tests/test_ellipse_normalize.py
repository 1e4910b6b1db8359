"""Tests for canonicalizing an ellipse and growing it around a vector."""

from __future__ import annotations

import math

from hypothesis import given
from hypothesis import strategies as st
import pytest

from arc_ellipse import Ellipse


def _state(ell: Ellipse) -> tuple[float, float, float]:
    return ell.rx, ell.ry, ell.ax


def test_scales_to_reach_vector() -> None:
    ell = Ellipse(5, 3, 0).normalize(10, 0)

    assert _state(ell) == (10.0, 6.0, 0.0)


def test_vector_inside_leaves_radii() -> None:
    ell = Ellipse(5, 3, 0).normalize(1, 1)

    assert _state(ell) == (5.0, 3.0, 0.0)


def test_zero_vector_only_canonicalizes() -> None:
    ell = Ellipse(-5, 3, 200)
    result = ell.normalize(0, 0)

    assert result is ell
    assert ell.rx == 5.0
    assert ell.ry == 3.0
    assert ell.ax == pytest.approx(20.0)


@pytest.mark.parametrize(
    ("rx", "ry", "ax", "expected"),
    [
        (3.0, 5.0, 100.0, (5.0, 3.0, 10.0)),
        (-5.0, 3.0, -30.0, (3.0, 5.0, 60.0)),
        (5.0, -3.0, 390.0, (5.0, 3.0, 30.0)),
        (5.0, 3.0, -180.0, (5.0, 3.0, 0.0)),
        (5.0, 3.0, 90.0, (3.0, 5.0, 0.0)),
    ],
)
def test_angle_reduced_into_first_quadrant(
    rx: float, ry: float, ax: float, expected: tuple[float, float, float]
) -> None:
    ell = Ellipse(rx, ry, ax).normalize()

    assert ell.rx == pytest.approx(expected[0])
    assert ell.ry == pytest.approx(expected[1])
    assert ell.ax == pytest.approx(expected[2], abs=1e-12)


def test_almost_circle_becomes_circle() -> None:
    ell = Ellipse(4.0, -(4.0 + 5e-8), 33.0).normalize()

    assert ell.ax == 0.0
    assert ell.rx == ell.ry
    assert ell.rx == pytest.approx(4.0 + 2.5e-8)


def test_coarse_precision_widens_circle_test() -> None:
    ell = Ellipse(4.0, 4.004, 33.0, precision=2).normalize()

    assert ell.ax == 0.0
    assert ell.rx == pytest.approx(4.002)


def test_rotated_vector_scaling() -> None:
    # the vector lies on the rotated major axis, twice as far as the radius
    ell = Ellipse(5, 3, 30).normalize(8.660254037844386, 5.0)

    assert ell.rx == pytest.approx(10.0)
    assert ell.ry == pytest.approx(6.0)
    assert ell.ax == pytest.approx(30.0)


def test_negative_tiny_angle_stays_in_range() -> None:
    ell = Ellipse(5, 3, -1e-20).normalize()

    assert 0.0 <= ell.ax < 90.0


def test_zero_radius_scales_to_infinity() -> None:
    ell = Ellipse(0, 3, 0).normalize(1, 1)

    assert math.isnan(ell.rx)
    assert ell.ry == math.inf


def test_zero_radius_without_component_keeps_radii() -> None:
    ell = Ellipse(5, 0, 0)

    assert math.isnan(ell.scale_factor(10, 0))
    assert not ell.contains(10, 0)
    assert _state(ell.normalize(10, 0)) == (5.0, 0.0, 0.0)


def test_normalize_after_collapsing_transform() -> None:
    ell = Ellipse(5, 3, 30).transform([1.0, 0.0, 0.0, 0.0])
    assert ell.ry == 0.0

    ell.normalize(1, 1)

    assert ell.rx == math.inf
    assert math.isnan(ell.ry)
    assert ell.ax == 0.0


def test_is_degenerate() -> None:
    assert Ellipse(0, 3, 0).is_degenerate()
    assert Ellipse(3, -1e-9, 0).is_degenerate()
    assert not Ellipse(5, 3, 45).is_degenerate()
    assert Ellipse(5, 0.001, 45, precision=2).is_degenerate()


radius = st.floats(min_value=0.5, max_value=100.0)
signed_radius = radius | radius.map(lambda r: -r)
angle = st.floats(min_value=-720.0, max_value=720.0)
component = st.floats(min_value=-100.0, max_value=100.0)


@given(rx=signed_radius, ry=signed_radius, ax=angle)
def test_normalize_is_idempotent(rx: float, ry: float, ax: float) -> None:
    once = _state(Ellipse(rx, ry, ax).normalize())
    twice = _state(Ellipse(rx, ry, ax).normalize().normalize())

    assert once == twice


@given(rx=signed_radius, ry=signed_radius, ax=angle)
def test_normalize_canonical_range(rx: float, ry: float, ax: float) -> None:
    ell = Ellipse(rx, ry, ax).normalize()

    assert ell.rx >= 0.0 and ell.ry >= 0.0
    if ell.rx == ell.ry:
        assert ell.ax == 0.0
    else:
        assert abs(ell.rx - ell.ry) > ell.epsilon
        assert 0.0 <= ell.ax < 90.0


@given(rx=signed_radius, ry=signed_radius, ax=angle, dx=component, dy=component)
def test_normalize_contains_vector(
    rx: float, ry: float, ax: float, dx: float, dy: float
) -> None:
    ell = Ellipse(rx, ry, ax).normalize(dx, dy)

    assert ell.contains(dx, dy)
    assert ell.scale_factor(dx, dy) <= 1.0 + 1e-9
