"""Tests for pointwise interpolation (interpolate_at)."""

import pytest

from ratecurves.config import Extrapolation
from ratecurves.interpolation import interpolate_at
from ratecurves.points import CurveDefinition, Point, build_points

KINK = [Point(0, 0), Point(90, 7.5), Point(100, 30)]


def test_interpolation_above_kink() -> None:
    """x=95 between (90, 7.5) and (100, 30): 7.5 + 22.5 * 5/10 = 18.75."""
    assert interpolate_at(KINK, 95) == 18.75


def test_interpolation_below_kink() -> None:
    """x=40 on the first segment: 7.5 * 40/90."""
    assert abs(interpolate_at(KINK, 40) - 7.5 * 40 / 90) < 1e-12


def test_exact_nodes_return_stored_rates() -> None:
    """No interpolation error at existing nodes."""
    points = [Point(0, 0), Point(33.3, 1.1), Point(66.7, 2.9), Point(100, 13.7)]
    for p in points:
        assert interpolate_at(points, p.x) == p.y


def test_value_between_bracketing_nodes() -> None:
    """Interpolated rate stays within the bracketing nodes' rates."""
    points = [Point(0, 0), Point(45, 2), Point(75, 6), Point(100, 80)]
    for i in range(0, 1001):
        x = i / 10
        y = interpolate_at(points, x)
        hi = min((p for p in points if p.x >= x), key=lambda p: p.x)
        lo = max((p for p in points if p.x <= x), key=lambda p: p.x)
        assert min(lo.y, hi.y) - 1e-12 <= y <= max(lo.y, hi.y) + 1e-12


def test_outside_span_is_zero() -> None:
    """Queries outside [min x, max x] degrade to a zero rate."""
    assert interpolate_at(KINK, -0.01) == 0.0
    assert interpolate_at(KINK, 100.01) == 0.0
    assert interpolate_at([Point(20, 5), Point(60, 9)], 10) == 0.0


def test_empty_and_single_point_are_zero() -> None:
    assert interpolate_at([], 50) == 0.0
    assert interpolate_at([Point(50, 5)], 50) == 0.0


def test_duplicate_x_returns_later_point() -> None:
    """Duplicate-x segment: later point in sort order wins, no ZeroDivisionError."""
    points = build_points(CurveDefinition(name="C", x=[0, 50], y=[2, 5], max_rate=10))
    assert interpolate_at(points, 0) == 2.0
    points = [Point(0, 0), Point(50, 3), Point(50, 6), Point(100, 10)]
    assert interpolate_at(points, 50) == 3.0
    assert abs(interpolate_at(points, 75) - 8.0) < 1e-12


def test_unsorted_points_are_sorted_privately() -> None:
    """Unsorted input interpolates correctly and the caller's list is not reordered."""
    points = [Point(100, 30), Point(90, 7.5), Point(0, 0)]
    original = list(points)
    assert interpolate_at(points, 95) == 18.75
    assert points == original


def test_nearest_slope_extrapolation() -> None:
    """NEAREST_SLOPE continues the end segments instead of returning zero."""
    above = interpolate_at(KINK, 110, Extrapolation.NEAREST_SLOPE)
    below = interpolate_at(KINK, -9, Extrapolation.NEAREST_SLOPE)
    assert abs(above - 52.5) < 1e-12
    assert abs(below - (-0.75)) < 1e-12


def test_nearest_slope_matches_zero_mode_inside_span() -> None:
    for x in (0, 12.5, 90, 95, 100):
        assert interpolate_at(KINK, x, Extrapolation.NEAREST_SLOPE) == interpolate_at(KINK, x)


def test_nearest_slope_skips_degenerate_end_segments() -> None:
    """Duplicate points at the ends are skipped when looking for a slope."""
    points = [Point(0, 0), Point(0, 1), Point(10, 2), Point(20, 4), Point(20, 5)]
    assert abs(interpolate_at(points, 30, Extrapolation.NEAREST_SLOPE) - 6.0) < 1e-12
    assert abs(interpolate_at(points, -10, Extrapolation.NEAREST_SLOPE) - 0.0) < 1e-12
    flat = [Point(5, 1), Point(5, 2)]
    assert interpolate_at(flat, 10, Extrapolation.NEAREST_SLOPE) == 2
    assert interpolate_at(flat, 0, Extrapolation.NEAREST_SLOPE) == 1


@pytest.mark.parametrize("x", [-50.0, 150.0])
def test_zero_mode_is_default(x: float) -> None:
    assert interpolate_at(KINK, x) == interpolate_at(KINK, x, Extrapolation.ZERO) == 0.0
