"""Tests for lend derivation, protocol fee and markers."""

from ratecurves.derive import (
    apply_protocol_fee,
    fee_adjusted_marker,
    fee_adjusted_rate,
    generate_borrow_and_lend,
    lend_curve,
    lend_marker_at,
    marker_at,
)
from ratecurves.interpolation import interpolate
from ratecurves.points import CurveDefinition, Point, build_points

STABLE = CurveDefinition(
    name="Stablecoin Kink",
    x=[80, 90],
    y=[4, 7.5],
    max_rate=30,
    current_utilization=85,
    protocol_fee=5,
)


def test_borrow_and_lend_pairwise() -> None:
    """lend.y = borrow.y * borrow.x / 100 and x values match sample by sample."""
    points = build_points(STABLE)
    borrow, lend = generate_borrow_and_lend(points, (40, 100))
    assert len(borrow) == len(lend) == 1001
    for b, ld in zip(borrow, lend):
        assert ld.x == b.x
        assert ld.y == b.y * b.x / 100


def test_borrow_matches_resampler() -> None:
    points = build_points(STABLE)
    borrow, _ = generate_borrow_and_lend(points, (40, 100), resolution=50)
    assert borrow == interpolate(points, 40, 100, resolution=50)


def test_lend_at_full_utilization_equals_borrow() -> None:
    lend = lend_curve([Point(0, 5), Point(50, 10), Point(100, 30)])
    assert lend == [Point(0, 0.0), Point(50, 5.0), Point(100, 30.0)]


def test_fee_adjusted_rate() -> None:
    """Borrow 10% with a 5% protocol fee: 10 * 1.05 = 10.5."""
    assert abs(fee_adjusted_rate(10, 5) - 10.5) < 1e-12
    assert fee_adjusted_rate(10, None) == 10
    assert fee_adjusted_rate(10, 0) == 10


def test_apply_protocol_fee_pointwise() -> None:
    curve = [Point(80, 10), Point(90, 20)]
    adjusted = apply_protocol_fee(curve, 5)
    assert [p.x for p in adjusted] == [80, 90]
    assert abs(adjusted[0].y - 10.5) < 1e-12
    assert abs(adjusted[1].y - 21.0) < 1e-12
    assert apply_protocol_fee(curve, None) == curve


def test_marker_at() -> None:
    points = build_points(STABLE)
    marker = marker_at(points, 85)
    assert marker == Point(85, 5.75)


def test_fee_marker_agrees_with_resampled_curve() -> None:
    """Fee applied to the resampled curve and to the direct marker query agree at the marker's x."""
    points = build_points(STABLE)
    borrow, _ = generate_borrow_and_lend(points, (0, 100), resolution=1000)
    adjusted = apply_protocol_fee(borrow, STABLE.protocol_fee)
    marker = fee_adjusted_marker(points, STABLE.current_utilization, STABLE.protocol_fee)
    sample = next(p for p in adjusted if p.x == marker.x)
    assert abs(sample.y - marker.y) < 1e-12
    assert abs(marker.y - 5.75 * 1.05) < 1e-12


def test_lend_marker_uses_base_rate() -> None:
    points = build_points(STABLE)
    marker = lend_marker_at(points, 85)
    assert marker.x == 85
    assert abs(marker.y - 5.75 * 0.85) < 1e-12


def test_marker_outside_span_is_zero() -> None:
    points = build_points(STABLE)
    assert marker_at(points, 120) == Point(120, 0.0)
