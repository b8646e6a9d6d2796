"""
Derived curves: lend rates, protocol fee adjustment and marker lookup.

The lend rate is the borrow rate prorated by utilization:

    lend(u) = borrow(u) * u / 100

The protocol fee is a percent surcharge on the borrow rate:

    borrow_with_fee(u) = borrow(u) * (1 + fee / 100)

Markers are queried directly on the unresampled points, so a fee-adjusted
marker and the fee-adjusted resampled curve agree at the marker's x.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ratecurves.config import DEFAULT_RESOLUTION, Extrapolation
from ratecurves.interpolation import interpolate, interpolate_at
from ratecurves.points import Point, PointSequence


def lend_curve(borrow: Sequence[Point]) -> PointSequence:
    """Lend curve sampled at the same utilizations as `borrow`."""
    return [Point(p.x, p.y * p.x / 100.0) for p in borrow]


def generate_borrow_and_lend(
    points: Sequence[Point],
    utilization_range: tuple[float, float],
    resolution: int = DEFAULT_RESOLUTION,
    extrapolation: Extrapolation = Extrapolation.ZERO,
) -> tuple[PointSequence, PointSequence]:
    """Resample the borrow curve over `utilization_range` and derive its lend curve."""
    lower, upper = utilization_range
    borrow = interpolate(points, lower, upper, resolution, extrapolation)
    return borrow, lend_curve(borrow)


def fee_adjusted_rate(rate: float, protocol_fee: Optional[float]) -> float:
    if not protocol_fee:
        return rate
    return rate * (1.0 + protocol_fee / 100.0)


def apply_protocol_fee(
    curve: Sequence[Point], protocol_fee: Optional[float]
) -> PointSequence:
    """Pointwise fee adjustment of an already resampled borrow curve."""
    return [Point(p.x, fee_adjusted_rate(p.y, protocol_fee)) for p in curve]


def marker_at(
    points: Sequence[Point],
    utilization: float,
    extrapolation: Extrapolation = Extrapolation.ZERO,
) -> Point:
    """Single point on the curve at `utilization` (e.g. current utilization)."""
    return Point(utilization, interpolate_at(points, utilization, extrapolation))


def fee_adjusted_marker(
    points: Sequence[Point],
    utilization: float,
    protocol_fee: Optional[float],
    extrapolation: Extrapolation = Extrapolation.ZERO,
) -> Point:
    base = marker_at(points, utilization, extrapolation)
    return Point(base.x, fee_adjusted_rate(base.y, protocol_fee))


def lend_marker_at(
    points: Sequence[Point],
    utilization: float,
    extrapolation: Extrapolation = Extrapolation.ZERO,
) -> Point:
    """Marker on the lend curve derived from the base borrow rate."""
    base = marker_at(points, utilization, extrapolation)
    return Point(base.x, base.y * base.x / 100.0)
