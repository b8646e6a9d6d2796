"""
Pointwise interpolation and dense resampling of rate curves.

Conventions:
- Interpolation is **linear in rates** between adjacent points, after a stable
  sort by utilization. Callers' sequences are never reordered.
- Outside the span of the points the rate is **zero** (Extrapolation.ZERO).
  Extrapolation.NEAREST_SLOPE continues the nearest segment instead.
- A segment whose two points share the same x yields the later point's y.
"""

from __future__ import annotations

import math
from typing import Sequence

from ratecurves.config import DEFAULT_RESOLUTION, Extrapolation
from ratecurves.errors import InvalidRangeError
from ratecurves.points import Point, PointSequence


def _sorted(points: Sequence[Point]) -> PointSequence:
    return sorted(points, key=lambda p: p.x)


def _segment_value(p0: Point, p1: Point, x: float) -> float:
    if p1.x == p0.x:
        return p1.y
    # Exact node hits return the stored rate, no rounding from the formula.
    if x == p1.x:
        return p1.y
    if x == p0.x:
        return p0.y
    return p0.y + (p1.y - p0.y) * (x - p0.x) / (p1.x - p0.x)


def _nearest_slope(ordered: PointSequence, x: float) -> float:
    """Extend the closest non-degenerate end segment to x."""
    if x < ordered[0].x:
        for i in range(1, len(ordered)):
            if ordered[i].x != ordered[0].x:
                p0, p1 = ordered[i - 1], ordered[i]
                return p0.y + (p1.y - p0.y) * (x - p0.x) / (p1.x - p0.x)
        return ordered[0].y
    for i in range(len(ordered) - 2, -1, -1):
        if ordered[i].x != ordered[-1].x:
            p0, p1 = ordered[i], ordered[i + 1]
            return p1.y + (p1.y - p0.y) * (x - p1.x) / (p1.x - p0.x)
    return ordered[-1].y


def interpolate_at(
    points: Sequence[Point],
    x: float,
    extrapolation: Extrapolation = Extrapolation.ZERO,
) -> float:
    """
    Rate at utilization `x`.

    Scans adjacent pairs in ascending order and interpolates on the first pair
    with x0 <= x <= x1. Never raises for out-of-span queries.
    """
    ordered = _sorted(points)
    for i in range(1, len(ordered)):
        p0, p1 = ordered[i - 1], ordered[i]
        if p0.x <= x <= p1.x:
            return _segment_value(p0, p1, x)
    if extrapolation is Extrapolation.NEAREST_SLOPE and ordered:
        return _nearest_slope(ordered, x)
    return 0.0


def _check_range(lower: float, upper: float) -> None:
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise InvalidRangeError(f"range bounds must be finite, got [{lower}, {upper}]")
    if lower > upper:
        raise InvalidRangeError(f"lower must be <= upper, got [{lower}, {upper}]")


def interpolate(
    points: Sequence[Point],
    lower: float,
    upper: float,
    resolution: int = DEFAULT_RESOLUTION,
    extrapolation: Extrapolation = Extrapolation.ZERO,
) -> PointSequence:
    """
    Resample `points` over [lower, upper] into `resolution + 1` evenly spaced
    samples, both bounds included exactly.

    Bounds not already present as points are first synthesized with
    `interpolate_at` and added to a private working set. A zero-width range
    returns the single sample at `lower`.
    """
    _check_range(lower, upper)
    if resolution < 1:
        raise ValueError("resolution must be >= 1")
    working = list(points)
    for bound in (lower, upper):
        if not any(p.x == bound for p in working):
            working.append(Point(bound, interpolate_at(working, bound, extrapolation)))
    working = _sorted(working)

    if upper == lower:
        return [Point(lower, interpolate_at(working, lower, extrapolation))]

    samples: PointSequence = []
    width = upper - lower
    for i in range(resolution):
        # Index-based stepping: no float accumulation across the window.
        x = lower + width * i / resolution
        samples.append(Point(x, interpolate_at(working, x, extrapolation)))
    samples.append(Point(upper, interpolate_at(working, upper, extrapolation)))
    return samples
