"""
Curve definitions and point construction.

A lending-market rate curve is defined by a handful of nodes:
- `x[i]` is a **utilization** in percent (0..100),
- `y[i]` is the **rate** in percent at that utilization,
- `max_rate` is the rate at 100% utilization.

`build_points` turns that into a point sequence anchored at (0, 0) and
(100, max_rate). Nothing is validated unless the caller asks for it: unsorted
or duplicate x values are passed through and the interpolator copes with them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, TypeAlias

from ratecurves.errors import CurveValidationError

MIN_UTILIZATION = 0.0
MAX_UTILIZATION = 100.0


@dataclass(frozen=True)
class Point:
    """A single (utilization %, rate %) sample."""

    x: float
    y: float


PointSequence: TypeAlias = list[Point]


@dataclass(frozen=True)
class CurveDefinition:
    """
    Sparse piecewise-linear curve definition, as stored in the curve catalog.

    `x` and `y` are consumed pairwise up to the shorter of the two. Entries may
    be numeric strings (catalog files written by hand often quote them).
    `protocol_fee` is a percent surcharge applied multiplicatively to the
    borrow rate; `current_utilization` positions the marker overlay.
    """

    name: str
    x: Sequence[float | str] = field(default_factory=list)
    y: Sequence[float | str] = field(default_factory=list)
    max_rate: float = 0.0
    current_utilization: Optional[float] = None
    protocol_fee: Optional[float] = None
    token: Optional[str] = None


def build_points(curve: CurveDefinition, strict: bool = False) -> PointSequence:
    """Return the anchored point sequence for `curve`.

    Always prepends (0, 0) and appends (100, max_rate), even if the nodes
    already cover those utilizations.
    """
    if strict:
        validate_definition(curve)
    points = [Point(MIN_UTILIZATION, 0.0)]
    for i in range(min(len(curve.x), len(curve.y))):
        points.append(Point(float(curve.x[i]), float(curve.y[i])))
    points.append(Point(MAX_UTILIZATION, float(curve.max_rate)))
    return points


def validate_definition(curve: CurveDefinition) -> None:
    """
    Strict check of a curve definition. Collects every problem and raises a
    single CurveValidationError; returns None when the definition is clean.
    """
    problems: list[str] = []
    if len(curve.x) != len(curve.y):
        problems.append(f"x has {len(curve.x)} nodes but y has {len(curve.y)}")
    try:
        xs = [float(v) for v in curve.x]
        for v in [*curve.y, curve.max_rate]:
            float(v)
    except (TypeError, ValueError):
        raise CurveValidationError(curve.name, ["nodes and max_rate must be numeric"])
    for i in range(1, len(xs)):
        if xs[i] <= xs[i - 1]:
            problems.append("x nodes must be strictly increasing")
            break
    outside = [v for v in xs if not MIN_UTILIZATION <= v <= MAX_UTILIZATION]
    if outside:
        problems.append(f"x nodes outside [0, 100]: {outside}")
    if problems:
        raise CurveValidationError(curve.name, problems)
