"""
Render pass: turn selected curve definitions into chart-ready series.

This is the only entrypoint most chart front-ends need:
`render_curves(curves, (lower, upper), config)`. Presentation variants
(palette, stroke widths, marker overlay, compact legend, fee-aware borrow
series) are all options of `RenderConfig`; the curve math is shared.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ratecurves.config import DEFAULT_RESOLUTION, EngineConfig, Extrapolation
from ratecurves.derive import (
    apply_protocol_fee,
    fee_adjusted_marker,
    generate_borrow_and_lend,
    lend_marker_at,
)
from ratecurves.points import CurveDefinition, Point, PointSequence, build_points

logger = logging.getLogger(__name__)

DEFAULT_RANGE: tuple[float, float] = (40.0, 100.0)
DEFAULT_PALETTE: tuple[str, ...] = ("#0000FF", "#008000")  # blue, green


@dataclass(frozen=True)
class RenderConfig:
    """
    Presentation options for one chart.

    - `legend_thickness` scales the legend font weight (x 800).
    - `small_layout` stacks the legend in a single column.
    - `apply_protocol_fee` draws the borrow series with the curve's
      protocol fee applied; lend rates stay derived from the base rate.
    """

    palette: tuple[str, ...] = DEFAULT_PALETTE
    borrow_width: float = 2.5
    lend_width: float = 1.5
    show_markers: bool = False
    small_layout: bool = False
    legend_thickness: float = 0.75
    apply_protocol_fee: bool = False
    resolution: int = DEFAULT_RESOLUTION
    extrapolation: Extrapolation = Extrapolation.ZERO
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.palette:
            raise ValueError("palette must not be empty")

    @classmethod
    def from_engine(cls, engine: EngineConfig, **options) -> "RenderConfig":
        """Presentation options on top of engine-level settings."""
        return cls(
            resolution=engine.resolution,
            extrapolation=engine.extrapolation,
            strict=engine.strict,
            **options,
        )


@dataclass(frozen=True)
class RenderedCurve:
    label: str
    data: PointSequence
    color: str
    stroke_width: float


@dataclass(frozen=True)
class Marker:
    label: str
    point: Point
    color: str


@dataclass(frozen=True)
class LegendLayout:
    columns: int
    font_weight: float


@dataclass
class RenderedChart:
    """Everything a chart needs for one draw: series, markers, axis domain, legend."""

    curves: list[RenderedCurve] = field(default_factory=list)
    markers: list[Marker] = field(default_factory=list)
    domain: tuple[float, float] = DEFAULT_RANGE
    legend: LegendLayout = field(default_factory=lambda: LegendLayout(2, 600.0))


def _legend(config: RenderConfig) -> LegendLayout:
    return LegendLayout(
        columns=1 if config.small_layout else 2,
        font_weight=config.legend_thickness * 800,
    )


def render_curve(
    curve: CurveDefinition,
    utilization_range: tuple[float, float],
    color: str,
    config: RenderConfig,
) -> tuple[list[RenderedCurve], list[Marker]]:
    """Borrow and lend series (plus optional markers) for one definition."""
    points = build_points(curve, strict=config.strict)
    borrow, lend = generate_borrow_and_lend(
        points, utilization_range, config.resolution, config.extrapolation
    )
    fee: Optional[float] = curve.protocol_fee if config.apply_protocol_fee else None
    if fee:
        borrow = apply_protocol_fee(borrow, fee)

    series = [
        RenderedCurve(f"{curve.name} (Borrow)", borrow, color, config.borrow_width),
        RenderedCurve(f"{curve.name} (Lend)", lend, color, config.lend_width),
    ]
    markers: list[Marker] = []
    if config.show_markers and curve.current_utilization is not None:
        u = curve.current_utilization
        markers.append(
            Marker(
                f"{curve.name} (Borrow) @ {u:.2f}%",
                fee_adjusted_marker(points, u, fee, config.extrapolation),
                color,
            )
        )
        markers.append(
            Marker(
                f"{curve.name} (Lend) @ {u:.2f}%",
                lend_marker_at(points, u, config.extrapolation),
                color,
            )
        )
    return series, markers


def render_curves(
    curves: Sequence[CurveDefinition],
    utilization_range: tuple[float, float] = DEFAULT_RANGE,
    config: Optional[RenderConfig] = None,
) -> RenderedChart:
    """Render every selected curve; curve i takes palette color i (cycling)."""
    config = config or RenderConfig()
    lower, upper = utilization_range
    chart = RenderedChart(domain=(lower, upper), legend=_legend(config))
    for i, curve in enumerate(curves):
        color = config.palette[i % len(config.palette)]
        series, markers = render_curve(curve, (lower, upper), color, config)
        chart.curves.extend(series)
        chart.markers.extend(markers)
    logger.debug(
        "rendered %d series, %d markers over [%s, %s]",
        len(chart.curves),
        len(chart.markers),
        lower,
        upper,
    )
    return chart
