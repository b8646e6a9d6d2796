"""Service layer: convert GraphQL inputs to rate curve library objects and run the engine."""

from __future__ import annotations

import logging
from typing import Optional

from ratecurves.catalog import CurveCatalog
from ratecurves.config import Extrapolation
from ratecurves.derive import fee_adjusted_marker, generate_borrow_and_lend, marker_at
from ratecurves.points import CurveDefinition, Point, build_points
from ratecurves.render import DEFAULT_PALETTE, RenderConfig, RenderedChart, render_curves

from app.store import get_catalog
from app.types import (
    BorrowAndLend,
    CurveDefinitionInput,
    CurveDefinitionType,
    LegendLayoutType,
    MarkerType,
    PointType,
    RenderConfigInput,
    RenderedChartType,
    RenderedCurveType,
)

logger = logging.getLogger(__name__)

# Upper bound on samples per series accepted over the API.
MAX_RESOLUTION = 10_000


def _definition_from_input(c: CurveDefinitionInput) -> CurveDefinition:
    """Build CurveDefinition from GraphQL CurveDefinitionInput."""
    return CurveDefinition(
        name=c.name,
        x=list(c.x),
        y=list(c.y),
        max_rate=c.max_rate,
        current_utilization=c.current_utilization,
        protocol_fee=c.protocol_fee,
        token=c.token,
    )


def definition_to_type(c: CurveDefinition) -> CurveDefinitionType:
    return CurveDefinitionType(
        name=c.name,
        x=[float(v) for v in c.x],
        y=[float(v) for v in c.y],
        max_rate=c.max_rate,
        current_utilization=c.current_utilization,
        protocol_fee=c.protocol_fee,
        token=c.token,
    )


def _points_to_type(points: list[Point]) -> list[PointType]:
    return [PointType(x=p.x, y=p.y) for p in points]


def _lookup(catalog: CurveCatalog, name: str) -> CurveDefinition:
    try:
        return catalog.get(name)
    except KeyError:
        raise ValueError(
            f"curve '{name}' not found in catalog. Available curves: {catalog.names()}"
        ) from None


def resolve_definition(
    curve_name: Optional[str], curve: Optional[CurveDefinitionInput]
) -> CurveDefinition:
    """Exactly one of curve_name (catalog lookup) or curve (inline nodes)."""
    if (curve_name is None) == (curve is None):
        raise ValueError("provide exactly one of curveName or curve")
    if curve is not None:
        return _definition_from_input(curve)
    return _lookup(get_catalog(), curve_name)


def _check_resolution(resolution: int) -> None:
    if not 1 <= resolution <= MAX_RESOLUTION:
        raise ValueError(f"resolution must be between 1 and {MAX_RESOLUTION}")


def list_curves() -> list[CurveDefinitionType]:
    return [definition_to_type(c) for c in get_catalog()]


def find_curve(name: str) -> Optional[CurveDefinitionType]:
    """Return catalog curve by name, or None if not found."""
    try:
        return definition_to_type(get_catalog().get(name))
    except KeyError:
        return None


def rate_at(
    utilization: float,
    curve_name: Optional[str] = None,
    curve: Optional[CurveDefinitionInput] = None,
    apply_protocol_fee: bool = False,
    extrapolation: Extrapolation = Extrapolation.ZERO,
) -> PointType:
    """Borrow rate at one utilization, optionally with the curve's protocol fee."""
    definition = resolve_definition(curve_name, curve)
    points = build_points(definition)
    if apply_protocol_fee:
        point = fee_adjusted_marker(points, utilization, definition.protocol_fee, extrapolation)
    else:
        point = marker_at(points, utilization, extrapolation)
    return PointType(x=point.x, y=point.y)


def borrow_and_lend(
    lower: float,
    upper: float,
    curve_name: Optional[str] = None,
    curve: Optional[CurveDefinitionInput] = None,
    resolution: int = 1000,
    extrapolation: Extrapolation = Extrapolation.ZERO,
) -> BorrowAndLend:
    """Resample the borrow curve over [lower, upper] and derive the lend curve."""
    _check_resolution(resolution)
    definition = resolve_definition(curve_name, curve)
    borrow, lend = generate_borrow_and_lend(
        build_points(definition), (lower, upper), resolution, extrapolation
    )
    return BorrowAndLend(borrow=_points_to_type(borrow), lend=_points_to_type(lend))


def _render_config_from_input(c: Optional[RenderConfigInput]) -> RenderConfig:
    if c is None:
        return RenderConfig()
    _check_resolution(c.resolution)
    return RenderConfig(
        palette=tuple(c.palette) if c.palette else DEFAULT_PALETTE,
        borrow_width=c.borrow_width,
        lend_width=c.lend_width,
        show_markers=c.show_markers,
        small_layout=c.small_layout,
        legend_thickness=c.legend_thickness,
        apply_protocol_fee=c.apply_protocol_fee,
        resolution=c.resolution,
        extrapolation=Extrapolation(c.extrapolation),
        strict=c.strict,
    )


def _chart_to_type(chart: RenderedChart) -> RenderedChartType:
    return RenderedChartType(
        curves=[
            RenderedCurveType(
                label=s.label,
                data=_points_to_type(s.data),
                color=s.color,
                stroke_width=s.stroke_width,
            )
            for s in chart.curves
        ],
        markers=[
            MarkerType(label=m.label, point=PointType(x=m.point.x, y=m.point.y), color=m.color)
            for m in chart.markers
        ],
        domain=list(chart.domain),
        legend=LegendLayoutType(
            columns=chart.legend.columns, font_weight=chart.legend.font_weight
        ),
    )


def render_chart(
    lower: float,
    upper: float,
    curve_names: Optional[list[str]] = None,
    curves: Optional[list[CurveDefinitionInput]] = None,
    config: Optional[RenderConfigInput] = None,
) -> RenderedChartType:
    """
    Render borrow/lend series for catalog curves (by name) and/or inline curves.
    With neither given, the first two catalog curves are drawn.
    """
    catalog = get_catalog()
    selected: list[CurveDefinition] = []
    if curve_names:
        selected.extend(_lookup(catalog, name) for name in curve_names)
    if curves:
        selected.extend(_definition_from_input(c) for c in curves)
    if curve_names is None and curves is None:
        selected = list(catalog)[:2]
    if not selected:
        raise ValueError("no curves selected")
    render_config = _render_config_from_input(config)
    logger.debug("rendering %s over [%s, %s]", [c.name for c in selected], lower, upper)
    chart = render_curves(selected, (lower, upper), render_config)
    return _chart_to_type(chart)
