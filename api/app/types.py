"""GraphQL types for the rate curve API."""

from __future__ import annotations

from typing import Optional

import strawberry

from ratecurves.config import Extrapolation

ExtrapolationMode = strawberry.enum(Extrapolation, name="Extrapolation")


# --- Input types (request payloads) ---


@strawberry.input
class CurveDefinitionInput:
    """Curve nodes: utilizations x (%), rates y (%), rate at 100% utilization."""

    name: str
    x: list[float]
    y: list[float]
    max_rate: float
    current_utilization: Optional[float] = None
    protocol_fee: Optional[float] = None
    token: Optional[str] = None


@strawberry.input
class RenderConfigInput:
    """Presentation options for renderChart. Omitted palette uses blue/green."""

    palette: Optional[list[str]] = None
    borrow_width: float = 2.5
    lend_width: float = 1.5
    show_markers: bool = False
    small_layout: bool = False
    legend_thickness: float = 0.75
    apply_protocol_fee: bool = False
    resolution: int = 1000
    extrapolation: ExtrapolationMode = Extrapolation.ZERO
    strict: bool = False


# --- Output types (response payloads) ---


@strawberry.type(name="Point")
class PointType:
    """(utilization %, rate %) sample."""

    x: float
    y: float


@strawberry.type(name="CurveDefinition")
class CurveDefinitionType:
    """Catalog entry."""

    name: str
    x: list[float]
    y: list[float]
    max_rate: float
    current_utilization: Optional[float] = None
    protocol_fee: Optional[float] = None
    token: Optional[str] = None


@strawberry.type
class BorrowAndLend:
    """Resampled borrow curve and the lend curve derived from it."""

    borrow: list[PointType]
    lend: list[PointType]


@strawberry.type(name="RenderedCurve")
class RenderedCurveType:
    label: str
    data: list[PointType]
    color: str
    stroke_width: float


@strawberry.type(name="Marker")
class MarkerType:
    label: str
    point: PointType
    color: str


@strawberry.type(name="LegendLayout")
class LegendLayoutType:
    columns: int
    font_weight: float


@strawberry.type(name="RenderedChart")
class RenderedChartType:
    """One draw: series, marker overlay, x-axis domain and legend layout."""

    curves: list[RenderedCurveType]
    markers: list[MarkerType]
    domain: list[float]
    legend: LegendLayoutType
