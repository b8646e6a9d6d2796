"""Client-side types for the Rate Curve GraphQL API (mirror API contracts)."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CurveDefinitionInput:
    """Curve nodes: utilizations x (%), rates y (%), rate at 100% utilization."""

    name: str
    x: list[float]
    y: list[float]
    max_rate: float
    current_utilization: Optional[float] = None
    protocol_fee: Optional[float] = None
    token: Optional[str] = None


@dataclass
class RenderConfigInput:
    """Presentation options for render_chart. Omitted palette uses the server default."""

    palette: Optional[list[str]] = None
    borrow_width: float = 2.5
    lend_width: float = 1.5
    show_markers: bool = False
    small_layout: bool = False
    legend_thickness: float = 0.75
    apply_protocol_fee: bool = False
    resolution: int = 1000
    extrapolation: str = "ZERO"
    strict: bool = False


@dataclass
class Point:
    x: float
    y: float


@dataclass
class RenderedCurve:
    label: str
    data: list[Point]
    color: str
    stroke_width: float


@dataclass
class Marker:
    label: str
    point: Point
    color: str


@dataclass
class RenderedChart:
    """Chart payload (legend flattened for ergonomics)."""

    curves: list[RenderedCurve]
    markers: list[Marker] = field(default_factory=list)
    domain: tuple[float, float] = (40.0, 100.0)
    legend_columns: int = 2
    legend_font_weight: float = 600.0
