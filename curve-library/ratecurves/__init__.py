"""Rate curve library: points, interpolation, borrow/lend derivation, catalog and render pass."""

from ratecurves.catalog import CurveCatalog, load_catalog, parse_curve
from ratecurves.config import EngineConfig, Extrapolation
from ratecurves.derive import (
    apply_protocol_fee,
    fee_adjusted_marker,
    fee_adjusted_rate,
    generate_borrow_and_lend,
    lend_curve,
    lend_marker_at,
    marker_at,
)
from ratecurves.errors import (
    CatalogError,
    CurveValidationError,
    InvalidRangeError,
    RateCurveError,
)
from ratecurves.interpolation import interpolate, interpolate_at
from ratecurves.points import (
    CurveDefinition,
    Point,
    PointSequence,
    build_points,
    validate_definition,
)
from ratecurves.render import (
    DEFAULT_RANGE,
    LegendLayout,
    Marker,
    RenderConfig,
    RenderedChart,
    RenderedCurve,
    render_curve,
    render_curves,
)

__all__ = [
    "CurveDefinition",
    "Point",
    "PointSequence",
    "build_points",
    "validate_definition",
    "interpolate_at",
    "interpolate",
    "generate_borrow_and_lend",
    "lend_curve",
    "fee_adjusted_rate",
    "apply_protocol_fee",
    "marker_at",
    "fee_adjusted_marker",
    "lend_marker_at",
    "EngineConfig",
    "Extrapolation",
    "RenderConfig",
    "RenderedChart",
    "RenderedCurve",
    "Marker",
    "LegendLayout",
    "DEFAULT_RANGE",
    "render_curve",
    "render_curves",
    "CurveCatalog",
    "load_catalog",
    "parse_curve",
    "RateCurveError",
    "InvalidRangeError",
    "CurveValidationError",
    "CatalogError",
]
