"""Python client for the Rate Curve GraphQL API."""

from ratecurve_client.client import RateCurveClient
from ratecurve_client.types import (
    CurveDefinitionInput,
    Marker,
    Point,
    RenderConfigInput,
    RenderedChart,
    RenderedCurve,
)

__all__ = [
    "CurveDefinitionInput",
    "Marker",
    "Point",
    "RateCurveClient",
    "RenderConfigInput",
    "RenderedChart",
    "RenderedCurve",
]
