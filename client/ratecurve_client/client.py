"""Rate Curve API client using sgqlc."""

from __future__ import annotations

from typing import Any

from sgqlc.endpoint.http import HTTPEndpoint

from ratecurve_client.types import (
    CurveDefinitionInput,
    Marker,
    Point,
    RenderConfigInput,
    RenderedChart,
    RenderedCurve,
)

_POINT_FIELDS = "{ x y }"


def _curve_to_vars(c: CurveDefinitionInput) -> dict[str, Any]:
    """Serialize CurveDefinitionInput to GraphQL variables (camelCase)."""
    result: dict[str, Any] = {
        "name": c.name,
        "x": list(c.x),
        "y": list(c.y),
        "maxRate": c.max_rate,
    }
    if c.current_utilization is not None:
        result["currentUtilization"] = c.current_utilization
    if c.protocol_fee is not None:
        result["protocolFee"] = c.protocol_fee
    if c.token is not None:
        result["token"] = c.token
    return result


def _config_to_vars(c: RenderConfigInput) -> dict[str, Any]:
    """Serialize RenderConfigInput to GraphQL variables (camelCase)."""
    result: dict[str, Any] = {
        "borrowWidth": c.borrow_width,
        "lendWidth": c.lend_width,
        "showMarkers": c.show_markers,
        "smallLayout": c.small_layout,
        "legendThickness": c.legend_thickness,
        "applyProtocolFee": c.apply_protocol_fee,
        "resolution": c.resolution,
        "extrapolation": c.extrapolation,
        "strict": c.strict,
    }
    if c.palette:
        result["palette"] = list(c.palette)
    return result


def _curve_from_raw(raw: dict) -> CurveDefinitionInput:
    return CurveDefinitionInput(
        name=raw["name"],
        x=raw["x"],
        y=raw["y"],
        max_rate=raw["maxRate"],
        current_utilization=raw.get("currentUtilization"),
        protocol_fee=raw.get("protocolFee"),
        token=raw.get("token"),
    )


def _points(raw: list[dict]) -> list[Point]:
    return [Point(x=p["x"], y=p["y"]) for p in raw]


def _curve_selector(
    curve_name: str | None, curve: CurveDefinitionInput | None
) -> dict[str, Any]:
    if (curve_name is None) == (curve is None):
        raise ValueError("provide exactly one of curve_name or curve")
    if curve is not None:
        return {"curve": _curve_to_vars(curve)}
    return {"curveName": curve_name}


class RateCurveClient:
    """
    Client for the Rate Curve GraphQL API.
    Use from notebooks or scripts; configurable base URL for local vs Docker.
    """

    def __init__(self, url: str = "http://api:8000/graphql", timeout: float = 30.0) -> None:
        self._url = url.rstrip("/")
        self._timeout = timeout
        self._endpoint = HTTPEndpoint(self._url, timeout=timeout)

    def _request(self, query: str, variables: dict | None = None) -> dict:
        result = self._endpoint(query, variables or {})
        if "errors" in result and result["errors"]:
            raise RuntimeError(f"GraphQL errors: {result['errors']}")
        return result.get("data", {})

    def version(self) -> str:
        """Call the version query."""
        query = """
            query Version {
                version
            }
        """
        data = self._request(query)
        return data["version"]

    def list_curves(self) -> list[CurveDefinitionInput]:
        """Catalog curves, in catalog order, ready to edit and send back inline."""
        query = """
            query Curves {
                curves {
                    name
                    token
                    x
                    y
                    maxRate
                    currentUtilization
                    protocolFee
                }
            }
        """
        data = self._request(query)
        return [_curve_from_raw(c) for c in data["curves"]]

    def rate_at(
        self,
        utilization: float,
        curve_name: str | None = None,
        curve: CurveDefinitionInput | None = None,
        apply_protocol_fee: bool = False,
        extrapolation: str = "ZERO",
    ) -> float:
        """Borrow rate (%) at a utilization for a catalog curve or inline nodes."""
        query = """
            query RateAt(
                $utilization: Float!,
                $curveName: String,
                $curve: CurveDefinitionInput,
                $applyProtocolFee: Boolean!,
                $extrapolation: Extrapolation!
            ) {
                rateAt(
                    utilization: $utilization,
                    curveName: $curveName,
                    curve: $curve,
                    applyProtocolFee: $applyProtocolFee,
                    extrapolation: $extrapolation
                ) {
                    x
                    y
                }
            }
        """
        variables: dict[str, Any] = {
            "utilization": utilization,
            "applyProtocolFee": apply_protocol_fee,
            "extrapolation": extrapolation,
        }
        variables.update(_curve_selector(curve_name, curve))
        data = self._request(query, variables)
        return data["rateAt"]["y"]

    def borrow_and_lend(
        self,
        lower: float = 40.0,
        upper: float = 100.0,
        curve_name: str | None = None,
        curve: CurveDefinitionInput | None = None,
        resolution: int = 1000,
        extrapolation: str = "ZERO",
    ) -> tuple[list[Point], list[Point]]:
        """Resampled borrow curve over [lower, upper] and its lend curve."""
        query = f"""
            query BorrowAndLend(
                $lower: Float!,
                $upper: Float!,
                $curveName: String,
                $curve: CurveDefinitionInput,
                $resolution: Int!,
                $extrapolation: Extrapolation!
            ) {{
                borrowAndLend(
                    lower: $lower,
                    upper: $upper,
                    curveName: $curveName,
                    curve: $curve,
                    resolution: $resolution,
                    extrapolation: $extrapolation
                ) {{
                    borrow {_POINT_FIELDS}
                    lend {_POINT_FIELDS}
                }}
            }}
        """
        variables: dict[str, Any] = {
            "lower": lower,
            "upper": upper,
            "resolution": resolution,
            "extrapolation": extrapolation,
        }
        variables.update(_curve_selector(curve_name, curve))
        data = self._request(query, variables)
        raw = data["borrowAndLend"]
        return _points(raw["borrow"]), _points(raw["lend"])

    def render_chart(
        self,
        lower: float = 40.0,
        upper: float = 100.0,
        curve_names: list[str] | None = None,
        curves: list[CurveDefinitionInput] | None = None,
        config: RenderConfigInput | None = None,
    ) -> RenderedChart:
        """Chart-ready series for catalog and/or inline curves."""
        query = f"""
            query RenderChart(
                $lower: Float!,
                $upper: Float!,
                $curveNames: [String!],
                $curves: [CurveDefinitionInput!],
                $config: RenderConfigInput
            ) {{
                renderChart(
                    lower: $lower,
                    upper: $upper,
                    curveNames: $curveNames,
                    curves: $curves,
                    config: $config
                ) {{
                    curves {{ label color strokeWidth data {_POINT_FIELDS} }}
                    markers {{ label color point {_POINT_FIELDS} }}
                    domain
                    legend {{ columns fontWeight }}
                }}
            }}
        """
        variables: dict[str, Any] = {"lower": lower, "upper": upper}
        if curve_names is not None:
            variables["curveNames"] = list(curve_names)
        if curves is not None:
            variables["curves"] = [_curve_to_vars(c) for c in curves]
        if config is not None:
            variables["config"] = _config_to_vars(config)
        data = self._request(query, variables)
        raw = data["renderChart"]
        lower_bound, upper_bound = raw["domain"]
        return RenderedChart(
            curves=[
                RenderedCurve(
                    label=c["label"],
                    data=_points(c["data"]),
                    color=c["color"],
                    stroke_width=c["strokeWidth"],
                )
                for c in raw["curves"]
            ],
            markers=[
                Marker(label=m["label"], point=Point(**m["point"]), color=m["color"])
                for m in raw["markers"]
            ],
            domain=(lower_bound, upper_bound),
            legend_columns=raw["legend"]["columns"],
            legend_font_weight=raw["legend"]["fontWeight"],
        )
