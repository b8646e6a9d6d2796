"""Curve catalog: ordered curve definitions loaded from a JSON document."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Iterator, Optional

from ratecurves.errors import CatalogError
from ratecurves.points import CurveDefinition

logger = logging.getLogger(__name__)

_REQUIRED = ("name", "x", "y", "max_rate")


def _optional_float(raw: dict[str, Any], key: str) -> Optional[float]:
    value = raw.get(key)
    return None if value is None else float(value)


def parse_curve(raw: dict[str, Any]) -> CurveDefinition:
    """Build a CurveDefinition from one catalog entry. Numeric strings are accepted."""
    if not isinstance(raw, dict):
        raise CatalogError(f"catalog entry must be an object, got {type(raw).__name__}")
    missing = [k for k in _REQUIRED if k not in raw]
    if missing:
        raise CatalogError(f"catalog entry {raw.get('name', '?')!r} missing fields: {missing}")
    try:
        return CurveDefinition(
            name=str(raw["name"]),
            x=[float(v) for v in raw["x"]],
            y=[float(v) for v in raw["y"]],
            max_rate=float(raw["max_rate"]),
            current_utilization=_optional_float(raw, "current_utilization"),
            protocol_fee=_optional_float(raw, "protocol_fee"),
            token=raw.get("token"),
        )
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"catalog entry {raw['name']!r} is not numeric: {exc}") from exc


class CurveCatalog:
    """Ordered, name-addressable collection of curve definitions."""

    def __init__(self, curves: list[CurveDefinition] | None = None) -> None:
        self._curves: list[CurveDefinition] = list(curves) if curves else []

    def __iter__(self) -> Iterator[CurveDefinition]:
        return iter(self._curves)

    def __len__(self) -> int:
        return len(self._curves)

    def names(self) -> list[str]:
        return [c.name for c in self._curves]

    def get(self, name: str) -> CurveDefinition:
        """Return curve by name. Raises KeyError if not found."""
        for curve in self._curves:
            if curve.name == name:
                return curve
        raise KeyError(name)

    @classmethod
    def from_json(cls, text: str) -> "CurveCatalog":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"catalog is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise CatalogError("catalog must be a JSON array of curve definitions")
        return cls([parse_curve(entry) for entry in data])


def load_catalog(path: str | Path | None = None) -> CurveCatalog:
    """Load a catalog file; the bundled `data/curves.json` when no path is given."""
    if path is None:
        text = resources.files("ratecurves").joinpath("data").joinpath("curves.json").read_text()
        source = "bundled catalog"
    else:
        text = Path(path).read_text()
        source = str(path)
    catalog = CurveCatalog.from_json(text)
    logger.debug("loaded %d curves from %s", len(catalog), source)
    return catalog
