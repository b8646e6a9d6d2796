"""Tests for the curve catalog loader."""

import json

import pytest

from ratecurves.catalog import CurveCatalog, load_catalog, parse_curve
from ratecurves.errors import CatalogError


def test_bundled_catalog_keeps_file_order() -> None:
    catalog = load_catalog()
    assert catalog.names() == ["Stablecoin Kink", "Volatile Asset", "Single Kink", "Linear"]
    stable = catalog.get("Stablecoin Kink")
    assert stable.token == "USDC"
    assert list(stable.x) == [80.0, 90.0]
    assert stable.max_rate == 30.0
    assert stable.protocol_fee == 5.0
    assert catalog.get("Linear").current_utilization is None


def test_catalog_lookup_missing_raises_key_error() -> None:
    with pytest.raises(KeyError):
        load_catalog().get("MISSING")


def test_parse_curve_accepts_numeric_strings() -> None:
    curve = parse_curve({"name": "S", "x": ["90"], "y": ["7.5"], "max_rate": "30"})
    assert list(curve.x) == [90.0]
    assert list(curve.y) == [7.5]
    assert curve.max_rate == 30.0


def test_parse_curve_missing_fields() -> None:
    with pytest.raises(CatalogError, match="max_rate"):
        parse_curve({"name": "S", "x": [], "y": []})


def test_parse_curve_non_numeric() -> None:
    with pytest.raises(CatalogError, match="not numeric"):
        parse_curve({"name": "S", "x": ["a"], "y": [1], "max_rate": 3})


def test_catalog_from_json_errors() -> None:
    with pytest.raises(CatalogError, match="valid JSON"):
        CurveCatalog.from_json("{not json")
    with pytest.raises(CatalogError, match="array"):
        CurveCatalog.from_json('{"name": "S"}')
    with pytest.raises(CatalogError, match="object"):
        CurveCatalog.from_json('["S"]')


def test_load_catalog_from_path(tmp_path) -> None:
    path = tmp_path / "curves.json"
    path.write_text(json.dumps([
        {"name": "A", "x": [50], "y": [5], "max_rate": 50},
        {"name": "B", "x": [], "y": [], "max_rate": 10, "protocol_fee": 2},
    ]))
    catalog = load_catalog(path)
    assert len(catalog) == 2
    assert [c.name for c in catalog] == ["A", "B"]
    assert catalog.get("B").protocol_fee == 2.0
