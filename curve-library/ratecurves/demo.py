"""Demo: load the bundled catalog, draw the first two curves and print a rate table."""

from ratecurves.catalog import load_catalog
from ratecurves.config import EngineConfig
from ratecurves.derive import fee_adjusted_marker, marker_at
from ratecurves.points import build_points
from ratecurves.render import DEFAULT_RANGE, RenderConfig, render_curves

# Utilizations printed in the table (percent)
TABLE_UTILIZATIONS = [40.0, 60.0, 80.0, 90.0, 95.0, 100.0]


def _value_at(data, x: float) -> float:
    """Rate of the sample closest to x."""
    return min(data, key=lambda p: abs(p.x - x)).y


def main() -> None:
    catalog = load_catalog()
    selected = list(catalog)[:2]
    config = RenderConfig.from_engine(
        EngineConfig.from_env(), show_markers=True, apply_protocol_fee=True
    )
    chart = render_curves(selected, DEFAULT_RANGE, config)

    print("=== Rate Curve Demo ===\n")
    print(f"Catalog: {', '.join(catalog.names())}")
    print(f"Range:   {chart.domain[0]:.2f}% .. {chart.domain[1]:.2f}%\n")

    header = "Utilization".ljust(14) + "".join(f"{u:>9.1f}%" for u in TABLE_UTILIZATIONS)
    print(header)
    for series in chart.curves:
        row = series.label[:30].ljust(30)
        print(row)
        print(" " * 14 + "".join(f"{_value_at(series.data, u):>9.3f}%" for u in TABLE_UTILIZATIONS))
    print()

    for curve in selected:
        if curve.current_utilization is None:
            continue
        points = build_points(curve)
        base = marker_at(points, curve.current_utilization)
        with_fee = fee_adjusted_marker(points, curve.current_utilization, curve.protocol_fee)
        print(f"{curve.name} @ {base.x:.2f}% utilization")
        print(f"   borrow       = {base.y:,.4f}%")
        print(f"   borrow + fee = {with_fee.y:,.4f}%  (fee {curve.protocol_fee or 0:.2f}%)")
        print(f"   lend         = {base.y * base.x / 100:,.4f}%\n")
    print("Done.")


if __name__ == "__main__":
    main()
