"""GraphQL schema: curve catalog, point queries and chart rendering."""

from typing import Optional

import strawberry

from ratecurves.config import Extrapolation
from ratecurves.render import DEFAULT_RANGE

from app.services import (
    borrow_and_lend,
    find_curve,
    list_curves,
    rate_at,
    render_chart,
)
from app.types import (
    BorrowAndLend,
    CurveDefinitionInput,
    CurveDefinitionType,
    ExtrapolationMode,
    PointType,
    RenderConfigInput,
    RenderedChartType,
)

DEFAULT_LOWER, DEFAULT_UPPER = DEFAULT_RANGE


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return "0.1.0"

    @strawberry.field
    def curves(self) -> list[CurveDefinitionType]:
        """All catalog curves, in catalog order."""
        return list_curves()

    @strawberry.field
    def curve(self, name: str) -> Optional[CurveDefinitionType]:
        """Return catalog curve by name, or null if not found."""
        return find_curve(name)

    @strawberry.field
    def rate_at(
        self,
        utilization: float,
        curve_name: Optional[str] = None,
        curve: Optional[CurveDefinitionInput] = None,
        apply_protocol_fee: bool = False,
        extrapolation: ExtrapolationMode = Extrapolation.ZERO,
    ) -> PointType:
        """Borrow rate at a utilization. Zero outside the curve unless extrapolation says otherwise."""
        return rate_at(
            utilization=utilization,
            curve_name=curve_name,
            curve=curve,
            apply_protocol_fee=apply_protocol_fee,
            extrapolation=extrapolation,
        )

    @strawberry.field
    def borrow_and_lend(
        self,
        lower: float = DEFAULT_LOWER,
        upper: float = DEFAULT_UPPER,
        curve_name: Optional[str] = None,
        curve: Optional[CurveDefinitionInput] = None,
        resolution: int = 1000,
        extrapolation: ExtrapolationMode = Extrapolation.ZERO,
    ) -> BorrowAndLend:
        """Resampled borrow curve over [lower, upper] plus the derived lend curve."""
        return borrow_and_lend(
            lower=lower,
            upper=upper,
            curve_name=curve_name,
            curve=curve,
            resolution=resolution,
            extrapolation=extrapolation,
        )

    @strawberry.field
    def render_chart(
        self,
        lower: float = DEFAULT_LOWER,
        upper: float = DEFAULT_UPPER,
        curve_names: Optional[list[str]] = None,
        curves: Optional[list[CurveDefinitionInput]] = None,
        config: Optional[RenderConfigInput] = None,
    ) -> RenderedChartType:
        """Chart-ready borrow/lend series, markers and legend layout."""
        return render_chart(
            lower=lower,
            upper=upper,
            curve_names=curve_names,
            curves=curves,
            config=config,
        )


schema = strawberry.Schema(query=Query)
