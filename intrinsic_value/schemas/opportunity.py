from pydantic import Field, StrictFloat, StrictStr

from intrinsic_value.schemas.base import WireModel
from intrinsic_value.schemas.recommendation import Recommendation


class OpportunityItem(WireModel):
    """One row of the ranked S&P 500 list. Smaller than a StockAnalysis."""

    ticker: StrictStr = Field(min_length=1)
    company_name: StrictStr = Field(min_length=1)
    mos_pct: StrictFloat
    price: StrictFloat = Field(ge=0, allow_inf_nan=False)
    iv_per_share: StrictFloat
    recommendation: Recommendation

    @property
    def id(self) -> str:
        return self.ticker

    @property
    def formatted_mos(self) -> str:
        return f"{self.mos_pct * 100:.0f}%"

    @property
    def formatted_price(self) -> str:
        return f"${self.price:.2f}"


class TopOpportunitiesResponse(WireModel):
    items: list[OpportunityItem]  # ranked, best first
