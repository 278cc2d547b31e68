from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from intrinsic_value.schemas.base import WireModel
from intrinsic_value.schemas.recommendation import Recommendation


class Metrics(WireModel):
    # Raw fractions and ratios, e.g. 0.23 == 23%
    gross_margin: StrictFloat
    fcf_margin: StrictFloat
    roe: StrictFloat
    roic: StrictFloat
    interest_coverage: StrictFloat  # can be huge for debt-free companies
    debt_to_equity: StrictFloat
    debt: StrictFloat

    @property
    def formatted_gross_margin(self) -> str:
        return f"{self.gross_margin * 100:.1f}%"

    @property
    def formatted_fcf_margin(self) -> str:
        return f"{self.fcf_margin * 100:.1f}%"

    @property
    def formatted_roe(self) -> str:
        return f"{self.roe * 100:.1f}%"

    @property
    def formatted_roic(self) -> str:
        return f"{self.roic * 100:.1f}%"

    @property
    def formatted_debt_to_equity(self) -> str:
        return f"{self.debt_to_equity:.2f}"

    @property
    def formatted_interest_coverage(self) -> str:
        return f"{self.interest_coverage:.1f}x"


class QualityFlags(WireModel):
    roic_over_10: StrictBool
    roe_over_12: StrictBool
    fcf_margin_over_8: StrictBool
    interest_cover_over_5: StrictBool
    debt_payable_with_4y_fcf: StrictBool
    mostly_positive_fcf: StrictBool
    stable_fcf: StrictBool

    @property
    def all_flags(self) -> list[tuple[str, bool]]:
        """The seven checks as (label, passed) pairs in display order."""
        return [
            ("ROIC > 10%", self.roic_over_10),
            ("ROE > 12%", self.roe_over_12),
            ("FCF Margin > 8%", self.fcf_margin_over_8),
            ("Interest Coverage > 5x", self.interest_cover_over_5),
            ("Debt Payable with 4Y FCF", self.debt_payable_with_4y_fcf),
            ("Mostly Positive FCF", self.mostly_positive_fcf),
            ("Stable FCF", self.stable_fcf),
        ]

    @property
    def passed_count(self) -> int:
        return sum(1 for _, passed in self.all_flags if passed)


class Valuation(WireModel):
    iv_per_share: StrictFloat
    mos_pct: StrictFloat  # negative when price is above intrinsic value
    discount_rate: StrictFloat
    terminal_growth: StrictFloat
    start_growth: StrictFloat
    growth_years: StrictInt = Field(ge=0)

    @property
    def formatted_mos(self) -> str:
        return f"{self.mos_pct * 100:.0f}%"


class StockAnalysis(WireModel):
    """Full valuation result for one ticker as computed by the server."""

    ticker: StrictStr = Field(min_length=1)
    company_name: StrictStr = Field(min_length=1)
    summary: StrictStr = Field(min_length=1)
    currency: StrictStr = Field(min_length=1)  # "USD"
    price: StrictFloat = Field(ge=0, allow_inf_nan=False)
    discount_dollars: StrictFloat
    quality_score: StrictStr  # "6/7", formatted by the server
    recommendation: Recommendation
    metrics: Metrics
    quality_flags: QualityFlags
    valuation: Valuation
    ai_commentary: StrictStr | None = None

    @property
    def id(self) -> str:
        return self.ticker

    @property
    def formatted_price(self) -> str:
        return f"{self.currency} {self.price:.2f}"

    @property
    def formatted_discount(self) -> str:
        return f"{self.discount_dollars:.2f}"

    @property
    def formatted_intrinsic_value(self) -> str:
        return f"{self.currency} {self.valuation.iv_per_share:.2f}"
