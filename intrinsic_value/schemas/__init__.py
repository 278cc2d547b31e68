from intrinsic_value.schemas.analysis import (
    Metrics,
    QualityFlags,
    StockAnalysis,
    Valuation,
)
from intrinsic_value.schemas.opportunity import OpportunityItem, TopOpportunitiesResponse
from intrinsic_value.schemas.recommendation import Recommendation

__all__ = [
    "Metrics",
    "QualityFlags",
    "StockAnalysis",
    "Valuation",
    "OpportunityItem",
    "TopOpportunitiesResponse",
    "Recommendation",
]
