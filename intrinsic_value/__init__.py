from intrinsic_value.schemas import (
    Metrics,
    OpportunityItem,
    QualityFlags,
    Recommendation,
    StockAnalysis,
    Valuation,
)
from intrinsic_value.services.analysis_client import AnalysisClient
from intrinsic_value.services.errors import (
    AnalysisClientError,
    DecodingFailure,
    InvalidRequest,
    NetworkFailure,
    ServerError,
    TickerNotFound,
)

__all__ = [
    "AnalysisClient",
    "AnalysisClientError",
    "DecodingFailure",
    "InvalidRequest",
    "NetworkFailure",
    "ServerError",
    "TickerNotFound",
    "Metrics",
    "OpportunityItem",
    "QualityFlags",
    "Recommendation",
    "StockAnalysis",
    "Valuation",
]
