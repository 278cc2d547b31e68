from enum import Enum


class Recommendation(str, Enum):
    """Server-assigned tier for one analysis. Any other wire value is rejected."""

    STRONG_BUY = "STRONG_BUY"
    BUY = "BUY"
    WATCH = "WATCH"
    AVOID = "AVOID"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Recommendation.STRONG_BUY: "Strong Buy",
    Recommendation.BUY: "Buy",
    Recommendation.WATCH: "Watch",
    Recommendation.AVOID: "Avoid",
}
