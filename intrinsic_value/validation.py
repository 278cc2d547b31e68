"""Request input validation utilities."""
from intrinsic_value.services.errors import InvalidRequest


def normalize_ticker(ticker: str) -> str:
    """Normalize a ticker symbol for the request path.

    Args:
        ticker: Raw ticker string as typed by the user

    Returns:
        Uppercase, stripped ticker

    Raises:
        InvalidRequest: If ticker is empty or whitespace
    """
    if not ticker or not ticker.strip():
        raise InvalidRequest("empty ticker", message="Ticker cannot be empty")

    return ticker.strip().upper()
