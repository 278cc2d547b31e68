"""Errors raised by AnalysisClient.

Every failure of a client call surfaces as exactly one of these. Callers can
catch AnalysisClientError to handle them uniformly and show `message`.
"""


class AnalysisClientError(Exception):
    retryable: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(AnalysisClientError):
    """Base URL or ticker could not be turned into a request."""

    def __init__(self, detail: str = "", message: str = "Invalid API URL"):
        super().__init__(message)
        self.detail = detail


class NetworkFailure(AnalysisClientError):
    """No response was received: DNS, refused connection, TLS, timeout."""

    retryable = True

    def __init__(self, cause: Exception):
        super().__init__(f"Network error: {cause}")
        self.cause = cause


class ServerError(AnalysisClientError):
    def __init__(self, status_code: int):
        super().__init__(f"Server error (code {status_code})")
        self.status_code = status_code
        # 5xx and rate limiting may clear up, other client errors will not
        self.retryable = status_code >= 500 or status_code == 429


class TickerNotFound(AnalysisClientError):
    def __init__(self, ticker: str):
        super().__init__("Stock ticker not found")
        self.ticker = ticker


class DecodingFailure(AnalysisClientError):
    """A 200 response whose body does not match the expected shape."""

    def __init__(self, cause: Exception):
        super().__init__("Failed to parse server response")
        self.cause = cause
