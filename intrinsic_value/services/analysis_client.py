import logging
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from intrinsic_value.config import EndpointConfig, get_settings
from intrinsic_value.schemas.analysis import StockAnalysis
from intrinsic_value.schemas.base import WireModel
from intrinsic_value.schemas.opportunity import OpportunityItem, TopOpportunitiesResponse
from intrinsic_value.services.errors import (
    DecodingFailure,
    InvalidRequest,
    NetworkFailure,
    ServerError,
    TickerNotFound,
)
from intrinsic_value.validation import normalize_ticker

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=WireModel)


class AnalysisClient:
    """Async client for the intrinsic value analysis service.

    The base URL is the only mutable state. It is read when a call starts, so
    changing it never affects a call already in flight. Each call opens its
    own httpx client, which keeps concurrent calls independent.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.endpoint = EndpointConfig(base_url if base_url is not None else settings.api_base_url)
        self.timeout = timeout if timeout is not None else settings.request_timeout
        # Test hook, e.g. httpx.MockTransport
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self.endpoint.get()

    @base_url.setter
    def base_url(self, value: str) -> None:
        self.endpoint.set(value)

    def _build_url(self, path: str, params: dict | None = None) -> httpx.URL:
        base = self.endpoint.get()
        try:
            url = httpx.URL(f"{base}{path}", params=params)
        except httpx.InvalidURL as e:
            raise InvalidRequest(str(e)) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidRequest(f"Cannot build a request from base URL '{base}'")
        return url

    async def _get(self, url: httpx.URL) -> httpx.Response:
        logger.debug(f"GET {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                return await client.get(url)
        except httpx.InvalidURL as e:
            raise InvalidRequest(str(e)) from e
        except httpx.RequestError as e:
            logger.error(f"Request to {url} failed: {e!r}")
            raise NetworkFailure(e) from e

    @staticmethod
    def _decode(model: type[ModelT], resp: httpx.Response) -> ModelT:
        try:
            return model.model_validate_json(resp.content)
        except ValidationError as e:
            logger.warning(f"{resp.request.url} returned an unexpected body: {e.error_count()} error(s)")
            raise DecodingFailure(e) from e

    async def fetch_analysis(self, ticker: str) -> StockAnalysis:
        """Analyze a single ticker. AI commentary is not requested."""
        symbol = normalize_ticker(ticker)
        url = self._build_url(f"/analyze/{quote(symbol, safe='')}", params={"include_ai": "0"})
        resp = await self._get(url)

        if resp.status_code == 200:
            return self._decode(StockAnalysis, resp)
        if resp.status_code == 404:
            logger.info(f"Ticker {symbol} not found")
            raise TickerNotFound(symbol)
        logger.warning(f"Analyze {symbol} returned {resp.status_code}")
        raise ServerError(resp.status_code)

    async def fetch_top_opportunities(self) -> list[OpportunityItem]:
        """Ranked S&P 500 opportunities, in the order the server ranked them."""
        url = self._build_url("/rank-sp500")
        resp = await self._get(url)

        if resp.status_code != 200:
            logger.warning(f"Rank S&P 500 returned {resp.status_code}")
            raise ServerError(resp.status_code)
        return list(self._decode(TopOpportunitiesResponse, resp).items)
