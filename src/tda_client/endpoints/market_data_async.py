"""
Async market data endpoints (v1).

Included routes:
- GET /marketdata/{index}/movers
- GET /marketdata/{symbol}/pricehistory
"""

from __future__ import annotations

from ..async_http import TdaAsyncHttpClient
from ..models import Mover, PriceHistory, decode_response, parse_list
from ..params import GetMoversParams, GetPriceHistoryParams


class MarketDataAsyncAPI:
    """
    Async endpoint grouping for market data routes.
    """

    def __init__(self, client: TdaAsyncHttpClient) -> None:
        self._client = client

    async def get_movers(
        self, index: str, *, token: str, params: GetMoversParams | None = None
    ) -> list[Mover]:
        """
        GET /marketdata/{index}/movers
        """

        path = f"/marketdata/{index}/movers"
        query = (params or GetMoversParams()).to_query()
        payload = await self._client.request("GET", path, params=query, token=token)
        return decode_response(lambda data: parse_list(Mover.from_dict, data), payload)

    async def get_price_history(
        self,
        symbol: str,
        *,
        token: str,
        params: GetPriceHistoryParams | None = None,
    ) -> PriceHistory:
        """
        GET /marketdata/{symbol}/pricehistory
        """

        path = f"/marketdata/{symbol}/pricehistory"
        query = (params or GetPriceHistoryParams()).to_query()
        payload = await self._client.request("GET", path, params=query, token=token)
        return decode_response(PriceHistory.from_dict, payload)
