"""
Market data endpoints (v1).

Source:
- TD Ameritrade developer docs (Movers, Price History).

Included routes:
- GET /marketdata/{index}/movers
- GET /marketdata/{symbol}/pricehistory

Logic flow (per method):
1) Build path with the index or symbol substituted directly.
2) Apply the params builder's present fields as the query string.
3) Delegate the HTTP call to TdaHttpClient and decode the body.
"""

from __future__ import annotations

from ..http import TdaHttpClient
from ..models import Mover, PriceHistory, decode_response, parse_list
from ..params import GetMoversParams, GetPriceHistoryParams


class MarketDataAPI:
    """
    Endpoint grouping for market data routes.
    """

    def __init__(self, client: TdaHttpClient) -> None:
        self._client = client

    def get_movers(
        self, index: str, *, token: str, params: GetMoversParams | None = None
    ) -> list[Mover]:
        """
        GET /marketdata/{index}/movers

        Inputs:
        - index: market index symbol, e.g. $DJI, $COMPX, $SPX.X.
        - params: direction (up/down) and change (value/percent).

        Outputs:
        - Top movers, possibly empty outside market hours.
        """

        path = f"/marketdata/{index}/movers"
        query = (params or GetMoversParams()).to_query()
        payload = self._client.request("GET", path, params=query, token=token)
        return decode_response(lambda data: parse_list(Mover.from_dict, data), payload)

    def get_price_history(
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
        payload = self._client.request("GET", path, params=query, token=token)
        return decode_response(PriceHistory.from_dict, payload)
