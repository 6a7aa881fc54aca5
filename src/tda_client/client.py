"""
Client facade for the TD Ameritrade API.

Purpose:
- Hold the client ID, refresh token and the current access token slot.
- Expose one method per endpoint and enforce the "token installed" precondition.

Logic flow:
1) Client(client_id, refresh_token) is created, optionally with a stored token.
2) get_access_token() exchanges the refresh token (no state change).
3) set_access_token(AccessToken.from_response(...)) installs it; refresh()
   does both steps in one call.
4) Account/market data methods read the slot, raise MissingAccessTokenError
   when empty, and otherwise delegate to endpoints/*.

Concurrency:
- The token slot is a plain attribute. Share a Client across threads or
  tasks only with external locking, or use one Client per worker.
"""

from __future__ import annotations

from .async_http import TdaAsyncHttpClient
from .endpoints.accounts import AccountsAPI
from .endpoints.accounts_async import AccountsAsyncAPI
from .endpoints.market_data import MarketDataAPI
from .endpoints.market_data_async import MarketDataAsyncAPI
from .endpoints.oauth import OAuthAPI
from .endpoints.oauth_async import OAuthAsyncAPI
from .errors import MissingAccessTokenError
from .http import TdaHttpClient
from .models import AccessTokenResponse, Account, Mover, PriceHistory
from .params import (
    GetAccountParams,
    GetAccountsParams,
    GetMoversParams,
    GetPriceHistoryParams,
)
from .token import AccessToken


class _TokenSlot:
    """
    Credentials plus the mutable access token shared by both client flavours.
    """

    def __init__(
        self,
        client_id: str,
        refresh_token: str,
        access_token: AccessToken | None = None,
    ) -> None:
        self._client_id = client_id
        self._refresh_token = refresh_token
        self._access_token = access_token

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def access_token(self) -> AccessToken | None:
        return self._access_token

    def set_access_token(self, access_token: AccessToken | None):
        """
        Replace the installed token (None clears it). Returns self for chaining.
        """

        self._access_token = access_token
        return self

    def _bearer(self) -> str:
        if self._access_token is None:
            raise MissingAccessTokenError()
        return self._access_token.token

    def __repr__(self) -> str:
        # Secrets stay out of reprs and logs.
        installed = self._access_token is not None
        return f"{type(self).__name__}(client_id={self._client_id!r}, token_installed={installed})"


class Client(_TokenSlot):
    """
    Blocking client; one request per method call, no retries.
    """

    def __init__(
        self,
        client_id: str,
        refresh_token: str,
        access_token: AccessToken | None = None,
        *,
        http: TdaHttpClient | None = None,
    ) -> None:
        super().__init__(client_id, refresh_token, access_token)
        self.http = http or TdaHttpClient()
        self._oauth = OAuthAPI(self.http)
        self._accounts = AccountsAPI(self.http)
        self._market_data = MarketDataAPI(self.http)

    def get_access_token(self) -> AccessTokenResponse:
        """
        Exchange the refresh token for a new access token response.

        The client's installed token is not touched; convert with
        AccessToken.from_response() and install via set_access_token().
        """

        return self._oauth.refresh_access_token(self._client_id, self._refresh_token)

    def refresh(self) -> AccessToken:
        """
        Fetch, convert and install a fresh access token.
        """

        token = AccessToken.from_response(self.get_access_token())
        self.set_access_token(token)
        return token

    def get_account(
        self, account_id: str, params: GetAccountParams | None = None
    ) -> Account:
        """
        Balances, positions and orders for one account.
        """

        return self._accounts.get_account(account_id, token=self._bearer(), params=params)

    def get_accounts(self, params: GetAccountsParams | None = None) -> list[Account]:
        """
        Balances, positions and orders for all linked accounts.
        """

        return self._accounts.list_accounts(token=self._bearer(), params=params)

    def get_movers(
        self, index: str, params: GetMoversParams | None = None
    ) -> list[Mover]:
        """
        Top 10 movers (up or down, by value or percent) for a market index.
        """

        return self._market_data.get_movers(index, token=self._bearer(), params=params)

    def get_price_history(
        self, symbol: str, params: GetPriceHistoryParams | None = None
    ) -> PriceHistory:
        """
        Candles for a symbol.
        """

        return self._market_data.get_price_history(
            symbol, token=self._bearer(), params=params
        )

    def close(self) -> None:
        self.http.close()


class AsyncClient(_TokenSlot):
    """
    Async client on aiohttp; each method awaits exactly one request.
    """

    def __init__(
        self,
        client_id: str,
        refresh_token: str,
        access_token: AccessToken | None = None,
        *,
        http: TdaAsyncHttpClient | None = None,
    ) -> None:
        super().__init__(client_id, refresh_token, access_token)
        self.http = http or TdaAsyncHttpClient()
        self._oauth = OAuthAsyncAPI(self.http)
        self._accounts = AccountsAsyncAPI(self.http)
        self._market_data = MarketDataAsyncAPI(self.http)

    async def __aenter__(self) -> "AsyncClient":
        await self.http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.http.close()

    async def get_access_token(self) -> AccessTokenResponse:
        return await self._oauth.refresh_access_token(self._client_id, self._refresh_token)

    async def refresh(self) -> AccessToken:
        token = AccessToken.from_response(await self.get_access_token())
        self.set_access_token(token)
        return token

    async def get_account(
        self, account_id: str, params: GetAccountParams | None = None
    ) -> Account:
        return await self._accounts.get_account(
            account_id, token=self._bearer(), params=params
        )

    async def get_accounts(self, params: GetAccountsParams | None = None) -> list[Account]:
        return await self._accounts.list_accounts(token=self._bearer(), params=params)

    async def get_movers(
        self, index: str, params: GetMoversParams | None = None
    ) -> list[Mover]:
        return await self._market_data.get_movers(index, token=self._bearer(), params=params)

    async def get_price_history(
        self, symbol: str, params: GetPriceHistoryParams | None = None
    ) -> PriceHistory:
        return await self._market_data.get_price_history(
            symbol, token=self._bearer(), params=params
        )
