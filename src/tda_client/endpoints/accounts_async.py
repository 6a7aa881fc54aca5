"""
Async Accounts endpoints (v1).

Included routes:
- GET /accounts
- GET /accounts/{accountId}
"""

from __future__ import annotations

from ..async_http import TdaAsyncHttpClient
from ..models import Account, decode_response, parse_list
from ..params import GetAccountParams, GetAccountsParams


class AccountsAsyncAPI:
    """
    Async endpoint grouping for account-related routes.
    """

    def __init__(self, client: TdaAsyncHttpClient) -> None:
        self._client = client

    async def list_accounts(
        self, *, token: str, params: GetAccountsParams | None = None
    ) -> list[Account]:
        """
        GET /accounts
        """

        query = (params or GetAccountsParams()).to_query()
        payload = await self._client.request("GET", "/accounts", params=query, token=token)
        return decode_response(lambda data: parse_list(Account.from_dict, data), payload)

    async def get_account(
        self,
        account_id: str,
        *,
        token: str,
        params: GetAccountParams | None = None,
    ) -> Account:
        """
        GET /accounts/{accountId}
        """

        path = f"/accounts/{account_id}"
        query = (params or GetAccountParams()).to_query()
        payload = await self._client.request("GET", path, params=query, token=token)
        return decode_response(Account.from_dict, payload)
