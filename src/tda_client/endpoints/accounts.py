"""
Accounts endpoints (v1).

Source:
- TD Ameritrade developer docs (Account Access).

Included routes:
- GET /accounts
- GET /accounts/{accountId}

Logic flow (per method):
1) Build path with account ID if needed.
2) Apply the params builder's present fields as the query string.
3) Pass path + bearer token to TdaHttpClient.
4) Decode the body into Account models.

Tracing notes:
- Invalid or expired tokens surface as UnexpectedStatusError (401).
- Unknown account IDs surface as 4xx UnexpectedStatusError.
"""

from __future__ import annotations

from ..http import TdaHttpClient
from ..models import Account, decode_response, parse_list
from ..params import GetAccountParams, GetAccountsParams


class AccountsAPI:
    """
    Endpoint grouping for account-related routes.
    """

    def __init__(self, client: TdaHttpClient) -> None:
        self._client = client

    def list_accounts(
        self, *, token: str, params: GetAccountsParams | None = None
    ) -> list[Account]:
        """
        GET /accounts

        Inputs:
        - token: bearer token string.
        - params: optional fields selection (positions, orders).

        Outputs:
        - One Account per linked account.
        """

        query = (params or GetAccountsParams()).to_query()
        payload = self._client.request("GET", "/accounts", params=query, token=token)
        return decode_response(lambda data: parse_list(Account.from_dict, data), payload)

    def get_account(
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
        payload = self._client.request("GET", path, params=query, token=token)
        return decode_response(Account.from_dict, payload)
