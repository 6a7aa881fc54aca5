"""
TD Ameritrade API client package.

Typed bindings for token refresh, accounts, movers and price history.
Import paths are exported here to keep the public surface area obvious
while the implementation remains editable in smaller files.
"""

from .errors import (
    MalformedResponseError,
    MissingAccessTokenError,
    SchemaError,
    TdaClientError,
    TransportError,
    UnexpectedStatusError,
    UnsupportedAccountTypeError,
)
from .http import TDA_API_BASE, TdaHttpClient
from .async_http import TdaAsyncHttpClient
from .token import AccessToken, now_ms
from .params import (
    GetAccountParams,
    GetAccountsParams,
    GetMoversParams,
    GetPriceHistoryParams,
)
from .models import (
    AccessTokenResponse,
    Account,
    Candle,
    CurrentBalances,
    InitialBalances,
    MarginAccount,
    Mover,
    PriceHistory,
    ProjectedBalances,
    UnknownSecuritiesAccount,
)
from .client import AsyncClient, Client
from .token_store import ensure_access_token, load_token, save_token
from .config import ClientSettings, load_settings
from .app import build_async_client, build_client, load_async_client, load_client
from .logging_config import setup_logging

__all__ = [
    "MalformedResponseError",
    "MissingAccessTokenError",
    "SchemaError",
    "TdaClientError",
    "TransportError",
    "UnexpectedStatusError",
    "UnsupportedAccountTypeError",
    "TDA_API_BASE",
    "TdaHttpClient",
    "TdaAsyncHttpClient",
    "AccessToken",
    "now_ms",
    "GetAccountParams",
    "GetAccountsParams",
    "GetMoversParams",
    "GetPriceHistoryParams",
    "AccessTokenResponse",
    "Account",
    "Candle",
    "CurrentBalances",
    "InitialBalances",
    "MarginAccount",
    "Mover",
    "PriceHistory",
    "ProjectedBalances",
    "UnknownSecuritiesAccount",
    "AsyncClient",
    "Client",
    "ensure_access_token",
    "load_token",
    "save_token",
    "ClientSettings",
    "load_settings",
    "build_async_client",
    "build_client",
    "load_async_client",
    "load_client",
    "setup_logging",
]
