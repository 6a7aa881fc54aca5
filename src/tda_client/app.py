"""
Runtime assembly helpers.

Purpose:
- Keep wiring logic (settings -> transport -> client) in one place.
- Make it easy to trace how env/YAML values become an authenticated call.

Logic flow:
1) load_client() resolves ClientSettings via config.load_settings().
2) build_client() creates the HTTP transport and the Client.
3) ensure_access_token() installs a stored or freshly refreshed token.
4) The caller invokes client methods (get_accounts, get_price_history, etc.).
"""

from __future__ import annotations

from .async_http import TdaAsyncHttpClient
from .client import AsyncClient, Client
from .config import ClientSettings, load_settings
from .http import TdaHttpClient
from .token import AccessToken
from .token_store import ensure_access_token, load_token


def build_client(settings: ClientSettings, access_token: AccessToken | None = None) -> Client:
    """
    Create a blocking Client for resolved settings.
    """

    http_client = TdaHttpClient(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
        debug_logging=settings.debug_logging,
    )
    return Client(settings.client_id, settings.refresh_token, access_token, http=http_client)


def build_async_client(
    settings: ClientSettings, access_token: AccessToken | None = None
) -> AsyncClient:
    """
    Create an AsyncClient for resolved settings.
    """

    http_client = TdaAsyncHttpClient(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
        debug_logging=settings.debug_logging,
    )
    return AsyncClient(
        settings.client_id, settings.refresh_token, access_token, http=http_client
    )


def load_client(config_path: str | None = None) -> Client:
    """
    Resolve settings and return a Client with a usable token installed.
    """

    settings = load_settings(config_path)
    client = build_client(settings)
    ensure_access_token(client, settings.token_path)
    return client


def load_async_client(config_path: str | None = None) -> AsyncClient:
    """
    Resolve settings and return an AsyncClient carrying the stored token, if any.

    Refreshing is left to the caller (await client.refresh()) since this
    helper is synchronous.
    """

    settings = load_settings(config_path)
    return build_async_client(settings, load_token(settings.token_path))
