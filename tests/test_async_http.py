import asyncio
import json

import aiohttp
import pytest

from tda_client.async_http import TdaAsyncHttpClient
from tda_client.client import AsyncClient
from tda_client.errors import (
    MalformedResponseError,
    MissingAccessTokenError,
    TransportError,
    UnexpectedStatusError,
)
from tda_client.params import (
    GetAccountParams,
    GetAccountsParams,
    GetMoversParams,
    GetPriceHistoryParams,
)
from tda_client.token import AccessToken, now_ms


class DummyResponse:
    def __init__(self, status, body):
        self.status = status
        self._body = body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def text(self):
        return self._body


class DummySession:
    def __init__(self, status=200, body='{"ok": true}', error=None):
        self.status = status
        self.body = body
        self.error = error
        self.calls = []

    def request(self, *, method, url, params=None, data=None, headers=None):
        self.calls.append(
            {"method": method, "url": url, "params": params, "data": data, "headers": headers}
        )
        if self.error is not None:
            raise self.error
        return DummyResponse(self.status, self.body)

    async def close(self):
        return None


def make_http(session: DummySession) -> TdaAsyncHttpClient:
    client = TdaAsyncHttpClient(base_url="https://example.com/v1")
    client._session = session
    return client


@pytest.mark.asyncio
async def test_async_http_client_sets_headers():
    dummy = DummySession()
    payload = await make_http(dummy).request("GET", "/accounts", token="secret")
    assert payload["ok"] is True
    assert dummy.calls[0]["url"] == "https://example.com/v1/accounts"
    assert dummy.calls[0]["headers"]["Authorization"] == "Bearer secret"


@pytest.mark.asyncio
async def test_async_http_client_non_200():
    dummy = DummySession(status=401, body='{"error":"invalid_grant"}')
    with pytest.raises(UnexpectedStatusError) as excinfo:
        await make_http(dummy).request("GET", "/accounts", token="bad")
    assert excinfo.value.status_code == 401
    assert excinfo.value.body == '{"error":"invalid_grant"}'


@pytest.mark.asyncio
async def test_async_http_client_bad_json():
    dummy = DummySession(body="not json")
    with pytest.raises(MalformedResponseError):
        await make_http(dummy).request("GET", "/accounts", token="T1")


@pytest.mark.asyncio
async def test_async_http_client_transport_error():
    dummy = DummySession(error=aiohttp.ClientConnectionError("refused"))
    with pytest.raises(TransportError):
        await make_http(dummy).request("GET", "/accounts", token="T1")


@pytest.mark.asyncio
async def test_async_client_refresh_installs_token():
    dummy = DummySession(body='{"access_token": "T1", "scope": "read write", "expires_in": 1800}')
    client = AsyncClient("CLIENT", "REFRESH", http=make_http(dummy))
    token = await client.refresh()
    assert client.access_token is token
    assert token.scope == ("read", "write")
    call = dummy.calls[0]
    assert call["method"] == "POST"
    assert call["data"]["client_id"] == "CLIENT"
    assert "Authorization" not in call["headers"]


@pytest.mark.asyncio
async def test_async_client_requires_token():
    dummy = DummySession()
    client = AsyncClient("CLIENT", "REFRESH", http=make_http(dummy))
    with pytest.raises(MissingAccessTokenError):
        await client.get_movers("$DJI")
    assert dummy.calls == []


@pytest.mark.asyncio
async def test_async_client_price_history(price_history_payload):
    dummy = DummySession(body=json.dumps(price_history_payload))
    token = AccessToken(token="T1", expires_at=0)
    client = AsyncClient("CLIENT", "REFRESH", token, http=make_http(dummy))
    history = await client.get_price_history("AAPL")
    assert history.candles[0].volume == 1200
    assert dummy.calls[0]["url"] == "https://example.com/v1/marketdata/AAPL/pricehistory"
    assert dummy.calls[0]["params"] is None


@pytest.mark.asyncio
async def test_async_http_client_timeout_is_transport_error():
    dummy = DummySession(error=asyncio.TimeoutError())
    with pytest.raises(TransportError) as excinfo:
        await make_http(dummy).request("GET", "/accounts", token="T1")
    assert isinstance(excinfo.value.__cause__, asyncio.TimeoutError)


def authed_async_client(dummy: DummySession) -> AsyncClient:
    token = AccessToken(token="T1", expires_at=now_ms() + 60_000, scope=("read",))
    return AsyncClient("CLIENT", "REFRESH", token, http=make_http(dummy))


@pytest.mark.parametrize(
    "method, path, params, call",
    [
        ("POST", "/oauth2/token", None, lambda c: c.get_access_token()),
        ("GET", "/accounts/123", {"fields": "orders"}, lambda c: c.get_account("123", GetAccountParams(fields="orders"))),
        ("GET", "/accounts", None, lambda c: c.get_accounts()),
        ("GET", "/marketdata/$DJI/movers", {"change": "value"}, lambda c: c.get_movers("$DJI", GetMoversParams(change="value"))),
        ("GET", "/marketdata/AAPL/pricehistory", {"period": "5"}, lambda c: c.get_price_history("AAPL", GetPriceHistoryParams(period="5"))),
    ],
)
@pytest.mark.asyncio
async def test_async_client_every_endpoint_surfaces_unexpected_status(method, path, params, call):
    dummy = DummySession(status=401, body='{"error":"invalid_grant"}')
    with pytest.raises(UnexpectedStatusError) as excinfo:
        await call(authed_async_client(dummy))
    assert excinfo.value.status_code == 401
    assert excinfo.value.body == '{"error":"invalid_grant"}'
    request = dummy.calls[0]
    assert request["method"] == method
    assert request["url"] == f"https://example.com/v1{path}"
    assert request["params"] == params
    if method == "GET":
        assert request["headers"]["Authorization"] == "Bearer T1"


@pytest.mark.asyncio
async def test_async_client_get_account_parses_margin(margin_account_payload):
    dummy = DummySession(body=json.dumps(margin_account_payload))
    account = await authed_async_client(dummy).get_account("123456789")
    assert account.margin_account().account_id == "123456789"
    assert dummy.calls[0]["url"] == "https://example.com/v1/accounts/123456789"


@pytest.mark.asyncio
async def test_async_client_get_accounts_parses_list(margin_account_payload):
    dummy = DummySession(body=json.dumps([margin_account_payload]))
    accounts = await authed_async_client(dummy).get_accounts(GetAccountsParams(fields="positions"))
    assert len(accounts) == 1
    assert accounts[0].margin_account().current_balances.liquidation_value == 1000.25
    assert dummy.calls[0]["params"] == {"fields": "positions"}


@pytest.mark.asyncio
async def test_async_client_get_movers_parses_list():
    body = json.dumps(
        [
            {
                "change": 0.5,
                "description": "Apple Inc",
                "direction": "up",
                "last": 130,
                "symbol": "AAPL",
                "totalVolume": 42,
            }
        ]
    )
    dummy = DummySession(body=body)
    movers = await authed_async_client(dummy).get_movers("$DJI", GetMoversParams(direction="up"))
    assert movers[0].symbol == "AAPL"
    assert movers[0].total_volume == 42
    assert dummy.calls[0]["params"] == {"direction": "up"}


@pytest.mark.asyncio
async def test_async_client_malformed_account_list():
    dummy = DummySession(body='{"securitiesAccount": {}}')
    with pytest.raises(MalformedResponseError):
        await authed_async_client(dummy).get_accounts()
