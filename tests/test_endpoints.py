from __future__ import annotations

from tda_client.endpoints.accounts import AccountsAPI
from tda_client.endpoints.market_data import MarketDataAPI
from tda_client.endpoints.oauth import OAuthAPI
from tda_client.params import GetAccountParams, GetMoversParams, GetPriceHistoryParams


class DummyClient:
    def __init__(self, payload):
        self.payload = payload
        self.calls = []

    def request(self, method, path, *, params=None, form=None, token=None):
        self.calls.append(
            {
                "method": method,
                "path": path,
                "params": params,
                "form": form,
                "token": token,
            }
        )
        return self.payload


def test_oauth_endpoint_posts_refresh_form() -> None:
    client = DummyClient({"access_token": "T1", "scope": "read", "expires_in": 1800})
    response = OAuthAPI(client).refresh_access_token("CLIENT", "REFRESH")
    call = client.calls[0]
    assert call["method"] == "POST"
    assert call["path"] == "/oauth2/token"
    assert call["token"] is None
    assert call["form"] == {
        "grant_type": "refresh_token",
        "refresh_token": "REFRESH",
        "client_id": "CLIENT",
    }
    assert response.access_token == "T1"


def test_accounts_endpoints_build_paths(margin_account_payload) -> None:
    client = DummyClient(margin_account_payload)
    api = AccountsAPI(client)
    api.get_account("123", token="T1", params=GetAccountParams(fields="positions"))
    client.payload = [margin_account_payload]
    api.list_accounts(token="T1")
    assert client.calls[0]["path"] == "/accounts/123"
    assert client.calls[0]["params"] == {"fields": "positions"}
    assert client.calls[0]["token"] == "T1"
    assert client.calls[1]["path"] == "/accounts"
    assert client.calls[1]["params"] == {}


def test_market_data_endpoints_build_paths(price_history_payload) -> None:
    client = DummyClient([])
    api = MarketDataAPI(client)
    movers = api.get_movers("$DJI", token="T1", params=GetMoversParams(direction="up", change="percent"))
    client.payload = price_history_payload
    api.get_price_history(
        "AAPL",
        token="T1",
        params=GetPriceHistoryParams(
            period_type="day", period="2", frequency_type="minute", frequency="1",
            need_extended_hours_data=False,
        ),
    )
    assert movers == []
    assert client.calls[0]["path"] == "/marketdata/$DJI/movers"
    assert client.calls[0]["params"] == {"direction": "up", "change": "percent"}
    call = client.calls[1]
    assert call["path"] == "/marketdata/AAPL/pricehistory"
    assert call["params"] == {
        "periodType": "day",
        "period": "2",
        "frequencyType": "minute",
        "frequency": "1",
        "needExtendedHoursData": "false",
    }
