import os

import pytest

from tda_client import config


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch):
    keys = [
        "TDA_CLIENT_ID",
        "TDA_REFRESH_TOKEN",
        "TDA_API_BASE",
        "TDA_REQUEST_TIMEOUT_SECONDS",
        "TDA_DEBUG_LOGGING",
        "TDA_TOKEN_PATH",
    ]
    original = {key: os.getenv(key) for key in keys}
    for key in keys:
        if key in os.environ:
            del os.environ[key]
    monkeypatch.setattr(config, "_ENV_LOADED", False)
    yield
    for key, value in original.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


@pytest.fixture
def margin_account_payload() -> dict:
    return {
        "securitiesAccount": {
            "type": "MARGIN",
            "accountId": "123456789",
            "roundTrips": 0,
            "isDayTrader": False,
            "isClosingOnlyRestricted": False,
            "initialBalances": {
                "accountValue": 1000,
                "cashBalance": 250.5,
                "isInCall": False,
            },
            "currentBalances": {
                "cashBalance": 250.5,
                "liquidationValue": 1000.25,
            },
            "projectedBalances": {
                "cashAvailableForTrading": 250.5,
            },
        }
    }


@pytest.fixture
def price_history_payload() -> dict:
    return {
        "candles": [
            {
                "open": 130.1,
                "high": 131.0,
                "low": 129.5,
                "close": 130.75,
                "volume": 1200,
                "datetime": 1609459200000,
            }
        ],
        "empty": False,
        "symbol": "AAPL",
    }
