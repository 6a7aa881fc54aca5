"""
Endpoint groupings live here to keep API surface area segmented by domain.
"""

from .accounts import AccountsAPI
from .accounts_async import AccountsAsyncAPI
from .market_data import MarketDataAPI
from .market_data_async import MarketDataAsyncAPI
from .oauth import OAuthAPI
from .oauth_async import OAuthAsyncAPI

__all__ = [
    "AccountsAPI",
    "AccountsAsyncAPI",
    "MarketDataAPI",
    "MarketDataAsyncAPI",
    "OAuthAPI",
    "OAuthAsyncAPI",
]
