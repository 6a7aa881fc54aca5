"""
Typed views of TD Ameritrade JSON responses.

Purpose:
- Decode response bodies into frozen dataclasses with strict field checks.
- Keep forward compatibility: optional balance fields resolve to None, and
  unknown securities account shapes are kept raw instead of failing the call.

Notes:
- Every decoder raises SchemaError on a bad shape; the endpoint layer turns
  that into MalformedResponseError.
- JSON integers are accepted for float fields; booleans never count as numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .errors import MalformedResponseError, SchemaError, UnsupportedAccountTypeError

T = TypeVar("T")

_MISSING = object()


def _object(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise SchemaError(f"{what} must be a JSON object, got {type(payload).__name__}.")
    return payload


def _get(payload: dict[str, Any], key: str, optional: bool) -> Any:
    value = payload.get(key, _MISSING)
    if value is _MISSING or value is None:
        if optional:
            return None
        raise SchemaError(f"Missing required field '{key}'.")
    return value


def _str(payload: dict[str, Any], key: str) -> str:
    value = _get(payload, key, False)
    if not isinstance(value, str):
        raise SchemaError(f"Field '{key}' must be a string.")
    return value


def _bool(payload: dict[str, Any], key: str, *, optional: bool = False) -> bool | None:
    value = _get(payload, key, optional)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise SchemaError(f"Field '{key}' must be a boolean.")
    return value


def _int(payload: dict[str, Any], key: str) -> int:
    value = _get(payload, key, False)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"Field '{key}' must be an integer.")
    return value


def _float(payload: dict[str, Any], key: str, *, optional: bool = False) -> float | None:
    value = _get(payload, key, optional)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"Field '{key}' must be a number.")
    return float(value)


def parse_list(parser: Callable[[Any], T], payload: Any) -> list[T]:
    """
    Decode a JSON array with parser applied to each item.
    """

    if not isinstance(payload, list):
        raise SchemaError(f"Expected a JSON array, got {type(payload).__name__}.")
    return [parser(item) for item in payload]


@dataclass(frozen=True)
class AccessTokenResponse:
    """
    Body of POST /oauth2/token.
    """

    access_token: str
    scope: str
    expires_in: int

    @classmethod
    def from_dict(cls, payload: Any) -> "AccessTokenResponse":
        data = _object(payload, "Token response")
        return cls(
            access_token=_str(data, "access_token"),
            scope=_str(data, "scope"),
            expires_in=_int(data, "expires_in"),
        )


@dataclass(frozen=True)
class Candle:
    """
    One OHLCV bar; datetime is milliseconds since epoch.
    """

    open: float
    high: float
    low: float
    close: float
    volume: int
    datetime: int

    @classmethod
    def from_dict(cls, payload: Any) -> "Candle":
        data = _object(payload, "Candle")
        return cls(
            open=_float(data, "open"),
            high=_float(data, "high"),
            low=_float(data, "low"),
            close=_float(data, "close"),
            volume=_int(data, "volume"),
            datetime=_int(data, "datetime"),
        )


@dataclass(frozen=True)
class PriceHistory:
    """
    Body of GET /marketdata/{symbol}/pricehistory.
    """

    candles: list[Candle]
    empty: bool
    symbol: str

    @classmethod
    def from_dict(cls, payload: Any) -> "PriceHistory":
        data = _object(payload, "Price history")
        return cls(
            candles=parse_list(Candle.from_dict, _get(data, "candles", False)),
            empty=_bool(data, "empty"),
            symbol=_str(data, "symbol"),
        )


@dataclass(frozen=True)
class Mover:
    """
    One entry of GET /marketdata/{index}/movers.
    """

    change: float
    description: str
    direction: str
    last: float
    symbol: str
    total_volume: int

    @classmethod
    def from_dict(cls, payload: Any) -> "Mover":
        data = _object(payload, "Mover")
        return cls(
            change=_float(data, "change"),
            description=_str(data, "description"),
            direction=_str(data, "direction"),
            last=_float(data, "last"),
            symbol=_str(data, "symbol"),
            total_volume=_int(data, "totalVolume"),
        )


# Balance fields are all optional: account types and subscription levels
# omit different subsets, and absent is not the same as a reported zero.
@dataclass(frozen=True)
class InitialBalances:
    account_value: float | None = None
    accrued_interest: float | None = None
    bond_value: float | None = None
    cash_available_for_trading: float | None = None
    cash_available_for_withdrawal: float | None = None
    cash_balance: float | None = None
    cash_debit_call_value: float | None = None
    cash_receipts: float | None = None
    is_in_call: bool | None = None
    liquidation_value: float | None = None
    long_option_market_value: float | None = None
    money_market_fund: float | None = None
    mutual_fund_value: float | None = None
    pending_deposits: float | None = None
    short_option_market_value: float | None = None
    short_stock_value: float | None = None
    unsettled_cash: float | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "InitialBalances":
        data = _object(payload, "initialBalances")
        return cls(
            account_value=_float(data, "accountValue", optional=True),
            accrued_interest=_float(data, "accruedInterest", optional=True),
            bond_value=_float(data, "bondValue", optional=True),
            cash_available_for_trading=_float(data, "cashAvailableForTrading", optional=True),
            cash_available_for_withdrawal=_float(data, "cashAvailableForWithdrawal", optional=True),
            cash_balance=_float(data, "cashBalance", optional=True),
            cash_debit_call_value=_float(data, "cashDebitCallValue", optional=True),
            cash_receipts=_float(data, "cashReceipts", optional=True),
            is_in_call=_bool(data, "isInCall", optional=True),
            liquidation_value=_float(data, "liquidationValue", optional=True),
            long_option_market_value=_float(data, "longOptionMarketValue", optional=True),
            money_market_fund=_float(data, "moneyMarketFund", optional=True),
            mutual_fund_value=_float(data, "mutualFundValue", optional=True),
            pending_deposits=_float(data, "pendingDeposits", optional=True),
            short_option_market_value=_float(data, "shortOptionMarketValue", optional=True),
            short_stock_value=_float(data, "shortStockValue", optional=True),
            unsettled_cash=_float(data, "unsettledCash", optional=True),
        )


@dataclass(frozen=True)
class CurrentBalances:
    accrued_interest: float | None = None
    bond_value: float | None = None
    cash_available_for_trading: float | None = None
    cash_available_for_withdrawal: float | None = None
    cash_balance: float | None = None
    cash_call: float | None = None
    cash_debit_call_value: float | None = None
    cash_receipts: float | None = None
    liquidation_value: float | None = None
    long_market_value: float | None = None
    long_option_market_value: float | None = None
    money_market_fund: float | None = None
    mutual_fund_value: float | None = None
    pending_deposits: float | None = None
    savings: float | None = None
    short_market_value: float | None = None
    short_option_market_value: float | None = None
    total_cash: float | None = None
    unsettled_cash: float | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "CurrentBalances":
        data = _object(payload, "currentBalances")
        return cls(
            accrued_interest=_float(data, "accruedInterest", optional=True),
            bond_value=_float(data, "bondValue", optional=True),
            cash_available_for_trading=_float(data, "cashAvailableForTrading", optional=True),
            cash_available_for_withdrawal=_float(data, "cashAvailableForWithdrawal", optional=True),
            cash_balance=_float(data, "cashBalance", optional=True),
            cash_call=_float(data, "cashCall", optional=True),
            cash_debit_call_value=_float(data, "cashDebitCallValue", optional=True),
            cash_receipts=_float(data, "cashReceipts", optional=True),
            liquidation_value=_float(data, "liquidationValue", optional=True),
            long_market_value=_float(data, "longMarketValue", optional=True),
            long_option_market_value=_float(data, "longOptionMarketValue", optional=True),
            money_market_fund=_float(data, "moneyMarketFund", optional=True),
            mutual_fund_value=_float(data, "mutualFundValue", optional=True),
            pending_deposits=_float(data, "pendingDeposits", optional=True),
            savings=_float(data, "savings", optional=True),
            short_market_value=_float(data, "shortMarketValue", optional=True),
            short_option_market_value=_float(data, "shortOptionMarketValue", optional=True),
            total_cash=_float(data, "totalCash", optional=True),
            unsettled_cash=_float(data, "unsettledCash", optional=True),
        )


@dataclass(frozen=True)
class ProjectedBalances:
    cash_available_for_trading: float | None = None
    cash_available_for_withdrawal: float | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "ProjectedBalances":
        data = _object(payload, "projectedBalances")
        return cls(
            cash_available_for_trading=_float(data, "cashAvailableForTrading", optional=True),
            cash_available_for_withdrawal=_float(data, "cashAvailableForWithdrawal", optional=True),
        )


@dataclass(frozen=True)
class MarginAccount:
    """
    The only securities account variant currently modeled.
    """

    type: str
    account_id: str
    round_trips: int
    is_day_trader: bool
    is_closing_only_restricted: bool
    initial_balances: InitialBalances
    current_balances: CurrentBalances
    projected_balances: ProjectedBalances

    @classmethod
    def from_dict(cls, payload: Any) -> "MarginAccount":
        data = _object(payload, "securitiesAccount")
        return cls(
            type=_str(data, "type"),
            account_id=_str(data, "accountId"),
            round_trips=_int(data, "roundTrips"),
            is_day_trader=_bool(data, "isDayTrader"),
            is_closing_only_restricted=_bool(data, "isClosingOnlyRestricted"),
            initial_balances=InitialBalances.from_dict(_get(data, "initialBalances", False)),
            current_balances=CurrentBalances.from_dict(_get(data, "currentBalances", False)),
            projected_balances=ProjectedBalances.from_dict(_get(data, "projectedBalances", False)),
        )


@dataclass(frozen=True)
class UnknownSecuritiesAccount:
    """
    A securities account whose shape matched no modeled variant.
    """

    raw: dict[str, Any]

    @property
    def type(self) -> str | None:
        value = self.raw.get("type")
        return value if isinstance(value, str) else None


SecuritiesAccount = MarginAccount | UnknownSecuritiesAccount


def parse_securities_account(payload: Any) -> SecuritiesAccount:
    """
    Pick a variant by structure; the wire format carries no tag.
    """

    data = _object(payload, "securitiesAccount")
    try:
        return MarginAccount.from_dict(data)
    except SchemaError:
        # A payload that names itself MARGIN is broken, not a new variant.
        if data.get("type") == "MARGIN":
            raise
        return UnknownSecuritiesAccount(raw=data)


@dataclass(frozen=True)
class Account:
    """
    One item of GET /accounts, or the body of GET /accounts/{accountId}.
    """

    securities_account: SecuritiesAccount

    @classmethod
    def from_dict(cls, payload: Any) -> "Account":
        data = _object(payload, "Account")
        return cls(
            securities_account=parse_securities_account(
                _get(data, "securitiesAccount", False)
            )
        )

    def margin_account(self) -> MarginAccount:
        if isinstance(self.securities_account, MarginAccount):
            return self.securities_account
        raise UnsupportedAccountTypeError(self.securities_account.raw)


def decode_response(parser: Callable[[Any], T], payload: Any) -> T:
    """
    Apply a decoder to a 200 body, mapping SchemaError to MalformedResponseError.
    """

    try:
        return parser(payload)
    except SchemaError as exc:
        raise MalformedResponseError(str(exc), payload) from exc
