"""
Query parameter builders, one per endpoint.

Source:
- TD Ameritrade developer docs (accounts, movers, price history).

Logic flow:
1) Caller sets only the fields they care about (everything defaults to None).
2) to_query() emits one wire parameter per present field.
3) Absent fields are omitted entirely; no cross-field checks are done here,
   the API rejects invalid combinations (ex: a date range plus a period).
"""

from __future__ import annotations

from dataclasses import dataclass


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class GetAccountParams:
    """
    GET /accounts/{accountId}

    fields: extra sections to include, "positions" and/or "orders".
    """

    fields: str | None = None

    def to_query(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.fields is not None:
            params["fields"] = self.fields
        return params


@dataclass(frozen=True)
class GetAccountsParams:
    """
    GET /accounts

    fields: extra sections to include, "positions" and/or "orders".
    """

    fields: str | None = None

    def to_query(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.fields is not None:
            params["fields"] = self.fields
        return params


@dataclass(frozen=True)
class GetMoversParams:
    """
    GET /marketdata/{index}/movers

    direction: "up" or "down".
    change: "value" or "percent".
    """

    direction: str | None = None
    change: str | None = None

    def to_query(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.direction is not None:
            params["direction"] = self.direction
        if self.change is not None:
            params["change"] = self.change
        return params


@dataclass(frozen=True)
class GetPriceHistoryParams:
    """
    GET /marketdata/{symbol}/pricehistory

    Valid combinations (defaults marked *):
    - period_type: day*, month, year, ytd
    - period: day 1-5,10*; month 1*,2,3,6; year 1*,2,3,5,10,15,20; ytd 1*
    - frequency_type: day -> minute*; month -> daily, weekly*;
      year -> daily, weekly, monthly*; ytd -> daily, weekly*
    - frequency: minute 1*,5,10,15,30; daily/weekly/monthly 1*
    - start_date/end_date: ms since epoch; do not combine with period.
    - need_extended_hours_data: defaults to true server-side.
    """

    period_type: str | None = None
    period: str | None = None
    frequency_type: str | None = None
    frequency: str | None = None
    end_date: str | None = None
    start_date: str | None = None
    need_extended_hours_data: bool | None = None

    def to_query(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.period_type is not None:
            params["periodType"] = self.period_type
        if self.period is not None:
            params["period"] = self.period
        if self.frequency_type is not None:
            params["frequencyType"] = self.frequency_type
        if self.frequency is not None:
            params["frequency"] = self.frequency
        if self.end_date is not None:
            params["endDate"] = self.end_date
        if self.start_date is not None:
            params["startDate"] = self.start_date
        if self.need_extended_hours_data is not None:
            params["needExtendedHoursData"] = _flag(self.need_extended_hours_data)
        return params
