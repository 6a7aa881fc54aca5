"""
Run quick health checks against the TD Ameritrade API and report counts.

Outputs:
- Linked accounts count and account types
- Movers count for an index
- Candle count for a symbol
- Latency per call
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

sys.path.insert(0, "src")

from collections import Counter

from tda_client.app import load_client
from tda_client.logging_config import setup_logging
from tda_client.models import MarginAccount
from tda_client.params import GetMoversParams

logger = logging.getLogger("tda_client.scripts.run_checks")


def timed(label: str, func):
    start = time.perf_counter()
    result = func()
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.info("%s took %.2f ms", label, elapsed_ms)
    return result, elapsed_ms


def run(config_path: str | None, index: str, symbol: str):
    client = load_client(config_path)

    accounts, accounts_ms = timed("accounts", client.get_accounts)
    movers, movers_ms = timed(
        "movers", lambda: client.get_movers(index, GetMoversParams(direction="up"))
    )
    history, history_ms = timed("history", lambda: client.get_price_history(symbol))

    account_types = Counter(
        account.securities_account.type or "UNKNOWN"
        for account in accounts
    )
    margin_ids = [
        account.securities_account.account_id
        for account in accounts
        if isinstance(account.securities_account, MarginAccount)
    ]

    return {
        "accounts_count": len(accounts),
        "account_types": dict(account_types),
        "margin_ids": margin_ids,
        "movers_count": len(movers),
        "candles_count": len(history.candles),
        "latency_ms": {
            "accounts": accounts_ms,
            "movers": movers_ms,
            "history": history_ms,
        },
    }


def main():
    parser = argparse.ArgumentParser(description="TD Ameritrade API health check")
    parser.add_argument("--config", default=None, help="Optional YAML config with a 'tda' section")
    parser.add_argument("--index", default="$DJI")
    parser.add_argument("--symbol", default="AAPL")
    parser.add_argument("--json-logs", action="store_true")
    args = parser.parse_args()

    setup_logging("INFO", json_output=args.json_logs)
    row = run(args.config, args.index, args.symbol)

    print("accounts\tmovers\tcandles\tms_accounts\tms_movers\tms_history\taccount_types")
    ms = row["latency_ms"]
    print(
        f"{row['accounts_count']}\t{row['movers_count']}\t{row['candles_count']}\t"
        f"{ms['accounts']:.2f}\t{ms['movers']:.2f}\t{ms['history']:.2f}\t"
        f"{row['account_types']}"
    )


if __name__ == "__main__":
    main()
