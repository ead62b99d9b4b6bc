"""
Quote a PSE trade from the command line of a desk session.

Demonstrates: load broker settings → parse form input → compute fees →
print breakdown and dealer order text.
"""

import logging

from dealer_desk import SettingsStore, parse_trade, print_breakdown
from pse_core import compute


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Broker settings (PSE_CALC_SETTINGS_PATH or ~/.pse_calc/settings.json)
    store = SettingsStore()
    settings = store.load_broker_settings()
    print(f"Broker preset: {settings.preset}")

    # Raw values as the form would post them
    form = {
        "side": "BUY",
        "code": "ali",
        "price": "30.00",
        "volume": "1,000",
        "orderType": "Limit",
        "validity": "",
        "dealerInstruction": "",
        "executionStyle": "",
        "executionConstraint": "",
    }
    trade = parse_trade(form)
    print_breakdown(trade, compute(trade, settings.snapshot()))

    # Same trade as a market sell; the OrBetter constraint is dropped
    sell = parse_trade({**form, "side": "SELL", "orderType": "Market", "executionConstraint": "OrBetter"})
    print()
    print_breakdown(sell, compute(sell, settings.snapshot()))


if __name__ == "__main__":
    main()
