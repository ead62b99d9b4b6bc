"""
Fee breakdown report: table for the desk's breakdown panel, and a printed summary.
"""

from __future__ import annotations

import pandas as pd

from pse_core.fees import FeeBreakdown
from pse_core.order_text import format_order_text
from pse_core.trade import Side, TradeParameters

# (label, FeeBreakdown attribute) in display order
BREAKDOWN_ROWS = (
    ("Gross amount", "gross"),
    ("Commission", "commission"),
    ("VAT on commission (12%)", "vat_on_commission"),
    ("PSE transaction fee (0.005%)", "pse_fee"),
    ("VAT on PSE fee (12%)", "vat_on_pse_fee"),
    ("SCCP fee (0.01%)", "sccp_fee"),
    ("Stock transaction tax (0.1%)", "stock_transaction_tax"),
    ("Total fees", "total_fees"),
    ("Net amount", "net_amount"),
    ("Effective price per share", "effective_price_per_share"),
)


def breakdown_table(breakdown: FeeBreakdown) -> pd.DataFrame:
    """
    One row per line item.

    Returns
    -------
    pd.DataFrame
        Indexed by field name, with columns 'item' (display label) and
        'amount' (PHP, as computed; effective price is not rounded here).
    """
    rows = [{"field": attr, "item": label, "amount": getattr(breakdown, attr)} for label, attr in BREAKDOWN_ROWS]
    return pd.DataFrame(rows).set_index("field")


def print_breakdown(trade: TradeParameters, breakdown: FeeBreakdown | None) -> str:
    """
    Print the breakdown table and the dealer order text.

    Returns
    -------
    str
        The order text (e.g. for copying to the clipboard).
    """
    text = format_order_text(trade, breakdown)
    if breakdown is None:
        print(text)
        return text
    table = breakdown_table(breakdown)
    net_label = "Total cost" if trade.side == Side.BUY else "Net proceeds"
    print(f"--- {trade.side.value} {trade.code} ---")
    for field, row in table.iterrows():
        label = net_label if field == "net_amount" else row["item"]
        print(f"{label + ':':<32}PHP {row['amount']:>14,.2f}")
    print("-" * 50)
    print(text)
    return text
