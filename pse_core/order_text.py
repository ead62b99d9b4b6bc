"""
Dealer order text: the one-line abbreviated instruction sent to the dealer.

    BUY 1,000 ALI @ 30.00 LIMIT (gross PHP 30,000.00).
"""

from __future__ import annotations

from pse_core.fees import FeeBreakdown
from pse_core.trade import TradeParameters

PLACEHOLDER_TEXT = "Enter price and volume to generate the order text."
MARKET_PRICE_TOKEN = "MKT"


def _price_token(trade: TradeParameters) -> str:
    if trade.order_type.is_market_family:
        return MARKET_PRICE_TOKEN
    return f"{trade.price:,.2f}"


def format_order_text(trade: TradeParameters, breakdown: FeeBreakdown | None) -> str:
    """
    Build the dealer order text for a trade and its fee breakdown.

    Without a breakdown (insufficient input) the placeholder is returned.
    Tokens that are empty after stripping are left out, so Day validity
    and unset instructions add nothing to the line.
    """
    if breakdown is None:
        return PLACEHOLDER_TEXT

    tokens = [
        trade.side.value.upper(),
        f"{trade.volume:,.0f}",
        trade.code.upper(),
        "@",
        _price_token(trade),
        trade.execution_constraint.value,
        trade.order_type.value.upper(),
        trade.validity.value.upper(),
        trade.execution_style.value,
        trade.dealer_instruction.value,
    ]
    line = " ".join(t.strip() for t in tokens if t.strip())
    return f"{line} (gross PHP {breakdown.gross:,.2f})."
