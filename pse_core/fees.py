"""
Fee engine: all-in cost or proceeds of one PSE equities trade.

Pure function of (TradeParameters, BrokerConfig). Each monetary step is
rounded to centavos as soon as it is derived; nothing carries a remainder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from pse_core.broker import BrokerConfig
from pse_core.trade import Side, TradeParameters

logger = logging.getLogger(__name__)

VAT_RATE = 0.12
PSE_FEE_RATE = 0.00005  # 0.005% of gross
SCCP_FEE_RATE = 0.0001  # 0.01% of gross
STOCK_TRANSACTION_TAX_RATE = 0.001  # 0.1% of gross, sell side only

_EPSILON = float(np.finfo(float).eps)


def round2(value: float) -> float:
    """Round to 2 decimals, half away from zero, nudged by machine epsilon."""
    magnitude = np.floor((abs(value) + _EPSILON) * 100.0 + 0.5) / 100.0
    return float(np.sign(value) * magnitude)


@dataclass(frozen=True)
class FeeBreakdown:
    """Itemized result of one calculation. Amounts in PHP."""

    gross: float
    commission: float
    vat_on_commission: float
    pse_fee: float
    vat_on_pse_fee: float
    sccp_fee: float
    stock_transaction_tax: float
    total_fees: float
    net_amount: float
    effective_price_per_share: float


def _usable(value: float | int | None) -> bool:
    """Present, finite and strictly positive."""
    if value is None:
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return bool(np.isfinite(number)) and number > 0


def compute(trade: TradeParameters, config: BrokerConfig) -> FeeBreakdown | None:
    """
    Compute the fee breakdown for a trade under a broker configuration.

    Returns None when price or volume is missing, non-finite or not positive.
    That is the normal "not yet computable" state, not an error.

    The minimum commission is compared against the unrounded commission and
    only the larger of the two is rounded. Stock transaction tax applies to
    SELL only. effective_price_per_share is left unrounded.
    """
    if not (_usable(trade.price) and _usable(trade.volume)):
        logger.debug("Insufficient input: price=%r volume=%r", trade.price, trade.volume)
        return None

    price = float(trade.price)
    volume = trade.volume

    gross = round2(price * volume)
    raw_commission = gross * (config.commission_rate_percent / 100.0)
    commission = round2(max(raw_commission, config.min_commission))
    vat_on_commission = round2(commission * VAT_RATE)
    pse_fee = round2(gross * PSE_FEE_RATE)
    vat_on_pse_fee = round2(pse_fee * VAT_RATE) if config.apply_vat_on_pse_fee else 0.0
    sccp_fee = round2(gross * SCCP_FEE_RATE)
    stock_transaction_tax = round2(gross * STOCK_TRANSACTION_TAX_RATE) if trade.side == Side.SELL else 0.0

    total_fees = round2(
        commission + vat_on_commission + pse_fee + vat_on_pse_fee + sccp_fee + stock_transaction_tax
    )
    if trade.side == Side.BUY:
        net_amount = round2(gross + total_fees)
    else:
        net_amount = round2(gross - total_fees)

    return FeeBreakdown(
        gross=gross,
        commission=commission,
        vat_on_commission=vat_on_commission,
        pse_fee=pse_fee,
        vat_on_pse_fee=vat_on_pse_fee,
        sccp_fee=sccp_fee,
        stock_transaction_tax=stock_transaction_tax,
        total_fees=total_fees,
        net_amount=net_amount,
        effective_price_per_share=net_amount / volume,
    )
