"""
pse-core: Deterministic fee engine and dealer order text for PSE equities trades.

No GUI, no market data, no order routing. Pure functions over immutable values.
"""

__version__ = "0.1.0"

from pse_core.trade import (
    DealerInstruction,
    ExecutionConstraint,
    ExecutionStyle,
    OrderType,
    Side,
    TradeParameters,
    Validity,
)
from pse_core.broker import CUSTOM_PRESET, DEFAULT_PRESET, PRESETS, BrokerConfig, BrokerSettings
from pse_core.fees import FeeBreakdown, compute, round2
from pse_core.order_text import PLACEHOLDER_TEXT, format_order_text

__all__ = [
    "Side",
    "OrderType",
    "Validity",
    "DealerInstruction",
    "ExecutionStyle",
    "ExecutionConstraint",
    "TradeParameters",
    "BrokerConfig",
    "BrokerSettings",
    "PRESETS",
    "DEFAULT_PRESET",
    "CUSTOM_PRESET",
    "FeeBreakdown",
    "compute",
    "round2",
    "PLACEHOLDER_TEXT",
    "format_order_text",
]
