"""
Trade parameters: one equities order as entered at the dealer desk.

Immutable. Every order-instruction field is a closed enum; the order-type /
execution-constraint coupling is normalized once, at construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import TypeVar

L = TypeVar("L", bound="_LabelledEnum")


class _LabelledEnum(Enum):
    """Enum whose members can be looked up by their user-facing label."""

    @classmethod
    def parse(cls: type[L], label: str | _LabelledEnum | None) -> L:
        """Case-insensitive lookup by value or member name. Blank maps to the empty member."""
        if isinstance(label, cls):
            return label
        text = (label or "").strip().lower()
        for member in cls:
            if text in (str(member.value).lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown {cls.__name__}: {label!r}")


class Side(_LabelledEnum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(_LabelledEnum):
    LIMIT = "Limit"
    MARKET = "Market"
    MARKET_TO_LIMIT = "Market-to-Limit"
    MARKET_ON_CLOSE = "Market on Close"
    LIMIT_ON_CLOSE = "Limit on Close"

    @property
    def is_market_family(self) -> bool:
        """Market, Market-to-Limit and Market on Close."""
        return "market" in self.value.lower()


class Validity(_LabelledEnum):
    DAY = ""
    GTC = "GTC"
    GTD = "GTD"
    IOC = "IOC"
    FOK = "FOK"


class DealerInstruction(_LabelledEnum):
    NONE = ""
    AMEND = "Amend"
    ICEBERG = "Iceberg"
    ODDLOT = "Oddlot"
    CROSS_BLOCK = "Cross/Block"


class ExecutionStyle(_LabelledEnum):
    NONE = ""
    CD = "CD"
    VWAP = "VWAP"
    TWAP = "TWAP"
    POV = "POV"
    AGGRESSIVE = "Aggressive"
    PASSIVE = "Passive"
    WORK = "Work"


class ExecutionConstraint(_LabelledEnum):
    NONE = ""
    OR_BETTER = "OrBetter"


@dataclass(frozen=True)
class TradeParameters:
    """
    A single trade instruction. Price and volume may be None while the
    user is still typing; the fee engine treats that as insufficient input.
    Volume is a whole share count: integral floats become int, NaN/inf
    become None, and fractional values raise ValueError.

    Market-family order types never carry an execution constraint: any
    constraint passed alongside one is dropped here.
    """

    side: Side
    code: str = ""
    price: float | None = None
    volume: int | None = None
    order_type: OrderType = OrderType.LIMIT
    validity: Validity = Validity.DAY
    dealer_instruction: DealerInstruction = DealerInstruction.NONE
    execution_style: ExecutionStyle = ExecutionStyle.NONE
    execution_constraint: ExecutionConstraint = ExecutionConstraint.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", (self.code or "").strip().upper())
        if isinstance(self.volume, float):
            # NaN/inf volume is missing input; a fractional share count is not a volume
            if not math.isfinite(self.volume):
                object.__setattr__(self, "volume", None)
            elif not self.volume.is_integer():
                raise ValueError(f"volume must be a whole number of shares, got {self.volume!r}")
            else:
                object.__setattr__(self, "volume", int(self.volume))
        if self.order_type.is_market_family and self.execution_constraint is not ExecutionConstraint.NONE:
            object.__setattr__(self, "execution_constraint", ExecutionConstraint.NONE)

    def with_order_type(self, order_type: OrderType) -> TradeParameters:
        """
        Return a copy with a new order type. Entering the market family clears
        the constraint; leaving it does not bring the old one back.
        """
        return replace(self, order_type=order_type)
