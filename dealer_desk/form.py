"""
Turn raw form values from the desk into TradeParameters.

Field names may be camelCase (as the form posts them) or snake_case.
Numbers may carry thousands separators; anything unparseable becomes None,
which the fee engine reports as insufficient input.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

import pandas as pd

from pse_core.trade import (
    DealerInstruction,
    ExecutionConstraint,
    ExecutionStyle,
    OrderType,
    Side,
    TradeParameters,
    Validity,
)

# Form field aliases -> TradeParameters field names
FIELD_ALIASES = {
    "orderType": "order_type",
    "dealerInstruction": "dealer_instruction",
    "executionStyle": "execution_style",
    "executionConstraint": "execution_constraint",
    "ticker": "code",
    "symbol": "code",
    "qty": "volume",
    "quantity": "volume",
}


def _normalize_fields(form: Mapping[str, Any]) -> dict[str, Any]:
    """Map aliased keys to field names; later duplicates win."""
    return {FIELD_ALIASES.get(str(k).strip(), str(k).strip()): v for k, v in form.items()}


def parse_number(raw: Any) -> float | None:
    """Parse a form number. Blank, garbage, NaN and infinities give None."""
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.replace(",", "").strip()
        if not raw:
            return None
    value = pd.to_numeric(raw, errors="coerce")
    if pd.isna(value):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def parse_volume(raw: Any) -> int | None:
    """Share count: a whole number, else None."""
    value = parse_number(raw)
    if value is None or not value.is_integer():
        return None
    return int(value)


def parse_trade(form: Mapping[str, Any]) -> TradeParameters:
    """
    Build TradeParameters from a mapping of raw form values.

    Parameters
    ----------
    form : mapping
        side, code, price, volume, orderType, validity, dealerInstruction,
        executionStyle, executionConstraint. Only side is required.

    Returns
    -------
    TradeParameters
        Price/volume are None when missing or unparseable. A constraint sent
        with a market-family order type is dropped.

    Raises
    ------
    ValueError
        If side or one of the instruction labels is not recognized.
    """
    fields = _normalize_fields(form)
    return TradeParameters(
        side=Side.parse(fields.get("side")),
        code=str(fields.get("code") or ""),
        price=parse_number(fields.get("price")),
        volume=parse_volume(fields.get("volume")),
        order_type=OrderType.parse(fields.get("order_type") or OrderType.LIMIT.value),
        validity=Validity.parse(fields.get("validity")),
        dealer_instruction=DealerInstruction.parse(fields.get("dealer_instruction")),
        execution_style=ExecutionStyle.parse(fields.get("execution_style")),
        execution_constraint=ExecutionConstraint.parse(fields.get("execution_constraint")),
    )
