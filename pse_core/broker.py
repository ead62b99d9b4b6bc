"""
Broker configuration: commission schedule and the preset catalog.

BrokerConfig is an immutable value handed to each fee calculation.
BrokerSettings is the mutable selection the desk edits between calculations.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields, replace
from typing import Any

logger = logging.getLogger(__name__)

CUSTOM_PRESET = "Custom"


@dataclass(frozen=True)
class BrokerConfig:
    """Commission rate (percent of gross), minimum commission (PHP), VAT on PSE fee."""

    commission_rate_percent: float = 0.25
    min_commission: float = 20.0
    apply_vat_on_pse_fee: bool = True

    def __post_init__(self) -> None:
        for name in ("commission_rate_percent", "min_commission"):
            value = float(getattr(self, name))
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative number, got {value!r}")
            object.__setattr__(self, name, value)
        if not isinstance(self.apply_vat_on_pse_fee, bool):
            raise ValueError(f"apply_vat_on_pse_fee must be a bool, got {self.apply_vat_on_pse_fee!r}")

    def to_dict(self) -> dict[str, Any]:
        """Flat record as persisted by the settings store."""
        return {
            "commissionRate": self.commission_rate_percent,
            "minCommission": self.min_commission,
            "applyVatOnPse": self.apply_vat_on_pse_fee,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BrokerConfig:
        """Inverse of to_dict. Missing keys take the default schedule's values."""
        default = cls()
        return cls(
            commission_rate_percent=data.get("commissionRate", default.commission_rate_percent),
            min_commission=data.get("minCommission", default.min_commission),
            apply_vat_on_pse_fee=data.get("applyVatOnPse", default.apply_vat_on_pse_fee),
        )


DEFAULT_PRESET = "Standard (0.25%)"

PRESETS: dict[str, BrokerConfig] = {
    DEFAULT_PRESET: BrokerConfig(0.25, 20.0, True),
    "Online Discount (0.15%)": BrokerConfig(0.15, 20.0, True),
    "Full Service (0.50%)": BrokerConfig(0.50, 100.0, True),
    "No VAT on PSE Fee (0.25%)": BrokerConfig(0.25, 20.0, False),
}


@dataclass
class BrokerSettings:
    """
    Active broker configuration and the name of the preset it came from.
    Mutable; any manual edit moves the selection to CUSTOM_PRESET.
    """

    preset: str = DEFAULT_PRESET
    config: BrokerConfig = field(default_factory=lambda: PRESETS[DEFAULT_PRESET])

    def select_preset(self, name: str) -> None:
        """Replace the whole configuration with a catalog entry."""
        if name not in PRESETS:
            raise KeyError(f"Unknown broker preset: {name!r}")
        self.preset = name
        self.config = PRESETS[name]
        logger.info("Broker preset selected: %s", name)

    def update(self, **changes: Any) -> None:
        """Edit one or more BrokerConfig fields by name."""
        known = {f.name for f in fields(BrokerConfig)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown broker config field(s): {', '.join(sorted(unknown))}")
        self.config = replace(self.config, **changes)
        self.preset = CUSTOM_PRESET
        logger.info("Broker config edited (%s); preset is now %s", ", ".join(sorted(changes)), CUSTOM_PRESET)

    def snapshot(self) -> BrokerConfig:
        """Configuration to pass into a single calculation."""
        return self.config
