"""
Tests for pse_core.broker: BrokerConfig validation/serialization, presets, BrokerSettings.
"""

import math

import pytest

from pse_core.broker import (
    CUSTOM_PRESET,
    DEFAULT_PRESET,
    PRESETS,
    BrokerConfig,
    BrokerSettings,
)


# --- BrokerConfig ---


def test_config_defaults_match_standard_schedule():
    c = BrokerConfig()
    assert c.commission_rate_percent == 0.25
    assert c.min_commission == 20.0
    assert c.apply_vat_on_pse_fee is True
    assert PRESETS[DEFAULT_PRESET] == c


@pytest.mark.parametrize(
    "kwargs",
    [
        {"commission_rate_percent": -0.1},
        {"min_commission": -1.0},
        {"commission_rate_percent": math.nan},
        {"min_commission": math.inf},
    ],
)
def test_config_rejects_negative_or_non_finite(kwargs):
    with pytest.raises(ValueError):
        BrokerConfig(**kwargs)


@pytest.mark.parametrize("flag", ["false", "true", 0, 1, None])
def test_config_rejects_non_bool_vat_flag(flag):
    with pytest.raises(ValueError):
        BrokerConfig(apply_vat_on_pse_fee=flag)


def test_config_from_dict_rejects_string_vat_flag():
    with pytest.raises(ValueError):
        BrokerConfig.from_dict({"commissionRate": 0.25, "minCommission": 20.0, "applyVatOnPse": "false"})


def test_config_accepts_zero():
    c = BrokerConfig(commission_rate_percent=0, min_commission=0)
    assert c.commission_rate_percent == 0.0
    assert c.min_commission == 0.0


def test_config_to_dict():
    c = BrokerConfig(commission_rate_percent=0.15, min_commission=10.0, apply_vat_on_pse_fee=False)
    assert c.to_dict() == {"commissionRate": 0.15, "minCommission": 10.0, "applyVatOnPse": False}


def test_config_from_dict_round_trip_and_defaults():
    c = BrokerConfig(commission_rate_percent=0.15, min_commission=10.0, apply_vat_on_pse_fee=False)
    assert BrokerConfig.from_dict(c.to_dict()) == c
    partial = BrokerConfig.from_dict({"commissionRate": 0.3})
    assert partial == BrokerConfig(commission_rate_percent=0.3)


# --- BrokerSettings ---


def test_settings_start_on_default_preset():
    s = BrokerSettings()
    assert s.preset == DEFAULT_PRESET
    assert s.snapshot() == PRESETS[DEFAULT_PRESET]


def test_select_preset_replaces_config():
    s = BrokerSettings()
    s.update(min_commission=0.0)
    s.select_preset("Full Service (0.50%)")
    assert s.preset == "Full Service (0.50%)"
    assert s.config == PRESETS["Full Service (0.50%)"]


def test_select_unknown_preset_raises():
    s = BrokerSettings()
    with pytest.raises(KeyError):
        s.select_preset("Nope")
    assert s.preset == DEFAULT_PRESET


def test_update_moves_to_custom():
    s = BrokerSettings()
    s.update(commission_rate_percent=0.2)
    assert s.preset == CUSTOM_PRESET
    assert s.config.commission_rate_percent == 0.2
    assert s.config.min_commission == PRESETS[DEFAULT_PRESET].min_commission


def test_update_validates():
    s = BrokerSettings()
    with pytest.raises(ValueError):
        s.update(min_commission=-5)
    with pytest.raises(TypeError):
        s.update(rate=1.0)
    assert s.preset == DEFAULT_PRESET


def test_snapshot_is_immutable_value():
    s = BrokerSettings()
    snap = s.snapshot()
    s.update(commission_rate_percent=0.5)
    assert snap.commission_rate_percent == 0.25
    with pytest.raises(AttributeError):
        snap.min_commission = 1.0
