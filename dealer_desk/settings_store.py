"""
Persisted broker settings.

A small JSON key/value file; the broker configuration lives under one fixed
key as a flat record (commissionRate, minCommission, applyVatOnPse).
Location: explicit path, else PSE_CALC_SETTINGS_PATH, else ~/.pse_calc/settings.json.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pse_core.broker import CUSTOM_PRESET, PRESETS, BrokerConfig, BrokerSettings

logger = logging.getLogger(__name__)

SETTINGS_KEY = "pse_broker_settings"
# Environment variable overriding the default settings file location.
SETTINGS_PATH_ENV = "PSE_CALC_SETTINGS_PATH"
DEFAULT_SETTINGS_PATH = Path.home() / ".pse_calc" / "settings.json"
BACKUP_SUFFIX = ".bak"


def _resolve_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.environ.get(SETTINGS_PATH_ENV, "").strip()
    return Path(env_path) if env_path else DEFAULT_SETTINGS_PATH


class SettingsStore:
    """
    Key/value store backed by a JSON object on disk.
    Reads never raise: a missing or unreadable file is an empty store.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = _resolve_path(path)

    def _load(self) -> dict[str, Any] | None:
        """File contents; None when the file exists but is not a readable JSON object."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: expected a JSON object", self.path)
            return None
        return data

    def _read_all(self) -> dict[str, Any]:
        data = self._load()
        return {} if data is None else data

    def get(self, key: str, default: Any = None) -> Any:
        return self._read_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store one key. An unreadable file is moved to BACKUP_SUFFIX before being replaced."""
        data = self._load()
        if data is None:
            backup = self.path.with_name(self.path.name + BACKUP_SUFFIX)
            self.path.replace(backup)
            logger.warning("Replacing unreadable settings file %s; previous contents kept in %s", self.path, backup)
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")

    def load_broker_settings(self) -> BrokerSettings:
        """
        Restore broker settings. A stored record equal to a preset selects
        that preset; any other valid record is Custom. Missing or invalid
        records give the default preset.
        """
        record = self.get(SETTINGS_KEY)
        if record is None:
            return BrokerSettings()
        try:
            config = BrokerConfig.from_dict(record)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning("Discarding stored broker settings %r: %s", record, e)
            return BrokerSettings()
        for name, preset in PRESETS.items():
            if preset == config:
                return BrokerSettings(preset=name, config=config)
        return BrokerSettings(preset=CUSTOM_PRESET, config=config)

    def save_broker_settings(self, settings: BrokerSettings) -> None:
        self.set(SETTINGS_KEY, settings.config.to_dict())
        logger.info("Broker settings saved to %s (preset=%s)", self.path, settings.preset)
