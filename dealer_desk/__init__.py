"""
Dealer desk helpers on top of pse-core.

Parses raw form input, persists broker settings, and renders the fee
breakdown table the desk displays next to the order text.
"""

from dealer_desk.form import parse_trade
from dealer_desk.settings_store import SETTINGS_KEY, SettingsStore
from dealer_desk.report import breakdown_table, print_breakdown

__all__ = [
    "parse_trade",
    "SettingsStore",
    "SETTINGS_KEY",
    "breakdown_table",
    "print_breakdown",
]
