"""Configuration package."""

from family_finance.config.settings import (
    FamilyFinanceSettings,
    get_settings,
)

__all__ = [
    "FamilyFinanceSettings",
    "get_settings",
]
