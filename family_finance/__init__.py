"""
Family Finance - Source Package

Static mock-data provider for the household finance UI.
Supplies family members, the category taxonomy, seed transactions
and a few aggregation helpers so screens can be built and tested
without a backend.

DESIGN PRINCIPLES:
1. Read-only seed data, never mutated
2. Lookups degrade to fallback values instead of raising
3. The name store is injected, never global
"""

__version__ = "1.0.0"
__author__ = "Family Finance Team"

from family_finance.provider import (
    FamilyDataProvider,
    create_provider,
    create_store,
)

__all__ = ["FamilyDataProvider", "create_provider", "create_store"]
