"""Seed data package."""

from family_finance.data.seed import (
    FAMILY_ROLES,
    GUEST_NAME,
    MOCK_CATEGORIES,
    MOCK_TRANSACTIONS,
    UNKNOWN_CATEGORY_COLOR,
    UNKNOWN_CATEGORY_ICON,
    UNKNOWN_CATEGORY_NAME,
)

__all__ = [
    "FAMILY_ROLES",
    "GUEST_NAME",
    "MOCK_CATEGORIES",
    "MOCK_TRANSACTIONS",
    "UNKNOWN_CATEGORY_COLOR",
    "UNKNOWN_CATEGORY_ICON",
    "UNKNOWN_CATEGORY_NAME",
]
