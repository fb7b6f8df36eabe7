"""
Data Models Package

This package contains all Pydantic models used by the family finance provider.
"""

from family_finance.models.family import (
    FamilyMember,
    FamilyRole,
    RoleDefinition,
)
from family_finance.models.transaction import (
    Category,
    EnrichedTransaction,
    Transaction,
    TransactionType,
)

__all__ = [
    # Family models
    "FamilyMember",
    "FamilyRole",
    "RoleDefinition",
    # Transaction models
    "Category",
    "EnrichedTransaction",
    "Transaction",
    "TransactionType",
]
