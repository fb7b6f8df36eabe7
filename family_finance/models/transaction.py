"""
Category and Transaction Models

These models describe the seed data the UI is developed against.

DESIGN DECISION: All models are frozen. Seed records are shared module
level constants and must never be mutated by a caller. Amounts are plain
integers in the minor currency unit; no currency precision handling.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    """Direction of a transaction."""
    INCOME = "income"
    EXPENSE = "expense"


class Category(BaseModel):
    """A static expense/income classification tag with display metadata."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    icon: str = Field(
        ...,
        min_length=1,
        description="Font Awesome icon class, e.g. fa-bus"
    )
    color: str = Field(..., pattern=r"^#[0-9A-Fa-f]{6}$")


class Transaction(BaseModel):
    """One income or expense event from the seed set."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    type: TransactionType
    amount: int = Field(
        ...,
        ge=0,
        description="Amount in minor currency units"
    )
    category_id: str
    description: str
    date: date
    member_id: str


class EnrichedTransaction(Transaction):
    """
    A transaction with category and member display data denormalized in.

    This is what transaction queries return to the UI.
    """

    category_name: str = Field(..., min_length=1)
    category_icon: str = Field(..., min_length=1)
    category_color: str = Field(..., min_length=1)
    member_name: str = Field(..., min_length=1)

    def to_row(self) -> dict:
        """Flatten into a table row for display."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "type": self.type.value,
            "amount": self.amount,
            "category": self.category_name,
            "description": self.description,
            "member": self.member_name,
        }
