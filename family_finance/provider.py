"""
Family Data Provider

The single entry point the UI talks to. It ties together the name
store, the directories and the transaction query engine, and exposes
the read operations screens need:

- get_display_name / list_family_members
- list_categories / category_name_by_id
- query_transactions / total_expense_by_member

Every operation is a synchronous read and none of them raise.
"""

from pathlib import Path
from typing import Optional

from family_finance.config import FamilyFinanceSettings, get_settings
from family_finance.directory import CategoryDirectory, MemberDirectory, NameResolver
from family_finance.log import configure_logging
from family_finance.models.family import FamilyMember
from family_finance.models.transaction import Category, EnrichedTransaction
from family_finance.queries import TransactionQuery
from family_finance.queries.executor import DateLike
from family_finance.services.storage import (
    InMemoryNameStore,
    JsonFileNameStore,
    NameStoreInterface,
)


class FamilyDataProvider:
    """Read-only facade over the seed tables and the name store."""

    def __init__(
        self,
        store: Optional[NameStoreInterface] = None,
        key_prefix: str = "member_name_",
    ):
        self._store = store if store is not None else InMemoryNameStore()
        self._names = NameResolver(self._store, key_prefix=key_prefix)
        self._members = MemberDirectory(self._names)
        self._categories = CategoryDirectory()
        self._transactions = TransactionQuery(self._categories, self._names)

    @property
    def store(self) -> NameStoreInterface:
        """Get the name store overrides are read from."""
        return self._store

    @property
    def names(self) -> NameResolver:
        """Get the name resolver."""
        return self._names

    # Members

    def get_display_name(self, member_id: str) -> str:
        """Get the name to show for a member."""
        return self._names.get_display_name(member_id)

    def list_family_members(self) -> list[FamilyMember]:
        """Get every family member with names resolved."""
        return self._members.list_family_members()

    # Categories

    def list_categories(self) -> list[Category]:
        """Get all categories."""
        return self._categories.list_categories()

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get a category by id, or None."""
        return self._categories.get_category(category_id)

    def category_name_by_id(self, category_id: str) -> str:
        """Get a category name, or the unknown label."""
        return self._categories.category_name_by_id(category_id)

    # Transactions

    def query_transactions(
        self,
        start_date: DateLike,
        end_date: DateLike,
    ) -> list[EnrichedTransaction]:
        """Get enriched transactions in an inclusive date range, newest first."""
        return self._transactions.query_transactions(start_date, end_date)

    def total_expense_by_member(self, member_id: str) -> int:
        """Get a member's total expenses."""
        return self._transactions.total_expense_by_member(member_id)

    def expense_totals_by_member(self) -> dict[str, int]:
        """Get total expenses for every member."""
        return self._transactions.expense_totals_by_member()


def create_store(settings: FamilyFinanceSettings) -> NameStoreInterface:
    """Pick the name store the settings ask for."""
    if settings.names_store_path:
        return JsonFileNameStore(Path(settings.names_store_path).expanduser())
    return InMemoryNameStore()


def create_provider(
    settings: Optional[FamilyFinanceSettings] = None,
    store: Optional[NameStoreInterface] = None,
) -> FamilyDataProvider:
    """
    Create a provider wired from settings.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        store: Explicit name store, overriding the configured one

    Returns:
        A ready FamilyDataProvider
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if store is None:
        store = create_store(settings)

    return FamilyDataProvider(store=store, key_prefix=settings.name_key_prefix)
