"""
Transaction Query Engine

Filters, enriches and aggregates the seed transactions.

DESIGN DECISION: Queries never raise. A bad date range gives an empty
list, an unknown category gives placeholder display values, and a
member with no expenses totals to zero. The UI can render whatever
comes back without guarding.
"""

from datetime import date, datetime
from typing import Optional, Sequence, Union

import structlog

from family_finance.data.seed import (
    FAMILY_ROLES,
    MOCK_TRANSACTIONS,
    UNKNOWN_CATEGORY_COLOR,
    UNKNOWN_CATEGORY_ICON,
)
from family_finance.directory import CategoryDirectory, NameResolver
from family_finance.models.family import RoleDefinition
from family_finance.models.transaction import (
    EnrichedTransaction,
    Transaction,
    TransactionType,
)


DateLike = Union[date, str]


def parse_calendar_date(value: DateLike) -> Optional[date]:
    """
    Parse a date bound.

    Accepts a date (datetimes are truncated to their date) or an ISO
    'YYYY-MM-DD' string. Returns None if the value can't be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def describe_date_range(date_from: date, date_to: date) -> str:
    """Format a date range for log and UI captions."""
    if date_from == date_to:
        return f"on {date_from.strftime('%d %b %Y')}"
    elif date_from.month == date_to.month and date_from.year == date_to.year:
        return f"from {date_from.strftime('%d')} to {date_to.strftime('%d %b %Y')}"
    elif date_from.year == date_to.year:
        return f"from {date_from.strftime('%d %b')} to {date_to.strftime('%d %b %Y')}"
    return f"from {date_from.strftime('%d %b %Y')} to {date_to.strftime('%d %b %Y')}"


class TransactionQuery:
    """
    Executes date-range queries and expense totals over the seed set.

    Category and member display data are looked up through the
    directories, so renamed members show up immediately.
    """

    def __init__(
        self,
        categories: CategoryDirectory,
        names: NameResolver,
        transactions: Sequence[Transaction] = MOCK_TRANSACTIONS,
        roles: Sequence[RoleDefinition] = FAMILY_ROLES,
    ):
        self._categories = categories
        self._names = names
        self._transactions = tuple(transactions)
        self._roles = tuple(roles)
        self._logger = structlog.get_logger(__name__)

    def query_transactions(
        self,
        start_date: DateLike,
        end_date: DateLike,
    ) -> list[EnrichedTransaction]:
        """
        Get transactions dated within [start_date, end_date], newest first.

        Both bounds are inclusive. Transactions on the same date keep
        their seed order.
        """
        start = parse_calendar_date(start_date)
        end = parse_calendar_date(end_date)
        if start is None or end is None:
            self._logger.warning(
                "invalid_date_range",
                start_date=str(start_date),
                end_date=str(end_date),
            )
            return []

        matched = [t for t in self._transactions if start <= t.date <= end]
        results = [self._enrich(t) for t in matched]
        results.sort(key=lambda t: t.date, reverse=True)

        self._logger.debug(
            "transactions_queried",
            range=describe_date_range(start, end) if start <= end else "empty",
            result_count=len(results),
        )
        return results

    def total_expense_by_member(self, member_id: str) -> int:
        """Sum the member's expense amounts. Zero if there are none."""
        return sum(
            t.amount
            for t in self._transactions
            if t.type == TransactionType.EXPENSE and t.member_id == member_id
        )

    def expense_totals_by_member(self) -> dict[str, int]:
        """Get the expense total of every family member, in role order."""
        return {
            role.id.value: self.total_expense_by_member(role.id.value)
            for role in self._roles
        }

    def _enrich(self, transaction: Transaction) -> EnrichedTransaction:
        """Denormalize category and member display data into a record."""
        category = self._categories.get_category(transaction.category_id)
        return EnrichedTransaction(
            **transaction.model_dump(),
            category_name=self._categories.category_name_by_id(transaction.category_id),
            category_icon=category.icon if category else UNKNOWN_CATEGORY_ICON,
            category_color=category.color if category else UNKNOWN_CATEGORY_COLOR,
            member_name=self._names.get_display_name(transaction.member_id),
        )
