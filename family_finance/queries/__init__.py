"""Transaction query package."""

from family_finance.queries.executor import (
    TransactionQuery,
    describe_date_range,
    parse_calendar_date,
)

__all__ = ["TransactionQuery", "describe_date_range", "parse_calendar_date"]
