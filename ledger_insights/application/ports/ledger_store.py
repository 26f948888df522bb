"""Application port for ledger data access."""

from decimal import Decimal
from typing import Protocol

from ledger_insights.domain.models import (
    Account,
    AmountDirection,
    DateRange,
    NetWorthSnapshot,
    Transaction,
    TransactionFilters,
)


class LedgerStorePort(Protocol):
    """Port exposing read access to accounts and transactions.

    Implementations scope every query to the given user (or account ids),
    consider active accounts only, and return empty collections or zero
    rather than None when nothing matches. Failures surface as
    ``StoreFailure``.
    """

    def get_active_accounts(self, user_id: str) -> list[Account]:
        """Return the user's active accounts."""

    def get_transactions(
        self,
        user_id: str,
        date_range: DateRange | None = None,
        filters: TransactionFilters | None = None,
    ) -> list[Transaction]:
        """Return the user's transactions, newest first."""

    def sum_transactions(
        self,
        account_ids: list[str],
        date_range: DateRange,
        direction: AmountDirection | None = None,
    ) -> Decimal:
        """Return the signed sum of amounts for the accounts and window."""

    def get_net_worth_snapshots(
        self,
        user_id: str,
        date_range: DateRange,
    ) -> list[NetWorthSnapshot]:
        """Return recorded net worth snapshots inside the window."""


__all__ = ["LedgerStorePort"]
