"""Use case to compute balance changes of one account over time."""

from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.application.use_cases.ledger_queries import (
    owned_accounts,
    owned_transactions,
)
from ledger_insights.domain.constants import DEFAULT_GRANULARITY
from ledger_insights.domain.errors import AccountNotFoundError
from ledger_insights.domain.models import (
    BalanceHistoryPoint,
    TransactionFilters,
)
from ledger_insights.domain.services.aggregation import (
    rollup_by_calendar_bucket,
)
from ledger_insights.infrastructure.logging.logger import get_app_logger
from ledger_insights.utils.decimal_utils import round_money

HISTORY_LIMIT = 12


class GetAccountBalanceHistoryUseCase:
    """Group an account's transactions into day, month or year buckets."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
    ) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        account_id: str,
        granularity: str = DEFAULT_GRANULARITY,
        limit: int = HISTORY_LIMIT,
    ) -> list[BalanceHistoryPoint]:
        """Return the most recent buckets, newest first.

        Args:
            user_id: Requesting user.
            account_id: Account to inspect.
            granularity: ``day``, ``month`` or ``year``; anything else
                means ``month``.
            limit: Maximum number of buckets.

        Returns:
            list[BalanceHistoryPoint]: Net change and count per bucket.

        Raises:
            AccountNotFoundError: The account is not an active account of
                the user.
        """
        accounts = [
            account
            for account in owned_accounts(
                self._ledger_store.get_active_accounts(user_id),
                user_id,
            )
            if account.account_id == account_id
        ]
        if not accounts:
            raise AccountNotFoundError(f"Account not found: {account_id}")

        transactions = owned_transactions(
            self._ledger_store.get_transactions(
                user_id,
                None,
                TransactionFilters(account_ids=(account_id,)),
            ),
            accounts,
        )
        rows = rollup_by_calendar_bucket(transactions, granularity)
        history = [
            BalanceHistoryPoint(
                period=row.bucket,
                balance_change=round_money(row.net),
                transaction_count=row.count,
            )
            for row in reversed(rows)
        ][:limit]
        self._logger.info(
            f"Balance history for account {account_id}: {len(history)} buckets"
        )
        return history


__all__ = ["GetAccountBalanceHistoryUseCase", "BalanceHistoryPoint"]
