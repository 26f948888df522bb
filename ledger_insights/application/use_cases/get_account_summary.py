"""Use case to summarize balances by account type."""

from collections.abc import Callable
from datetime import datetime, timedelta
from decimal import Decimal

from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.application.use_cases.ledger_queries import (
    fetch_owned_ledger,
)
from ledger_insights.domain.constants import ACCOUNT_TYPES
from ledger_insights.domain.models import AccountSummary, DateRange
from ledger_insights.domain.services.aggregation import split_income_expense
from ledger_insights.domain.services.normalization import (
    normalize_account_type,
)
from ledger_insights.infrastructure.logging.logger import get_app_logger
from ledger_insights.utils.decimal_utils import coerce_decimal, round_money

RECENT_DAYS = 30


class GetAccountSummaryUseCase:
    """Compute balances per account type and the last 30 days of activity."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def execute(self, user_id: str) -> AccountSummary:
        """Return the account summary for a user.

        Args:
            user_id: Requesting user.

        Returns:
            AccountSummary: Totals by type (every known type present) and
            recent income, expenses and net change.
        """
        now = self._clock()
        accounts, transactions = fetch_owned_ledger(
            self._ledger_store,
            user_id,
            DateRange(now - timedelta(days=RECENT_DAYS), now),
        )
        balances = {account_type: Decimal("0") for account_type in ACCOUNT_TYPES}
        for account in accounts:
            account_type = normalize_account_type(account.account_type)
            balances[account_type] = balances.get(
                account_type, Decimal("0")
            ) + coerce_decimal(account.current_balance)
        total_balance = sum(balances.values(), Decimal("0"))
        split = split_income_expense(transactions)
        self._logger.info(
            f"Account summary computed for {len(accounts)} accounts"
        )
        return AccountSummary(
            total_accounts=len(accounts),
            total_balance=round_money(total_balance),
            balances_by_type={
                account_type: round_money(amount)
                for account_type, amount in balances.items()
            },
            recent_income=round_money(split.income),
            recent_expenses=round_money(split.expenses),
            recent_change=round_money(split.net),
        )


__all__ = ["GetAccountSummaryUseCase", "AccountSummary"]
