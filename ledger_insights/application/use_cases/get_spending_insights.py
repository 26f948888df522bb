"""Use case to compute spending insights for a timeframe."""

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.application.use_cases.ledger_queries import (
    fetch_owned_ledger,
)
from ledger_insights.domain.models import SpendingInsights
from ledger_insights.domain.services.aggregation import summarize_spending
from ledger_insights.domain.services.timeframe import resolve_timeframe
from ledger_insights.infrastructure.logging.logger import get_app_logger
from ledger_insights.utils.decimal_utils import round_money


class GetSpendingInsightsUseCase:
    """Summarize spending statistics and top merchants."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def execute(
        self,
        user_id: str,
        timeframe: str | None = None,
    ) -> SpendingInsights:
        """Return spending insights for the timeframe.

        Args:
            user_id: Requesting user.
            timeframe: Timeframe token; unknown tokens mean 30d.

        Returns:
            SpendingInsights: Rounded totals and top merchants.
        """
        window = resolve_timeframe(timeframe, self._clock())
        _, transactions = fetch_owned_ledger(
            self._ledger_store,
            user_id,
            window.current,
        )
        insights = summarize_spending(transactions)
        self._logger.info(
            f"Spending insights for {window.token}: "
            f"{insights.total_transactions} transactions"
        )
        return replace(
            insights,
            total_income=round_money(insights.total_income),
            total_expenses=round_money(insights.total_expenses),
            average_expense=round_money(insights.average_expense),
            largest_expense=round_money(insights.largest_expense),
            top_merchants=[
                replace(
                    row,
                    total=round_money(row.total),
                    average=round_money(row.average),
                )
                for row in insights.top_merchants
            ],
        )


__all__ = ["GetSpendingInsightsUseCase", "SpendingInsights"]
