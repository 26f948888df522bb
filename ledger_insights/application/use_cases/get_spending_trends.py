"""Use case to compute monthly income and expense trends."""

from collections.abc import Callable
from datetime import datetime

from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.application.use_cases.ledger_queries import (
    fetch_owned_ledger,
    to_monthly_trend,
    trend_window,
)
from ledger_insights.domain.constants import TREND_MONTHS
from ledger_insights.domain.models import MonthlyTrendPoint
from ledger_insights.infrastructure.logging.logger import get_app_logger


class GetSpendingTrendsUseCase:
    """Roll the last months of transactions up by calendar month."""

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
        months: int = TREND_MONTHS,
    ) -> list[MonthlyTrendPoint]:
        """Return one point per month with activity, oldest first.

        Args:
            user_id: Requesting user.
            months: Number of calendar months including the current one.
                Values below one fall back to the default.

        Returns:
            list[MonthlyTrendPoint]: Monthly income, expenses and net.
        """
        if months < 1:
            months = TREND_MONTHS
        window = trend_window(self._clock(), months)
        _, transactions = fetch_owned_ledger(
            self._ledger_store,
            user_id,
            window,
        )
        trend = to_monthly_trend(transactions)
        self._logger.info(
            f"Spending trends over {months} months: {len(trend)} buckets"
        )
        return trend


__all__ = ["GetSpendingTrendsUseCase", "MonthlyTrendPoint"]
