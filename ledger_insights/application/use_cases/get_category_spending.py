"""Use case to compute spending by category for a timeframe."""

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.application.use_cases.ledger_queries import (
    fetch_owned_ledger,
)
from ledger_insights.domain.models import CategoryShare, CategorySpending
from ledger_insights.domain.services.aggregation import rollup_by_category
from ledger_insights.domain.services.timeframe import resolve_timeframe
from ledger_insights.infrastructure.logging.logger import get_app_logger
from ledger_insights.utils.decimal_utils import round_money


class GetCategorySpendingUseCase:
    """Compute every expense category with its share of spending."""

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
    ) -> CategorySpending:
        """Return the category breakdown for the timeframe.

        Args:
            user_id: Requesting user.
            timeframe: Timeframe token; unknown tokens mean 30d.

        Returns:
            CategorySpending: Categories ordered by descending total.
        """
        window = resolve_timeframe(timeframe, self._clock())
        _, transactions = fetch_owned_ledger(
            self._ledger_store,
            user_id,
            window.current,
        )
        rows = rollup_by_category(transactions)
        total_spending = sum((row.total for row in rows), Decimal("0"))
        categories = [
            CategoryShare(
                category=row.category,
                total=round_money(row.total),
                count=row.count,
                average=round_money(row.average),
                percentage=round_money(
                    row.total / total_spending * Decimal("100")
                    if total_spending > 0
                    else Decimal("0")
                ),
            )
            for row in rows
        ]
        self._logger.info(
            f"Category spending for {window.token}: {len(categories)} "
            f"categories, total={total_spending}"
        )
        return CategorySpending(
            timeframe=window.token,
            total_spending=round_money(total_spending),
            categories=categories,
        )


__all__ = ["GetCategorySpendingUseCase", "CategorySpending"]
