"""Use case to list a user's transactions with optional filters."""

from collections.abc import Callable
from datetime import datetime

from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.application.use_cases.ledger_queries import (
    fetch_owned_ledger,
    to_recent_transactions,
)
from ledger_insights.domain.constants import TRANSACTION_PAGE_LIMIT
from ledger_insights.domain.models import (
    RecentTransaction,
    TransactionFilters,
)
from ledger_insights.domain.services.normalization import (
    normalize_optional_label,
)
from ledger_insights.domain.services.timeframe import resolve_timeframe
from ledger_insights.infrastructure.logging.logger import get_app_logger

_DIRECTIONS = ("income", "expense")
_ALL = "all"


class GetTransactionsUseCase:
    """List transactions in a timeframe, newest first."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning "now".
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def execute(
        self,
        user_id: str,
        timeframe: str | None = None,
        *,
        category: str | None = None,
        account_id: str | None = None,
        direction: str | None = None,
        search: str | None = None,
        limit: int = TRANSACTION_PAGE_LIMIT,
    ) -> list[RecentTransaction]:
        """Return the filtered transactions of the user.

        Args:
            user_id: Requesting user.
            timeframe: Timeframe token; unknown tokens mean 30d.
            category: Exact category; ``None`` or ``"all"`` disables it.
            account_id: Restrict to one owned account.
            direction: ``income`` or ``expense``; anything else means both.
            search: Case-insensitive text matched against description,
                merchant and category.
            limit: Maximum rows; values below one use the default.

        Returns:
            list[RecentTransaction]: Display-ready rows, newest first.
        """
        window = resolve_timeframe(timeframe, self._clock())
        category = normalize_optional_label(category)
        if category and category.lower() == _ALL:
            category = None
        filters = TransactionFilters(
            account_ids=(account_id,) if account_id else None,
            category=category,
            direction=direction if direction in _DIRECTIONS else None,
            search=normalize_optional_label(search),
            limit=limit if limit and limit > 0 else TRANSACTION_PAGE_LIMIT,
        )
        accounts, transactions = fetch_owned_ledger(
            self._ledger_store,
            user_id,
            window.current,
            filters,
        )
        rows = to_recent_transactions(transactions, accounts, filters.limit)
        self._logger.info(
            f"Transactions listed for {window.token}: {len(rows)} rows"
        )
        return rows


__all__ = ["GetTransactionsUseCase", "RecentTransaction"]
