"""Use case to build net worth series for one or all timeframes."""

import random
from collections.abc import Callable
from datetime import datetime, time

from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.application.use_cases.ledger_queries import owned_accounts
from ledger_insights.domain.constants import TIMEFRAME_TOKENS
from ledger_insights.domain.models import DateRange, NetWorthPoint
from ledger_insights.domain.services.net_worth import (
    net_worth_point_dates,
    project_net_worth,
)
from ledger_insights.domain.services.timeframe import normalize_timeframe_token
from ledger_insights.infrastructure.logging.logger import get_app_logger


class GetNetWorthSeriesUseCase:
    """Project net worth series from current balances and snapshots."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning "now".
            rng: Optional random source for synthetic points.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now
        self._rng = rng or random.Random()

    def execute(
        self,
        user_id: str,
        timeframe: str | None = None,
    ) -> list[NetWorthPoint]:
        """Return the net worth series for one timeframe.

        Args:
            user_id: Requesting user.
            timeframe: Timeframe token; unknown tokens mean 30d.

        Returns:
            list[NetWorthPoint]: Points in ascending date order.
        """
        now = self._clock()
        accounts = owned_accounts(
            self._ledger_store.get_active_accounts(user_id),
            user_id,
        )
        return self._project(user_id, accounts, timeframe, now)

    def execute_all(self, user_id: str) -> dict[str, list[NetWorthPoint]]:
        """Return one series per supported timeframe.

        Args:
            user_id: Requesting user.

        Returns:
            dict[str, list[NetWorthPoint]]: Series keyed by timeframe token.
        """
        now = self._clock()
        accounts = owned_accounts(
            self._ledger_store.get_active_accounts(user_id),
            user_id,
        )
        return {
            token: self._project(user_id, accounts, token, now)
            for token in TIMEFRAME_TOKENS
        }

    def _project(self, user_id, accounts, timeframe, now):
        token = normalize_timeframe_token(timeframe)
        snapshots = []
        if accounts:
            first_date = net_worth_point_dates(token, now.date())[0]
            snapshots = self._ledger_store.get_net_worth_snapshots(
                user_id,
                DateRange(
                    datetime.combine(first_date, time.min, tzinfo=now.tzinfo),
                    now,
                ),
            )
        points = project_net_worth(
            accounts,
            token,
            now,
            logger=self._logger,
            rng=self._rng,
            snapshots=snapshots,
        )
        self._logger.info(
            f"Net worth series for {token}: {len(points)} points, "
            f"{len(snapshots)} snapshots"
        )
        return points


__all__ = ["GetNetWorthSeriesUseCase", "NetWorthPoint"]
