"""Use case to compose the dashboard report."""

import random
from collections.abc import Callable
from datetime import datetime, time
from decimal import Decimal

from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.application.query_runner import AggregateQueryRunner
from ledger_insights.application.use_cases.ledger_queries import (
    owned_accounts,
    owned_transactions,
    to_monthly_trend,
    to_recent_transactions,
    trend_window,
)
from ledger_insights.domain.constants import (
    CATEGORY_PALETTE,
    INVESTMENT_ACCOUNT_TYPE,
    RECENT_TRANSACTION_LIMIT,
    TOP_CATEGORY_LIMIT,
    TREND_MONTHS,
)
from ledger_insights.domain.models import (
    Account,
    AccountActivity,
    CategorySlice,
    DashboardReport,
    DashboardSummary,
    DateRange,
    Timeframe,
    Transaction,
    TransactionFilters,
)
from ledger_insights.domain.services.aggregation import (
    net_change,
    rollup_by_account,
    rollup_by_category,
    split_income_expense,
)
from ledger_insights.domain.services.deltas import percent_change
from ledger_insights.domain.services.net_worth import (
    net_worth_point_dates,
    project_net_worth,
)
from ledger_insights.domain.services.normalization import normalize_account_type
from ledger_insights.domain.services.timeframe import resolve_timeframe
from ledger_insights.infrastructure.logging.logger import get_app_logger
from ledger_insights.utils.decimal_utils import coerce_decimal, round_money

_ZERO = Decimal("0")


class GetDashboardReportUseCase:
    """Compose summary, accounts, rollups and net worth into one report.

    Independent ledger reads run concurrently through
    ``AggregateQueryRunner``. A read that fails is logged, replaced with an
    empty/zero default and listed in ``failed_sections``; the rest of the
    report is still produced. The accounts read and the section batch share
    one runner deadline.
    """

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        runner: AggregateQueryRunner | None = None,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
            runner: Optional runner for concurrent section reads.
            clock: Optional callable returning "now".
            rng: Optional random source for the net worth projection.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._runner = runner or AggregateQueryRunner(logger=self._logger)
        self._clock = clock or datetime.now
        self._rng = rng or random.Random()

    def execute(
        self,
        user_id: str,
        timeframe: str | None = None,
    ) -> DashboardReport:
        """Return the dashboard report for a user.

        Args:
            user_id: Requesting user.
            timeframe: Timeframe token; unknown tokens mean 30d.

        Returns:
            DashboardReport: Composite report with rounded figures.
        """
        now = self._clock()
        window = resolve_timeframe(timeframe, now)

        deadline = self._runner.start_deadline()
        account_results = self._runner.run(
            {"accounts": lambda: self._ledger_store.get_active_accounts(user_id)},
            {"accounts": []},
            deadline=deadline,
        )
        accounts = owned_accounts(account_results["accounts"] or [], user_id)
        failed = list(account_results.failed)

        sections, defaults = self._build_sections(user_id, window, accounts, now)
        results = self._runner.run(sections, defaults, deadline=deadline)
        failed.extend(results.failed)

        current = owned_transactions(
            results["current_transactions"], accounts, window.current
        )
        previous = owned_transactions(
            results["comparison_transactions"], accounts, window.comparison
        )
        recent = owned_transactions(results["recent_transactions"], accounts)
        trend = owned_transactions(
            results["trend_transactions"],
            accounts,
            trend_window(now, TREND_MONTHS),
        )

        if "accounts" in failed:
            net_worth_series = []
        else:
            net_worth_series = project_net_worth(
                accounts,
                window.token,
                now,
                logger=self._logger,
                rng=self._rng,
                snapshots=results["net_worth_snapshots"],
            )

        report = DashboardReport(
            timeframe=window.token,
            generated_at=now,
            summary=self._build_summary(accounts, current, previous, results),
            accounts=self._build_account_activity(accounts, current, previous),
            recent_transactions=to_recent_transactions(
                recent,
                accounts,
                RECENT_TRANSACTION_LIMIT,
            ),
            spending_by_category=self._build_categories(current),
            monthly_trend=to_monthly_trend(trend),
            net_worth_series=net_worth_series,
            failed_sections=failed,
        )
        self._logger.info(
            f"Dashboard report built for timeframe={window.token}: "
            f"{len(accounts)} accounts, {len(current)} transactions, "
            f"{len(failed)} failed sections"
        )
        return report

    def _build_sections(
        self,
        user_id: str,
        window: Timeframe,
        accounts: list[Account],
        now: datetime,
    ) -> tuple[dict, dict]:
        store = self._ledger_store
        series_start = net_worth_point_dates(window.token, now.date())[0]
        snapshot_range = DateRange(
            datetime.combine(series_start, time.min, tzinfo=now.tzinfo),
            now,
        )
        sections = {
            "current_transactions": lambda: store.get_transactions(
                user_id, window.current
            ),
            "comparison_transactions": lambda: store.get_transactions(
                user_id, window.comparison
            ),
            "recent_transactions": lambda: store.get_transactions(
                user_id,
                None,
                TransactionFilters(limit=RECENT_TRANSACTION_LIMIT),
            ),
            "trend_transactions": lambda: store.get_transactions(
                user_id, trend_window(now, TREND_MONTHS)
            ),
            "net_worth_snapshots": lambda: store.get_net_worth_snapshots(
                user_id, snapshot_range
            ),
        }
        defaults = {name: [] for name in sections}

        investment_ids = [
            account.account_id
            for account in accounts
            if normalize_account_type(account.account_type)
            == INVESTMENT_ACCOUNT_TYPE
        ]
        if investment_ids:
            sections["investment_change"] = lambda: store.sum_transactions(
                investment_ids, window.current
            )
            sections["investment_previous_change"] = (
                lambda: store.sum_transactions(investment_ids, window.comparison)
            )
            sections["investment_returns"] = lambda: store.sum_transactions(
                investment_ids, window.current, "income"
            )
            defaults["investment_change"] = _ZERO
            defaults["investment_previous_change"] = _ZERO
            defaults["investment_returns"] = _ZERO
        return sections, defaults

    @staticmethod
    def _build_summary(
        accounts: list[Account],
        current: list[Transaction],
        previous: list[Transaction],
        results,
    ) -> DashboardSummary:
        current_split = split_income_expense(current)
        previous_split = split_income_expense(previous)
        investment_change = coerce_decimal(
            results.values.get("investment_change")
        )
        investment_previous = coerce_decimal(
            results.values.get("investment_previous_change")
        )
        total_balance = sum(
            (coerce_decimal(account.current_balance) for account in accounts),
            _ZERO,
        )
        return DashboardSummary(
            total_balance=round_money(total_balance),
            balance_change=round_money(net_change(current)),
            income=round_money(current_split.income),
            income_change=round_money(
                percent_change(current_split.income, previous_split.income)
            ),
            expenses=round_money(current_split.expenses),
            expenses_change=round_money(
                percent_change(current_split.expenses, previous_split.expenses)
            ),
            net_growth=round_money(current_split.net),
            investment_returns=round_money(
                results.values.get("investment_returns")
            ),
            investment_change=round_money(
                percent_change(investment_change, investment_previous)
            ),
        )

    @staticmethod
    def _build_account_activity(
        accounts: list[Account],
        current: list[Transaction],
        previous: list[Transaction],
    ) -> list[AccountActivity]:
        current_rows = rollup_by_account(current)
        previous_rows = rollup_by_account(previous)
        activity = []
        for account in accounts:
            change = (
                current_rows[account.account_id].net_change
                if account.account_id in current_rows
                else _ZERO
            )
            previous_change = (
                previous_rows[account.account_id].net_change
                if account.account_id in previous_rows
                else _ZERO
            )
            activity.append(
                AccountActivity(
                    account_id=account.account_id,
                    name=account.name,
                    account_type=normalize_account_type(account.account_type),
                    balance=round_money(account.current_balance),
                    change=round_money(change),
                    previous_change=round_money(previous_change),
                    change_percent=round_money(
                        percent_change(change, previous_change)
                    ),
                )
            )
        return activity

    @staticmethod
    def _build_categories(
        transactions: list[Transaction],
    ) -> list[CategorySlice]:
        rows = rollup_by_category(transactions)[:TOP_CATEGORY_LIMIT]
        return [
            CategorySlice(
                name=row.category,
                value=round_money(row.total),
                color=CATEGORY_PALETTE[rank % len(CATEGORY_PALETTE)],
            )
            for rank, row in enumerate(rows)
        ]


__all__ = ["GetDashboardReportUseCase", "DashboardReport"]
