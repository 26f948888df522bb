"""Composition root for wiring infrastructure adapters."""

import random

from ledger_insights.application.ports.database import DatabaseEnginePort
from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.application.query_runner import AggregateQueryRunner
from ledger_insights.application.use_cases import (
    GetAccountBalanceHistoryUseCase,
    GetAccountSummaryUseCase,
    GetCategorySpendingUseCase,
    GetDashboardReportUseCase,
    GetNetWorthSeriesUseCase,
    GetSpendingInsightsUseCase,
    GetSpendingTrendsUseCase,
    GetTransactionsUseCase,
)
from ledger_insights.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledger_insights.infrastructure.ledger_repository import (
    SqlAlchemyLedgerStore,
)
from ledger_insights.infrastructure.logging.logger import get_app_logger
from ledger_insights.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerStorePort:
    """Return the SQL-backed ledger store.

    Each read is bounded server-side by the configured query timeout.
    """
    resolved_db = db_port or build_database_adapter()
    resolved = settings or LedgerSettings.from_env()
    return SqlAlchemyLedgerStore(
        resolved_db,
        statement_timeout_ms=int(resolved.query_timeout * 1000),
    )


def build_query_runner(
    settings: LedgerSettings | None = None,
) -> AggregateQueryRunner:
    """Return a query runner configured from settings."""
    resolved = settings or LedgerSettings.from_env()
    return AggregateQueryRunner(
        timeout_seconds=resolved.query_timeout,
        max_attempts=resolved.query_retries,
        max_workers=resolved.max_workers,
        logger=get_app_logger(),
    )


def build_random_source(
    settings: LedgerSettings | None = None,
) -> random.Random:
    """Return the random source used by net worth projections."""
    resolved = settings or LedgerSettings.from_env()
    return random.Random(resolved.random_seed)


def build_dashboard_report_use_case(
    ledger_store: LedgerStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetDashboardReportUseCase:
    """Return the dashboard report use case wired to the ledger store."""
    resolved = settings or LedgerSettings.from_env()
    return GetDashboardReportUseCase(
        ledger_store or build_ledger_store(settings=resolved),
        logger=get_app_logger(),
        runner=build_query_runner(resolved),
        rng=build_random_source(resolved),
    )


def build_net_worth_series_use_case(
    ledger_store: LedgerStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetNetWorthSeriesUseCase:
    """Return the net worth series use case."""
    resolved = settings or LedgerSettings.from_env()
    return GetNetWorthSeriesUseCase(
        ledger_store or build_ledger_store(settings=resolved),
        logger=get_app_logger(),
        rng=build_random_source(resolved),
    )


def build_category_spending_use_case(
    ledger_store: LedgerStorePort | None = None,
) -> GetCategorySpendingUseCase:
    """Return the category spending use case."""
    return GetCategorySpendingUseCase(
        ledger_store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_spending_trends_use_case(
    ledger_store: LedgerStorePort | None = None,
) -> GetSpendingTrendsUseCase:
    """Return the monthly spending trends use case."""
    return GetSpendingTrendsUseCase(
        ledger_store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_spending_insights_use_case(
    ledger_store: LedgerStorePort | None = None,
) -> GetSpendingInsightsUseCase:
    """Return the spending insights use case."""
    return GetSpendingInsightsUseCase(
        ledger_store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_account_summary_use_case(
    ledger_store: LedgerStorePort | None = None,
) -> GetAccountSummaryUseCase:
    """Return the account summary use case."""
    return GetAccountSummaryUseCase(
        ledger_store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_account_balance_history_use_case(
    ledger_store: LedgerStorePort | None = None,
) -> GetAccountBalanceHistoryUseCase:
    """Return the account balance history use case."""
    return GetAccountBalanceHistoryUseCase(
        ledger_store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_transactions_use_case(
    ledger_store: LedgerStorePort | None = None,
) -> GetTransactionsUseCase:
    """Return the filtered transaction listing use case."""
    return GetTransactionsUseCase(
        ledger_store or build_ledger_store(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_store",
    "build_query_runner",
    "build_random_source",
    "build_dashboard_report_use_case",
    "build_net_worth_series_use_case",
    "build_category_spending_use_case",
    "build_spending_trends_use_case",
    "build_spending_insights_use_case",
    "build_account_summary_use_case",
    "build_account_balance_history_use_case",
    "build_transactions_use_case",
]
