"""Shared ledger reads and conversions for use cases."""

from collections.abc import Iterable
from datetime import datetime, time

from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.domain.models import (
    Account,
    DateRange,
    MonthlyTrendPoint,
    RecentTransaction,
    Transaction,
    TransactionFilters,
)
from ledger_insights.domain.services.aggregation import (
    filter_period,
    restrict_to_accounts,
    rollup_by_calendar_bucket,
)
from ledger_insights.domain.services.net_worth import format_point_label
from ledger_insights.domain.services.normalization import normalize_label
from ledger_insights.domain.services.timeframe import month_start, shift_months
from ledger_insights.utils.decimal_utils import coerce_decimal, round_money


def owned_accounts(accounts: Iterable[Account], user_id: str) -> list[Account]:
    """Keep active accounts that belong to the user."""
    return [
        account
        for account in accounts
        if account.user_id == user_id and account.is_active
    ]


def owned_transactions(
    transactions: Iterable[Transaction],
    accounts: Iterable[Account],
    date_range: DateRange | None = None,
) -> list[Transaction]:
    """Keep transactions of the given accounts, optionally within a window."""
    kept = restrict_to_accounts(
        transactions,
        (account.account_id for account in accounts),
    )
    if date_range is not None:
        kept = filter_period(kept, date_range)
    return kept


def fetch_owned_ledger(
    ledger_store: LedgerStorePort,
    user_id: str,
    date_range: DateRange | None = None,
    filters: TransactionFilters | None = None,
) -> tuple[list[Account], list[Transaction]]:
    """Fetch the user's active accounts and their transactions.

    Args:
        ledger_store: Port providing ledger data.
        user_id: Requesting user.
        date_range: Optional half-open window.
        filters: Optional store-side filters.

    Returns:
        tuple: Owned accounts and the transactions restricted to them.
    """
    accounts = owned_accounts(ledger_store.get_active_accounts(user_id), user_id)
    if not accounts:
        return [], []
    transactions = ledger_store.get_transactions(user_id, date_range, filters)
    return accounts, owned_transactions(transactions, accounts, date_range)


def trend_window(now: datetime, months: int) -> DateRange:
    """Return the window covering the last ``months`` calendar months."""
    first_month = shift_months(month_start(now), -(months - 1))
    start = datetime.combine(first_month, time.min, tzinfo=now.tzinfo)
    return DateRange(start, now)


def to_monthly_trend(
    transactions: Iterable[Transaction],
) -> list[MonthlyTrendPoint]:
    """Roll transactions up by month into rounded trend points."""
    return [
        MonthlyTrendPoint(
            month=row.bucket.date(),
            label=format_point_label("1y", row.bucket.date()),
            income=round_money(row.income),
            expenses=round_money(row.expenses),
            net=round_money(row.net),
            transaction_count=row.count,
        )
        for row in rollup_by_calendar_bucket(transactions, "month")
    ]


def to_recent_transactions(
    transactions: Iterable[Transaction],
    accounts: Iterable[Account],
    limit: int,
) -> list[RecentTransaction]:
    """Return the newest ``limit`` transactions as display rows."""
    names = {account.account_id: account.name for account in accounts}
    ordered = sorted(
        transactions,
        key=lambda tx: tx.occurred_at,
        reverse=True,
    )[:limit]
    rows = []
    for tx in ordered:
        amount = coerce_decimal(tx.amount)
        rows.append(
            RecentTransaction(
                transaction_id=tx.transaction_id,
                description=tx.description,
                category=normalize_label(tx.category),
                amount=round_money(amount),
                occurred_at=tx.occurred_at,
                kind="income" if amount >= 0 else "expense",
                merchant=tx.merchant,
                account_name=names.get(tx.account_id),
            )
        )
    return rows


__all__ = [
    "owned_accounts",
    "owned_transactions",
    "fetch_owned_ledger",
    "trend_window",
    "to_monthly_trend",
    "to_recent_transactions",
]
