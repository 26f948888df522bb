"""Grouped computations over ledger transactions.

Every function here is pure: it takes an already-fetched list of
transactions and returns typed rows. Sums stay full-precision ``Decimal``;
rounding to cents is left to report assembly.
"""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from ledger_insights.domain.constants import (
    CALENDAR_GRANULARITIES,
    DEFAULT_GRANULARITY,
    TOP_MERCHANT_LIMIT,
)
from ledger_insights.domain.models import (
    AccountRollupRow,
    CalendarBucketRow,
    CategoryRollupRow,
    DateRange,
    IncomeExpenseSplit,
    MerchantRollupRow,
    SpendingInsights,
    Transaction,
)
from ledger_insights.domain.services.normalization import (
    normalize_label,
    normalize_optional_label,
)
from ledger_insights.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")


def filter_period(
    transactions: Iterable[Transaction],
    date_range: DateRange,
) -> list[Transaction]:
    """Keep transactions that occurred inside the half-open window."""
    return [tx for tx in transactions if date_range.contains(tx.occurred_at)]


def restrict_to_accounts(
    transactions: Iterable[Transaction],
    account_ids: Iterable[str],
) -> list[Transaction]:
    """Keep transactions that belong to the given accounts."""
    allowed = set(account_ids)
    return [tx for tx in transactions if tx.account_id in allowed]


def net_change(transactions: Iterable[Transaction]) -> Decimal:
    """Return the signed sum of transaction amounts."""
    return sum((coerce_decimal(tx.amount) for tx in transactions), _ZERO)


def split_income_expense(
    transactions: Iterable[Transaction],
) -> IncomeExpenseSplit:
    """Split amounts into income and expense magnitude.

    Args:
        transactions: Transactions to aggregate.

    Returns:
        IncomeExpenseSplit: Positive amounts, absolute negative amounts and
        the total count.
    """
    income = _ZERO
    expenses = _ZERO
    count = 0
    for tx in transactions:
        amount = coerce_decimal(tx.amount)
        count += 1
        if amount > 0:
            income += amount
        elif amount < 0:
            expenses += abs(amount)
    return IncomeExpenseSplit(income=income, expenses=expenses, count=count)


def rollup_by_category(
    transactions: Iterable[Transaction],
) -> list[CategoryRollupRow]:
    """Group expenses by category, largest total first.

    Missing categories are grouped under ``"Other"``.
    """
    totals = _group_expenses(
        (normalize_label(tx.category), tx) for tx in transactions
    )
    return [
        CategoryRollupRow(
            category=label,
            total=total,
            count=count,
            average=total / count,
        )
        for label, total, count in _ordered(totals)
    ]


def rollup_by_merchant(
    transactions: Iterable[Transaction],
    limit: int | None = None,
) -> list[MerchantRollupRow]:
    """Group expenses by merchant for rows that name one.

    Args:
        transactions: Transactions to aggregate.
        limit: Optional maximum number of rows to return.

    Returns:
        list[MerchantRollupRow]: Descending by total, then ascending label.
    """
    pairs = []
    for tx in transactions:
        merchant = normalize_optional_label(tx.merchant)
        if merchant is None:
            continue
        pairs.append((merchant, tx))
    rows = [
        MerchantRollupRow(
            merchant=label,
            total=total,
            count=count,
            average=total / count,
        )
        for label, total, count in _ordered(_group_expenses(pairs))
    ]
    if limit is not None:
        return rows[:limit]
    return rows


def rollup_by_account(
    transactions: Iterable[Transaction],
) -> dict[str, AccountRollupRow]:
    """Return the signed net change per account id."""
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for tx in transactions:
        totals[tx.account_id] = (
            totals.get(tx.account_id, _ZERO) + coerce_decimal(tx.amount)
        )
        counts[tx.account_id] = counts.get(tx.account_id, 0) + 1
    return {
        account_id: AccountRollupRow(
            account_id=account_id,
            net_change=total,
            count=counts[account_id],
        )
        for account_id, total in totals.items()
    }


def truncate_to_bucket(moment: datetime, granularity: str) -> datetime:
    """Truncate a timestamp to the start of its day, month or year."""
    if granularity == "year":
        return datetime(moment.year, 1, 1, tzinfo=moment.tzinfo)
    if granularity == "month":
        return datetime(moment.year, moment.month, 1, tzinfo=moment.tzinfo)
    return datetime(moment.year, moment.month, moment.day, tzinfo=moment.tzinfo)


def rollup_by_calendar_bucket(
    transactions: Iterable[Transaction],
    granularity: str = DEFAULT_GRANULARITY,
) -> list[CalendarBucketRow]:
    """Group transactions into calendar buckets, oldest first.

    Args:
        transactions: Transactions to aggregate.
        granularity: ``day``, ``month`` or ``year``; anything else is
            treated as ``month``.

    Returns:
        list[CalendarBucketRow]: Income, expenses and counts per bucket.
    """
    if granularity not in CALENDAR_GRANULARITIES:
        granularity = DEFAULT_GRANULARITY
    grouped: dict[datetime, list[Transaction]] = {}
    for tx in transactions:
        bucket = truncate_to_bucket(tx.occurred_at, granularity)
        grouped.setdefault(bucket, []).append(tx)

    rows = []
    for bucket in sorted(grouped):
        split = split_income_expense(grouped[bucket])
        rows.append(
            CalendarBucketRow(
                bucket=bucket,
                income=split.income,
                expenses=split.expenses,
                count=split.count,
            )
        )
    return rows


def summarize_spending(
    transactions: Iterable[Transaction],
    merchant_limit: int = TOP_MERCHANT_LIMIT,
) -> SpendingInsights:
    """Compute spending statistics for a set of transactions.

    Args:
        transactions: Transactions to summarize.
        merchant_limit: Number of top merchants to keep.

    Returns:
        SpendingInsights: Totals, expense statistics and top merchants.
    """
    items = list(transactions)
    split = split_income_expense(items)
    expense_amounts = [
        abs(coerce_decimal(tx.amount))
        for tx in items
        if coerce_decimal(tx.amount) < 0
    ]
    categories = {
        tx.category.strip()
        for tx in items
        if tx.category and tx.category.strip()
    }
    average = (
        sum(expense_amounts, _ZERO) / len(expense_amounts)
        if expense_amounts
        else _ZERO
    )
    return SpendingInsights(
        total_income=split.income,
        total_expenses=split.expenses,
        total_transactions=split.count,
        unique_categories=len(categories),
        average_expense=average,
        largest_expense=max(expense_amounts, default=_ZERO),
        top_merchants=rollup_by_merchant(items, limit=merchant_limit),
    )


def _group_expenses(pairs) -> dict[str, tuple[Decimal, int]]:
    totals: dict[str, tuple[Decimal, int]] = {}
    for label, tx in pairs:
        amount = coerce_decimal(tx.amount)
        if amount >= 0:
            continue
        total, count = totals.get(label, (_ZERO, 0))
        totals[label] = (total + abs(amount), count + 1)
    return totals


def _ordered(totals: dict[str, tuple[Decimal, int]]):
    ordered = sorted(totals.items(), key=lambda item: (-item[1][0], item[0]))
    return [(label, total, count) for label, (total, count) in ordered]


__all__ = [
    "filter_period",
    "restrict_to_accounts",
    "net_change",
    "split_income_expense",
    "rollup_by_category",
    "rollup_by_merchant",
    "rollup_by_account",
    "truncate_to_bucket",
    "rollup_by_calendar_bucket",
    "summarize_spending",
]
