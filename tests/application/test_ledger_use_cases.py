"""Tests for the single-aggregate ledger use cases."""

import random
from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from ledger_insights.application.use_cases import (
    GetAccountBalanceHistoryUseCase,
    GetAccountSummaryUseCase,
    GetCategorySpendingUseCase,
    GetNetWorthSeriesUseCase,
    GetSpendingInsightsUseCase,
    GetSpendingTrendsUseCase,
    GetTransactionsUseCase,
)
from ledger_insights.domain.errors import AccountNotFoundError, StoreFailure
from ledger_insights.domain.models import (
    Account,
    Transaction,
    TransactionFilters,
)
from ledger_insights.domain.services.timeframe import resolve_timeframe

NOW = datetime(2024, 6, 15, 12, 0)


def _account(account_id, account_type, balance, user_id="user-1"):
    return Account(
        account_id=account_id,
        user_id=user_id,
        name=account_id,
        account_type=account_type,
        current_balance=Decimal(balance),
    )


def _tx(tx_id, amount, when, category=None, merchant=None, account="chk"):
    return Transaction(
        transaction_id=tx_id,
        account_id=account,
        amount=Decimal(amount),
        occurred_at=when,
        category=category,
        merchant=merchant,
    )


def _store(accounts, transactions) -> MagicMock:
    store = MagicMock()
    store.get_active_accounts.return_value = accounts
    store.get_transactions.return_value = transactions
    store.get_net_worth_snapshots.return_value = []
    return store


def test_category_spending_reports_shares() -> None:
    store = _store(
        [_account("chk", "checking", "100")],
        [
            _tx("1", "-30", datetime(2024, 6, 1), "Food"),
            _tx("2", "-30", datetime(2024, 6, 2), "Food"),
            _tx("3", "-40", datetime(2024, 6, 3), "Rent"),
            _tx("4", "900", datetime(2024, 6, 3), "Salary"),
            _tx("5", "-500", datetime(2024, 1, 3), "Outside window"),
            _tx("6", "-70", datetime(2024, 6, 3), "Foreign", account="x"),
        ],
    )
    use_case = GetCategorySpendingUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    result = use_case.execute("user-1", "30d")

    assert result.timeframe == "30d"
    assert result.total_spending == Decimal("100.00")
    assert [row.category for row in result.categories] == ["Food", "Rent"]
    assert result.categories[0].percentage == Decimal("60.00")
    assert result.categories[0].average == Decimal("30.00")
    assert result.categories[1].percentage == Decimal("40.00")


def test_category_spending_without_accounts_skips_transactions() -> None:
    store = _store([], [])
    use_case = GetCategorySpendingUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    result = use_case.execute("user-1", "7d")

    assert result.categories == []
    assert result.total_spending == Decimal("0.00")
    store.get_transactions.assert_not_called()


def test_spending_trends_groups_by_month() -> None:
    store = _store(
        [_account("chk", "checking", "100")],
        [
            _tx("1", "1000", datetime(2024, 6, 1)),
            _tx("2", "-250", datetime(2024, 6, 2)),
            _tx("3", "-50", datetime(2024, 2, 10)),
        ],
    )
    use_case = GetSpendingTrendsUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    trend = use_case.execute("user-1", months=0)

    window = store.get_transactions.call_args.args[1]
    assert window.start == datetime(2024, 1, 1)
    assert window.end == NOW
    assert [point.label for point in trend] == ["Feb", "Jun"]
    assert trend[1].net == Decimal("750.00")
    assert trend[1].transaction_count == 2


def test_spending_insights_are_rounded() -> None:
    store = _store(
        [_account("chk", "checking", "100")],
        [
            _tx("1", "-10.005", datetime(2024, 6, 1), "Food", "Cafe"),
            _tx("2", "-20", datetime(2024, 6, 2), "Food", "Market"),
            _tx("3", "-5", datetime(2024, 6, 3), "Fees"),
        ],
    )
    use_case = GetSpendingInsightsUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    insights = use_case.execute("user-1")

    assert insights.total_expenses == Decimal("35.01")
    assert insights.largest_expense == Decimal("20.00")
    assert insights.average_expense == Decimal("11.67")
    assert insights.unique_categories == 2
    assert [row.merchant for row in insights.top_merchants] == [
        "Market",
        "Cafe",
    ]
    assert insights.top_merchants[1].total == Decimal("10.01")


def test_account_summary_lists_every_type() -> None:
    store = _store(
        [
            _account("chk", "Checking", "1200.50"),
            _account("cc", "credit", "-200.50"),
        ],
        [
            _tx("1", "300", datetime(2024, 6, 10)),
            _tx("2", "-100", datetime(2024, 6, 11), account="cc"),
        ],
    )
    use_case = GetAccountSummaryUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    summary = use_case.execute("user-1")

    assert summary.total_accounts == 2
    assert summary.total_balance == Decimal("1000.00")
    assert summary.balances_by_type == {
        "checking": Decimal("1200.50"),
        "savings": Decimal("0.00"),
        "investment": Decimal("0.00"),
        "credit": Decimal("-200.50"),
    }
    assert summary.recent_income == Decimal("300.00")
    assert summary.recent_expenses == Decimal("100.00")
    assert summary.recent_change == Decimal("200.00")


def test_balance_history_is_newest_first_and_limited() -> None:
    store = _store(
        [_account("chk", "checking", "100")],
        [
            _tx("1", "100", datetime(2024, 4, 1)),
            _tx("2", "-20", datetime(2024, 5, 3)),
            _tx("3", "-30", datetime(2024, 6, 3)),
            _tx("4", "10", datetime(2024, 6, 4)),
        ],
    )
    use_case = GetAccountBalanceHistoryUseCase(store, logger=MagicMock())

    history = use_case.execute("user-1", "chk", "month", limit=2)

    filters = store.get_transactions.call_args.args[2]
    assert filters.account_ids == ("chk",)
    assert [point.period for point in history] == [
        datetime(2024, 6, 1),
        datetime(2024, 5, 1),
    ]
    assert history[0].balance_change == Decimal("-20.00")
    assert history[0].transaction_count == 2


def test_balance_history_rejects_foreign_account() -> None:
    store = _store([_account("x", "checking", "1", user_id="user-2")], [])
    use_case = GetAccountBalanceHistoryUseCase(store, logger=MagicMock())

    with pytest.raises(AccountNotFoundError):
        use_case.execute("user-1", "x")


def test_single_aggregate_use_cases_propagate_store_failures() -> None:
    store = MagicMock()
    store.get_active_accounts.side_effect = StoreFailure("down")
    use_case = GetAccountSummaryUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    with pytest.raises(StoreFailure):
        use_case.execute("user-1")


def test_net_worth_series_for_every_timeframe() -> None:
    store = _store([_account("chk", "checking", "5000")], [])
    use_case = GetNetWorthSeriesUseCase(
        store,
        logger=MagicMock(),
        clock=lambda: NOW,
        rng=random.Random(4),
    )

    series = use_case.execute_all("user-1")

    assert list(series) == ["7d", "30d", "90d", "1y"]
    assert [len(points) for points in series.values()] == [7, 6, 6, 12]
    assert all(
        points[-1].net_worth == Decimal("5000.00")
        for points in series.values()
    )
    assert store.get_active_accounts.call_count == 1
    assert store.get_net_worth_snapshots.call_count == 4


def test_net_worth_series_without_accounts_skips_snapshots() -> None:
    store = _store([], [])
    use_case = GetNetWorthSeriesUseCase(
        store,
        logger=MagicMock(),
        clock=lambda: NOW,
        rng=random.Random(4),
    )

    points = use_case.execute("user-1", "7d")

    assert len(points) == 7
    store.get_net_worth_snapshots.assert_not_called()


def test_transactions_pass_filters_to_store() -> None:
    store = _store(
        [_account("chk", "checking", "100")],
        [
            _tx("1", "-12.345", datetime(2024, 6, 10), "Food", "Cafe"),
            _tx("2", "-8", datetime(2024, 6, 12), None, "Cafe"),
        ],
    )
    use_case = GetTransactionsUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    rows = use_case.execute(
        "user-1",
        "7d",
        category=" Food ",
        account_id="chk",
        direction="expense",
        search=" caf ",
        limit=25,
    )

    user_id, date_range, filters = store.get_transactions.call_args.args
    assert user_id == "user-1"
    assert date_range == resolve_timeframe("7d", NOW).current
    assert filters == TransactionFilters(
        account_ids=("chk",),
        category="Food",
        direction="expense",
        search="caf",
        limit=25,
    )
    assert [row.transaction_id for row in rows] == ["2", "1"]
    assert rows[0].category == "Other"
    assert rows[0].account_name == "chk"
    assert rows[1].amount == Decimal("-12.35")
    assert rows[1].kind == "expense"


def test_transactions_treat_all_and_unknown_values_as_unfiltered() -> None:
    store = _store([_account("chk", "checking", "100")], [])
    use_case = GetTransactionsUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    use_case.execute(
        "user-1",
        "bogus",
        category="All",
        direction="sideways",
        search="   ",
        limit=0,
    )

    _, date_range, filters = store.get_transactions.call_args.args
    assert date_range == resolve_timeframe("30d", NOW).current
    assert filters == TransactionFilters(limit=50)


def test_transactions_limit_truncates_newest_first() -> None:
    store = _store(
        [_account("chk", "checking", "100")],
        [
            _tx(str(day), "1", datetime(2024, 6, day))
            for day in range(1, 6)
        ],
    )
    use_case = GetTransactionsUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    rows = use_case.execute("user-1", "30d", limit=2)

    assert [row.transaction_id for row in rows] == ["5", "4"]
    assert all(row.kind == "income" for row in rows)


def test_transactions_for_foreign_account_are_empty() -> None:
    store = _store(
        [_account("chk", "checking", "100")],
        [_tx("1", "-20", datetime(2024, 6, 10), "Food", account="other")],
    )
    use_case = GetTransactionsUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    rows = use_case.execute("user-1", "30d", account_id="other")

    assert rows == []


def test_transactions_without_accounts_skip_store_read() -> None:
    store = _store([], [])
    use_case = GetTransactionsUseCase(
        store, logger=MagicMock(), clock=lambda: NOW
    )

    assert use_case.execute("user-1", "30d") == []
    store.get_transactions.assert_not_called()
