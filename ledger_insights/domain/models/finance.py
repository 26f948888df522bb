"""Domain models for net worth and dashboard reports."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset balances.
        liability_total: Magnitude of liability balances.
        net_worth: Assets minus liabilities.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class NetWorthPoint:
    """One sample of a net worth series."""

    label: str
    point_date: date
    net_worth: Decimal
    assets: Decimal
    liabilities: Decimal
    synthetic: bool = True


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures for the dashboard cards."""

    total_balance: Decimal = Decimal("0")
    balance_change: Decimal = Decimal("0")
    income: Decimal = Decimal("0")
    income_change: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    expenses_change: Decimal = Decimal("0")
    net_growth: Decimal = Decimal("0")
    investment_returns: Decimal = Decimal("0")
    investment_change: Decimal = Decimal("0")


@dataclass(frozen=True)
class AccountActivity:
    """Balance and period activity for one account."""

    account_id: str
    name: str
    account_type: str
    balance: Decimal
    change: Decimal
    previous_change: Decimal
    change_percent: Decimal


@dataclass(frozen=True)
class RecentTransaction:
    """Transaction prepared for display."""

    transaction_id: str
    description: str | None
    category: str
    amount: Decimal
    occurred_at: datetime
    kind: str
    merchant: str | None
    account_name: str | None


@dataclass(frozen=True)
class CategorySlice:
    """Spending category with its chart color."""

    name: str
    value: Decimal
    color: str


@dataclass(frozen=True)
class CategoryShare:
    """Spending category with its share of total spending."""

    category: str
    total: Decimal
    count: int
    average: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class CategorySpending:
    """Full category breakdown for a timeframe."""

    timeframe: str
    total_spending: Decimal
    categories: list[CategoryShare]


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Income and expenses for one calendar month."""

    month: date
    label: str
    income: Decimal
    expenses: Decimal
    net: Decimal
    transaction_count: int


@dataclass(frozen=True)
class BalanceHistoryPoint:
    """Net balance change for one calendar bucket of an account."""

    period: datetime
    balance_change: Decimal
    transaction_count: int


@dataclass(frozen=True)
class AccountSummary:
    """Balances grouped by account type with recent activity."""

    total_accounts: int
    total_balance: Decimal
    balances_by_type: dict[str, Decimal]
    recent_income: Decimal
    recent_expenses: Decimal
    recent_change: Decimal


@dataclass(frozen=True)
class DashboardReport:
    """Composite dashboard report consumed by presentation layers."""

    timeframe: str
    generated_at: datetime
    summary: DashboardSummary
    accounts: list[AccountActivity] = field(default_factory=list)
    recent_transactions: list[RecentTransaction] = field(default_factory=list)
    spending_by_category: list[CategorySlice] = field(default_factory=list)
    monthly_trend: list[MonthlyTrendPoint] = field(default_factory=list)
    net_worth_series: list[NetWorthPoint] = field(default_factory=list)
    failed_sections: list[str] = field(default_factory=list)


__all__ = [
    "NetWorthSummary",
    "NetWorthPoint",
    "DashboardSummary",
    "AccountActivity",
    "RecentTransaction",
    "CategorySlice",
    "CategoryShare",
    "CategorySpending",
    "MonthlyTrendPoint",
    "BalanceHistoryPoint",
    "AccountSummary",
    "DashboardReport",
]
