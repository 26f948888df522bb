"""Domain models package."""

from .aggregates import (
    AccountRollupRow,
    CalendarBucketRow,
    CategoryRollupRow,
    IncomeExpenseSplit,
    MerchantRollupRow,
    SpendingInsights,
)
from .finance import (
    AccountActivity,
    AccountSummary,
    BalanceHistoryPoint,
    CategoryShare,
    CategorySlice,
    CategorySpending,
    DashboardReport,
    DashboardSummary,
    MonthlyTrendPoint,
    NetWorthPoint,
    NetWorthSummary,
    RecentTransaction,
)
from .ledger import (
    Account,
    AmountDirection,
    DateRange,
    NetWorthSnapshot,
    Transaction,
    TransactionFilters,
)
from .timeframe import Timeframe

__all__ = [
    "Account",
    "AmountDirection",
    "DateRange",
    "NetWorthSnapshot",
    "Transaction",
    "TransactionFilters",
    "Timeframe",
    "IncomeExpenseSplit",
    "CategoryRollupRow",
    "MerchantRollupRow",
    "AccountRollupRow",
    "CalendarBucketRow",
    "SpendingInsights",
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
