"""Application use cases package."""

from .get_account_balance_history import GetAccountBalanceHistoryUseCase
from .get_account_summary import GetAccountSummaryUseCase
from .get_category_spending import GetCategorySpendingUseCase
from .get_dashboard_report import GetDashboardReportUseCase
from .get_net_worth_series import GetNetWorthSeriesUseCase
from .get_spending_insights import GetSpendingInsightsUseCase
from .get_spending_trends import GetSpendingTrendsUseCase
from .get_transactions import GetTransactionsUseCase

__all__ = [
    "GetAccountBalanceHistoryUseCase",
    "GetAccountSummaryUseCase",
    "GetCategorySpendingUseCase",
    "GetDashboardReportUseCase",
    "GetNetWorthSeriesUseCase",
    "GetSpendingInsightsUseCase",
    "GetSpendingTrendsUseCase",
    "GetTransactionsUseCase",
]
