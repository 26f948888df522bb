"""Domain package for business rules and core models."""

from .constants import (
    ASSET_ACCOUNT_TYPES,
    DEFAULT_TIMEFRAME,
    LIABILITY_ACCOUNT_TYPES,
    OTHER_LABEL,
)
from .errors import AccountNotFoundError, LedgerInsightsError, StoreFailure
from .models import (
    Account,
    DashboardReport,
    DateRange,
    NetWorthPoint,
    Timeframe,
    Transaction,
)
from .services import (
    percent_change,
    project_net_worth,
    resolve_timeframe,
)

__all__ = [
    "ASSET_ACCOUNT_TYPES",
    "DEFAULT_TIMEFRAME",
    "LIABILITY_ACCOUNT_TYPES",
    "OTHER_LABEL",
    "AccountNotFoundError",
    "LedgerInsightsError",
    "StoreFailure",
    "Account",
    "DashboardReport",
    "DateRange",
    "NetWorthPoint",
    "Timeframe",
    "Transaction",
    "percent_change",
    "project_net_worth",
    "resolve_timeframe",
]
