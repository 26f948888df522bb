"""Domain services package."""

from .aggregation import (
    filter_period,
    net_change,
    restrict_to_accounts,
    rollup_by_account,
    rollup_by_calendar_bucket,
    rollup_by_category,
    rollup_by_merchant,
    split_income_expense,
    summarize_spending,
    truncate_to_bucket,
)
from .deltas import percent_change
from .net_worth import (
    compute_net_worth_summary,
    format_point_label,
    net_worth_point_dates,
    project_net_worth,
)
from .normalization import (
    normalize_account_type,
    normalize_label,
    normalize_optional_label,
)
from .timeframe import (
    month_start,
    normalize_timeframe_token,
    resolve_timeframe,
    shift_months,
    shift_years,
)
from .validation import validate_balance_sign

__all__ = [
    "filter_period",
    "net_change",
    "restrict_to_accounts",
    "rollup_by_account",
    "rollup_by_calendar_bucket",
    "rollup_by_category",
    "rollup_by_merchant",
    "split_income_expense",
    "summarize_spending",
    "truncate_to_bucket",
    "percent_change",
    "compute_net_worth_summary",
    "format_point_label",
    "net_worth_point_dates",
    "project_net_worth",
    "normalize_account_type",
    "normalize_label",
    "normalize_optional_label",
    "month_start",
    "normalize_timeframe_token",
    "resolve_timeframe",
    "shift_months",
    "shift_years",
    "validate_balance_sign",
]
