"""Domain constants for ledger analytics."""

from decimal import Decimal

ASSET_ACCOUNT_TYPES = ("checking", "savings", "investment")
LIABILITY_ACCOUNT_TYPES = ("credit",)
ACCOUNT_TYPES = ASSET_ACCOUNT_TYPES + LIABILITY_ACCOUNT_TYPES
INVESTMENT_ACCOUNT_TYPE = "investment"

DEFAULT_TIMEFRAME = "30d"
TIMEFRAME_DAYS = {
    "7d": 7,
    "30d": 30,
    "90d": 90,
}
YEAR_TIMEFRAME = "1y"
TIMEFRAME_TOKENS = ("7d", "30d", "90d", "1y")

OTHER_LABEL = "Other"

CATEGORY_PALETTE = (
    "#4F46E5",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#8B5CF6",
    "#6B7280",
)
TOP_CATEGORY_LIMIT = 6
TOP_MERCHANT_LIMIT = 10
RECENT_TRANSACTION_LIMIT = 10
TRANSACTION_PAGE_LIMIT = 50
TREND_MONTHS = 6

# (point count, stride unit, stride size) per timeframe token.
NET_WORTH_RESOLUTION = {
    "7d": (7, "day", 1),
    "30d": (6, "day", 5),
    "90d": (6, "day", 15),
    "1y": (12, "month", 1),
}
NET_WORTH_FLOOR = Decimal("1000")
NET_WORTH_BASELINE = Decimal("25000")
ACCOUNT_GROWTH_RANGE = (0.02, 0.05)
BASELINE_GROWTH_RANGE = (0.02, 0.03)
LIABILITY_DAMPING = Decimal("0.8")

CALENDAR_GRANULARITIES = ("day", "month", "year")
DEFAULT_GRANULARITY = "month"


__all__ = [
    "ASSET_ACCOUNT_TYPES",
    "LIABILITY_ACCOUNT_TYPES",
    "ACCOUNT_TYPES",
    "INVESTMENT_ACCOUNT_TYPE",
    "DEFAULT_TIMEFRAME",
    "TIMEFRAME_DAYS",
    "YEAR_TIMEFRAME",
    "TIMEFRAME_TOKENS",
    "OTHER_LABEL",
    "CATEGORY_PALETTE",
    "TOP_CATEGORY_LIMIT",
    "TOP_MERCHANT_LIMIT",
    "RECENT_TRANSACTION_LIMIT",
    "TRANSACTION_PAGE_LIMIT",
    "TREND_MONTHS",
    "NET_WORTH_RESOLUTION",
    "NET_WORTH_FLOOR",
    "NET_WORTH_BASELINE",
    "ACCOUNT_GROWTH_RANGE",
    "BASELINE_GROWTH_RANGE",
    "LIABILITY_DAMPING",
    "CALENDAR_GRANULARITIES",
    "DEFAULT_GRANULARITY",
]
