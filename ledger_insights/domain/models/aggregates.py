"""Typed results for grouped ledger computations."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class IncomeExpenseSplit:
    """Income total, expense magnitude and transaction count."""

    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    count: int = 0

    @property
    def net(self) -> Decimal:
        """Return income minus expenses."""
        return self.income - self.expenses


@dataclass(frozen=True)
class CategoryRollupRow:
    """Expense totals for one category."""

    category: str
    total: Decimal
    count: int
    average: Decimal


@dataclass(frozen=True)
class MerchantRollupRow:
    """Expense totals for one merchant."""

    merchant: str
    total: Decimal
    count: int
    average: Decimal


@dataclass(frozen=True)
class AccountRollupRow:
    """Net change for one account."""

    account_id: str
    net_change: Decimal
    count: int


@dataclass(frozen=True)
class CalendarBucketRow:
    """Totals for one truncated calendar bucket."""

    bucket: datetime
    income: Decimal
    expenses: Decimal
    count: int

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class SpendingInsights:
    """Summary statistics over a set of transactions."""

    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    total_transactions: int = 0
    unique_categories: int = 0
    average_expense: Decimal = Decimal("0")
    largest_expense: Decimal = Decimal("0")
    top_merchants: list[MerchantRollupRow] = field(default_factory=list)

    @property
    def net_income(self) -> Decimal:
        return self.total_income - self.total_expenses


__all__ = [
    "IncomeExpenseSplit",
    "CategoryRollupRow",
    "MerchantRollupRow",
    "AccountRollupRow",
    "CalendarBucketRow",
    "SpendingInsights",
]
