"""Domain models for ledger records."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Literal

AmountDirection = Literal["income", "expense"]


@dataclass(frozen=True)
class Account:
    """Account owned by a user.

    Attributes:
        account_id: Account identifier.
        user_id: Owning user identifier.
        name: Display name.
        account_type: One of checking, savings, investment, credit.
        current_balance: Signed balance; credit balances are debt.
        is_active: False once the owner deactivated the account.
    """

    account_id: str
    user_id: str
    name: str
    account_type: str
    current_balance: Decimal
    is_active: bool = True


@dataclass(frozen=True)
class Transaction:
    """Ledger entry; positive amounts are inflows."""

    transaction_id: str
    account_id: str
    amount: Decimal
    occurred_at: datetime
    category: str | None = None
    merchant: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class DateRange:
    """Half-open ``[start, end)`` window."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        """Return True when the moment falls inside the window."""
        return self.start <= moment < self.end


@dataclass(frozen=True)
class TransactionFilters:
    """Optional filters for ledger transaction queries."""

    account_ids: tuple[str, ...] | None = None
    category: str | None = None
    direction: AmountDirection | None = None
    search: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Recorded net worth for one user on one day."""

    snapshot_date: date
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal


__all__ = [
    "AmountDirection",
    "Account",
    "Transaction",
    "DateRange",
    "TransactionFilters",
    "NetWorthSnapshot",
]
