"""Domain error types."""


class LedgerInsightsError(Exception):
    """Base class for ledger analytics errors."""


class StoreFailure(LedgerInsightsError):
    """A ledger store query failed or exceeded its deadline."""


class AccountNotFoundError(LedgerInsightsError):
    """The account is missing, inactive, or owned by another user."""


__all__ = [
    "LedgerInsightsError",
    "StoreFailure",
    "AccountNotFoundError",
]
