"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from ledger_insights.domain.constants import ASSET_ACCOUNT_TYPES


def validate_balance_sign(
    account_type: str,
    balance: Decimal,
    logger: Logger,
    asset_types: Iterable[str] = ASSET_ACCOUNT_TYPES,
) -> None:
    """Warn when an asset account carries a negative balance.

    Credit balances are read as magnitude-of-debt whatever their sign, so
    only asset accounts are checked.

    Args:
        account_type: Normalized account type.
        balance: Current balance.
        logger: Logger used for warnings.
        asset_types: Account types treated as assets.
    """
    if account_type in asset_types and balance < 0:
        logger.warning(
            f"Asset balance is negative for account_type={account_type}: {balance}"
        )


__all__ = ["validate_balance_sign"]
