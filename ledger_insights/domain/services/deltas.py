"""Period-over-period change helpers."""

from decimal import Decimal

from ledger_insights.utils.decimal_utils import coerce_decimal


def percent_change(current, previous) -> Decimal:
    """Return the percentage change from ``previous`` to ``current``.

    Args:
        current: Value for the current period.
        previous: Value for the comparison period.

    Returns:
        Decimal: ``(current - previous) / previous * 100`` unrounded, or
        zero when ``previous`` is zero or missing.
    """
    baseline = coerce_decimal(previous)
    if baseline == 0:
        return Decimal("0")
    return (coerce_decimal(current) - baseline) / baseline * Decimal("100")


__all__ = ["percent_change"]
