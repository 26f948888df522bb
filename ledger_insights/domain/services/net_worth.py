"""Net worth totals and the net worth series projection."""

import random
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from decimal import Decimal
from logging import Logger

from ledger_insights.domain.constants import (
    ACCOUNT_GROWTH_RANGE,
    ASSET_ACCOUNT_TYPES,
    BASELINE_GROWTH_RANGE,
    LIABILITY_ACCOUNT_TYPES,
    LIABILITY_DAMPING,
    NET_WORTH_BASELINE,
    NET_WORTH_FLOOR,
    NET_WORTH_RESOLUTION,
)
from ledger_insights.domain.models import (
    Account,
    NetWorthPoint,
    NetWorthSnapshot,
    NetWorthSummary,
)
from ledger_insights.domain.services.normalization import (
    normalize_account_type,
)
from ledger_insights.domain.services.timeframe import (
    normalize_timeframe_token,
    shift_months,
)
from ledger_insights.domain.services.validation import validate_balance_sign
from ledger_insights.utils.decimal_utils import coerce_decimal, round_money

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_ONE = Decimal("1")


def compute_net_worth_summary(
    accounts: Iterable[Account],
    *,
    logger: Logger,
    asset_types: Iterable[str] = ASSET_ACCOUNT_TYPES,
    liability_types: Iterable[str] = LIABILITY_ACCOUNT_TYPES,
) -> NetWorthSummary:
    """Compute current net worth from account balances.

    Args:
        accounts: Accounts of a single user.
        logger: Logger used for warnings.
        asset_types: Account types treated as assets.
        liability_types: Account types treated as liabilities.

    Returns:
        NetWorthSummary: Asset total, liability magnitude and net worth.
    """
    asset_types = tuple(asset_types)
    liability_types = tuple(liability_types)
    asset_total = Decimal("0")
    liability_balance = Decimal("0")

    for account in accounts:
        if not account.is_active:
            continue
        account_type = normalize_account_type(account.account_type)
        balance = coerce_decimal(account.current_balance)
        validate_balance_sign(account_type, balance, logger, asset_types)
        if account_type in asset_types:
            asset_total += balance
        elif account_type in liability_types:
            liability_balance += balance

    liability_total = abs(liability_balance)
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
    )


def project_net_worth(
    accounts: Iterable[Account],
    timeframe: str | None,
    now: datetime,
    *,
    logger: Logger,
    rng: random.Random | None = None,
    snapshots: Iterable[NetWorthSnapshot] = (),
) -> list[NetWorthPoint]:
    """Build the net worth series for a timeframe, oldest point first.

    The most recent point carries the live totals. Older points use a
    recorded snapshot for their date when one exists; otherwise they are
    modeled by discounting the live totals with a growth factor of
    ``1 + r * periods_ago``, ``r`` drawn per point. Users without accounts
    get a compounding curve from a fixed baseline instead.

    Args:
        accounts: Active accounts of the user.
        timeframe: Timeframe token; unknown tokens mean 30d.
        now: Instant of the most recent point.
        logger: Logger used for warnings and traces.
        rng: Random source for the growth rates.
        snapshots: Recorded daily net worth values.

    Returns:
        list[NetWorthPoint]: Fixed-length series in ascending date order.
    """
    token = normalize_timeframe_token(timeframe)
    rng = rng or random.Random()
    accounts = [account for account in accounts if account.is_active]
    dates = net_worth_point_dates(token, now.date())
    point_count = len(dates)

    if not accounts:
        logger.info(
            f"No accounts available; using baseline net worth curve for {token}"
        )
        return _baseline_series(token, dates, rng)

    summary = compute_net_worth_summary(accounts, logger=logger)
    recorded = {snapshot.snapshot_date: snapshot for snapshot in snapshots}
    low, high = ACCOUNT_GROWTH_RANGE
    points = []
    for index, point_date in enumerate(dates):
        periods_ago = point_count - 1 - index
        rate = Decimal(str(rng.uniform(low, high)))
        snapshot = recorded.get(point_date) if periods_ago else None
        if snapshot is not None:
            points.append(
                _point(
                    token,
                    point_date,
                    net_worth=snapshot.net_worth,
                    assets=snapshot.total_assets,
                    liabilities=abs(snapshot.total_liabilities),
                    synthetic=False,
                )
            )
            continue
        factor = _ONE + rate * periods_ago
        points.append(
            _point(
                token,
                point_date,
                net_worth=max(summary.net_worth / factor, NET_WORTH_FLOOR),
                assets=max(summary.asset_total / factor, NET_WORTH_FLOOR),
                liabilities=summary.liability_total
                / max(factor * LIABILITY_DAMPING, _ONE),
                synthetic=periods_ago > 0,
            )
        )
    return points


def net_worth_point_dates(timeframe: str | None, today: date) -> list[date]:
    """Return the dates of a timeframe's net worth points, oldest first."""
    token = normalize_timeframe_token(timeframe)
    point_count, unit, stride = NET_WORTH_RESOLUTION[token]
    return [
        _point_date(today, unit, stride * periods_ago)
        for periods_ago in range(point_count - 1, -1, -1)
    ]


def format_point_label(token: str, point_date: date) -> str:
    """Return the chart label for a point date.

    Args:
        token: Normalized timeframe token.
        point_date: Date of the point.

    Returns:
        str: Weekday for 7d, ``"Mon D"`` for 30d/90d, month for 1y.
    """
    if token == "7d":
        return _WEEKDAYS[point_date.weekday()]
    if token == "1y":
        return _MONTHS[point_date.month - 1]
    return f"{_MONTHS[point_date.month - 1]} {point_date.day}"


def _baseline_series(
    token: str,
    dates: list[date],
    rng: random.Random,
) -> list[NetWorthPoint]:
    low, high = BASELINE_GROWTH_RANGE
    value = NET_WORTH_BASELINE
    points = []
    for index, point_date in enumerate(dates):
        if index:
            value = value * (_ONE + Decimal(str(rng.uniform(low, high))))
        points.append(
            _point(
                token,
                point_date,
                net_worth=value,
                assets=value,
                liabilities=Decimal("0"),
                synthetic=True,
            )
        )
    return points


def _point_date(today: date, unit: str, amount: int) -> date:
    if unit == "month":
        return shift_months(today, -amount)
    return today - timedelta(days=amount)


def _point(
    token: str,
    point_date: date,
    *,
    net_worth: Decimal,
    assets: Decimal,
    liabilities: Decimal,
    synthetic: bool,
) -> NetWorthPoint:
    return NetWorthPoint(
        label=format_point_label(token, point_date),
        point_date=point_date,
        net_worth=round_money(net_worth),
        assets=round_money(assets),
        liabilities=round_money(liabilities),
        synthetic=synthetic,
    )


__all__ = [
    "compute_net_worth_summary",
    "project_net_worth",
    "net_worth_point_dates",
    "format_point_label",
]
