"""Timeframe resolution and calendar arithmetic."""

import calendar
from datetime import date, datetime, timedelta

from ledger_insights.domain.constants import (
    DEFAULT_TIMEFRAME,
    TIMEFRAME_DAYS,
    YEAR_TIMEFRAME,
)
from ledger_insights.domain.models import Timeframe


def normalize_timeframe_token(token: str | None) -> str:
    """Return a supported timeframe token.

    Unknown or empty tokens fall back to the 30-day default.

    Args:
        token: Raw token from the caller.

    Returns:
        str: One of 7d, 30d, 90d or 1y.
    """
    if not token:
        return DEFAULT_TIMEFRAME
    cleaned = token.strip().lower()
    if cleaned in TIMEFRAME_DAYS or cleaned == YEAR_TIMEFRAME:
        return cleaned
    return DEFAULT_TIMEFRAME


def resolve_timeframe(token: str | None, now: datetime) -> Timeframe:
    """Resolve a timeframe token into current and comparison windows.

    Args:
        token: Timeframe token (7d, 30d, 90d, 1y); anything else means 30d.
        now: Instant treated as the exclusive end of the current period.

    Returns:
        Timeframe: Current window and the preceding window of equal length.
    """
    normalized = normalize_timeframe_token(token)
    if normalized == YEAR_TIMEFRAME:
        start = shift_years(now, -1)
    else:
        start = now - timedelta(days=TIMEFRAME_DAYS[normalized])
    span = now - start
    return Timeframe(
        token=normalized,
        start=start,
        end=now,
        comparison_start=start - span,
        comparison_end=start,
    )


def shift_months(moment, months: int):
    """Move a date or datetime by whole months, clamping the day.

    Args:
        moment: Date or datetime to shift.
        months: Number of months (negative moves backward).

    Returns:
        Same type as ``moment``.
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def shift_years(moment, years: int):
    """Move a date or datetime by whole years (Feb 29 clamps to Feb 28)."""
    return shift_months(moment, years * 12)


def month_start(moment) -> date:
    """Return the first day of the month containing ``moment``."""
    return date(moment.year, moment.month, 1)


__all__ = [
    "normalize_timeframe_token",
    "resolve_timeframe",
    "shift_months",
    "shift_years",
    "month_start",
]
