"""Tests for timeframe resolution."""

from datetime import date, datetime, timedelta

from ledger_insights.domain.services.timeframe import (
    month_start,
    normalize_timeframe_token,
    resolve_timeframe,
    shift_months,
    shift_years,
)

NOW = datetime(2024, 6, 15, 12, 30)


def test_unknown_token_resolves_like_default() -> None:
    """Unrecognized tokens behave exactly like 30d."""
    assert resolve_timeframe("banana", NOW) == resolve_timeframe("30d", NOW)
    assert resolve_timeframe(None, NOW).token == "30d"
    assert resolve_timeframe("", NOW).token == "30d"


def test_normalize_accepts_case_and_whitespace() -> None:
    assert normalize_timeframe_token(" 7D ") == "7d"
    assert normalize_timeframe_token("1Y") == "1y"
    assert normalize_timeframe_token("365d") == "30d"


def test_day_windows_are_adjacent_and_equal_length() -> None:
    for token, days in (("7d", 7), ("30d", 30), ("90d", 90)):
        window = resolve_timeframe(token, NOW)

        assert window.token == token
        assert window.end == NOW
        assert window.start == NOW - timedelta(days=days)
        assert window.comparison_end == window.start
        assert window.comparison_start == window.start - timedelta(days=days)


def test_year_window_uses_calendar_year() -> None:
    window = resolve_timeframe("1y", NOW)

    assert window.start == datetime(2023, 6, 15, 12, 30)
    assert window.comparison_end == window.start
    assert window.end - window.start == window.comparison_end - (
        window.comparison_start
    )


def test_year_window_clamps_leap_day() -> None:
    window = resolve_timeframe("1y", datetime(2024, 2, 29, 9))

    assert window.start == datetime(2023, 2, 28, 9)


def test_window_properties_are_half_open_ranges() -> None:
    window = resolve_timeframe("7d", NOW)

    assert window.current.contains(window.start)
    assert not window.current.contains(NOW)
    assert window.comparison.contains(window.comparison_start)
    assert not window.comparison.contains(window.start)


def test_injected_now_makes_resolution_deterministic() -> None:
    assert resolve_timeframe("90d", NOW) == resolve_timeframe("90d", NOW)


def test_shift_months_clamps_day() -> None:
    assert shift_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
    assert shift_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert shift_months(date(2024, 1, 15), -13) == date(2022, 12, 15)
    assert shift_years(date(2024, 2, 29), 1) == date(2025, 2, 28)


def test_month_start() -> None:
    assert month_start(NOW) == date(2024, 6, 1)
