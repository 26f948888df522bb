"""Tests for the monthly trend chart helpers."""

from datetime import date
from decimal import Decimal

from ledger_insights.adapters.interface.streamlit import trend_chart
from ledger_insights.domain.models import MonthlyTrendPoint


def _point(month, income, expenses):
    return MonthlyTrendPoint(
        month=month,
        label=month.strftime("%b"),
        income=Decimal(income),
        expenses=Decimal(expenses),
        net=Decimal(income) - Decimal(expenses),
        transaction_count=3,
    )


def test_build_trend_model_orders_months() -> None:
    model = trend_chart.build_trend_model(
        [
            _point(date(2024, 6, 1), "100", "40"),
            _point(date(2024, 4, 1), "10", "20"),
        ]
    )

    assert model.labels == ["Apr", "Jun"]
    assert model.income == [10.0, 100.0]
    assert model.expenses == [20.0, 40.0]
    assert model.net == [-10.0, 60.0]


def test_build_trend_figure_has_bars_and_net_line() -> None:
    model = trend_chart.build_trend_model([_point(date(2024, 6, 1), "5", "2")])

    fig = trend_chart.build_trend_figure(model)

    assert [trace.type for trace in fig.data] == ["bar", "bar", "scatter"]
    assert [trace.name for trace in fig.data] == ["Income", "Expenses", "Net"]
    assert list(fig.data[2].y) == [3.0]
    assert fig.layout.barmode == "group"
