"""Monthly income/expense trend presentation for the Streamlit UI.

Pure transformations from ``MonthlyTrendPoint`` rows to a chart model and a
Plotly figure. No IO happens here.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ledger_insights.domain.models import MonthlyTrendPoint

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


INCOME_COLOR = "#10B981"
EXPENSE_COLOR = "#EF4444"
NET_COLOR = "#4F46E5"


@dataclass(frozen=True)
class TrendChartModel:
    """Plot-ready series for the monthly trend chart."""

    labels: list[str]
    income: list[float]
    expenses: list[float]
    net: list[float]


def build_trend_model(trend: Sequence[MonthlyTrendPoint]) -> TrendChartModel:
    """Convert trend points into plain lists, oldest month first."""
    ordered = sorted(trend, key=lambda point: point.month)
    return TrendChartModel(
        labels=[point.label for point in ordered],
        income=[float(point.income) for point in ordered],
        expenses=[float(point.expenses) for point in ordered],
        net=[float(point.net) for point in ordered],
    )


def build_trend_figure(model: TrendChartModel) -> "go.Figure":
    """Build a grouped bar chart with a net line.

    Args:
        model: Precomputed trend model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Bar(
                name="Income",
                x=model.labels,
                y=model.income,
                marker_color=INCOME_COLOR,
            ),
            go.Bar(
                name="Expenses",
                x=model.labels,
                y=model.expenses,
                marker_color=EXPENSE_COLOR,
            ),
            go.Scatter(
                name="Net",
                x=model.labels,
                y=model.net,
                mode="lines+markers",
                line=dict(color=NET_COLOR, width=2),
            ),
        ]
    )
    fig.update_layout(
        barmode="group",
        margin=dict(l=8, r=8, t=8, b=8),
        height=360,
        legend=dict(orientation="h"),
    )
    return fig


__all__ = [
    "TrendChartModel",
    "build_trend_model",
    "build_trend_figure",
]
