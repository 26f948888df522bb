"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from ledger_insights.adapters.interface.streamlit.trend_chart import (
    build_trend_figure,
    build_trend_model,
)
from ledger_insights.domain.constants import TIMEFRAME_TOKENS
from ledger_insights.domain.models import (
    AccountActivity,
    CategorySlice,
    DashboardReport,
    NetWorthPoint,
    RecentTransaction,
)
from ledger_insights.infrastructure.container import (
    build_dashboard_report_use_case,
)
from ledger_insights.infrastructure.settings import LedgerSettings

TIMEFRAME_LABELS = {
    "7d": "Last 7 days",
    "30d": "Last 30 days",
    "90d": "Last 90 days",
    "1y": "Last year",
}


def _fetch_dashboard_report(
    user_id: str,
    timeframe: str,
) -> DashboardReport:
    """Build the dashboard report from the ledger database."""
    use_case = build_dashboard_report_use_case()
    return use_case.execute(user_id, timeframe)


@st.cache_data(show_spinner=False, ttl=300)
def _load_dashboard_report(
    user_id: str,
    timeframe: str,
    schema_version: int = 1,
) -> DashboardReport:
    """Cached wrapper around _fetch_dashboard_report."""
    _ = schema_version
    return _fetch_dashboard_report(user_id, timeframe)


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _format_percent(value: Decimal) -> str:
    """Format percent changes for st.metric deltas."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def _category_chart_data(
    categories: Sequence[CategorySlice],
) -> list[dict[str, str | float]]:
    """Prepare donut chart rows with share labels."""
    total = sum((item.value for item in categories), start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for item in categories:
        share = (item.value / total) * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": item.name,
                "amount": float(item.value),
                "color": item.color,
                "amount_label": _format_currency(item.value),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _net_worth_chart_data(
    series: Sequence[NetWorthPoint],
) -> list[dict[str, str | float | int]]:
    """Prepare line chart rows, keeping the series order."""
    return [
        {
            "order": index,
            "label": point.label,
            "date": point.point_date.isoformat(),
            "net_worth": float(point.net_worth),
            "assets": float(point.assets),
            "liabilities": float(point.liabilities),
            "kind": "estimated" if point.synthetic else "recorded",
        }
        for index, point in enumerate(series)
    ]


def _account_rows(accounts: Sequence[AccountActivity]) -> list[dict]:
    """Build table rows for the accounts section."""
    return [
        {
            "Name": account.name,
            "Type": account.account_type,
            "Balance": _format_currency(account.balance),
            "Change": _format_currency(account.change),
            "Change %": _format_percent(account.change_percent),
        }
        for account in accounts
    ]


def _transaction_rows(
    transactions: Sequence[RecentTransaction],
) -> list[dict]:
    """Build table rows for recent transactions."""
    return [
        {
            "Date": tx.occurred_at.strftime("%Y-%m-%d"),
            "Description": tx.description or tx.merchant or "",
            "Category": tx.category,
            "Account": tx.account_name or "",
            "Amount": _format_currency(tx.amount),
        }
        for tx in transactions
    ]


def _render_summary(report: DashboardReport) -> None:
    """Render the headline metrics."""
    summary = report.summary
    balance_col, income_col, expenses_col, investments_col = st.columns(4)
    balance_col.metric(
        "Total Balance",
        _format_currency(summary.total_balance),
        _format_currency(summary.balance_change),
    )
    income_col.metric(
        "Income",
        _format_currency(summary.income),
        _format_percent(summary.income_change),
    )
    expenses_col.metric(
        "Expenses",
        _format_currency(summary.expenses),
        _format_percent(summary.expenses_change),
        delta_color="inverse",
    )
    investments_col.metric(
        "Investment Returns",
        _format_currency(summary.investment_returns),
        _format_percent(summary.investment_change),
    )


def _render_category_chart(
    categories: Sequence[CategorySlice],
    chart_size: int = 320,
) -> None:
    """Render a donut chart of spending by category."""
    st.subheader("Spending by Category")
    if not categories:
        st.info("No spending in this timeframe.")
        return
    data = _category_chart_data(categories)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, width="stretch")


def _render_net_worth_chart(series: Sequence[NetWorthPoint]) -> None:
    """Render the net worth line chart."""
    st.subheader("Net Worth")
    if not series:
        st.info("Net worth is unavailable right now.")
        return
    data = _net_worth_chart_data(series)
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X(
            "label:N",
            sort=alt.SortField("order", order="ascending"),
            title=None,
        ),
        y=alt.Y("net_worth:Q", title=None),
        tooltip=[
            alt.Tooltip("date:N"),
            alt.Tooltip("net_worth:Q", format=",.2f"),
            alt.Tooltip("assets:Q", format=",.2f"),
            alt.Tooltip("liabilities:Q", format=",.2f"),
            alt.Tooltip("kind:N"),
        ],
    ).properties(height=320)
    st.altair_chart(chart, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Insights", layout="wide")
    st.title("Ledger Insights")

    settings = LedgerSettings.from_env()
    if not settings.dashboard_user_id:
        st.warning("Set DASHBOARD_USER_ID to render the dashboard.")
        return

    options = list(TIMEFRAME_TOKENS)
    timeframe = st.sidebar.selectbox(
        "Timeframe",
        options,
        index=options.index(settings.default_timeframe),
        format_func=lambda token: TIMEFRAME_LABELS.get(token, token),
    )
    report = _load_dashboard_report(
        settings.dashboard_user_id,
        timeframe,
        schema_version=1,
    )
    if report.failed_sections:
        st.warning(
            "Some figures are unavailable: "
            + ", ".join(report.failed_sections)
        )

    _render_summary(report)

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_category_chart(report.spending_by_category)
    with chart_right:
        _render_net_worth_chart(report.net_worth_series)

    st.subheader("Monthly Trend")
    if report.monthly_trend:
        figure = build_trend_figure(build_trend_model(report.monthly_trend))
        st.plotly_chart(figure, width="stretch")
    else:
        st.info("No activity in the last months.")

    accounts_col, transactions_col = st.columns(2)
    with accounts_col:
        st.subheader("Accounts")
        st.dataframe(
            _account_rows(report.accounts),
            width="stretch",
            hide_index=True,
        )
    with transactions_col:
        st.subheader("Recent Transactions")
        st.dataframe(
            _transaction_rows(report.recent_transactions),
            width="stretch",
            hide_index=True,
        )


if __name__ == "__main__":  # pragma: no cover
    main()
