"""CLI adapter printing the dashboard report for one user."""

import os

from ledger_insights.domain.models import DashboardReport
from ledger_insights.infrastructure.container import (
    build_dashboard_report_use_case,
)
from ledger_insights.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from ledger_insights.infrastructure.settings import LedgerSettings


def format_report(report: DashboardReport) -> list[str]:
    """Render a report as printable lines.

    Args:
        report: Report returned by ``GetDashboardReportUseCase``.

    Returns:
        list[str]: Lines in display order.
    """
    summary = report.summary
    lines = [
        f"Dashboard (timeframe={report.timeframe}, "
        f"generated_at={report.generated_at:%Y-%m-%d %H:%M})",
        f"Total balance: {summary.total_balance} "
        f"(change {summary.balance_change})",
        f"Income: {summary.income} ({summary.income_change}%)",
        f"Expenses: {summary.expenses} ({summary.expenses_change}%)",
        f"Net growth: {summary.net_growth}",
        f"Investment returns: {summary.investment_returns} "
        f"({summary.investment_change}%)",
    ]
    if report.accounts:
        lines.append("Accounts:")
        lines.extend(
            f"  {account.name} [{account.account_type}]: {account.balance} "
            f"({account.change_percent}%)"
            for account in report.accounts
        )
    if report.spending_by_category:
        lines.append("Top categories:")
        lines.extend(
            f"  {item.name}: {item.value}"
            for item in report.spending_by_category
        )
    if report.net_worth_series:
        lines.append("Net worth:")
        lines.extend(
            f"  {point.label}: {point.net_worth}"
            for point in report.net_worth_series
        )
    if report.failed_sections:
        lines.append(
            "Unavailable sections: " + ", ".join(report.failed_sections)
        )
    return lines


def main() -> None:
    """Build and print the dashboard report for the configured user."""
    logger = get_app_logger()
    usage_logger = get_usage_logger()
    settings = LedgerSettings.from_env()
    if not settings.dashboard_user_id:
        logger.warning("DASHBOARD_USER_ID is required to build the report.")
        return

    timeframe = os.getenv("DASHBOARD_TIMEFRAME") or settings.default_timeframe
    use_case = build_dashboard_report_use_case(settings=settings)
    report = use_case.execute(settings.dashboard_user_id, timeframe)
    usage_logger.info(f"dashboard_cli timeframe={report.timeframe}")

    for line in format_report(report):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
