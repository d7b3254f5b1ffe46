"""Presentation helpers for summaries, forecasts and import results.

Two output forms are provided: ``rich`` tables for the terminal and pydantic
DTOs (see :mod:`finance_tracker.models`) for JSON output. The core modules
never print; the shell and CLI call into this module.
"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from .ingest.csv_import import CsvSource, describe_source
from .models import (
    Forecast,
    ForecastReport,
    ImportReport,
    ImportResult,
    Period,
    SkipEntry,
    Summary,
    SummaryReport,
)


def fmt_amount(value: float) -> str:
    return f"{value:.2f}"


def _period_title(period: Period, period_value: str) -> str:
    if period is Period.ALL:
        return "Summary (all time)"
    return f"Summary ({period.value} {period_value})"


def summary_table(summary: Summary, period: Period | str, period_value: str = "") -> Table:
    period = Period(period)
    table = Table(title=_period_title(period, period_value), min_width=40)
    table.add_column("Item")
    table.add_column("Amount", justify="right")
    table.add_row("Income", fmt_amount(summary.total_income))
    table.add_row("Expenses", fmt_amount(summary.total_expense))
    table.add_row("Net Balance", fmt_amount(summary.net_balance), end_section=True)
    # Category totals carry no order of their own; sort for stable display.
    for category in sorted(summary.category_totals):
        table.add_row(f"  {escape(category)}", fmt_amount(summary.category_totals[category]))
    return table


def forecast_table(forecast: Forecast) -> Table:
    months = len(forecast.predicted_expenses)
    table = Table(title=f"Predictions for the next {months} month(s)")
    table.add_column("Month", justify="right")
    table.add_column("Predicted Expenses", justify="right")
    table.add_column("Predicted Net Balance", justify="right")
    for i, (expense, net) in enumerate(
        zip(forecast.predicted_expenses, forecast.predicted_net_balance, strict=True), start=1
    ):
        table.add_row(str(i), fmt_amount(expense), fmt_amount(net))
    return table


def skip_lines(result: ImportResult) -> list[str]:
    return [skip.message for skip in result.skipped]


def import_report(result: ImportResult, source: CsvSource) -> ImportReport:
    return ImportReport(
        source=describe_source(source),
        imported=result.imported_count,
        skipped=[
            SkipEntry(
                row_number=s.row_number,
                reason=s.reason,
                fields=list(s.fields),
                message=s.message,
            )
            for s in result.skipped
        ],
    )


def summary_report(summary: Summary, period: Period | str, period_value: str = "") -> SummaryReport:
    period = Period(period)
    return SummaryReport(
        period=period,
        period_value="" if period is Period.ALL else period_value,
        total_income=float(summary.total_income),
        total_expense=float(summary.total_expense),
        net_balance=float(summary.net_balance),
        category_totals={k: float(v) for k, v in sorted(summary.category_totals.items())},
    )


def forecast_report(forecast: Forecast) -> ForecastReport:
    return ForecastReport(
        months=len(forecast.predicted_expenses),
        predicted_expenses=[float(v) for v in forecast.predicted_expenses],
        predicted_net_balance=[float(v) for v in forecast.predicted_net_balance],
    )


__all__ = [
    "fmt_amount",
    "forecast_report",
    "forecast_table",
    "import_report",
    "skip_lines",
    "summary_report",
    "summary_table",
]
