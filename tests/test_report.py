import io
import json
from datetime import date

from rich.console import Console

from finance_tracker import Ledger, Period
from finance_tracker.report import (
    forecast_report,
    forecast_table,
    import_report,
    summary_report,
    summary_table,
)


def _render(renderable) -> str:
    console = Console(file=io.StringIO(), width=100, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def _ledger() -> Ledger:
    ledger = Ledger()
    ledger.add(date(2024, 1, 5), "Income", "Salary", 1000.0, "")
    ledger.add(date(2024, 1, 10), "Expense", "Food", 50.5, "")
    ledger.add(date(2024, 1, 11), "Expense", "[Auto]", 20.0, "")
    return ledger


def test_summary_table_shows_totals_and_sorted_categories():
    ledger = _ledger()

    text = _render(summary_table(ledger.summarize(Period.MONTH, "2024-01"), "month", "2024-01"))

    assert "Summary (month 2024-01)" in text
    assert "1000.00" in text
    assert "70.50" in text
    assert "929.50" in text
    # Markup-looking labels are shown verbatim.
    assert "[Auto]" in text
    assert text.index("Food") < text.index("Salary") < text.index("[Auto]")


def test_forecast_table_has_one_row_per_month():
    text = _render(forecast_table(_ledger().predict(3)))

    assert "Predictions for the next 3 month(s)" in text
    assert "22.00" in text
    assert "26.00" in text
    assert "974.00" in text


def test_summary_report_serializes_to_json():
    summary = _ledger().summarize(Period.ALL, "ignored")

    payload = json.loads(summary_report(summary, Period.ALL, "ignored").model_dump_json())

    assert payload == {
        "period": "all",
        "period_value": "",
        "total_income": 1000.0,
        "total_expense": 70.5,
        "net_balance": 929.5,
        "category_totals": {"Food": 50.5, "Salary": 1000.0, "[Auto]": 20.0},
    }


def test_forecast_report_lists_each_month():
    report = forecast_report(Ledger().predict(2))

    assert report.months == 2
    assert report.predicted_expenses == [0.0, 0.0]
    assert report.predicted_net_balance == [0.0, 0.0]


def test_import_report_carries_skip_details(write_csv):
    path = write_csv("2024-01-05,Income,Salary,1000,ok", "bad,Income,Salary,1,x")
    result = Ledger().import_csv(path)

    report = import_report(result, path)

    assert report.source == str(path)
    assert report.imported == 1
    (entry,) = report.skipped
    assert entry.row_number == 3
    assert entry.reason == "invalid_date"
    assert entry.fields == ["bad", "Income", "Salary", "1", "x"]
    assert entry.message.startswith("Skipping record 3 due to invalid date")
