# ruff: noqa: I001
"""CLI for the ``finance_tracker`` package.

A Typer application exposing one subcommand per ledger operation. Each command
loads a CSV into a fresh in-memory ledger (nothing is written back), then
renders the result as a ``rich`` table or, with ``--json``, as the pydantic
report models from :mod:`finance_tracker.models`.

Environment variables are loaded from a local ``.env`` via ``python-dotenv``
without overriding values already set:

- ``FINANCE_TRACKER_LOG_LEVEL``: log level for the package logger.
- ``FINANCE_TRACKER_CSV_ENCODING``: text encoding used to read CSV files.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from typer.models import OptionInfo

from .aggregate import is_valid_period_value
from .errors import ImportSourceError
from .ingest.csv_import import DEFAULT_ENCODING
from .ledger import Ledger
from .logging_setup import configure_logging, get_logger
from .models import ImportResult, Period
from .report import (
    forecast_report,
    forecast_table,
    import_report,
    skip_lines,
    summary_report,
    summary_table,
)
from .shell import run_shell

CSV_ENCODING_ENV = "FINANCE_TRACKER_CSV_ENCODING"

_logger = get_logger("finance_tracker.cli")

console = Console()

app = typer.Typer(
    name="finance-tracker",
    help="Personal finance ledger: import, summarize and forecast transactions.",
    no_args_is_help=True,
)


# ---- Small module‑level helpers used by CLI commands -------------------------


def _resolve_csv_encoding() -> str:
    """Honor ``FINANCE_TRACKER_CSV_ENCODING`` when set, else UTF-8."""

    value = (os.getenv(CSV_ENCODING_ENV) or "").strip()
    return value or DEFAULT_ENCODING


def _load_ledger(csv_path: Path) -> tuple[Ledger, ImportResult]:
    """Import ``csv_path`` into a new ledger or exit with status 1."""

    ledger = Ledger()
    try:
        result = ledger.import_csv(csv_path, encoding=_resolve_csv_encoding())
    except ImportSourceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    return ledger, result


def _echo_skips(result: ImportResult) -> None:
    for line in skip_lines(result):
        typer.echo(line, err=True)


# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,
    "--csv-path",
    help="Path to a CSV file with header date,kind,category,amount,description",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the importer reports unreadable files itself
)
JSON_OPTION: OptionInfo = typer.Option("--json", help="Emit JSON instead of a table.")


@app.command("import-csv")
def import_csv_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    as_json: Annotated[bool, JSON_OPTION] = False,
) -> None:
    """Import a CSV file and report imported and skipped rows."""

    _ledger, result = _load_ledger(csv_path)
    if as_json:
        typer.echo(import_report(result, csv_path).model_dump_json(indent=2))
        return
    _echo_skips(result)
    typer.echo(
        f"Transactions imported successfully ({result.imported_count} added, "
        f"{result.skipped_count} skipped)."
    )


@app.command("summary")
def summary_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    period: Annotated[
        Period, typer.Option("--period", case_sensitive=False, help="month, year or all")
    ] = Period.ALL,
    value: Annotated[
        str, typer.Option("--value", help="YYYY-MM for month, YYYY for year")
    ] = "",
    as_json: Annotated[bool, JSON_OPTION] = False,
) -> None:
    """Summarize income, expenses, net balance and category totals."""

    if period is not Period.ALL and not is_valid_period_value(period, value):
        expected = "YYYY-MM" if period is Period.MONTH else "YYYY"
        raise typer.BadParameter(
            f"invalid {period.value} value {value!r}; please use {expected}",
            param_hint="--value",
        )

    ledger, result = _load_ledger(csv_path)
    summary = ledger.summarize(period, value)
    if as_json:
        typer.echo(summary_report(summary, period, value).model_dump_json(indent=2))
        return
    _echo_skips(result)
    console.print(summary_table(summary, period, value))


@app.command("predict")
def predict_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    months: Annotated[int, typer.Option("--months", min=1, help="Months to project (>= 1)")],
    as_json: Annotated[bool, JSON_OPTION] = False,
) -> None:
    """Project expenses and net balance for the coming months."""

    ledger, result = _load_ledger(csv_path)
    forecast = ledger.predict(months)
    if as_json:
        typer.echo(forecast_report(forecast).model_dump_json(indent=2))
        return
    _echo_skips(result)
    console.print(forecast_table(forecast))


@app.command("shell")
def shell_cmd(
    csv_path: Annotated[
        Path | None,
        typer.Option("--csv-path", help="Optional CSV to load before the prompt starts."),
    ] = None,
) -> None:
    """Start the interactive command loop."""

    ledger = Ledger()
    if csv_path is not None:
        ledger, result = _load_ledger(csv_path)
        _echo_skips(result)
        _logger.info("Preloaded %d transaction(s) from %s", len(ledger), csv_path)
    run_shell(ledger, console=console, encoding=_resolve_csv_encoding())


@app.callback()
def _root() -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    # Central logging setup so child loggers inherit configuration
    configure_logging()


if __name__ == "__main__":  # pragma: no cover
    app()
