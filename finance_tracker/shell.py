"""Interactive command loop over a :class:`~finance_tracker.ledger.Ledger`.

A thin wrapper: it prompts for raw values, validates their format, calls the
ledger and renders results. Input comes from ``prompt_toolkit`` by default;
tests and embedding hosts can pass any ``read_line(message) -> str`` callable
instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from rich.console import Console
from rich.markup import escape

from .aggregate import is_valid_period_value
from .errors import FinanceTrackerError
from .ingest.csv_import import DEFAULT_ENCODING
from .ingest.fields import parse_amount, parse_date
from .ledger import Ledger
from .logging_setup import get_logger
from .models import Period
from .report import forecast_table, skip_lines, summary_table

ReadLine: TypeAlias = Callable[[str], str]

COMMANDS: dict[str, str] = {
    "add": "Add a new transaction",
    "import": "Import transactions from a CSV file",
    "summary": "Display a summary of income, expenses, and net balance",
    "predict": "Display predicted expenses and net balance",
    "help": "Display this help message",
    "exit": "Exit the application",
}

_logger = get_logger("finance_tracker.shell")


class Shell:
    """Command dispatcher holding the ledger, the input source and the console."""

    def __init__(
        self,
        ledger: Ledger,
        *,
        read_line: ReadLine | None = None,
        session: PromptSession | None = None,
        console: Console | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.ledger = ledger
        self.console = console or Console()
        self.encoding = encoding
        self._read_line = read_line
        self._session = session
        self._completer = WordCompleter(list(COMMANDS), ignore_case=True)

    # ---- input/output ---------------------------------------------------------

    def _ask(self, message: str, *, commands: bool = False) -> str:
        if self._read_line is not None:
            return self._read_line(message).strip()
        if self._session is None:
            self._session = PromptSession()
        completer = self._completer if commands else None
        return self._session.prompt(message, completer=completer).strip()

    def _error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def show_help(self) -> None:
        self.console.print("Available commands:")
        for name, text in COMMANDS.items():
            self.console.print(f"  {name:<8} {text}")

    # ---- loop -----------------------------------------------------------------

    def run(self) -> None:
        self.console.print("Welcome to Personal Finance Tracker!")
        self.show_help()
        while True:
            try:
                command = self._ask("\nEnter command: ", commands=True).lower()
                if not self.dispatch(command):
                    break
            except (EOFError, KeyboardInterrupt):
                break
        self.console.print("Exiting...")

    def dispatch(self, command: str) -> bool:
        """Run one command; return ``False`` when the loop should stop."""

        handlers: dict[str, Callable[[], None]] = {
            "add": self.cmd_add,
            "import": self.cmd_import,
            "summary": self.cmd_summary,
            "predict": self.cmd_predict,
            "help": self.show_help,
        }
        if command == "exit":
            return False
        handler = handlers.get(command)
        if handler is None:
            self.console.print("Invalid command. Please try again.")
            self.show_help()
            return True
        handler()
        return True

    # ---- commands -------------------------------------------------------------

    def cmd_add(self) -> None:
        try:
            tx_date = parse_date(self._ask("Date (YYYY-MM-DD): "))
        except ValueError as e:
            self._error(str(e))
            return
        kind = self._ask("Type (Income/Expense): ")
        category = self._ask("Category: ")
        try:
            amount = parse_amount(self._ask("Amount: "))
        except ValueError as e:
            self._error(str(e))
            return
        description = self._ask("Description: ")

        try:
            self.ledger.add(tx_date, kind, category, amount, description)
        except FinanceTrackerError as e:
            self._error(str(e))
            return
        self.console.print("Transaction added successfully.")

    def cmd_import(self) -> None:
        filename = self._ask("Enter CSV filename: ")
        try:
            result = self.ledger.import_csv(filename, encoding=self.encoding)
        except FinanceTrackerError as e:
            _logger.debug("Import of %r failed: %s", filename, e)
            self._error(str(e))
            return
        for line in skip_lines(result):
            self.console.print(escape(line))
        self.console.print(
            f"Transactions imported successfully ({result.imported_count} added, "
            f"{result.skipped_count} skipped)."
        )

    def cmd_summary(self) -> None:
        raw_period = self._ask("Time period (month/year/all): ").lower()
        try:
            period = Period(raw_period)
        except ValueError:
            self._error("Invalid time period. Please use month, year, or all.")
            return

        value = ""
        if period is Period.MONTH:
            value = self._ask("Month (YYYY-MM): ")
            if not is_valid_period_value(period, value):
                self._error("Invalid month format. Please use YYYY-MM.")
                return
        elif period is Period.YEAR:
            value = self._ask("Year (YYYY): ")
            if not is_valid_period_value(period, value):
                self._error("Invalid year format. Please use YYYY.")
                return

        summary = self.ledger.summarize(period, value)
        self.console.print(summary_table(summary, period, value))

    def cmd_predict(self) -> None:
        raw = self._ask("Prediction period (months): ")
        try:
            months = int(raw)
        except ValueError:
            months = 0
        if months <= 0:
            self._error("Number of months must be greater than zero.")
            return
        self.console.print(forecast_table(self.ledger.predict(months)))


def run_shell(
    ledger: Ledger | None = None,
    *,
    read_line: ReadLine | None = None,
    session: PromptSession | None = None,
    console: Console | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> Ledger:
    """Run the interactive loop until ``exit`` or end of input; return the ledger."""

    ledger = ledger if ledger is not None else Ledger()
    Shell(
        ledger, read_line=read_line, session=session, console=console, encoding=encoding
    ).run()
    return ledger


__all__ = ["COMMANDS", "ReadLine", "Shell", "run_shell"]
