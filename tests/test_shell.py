import contextlib
import io
from datetime import date

from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from rich.console import Console

from finance_tracker import Ledger, TransactionKind
from finance_tracker.shell import Shell, run_shell


def scripted(*lines: str):
    """Return a ``read_line`` that replays ``lines`` and then signals EOF."""

    it = iter(lines)

    def read_line(_message: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


def output_of(console: Console) -> str:
    return console.file.getvalue()


@contextlib.contextmanager
def pipe_session():
    with create_pipe_input() as pipe:
        sess = PromptSession(input=pipe, output=DummyOutput())
        yield pipe, sess


def test_add_then_summary_all():
    console = quiet_console()
    reader = scripted(
        "add", "2024-01-05", "Income", "Salary", "1000", "Jan pay",
        "ADD", "2024-01-10", "Expense", "Food", "50", "Groceries",
        "summary", "ALL",
        "exit",
    )

    ledger = run_shell(read_line=reader, console=console)

    assert [tx.kind for tx in ledger.transactions] == [
        TransactionKind.INCOME,
        TransactionKind.EXPENSE,
    ]
    out = output_of(console)
    assert out.count("Transaction added successfully.") == 2
    assert "950.00" in out
    assert out.rstrip().endswith("Exiting...")


def test_add_with_invalid_fields_reports_and_adds_nothing():
    console = quiet_console()
    ledger = Ledger()
    reader = scripted(
        "add", "2024/01/05",
        "add", "2024-01-05", "income", "Salary", "10", "lowercase kind",
        "add", "2024-01-05", "Income", "Salary", "ten",
        "exit",
    )

    run_shell(ledger, read_line=reader, console=console)

    out = output_of(console)
    assert len(ledger) == 0
    assert "invalid date" in out
    assert "invalid transaction type: income" in out
    assert "invalid amount" in out


def test_import_prints_skips_and_summary_by_month(write_csv):
    path = write_csv(
        "2024-01-05,Income,Salary,1000,Jan pay",
        "2024-02-01,Expense,Food,30,Feb",
        "oops,Expense,Food,1,x",
    )
    console = quiet_console()
    reader = scripted("import", str(path), "summary", "month", "2024-02", "exit")

    ledger = run_shell(read_line=reader, console=console)

    out = output_of(console)
    assert len(ledger) == 2
    assert "Skipping record 4 due to invalid date" in out
    assert "2 added, 1 skipped" in out
    assert "Summary (month 2024-02)" in out
    assert "-30.00" in out


def test_import_failure_is_reported(tmp_path):
    console = quiet_console()

    run_shell(read_line=scripted("import", str(tmp_path / "nope.csv")), console=console)

    assert "Error: failed to open file" in output_of(console)


def test_summary_rejects_bad_period_and_values():
    console = quiet_console()
    ledger = Ledger()
    ledger.add(date(2024, 1, 5), "Income", "Salary", 1000.0, "")
    reader = scripted(
        "summary", "week",
        "summary", "month", "2024-1",
        "summary", "year", "24",
        "exit",
    )

    run_shell(ledger, read_line=reader, console=console)

    out = output_of(console)
    assert "Invalid time period" in out
    assert "Invalid month format. Please use YYYY-MM." in out
    assert "Invalid year format. Please use YYYY." in out
    assert "Summary (" not in out


def test_predict_validates_months():
    console = quiet_console()
    ledger = Ledger()
    ledger.add(date(2024, 1, 6), "Expense", "Rent", 100.0, "")
    reader = scripted("predict", "0", "predict", "x", "predict", "2", "exit")

    run_shell(ledger, read_line=reader, console=console)

    out = output_of(console)
    assert out.count("Number of months must be greater than zero.") == 2
    assert "110.00" in out
    assert "120.00" in out


def test_unknown_command_shows_help():
    console = quiet_console()

    run_shell(read_line=scripted("frobnicate"), console=console)

    out = output_of(console)
    assert "Invalid command. Please try again." in out
    # Once at startup and once after the bad command.
    assert out.count("Available commands:") == 2


def test_dispatch_returns_false_on_exit():
    shell = Shell(Ledger(), read_line=scripted(), console=quiet_console())

    assert shell.dispatch("help") is True
    assert shell.dispatch("exit") is False


def test_prompt_toolkit_session_reads_commands():
    console = quiet_console()
    with pipe_session() as (pipe, sess):
        pipe.send_text("exit\r")
        run_shell(session=sess, console=console)

    assert "Exiting..." in output_of(console)
