"""Data models and type aliases for ``finance_tracker``.

Core records are frozen dataclasses and named tuples; they are created by the
ledger and importer and never mutated afterwards. The pydantic models at the
bottom are the typed JSON shapes emitted by the CLI ``--json`` output.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import NamedTuple, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Closed enumerations (values are the exact external strings)
# ---------------------------------------------------------------------------


class TransactionKind(StrEnum):
    """Kind of a transaction; values match the CSV ``kind`` column verbatim."""

    INCOME = "Income"
    EXPENSE = "Expense"


class Period(StrEnum):
    """Aggregation scope for :func:`finance_tracker.aggregate.summarize`."""

    MONTH = "month"
    YEAR = "year"
    ALL = "all"


# ---------------------------------------------------------------------------
# Core record and collections
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Transaction:
    """One dated financial event.

    ``amount`` is stored exactly as given. There is no sign convention: the
    direction of money is implied by ``kind``.
    """

    date: date
    kind: TransactionKind
    category: str
    amount: float
    description: str


Transactions: TypeAlias = Sequence[Transaction]
"""An ordered (insertion order) sequence of transactions."""

CategoryTotals: TypeAlias = dict[str, float]
"""Category label to accumulated amount. Iteration order is not a contract."""


# ---------------------------------------------------------------------------
# Import diagnostics
# ---------------------------------------------------------------------------


class SkipReason(StrEnum):
    FIELD_COUNT = "field_count"
    INVALID_DATE = "invalid_date"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_KIND = "invalid_kind"


_SKIP_LABELS: dict[SkipReason, str] = {
    SkipReason.FIELD_COUNT: "invalid number of fields",
    SkipReason.INVALID_DATE: "invalid date",
    SkipReason.INVALID_AMOUNT: "invalid amount",
    SkipReason.INVALID_KIND: "invalid transaction type",
}


@dataclass(frozen=True, slots=True)
class SkipRecord:
    """A CSV row that was excluded from an import, and why.

    ``row_number`` is the 1-based record number in the source; the header is
    record 1, so the first data row is 2.
    """

    row_number: int
    fields: tuple[str, ...]
    reason: SkipReason
    detail: str = ""

    @property
    def message(self) -> str:
        label = _SKIP_LABELS[self.reason]
        text = f"Skipping record {self.row_number} due to {label}: {list(self.fields)}"
        if self.detail:
            text += f", error: {self.detail}"
        return text


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Outcome of a successful (possibly partial) CSV import."""

    imported: tuple[Transaction, ...]
    skipped: tuple[SkipRecord, ...]

    @property
    def imported_count(self) -> int:
        return len(self.imported)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


# ---------------------------------------------------------------------------
# Aggregation and forecast results
# ---------------------------------------------------------------------------


class Summary(NamedTuple):
    """Totals for one period.

    ``category_totals`` adds every included amount under its category without
    regard to kind, so a category holding both income and expenses reports
    their plain sum.
    """

    total_income: float
    total_expense: float
    category_totals: CategoryTotals

    @property
    def net_balance(self) -> float:
        return self.total_income - self.total_expense


class Forecast(NamedTuple):
    """Projected expenses and net balance for months ``1..N``."""

    predicted_expenses: tuple[float, ...]
    predicted_net_balance: tuple[float, ...]


# ---------------------------------------------------------------------------
# DTOs for CLI JSON output
# ---------------------------------------------------------------------------


class SkipEntry(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    row_number: int
    reason: SkipReason
    fields: list[str]
    message: str


class ImportReport(BaseModel):
    """JSON shape for ``finance-tracker import-csv --json``."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    source: str
    imported: int = Field(ge=0)
    skipped: list[SkipEntry] = Field(default_factory=list)


class SummaryReport(BaseModel):
    """JSON shape for ``finance-tracker summary --json``."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    period: Period
    period_value: str
    total_income: float
    total_expense: float
    net_balance: float
    category_totals: dict[str, float]


class ForecastReport(BaseModel):
    """JSON shape for ``finance-tracker predict --json``."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    months: int = Field(ge=1)
    predicted_expenses: list[float]
    predicted_net_balance: list[float]


__all__ = [
    "CategoryTotals",
    "Forecast",
    "ForecastReport",
    "ImportReport",
    "ImportResult",
    "Period",
    "SkipEntry",
    "SkipReason",
    "SkipRecord",
    "Summary",
    "SummaryReport",
    "Transaction",
    "TransactionKind",
    "Transactions",
]
