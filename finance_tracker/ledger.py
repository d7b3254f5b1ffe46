"""In-memory ledger: an append-only, insertion-ordered list of transactions.

The ledger is owned by a single session and is not synchronized; callers that
share one across threads must serialize ``add`` / ``import_csv`` themselves.
"""

from __future__ import annotations

from datetime import date

from .aggregate import summarize as _summarize
from .forecast import predict as _predict
from .ingest.csv_import import DEFAULT_ENCODING, CsvSource, import_csv
from .ingest.fields import parse_kind
from .logging_setup import get_logger
from .models import Forecast, ImportResult, Period, Summary, Transaction, TransactionKind

_logger = get_logger("finance_tracker.ledger")


class Ledger:
    """Ordered collection of :class:`Transaction` records.

    There is no uniqueness constraint and no deletion; transactions keep the
    order in which they were added or imported.
    """

    def __init__(self, transactions: tuple[Transaction, ...] | list[Transaction] = ()) -> None:
        self._transactions: list[Transaction] = list(transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __repr__(self) -> str:  # pragma: no cover - trivial repr
        return f"Ledger(transactions={len(self._transactions)})"

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Read-only snapshot of the transactions in insertion order."""

        return tuple(self._transactions)

    def add(
        self,
        date: date,
        kind: TransactionKind | str,
        category: str,
        amount: float,
        description: str,
    ) -> Transaction:
        """Append one transaction and return it.

        ``kind`` must be exactly ``"Income"`` or ``"Expense"`` (or the matching
        :class:`TransactionKind`); anything else raises
        :class:`~finance_tracker.errors.InvalidKindError` and leaves the
        ledger unchanged. Amount, category and description are not validated.
        """

        tx = Transaction(
            date=date,
            kind=parse_kind(kind),
            category=category,
            amount=amount,
            description=description,
        )
        self._transactions.append(tx)
        _logger.debug("Added %s %s %r on %s", tx.kind, tx.amount, tx.category, tx.date)
        return tx

    def import_csv(self, source: CsvSource, *, encoding: str = DEFAULT_ENCODING) -> ImportResult:
        """Import rows from a CSV path or text stream; see :mod:`.ingest.csv_import`."""

        return import_csv(self, source, encoding=encoding)

    def summarize(self, period: Period | str, period_value: str = "") -> Summary:
        return _summarize(self._transactions, period, period_value)

    def predict(self, months: int) -> Forecast:
        return _predict(self._transactions, months)


__all__ = ["Ledger"]
