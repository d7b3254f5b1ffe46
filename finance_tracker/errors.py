"""Exception types raised by the ledger core."""

from __future__ import annotations


class FinanceTrackerError(Exception):
    """Base exception for finance_tracker."""


class InvalidKindError(FinanceTrackerError, ValueError):
    """A transaction kind outside ``Income`` / ``Expense`` was supplied."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"invalid transaction type: {kind}")
        self.kind = kind


class ImportSourceError(FinanceTrackerError):
    """Source-level CSV import failure; nothing was imported."""


class SourceUnreadableError(ImportSourceError):
    """The CSV source could not be opened, read or decoded."""


class MalformedSourceError(ImportSourceError):
    """The CSV source could not be parsed into rows."""


class EmptySourceError(ImportSourceError):
    """The CSV source holds no data rows after the header."""


__all__ = [
    "EmptySourceError",
    "FinanceTrackerError",
    "ImportSourceError",
    "InvalidKindError",
    "MalformedSourceError",
    "SourceUnreadableError",
]
