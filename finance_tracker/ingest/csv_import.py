"""CSV import for the ledger.

Expected layout (header row first, its content is not validated)::

    date,kind,category,amount,description
    2024-01-05,Income,Salary,1000,Jan pay

Parsing follows RFC 4180 quoting via the stdlib :mod:`csv` module in strict
mode. Blank lines are ignored and are not counted as records.

Failure policy:

- Source-level problems raise (nothing is imported): unreadable source
  (:class:`SourceUnreadableError`), unparsable CSV
  (:class:`MalformedSourceError`), header-only or empty source
  (:class:`EmptySourceError`).
- Row-level problems (field count, date, amount, kind) skip the row. Each skip
  is logged at WARNING and returned as a :class:`SkipRecord`.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Sequence
from os import PathLike, fspath
from typing import IO, TYPE_CHECKING, TypeAlias

from ..errors import (
    EmptySourceError,
    InvalidKindError,
    MalformedSourceError,
    SourceUnreadableError,
)
from ..logging_setup import get_logger
from ..models import ImportResult, SkipReason, SkipRecord, Transaction
from .fields import parse_amount, parse_date

if TYPE_CHECKING:
    from ..ledger import Ledger

CsvSource: TypeAlias = str | PathLike[str] | IO[str]

EXPECTED_FIELDS = 5
DEFAULT_ENCODING = "utf-8"
# Header is record 1; the first data record is 2.
FIRST_DATA_ROW = 2

_logger = get_logger("finance_tracker.ingest.csv_import")


def describe_source(source: CsvSource) -> str:
    if isinstance(source, (str, PathLike)):
        return fspath(source)
    return str(getattr(source, "name", "<stream>"))


def _read_rows(f: Iterable[str]) -> list[list[str]]:
    return [row for row in csv.reader(f, strict=True) if row]


def read_csv_source(source: CsvSource, *, encoding: str = DEFAULT_ENCODING) -> list[list[str]]:
    """Read every record from ``source``, header included.

    Paths are opened here and always closed before returning; caller-owned
    streams are read to completion but left open.
    """

    label = describe_source(source)
    try:
        if isinstance(source, (str, PathLike)):
            with open(source, encoding=encoding, newline="") as f:
                return _read_rows(f)
        return _read_rows(source)
    except OSError as exc:
        raise SourceUnreadableError(f"failed to open file {label!r}: {exc}") from exc
    except (UnicodeDecodeError, LookupError) as exc:
        raise SourceUnreadableError(f"failed to read {label!r} as {encoding}: {exc}") from exc
    except csv.Error as exc:
        raise MalformedSourceError(f"failed to read CSV data from {label!r}: {exc}") from exc


def _skip(row_number: int, record: Sequence[str], reason: SkipReason, detail: str) -> SkipRecord:
    skip = SkipRecord(row_number=row_number, fields=tuple(record), reason=reason, detail=detail)
    _logger.warning("%s", skip.message)
    return skip


def import_csv(
    ledger: Ledger, source: CsvSource, *, encoding: str = DEFAULT_ENCODING
) -> ImportResult:
    """Append every valid data row of ``source`` to ``ledger`` in file order.

    Returns the appended transactions together with one :class:`SkipRecord`
    per excluded row. Rows already in the ledger are kept.
    """

    records = read_csv_source(source, encoding=encoding)
    if len(records) <= 1:
        raise EmptySourceError(f"empty or invalid CSV file: {describe_source(source)}")

    imported: list[Transaction] = []
    skipped: list[SkipRecord] = []
    for row_number, record in enumerate(records[1:], start=FIRST_DATA_ROW):
        if len(record) != EXPECTED_FIELDS:
            skipped.append(
                _skip(
                    row_number,
                    record,
                    SkipReason.FIELD_COUNT,
                    f"expected {EXPECTED_FIELDS} fields, got {len(record)}",
                )
            )
            continue

        date_raw, kind_raw, category, amount_raw, description = record
        try:
            tx_date = parse_date(date_raw)
        except ValueError as exc:
            skipped.append(_skip(row_number, record, SkipReason.INVALID_DATE, str(exc)))
            continue
        try:
            amount = parse_amount(amount_raw)
        except ValueError as exc:
            skipped.append(_skip(row_number, record, SkipReason.INVALID_AMOUNT, str(exc)))
            continue
        try:
            tx = ledger.add(tx_date, kind_raw, category, amount, description)
        except InvalidKindError as exc:
            skipped.append(_skip(row_number, record, SkipReason.INVALID_KIND, str(exc)))
            continue
        imported.append(tx)

    _logger.info(
        "Imported %d transaction(s) from %s, skipped %d",
        len(imported),
        describe_source(source),
        len(skipped),
    )
    return ImportResult(imported=tuple(imported), skipped=tuple(skipped))


__all__ = [
    "DEFAULT_ENCODING",
    "EXPECTED_FIELDS",
    "CsvSource",
    "describe_source",
    "import_csv",
    "read_csv_source",
]
