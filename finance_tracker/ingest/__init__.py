"""CSV ingest: field parsers and the ledger importer."""

from .csv_import import CsvSource, import_csv, read_csv_source
from .fields import parse_amount, parse_date, parse_kind

__all__ = [
    "CsvSource",
    "import_csv",
    "parse_amount",
    "parse_date",
    "parse_kind",
    "read_csv_source",
]
