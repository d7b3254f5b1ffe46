"""Field parsers shared by the CSV importer and the interactive shell.

Each parser takes the raw string exactly as read (no trimming) and raises
``ValueError`` with a short message when the value is not acceptable.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from ..errors import InvalidKindError
from ..models import TransactionKind

DATE_FORMAT = "%Y-%m-%d"

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
# Plain base-10 notation with optional sign, fraction and exponent.
_AMOUNT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_date(raw: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date."""

    if not _DATE_RE.fullmatch(raw):
        raise ValueError(f"invalid date {raw!r}: expected YYYY-MM-DD")
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as exc:
        raise ValueError(f"invalid date {raw!r}: {exc}") from exc


def parse_amount(raw: str) -> float:
    """Parse a base-10 floating-point amount (sign and exponent allowed)."""

    if not _AMOUNT_RE.fullmatch(raw):
        raise ValueError(f"invalid amount: {raw!r}")
    return float(raw)


def parse_kind(raw: str | TransactionKind) -> TransactionKind:
    """Return the kind for an exact, case-sensitive ``Income``/``Expense``."""

    if isinstance(raw, TransactionKind):
        return raw
    try:
        return TransactionKind(raw)
    except ValueError:
        raise InvalidKindError(raw) from None


__all__ = ["DATE_FORMAT", "parse_amount", "parse_date", "parse_kind"]
