"""Period-scoped summaries over a transaction sequence.

``summarize`` is a pure function of its inputs. Period values are expected to
be validated by the caller (see :func:`is_valid_period_value`); a malformed
value selects no transactions instead of raising.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeAlias
from datetime import date

from .models import Period, Summary, TransactionKind, Transactions

_MONTH_RE = re.compile(r"([0-9]{4})-([0-9]{2})")
_YEAR_RE = re.compile(r"[0-9]{4}")

PeriodFilter: TypeAlias = Callable[[date], bool]


def _parse_month(value: str) -> tuple[int, int] | None:
    m = _MONTH_RE.fullmatch(value)
    if m is None:
        return None
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        return None
    return year, month


def _parse_year(value: str) -> int | None:
    if _YEAR_RE.fullmatch(value) is None:
        return None
    return int(value)


def is_valid_period_value(period: Period | str, value: str) -> bool:
    """Return whether ``value`` is well-formed for ``period``.

    ``month`` takes ``YYYY-MM``, ``year`` takes ``YYYY``; ``all`` accepts
    anything since its value is ignored.
    """

    period = Period(period)
    if period is Period.MONTH:
        return _parse_month(value) is not None
    if period is Period.YEAR:
        return _parse_year(value) is not None
    return True


def period_filter(period: Period | str, value: str) -> PeriodFilter:
    """Build the date predicate for ``period`` / ``value``."""

    period = Period(period)
    if period is Period.MONTH:
        ym = _parse_month(value)
        if ym is None:
            return lambda _d: False
        year, month = ym
        return lambda d: d.year == year and d.month == month
    if period is Period.YEAR:
        y = _parse_year(value)
        if y is None:
            return lambda _d: False
        return lambda d: d.year == y
    return lambda _d: True


def summarize(transactions: Transactions, period: Period | str, period_value: str = "") -> Summary:
    """Fold the transactions selected by ``period`` into income/expense totals.

    Category totals receive every included amount regardless of kind; they are
    not signed, so income and expenses under one label simply add up.
    """

    include = period_filter(period, period_value)
    total_income = 0.0
    total_expense = 0.0
    category_totals: dict[str, float] = {}

    for tx in transactions:
        if not include(tx.date):
            continue
        if tx.kind is TransactionKind.INCOME:
            total_income += tx.amount
        elif tx.kind is TransactionKind.EXPENSE:
            total_expense += tx.amount
        category_totals[tx.category] = category_totals.get(tx.category, 0.0) + tx.amount

    return Summary(
        total_income=total_income,
        total_expense=total_expense,
        category_totals=category_totals,
    )


__all__ = ["PeriodFilter", "is_valid_period_value", "period_filter", "summarize"]
