"""Naive linear expense forecast.

The basis is the amount of the last Expense transaction in insertion order
(not the latest by date), grown by a fixed 10% per month:

    expense[i] = last_expense * (1 + 0.1 * i)      for i in 1..N
    net[i]     = total_income - expense[i]

``total_income`` is the all-time income sum. With no expenses recorded every
month projects zero expense and a net balance equal to ``total_income``.
"""

from __future__ import annotations

from .aggregate import summarize
from .models import Forecast, Period, TransactionKind, Transactions

MONTHLY_GROWTH_RATE = 0.1


def last_expense_amount(transactions: Transactions) -> float | None:
    """Amount of the most recently added Expense, or ``None`` when absent."""

    for tx in reversed(transactions):
        if tx.kind is TransactionKind.EXPENSE:
            return tx.amount
    return None


def predict(transactions: Transactions, months: int) -> Forecast:
    """Project expenses and net balance for the next ``months`` months."""

    if isinstance(months, bool) or not isinstance(months, int) or months < 1:
        raise ValueError(f"months must be a positive integer, got {months!r}")

    total_income = summarize(transactions, Period.ALL, "").total_income
    last_expense = last_expense_amount(transactions)
    if last_expense is None:
        return Forecast(
            predicted_expenses=(0.0,) * months,
            predicted_net_balance=(total_income,) * months,
        )

    expenses = tuple(
        last_expense * (1 + MONTHLY_GROWTH_RATE * i) for i in range(1, months + 1)
    )
    return Forecast(
        predicted_expenses=expenses,
        predicted_net_balance=tuple(total_income - e for e in expenses),
    )


__all__ = ["MONTHLY_GROWTH_RATE", "last_expense_amount", "predict"]
