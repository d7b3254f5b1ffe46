"""Public interface for the ``finance_tracker`` package.

This module exposes the ledger, its models and error types as the stable
import surface. There is no runtime logic here, only symbol re-exports.
"""

from .aggregate import is_valid_period_value, summarize
from .errors import (
    EmptySourceError,
    FinanceTrackerError,
    ImportSourceError,
    InvalidKindError,
    MalformedSourceError,
    SourceUnreadableError,
)
from .forecast import MONTHLY_GROWTH_RATE, predict
from .ledger import Ledger
from .models import (
    Forecast,
    ImportResult,
    Period,
    SkipReason,
    SkipRecord,
    Summary,
    Transaction,
    TransactionKind,
)

__all__ = [
    # Core
    "Ledger",
    "summarize",
    "predict",
    "is_valid_period_value",
    "MONTHLY_GROWTH_RATE",
    # Models / types
    "Transaction",
    "TransactionKind",
    "Period",
    "Summary",
    "Forecast",
    "ImportResult",
    "SkipRecord",
    "SkipReason",
    # Errors
    "FinanceTrackerError",
    "InvalidKindError",
    "ImportSourceError",
    "SourceUnreadableError",
    "MalformedSourceError",
    "EmptySourceError",
]
