"""Logging for the ledger, importer and CLI.

Everything logs under the ``finance_tracker`` logger tree. Library code asks
for a child logger with :func:`get_logger` and never installs handlers; the
CLI callback calls :func:`configure_logging` once so import warnings (skipped
CSV rows) and summaries reach stderr.

Without an explicit level, ``FINANCE_TRACKER_LOG_LEVEL`` decides, then INFO.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_ROOT_NAME = "finance_tracker"
LOG_LEVEL_ENV = "FINANCE_TRACKER_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_configured = False


def _parse_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV) or logging.INFO
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    # Unknown names fall back to INFO.
    value = logging.getLevelNamesMapping().get(name)
    return value if value is not None else logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send ``finance_tracker`` records to ``stream`` (stderr by default).

    ``level`` accepts a number or a level name in any case. Repeat calls are
    ignored until :func:`reset_logging` runs.
    """

    global _configured
    if _configured:
        return

    root = logging.getLogger(_ROOT_NAME)
    for placeholder in [h for h in root.handlers if isinstance(h, logging.NullHandler)]:
        root.removeHandler(placeholder)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    root.setLevel(resolved)
    root.addHandler(handler)
    root.propagate = False
    _configured = True


def reset_logging() -> None:
    """Strip handlers and level from the ``finance_tracker`` logger."""

    global _configured
    root = logging.getLogger(_ROOT_NAME)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(logging.NOTSET)
    root.propagate = True
    _configured = False


def get_logger(name: str) -> logging.Logger:
    # Until configure_logging runs, a NullHandler keeps embedded use quiet.
    root = logging.getLogger(_ROOT_NAME)
    if not _configured and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["DEFAULT_FORMAT", "LOG_LEVEL_ENV", "configure_logging", "get_logger", "reset_logging"]
