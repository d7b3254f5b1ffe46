"""Pytest configuration for test isolation.

The CLI reads ``.env`` from the working directory and configures the package
logger once per process. Both leak across tests unless reset, so every test
runs from its own temporary directory with the package environment variables
cleared and the logging configuration undone afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from finance_tracker.cli import CSV_ENCODING_ENV
from finance_tracker.logging_setup import LOG_LEVEL_ENV, reset_logging

CSV_HEADER = "date,kind,category,amount,description"


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (LOG_LEVEL_ENV, CSV_ENCODING_ENV):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    reset_logging()


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write CSV text to a file under ``tmp_path`` and return its path.

    ``rows`` are raw lines appended after the standard header unless
    ``header=False``.
    """

    def _write(
        *rows: str, name: str = "transactions.csv", header: bool = True, encoding: str = "utf-8"
    ) -> Path:
        lines = ([CSV_HEADER] if header else []) + list(rows)
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding=encoding)
        return path

    return _write
