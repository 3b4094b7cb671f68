"""Pytest configuration for test isolation.

The package reads ``TRANSACTION_REPORT_*`` variables from the environment and
configures its logger once per process. Both leak across tests, so an autouse
fixture clears the variables and restores the package logger afterwards.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from transaction_report import logging_setup

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _isolate_env_and_logging(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    for name in list(os.environ):
        if name.startswith("TRANSACTION_REPORT_"):
            monkeypatch.delenv(name)
    # The CLI loads ``.env`` from the working directory; keep it empty.
    monkeypatch.chdir(tmp_path)

    logger = logging.getLogger("transaction_report")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate


@pytest.fixture
def sample_csv() -> Path:
    return DATA_DIR / "transactions_sample.csv"


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write CSV text to a file under ``tmp_path`` and return its path."""

    def _write(text: str, name: str = "transactions.csv", encoding: str = "utf-8") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding=encoding)
        return p

    return _write
