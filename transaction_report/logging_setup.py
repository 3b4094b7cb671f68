"""Logging for ``transaction_report``.

The CLI calls :func:`configure_logging` once; library modules only call
:func:`get_logger` and never attach handlers themselves.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "transaction_report"
_LEVEL_ENV_VAR = "TRANSACTION_REPORT_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _resolve_level(level: int | str | None) -> int:
    if level is None or (isinstance(level, str) and not level.strip()):
        level = os.getenv(_LEVEL_ENV_VAR) or logging.INFO
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelNamesMapping().get(name)
    if numeric is None:
        raise ValueError(f"unknown log level: {level!r}")
    return numeric


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send package logs to ``stream`` (stderr by default); later calls are no-ops.

    ``level`` falls back to ``TRANSACTION_REPORT_LOG_LEVEL``, then ``INFO``.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved = _resolve_level(level)
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in [h for h in pkg_logger.handlers if isinstance(h, logging.NullHandler)]:
        pkg_logger.removeHandler(h)

    # Resolve stderr now, not at import, so redirected streams are honored.
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(resolved)
    pkg_logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``; stays silent until configured."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
