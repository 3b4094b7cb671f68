"""Public pipeline entry points for the ``transaction_report`` package.

The pipeline is strictly one-way: read (validate each row) → aggregate →
render. These helpers wire the three stages together for callers that start
from a file path; each stage is also usable on its own through
:mod:`~transaction_report.reader`, :mod:`~transaction_report.aggregator` and
:mod:`~transaction_report.report`.
"""

from __future__ import annotations

from os import PathLike

from .aggregator import summarize
from .config import ReaderConfig
from .logging_setup import get_logger
from .models import Statistics
from .reader import WarningSink, read_transactions_from_csv
from .report import OutputFormat, render

_logger = get_logger("transaction_report.api")


def summarize_csv(
    csv_path: str | PathLike[str],
    *,
    config: ReaderConfig | None = None,
    on_warning: WarningSink | None = None,
) -> Statistics | None:
    """Read ``csv_path`` and aggregate its valid rows.

    Returns ``None`` when no row survives validation (including a header-only
    file). Raises :class:`~transaction_report.errors.ReadError` when the file
    cannot be read; in that case nothing is aggregated.
    """

    result = read_transactions_from_csv(csv_path, config=config, on_warning=on_warning)
    stats = summarize(result.transactions)
    if stats is None:
        _logger.info("api:no_valid_transactions path=%s skipped=%d", csv_path, len(result.warnings))
    else:
        _logger.debug(
            "api:summarized path=%s credits=%d debits=%d",
            csv_path,
            stats.credit_count,
            stats.debit_count,
        )
    return stats


def report_from_csv(
    csv_path: str | PathLike[str],
    *,
    config: ReaderConfig | None = None,
    output_format: OutputFormat = OutputFormat.TEXT,
) -> str:
    """Return the rendered report for ``csv_path``.

    Running this twice on the same file yields identical text.
    """

    return render(summarize_csv(csv_path, config=config), output_format)


__all__ = ["report_from_csv", "summarize_csv"]
