"""Public interface for the ``transaction_report`` package.

This module exposes the pipeline functions and public models/types as the
stable import surface. There is no runtime logic here, only re-exports.
"""

from .aggregator import StatisticsAccumulator, summarize
from .api import report_from_csv, summarize_csv
from .config import ReaderConfig
from .errors import ArgumentError, ReadError
from .models import (
    ReadResult,
    RowWarning,
    Statistics,
    Transaction,
    TransactionKind,
    WarningReason,
)
from .reader import (
    iter_transactions,
    parse_row,
    read_transactions,
    read_transactions_from_csv,
)
from .report import OutputFormat, format_amount, format_report, format_report_json

__all__ = [
    # Pipeline
    "iter_transactions",
    "parse_row",
    "read_transactions",
    "read_transactions_from_csv",
    "summarize",
    "summarize_csv",
    "report_from_csv",
    "format_amount",
    "format_report",
    "format_report_json",
    # Models / types
    "OutputFormat",
    "ReadResult",
    "ReaderConfig",
    "RowWarning",
    "Statistics",
    "StatisticsAccumulator",
    "Transaction",
    "TransactionKind",
    "WarningReason",
    # Errors
    "ArgumentError",
    "ReadError",
]
