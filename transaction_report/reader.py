"""Transaction reader: raw CSV rows to validated :class:`Transaction` values.

Rows are checked in this order, and the first failing check decides the
single warning emitted for the row:

1. ``id``: present, and (ignoring surrounding whitespace) an optional sign
   followed by ASCII digits only.
2. ``amount``: present, parseable as a finite ``Decimal``, strictly > 0.
3. ``type``: exactly one of the configured credit/debit labels. No trimming,
   no case folding.

Row problems never stop reading; failures of the row source itself
(open/decode/CSV structure) become :class:`~transaction_report.errors.ReadError`
and no partial result is returned.
"""

from __future__ import annotations

import csv
import re
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation
from os import PathLike
from pathlib import Path

from .config import ReaderConfig
from .errors import ReadError
from .logging_setup import get_logger
from .models import (
    ReadResult,
    RowMapping,
    RowWarning,
    Transaction,
    TransactionKind,
    WarningReason,
)

_logger = get_logger("transaction_report.reader")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

type WarningSink = Callable[[RowWarning], None]


# ---- Field parsers -----------------------------------------------------------


def _parse_id(raw: str | None) -> int | None:
    if raw is None:
        return None
    s = raw.strip()
    if not _INTEGER_RE.fullmatch(s):
        return None
    return int(s)


def _parse_amount(raw: str | None) -> Decimal | None:
    if raw is None:
        return None
    s = raw.strip()
    # Decimal() also accepts digit-group underscores ("1_000"); CSV amounts never carry them.
    if not s or "_" in s:
        return None
    try:
        d = Decimal(s)
    except InvalidOperation:
        return None
    # NaN/Infinity parse fine but are not amounts; NaN also refuses ordering.
    if not d.is_finite() or d <= 0:
        return None
    return d


def _parse_kind(raw: str | None, config: ReaderConfig) -> TransactionKind | None:
    if raw == config.credit_label:
        return TransactionKind.CREDIT
    if raw == config.debit_label:
        return TransactionKind.DEBIT
    return None


# ---- Row validation ----------------------------------------------------------


def parse_row(
    row: RowMapping, row_number: int, config: ReaderConfig | None = None
) -> Transaction | RowWarning:
    """Validate one raw row and return either a transaction or the reason it was dropped."""

    cfg = config or ReaderConfig()

    tx_id = _parse_id(row.get(cfg.id_column))
    if tx_id is None:
        return RowWarning(row_number, WarningReason.INVALID_ID, dict(row))

    amount = _parse_amount(row.get(cfg.amount_column))
    if amount is None:
        return RowWarning(row_number, WarningReason.INVALID_AMOUNT, dict(row))

    kind = _parse_kind(row.get(cfg.type_column), cfg)
    if kind is None:
        return RowWarning(row_number, WarningReason.UNKNOWN_TYPE, dict(row))

    return Transaction(id=tx_id, kind=kind, amount=amount)


def iter_transactions(
    rows: Iterable[RowMapping],
    *,
    config: ReaderConfig | None = None,
    on_warning: WarningSink | None = None,
) -> Iterator[Transaction]:
    """Lazily yield validated transactions in input order.

    Each skipped row is passed to ``on_warning`` (when given) before reading
    continues with the next row.
    """

    cfg = config or ReaderConfig()
    for row_number, row in enumerate(rows, start=1):
        parsed = parse_row(row, row_number, cfg)
        if isinstance(parsed, RowWarning):
            if on_warning is not None:
                on_warning(parsed)
            continue
        yield parsed


def read_transactions(
    rows: Iterable[RowMapping], *, config: ReaderConfig | None = None
) -> ReadResult:
    """Validate every row and collect transactions and warnings side by side."""

    warnings: list[RowWarning] = []
    transactions = list(iter_transactions(rows, config=config, on_warning=warnings.append))
    return ReadResult(transactions=transactions, warnings=warnings)


# ---- CSV source --------------------------------------------------------------


@contextmanager
def open_rows(
    csv_path: str | PathLike[str], config: ReaderConfig | None = None
) -> Iterator[csv.DictReader[str]]:
    """Open ``csv_path`` and yield a ``csv.DictReader`` over its data rows.

    Raises ``csv.Error`` when the file has no header row. A header lacking a
    configured column is only logged: every row then fails its own check for
    that field. ``OSError``/``UnicodeDecodeError`` from opening or decoding
    propagate unchanged.
    """

    cfg = config or ReaderConfig()
    p = Path(csv_path)
    with p.open(encoding=cfg.encoding, newline="") as f:
        reader = csv.DictReader(f, delimiter=cfg.delimiter)
        headers = reader.fieldnames
        if not headers:
            raise csv.Error(f"CSV appears to have no header row: {csv_path}")
        missing = [c for c in cfg.required_columns if c not in headers]
        if missing:
            _logger.warning(
                "reader:missing_columns path=%s columns=%s", csv_path, ",".join(missing)
            )
        yield reader


def _log_skipped(warning: RowWarning) -> None:
    _logger.warning(
        "reader:row_skipped row=%d reason=%s raw=%s",
        warning.row_number,
        warning.reason.value,
        warning.raw_json(),
    )


def read_transactions_from_csv(
    csv_path: str | PathLike[str],
    *,
    config: ReaderConfig | None = None,
    on_warning: WarningSink | None = None,
) -> ReadResult:
    """Read and validate a CSV file of transactions.

    Skipped rows are logged at WARNING on ``transaction_report.reader`` and
    returned in ``ReadResult.warnings``; ``on_warning`` receives them as they
    occur. Any failure of the file or decoder is raised as ``ReadError``.
    """

    warnings: list[RowWarning] = []

    def _sink(warning: RowWarning) -> None:
        warnings.append(warning)
        _log_skipped(warning)
        if on_warning is not None:
            on_warning(warning)

    try:
        with open_rows(csv_path, config) as rows:
            transactions = list(iter_transactions(rows, config=config, on_warning=_sink))
    except FileNotFoundError as e:
        raise ReadError(f"File not found: {csv_path}", cause=e) from e
    except PermissionError as e:
        raise ReadError(f"Permission denied: {csv_path}", cause=e) from e
    except UnicodeDecodeError as e:
        raise ReadError(f"Failed to decode '{csv_path}': {e}", cause=e) from e
    except csv.Error as e:
        raise ReadError(f"Failed to parse CSV: {e}", cause=e) from e
    except LookupError as e:
        raise ReadError(f"Unknown encoding for '{csv_path}': {e}", cause=e) from e
    except OSError as e:
        raise ReadError(f"Failed to read '{csv_path}': {e}", cause=e) from e

    _logger.info(
        "reader:read_done path=%s transactions=%d skipped=%d",
        csv_path,
        len(transactions),
        len(warnings),
    )
    return ReadResult(transactions=transactions, warnings=warnings)


__all__ = [
    "iter_transactions",
    "open_rows",
    "parse_row",
    "read_transactions",
    "read_transactions_from_csv",
]
