"""Data models and type aliases for ``transaction_report``.

Two value types flow through the pipeline:

- :class:`Transaction`: a validated row, produced by the reader and consumed
  by the aggregator. Instances only exist for rows that passed validation.
- :class:`Statistics`: the single summary produced by the aggregator. The
  "no data" case is represented by ``None`` at the call sites, never by a
  zeroed ``Statistics``.

Rows that fail validation become :class:`RowWarning` values instead.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import NamedTuple

# ---------------------------------------------------------------------------
# Raw input
# ---------------------------------------------------------------------------

# One decoded CSV record keyed by header name. ``csv.DictReader`` yields
# ``None`` for cells missing from short rows, so values are optional.
type RowMapping = Mapping[str, str | None]


# ---------------------------------------------------------------------------
# Validated records
# ---------------------------------------------------------------------------


class TransactionKind(Enum):
    """Direction of a transaction relative to the account balance."""

    CREDIT = "credit"
    DEBIT = "debit"


@dataclass(frozen=True, slots=True)
class Transaction:
    """A validated bank transaction.

    ``amount`` is always a finite ``Decimal`` strictly greater than zero; the
    direction lives in ``kind``.
    """

    id: int
    kind: TransactionKind
    amount: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError("Transaction.id must be an integer")
        if not isinstance(self.kind, TransactionKind):
            raise ValueError("Transaction.kind must be a TransactionKind")
        if not isinstance(self.amount, Decimal) or not self.amount.is_finite():
            raise ValueError("Transaction.amount must be a finite Decimal")
        if self.amount <= 0:
            raise ValueError("Transaction.amount must be greater than zero")


@dataclass(frozen=True, slots=True)
class Statistics:
    """Summary of a non-empty transaction sequence.

    ``largest_transaction`` is the first transaction holding the maximum
    amount. ``final_balance`` always equals ``credit_sum - debit_sum``.
    """

    final_balance: Decimal
    largest_transaction: Transaction
    credit_count: int
    debit_count: int
    credit_sum: Decimal
    debit_sum: Decimal

    @property
    def transaction_count(self) -> int:
        return self.credit_count + self.debit_count


# ---------------------------------------------------------------------------
# Skipped rows
# ---------------------------------------------------------------------------


class WarningReason(Enum):
    INVALID_ID = "invalid_id"
    INVALID_AMOUNT = "invalid_amount"
    UNKNOWN_TYPE = "unknown_type"

    @property
    def description(self) -> str:
        return _REASON_TEXT[self]


_REASON_TEXT: dict[WarningReason, str] = {
    WarningReason.INVALID_ID: "invalid id",
    WarningReason.INVALID_AMOUNT: "invalid amount",
    WarningReason.UNKNOWN_TYPE: "unrecognized transaction type",
}


@dataclass(frozen=True, slots=True)
class RowWarning:
    """A row that was dropped during reading, and why.

    ``row_number`` is the 1-based position among data rows (the header is not
    counted). ``row`` is a copy of the raw mapping as decoded.
    """

    row_number: int
    reason: WarningReason
    row: Mapping[str, str | None] = field(default_factory=dict)

    def raw_json(self) -> str:
        # Non-string keys show up when a row has more cells than the header.
        return json.dumps({str(k): v for k, v in self.row.items()}, ensure_ascii=False)

    @property
    def message(self) -> str:
        return (
            f"Skipping row {self.row_number}: {self.reason.description}: {self.raw_json()}"
        )


class ReadResult(NamedTuple):
    """Validated transactions in input order, plus one warning per skipped row."""

    transactions: Sequence[Transaction]
    warnings: Sequence[RowWarning]


__all__ = [
    "ReadResult",
    "RowMapping",
    "RowWarning",
    "Statistics",
    "Transaction",
    "TransactionKind",
    "WarningReason",
]
