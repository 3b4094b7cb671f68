"""Single-pass aggregation of validated transactions into :class:`Statistics`.

Sums are exact ``Decimal`` arithmetic; nothing is rounded here. Rounding to
two places happens only when a report is rendered.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    Inexact,
    InvalidOperation,
    localcontext,
)

from .models import Statistics, Transaction, TransactionKind

_ZERO = Decimal("0")

# Addition and subtraction never round at MAX_PREC; Inexact would flag it if they did.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[InvalidOperation, Inexact])


@dataclass(slots=True)
class StatisticsAccumulator:
    """Running totals fed one transaction at a time.

    The largest transaction is replaced only on a strictly greater amount, so
    among equal maxima the earliest one added is kept.
    """

    credit_count: int = 0
    debit_count: int = 0
    credit_sum: Decimal = _ZERO
    debit_sum: Decimal = _ZERO
    balance: Decimal = _ZERO
    largest: Transaction | None = None

    def add(self, tx: Transaction) -> None:
        with localcontext(_EXACT):
            if tx.kind is TransactionKind.CREDIT:
                self.balance += tx.amount
                self.credit_sum += tx.amount
                self.credit_count += 1
            elif tx.kind is TransactionKind.DEBIT:
                self.balance -= tx.amount
                self.debit_sum += tx.amount
                self.debit_count += 1

        if self.largest is None or tx.amount > self.largest.amount:
            self.largest = tx

    def result(self) -> Statistics | None:
        """Freeze the totals; ``None`` when nothing was added."""

        if self.largest is None:
            return None
        return Statistics(
            final_balance=self.balance,
            largest_transaction=self.largest,
            credit_count=self.credit_count,
            debit_count=self.debit_count,
            credit_sum=self.credit_sum,
            debit_sum=self.debit_sum,
        )


def summarize(transactions: Iterable[Transaction]) -> Statistics | None:
    """Aggregate ``transactions`` in order; ``None`` means there was no data."""

    acc = StatisticsAccumulator()
    for tx in transactions:
        acc.add(tx)
    return acc.result()


__all__ = ["StatisticsAccumulator", "summarize"]
