"""Report rendering for :class:`~transaction_report.models.Statistics`.

Two renderings share the same figures:

- :func:`format_report`: the human-readable text block printed by the CLI.
- :func:`format_report_json`: a JSON document for machine consumers.

Amounts are quantized to exactly two decimals (``ROUND_HALF_UP``) at render
time only.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal, localcontext
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .models import Statistics

TITLE = "Transaction Report"
SEPARATOR = "-" * 45
NO_DATA_MESSAGE = "No valid transactions found to generate the report."

_CENT = Decimal("0.01")


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def format_amount(d: Decimal) -> str:
    # Exactly two decimals; ASCII dot; leading minus for negatives.
    # quantize needs room for every integer digit plus the two cents.
    ctx = Context(
        prec=max(28, d.adjusted() + 3), Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP
    )
    with localcontext(ctx):
        q = d.quantize(_CENT)
        if q.is_zero():
            # Keep "-0.00" out of the report.
            q = abs(q)
    return f"{q:.2f}"


def format_report(stats: Statistics | None) -> str:
    if stats is None:
        return NO_DATA_MESSAGE

    largest = stats.largest_transaction
    lines = [
        TITLE,
        SEPARATOR,
        f"Final Balance: {format_amount(stats.final_balance)}",
        f"Largest Transaction: ID {largest.id} - {format_amount(largest.amount)}",
        f"Transaction Count: Credit: {stats.credit_count} Debit: {stats.debit_count}",
        f"Total Credits: {format_amount(stats.credit_sum)}",
        f"Total Debits: {format_amount(stats.debit_sum)}",
    ]
    return "\n".join(lines)


# ---- JSON document -----------------------------------------------------------


class LargestTransactionDoc(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int
    amount: str


class ReportDocument(BaseModel):
    """JSON shape of a report. Amounts are two-decimal strings, never floats."""

    model_config = ConfigDict(extra="forbid")

    has_data: bool
    final_balance: str | None = None
    largest_transaction: LargestTransactionDoc | None = None
    credit_count: int | None = None
    debit_count: int | None = None
    credit_sum: str | None = None
    debit_sum: str | None = None

    @classmethod
    def from_statistics(cls, stats: Statistics | None) -> ReportDocument:
        if stats is None:
            return cls(has_data=False)
        return cls(
            has_data=True,
            final_balance=format_amount(stats.final_balance),
            largest_transaction=LargestTransactionDoc(
                id=stats.largest_transaction.id,
                amount=format_amount(stats.largest_transaction.amount),
            ),
            credit_count=stats.credit_count,
            debit_count=stats.debit_count,
            credit_sum=format_amount(stats.credit_sum),
            debit_sum=format_amount(stats.debit_sum),
        )


def format_report_json(stats: Statistics | None) -> str:
    return ReportDocument.from_statistics(stats).model_dump_json(indent=2)


def render(stats: Statistics | None, output_format: OutputFormat = OutputFormat.TEXT) -> str:
    if output_format is OutputFormat.JSON:
        return format_report_json(stats)
    return format_report(stats)


__all__ = [
    "NO_DATA_MESSAGE",
    "OutputFormat",
    "ReportDocument",
    "format_amount",
    "format_report",
    "format_report_json",
    "render",
]
