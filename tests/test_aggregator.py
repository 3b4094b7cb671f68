from __future__ import annotations

from decimal import Decimal

import pytest

from transaction_report import (
    Statistics,
    StatisticsAccumulator,
    Transaction,
    TransactionKind,
    summarize,
)

C = TransactionKind.CREDIT
D = TransactionKind.DEBIT


def _tx(id: int, kind: TransactionKind, amount: str) -> Transaction:
    return Transaction(id=id, kind=kind, amount=Decimal(amount))


def test_empty_sequence_is_no_data():
    assert summarize([]) is None
    assert StatisticsAccumulator().result() is None


def test_credit_and_debit_scenario():
    stats = summarize([_tx(1, C, "100.00"), _tx(2, D, "50.00")])

    assert stats == Statistics(
        final_balance=Decimal("50.00"),
        largest_transaction=_tx(1, C, "100.00"),
        credit_count=1,
        debit_count=1,
        credit_sum=Decimal("100.00"),
        debit_sum=Decimal("50.00"),
    )


def test_tie_keeps_first_occurrence():
    stats = summarize([_tx(1, C, "100.00"), _tx(2, D, "100.00")])
    assert stats is not None
    assert stats.largest_transaction.id == 1


def test_tie_with_different_scale_keeps_first_occurrence():
    stats = summarize([_tx(4, D, "100"), _tx(5, C, "100.000")])
    assert stats is not None
    assert stats.largest_transaction.id == 4


def test_later_strictly_larger_amount_replaces_largest():
    stats = summarize([_tx(1, C, "10"), _tx(2, D, "10.01"), _tx(3, C, "10.01")])
    assert stats is not None
    assert stats.largest_transaction.id == 2


def test_offsetting_transactions_give_zero_balance_not_no_data():
    stats = summarize([_tx(1, C, "25.00"), _tx(2, D, "25.00")])
    assert stats is not None
    assert stats.final_balance == 0
    assert stats.transaction_count == 2


def test_only_debits_give_negative_balance():
    stats = summarize([_tx(1, D, "1.10"), _tx(2, D, "2.20")])
    assert stats is not None
    assert stats.final_balance == Decimal("-3.30")
    assert stats.credit_count == 0
    assert stats.credit_sum == 0


def test_no_intermediate_rounding():
    # Each third of a cent would round away if sums were quantized as they go.
    stats = summarize([_tx(i, C, "0.004") for i in range(1, 4)])
    assert stats is not None
    assert stats.credit_sum == Decimal("0.012")


def test_decimal_sums_are_exact_where_floats_drift():
    stats = summarize([_tx(1, C, "0.1"), _tx(2, C, "0.2"), _tx(3, D, "0.3")])
    assert stats is not None
    assert stats.final_balance == 0


@pytest.mark.parametrize(
    "amounts",
    [
        [("C", "1.00")],
        [("D", "3.33"), ("C", "7.77"), ("D", "0.01")],
        [("C", "1000000.99"), ("C", "0.01"), ("D", "999999.99"), ("D", "1.01")],
    ],
)
def test_sum_and_count_identities(amounts):
    txs = [_tx(i, C if k == "C" else D, a) for i, (k, a) in enumerate(amounts, start=1)]
    stats = summarize(txs)
    assert stats is not None
    assert stats.final_balance == stats.credit_sum - stats.debit_sum
    assert stats.credit_count + stats.debit_count == len(txs)


def test_accumulator_can_be_fed_incrementally():
    acc = StatisticsAccumulator()
    acc.add(_tx(1, C, "5"))
    first = acc.result()
    acc.add(_tx(2, C, "6"))
    second = acc.result()

    assert first is not None and second is not None
    assert first.credit_sum == Decimal("5")
    assert second.credit_sum == Decimal("11")
    assert second.largest_transaction.id == 2


def test_summarize_accepts_a_generator():
    stats = summarize(_tx(i, C, "1") for i in range(1, 4))
    assert stats is not None
    assert stats.credit_count == 3


@pytest.mark.parametrize("amount", ["0", "-1", "NaN", "Infinity"])
def test_transaction_rejects_non_positive_or_non_finite_amounts(amount):
    with pytest.raises(ValueError):
        Transaction(id=1, kind=C, amount=Decimal(amount))


def test_transaction_rejects_non_integer_id():
    with pytest.raises(ValueError):
        Transaction(id="1", kind=C, amount=Decimal("1"))  # type: ignore[arg-type]


def test_mixed_magnitudes_are_summed_without_rounding():
    stats = summarize([_tx(1, C, "1E+27"), _tx(2, C, "0.01"), _tx(3, D, "1E+27")])
    assert stats is not None
    assert stats.final_balance == Decimal("0.01")
    assert stats.credit_sum == Decimal("1000000000000000000000000000.01")
    assert stats.debit_sum == Decimal("1E+27")


def test_amounts_beyond_default_precision_keep_every_digit():
    big = "12345678901234567890123456789"
    stats = summarize([_tx(1, C, big), _tx(2, C, big), _tx(3, D, "0.000001")])
    assert stats is not None
    assert stats.credit_sum == Decimal("24691357802469135780246913578")
    assert stats.final_balance == Decimal("24691357802469135780246913577.999999")
    assert stats.largest_transaction.id == 1
