"""Tests for the earned/spent classification policy."""

from datetime import date
from decimal import Decimal

import pytest

from ledger_charts.domain.models import (
    CurrencyDTO,
    FlowBucket,
    FlowRecord,
    TransactionType,
)
from ledger_charts.domain.policies import classify_flow


EUR = CurrencyDTO(id=1, code="EUR", name="Euro", symbol="€")


def _record(
    transaction_type: TransactionType,
    source_id: int = 1,
    destination_id: int = 2,
) -> FlowRecord:
    return FlowRecord(
        date=date(2021, 3, 10),
        currency=EUR,
        transaction_type=transaction_type,
        source_id=source_id,
        destination_id=destination_id,
        amount=Decimal("-10.00"),
    )


def test_deposit_is_always_earned() -> None:
    record = _record(TransactionType.DEPOSIT, source_id=9, destination_id=9)

    assert classify_flow(record, {1}) == "earned"


def test_transfer_side_depends_on_destination() -> None:
    """A transfer into the reported accounts is income, out of them spent."""
    incoming = _record(TransactionType.TRANSFER, source_id=5, destination_id=1)
    outgoing = _record(TransactionType.TRANSFER, source_id=1, destination_id=5)

    assert classify_flow(incoming, {1}) == "earned"
    assert classify_flow(outgoing, {1}) == "spent"


@pytest.mark.parametrize(
    "transaction_type",
    [
        TransactionType.WITHDRAWAL,
        TransactionType.OPENING_BALANCE,
        TransactionType.RECONCILIATION,
    ],
)
def test_other_types_are_spent(transaction_type) -> None:
    assert classify_flow(_record(transaction_type), {1, 2}) == "spent"


def test_flow_bucket_rejects_unknown_side() -> None:
    bucket = FlowBucket()
    bucket.add("earned", Decimal("1.50"))
    bucket.add("spent", Decimal("0.25"))

    assert bucket.earned == Decimal("1.50")
    assert bucket.spent == Decimal("0.25")
    with pytest.raises(ValueError):
        bucket.add("other", Decimal("1"))
