"""Policy deciding whether a flow record is income or expense."""

from collections.abc import Collection
from typing import Literal

from ledger_charts.domain.models.flows import FlowRecord, TransactionType


FlowSide = Literal["earned", "spent"]


def classify_flow(record: FlowRecord, account_ids: Collection[int]) -> FlowSide:
    """Return the side of the chart a flow record contributes to.

    Deposits are always earned. Transfers are earned when money lands in one
    of the reported accounts. Everything else is spent.

    Args:
        record: Flow record to classify.
        account_ids: Identifiers of the reported accounts.

    Returns:
        FlowSide: ``earned`` or ``spent``.
    """
    if record.transaction_type is TransactionType.DEPOSIT:
        return "earned"
    if (
        record.transaction_type is TransactionType.TRANSFER
        and record.destination_id in account_ids
    ):
        return "earned"
    return "spent"


__all__ = ["FlowSide", "classify_flow"]
