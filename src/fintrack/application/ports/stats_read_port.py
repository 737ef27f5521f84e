"""Statistics read port.

Read-side contract for the stats queries. Returns flat rows; grouping and
summing happen in the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol

from fintrack.domain.ledger.value_objects import TransactionType


@dataclass(frozen=True)
class LedgerRow:
    amount: Decimal
    transaction_type: TransactionType
    category: str
    date: datetime


class StatsReadPort(Protocol):
    """Row-level ledger reads for reporting."""

    async def ledger_rows(
        self,
        *,
        start: datetime,
        end: datetime | None = None,
    ) -> list[LedgerRow]:
        """Transactions of the current user with ``start <= date`` (``< end``)."""
        ...
