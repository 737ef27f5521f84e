"""Income/expense trend per calendar month."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from dateutil.relativedelta import relativedelta

from fintrack.application.dtos import MonthlyTrendResult, TrendPoint
from fintrack.application.ports import StatsReadPort
from fintrack.domain.ledger.value_objects import TransactionType
from fintrack.domain.shared.time import start_of_month, to_utc, utc_now

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

DEFAULT_MONTHS = 6


class MonthlyTrendQuery:
    """Monthly totals since the first day of the month ``months`` back.

    Only months that contain transactions are returned, in ascending
    ``YYYY-MM`` order.
    """

    def __init__(self, stats_read_port: StatsReadPort):
        self._stats = stats_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> MonthlyTrendQuery:
        return cls(stats_read_port=factory.stats_read_port())

    async def execute(
        self,
        now: Optional[datetime] = None,
        months: int = DEFAULT_MONTHS,
    ) -> MonthlyTrendResult:
        now = to_utc(now) if now is not None else utc_now()
        start = start_of_month(now) - relativedelta(months=months)

        rows = await self._stats.ledger_rows(start=start)

        income: dict[str, Decimal] = defaultdict(Decimal)
        expenses: dict[str, Decimal] = defaultdict(Decimal)
        for row in rows:
            month = row.date.strftime("%Y-%m")
            if row.transaction_type == TransactionType.INCOME:
                income[month] += row.amount
            else:
                expenses[month] += row.amount

        trend = [
            TrendPoint(
                month=month,
                income=income[month],
                expenses=expenses[month],
                savings=income[month] - expenses[month],
            )
            for month in sorted(set(income) | set(expenses))
        ]
        return MonthlyTrendResult(trend=trend)
