"""Monthly budget summary and category breakdown."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Optional

from fintrack.application.dtos import CategoryBreakdownItem, MonthlyStatsResult
from fintrack.application.ports import StatsReadPort
from fintrack.domain.ledger.value_objects import TransactionType
from fintrack.domain.shared.time import start_of_month, to_utc, utc_now

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

ZERO = Decimal("0")


def percentage_of(part: Decimal, total: Decimal) -> int:
    """Whole-number percentage, rounded half up; 0 when ``total`` is 0."""
    if total <= 0:
        return 0
    return int((part / total * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def start_of_week(dt: datetime) -> datetime:
    """Midnight of the Sunday that starts the week containing ``dt``."""
    days_since_sunday = (dt.weekday() + 1) % 7
    day = dt - timedelta(days=days_since_sunday)
    return day.replace(hour=0, minute=0, second=0, microsecond=0)


class MonthlyStatsQuery:
    """Income, expenses and spending breakdown of the current calendar month.

    Months and weeks are computed in UTC. Weeks start on Sunday, so the
    weekly figure can include expenses of the previous month.
    """

    def __init__(self, stats_read_port: StatsReadPort):
        self._stats = stats_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> MonthlyStatsQuery:
        return cls(stats_read_port=factory.stats_read_port())

    async def execute(self, now: Optional[datetime] = None) -> MonthlyStatsResult:
        now = to_utc(now) if now is not None else utc_now()
        month_start = start_of_month(now)
        week_start = start_of_week(now)

        rows = await self._stats.ledger_rows(start=min(month_start, week_start))

        income = ZERO
        expenses = ZERO
        income_count = 0
        expense_count = 0
        weekly_expenses = ZERO
        by_category: dict[str, Decimal] = defaultdict(lambda: ZERO)
        count_by_category: dict[str, int] = defaultdict(int)

        for row in rows:
            is_expense = row.transaction_type == TransactionType.EXPENSE
            if is_expense and row.date >= week_start:
                weekly_expenses += row.amount
            if row.date < month_start:
                continue
            if is_expense:
                expenses += row.amount
                expense_count += 1
                by_category[row.category] += row.amount
                count_by_category[row.category] += 1
            else:
                income += row.amount
                income_count += 1

        categories = [
            CategoryBreakdownItem(
                category=category,
                amount=amount,
                count=count_by_category[category],
                percentage=percentage_of(amount, expenses),
            )
            for category, amount in by_category.items()
        ]
        categories.sort(key=lambda item: item.amount, reverse=True)

        return MonthlyStatsResult(
            income=income,
            expenses=expenses,
            available=income - expenses,
            spent_percentage=percentage_of(expenses, income),
            income_count=income_count,
            expense_count=expense_count,
            weekly_expenses=weekly_expenses,
            categories=categories,
        )
