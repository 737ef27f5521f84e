"""SQLAlchemy implementation of StatsReadPort.

Fetches only the columns the stats queries need and leaves the grouping
by month, week and category to Python, which keeps the adapter portable
across SQLite and Postgres without date functions.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.application.ports import LedgerRow, StatsReadPort
from fintrack.domain.ledger import TransactionType
from fintrack.domain.shared.time import ensure_tz_aware, to_utc
from fintrack.infrastructure.persistence.sqlalchemy.models import TransactionModel

if TYPE_CHECKING:
    from fintrack.application.context import UserContext


class SqlAlchemyStatsReadAdapter(StatsReadPort):
    """SQLAlchemy stats read adapter."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def ledger_rows(
        self,
        *,
        start: datetime,
        end: Optional[datetime] = None,
    ) -> list[LedgerRow]:
        stmt = select(
            TransactionModel.amount,
            TransactionModel.transaction_type,
            TransactionModel.category,
            TransactionModel.date,
        ).where(
            TransactionModel.user_id == self._user_id,
            TransactionModel.date >= to_utc(start),
        )
        if end is not None:
            stmt = stmt.where(TransactionModel.date < to_utc(end))

        result = await self._session.execute(stmt)
        return [
            LedgerRow(
                amount=amount,
                transaction_type=TransactionType(tx_type),
                category=category,
                date=ensure_tz_aware(date),
            )
            for amount, tx_type, category, date in result.all()
        ]
