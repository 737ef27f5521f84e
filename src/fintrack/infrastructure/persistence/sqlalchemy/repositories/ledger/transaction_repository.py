"""SQLAlchemy implementation of TransactionRepository.

This implementation is user-scoped via UserContext, meaning all queries
automatically filter by the current user's user_id.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.domain.ledger import (
    Transaction,
    TransactionRepository,
    TransactionSource,
    TransactionType,
)
from fintrack.domain.shared.time import ensure_tz_aware, to_utc
from fintrack.infrastructure.persistence.sqlalchemy.models import TransactionModel

if TYPE_CHECKING:
    from fintrack.application.context import UserContext

logger = logging.getLogger(__name__)


class TransactionRepositorySQLAlchemy(TransactionRepository):
    """SQLAlchemy implementation of the ledger transaction repository."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, transaction: Transaction) -> None:
        model = await self._find_model_by_id(transaction.id)

        if model:
            logger.debug("Updating existing transaction: %s", transaction.id)
            self._update_model_from_domain(model, transaction)
        else:
            logger.debug("Creating new transaction: %s", transaction.id)
            self._session.add(self._create_model_from_domain(transaction))

        await self._session.flush()

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        model = await self._find_model_by_id(transaction_id)
        if not model:
            return None
        return self._map_to_domain(model)

    async def find_filtered(  # NOQA: PLR0913
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        category: Optional[str] = None,
        transaction_type: Optional[TransactionType] = None,
        limit: int = 50,
    ) -> list[Transaction]:
        stmt = self._base_user_query()

        if start_date is not None and end_date is not None:
            stmt = stmt.where(
                TransactionModel.date >= to_utc(start_date),
                TransactionModel.date <= to_utc(end_date),
            )
        if category:
            stmt = stmt.where(TransactionModel.category == category)
        if transaction_type is not None:
            stmt = stmt.where(
                TransactionModel.transaction_type == transaction_type.value,
            )

        stmt = stmt.order_by(
            TransactionModel.date.desc(),
            TransactionModel.created_at.desc(),
        ).limit(limit)
        return await self._execute_and_map(stmt)

    async def find_by_recurring_rule(self, rule_id: UUID) -> list[Transaction]:
        stmt = (
            self._base_user_query()
            .where(TransactionModel.recurring_rule_id == rule_id)
            .order_by(TransactionModel.date)
        )
        return await self._execute_and_map(stmt)

    async def count_by_category(
        self,
        transaction_type: Optional[TransactionType] = None,
        limit: Optional[int] = None,
    ) -> list[tuple[str, TransactionType, int]]:
        count = func.count(TransactionModel.id).label("count")
        stmt = (
            select(
                TransactionModel.category,
                TransactionModel.transaction_type,
                count,
            )
            .where(TransactionModel.user_id == self._user_id)
            .group_by(TransactionModel.category, TransactionModel.transaction_type)
            .order_by(count.desc(), TransactionModel.category)
        )
        if transaction_type is not None:
            stmt = stmt.where(
                TransactionModel.transaction_type == transaction_type.value,
            )
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return [
            (category, TransactionType(tx_type), int(total))
            for category, tx_type, total in result.all()
        ]

    async def delete(self, transaction_id: UUID) -> None:
        model = await self._find_model_by_id(transaction_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Transaction deleted: %s", transaction_id)

    def _base_user_query(self) -> Select:
        return select(TransactionModel).where(
            TransactionModel.user_id == self._user_id,
        )

    async def _find_model_by_id(
        self,
        transaction_id: UUID,
    ) -> Optional[TransactionModel]:
        stmt = self._base_user_query().where(TransactionModel.id == transaction_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _execute_and_map(self, stmt: Select) -> list[Transaction]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    def _map_to_domain(self, model: TransactionModel) -> Transaction:
        return Transaction.reconstitute(
            id=model.id,
            user_id=model.user_id,
            amount=model.amount,
            transaction_type=TransactionType(model.transaction_type),
            category=model.category,
            date=ensure_tz_aware(model.date),
            description=model.description,
            source=TransactionSource(model.source),
            recurring_rule_id=model.recurring_rule_id,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _create_model_from_domain(self, transaction: Transaction) -> TransactionModel:
        return TransactionModel(
            id=transaction.id,
            user_id=self._user_id,
            amount=transaction.amount,
            transaction_type=transaction.transaction_type.value,
            category=transaction.category,
            description=transaction.description,
            date=transaction.date,
            source=transaction.source.value,
            recurring_rule_id=transaction.recurring_rule_id,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )

    def _update_model_from_domain(
        self,
        model: TransactionModel,
        transaction: Transaction,
    ) -> None:
        model.amount = transaction.amount
        model.transaction_type = transaction.transaction_type.value
        model.category = transaction.category
        model.description = transaction.description
        model.date = transaction.date
        model.updated_at = transaction.updated_at
