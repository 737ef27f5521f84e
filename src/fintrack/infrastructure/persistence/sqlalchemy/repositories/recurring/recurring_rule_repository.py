"""SQLAlchemy implementation of RecurringRuleRepository."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import Select, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.domain.ledger import TransactionType
from fintrack.domain.recurring import (
    Frequency,
    RecurringRule,
    RecurringRuleRepository,
)
from fintrack.domain.shared.time import ensure_tz_aware, to_utc, utc_now
from fintrack.infrastructure.persistence.sqlalchemy.models import RecurringRuleModel

if TYPE_CHECKING:
    from fintrack.application.context import UserContext

logger = logging.getLogger(__name__)


class RecurringRuleRepositorySQLAlchemy(RecurringRuleRepository):
    """User-scoped recurring rule storage.

    Reads refresh already loaded rows (``populate_existing``) because
    ``claim_occurrence`` writes through a bulk UPDATE that bypasses the
    identity map.
    """

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, rule: RecurringRule) -> None:
        model = await self._find_model_by_id(rule.id)

        if model:
            logger.debug("Updating recurring rule: %s", rule.id)
            self._update_model_from_domain(model, rule)
        else:
            logger.debug("Creating recurring rule: %s", rule.id)
            self._session.add(self._create_model_from_domain(rule))

        await self._session.flush()

    async def find_by_id(self, rule_id: UUID) -> Optional[RecurringRule]:
        model = await self._find_model_by_id(rule_id)
        if not model:
            return None
        return self._map_to_domain(model)

    async def find_owner_id(self, rule_id: UUID) -> Optional[UUID]:
        stmt = select(RecurringRuleModel.user_id).where(
            RecurringRuleModel.id == rule_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all(self) -> list[RecurringRule]:
        stmt = self._base_user_query().order_by(
            RecurringRuleModel.created_at.desc(),
        )
        return await self._execute_and_map(stmt)

    async def find_due(self, now: datetime) -> list[RecurringRule]:
        now = to_utc(now)
        stmt = (
            self._base_user_query()
            .where(
                RecurringRuleModel.is_active.is_(True),
                RecurringRuleModel.next_run <= now,
                or_(
                    RecurringRuleModel.end_date.is_(None),
                    RecurringRuleModel.end_date >= now,
                ),
            )
            .order_by(RecurringRuleModel.next_run, RecurringRuleModel.id)
        )
        return await self._execute_and_map(stmt)

    async def claim_occurrence(
        self,
        rule: RecurringRule,
        expected_next_run: datetime,
    ) -> bool:
        stmt = (
            update(RecurringRuleModel)
            .where(
                RecurringRuleModel.id == rule.id,
                RecurringRuleModel.user_id == self._user_id,
                RecurringRuleModel.next_run == to_utc(expected_next_run),
                RecurringRuleModel.is_active.is_(True),
            )
            .values(
                next_run=rule.next_run,
                is_active=rule.is_active,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def delete(self, rule_id: UUID) -> None:
        model = await self._find_model_by_id(rule_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Recurring rule deleted: %s", rule_id)

    def _base_user_query(self) -> Select:
        return (
            select(RecurringRuleModel)
            .where(RecurringRuleModel.user_id == self._user_id)
            .execution_options(populate_existing=True)
        )

    async def _find_model_by_id(self, rule_id: UUID) -> Optional[RecurringRuleModel]:
        stmt = self._base_user_query().where(RecurringRuleModel.id == rule_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _execute_and_map(self, stmt: Select) -> list[RecurringRule]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    def _map_to_domain(self, model: RecurringRuleModel) -> RecurringRule:
        return RecurringRule.reconstitute(
            id=model.id,
            user_id=model.user_id,
            amount=model.amount,
            transaction_type=TransactionType(model.transaction_type),
            category=model.category,
            description=model.description,
            frequency=Frequency(model.frequency),
            interval=model.interval,
            start_date=ensure_tz_aware(model.start_date),
            end_date=ensure_tz_aware(model.end_date) if model.end_date else None,
            next_run=ensure_tz_aware(model.next_run),
            is_active=model.is_active,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _create_model_from_domain(self, rule: RecurringRule) -> RecurringRuleModel:
        return RecurringRuleModel(
            id=rule.id,
            user_id=self._user_id,
            amount=rule.amount,
            transaction_type=rule.transaction_type.value,
            category=rule.category,
            description=rule.description,
            frequency=rule.frequency.value,
            interval=rule.interval,
            start_date=rule.start_date,
            end_date=rule.end_date,
            next_run=rule.next_run,
            is_active=rule.is_active,
            created_at=rule.created_at,
            updated_at=rule.updated_at,
        )

    def _update_model_from_domain(
        self,
        model: RecurringRuleModel,
        rule: RecurringRule,
    ) -> None:
        model.amount = rule.amount
        model.category = rule.category
        model.description = rule.description
        model.frequency = rule.frequency.value
        model.interval = rule.interval
        model.end_date = rule.end_date
        model.next_run = rule.next_run
        model.is_active = rule.is_active
        model.updated_at = rule.updated_at
