"""Create a recurring transaction rule."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from fintrack.domain.ledger import TransactionType
from fintrack.domain.recurring import (
    Frequency,
    RecurringRule,
    RecurringRuleRepository,
)

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateRecurringRuleCommand:
    """Create a new active rule whose first occurrence follows the start date."""

    def __init__(
        self,
        rule_repository: RecurringRuleRepository,
        user_context: UserContext,
    ):
        self._rule_repo = rule_repository
        self._user_id: UUID = user_context.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateRecurringRuleCommand:
        return cls(
            rule_repository=factory.recurring_rule_repository(),
            user_context=factory.user_context,
        )

    async def execute(  # NOQA: PLR0913
        self,
        amount: Union[Decimal, int, float, str],
        transaction_type: TransactionType,
        category: str,
        frequency: Frequency,
        start_date: datetime,
        interval: int = 1,
        description: Optional[str] = None,
        end_date: Optional[datetime] = None,
    ) -> RecurringRule:
        rule = RecurringRule.create(
            user_id=self._user_id,
            amount=amount,
            transaction_type=transaction_type,
            category=category,
            description=description,
            frequency=frequency,
            interval=interval,
            start_date=start_date,
            end_date=end_date,
        )
        await self._rule_repo.save(rule)

        logger.info(
            "Recurring rule created: %s (%s every %d, first run %s)",
            rule.id,
            rule.frequency.value,
            rule.interval,
            rule.next_run.isoformat(),
        )
        return rule
