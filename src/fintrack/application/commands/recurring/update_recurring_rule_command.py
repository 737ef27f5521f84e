"""Edit a recurring rule."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from fintrack.application.commands.recurring.rule_access import get_owned_rule
from fintrack.domain.recurring import (
    Frequency,
    RecurringRule,
    RecurringRuleRepository,
)
from fintrack.domain.shared.time import utc_now

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateRecurringRuleCommand:
    """Partially update a rule.

    Changing frequency or interval restarts the schedule: ``next_run``
    becomes one step after ``now`` using the effective frequency and
    interval.
    """

    def __init__(self, rule_repository: RecurringRuleRepository):
        self._rule_repo = rule_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateRecurringRuleCommand:
        return cls(rule_repository=factory.recurring_rule_repository())

    async def execute(  # NOQA: PLR0913
        self,
        rule_id: UUID,
        amount: Optional[Union[Decimal, int, float, str]] = None,
        category: Optional[str] = None,
        description: Optional[str] = None,
        frequency: Optional[Frequency] = None,
        interval: Optional[int] = None,
        end_date: Optional[datetime] = None,
        clear_end_date: bool = False,
        is_active: Optional[bool] = None,
        now: Optional[datetime] = None,
    ) -> RecurringRule:
        rule = await get_owned_rule(self._rule_repo, rule_id)

        if amount is not None:
            rule.change_amount(amount)
        if category is not None:
            rule.change_category(category)
        if description is not None:
            rule.set_description(description)
        if clear_end_date:
            rule.set_end_date(None)
        elif end_date is not None:
            rule.set_end_date(end_date)
        if is_active is not None:
            if is_active:
                rule.activate()
            else:
                rule.deactivate()
        if frequency is not None or interval is not None:
            rule.reschedule(
                now=now or utc_now(),
                frequency=frequency,
                interval=interval,
            )

        await self._rule_repo.save(rule)
        logger.info("Recurring rule updated: %s", rule.id)
        return rule
