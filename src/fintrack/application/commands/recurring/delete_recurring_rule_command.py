"""Delete a recurring rule."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from fintrack.application.commands.recurring.rule_access import get_owned_rule
from fintrack.domain.recurring import RecurringRuleRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteRecurringRuleCommand:
    """Hard-delete a rule. Transactions it already produced are kept."""

    def __init__(self, rule_repository: RecurringRuleRepository):
        self._rule_repo = rule_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteRecurringRuleCommand:
        return cls(rule_repository=factory.recurring_rule_repository())

    async def execute(self, rule_id: UUID) -> None:
        rule = await get_owned_rule(self._rule_repo, rule_id)
        await self._rule_repo.delete(rule.id)
        logger.info("Recurring rule deleted: %s", rule_id)
