"""List recurring rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fintrack.domain.recurring import RecurringRule, RecurringRuleRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory


class ListRecurringRulesQuery:
    """All rules of the current user, active or not, newest first."""

    def __init__(self, rule_repository: RecurringRuleRepository):
        self._rule_repo = rule_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListRecurringRulesQuery:
        return cls(rule_repository=factory.recurring_rule_repository())

    async def execute(self) -> list[RecurringRule]:
        return await self._rule_repo.find_all()
