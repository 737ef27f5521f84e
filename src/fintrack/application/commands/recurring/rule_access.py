"""Ownership-aware rule lookup shared by the rule commands."""

from uuid import UUID

from fintrack.domain.recurring import (
    RecurringRule,
    RecurringRuleAccessDeniedError,
    RecurringRuleNotFoundError,
    RecurringRuleRepository,
)


async def get_owned_rule(
    repository: RecurringRuleRepository,
    rule_id: UUID,
) -> RecurringRule:
    """Load a rule of the current user.

    Raises
    ------
    RecurringRuleNotFoundError
        If no rule with this ID exists at all
    RecurringRuleAccessDeniedError
        If the rule exists but belongs to another user
    """
    rule = await repository.find_by_id(rule_id)
    if rule is not None:
        return rule

    if await repository.find_owner_id(rule_id) is None:
        raise RecurringRuleNotFoundError(rule_id)
    raise RecurringRuleAccessDeniedError(rule_id)
