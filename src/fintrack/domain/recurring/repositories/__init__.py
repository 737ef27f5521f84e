from fintrack.domain.recurring.repositories.recurring_rule_repository import (
    RecurringRuleRepository,
)

__all__ = ["RecurringRuleRepository"]
