"""Recurring rule commands."""

from fintrack.application.commands.recurring.create_recurring_rule_command import (
    CreateRecurringRuleCommand,
)
from fintrack.application.commands.recurring.delete_recurring_rule_command import (
    DeleteRecurringRuleCommand,
)
from fintrack.application.commands.recurring.process_due_rules_command import (
    ProcessDueRecurringRulesCommand,
    ProcessDueResult,
)
from fintrack.application.commands.recurring.update_recurring_rule_command import (
    UpdateRecurringRuleCommand,
)

__all__ = [
    "CreateRecurringRuleCommand",
    "DeleteRecurringRuleCommand",
    "ProcessDueRecurringRulesCommand",
    "ProcessDueResult",
    "UpdateRecurringRuleCommand",
]
