from fintrack.application.queries.recurring.list_recurring_rules_query import (
    ListRecurringRulesQuery,
)

__all__ = ["ListRecurringRulesQuery"]
