from fintrack.domain.recurring.entities.recurring_rule import RecurringRule

__all__ = ["RecurringRule"]
