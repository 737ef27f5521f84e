from fintrack.infrastructure.persistence.sqlalchemy.repositories.recurring.recurring_rule_repository import (  # NOQA: E501
    RecurringRuleRepositorySQLAlchemy,
)

__all__ = ["RecurringRuleRepositorySQLAlchemy"]
