"""SQLAlchemy models for persistence layer."""

from fintrack.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from fintrack.infrastructure.persistence.sqlalchemy.models.favorite_category_model import (  # NOQA: E501
    FavoriteCategoryModel,
)
from fintrack.infrastructure.persistence.sqlalchemy.models.recurring_rule_model import (  # NOQA: E501
    RecurringRuleModel,
)
from fintrack.infrastructure.persistence.sqlalchemy.models.transaction_model import (
    TransactionModel,
)

__all__ = [
    "Base",
    "FavoriteCategoryModel",
    "RecurringRuleModel",
    "TimestampMixin",
    "TransactionModel",
]
