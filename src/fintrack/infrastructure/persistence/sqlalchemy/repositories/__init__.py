from fintrack.infrastructure.persistence.sqlalchemy.repositories.categories import (
    FavoriteCategoryRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.ledger import (
    TransactionRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.recurring import (
    RecurringRuleRepositorySQLAlchemy,
)

__all__ = [
    "FavoriteCategoryRepositorySQLAlchemy",
    "RecurringRuleRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "TransactionRepositorySQLAlchemy",
]
