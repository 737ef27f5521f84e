"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.infrastructure.persistence.sqlalchemy.adapters.stats import (
    SqlAlchemyStatsReadAdapter,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.categories import (
    FavoriteCategoryRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.ledger import (
    TransactionRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.recurring import (
    RecurringRuleRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyUnitOfWork,
)

if TYPE_CHECKING:
    from fintrack.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._transaction_repo: TransactionRepositorySQLAlchemy | None = None
        self._rule_repo: RecurringRuleRepositorySQLAlchemy | None = None
        self._favorite_repo: FavoriteCategoryRepositorySQLAlchemy | None = None
        self._stats_read_adapter: SqlAlchemyStatsReadAdapter | None = None

    @property
    def user_context(self) -> UserContext:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def transaction_repository(self) -> TransactionRepositorySQLAlchemy:
        if self._transaction_repo is None:
            self._transaction_repo = TransactionRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._transaction_repo

    def recurring_rule_repository(self) -> RecurringRuleRepositorySQLAlchemy:
        if self._rule_repo is None:
            self._rule_repo = RecurringRuleRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._rule_repo

    def favorite_category_repository(self) -> FavoriteCategoryRepositorySQLAlchemy:
        if self._favorite_repo is None:
            self._favorite_repo = FavoriteCategoryRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._favorite_repo

    def stats_read_port(self) -> SqlAlchemyStatsReadAdapter:
        if self._stats_read_adapter is None:
            self._stats_read_adapter = SqlAlchemyStatsReadAdapter(
                self._session,
                self._user_context,
            )
        return self._stats_read_adapter

    def unit_of_work(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(self._session)
