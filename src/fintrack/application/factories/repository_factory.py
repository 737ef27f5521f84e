"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from fintrack.application.ports import StatsReadPort, UnitOfWork
from fintrack.domain.categories.repositories import FavoriteCategoryRepository
from fintrack.domain.ledger.repositories import TransactionRepository
from fintrack.domain.recurring.repositories import RecurringRuleRepository

if TYPE_CHECKING:
    from fintrack.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating user-scoped repositories."""

    @property
    def user_context(self) -> UserContext:
        """Get the current user for repository scoping."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Typed as ``Any`` so the application layer does not depend on a
        specific database library. The presentation layer uses it for
        commit/rollback.
        """
        ...

    def transaction_repository(self) -> TransactionRepository:
        """Get transaction repository."""
        ...

    def recurring_rule_repository(self) -> RecurringRuleRepository:
        """Get recurring rule repository."""
        ...

    def favorite_category_repository(self) -> FavoriteCategoryRepository:
        """Get favorite category repository."""
        ...

    def stats_read_port(self) -> StatsReadPort:
        """Get stats read port."""
        ...

    def unit_of_work(self) -> UnitOfWork:
        """Create a new unit of work bound to the factory's session."""
        ...
