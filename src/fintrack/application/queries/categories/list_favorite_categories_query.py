"""Favorite and used category listings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from fintrack.application.dtos import CategoryUsage
from fintrack.domain.categories import FavoriteCategory, FavoriteCategoryRepository
from fintrack.domain.ledger import TransactionRepository, TransactionType

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory


class ListFavoriteCategoriesQuery:
    """Favorites in display order, optionally for one transaction type."""

    def __init__(self, favorite_repository: FavoriteCategoryRepository):
        self._favorite_repo = favorite_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListFavoriteCategoriesQuery:
        return cls(favorite_repository=factory.favorite_category_repository())

    async def execute(
        self,
        transaction_type: Optional[TransactionType] = None,
    ) -> list[FavoriteCategory]:
        return await self._favorite_repo.find_all(transaction_type=transaction_type)


class ListUsedCategoriesQuery:
    """Every (category, type) pair found in the ledger, most used first."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsedCategoriesQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(
        self,
        transaction_type: Optional[TransactionType] = None,
    ) -> list[CategoryUsage]:
        rows = await self._transaction_repo.count_by_category(
            transaction_type=transaction_type,
        )
        return [
            CategoryUsage(category=category, transaction_type=tx_type, count=count)
            for category, tx_type, count in rows
        ]
