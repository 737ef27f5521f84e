"""Favorite category repository interface (user-scoped)."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from fintrack.domain.categories.entities import FavoriteCategory
from fintrack.domain.ledger.value_objects import TransactionType


class FavoriteCategoryRepository(ABC):
    """Repository interface for favorite categories."""

    @abstractmethod
    async def save(self, favorite: FavoriteCategory) -> None:
        """Create or update a favorite."""

    @abstractmethod
    async def find_by_id(self, favorite_id: UUID) -> Optional[FavoriteCategory]:
        """Find a favorite of the current user by ID."""

    @abstractmethod
    async def find_owner_id(self, favorite_id: UUID) -> Optional[UUID]:
        """Return the owning user's ID for any favorite, or None."""

    @abstractmethod
    async def find_all(
        self,
        transaction_type: Optional[TransactionType] = None,
    ) -> list[FavoriteCategory]:
        """Find favorites ordered by ``order`` then creation time."""

    @abstractmethod
    async def find_by_category(
        self,
        category: str,
        transaction_type: TransactionType,
    ) -> Optional[FavoriteCategory]:
        """Find the favorite for a (category, type) pair."""

    @abstractmethod
    async def count_by_type(self, transaction_type: TransactionType) -> int:
        """Count favorites of the given type."""

    @abstractmethod
    async def max_order(self, transaction_type: TransactionType) -> Optional[int]:
        """Highest ``order`` among favorites of the given type, or None."""

    @abstractmethod
    async def delete(self, favorite_id: UUID) -> None:
        """Delete a favorite."""
