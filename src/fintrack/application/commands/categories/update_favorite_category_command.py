"""Edit or remove a favorite category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from fintrack.application.commands.categories.favorite_access import (
    get_owned_favorite,
)
from fintrack.domain.categories import FavoriteCategory, FavoriteCategoryRepository

if TYPE_CHECKING:
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateFavoriteCategoryCommand:
    """Change emoji and/or display order of a favorite."""

    def __init__(self, favorite_repository: FavoriteCategoryRepository):
        self._favorite_repo = favorite_repository

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
    ) -> UpdateFavoriteCategoryCommand:
        return cls(favorite_repository=factory.favorite_category_repository())

    async def execute(
        self,
        favorite_id: UUID,
        emoji: Optional[str] = None,
        order: Optional[int] = None,
    ) -> FavoriteCategory:
        favorite = await get_owned_favorite(self._favorite_repo, favorite_id)

        if emoji is not None:
            favorite.change_emoji(emoji)
        if order is not None:
            favorite.move_to(order)

        await self._favorite_repo.save(favorite)
        return favorite


class DeleteFavoriteCategoryCommand:
    def __init__(self, favorite_repository: FavoriteCategoryRepository):
        self._favorite_repo = favorite_repository

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
    ) -> DeleteFavoriteCategoryCommand:
        return cls(favorite_repository=factory.favorite_category_repository())

    async def execute(self, favorite_id: UUID) -> None:
        favorite = await get_owned_favorite(self._favorite_repo, favorite_id)
        await self._favorite_repo.delete(favorite.id)
        logger.info("Favorite category removed: %s", favorite_id)
