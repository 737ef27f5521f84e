"""Pin a category as favorite."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from fintrack.domain.categories import (
    FavoriteCategory,
    FavoriteCategoryAlreadyExistsError,
    FavoriteCategoryLimitError,
    FavoriteCategoryRepository,
)
from fintrack.domain.ledger import TransactionType
from fintrack.domain.ledger.value_objects import to_category

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

DEFAULT_FAVORITE_LIMIT = 30


class AddFavoriteCategoryCommand:
    """Add a favorite, appending it after the existing ones by default.

    At most ``limit`` favorites are allowed per transaction type, and each
    (category, type) pair can only be pinned once.
    """

    def __init__(
        self,
        favorite_repository: FavoriteCategoryRepository,
        user_context: UserContext,
        limit: int = DEFAULT_FAVORITE_LIMIT,
    ):
        self._favorite_repo = favorite_repository
        self._user_id: UUID = user_context.user_id
        self._limit = limit

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        limit: int = DEFAULT_FAVORITE_LIMIT,
    ) -> AddFavoriteCategoryCommand:
        return cls(
            favorite_repository=factory.favorite_category_repository(),
            user_context=factory.user_context,
            limit=limit,
        )

    async def execute(
        self,
        category: str,
        emoji: str,
        transaction_type: TransactionType,
        order: Optional[int] = None,
    ) -> FavoriteCategory:
        category = to_category(category)

        count = await self._favorite_repo.count_by_type(transaction_type)
        if count >= self._limit:
            raise FavoriteCategoryLimitError(self._limit, transaction_type)

        existing = await self._favorite_repo.find_by_category(
            category,
            transaction_type,
        )
        if existing is not None:
            raise FavoriteCategoryAlreadyExistsError(category, transaction_type)

        if order is None:
            max_order = await self._favorite_repo.max_order(transaction_type)
            order = max_order + 1 if max_order is not None else 0

        favorite = FavoriteCategory(
            user_id=self._user_id,
            category=category,
            emoji=emoji,
            transaction_type=transaction_type,
            order=order,
        )
        await self._favorite_repo.save(favorite)

        logger.info(
            "Favorite category added: %s (%s)",
            favorite.category,
            favorite.transaction_type.value,
        )
        return favorite
