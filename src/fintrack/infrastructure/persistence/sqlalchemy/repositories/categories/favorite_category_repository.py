"""SQLAlchemy implementation of FavoriteCategoryRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.domain.categories import (
    FavoriteCategory,
    FavoriteCategoryAlreadyExistsError,
    FavoriteCategoryRepository,
)
from fintrack.domain.ledger import TransactionType
from fintrack.domain.shared.time import ensure_tz_aware
from fintrack.infrastructure.persistence.sqlalchemy.models import (
    FavoriteCategoryModel,
)

if TYPE_CHECKING:
    from fintrack.application.context import UserContext

logger = logging.getLogger(__name__)


class FavoriteCategoryRepositorySQLAlchemy(FavoriteCategoryRepository):
    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, favorite: FavoriteCategory) -> None:
        model = await self._find_model_by_id(favorite.id)

        try:
            if model:
                model.emoji = favorite.emoji
                model.order = favorite.order
            else:
                self._session.add(self._create_model_from_domain(favorite))
            await self._session.flush()
        except IntegrityError as e:
            # Unique (user, category, type) lost a race with another request
            if "unique" in str(e).lower():
                raise FavoriteCategoryAlreadyExistsError(
                    favorite.category,
                    favorite.transaction_type,
                ) from e
            raise

    async def find_by_id(self, favorite_id: UUID) -> Optional[FavoriteCategory]:
        model = await self._find_model_by_id(favorite_id)
        if not model:
            return None
        return self._map_to_domain(model)

    async def find_owner_id(self, favorite_id: UUID) -> Optional[UUID]:
        stmt = select(FavoriteCategoryModel.user_id).where(
            FavoriteCategoryModel.id == favorite_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all(
        self,
        transaction_type: Optional[TransactionType] = None,
    ) -> list[FavoriteCategory]:
        stmt = self._base_user_query()
        if transaction_type is not None:
            stmt = stmt.where(
                FavoriteCategoryModel.transaction_type == transaction_type.value,
            )
        stmt = stmt.order_by(
            FavoriteCategoryModel.order,
            FavoriteCategoryModel.created_at,
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_category(
        self,
        category: str,
        transaction_type: TransactionType,
    ) -> Optional[FavoriteCategory]:
        stmt = self._base_user_query().where(
            FavoriteCategoryModel.category == category,
            FavoriteCategoryModel.transaction_type == transaction_type.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def count_by_type(self, transaction_type: TransactionType) -> int:
        stmt = select(func.count(FavoriteCategoryModel.id)).where(
            FavoriteCategoryModel.user_id == self._user_id,
            FavoriteCategoryModel.transaction_type == transaction_type.value,
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def max_order(self, transaction_type: TransactionType) -> Optional[int]:
        stmt = select(func.max(FavoriteCategoryModel.order)).where(
            FavoriteCategoryModel.user_id == self._user_id,
            FavoriteCategoryModel.transaction_type == transaction_type.value,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, favorite_id: UUID) -> None:
        model = await self._find_model_by_id(favorite_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()

    def _base_user_query(self) -> Select:
        return select(FavoriteCategoryModel).where(
            FavoriteCategoryModel.user_id == self._user_id,
        )

    async def _find_model_by_id(
        self,
        favorite_id: UUID,
    ) -> Optional[FavoriteCategoryModel]:
        stmt = self._base_user_query().where(FavoriteCategoryModel.id == favorite_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: FavoriteCategoryModel) -> FavoriteCategory:
        return FavoriteCategory.reconstitute(
            id=model.id,
            user_id=model.user_id,
            category=model.category,
            emoji=model.emoji,
            transaction_type=TransactionType(model.transaction_type),
            order=model.order,
            created_at=ensure_tz_aware(model.created_at),
        )

    def _create_model_from_domain(
        self,
        favorite: FavoriteCategory,
    ) -> FavoriteCategoryModel:
        return FavoriteCategoryModel(
            id=favorite.id,
            user_id=self._user_id,
            category=favorite.category,
            emoji=favorite.emoji,
            transaction_type=favorite.transaction_type.value,
            order=favorite.order,
            created_at=favorite.created_at,
        )
