"""Ownership-aware favorite lookup shared by the favorite commands."""

from uuid import UUID

from fintrack.domain.categories import (
    FavoriteCategory,
    FavoriteCategoryAccessDeniedError,
    FavoriteCategoryNotFoundError,
    FavoriteCategoryRepository,
)


async def get_owned_favorite(
    repository: FavoriteCategoryRepository,
    favorite_id: UUID,
) -> FavoriteCategory:
    favorite = await repository.find_by_id(favorite_id)
    if favorite is not None:
        return favorite

    if await repository.find_owner_id(favorite_id) is None:
        raise FavoriteCategoryNotFoundError(favorite_id)
    raise FavoriteCategoryAccessDeniedError(favorite_id)
