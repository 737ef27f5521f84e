"""Favorite categories router."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from fintrack.application.commands.categories import (
    AddFavoriteCategoryCommand,
    DeleteFavoriteCategoryCommand,
    UpdateFavoriteCategoryCommand,
)
from fintrack.application.queries.categories import (
    ListFavoriteCategoriesQuery,
    ListUsedCategoriesQuery,
)
from fintrack.domain.categories import FavoriteCategory
from fintrack.domain.ledger import TransactionType
from fintrack.presentation.api.config import get_api_settings
from fintrack.presentation.api.dependencies import RepoFactory
from fintrack.presentation.api.schemas.categories import (
    CategoryUsageResponse,
    FavoriteCategoryCreateRequest,
    FavoriteCategoryResponse,
    FavoriteCategoryUpdateRequest,
)
from fintrack_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def _favorite_to_response(favorite: FavoriteCategory) -> FavoriteCategoryResponse:
    return FavoriteCategoryResponse(
        id=favorite.id,
        category=favorite.category,
        emoji=favorite.emoji,
        type=favorite.transaction_type,
        order=favorite.order,
        created_at=favorite.created_at,
    )


@router.get("/favorites", summary="List favorite categories")
async def list_favorites(
    factory: RepoFactory,
    type: Optional[TransactionType] = None,  # NOQA: A002
) -> list[FavoriteCategoryResponse]:
    favorites = await ListFavoriteCategoriesQuery.from_factory(factory).execute(
        transaction_type=type,
    )
    return [_favorite_to_response(f) for f in favorites]


@router.post(
    "/favorites",
    status_code=status.HTTP_201_CREATED,
    summary="Add a favorite category",
    responses={
        400: {"description": "Favorite limit reached"},
        409: {"description": "Category already in favorites"},
    },
)
async def add_favorite(
    request: FavoriteCategoryCreateRequest,
    factory: RepoFactory,
    settings: SettingsDep,
) -> FavoriteCategoryResponse:
    command = AddFavoriteCategoryCommand.from_factory(
        factory,
        limit=settings.favorite_category_limit,
    )

    try:
        favorite = await command.execute(
            category=request.category,
            emoji=request.emoji,
            transaction_type=request.type,
            order=request.order,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return _favorite_to_response(favorite)


@router.patch(
    "/favorites/{favorite_id}",
    summary="Update a favorite category",
    responses={
        403: {"description": "Favorite belongs to another user"},
        404: {"description": "Favorite not found"},
    },
)
async def update_favorite(
    favorite_id: UUID,
    request: FavoriteCategoryUpdateRequest,
    factory: RepoFactory,
) -> FavoriteCategoryResponse:
    command = UpdateFavoriteCategoryCommand.from_factory(factory)

    try:
        favorite = await command.execute(
            favorite_id=favorite_id,
            emoji=request.emoji,
            order=request.order,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return _favorite_to_response(favorite)


@router.delete(
    "/favorites/{favorite_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a favorite category",
    responses={
        403: {"description": "Favorite belongs to another user"},
        404: {"description": "Favorite not found"},
    },
)
async def delete_favorite(favorite_id: UUID, factory: RepoFactory) -> None:
    command = DeleteFavoriteCategoryCommand.from_factory(factory)

    try:
        await command.execute(favorite_id=favorite_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise


@router.get("/all", summary="Categories used in transactions")
async def list_used_categories(
    factory: RepoFactory,
    type: Optional[TransactionType] = None,  # NOQA: A002
) -> list[CategoryUsageResponse]:
    """Every category found in the ledger, most used first."""
    usage = await ListUsedCategoriesQuery.from_factory(factory).execute(
        transaction_type=type,
    )
    return [
        CategoryUsageResponse(
            category=item.category,
            type=item.transaction_type,
            count=item.count,
        )
        for item in usage
    ]
