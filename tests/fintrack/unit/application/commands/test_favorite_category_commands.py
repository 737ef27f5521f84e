"""Unit tests for the favorite category commands."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from fintrack.application.commands.categories import (
    AddFavoriteCategoryCommand,
    DeleteFavoriteCategoryCommand,
    UpdateFavoriteCategoryCommand,
)
from fintrack.domain.categories import (
    FavoriteCategory,
    FavoriteCategoryAccessDeniedError,
    FavoriteCategoryAlreadyExistsError,
    FavoriteCategoryLimitError,
    FavoriteCategoryNotFoundError,
)
from fintrack.domain.ledger import TransactionType


@pytest.fixture
def favorite_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.count_by_type = AsyncMock(return_value=0)
    repo.find_by_category = AsyncMock(return_value=None)
    repo.max_order = AsyncMock(return_value=None)
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_owner_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def existing_favorite(user_context) -> FavoriteCategory:
    return FavoriteCategory(
        user_id=user_context.user_id,
        category="Food",
        emoji="🍔",
        transaction_type=TransactionType.EXPENSE,
        order=0,
    )


class TestAddFavoriteCategoryCommand:
    async def test_first_favorite_gets_order_zero(self, favorite_repo, user_context):
        command = AddFavoriteCategoryCommand(favorite_repo, user_context)

        favorite = await command.execute(
            category=" Food ",
            emoji="🍔",
            transaction_type=TransactionType.EXPENSE,
        )

        assert favorite.category == "Food"
        assert favorite.order == 0
        favorite_repo.save.assert_awaited_once_with(favorite)

    async def test_appends_after_highest_order(self, favorite_repo, user_context):
        favorite_repo.max_order.return_value = 4
        command = AddFavoriteCategoryCommand(favorite_repo, user_context)

        favorite = await command.execute(
            category="Bus",
            emoji="🚌",
            transaction_type=TransactionType.EXPENSE,
        )

        assert favorite.order == 5

    async def test_explicit_order_is_kept(self, favorite_repo, user_context):
        command = AddFavoriteCategoryCommand(favorite_repo, user_context)

        favorite = await command.execute(
            category="Salary",
            emoji="💰",
            transaction_type=TransactionType.INCOME,
            order=9,
        )

        assert favorite.order == 9
        favorite_repo.max_order.assert_not_awaited()

    async def test_duplicate_is_rejected(
        self,
        favorite_repo,
        user_context,
        existing_favorite,
    ):
        favorite_repo.find_by_category.return_value = existing_favorite
        command = AddFavoriteCategoryCommand(favorite_repo, user_context)

        with pytest.raises(FavoriteCategoryAlreadyExistsError):
            await command.execute(
                category="Food",
                emoji="🍕",
                transaction_type=TransactionType.EXPENSE,
            )
        favorite_repo.save.assert_not_awaited()

    async def test_limit_per_type(self, favorite_repo, user_context):
        favorite_repo.count_by_type.return_value = 3
        command = AddFavoriteCategoryCommand(favorite_repo, user_context, limit=3)

        with pytest.raises(FavoriteCategoryLimitError):
            await command.execute(
                category="Books",
                emoji="📚",
                transaction_type=TransactionType.EXPENSE,
            )
        favorite_repo.count_by_type.assert_awaited_once_with(TransactionType.EXPENSE)


class TestUpdateFavoriteCategoryCommand:
    async def test_updates_emoji_and_order(
        self,
        favorite_repo,
        existing_favorite,
    ):
        favorite_repo.find_by_id.return_value = existing_favorite

        updated = await UpdateFavoriteCategoryCommand(favorite_repo).execute(
            existing_favorite.id,
            emoji="🥗",
            order=2,
        )

        assert updated.emoji == "🥗"
        assert updated.order == 2
        favorite_repo.save.assert_awaited_once()

    async def test_not_found(self, favorite_repo):
        with pytest.raises(FavoriteCategoryNotFoundError):
            await UpdateFavoriteCategoryCommand(favorite_repo).execute(
                uuid4(),
                emoji="🥗",
            )


class TestDeleteFavoriteCategoryCommand:
    async def test_deletes_own_favorite(self, favorite_repo, existing_favorite):
        favorite_repo.find_by_id.return_value = existing_favorite

        await DeleteFavoriteCategoryCommand(favorite_repo).execute(existing_favorite.id)

        favorite_repo.delete.assert_awaited_once_with(existing_favorite.id)

    async def test_other_users_favorite_is_forbidden(
        self,
        favorite_repo,
        other_user_context,
    ):
        favorite_repo.find_owner_id.return_value = other_user_context.user_id

        with pytest.raises(FavoriteCategoryAccessDeniedError):
            await DeleteFavoriteCategoryCommand(favorite_repo).execute(uuid4())
        favorite_repo.delete.assert_not_awaited()
