"""Favorite category commands."""

from fintrack.application.commands.categories.add_favorite_category_command import (
    DEFAULT_FAVORITE_LIMIT,
    AddFavoriteCategoryCommand,
)
from fintrack.application.commands.categories.update_favorite_category_command import (  # NOQA: E501
    DeleteFavoriteCategoryCommand,
    UpdateFavoriteCategoryCommand,
)

__all__ = [
    "DEFAULT_FAVORITE_LIMIT",
    "AddFavoriteCategoryCommand",
    "DeleteFavoriteCategoryCommand",
    "UpdateFavoriteCategoryCommand",
]
