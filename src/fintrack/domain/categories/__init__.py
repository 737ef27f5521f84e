"""Categories domain: user favorites for quick transaction entry."""

from fintrack.domain.categories.entities import FavoriteCategory
from fintrack.domain.categories.exceptions import (
    FavoriteCategoryAccessDeniedError,
    FavoriteCategoryAlreadyExistsError,
    FavoriteCategoryLimitError,
    FavoriteCategoryNotFoundError,
)
from fintrack.domain.categories.repositories import FavoriteCategoryRepository

__all__ = [
    "FavoriteCategory",
    "FavoriteCategoryAccessDeniedError",
    "FavoriteCategoryAlreadyExistsError",
    "FavoriteCategoryLimitError",
    "FavoriteCategoryNotFoundError",
    "FavoriteCategoryRepository",
]
