from fintrack.domain.categories.repositories.favorite_category_repository import (
    FavoriteCategoryRepository,
)

__all__ = ["FavoriteCategoryRepository"]
