from fintrack.application.queries.categories.list_favorite_categories_query import (
    ListFavoriteCategoriesQuery,
    ListUsedCategoriesQuery,
)

__all__ = ["ListFavoriteCategoriesQuery", "ListUsedCategoriesQuery"]
