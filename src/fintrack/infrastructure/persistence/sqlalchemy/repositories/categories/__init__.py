from fintrack.infrastructure.persistence.sqlalchemy.repositories.categories.favorite_category_repository import (  # NOQA: E501
    FavoriteCategoryRepositorySQLAlchemy,
)

__all__ = ["FavoriteCategoryRepositorySQLAlchemy"]
