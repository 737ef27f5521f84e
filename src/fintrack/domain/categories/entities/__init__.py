from fintrack.domain.categories.entities.favorite_category import FavoriteCategory

__all__ = ["FavoriteCategory"]
