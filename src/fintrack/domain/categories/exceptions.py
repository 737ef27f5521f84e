"""Favorite category domain exceptions."""

from uuid import UUID

from fintrack.domain.ledger.value_objects import TransactionType
from fintrack.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)


class FavoriteCategoryNotFoundError(EntityNotFoundError):
    def __init__(self, favorite_id: UUID) -> None:
        super().__init__(
            message="Favorite category not found",
            code=ErrorCode.FAVORITE_CATEGORY_NOT_FOUND,
            details={"favorite_id": str(favorite_id)},
        )


class FavoriteCategoryAccessDeniedError(ForbiddenError):
    def __init__(self, favorite_id: UUID) -> None:
        super().__init__(
            message="Not authorized to modify this favorite category",
            details={"favorite_id": str(favorite_id)},
        )


class FavoriteCategoryAlreadyExistsError(ConflictError):
    """Raised when the (category, type) pair is already a favorite."""

    def __init__(self, category: str, transaction_type: TransactionType) -> None:
        super().__init__(
            message="Category already in favorites",
            code=ErrorCode.DUPLICATE_FAVORITE_CATEGORY,
            details={"category": category, "type": transaction_type.value},
        )


class FavoriteCategoryLimitError(ValidationError):
    """Raised when a user already has the maximum number of favorites."""

    def __init__(self, limit: int, transaction_type: TransactionType) -> None:
        super().__init__(
            message=f"Maximum {limit} favorite categories allowed",
            code=ErrorCode.FAVORITE_LIMIT_REACHED,
            details={"limit": limit, "type": transaction_type.value},
        )
