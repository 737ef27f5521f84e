"""Favorite category entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from fintrack.domain.ledger.value_objects import TransactionType, to_category
from fintrack.domain.shared.exceptions import ValidationError
from fintrack.domain.shared.time import utc_now


def _validate_emoji(emoji: str) -> str:
    value = (emoji or "").strip()
    if not value:
        msg = "Emoji is required"
        raise ValidationError(msg)
    return value


class FavoriteCategory:
    """A category pinned by the user for quick entry, with display order."""

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        category: str,
        emoji: str,
        transaction_type: TransactionType,
        order: int = 0,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._category = to_category(category)
        self._emoji = _validate_emoji(emoji)
        self._transaction_type = TransactionType(transaction_type)
        self._order = order
        self._created_at = created_at or utc_now()

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        category: str,
        emoji: str,
        transaction_type: TransactionType,
        order: int,
        created_at: datetime,
    ) -> "FavoriteCategory":
        return cls(
            id=id,
            user_id=user_id,
            category=category,
            emoji=emoji,
            transaction_type=transaction_type,
            order=order,
            created_at=created_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def category(self) -> str:
        return self._category

    @property
    def emoji(self) -> str:
        return self._emoji

    @property
    def transaction_type(self) -> TransactionType:
        return self._transaction_type

    @property
    def order(self) -> int:
        return self._order

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def change_emoji(self, emoji: str) -> None:
        self._emoji = _validate_emoji(emoji)

    def move_to(self, order: int) -> None:
        self._order = order

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FavoriteCategory):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"FavoriteCategory(id={self._id}, category={self._category!r}, "
            f"type={self._transaction_type.value}, order={self._order})"
        )
