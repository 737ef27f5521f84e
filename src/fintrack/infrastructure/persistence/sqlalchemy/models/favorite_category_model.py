"""SQLAlchemy model for favorite categories."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.domain.shared.time import utc_now
from fintrack.infrastructure.persistence.sqlalchemy.models.base import Base


class FavoriteCategoryModel(Base):
    """Database model for a user's pinned categories."""

    __tablename__ = "favorite_categories"

    __table_args__ = (
        Index("ix_favorite_categories_user_type", "user_id", "transaction_type"),
        UniqueConstraint(
            "user_id",
            "category",
            "transaction_type",
            name="uq_favorite_categories_user_category_type",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    category: Mapped[str] = mapped_column(String(100), nullable=False)
    emoji: Mapped[str] = mapped_column(String(16), nullable=False)
    transaction_type: Mapped[str] = mapped_column(String(20), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<FavoriteCategoryModel(id={self.id}, category={self.category}, "
            f"type={self.transaction_type})>"
        )
