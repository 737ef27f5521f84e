"""SQLAlchemy model for ledger transactions."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class TransactionModel(Base, TimestampMixin):
    """Database model for income/expense transactions."""

    __tablename__ = "transactions"

    __table_args__ = (
        Index("ix_transactions_user_date", "user_id", "date"),
        Index("ix_transactions_user_category", "user_id", "category"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    transaction_type: Mapped[str] = mapped_column(String(20), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    source: Mapped[str] = mapped_column(String(20), nullable=False, default="MANUAL")

    # Provenance only: keep the ledger entry when its rule is deleted
    recurring_rule_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        ForeignKey("recurring_rules.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, type={self.transaction_type}, "
            f"amount={self.amount})>"
        )
