"""Favorite category schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from fintrack.domain.ledger import TransactionType


class FavoriteCategoryCreateRequest(BaseModel):
    category: str = Field(..., min_length=1, max_length=100)
    emoji: str = Field(..., min_length=1, max_length=16)
    type: TransactionType
    order: Optional[int] = Field(
        default=None,
        description="Display position (defaults to after the last favorite)",
    )


class FavoriteCategoryUpdateRequest(BaseModel):
    emoji: Optional[str] = Field(default=None, min_length=1, max_length=16)
    order: Optional[int] = None


class FavoriteCategoryResponse(BaseModel):
    id: UUID
    category: str
    emoji: str
    type: TransactionType
    order: int
    created_at: datetime


class CategoryUsageResponse(BaseModel):
    category: str
    type: TransactionType
    count: int
