"""Transaction schemas for request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fintrack.domain.ledger import TransactionSource, TransactionType


class QuickTransactionRequest(BaseModel):
    """Minimal entry from the quick entry screen: an expense dated now."""

    amount: Decimal = Field(..., gt=0)
    category: str = Field(..., min_length=1, max_length=100)
    type: TransactionType = TransactionType.EXPENSE
    description: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"amount": "4.50", "category": "Coffee"},
        },
    )


class TransactionCreateRequest(BaseModel):
    amount: Decimal = Field(..., gt=0)
    type: TransactionType
    category: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    date: Optional[datetime] = Field(
        default=None,
        description="When the money moved (defaults to now)",
    )


class TransactionUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    amount: Optional[Decimal] = Field(default=None, gt=0)
    type: Optional[TransactionType] = None
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    date: Optional[datetime] = None


class TransactionResponse(BaseModel):
    id: UUID
    amount: Decimal
    type: TransactionType
    category: str
    description: Optional[str]
    date: datetime
    source: TransactionSource
    recurring_rule_id: Optional[UUID]
    created_at: datetime
    updated_at: datetime


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse]
    count: int


class CategorySuggestion(BaseModel):
    category: str
    count: int


class CategorySuggestionsResponse(BaseModel):
    suggestions: list[CategorySuggestion]
