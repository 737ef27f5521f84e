"""Recurring rule schemas for request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fintrack.domain.ledger import TransactionType
from fintrack.domain.recurring import Frequency
from fintrack.presentation.api.schemas.transactions import TransactionResponse

# Keeps every schedule well inside the representable date range
MAX_INTERVAL = 1000


class RecurringRuleCreateRequest(BaseModel):
    amount: Decimal = Field(..., gt=0)
    type: TransactionType
    category: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    frequency: Frequency
    interval: int = Field(
        default=1,
        ge=1,
        le=MAX_INTERVAL,
        description="Every N periods",
    )
    start_date: datetime
    end_date: Optional[datetime] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": "950.00",
                "type": "EXPENSE",
                "category": "Rent",
                "frequency": "MONTHLY",
                "interval": 1,
                "start_date": "2024-01-01T00:00:00Z",
            },
        },
    )


class RecurringRuleUpdateRequest(BaseModel):
    """Partial update.

    Sending ``end_date: null`` removes the end date. Changing
    ``frequency`` or ``interval`` restarts the schedule from now.
    """

    amount: Optional[Decimal] = Field(default=None, gt=0)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    frequency: Optional[Frequency] = None
    interval: Optional[int] = Field(default=None, ge=1, le=MAX_INTERVAL)
    end_date: Optional[datetime] = None
    is_active: Optional[bool] = None


class RecurringRuleResponse(BaseModel):
    id: UUID
    amount: Decimal
    type: TransactionType
    category: str
    description: Optional[str]
    frequency: Frequency
    interval: int
    start_date: datetime
    end_date: Optional[datetime]
    next_run: datetime
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ProcessRecurringResponse(BaseModel):
    processed: int
    transactions: list[TransactionResponse]
