"""Common schemas shared across API endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "Recurring transaction not found",
                "code": "RECURRING_RULE_NOT_FOUND",
            },
        },
    )


class HealthResponse(BaseModel):
    status: str = Field(..., description="Health status")
    timestamp: datetime
    environment: str
