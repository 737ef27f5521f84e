"""Authentication schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Password strength is checked by the password service so that a short
    password is reported as a 400 with a readable message.
    """

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., max_length=128)
    name: str | None = Field(default=None, max_length=100)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "secret123",
                "name": "Alex",
            },
        },
    )


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class ProfileUpdateRequest(BaseModel):
    """Only the fields sent are changed."""

    name: str | None = Field(default=None, max_length=100)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)


class UserResponse(BaseModel):
    id: UUID
    email: str
    name: str | None
    first_name: str | None
    last_name: str | None
    display_name: str
    created_at: datetime


class AuthResponse(BaseModel):
    """Response schema for register and login."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"  # NOQA: S105
    expires_in: int = Field(..., description="Access token lifetime in seconds")
