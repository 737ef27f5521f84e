"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from fintrack_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    Created once per request/command execution and passed to repositories,
    which filter every query by ``user_id``.
    """

    user_id: UUID
    email: str

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email)

    @classmethod
    def from_values(cls, user_id: UUID, email: str) -> UserContext:
        return cls(user_id=user_id, email=email)

    def __str__(self) -> str:
        return f"UserContext({self.email})"
