"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from fintrack_identity.domain.user.aggregates.user import User
from fintrack_identity.domain.user.value_objects import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""

    @abstractmethod
    async def delete_with_all_data(self, user_id: UUID) -> None:
        """Delete a user together with their ledger data."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users."""
