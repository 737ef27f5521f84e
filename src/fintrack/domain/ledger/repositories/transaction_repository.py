"""Transaction repository interface.

Implementations are user-scoped via UserContext, meaning all queries
automatically filter by the current user's user_id.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from fintrack.domain.ledger.entities import Transaction
from fintrack.domain.ledger.value_objects import TransactionType


class TransactionRepository(ABC):
    """Repository interface for ledger transactions."""

    @abstractmethod
    async def save(self, transaction: Transaction) -> None:
        """Create or update a transaction."""

    @abstractmethod
    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """Find a transaction of the current user by ID."""

    @abstractmethod
    async def find_filtered(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        category: Optional[str] = None,
        transaction_type: Optional[TransactionType] = None,
        limit: int = 50,
    ) -> list[Transaction]:
        """Find transactions matching the filters, newest first.

        The date range is only applied when both bounds are given.
        """

    @abstractmethod
    async def find_by_recurring_rule(self, rule_id: UUID) -> list[Transaction]:
        """Find all transactions materialized from a recurring rule."""

    @abstractmethod
    async def count_by_category(
        self,
        transaction_type: Optional[TransactionType] = None,
        limit: Optional[int] = None,
    ) -> list[tuple[str, TransactionType, int]]:
        """Count transactions per (category, type), most used first."""

    @abstractmethod
    async def delete(self, transaction_id: UUID) -> None:
        """Delete a transaction."""
