"""Recurring rule repository interface.

Implementations are scoped to a specific user via UserContext. The only
unscoped lookup is ``find_owner_id``, used to tell "missing" apart from
"belongs to someone else".
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from fintrack.domain.recurring.entities import RecurringRule


class RecurringRuleRepository(ABC):
    """Repository interface for recurring rules."""

    @abstractmethod
    async def save(self, rule: RecurringRule) -> None:
        """Create or update a rule."""

    @abstractmethod
    async def find_by_id(self, rule_id: UUID) -> Optional[RecurringRule]:
        """Find a rule of the current user by ID."""

    @abstractmethod
    async def find_owner_id(self, rule_id: UUID) -> Optional[UUID]:
        """Return the owning user's ID for any rule, or None if it does not exist."""

    @abstractmethod
    async def find_all(self) -> list[RecurringRule]:
        """Find all rules of the current user, newest first."""

    @abstractmethod
    async def find_due(self, now: datetime) -> list[RecurringRule]:
        """Find active rules with ``next_run <= now`` that have not ended.

        Ordered by ``next_run`` then ``id``.
        """

    @abstractmethod
    async def claim_occurrence(
        self,
        rule: RecurringRule,
        expected_next_run: datetime,
    ) -> bool:
        """Persist the advanced schedule only if nobody else did first.

        Writes ``rule.next_run`` and ``rule.is_active`` when the stored
        ``next_run`` still equals ``expected_next_run``.

        Returns
        -------
        True if this caller claimed the occurrence, False otherwise
        """

    @abstractmethod
    async def delete(self, rule_id: UUID) -> None:
        """Hard-delete a rule."""
