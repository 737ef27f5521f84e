"""Materialize due recurring rules into ledger transactions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional

from fintrack.domain.ledger import Transaction, TransactionRepository
from fintrack.domain.recurring import RecurringRule, RecurringRuleRepository
from fintrack.domain.shared.time import to_utc, utc_now

if TYPE_CHECKING:
    from fintrack.application.context import UserContext
    from fintrack.application.factories import RepositoryFactory
    from fintrack.application.ports import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass
class ProcessDueResult:
    """Outcome of one processing run."""

    processed: int
    transactions: list[Transaction] = field(default_factory=list)
    skipped: int = 0


class ProcessDueRecurringRulesCommand:
    """
    Create one transaction for every due rule and advance its schedule.

    Each rule is handled in its own unit of work: the schedule update and
    the new transaction commit together. The schedule is claimed with a
    compare-and-set on ``next_run`` so two concurrent runs cannot both
    materialize the same occurrence; the loser skips the rule.

    A rule that is several periods overdue only advances one step per run.
    A failure aborts the remaining rules and propagates; rules committed
    before the failure stay committed.
    """

    def __init__(
        self,
        rule_repository: RecurringRuleRepository,
        transaction_repository: TransactionRepository,
        unit_of_work_factory: Callable[[], UnitOfWork],
        user_context: UserContext,
    ):
        self._rule_repo = rule_repository
        self._transaction_repo = transaction_repository
        self._unit_of_work_factory = unit_of_work_factory
        self._user_context = user_context

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
    ) -> ProcessDueRecurringRulesCommand:
        return cls(
            rule_repository=factory.recurring_rule_repository(),
            transaction_repository=factory.transaction_repository(),
            unit_of_work_factory=factory.unit_of_work,
            user_context=factory.user_context,
        )

    async def execute(self, now: Optional[datetime] = None) -> ProcessDueResult:
        """Process all rules due at ``now`` (defaults to the current time).

        Parameters
        ----------
        now
            Processing instant; used both for selecting due rules and as
            the date of the created transactions

        Returns
        -------
        ProcessDueResult with the created transactions
        """
        now = to_utc(now) if now is not None else utc_now()

        due_rules = await self._rule_repo.find_due(now)
        if not due_rules:
            logger.debug("No recurring rules due for %s", self._user_context)
            return ProcessDueResult(processed=0)

        transactions: list[Transaction] = []
        skipped = 0
        for rule in due_rules:
            if not rule.is_due(now):
                continue
            transaction = await self._process_rule(rule, now)
            if transaction is None:
                skipped += 1
            else:
                transactions.append(transaction)

        logger.info(
            "Processed %d recurring rule(s) for %s (%d skipped)",
            len(transactions),
            self._user_context,
            skipped,
        )
        return ProcessDueResult(
            processed=len(transactions),
            transactions=transactions,
            skipped=skipped,
        )

    async def _process_rule(
        self,
        rule: RecurringRule,
        now: datetime,
    ) -> Optional[Transaction]:
        async with self._unit_of_work_factory():
            expected_next_run = rule.next_run
            rule.advance()

            claimed = await self._rule_repo.claim_occurrence(
                rule,
                expected_next_run=expected_next_run,
            )
            if not claimed:
                logger.info(
                    "Recurring rule %s already processed for %s, skipping",
                    rule.id,
                    expected_next_run.isoformat(),
                )
                return None

            transaction = rule.materialize(now)
            await self._transaction_repo.save(transaction)

        logger.info(
            "Recurring rule %s materialized as transaction %s (next run %s%s)",
            rule.id,
            transaction.id,
            rule.next_run.isoformat(),
            "" if rule.is_active else ", now inactive",
        )
        return transaction
