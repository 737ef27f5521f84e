"""End-to-end recurring processing against SQLite.

Verifies that each rule's schedule update and its transaction commit
together, and that a failure leaves earlier rules committed.
"""

from decimal import Decimal

import pytest

from fintrack.application.commands.recurring import ProcessDueRecurringRulesCommand
from fintrack.domain.ledger import TransactionSource
from fintrack.infrastructure.persistence.sqlalchemy.repositories import (
    RecurringRuleRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    TransactionRepositorySQLAlchemy,
)
from fintrack.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyUnitOfWork,
)
from tests.shared.fixtures.factories import make_rule, utc


class FailingTransactionRepository(TransactionRepositorySQLAlchemy):
    """Fails when saving a transaction produced by one specific rule."""

    def __init__(self, session, user_context, failing_rule_id):
        super().__init__(session, user_context)
        self._failing_rule_id = failing_rule_id

    async def save(self, transaction):
        if transaction.recurring_rule_id == self._failing_rule_id:
            msg = "simulated write failure"
            raise RuntimeError(msg)
        await super().save(transaction)


@pytest.mark.integration
class TestRecurringProcessing:
    async def test_rule_lifecycle_until_end_date(
        self,
        factory,
        session_maker,
        user_context,
    ):
        rule = make_rule(
            user_context.user_id,
            amount="950.00",
            start_date=utc(2024, 1, 1),
            next_run=utc(2024, 2, 1),
            end_date=utc(2024, 3, 15),
        )
        await factory.recurring_rule_repository().save(rule)
        await factory.session.commit()

        command = ProcessDueRecurringRulesCommand.from_factory(factory)
        first = await command.execute(now=utc(2024, 2, 5))
        second = await command.execute(now=utc(2024, 3, 10))
        third = await command.execute(now=utc(2024, 4, 10))

        assert (first.processed, second.processed, third.processed) == (1, 1, 0)

        async with session_maker() as session:
            fresh = SQLAlchemyRepositoryFactory(session, user_context)
            stored = await fresh.recurring_rule_repository().find_by_id(rule.id)
            transactions = await fresh.transaction_repository().find_by_recurring_rule(
                rule.id,
            )

        assert stored.next_run == utc(2024, 4, 1)
        assert stored.is_active is False
        assert [t.date for t in transactions] == [utc(2024, 2, 5), utc(2024, 3, 10)]
        assert all(t.amount == Decimal("950.00") for t in transactions)
        assert all(t.source == TransactionSource.RECURRING for t in transactions)

    async def test_second_run_at_same_instant_creates_nothing(
        self,
        factory,
        user_context,
    ):
        await factory.recurring_rule_repository().save(
            make_rule(user_context.user_id, next_run=utc(2024, 2, 1)),
        )
        await factory.session.commit()

        command = ProcessDueRecurringRulesCommand.from_factory(factory)
        first = await command.execute(now=utc(2024, 2, 5))
        again = await command.execute(now=utc(2024, 2, 5))

        assert first.processed == 1
        assert again.processed == 0

    async def test_failure_keeps_earlier_rules_committed(
        self,
        db_session,
        session_maker,
        user_context,
    ):
        rule_repo = RecurringRuleRepositorySQLAlchemy(db_session, user_context)
        good = make_rule(user_context.user_id, category="Rent", next_run=utc(2024, 1, 1))
        bad = make_rule(user_context.user_id, category="Gym", next_run=utc(2024, 1, 2))
        await rule_repo.save(good)
        await rule_repo.save(bad)
        await db_session.commit()

        command = ProcessDueRecurringRulesCommand(
            rule_repository=rule_repo,
            transaction_repository=FailingTransactionRepository(
                db_session,
                user_context,
                failing_rule_id=bad.id,
            ),
            unit_of_work_factory=lambda: SQLAlchemyUnitOfWork(db_session),
            user_context=user_context,
        )

        with pytest.raises(RuntimeError, match="simulated write failure"):
            await command.execute(now=utc(2024, 2, 5))

        async with session_maker() as session:
            fresh = SQLAlchemyRepositoryFactory(session, user_context)
            stored_good = await fresh.recurring_rule_repository().find_by_id(good.id)
            stored_bad = await fresh.recurring_rule_repository().find_by_id(bad.id)
            good_transactions = await fresh.transaction_repository().find_by_recurring_rule(
                good.id,
            )
            bad_transactions = await fresh.transaction_repository().find_by_recurring_rule(
                bad.id,
            )

        assert stored_good.next_run == utc(2024, 2, 1)
        assert len(good_transactions) == 1
        assert stored_bad.next_run == utc(2024, 1, 2)
        assert bad_transactions == []
