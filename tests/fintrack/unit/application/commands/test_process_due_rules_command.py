"""Unit tests for ProcessDueRecurringRulesCommand."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from fintrack.application.commands.recurring import ProcessDueRecurringRulesCommand
from fintrack.domain.ledger import TransactionSource
from tests.shared.fixtures.factories import make_rule, utc


class FakeUnitOfWork:
    """Records how each unit of work ended."""

    def __init__(self, log: list[str]):
        self._log = log

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self._log.append("commit" if exc_type is None else "rollback")


@pytest.fixture
def uow_log() -> list[str]:
    return []


@pytest.fixture
def rule_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_due = AsyncMock(return_value=[])
    repo.claim_occurrence = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def transaction_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.save = AsyncMock()
    return repo


@pytest.fixture
def command(rule_repo, transaction_repo, uow_log, user_context):
    return ProcessDueRecurringRulesCommand(
        rule_repository=rule_repo,
        transaction_repository=transaction_repo,
        unit_of_work_factory=lambda: FakeUnitOfWork(uow_log),
        user_context=user_context,
    )


class TestProcessDueRecurringRulesCommand:
    async def test_no_due_rules(self, command, rule_repo, transaction_repo):
        result = await command.execute(now=utc(2024, 2, 5))

        assert result.processed == 0
        assert result.transactions == []
        rule_repo.find_due.assert_awaited_once_with(utc(2024, 2, 5))
        transaction_repo.save.assert_not_awaited()

    async def test_month_lifecycle_until_end_date(
        self,
        command,
        rule_repo,
        transaction_repo,
        user_context,
    ):
        rule = make_rule(
            user_context.user_id,
            amount="950.00",
            start_date=utc(2024, 1, 1),
            next_run=utc(2024, 2, 1),
            end_date=utc(2024, 3, 15),
        )
        rule_repo.find_due.return_value = [rule]

        first = await command.execute(now=utc(2024, 2, 5))

        assert first.processed == 1
        assert rule.next_run == utc(2024, 3, 1)
        assert rule.is_active is True
        transaction = first.transactions[0]
        assert transaction.amount == Decimal("950.00")
        assert transaction.date == utc(2024, 2, 5)
        assert transaction.source == TransactionSource.RECURRING
        assert transaction.recurring_rule_id == rule.id

        second = await command.execute(now=utc(2024, 3, 10))

        assert second.processed == 1
        assert rule.next_run == utc(2024, 4, 1)
        assert rule.is_active is False
        assert transaction_repo.save.await_count == 2

    async def test_overdue_rule_advances_one_step_per_run(
        self,
        command,
        rule_repo,
        user_context,
    ):
        rule = make_rule(user_context.user_id, next_run=utc(2023, 11, 1))
        rule_repo.find_due.return_value = [rule]

        result = await command.execute(now=utc(2024, 2, 5))

        assert result.processed == 1
        assert rule.next_run == utc(2023, 12, 1)

    async def test_rule_without_later_occurrence_is_processed_then_deactivated(
        self,
        command,
        rule_repo,
        uow_log,
        user_context,
    ):
        rule = make_rule(user_context.user_id, next_run=utc(9999, 12, 15))
        rule_repo.find_due.return_value = [rule]

        result = await command.execute(now=utc(9999, 12, 20))

        assert result.processed == 1
        assert rule.is_active is False
        assert rule.next_run == utc(9999, 12, 15)
        assert uow_log == ["commit"]

    async def test_claims_with_previous_next_run(
        self,
        command,
        rule_repo,
        user_context,
    ):
        rule = make_rule(user_context.user_id, next_run=utc(2024, 2, 1))
        rule_repo.find_due.return_value = [rule]

        await command.execute(now=utc(2024, 2, 5))

        rule_repo.claim_occurrence.assert_awaited_once_with(
            rule,
            expected_next_run=utc(2024, 2, 1),
        )

    async def test_lost_claim_skips_rule(
        self,
        command,
        rule_repo,
        transaction_repo,
        uow_log,
        user_context,
    ):
        rule = make_rule(user_context.user_id, next_run=utc(2024, 2, 1))
        rule_repo.find_due.return_value = [rule]
        rule_repo.claim_occurrence.return_value = False

        result = await command.execute(now=utc(2024, 2, 5))

        assert result.processed == 0
        assert result.skipped == 1
        transaction_repo.save.assert_not_awaited()
        assert uow_log == ["commit"]

    async def test_each_rule_gets_its_own_unit_of_work(
        self,
        command,
        rule_repo,
        uow_log,
        user_context,
    ):
        rule_repo.find_due.return_value = [
            make_rule(user_context.user_id, category="Rent"),
            make_rule(user_context.user_id, category="Gym"),
        ]

        result = await command.execute(now=utc(2024, 2, 5))

        assert result.processed == 2
        assert [t.category for t in result.transactions] == ["Rent", "Gym"]
        assert uow_log == ["commit", "commit"]

    async def test_failure_aborts_remaining_rules_and_propagates(
        self,
        command,
        rule_repo,
        transaction_repo,
        uow_log,
        user_context,
    ):
        rules = [
            make_rule(user_context.user_id, category="Rent"),
            make_rule(user_context.user_id, category="Gym"),
            make_rule(user_context.user_id, category="Phone"),
        ]
        rule_repo.find_due.return_value = rules
        transaction_repo.save.side_effect = [None, RuntimeError("disk full")]

        with pytest.raises(RuntimeError, match="disk full"):
            await command.execute(now=utc(2024, 2, 5))

        assert uow_log == ["commit", "rollback"]
        assert transaction_repo.save.await_count == 2
        assert rules[2].next_run == utc(2024, 2, 1)

    async def test_ignores_rules_not_due_at_now(
        self,
        command,
        rule_repo,
        transaction_repo,
        user_context,
    ):
        rule_repo.find_due.return_value = [
            make_rule(user_context.user_id, next_run=utc(2024, 3, 1)),
        ]

        result = await command.execute(now=utc(2024, 2, 5))

        assert result.processed == 0
        transaction_repo.save.assert_not_awaited()

    def test_from_factory(self, user_context):
        factory = MagicMock()
        factory.user_context = user_context

        command = ProcessDueRecurringRulesCommand.from_factory(factory)

        assert isinstance(command, ProcessDueRecurringRulesCommand)
        factory.recurring_rule_repository.assert_called_once()
        factory.transaction_repository.assert_called_once()
