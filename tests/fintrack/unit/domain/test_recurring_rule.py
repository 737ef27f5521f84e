"""Tests for the RecurringRule entity."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from fintrack.domain.ledger import TransactionSource, TransactionType
from fintrack.domain.recurring import (
    Frequency,
    InvalidEndDateError,
    InvalidRecurrenceIntervalError,
    RecurrenceOutOfRangeError,
    RecurringRule,
)
from fintrack.domain.shared.exceptions import ValidationError
from tests.shared.fixtures.factories import make_rule, utc

USER_ID = uuid4()


class TestRecurringRuleCreate:
    def test_first_run_is_one_step_after_start(self):
        rule = RecurringRule.create(
            user_id=USER_ID,
            amount="950",
            transaction_type=TransactionType.EXPENSE,
            category="Rent",
            frequency=Frequency.MONTHLY,
            start_date=utc(2024, 1, 1),
        )

        assert rule.next_run == utc(2024, 2, 1)
        assert rule.is_active is True
        assert rule.interval == 1
        assert rule.amount == Decimal("950.00")

    def test_uses_interval_for_first_run(self):
        rule = RecurringRule.create(
            user_id=USER_ID,
            amount="10",
            transaction_type=TransactionType.EXPENSE,
            category="Gym",
            frequency=Frequency.WEEKLY,
            interval=2,
            start_date=utc(2024, 1, 10),
        )
        assert rule.next_run == utc(2024, 1, 24)

    def test_naive_start_date_is_treated_as_utc(self):
        rule = RecurringRule.create(
            user_id=USER_ID,
            amount="10",
            transaction_type=TransactionType.INCOME,
            category="Salary",
            frequency=Frequency.MONTHLY,
            start_date=datetime(2024, 1, 1),
        )
        assert rule.start_date.tzinfo == timezone.utc

    @pytest.mark.parametrize("end_date", [utc(2024, 1, 1), utc(2023, 12, 31)])
    def test_end_date_must_be_after_start(self, end_date):
        with pytest.raises(InvalidEndDateError):
            RecurringRule.create(
                user_id=USER_ID,
                amount="10",
                transaction_type=TransactionType.EXPENSE,
                category="Rent",
                frequency=Frequency.MONTHLY,
                start_date=utc(2024, 1, 1),
                end_date=end_date,
            )

    @pytest.mark.parametrize("interval", [0, -1, True])
    def test_interval_must_be_positive_integer(self, interval):
        with pytest.raises(InvalidRecurrenceIntervalError):
            RecurringRule.create(
                user_id=USER_ID,
                amount="10",
                transaction_type=TransactionType.EXPENSE,
                category="Rent",
                frequency=Frequency.MONTHLY,
                interval=interval,
                start_date=utc(2024, 1, 1),
            )

    def test_first_run_past_supported_range_is_rejected(self):
        with pytest.raises(RecurrenceOutOfRangeError):
            RecurringRule.create(
                user_id=USER_ID,
                amount="10",
                transaction_type=TransactionType.EXPENSE,
                category="Rent",
                frequency=Frequency.YEARLY,
                interval=10_000,
                start_date=utc(2024, 1, 1),
            )

    def test_rejects_non_positive_amount(self):
        with pytest.raises(ValidationError):
            RecurringRule.create(
                user_id=USER_ID,
                amount="0",
                transaction_type=TransactionType.EXPENSE,
                category="Rent",
                frequency=Frequency.MONTHLY,
                start_date=utc(2024, 1, 1),
            )


class TestRecurringRuleIsDue:
    def test_due_when_next_run_reached(self):
        rule = make_rule(USER_ID, next_run=utc(2024, 2, 1))
        assert rule.is_due(utc(2024, 2, 1)) is True
        assert rule.is_due(utc(2024, 2, 5)) is True

    def test_not_due_before_next_run(self):
        rule = make_rule(USER_ID, next_run=utc(2024, 2, 1))
        assert rule.is_due(utc(2024, 1, 31, 23)) is False

    def test_not_due_when_inactive(self):
        rule = make_rule(USER_ID, next_run=utc(2024, 2, 1), is_active=False)
        assert rule.is_due(utc(2024, 2, 5)) is False

    def test_not_due_after_end_date(self):
        rule = make_rule(
            USER_ID,
            next_run=utc(2024, 2, 1),
            end_date=utc(2024, 2, 3),
        )
        assert rule.is_due(utc(2024, 2, 5)) is False


class TestRecurringRuleAdvance:
    def test_advances_exactly_one_step(self):
        rule = make_rule(USER_ID, next_run=utc(2024, 2, 1))

        assert rule.advance() == utc(2024, 3, 1)
        assert rule.next_run == utc(2024, 3, 1)
        assert rule.is_active is True

    def test_overdue_rule_still_moves_one_step(self):
        rule = make_rule(USER_ID, next_run=utc(2023, 6, 1))
        rule.advance()
        assert rule.next_run == utc(2023, 7, 1)

    def test_deactivates_when_next_run_passes_end_date(self):
        rule = make_rule(
            USER_ID,
            next_run=utc(2024, 3, 1),
            end_date=utc(2024, 3, 15),
        )

        rule.advance()

        assert rule.next_run == utc(2024, 4, 1)
        assert rule.is_active is False

    def test_stays_active_when_next_run_equals_end_date(self):
        rule = make_rule(
            USER_ID,
            next_run=utc(2024, 2, 1),
            end_date=utc(2024, 3, 1),
        )
        rule.advance()
        assert rule.is_active is True

    def test_deactivates_when_no_later_occurrence_exists(self):
        rule = make_rule(USER_ID, next_run=utc(9999, 12, 15))

        rule.advance()

        assert rule.next_run == utc(9999, 12, 15)
        assert rule.is_active is False


class TestRecurringRuleMaterialize:
    def test_creates_recurring_transaction_dated_now(self):
        rule = make_rule(USER_ID, amount="42.10", category="Netflix")
        now = utc(2024, 2, 5, 9)

        transaction = rule.materialize(now)

        assert transaction.user_id == USER_ID
        assert transaction.amount == Decimal("42.10")
        assert transaction.category == "Netflix"
        assert transaction.transaction_type == TransactionType.EXPENSE
        assert transaction.date == now
        assert transaction.source == TransactionSource.RECURRING
        assert transaction.recurring_rule_id == rule.id


class TestRecurringRuleEdit:
    def test_reschedule_restarts_from_now(self):
        rule = make_rule(USER_ID, next_run=utc(2024, 2, 1))

        rule.reschedule(now=utc(2024, 5, 10), frequency=Frequency.WEEKLY)

        assert rule.frequency == Frequency.WEEKLY
        assert rule.next_run == utc(2024, 5, 17)

    def test_reschedule_interval_only_keeps_frequency(self):
        rule = make_rule(USER_ID, frequency=Frequency.MONTHLY)
        rule.reschedule(now=utc(2024, 5, 10), interval=3)
        assert rule.next_run == utc(2024, 8, 10)

    def test_reschedule_validates_interval(self):
        rule = make_rule(USER_ID)
        with pytest.raises(InvalidRecurrenceIntervalError):
            rule.reschedule(now=utc(2024, 5, 10), interval=0)

    def test_reschedule_past_supported_range_leaves_rule_unchanged(self):
        rule = make_rule(USER_ID, frequency=Frequency.MONTHLY, next_run=utc(2024, 2, 1))

        with pytest.raises(RecurrenceOutOfRangeError):
            rule.reschedule(
                now=utc(2024, 5, 10),
                frequency=Frequency.DAILY,
                interval=10**9,
            )

        assert rule.frequency == Frequency.MONTHLY
        assert rule.interval == 1
        assert rule.next_run == utc(2024, 2, 1)

    def test_set_end_date_validates_against_start(self):
        rule = make_rule(USER_ID, start_date=utc(2024, 1, 1))
        with pytest.raises(InvalidEndDateError):
            rule.set_end_date(utc(2023, 12, 1))

    def test_set_end_date_none_clears(self):
        rule = make_rule(USER_ID, end_date=utc(2024, 6, 1))
        rule.set_end_date(None)
        assert rule.end_date is None

    def test_deactivate_and_activate(self):
        rule = make_rule(USER_ID)
        rule.deactivate()
        assert rule.is_active is False
        rule.activate()
        assert rule.is_active is True
