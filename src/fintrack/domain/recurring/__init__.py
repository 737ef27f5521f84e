"""Recurring domain: scheduled transactions and the recurrence calculator."""

from fintrack.domain.recurring.entities import RecurringRule
from fintrack.domain.recurring.exceptions import (
    InvalidEndDateError,
    InvalidRecurrenceIntervalError,
    RecurrenceOutOfRangeError,
    RecurringRuleAccessDeniedError,
    RecurringRuleNotFoundError,
)
from fintrack.domain.recurring.repositories import RecurringRuleRepository
from fintrack.domain.recurring.services import compute_next_run
from fintrack.domain.recurring.value_objects import Frequency

__all__ = [
    "Frequency",
    "InvalidEndDateError",
    "InvalidRecurrenceIntervalError",
    "RecurrenceOutOfRangeError",
    "RecurringRule",
    "RecurringRuleAccessDeniedError",
    "RecurringRuleNotFoundError",
    "RecurringRuleRepository",
    "compute_next_run",
]
