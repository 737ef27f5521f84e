"""Recurring rule domain exceptions."""

from datetime import datetime
from uuid import UUID

from fintrack.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)


class RecurringRuleNotFoundError(EntityNotFoundError):
    """Raised when no recurring rule exists with the given ID."""

    def __init__(self, rule_id: UUID) -> None:
        super().__init__(
            message="Recurring transaction not found",
            code=ErrorCode.RECURRING_RULE_NOT_FOUND,
            details={"rule_id": str(rule_id)},
        )


class RecurringRuleAccessDeniedError(ForbiddenError):
    """Raised when the rule exists but belongs to another user."""

    def __init__(self, rule_id: UUID) -> None:
        super().__init__(
            message="Not authorized to modify this recurring transaction",
            details={"rule_id": str(rule_id)},
        )


class InvalidRecurrenceIntervalError(ValidationError):
    def __init__(self, interval: object) -> None:
        super().__init__(
            message="Interval must be a positive integer",
            code=ErrorCode.INVALID_INTERVAL,
            details={"interval": interval},
        )


class InvalidEndDateError(ValidationError):
    """Raised when a rule's end date is not after its start date."""

    def __init__(self, start_date: datetime, end_date: datetime) -> None:
        super().__init__(
            message="End date must be after start date",
            code=ErrorCode.INVALID_DATE,
            details={
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
            },
        )


class RecurrenceOutOfRangeError(ValidationError):
    """Raised when the next occurrence falls outside the supported date range."""

    def __init__(self, anchor: datetime, frequency: str, interval: int) -> None:
        super().__init__(
            message="Next occurrence is outside the supported date range",
            code=ErrorCode.INVALID_DATE,
            details={
                "anchor": anchor.isoformat(),
                "frequency": frequency,
                "interval": interval,
            },
        )
