"""Recurrence frequency enum."""

from enum import Enum


class Frequency(str, Enum):
    """Calendar unit a recurring rule steps by."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    @classmethod
    def from_string(cls, value: str) -> "Frequency":
        try:
            return cls(value.upper())
        except ValueError:
            valid = [f.value for f in cls]
            msg = f"Unknown frequency: {value}. Valid: {valid}"
            raise ValueError(msg) from None
