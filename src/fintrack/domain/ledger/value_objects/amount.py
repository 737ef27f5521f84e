"""Monetary amount normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from fintrack.domain.shared.exceptions import ErrorCode, ValidationError

CENT = Decimal("0.01")


def to_amount(value: Union[Decimal, int, float, str]) -> Decimal:
    """Convert a raw value to a positive amount rounded to cents.

    Raises
    ------
    ValidationError
        If the value is not a number or is not strictly positive
    """
    try:
        amount = Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError) as e:
        msg = f"Invalid amount: {value!r}"
        raise ValidationError(msg, code=ErrorCode.INVALID_AMOUNT) from e

    if amount <= 0:
        msg = "Amount must be positive"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_AMOUNT,
            details={"amount": str(value)},
        )
    return amount
