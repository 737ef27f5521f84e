"""Ledger domain exceptions."""

from uuid import UUID

from fintrack.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class TransactionNotFoundError(EntityNotFoundError):
    """Raised when a transaction cannot be found for the current user."""

    def __init__(self, transaction_id: UUID) -> None:
        super().__init__(
            message="Transaction not found",
            code=ErrorCode.TRANSACTION_NOT_FOUND,
            details={"transaction_id": str(transaction_id)},
        )
