"""Ledger commands - manual transaction bookkeeping."""

from fintrack.application.commands.ledger.create_transaction_command import (
    CreateTransactionCommand,
)
from fintrack.application.commands.ledger.delete_transaction_command import (
    DeleteTransactionCommand,
)
from fintrack.application.commands.ledger.update_transaction_command import (
    UpdateTransactionCommand,
)

__all__ = [
    "CreateTransactionCommand",
    "DeleteTransactionCommand",
    "UpdateTransactionCommand",
]
