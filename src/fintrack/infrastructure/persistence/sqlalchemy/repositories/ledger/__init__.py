from fintrack.infrastructure.persistence.sqlalchemy.repositories.ledger.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)

__all__ = ["TransactionRepositorySQLAlchemy"]
